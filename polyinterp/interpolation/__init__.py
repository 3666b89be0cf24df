"""
Polynomial interpolation evaluators.
"""

from .base import Interpolator
from .lagrange import LagrangeInterpolator, lagrange

__all__ = [
    'Interpolator',
    'LagrangeInterpolator',
    'lagrange',
]
