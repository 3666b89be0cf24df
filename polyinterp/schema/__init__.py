"""
Data types for point sets and evaluation outcomes.
"""

from .enums import RangeKind, ResultKind
from .points import Point, PointSet, RawPair

__all__ = [
    'Point',
    'PointSet',
    'RawPair',
    'RangeKind',
    'ResultKind',
]
