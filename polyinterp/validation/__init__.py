"""
Input validation for interpolation requests.
"""

from .validator import parse_number, parse_query, sort_points, validate

__all__ = [
    'parse_number',
    'parse_query',
    'sort_points',
    'validate',
]
