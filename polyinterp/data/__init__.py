"""
Point sources.

Load raw (x, y) pairs from files and tables, ready for validation.
"""

from .base import BaseFilter, BasePointSource, PairFilter, PointSource
from .examples import EXAMPLE_POINT_SETS, example_points
from .factory import PointSourceType, create_point_source
from .filters import DropIncompleteRowsFilter, XRangeFilter
from .loaders import CSVPointSource, DataFramePointSource, JSONPointSource

__all__ = [
    # Base abstractions
    "PointSource",
    "PairFilter",
    "BasePointSource",
    "BaseFilter",
    # Concrete implementations
    "CSVPointSource",
    "JSONPointSource",
    "DataFramePointSource",
    # Filters
    "DropIncompleteRowsFilter",
    "XRangeFilter",
    # Factory
    "create_point_source",
    "PointSourceType",
    # Examples
    "EXAMPLE_POINT_SETS",
    "example_points",
]
