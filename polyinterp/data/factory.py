"""
Factory for creating point sources.
"""

from enum import Enum

from .base import PointSource
from .filters import DropIncompleteRowsFilter
from .loaders import CSVPointSource, DataFramePointSource, JSONPointSource


class PointSourceType(Enum):
    """Supported point source types."""
    CSV = "csv"
    JSON = "json"
    DATAFRAME = "dataframe"


def create_point_source(
    source_type: PointSourceType,
    drop_blank_rows: bool = True,
    **kwargs
) -> PointSource:
    """
    Create a point source.

    Args:
        source_type: Type of point source to create
        drop_blank_rows: Whether to skip rows with both cells blank
        **kwargs: Configuration specific to the source type
            (``path``, ``frame``, ``x_column``, ``y_column``)

    Returns:
        Configured point source

    Examples:
        >>> source = create_point_source(PointSourceType.CSV, path="points.csv")
        >>> points = validate(source.load_pairs())
    """
    columns = {k: kwargs[k] for k in ("x_column", "y_column") if k in kwargs}

    if source_type == PointSourceType.CSV:
        path = kwargs.get("path")
        if not path:
            raise ValueError("path required for CSV point source")
        source = CSVPointSource(path, **columns)
    elif source_type == PointSourceType.JSON:
        path = kwargs.get("path")
        if not path:
            raise ValueError("path required for JSON point source")
        source = JSONPointSource(path)
    elif source_type == PointSourceType.DATAFRAME:
        frame = kwargs.get("frame")
        if frame is None:
            raise ValueError("frame required for DataFrame point source")
        source = DataFramePointSource(frame, **columns)
    else:
        raise ValueError(f"Unsupported point source type: {source_type}")

    if drop_blank_rows:
        source.add_filter(DropIncompleteRowsFilter())
    return source
