"""
Concrete point source implementations.

Provides loaders for CSV files, JSON files and in-memory DataFrames.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Union

import pandas as pd

from polyinterp.errors import PointSourceError
from polyinterp.schema.points import RawPair

from .base import BasePointSource

logger = logging.getLogger(__name__)


def _cell(value: Any) -> Any:
    # Missing cells become None so that validation reports them as blank
    if value is None:
        return None
    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        pass
    return value


class DataFramePointSource(BasePointSource):
    """
    Read pairs from two columns of a ``pandas.DataFrame``.
    """

    def __init__(self, frame: pd.DataFrame, x_column: str = "x", y_column: str = "y"):
        """
        Initialize DataFrame point source.

        Args:
            frame: Table holding the points, one per row
            x_column: Column with x values
            y_column: Column with y values
        """
        super().__init__()
        missing = [c for c in (x_column, y_column) if c not in frame.columns]
        if missing:
            raise PointSourceError(f"Missing columns: {', '.join(missing)}")
        self.frame = frame
        self.x_column = x_column
        self.y_column = y_column

    def _read_pairs(self) -> List[RawPair]:
        columns = self.frame[[self.x_column, self.y_column]]
        return [(_cell(x), _cell(y)) for x, y in columns.itertuples(index=False, name=None)]


class CSVPointSource(BasePointSource):
    """
    Load pairs from a CSV file with a header row.

    Cells are read as text so the validator sees exactly what the file holds.
    """

    def __init__(self, path: Union[str, Path], x_column: str = "x", y_column: str = "y"):
        """
        Initialize CSV point source.

        Args:
            path: CSV file path
            x_column: Header of the x column
            y_column: Header of the y column
        """
        super().__init__()
        self.path = Path(path)
        self.x_column = x_column
        self.y_column = y_column

    def _read_pairs(self) -> List[RawPair]:
        if not self.path.exists():
            raise PointSourceError(f"Point file not found: {self.path}")
        try:
            frame = pd.read_csv(self.path, dtype=str, keep_default_na=False)
        except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as exc:
            raise PointSourceError(f"Could not read {self.path}: {exc}") from exc
        logger.debug("Read %s rows from %s", len(frame), self.path)
        return DataFramePointSource(frame, self.x_column, self.y_column)._read_pairs()


class JSONPointSource(BasePointSource):
    """
    Load pairs from a JSON file.

    Accepted layouts::

        {"points": [{"x": 0, "y": 0}, {"x": 1, "y": 1}]}
        [[0, 0], [1, 1]]
    """

    def __init__(self, path: Union[str, Path]):
        super().__init__()
        self.path = Path(path)

    def _read_pairs(self) -> List[RawPair]:
        if not self.path.exists():
            raise PointSourceError(f"Point file not found: {self.path}")
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as exc:
            raise PointSourceError(f"Invalid JSON in {self.path}: {exc}") from exc

        rows = data.get("points") if isinstance(data, dict) else data
        if not isinstance(rows, list):
            raise PointSourceError(f"No point list found in {self.path}")

        pairs: List[RawPair] = []
        for row in rows:
            if isinstance(row, dict):
                pairs.append((row.get("x"), row.get("y")))
            elif isinstance(row, (list, tuple)) and len(row) == 2:
                pairs.append((row[0], row[1]))
            else:
                raise PointSourceError(f"Unrecognized point entry in {self.path}: {row!r}")
        logger.debug("Read %s points from %s", len(pairs), self.path)
        return pairs
