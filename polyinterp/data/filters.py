"""
Pair filtering strategies.
"""

from typing import List, Optional

from polyinterp.schema.points import RawPair
from polyinterp.validation.validator import parse_number

from .base import BaseFilter


class DropIncompleteRowsFilter(BaseFilter):
    """
    Drop rows whose x and y are both blank.

    Spreadsheet exports often end with empty rows; a row with only one
    value filled is kept so that validation reports it.
    """

    def filter(self, pairs: List[RawPair]) -> List[RawPair]:
        return [p for p in pairs if not (_is_blank(p[0]) and _is_blank(p[1]))]


class XRangeFilter(BaseFilter):
    """
    Keep pairs whose x lies in ``[min_x, max_x]``.

    Pairs with a non-numeric x are kept so that validation reports them.
    """

    def __init__(self, min_x: Optional[float] = None, max_x: Optional[float] = None):
        if min_x is not None and max_x is not None and min_x > max_x:
            raise ValueError("min_x must not exceed max_x")
        self.min_x = min_x
        self.max_x = max_x

    def filter(self, pairs: List[RawPair]) -> List[RawPair]:
        kept = []
        for pair in pairs:
            x = parse_number(pair[0])
            if x is not None:
                if self.min_x is not None and x < self.min_x:
                    continue
                if self.max_x is not None and x > self.max_x:
                    continue
            kept.append(pair)
        return kept


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())
