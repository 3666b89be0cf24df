"""
Base abstractions for point sources.

A point source yields raw (x, y) pairs; parsing and validation stay with
:func:`polyinterp.validation.validate`.
"""

from abc import ABC, abstractmethod
from typing import List, Protocol, runtime_checkable

from polyinterp.schema.points import RawPair


@runtime_checkable
class PointSource(Protocol):
    """
    Protocol for anything that can supply raw point pairs.
    """

    def load_pairs(self) -> List[RawPair]:
        """
        Load raw pairs.

        Returns:
            List of (x, y) pairs, unparsed
        """
        ...


@runtime_checkable
class PairFilter(Protocol):
    """
    Protocol for filtering raw pairs after loading.
    """

    def filter(self, pairs: List[RawPair]) -> List[RawPair]:
        ...


class BasePointSource(ABC):
    """
    Abstract base class for point sources.

    Holds an ordered chain of filters applied after loading.
    """

    def __init__(self):
        self._filters: List[PairFilter] = []

    def add_filter(self, filter_instance: PairFilter) -> None:
        """
        Add a filter to be applied when loading pairs.

        Args:
            filter_instance: Filter to add
        """
        self._filters.append(filter_instance)

    def _apply_filters(self, pairs: List[RawPair]) -> List[RawPair]:
        result = pairs
        for filter_instance in self._filters:
            result = filter_instance.filter(result)
        return result

    def load_pairs(self) -> List[RawPair]:
        """Read pairs from the source and run them through the filters."""
        return self._apply_filters(self._read_pairs())

    @abstractmethod
    def _read_pairs(self) -> List[RawPair]:
        """Read unfiltered pairs (to be implemented by subclasses)."""
        pass


class BaseFilter(ABC):
    """
    Abstract base class for pair filters.
    """

    @abstractmethod
    def filter(self, pairs: List[RawPair]) -> List[RawPair]:
        pass
