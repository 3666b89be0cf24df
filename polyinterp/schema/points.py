"""
Point containers shared by the validator and the evaluators.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Sequence, Tuple

import numpy as np

from polyinterp.errors import DuplicateXError

# A pair as typed by a user: strings, ints, floats or numpy scalars
RawPair = Tuple[Any, Any]


@dataclass(frozen=True)
class Point:
    """A single (x, y) node."""

    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return self.x, self.y


@dataclass(frozen=True)
class PointSet:
    """Immutable, ascending-by-x sequence of points with pairwise distinct x.

    Build it through :func:`polyinterp.validation.validate` or
    :meth:`from_pairs`; the constructor only checks the invariants.
    """

    points: Tuple[Point, ...]

    def __post_init__(self):
        if not self.points:
            raise ValueError("PointSet needs at least one point")
        xs = [p.x for p in self.points]
        if any(b < a for a, b in zip(xs, xs[1:])):
            raise ValueError("PointSet points must be sorted ascending by x")
        if len(np.unique(xs)) != len(xs):
            raise DuplicateXError()

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[float, float]]) -> "PointSet":
        """Sort already-numeric pairs by x and wrap them."""
        ordered = sorted(((float(x), float(y)) for x, y in pairs), key=lambda p: p[0])
        return cls(tuple(Point(x, y) for x, y in ordered))

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    @property
    def xs(self) -> np.ndarray:
        return np.array([p.x for p in self.points], dtype=float)

    @property
    def ys(self) -> np.ndarray:
        return np.array([p.y for p in self.points], dtype=float)

    @property
    def min_x(self) -> float:
        return self.points[0].x

    @property
    def max_x(self) -> float:
        return self.points[-1].x

    def as_pairs(self) -> Sequence[Tuple[float, float]]:
        return [p.as_tuple() for p in self.points]
