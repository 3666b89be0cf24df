"""
Base class for evaluators bound to one validated point set.
"""
from abc import ABC, abstractmethod
from typing import List, Sequence

from polyinterp.errors import PointCountError
from polyinterp.schema.points import PointSet


class Interpolator(ABC):
    """An interpolant over the nodes of a :class:`PointSet`.

    Node order and distinctness come from the point set; subclasses only
    implement :meth:`interpolate`.
    """

    def __init__(self, points: PointSet):
        self.points = points
        self.x_values: List[float] = points.xs.tolist()
        self.y_values: List[float] = points.ys.tolist()

    @classmethod
    def from_arrays(cls, x_values: Sequence[float], y_values: Sequence[float]) -> "Interpolator":
        """Build from parallel x and y sequences in any order.

        Raises:
            PointCountError: if there are no nodes
            DuplicateXError: if two x values are equal
        """
        if len(x_values) != len(y_values):
            raise ValueError("x_values and y_values must have same length")
        if len(x_values) < 1:
            raise PointCountError("At least 1 point is required.")
        return cls(PointSet.from_pairs(zip(x_values, y_values)))

    @abstractmethod
    def interpolate(self, x: float) -> float:
        pass

    def interpolate_many(self, xs: Sequence[float]) -> List[float]:
        return [self.interpolate(x) for x in xs]

    def __call__(self, x: float) -> float:
        return self.interpolate(x)

    def __len__(self) -> int:
        return len(self.points)
