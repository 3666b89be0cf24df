"""
Lagrange-form polynomial interpolation.

For nodes (x_j, y_j), j = 0..n-1, the interpolant at x is

    P(x) = sum_j y_j * prod_{k != j} (x - x_k) / (x_j - x_k)

evaluated directly in O(n^2). No barycentric weights are cached; node sets
are small and built per request.
"""
import logging
from typing import Iterable, List, Sequence, Tuple, Union

from polyinterp.errors import DegenerateInputError
from polyinterp.schema.points import Point, PointSet

from .base import Interpolator

logger = logging.getLogger(__name__)


def _lagrange_sum(x_values: Sequence[float], y_values: Sequence[float], x: float) -> float:
    n = len(x_values)
    total = 0.0
    for j in range(n):
        num = 1.0
        den = 1.0
        for k in range(n):
            if k == j:
                continue
            num *= (x - x_values[k])
            den *= (x_values[j] - x_values[k])
        if den == 0:
            logger.error(
                "Zero basis denominator at node %s (x=%s); duplicate x reached the evaluator",
                j,
                x_values[j],
            )
            raise DegenerateInputError()
        total += (num / den) * y_values[j]
    return float(total)


class LagrangeInterpolator(Interpolator):
    """Lagrange polynomial through all nodes of a point set.

    Degree is ``len(nodes) - 1``; a single node gives a constant.
    Queries outside the node span are extrapolated by the same polynomial.
    """

    @property
    def degree(self) -> int:
        return len(self.x_values) - 1

    def interpolate(self, x: float) -> float:
        """Polynomial value at x."""
        return _lagrange_sum(self.x_values, self.y_values, float(x))


def _split(points: Iterable) -> Tuple[List[float], List[float]]:
    xs: List[float] = []
    ys: List[float] = []
    for p in points:
        x, y = p.as_tuple() if isinstance(p, Point) else p
        xs.append(float(x))
        ys.append(float(y))
    return xs, ys


def lagrange(points: Union[PointSet, Iterable], x: float) -> float:
    """Evaluate the Lagrange interpolant through ``points`` at ``x``.

    ``points`` is normally a validated :class:`PointSet`. Plain sequences of
    :class:`Point` or (x, y) tuples are accepted too and are not re-validated.

    Raises:
        DegenerateInputError: if any basis denominator is exactly zero
    """
    x = float(x)
    if isinstance(points, PointSet):
        value = LagrangeInterpolator(points).interpolate(x)
        n = len(points)
    else:
        xs, ys = _split(points)
        if not xs:
            raise ValueError("Need at least 1 point for interpolation")
        value = _lagrange_sum(xs, ys, x)
        n = len(xs)
    logger.debug("Lagrange value at x=%s over %s nodes: %s", x, n, value)
    return value
