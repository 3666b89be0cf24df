"""Exact-hit shortcut in front of the Lagrange evaluator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from polyinterp.interpolation.lagrange import lagrange
from polyinterp.schema.enums import ResultKind
from polyinterp.schema.points import PointSet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluationResult:
    value: float
    kind: ResultKind

    @property
    def is_exact(self) -> bool:
        return self.kind is ResultKind.EXACT


def find_exact_hit(points: PointSet, x: float) -> Optional[float]:
    """Return the y of the node whose x equals ``x`` exactly, if any."""
    for point in points:
        if point.x == x:
            return point.y
    return None


def evaluate(points: PointSet, x: float) -> EvaluationResult:
    """Evaluate the interpolant at ``x``.

    A query equal to a node returns that node's y unchanged (kind ``EXACT``);
    anything else goes through :func:`lagrange` (kind ``INTERPOLATED``).

    Raises:
        DegenerateInputError: if the evaluator meets a zero denominator
    """
    x = float(x)
    hit = find_exact_hit(points, x)
    if hit is not None:
        logger.debug("x=%s is a node; returning y=%s", x, hit)
        return EvaluationResult(hit, ResultKind.EXACT)
    return EvaluationResult(lagrange(points, x), ResultKind.INTERPOLATED)
