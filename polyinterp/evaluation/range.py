"""Interpolation vs extrapolation classification."""

from __future__ import annotations

import logging
from typing import Optional

from polyinterp.schema.enums import RangeKind
from polyinterp.schema.points import PointSet

logger = logging.getLogger(__name__)

EXTRAPOLATION_WARNING = (
    "Warning: x is outside the interpolation range (extrapolation may be inaccurate)."
)


def classify_range(points: PointSet, x: float) -> RangeKind:
    """Return whether ``x`` lies inside ``[min_x, max_x]``; the bounds count as inside."""
    if x < points.min_x or x > points.max_x:
        logger.debug("x=%s outside [%s, %s]", x, points.min_x, points.max_x)
        return RangeKind.EXTRAPOLATED
    return RangeKind.IN_RANGE


def range_warning(kind: RangeKind) -> Optional[str]:
    """Advisory text for ``kind``, or ``None`` when there is nothing to say."""
    if kind is RangeKind.EXTRAPOLATED:
        return EXTRAPOLATION_WARNING
    return None
