"""
Enumeration types tagging evaluation outcomes.
"""

from enum import Enum


class ResultKind(Enum):
    """How an evaluation result was obtained."""

    EXACT = "exact"
    INTERPOLATED = "interpolated"


class RangeKind(Enum):
    """Position of a query relative to the span of the nodes."""

    IN_RANGE = "in-range"
    EXTRAPOLATED = "extrapolated"
