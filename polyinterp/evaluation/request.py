"""
Request boundary.

One call to :func:`solve` runs a full evaluation for a single request and
never raises for bad user input: every :class:`InterpolationError` ends up
as a short message in the returned :class:`EvaluationReport`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

from polyinterp.config import Settings, load_settings
from polyinterp.errors import DegenerateInputError, DuplicateXError, InterpolationError
from polyinterp.interpolation.lagrange import lagrange
from polyinterp.schema.enums import RangeKind, ResultKind
from polyinterp.schema.points import RawPair
from polyinterp.utils.formatting import format_number
from polyinterp.validation.validator import parse_query, validate

from .evaluator import EvaluationResult, find_exact_hit
from .range import classify_range, range_warning

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InterpolationRequest:
    """Raw input of one evaluation: the rows as typed and the query x."""

    pairs: Sequence[RawPair]
    query: Any = None


@dataclass(frozen=True)
class EvaluationReport:
    """Outcome of one request.

    Attributes:
        result: Numeric result, ``None`` on failure
        range_kind: Position of the query relative to the nodes, ``None`` on failure
        text: Display line, e.g. ``"y = 9"`` or ``"y = 1 (exact data point)"``
        warnings: Advisory messages to show next to the result
        error: The failure, ``None`` on success
    """

    result: Optional[EvaluationResult] = None
    range_kind: Optional[RangeKind] = None
    text: str = ""
    warnings: List[str] = field(default_factory=list)
    error: Optional[InterpolationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        """Text to display: the error message on failure, the result line otherwise."""
        if self.error is not None:
            return self.error.message
        return self.text


def _evaluate_request(request: InterpolationRequest, settings: Settings) -> EvaluationReport:
    points = validate(request.pairs, max_points=settings.max_points)
    x = parse_query(request.query)

    hit = find_exact_hit(points, x)
    if hit is not None:
        result = EvaluationResult(hit, ResultKind.EXACT)
        text = f"y = {format_number(hit, settings.significant_digits)} (exact data point)"
        return EvaluationReport(result=result, range_kind=RangeKind.IN_RANGE, text=text)

    range_kind = classify_range(points, x)
    warnings = []
    advisory = range_warning(range_kind)
    if advisory is not None:
        logger.warning("Extrapolating at x=%s outside [%s, %s]", x, points.min_x, points.max_x)
        warnings.append(advisory)

    value = lagrange(points, x)
    result = EvaluationResult(value, ResultKind.INTERPOLATED)
    text = f"y = {format_number(value, settings.significant_digits)}"
    return EvaluationReport(result=result, range_kind=range_kind, text=text, warnings=warnings)


def solve(request: InterpolationRequest, settings: Optional[Settings] = None) -> EvaluationReport:
    """Validate, evaluate and format one request.

    Args:
        request: Raw pairs and query
        settings: Overrides for the environment configuration

    Returns:
        A report carrying either the formatted result or the error
    """
    if settings is None:
        settings = load_settings()
    try:
        return _evaluate_request(request, settings)
    except DegenerateInputError as exc:
        logger.error("Validator let duplicate x values through: %s", exc)
        return EvaluationReport(error=DuplicateXError())
    except InterpolationError as exc:
        logger.info("Request rejected: %s", exc)
        return EvaluationReport(error=exc)


def solve_pairs(
    pairs: Sequence[RawPair], query: Any, settings: Optional[Settings] = None
) -> EvaluationReport:
    """Shorthand for ``solve(InterpolationRequest(pairs, query))``."""
    return solve(InterpolationRequest(pairs=pairs, query=query), settings=settings)
