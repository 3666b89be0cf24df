"""Pointwise Lagrange polynomial interpolation.

This package evaluates the unique polynomial through a set of distinct
(x, y) points at a query x, with input validation around it.

Key modules:
- validation: parse raw pairs into a sorted, duplicate-free PointSet
- interpolation: the Lagrange evaluator
- evaluation: exact-hit shortcut, range classification, request boundary
- utils: result formatting
- data: point sources (CSV, JSON, DataFrame) and example sets
"""

__version__ = "1.0.0"

from polyinterp.errors import (
    DegenerateInputError,
    DuplicateXError,
    InterpolationError,
    MissingQueryError,
    ParseError,
    PointCountError,
    PointSourceError,
)
from polyinterp.evaluation import (
    EvaluationReport,
    EvaluationResult,
    InterpolationRequest,
    classify_range,
    evaluate,
    find_exact_hit,
    solve,
    solve_pairs,
)
from polyinterp.interpolation import LagrangeInterpolator, lagrange
from polyinterp.schema import Point, PointSet, RangeKind, ResultKind
from polyinterp.utils.formatting import format_number
from polyinterp.validation import parse_query, sort_points, validate

__all__ = [
    "__version__",
    "Point",
    "PointSet",
    "RangeKind",
    "ResultKind",
    "validate",
    "sort_points",
    "parse_query",
    "evaluate",
    "find_exact_hit",
    "classify_range",
    "lagrange",
    "LagrangeInterpolator",
    "format_number",
    "EvaluationResult",
    "EvaluationReport",
    "InterpolationRequest",
    "solve",
    "solve_pairs",
    "InterpolationError",
    "ParseError",
    "DuplicateXError",
    "DegenerateInputError",
    "MissingQueryError",
    "PointCountError",
    "PointSourceError",
]
