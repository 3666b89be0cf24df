"""Parsing and validation of raw (x, y) pairs into a :class:`PointSet`."""

from __future__ import annotations

import logging
import math
import numbers
from collections.abc import Sequence
from typing import Any, Iterable, List, Optional, Tuple

import numpy as np

from polyinterp.config import load_settings
from polyinterp.errors import (
    DuplicateXError,
    MissingQueryError,
    ParseError,
    PointCountError,
)
from polyinterp.schema.points import Point, PointSet, RawPair

logger = logging.getLogger(__name__)


def parse_number(raw: Any) -> Optional[float]:
    """Return ``raw`` as a finite float, or ``None`` if it is not one.

    Strings are stripped; empty text, digit separators, NaN and infinities
    are rejected, as are values too large for a float.
    Booleans are not numbers here even though ``bool`` subclasses ``int``.
    """
    if raw is None or isinstance(raw, (bool, np.bool_)):
        return None
    if isinstance(raw, str):
        text = raw.strip()
        if not text or "_" in text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    elif isinstance(raw, numbers.Real):
        try:
            value = float(raw)
        except (OverflowError, ValueError, TypeError):
            return None
    else:
        return None
    if not math.isfinite(value):
        return None
    return value


def _split_row(pair: Any) -> Tuple[Any, Any]:
    # A two-character string would otherwise unpack as a point
    if isinstance(pair, (str, bytes)) or not isinstance(pair, (Sequence, np.ndarray)):
        raise ParseError()
    if len(pair) != 2:
        raise ParseError()
    return pair[0], pair[1]


def _parse_pairs(raw_pairs: Iterable[RawPair]) -> List[Tuple[float, float]]:
    parsed = []
    for index, pair in enumerate(raw_pairs):
        raw_x, raw_y = _split_row(pair)
        x = parse_number(raw_x)
        y = parse_number(raw_y)
        if x is None or y is None:
            logger.debug("Row %s is not numeric: x=%r y=%r", index, raw_x, raw_y)
            raise ParseError()
        parsed.append((x, y))
    return parsed


def _check_count(count: int, max_points: int) -> None:
    if max_points and not 1 <= count <= max_points:
        raise PointCountError(f"Number of points must be between 1 and {max_points}.")
    if count < 1:
        raise PointCountError("At least 1 point is required.")


def validate(raw_pairs: Sequence[RawPair], max_points: Optional[int] = None) -> PointSet:
    """
    Parse raw pairs and return them as a validated, x-sorted point set.

    Parameters
    ----------
    raw_pairs : sequence of (x, y)
        Coordinates as typed by a user (str) or already numeric
    max_points : int, optional
        Upper bound on the number of pairs; ``None`` reads it from
        configuration and ``0`` disables the bound

    Returns
    -------
    PointSet
        Points in ascending x order

    Raises
    ------
    PointCountError
        If there are no pairs or more than ``max_points``
    ParseError
        If any coordinate is missing or not a finite number
    DuplicateXError
        If two x values are exactly equal
    """
    if max_points is None:
        max_points = load_settings().max_points
    raw_pairs = list(raw_pairs)
    _check_count(len(raw_pairs), max_points)
    parsed = _parse_pairs(raw_pairs)

    # Exact equality only; a zero denominator needs an exact duplicate
    seen = set()
    for x, _ in parsed:
        if x in seen:
            logger.debug("Duplicate x value %s", x)
            raise DuplicateXError()
        seen.add(x)

    parsed.sort(key=lambda p: p[0])
    return PointSet(tuple(Point(x, y) for x, y in parsed))


def sort_points(raw_pairs: Sequence[RawPair]) -> List[Tuple[float, float]]:
    """Parse pairs and return them sorted by x.

    Duplicates are kept (stable order); use :func:`validate` to reject them.
    """
    parsed = _parse_pairs(raw_pairs)
    return sorted(parsed, key=lambda p: p[0])


def parse_query(raw: Any) -> float:
    """Parse the query x.

    Raises:
        MissingQueryError: if nothing was entered
        ParseError: if the input is not a finite number
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise MissingQueryError()
    value = parse_number(raw)
    if value is None:
        raise ParseError("x must be a number.")
    return value
