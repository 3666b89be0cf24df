import logging

import pytest

from polyinterp.config import Settings
from polyinterp.errors import (
    DegenerateInputError,
    DuplicateXError,
    MissingQueryError,
    ParseError,
    PointCountError,
)
from polyinterp.evaluation import EXTRAPOLATION_WARNING, InterpolationRequest, solve, solve_pairs
from polyinterp.evaluation import request as request_module
from polyinterp.schema import RangeKind, ResultKind

PARABOLA = [("0", "0"), ("1", "1"), ("2", "4")]


def test_interpolated_request():
    report = solve(InterpolationRequest(pairs=[("0", "0"), ("1", "1")], query="0.5"))
    assert report.ok
    assert report.text == "y = 0.5"
    assert report.message == "y = 0.5"
    assert report.result.kind is ResultKind.INTERPOLATED
    assert report.range_kind is RangeKind.IN_RANGE
    assert report.warnings == []


def test_extrapolated_request_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="polyinterp"):
        report = solve_pairs(PARABOLA, "3")
    assert report.ok
    assert report.text == "y = 9"
    assert report.range_kind is RangeKind.EXTRAPOLATED
    assert report.warnings == [EXTRAPOLATION_WARNING]
    assert any("Extrapolating" in r.message for r in caplog.records)


def test_exact_hit_request_skips_range_warning():
    report = solve_pairs([("2", "4"), ("0", "0"), ("1", "1")], "2")
    assert report.text == "y = 4 (exact data point)"
    assert report.result.kind is ResultKind.EXACT
    assert report.range_kind is RangeKind.IN_RANGE
    assert report.warnings == []


def test_boundary_query_is_not_extrapolated():
    report = solve_pairs([("0", "1"), ("4", "3")], "4.0")
    assert report.result.kind is ResultKind.EXACT
    assert report.warnings == []


@pytest.mark.parametrize(
    "pairs, query, error_type, message",
    [
        ([("0", ""), ("1", "1")], "0.5", ParseError, "Please fill all x and y fields with numeric values."),
        ([("1", "1"), ("1", "2")], "0.5", DuplicateXError, "Duplicate x-values found. Each x must be unique."),
        (PARABOLA, "", MissingQueryError, "Please enter the x value to evaluate."),
        (PARABOLA, "abc", ParseError, "x must be a number."),
        (PARABOLA, "1_000", ParseError, "x must be a number."),
        ([(10 ** 400, 1), (0, 0)], "1", ParseError, "Please fill all x and y fields with numeric values."),
        (["12", "34"], "1", ParseError, "Please fill all x and y fields with numeric values."),
        ([], "1", PointCountError, "Number of points must be between 1 and 10."),
    ],
)
def test_errors_become_messages(pairs, query, error_type, message):
    report = solve_pairs(pairs, query)
    assert not report.ok
    assert isinstance(report.error, error_type)
    assert report.message == message
    assert report.result is None
    assert report.text == ""


def test_duplicates_rejected_before_query():
    report = solve_pairs([("1", "1"), ("1", "2")], "")
    assert isinstance(report.error, DuplicateXError)


def test_degenerate_reported_as_duplicate(monkeypatch, caplog):
    def broken_lagrange(points, x):
        raise DegenerateInputError()

    monkeypatch.setattr(request_module, "lagrange", broken_lagrange)
    with caplog.at_level(logging.ERROR, logger="polyinterp"):
        report = solve_pairs(PARABOLA, "0.5")
    assert type(report.error) is DuplicateXError
    assert report.message == "Duplicate x-values found. Each x must be unique."
    assert any(r.levelno == logging.ERROR for r in caplog.records)


def test_settings_override():
    settings = Settings(max_points=2, significant_digits=3)
    report = solve_pairs([("0", "0"), ("3", "1")], "1", settings=settings)
    assert report.text == "y = 0.333"

    report = solve_pairs(PARABOLA, "1.5", settings=settings)
    assert report.message == "Number of points must be between 1 and 2."


def test_significant_digits_from_environment(monkeypatch):
    monkeypatch.setenv("POLYINTERP_SIGNIFICANT_DIGITS", "4")
    report = solve_pairs([("0", "0"), ("3", "1")], "1")
    assert report.text == "y = 0.3333"
