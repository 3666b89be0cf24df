from polyinterp.evaluation import EXTRAPOLATION_WARNING, classify_range, range_warning
from polyinterp.schema import RangeKind
from polyinterp.validation import validate


def test_boundaries_are_in_range(parabola):
    assert classify_range(parabola, 0.0) is RangeKind.IN_RANGE
    assert classify_range(parabola, 2.0) is RangeKind.IN_RANGE
    assert classify_range(parabola, 1.2) is RangeKind.IN_RANGE


def test_outside_is_extrapolated(parabola):
    assert classify_range(parabola, 3.0) is RangeKind.EXTRAPOLATED
    assert classify_range(parabola, -1e-12) is RangeKind.EXTRAPOLATED
    assert classify_range(parabola, 3.0).value == "extrapolated"


def test_single_point_range():
    points = validate([("5", "7")])
    assert classify_range(points, 5.0) is RangeKind.IN_RANGE
    assert classify_range(points, 5.5) is RangeKind.EXTRAPOLATED


def test_range_warning():
    assert range_warning(RangeKind.IN_RANGE) is None
    assert range_warning(RangeKind.EXTRAPOLATED) == EXTRAPOLATION_WARNING
    assert "extrapolation" in EXTRAPOLATION_WARNING
