import pytest

from polyinterp.errors import DuplicateXError
from polyinterp.schema import Point, PointSet


def test_from_pairs_sorts():
    points = PointSet.from_pairs([(2, 4), (0, 0), (1, 1)])
    assert [p.x for p in points] == [0.0, 1.0, 2.0]
    assert points[2] == Point(2.0, 4.0)
    assert list(points.ys) == [0.0, 1.0, 4.0]
    assert len(points) == 3


def test_invariants_enforced():
    with pytest.raises(ValueError):
        PointSet(())
    with pytest.raises(ValueError):
        PointSet((Point(1.0, 0.0), Point(0.0, 0.0)))
    with pytest.raises(DuplicateXError):
        PointSet((Point(1.0, 0.0), Point(1.0, 2.0)))


def test_point_set_is_immutable():
    points = PointSet.from_pairs([(0, 0)])
    with pytest.raises(AttributeError):
        points.points = ()
    assert points.min_x == points.max_x == 0.0
