import pytest

from polyinterp.validation import validate


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("POLYINTERP_MAX_POINTS", "POLYINTERP_SIGNIFICANT_DIGITS", "POLYINTERP_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def line():
    return validate([("0", "0"), ("1", "1")])


@pytest.fixture
def parabola():
    # y = x^2
    return validate([("0", "0"), ("1", "1"), ("2", "4")])


@pytest.fixture
def cubic_pairs():
    # y = x^3 - 2x, listed out of order
    return [(2.0, 4.0), (-1.0, 1.0), (0.0, 0.0), (1.0, -1.0)]
