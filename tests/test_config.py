import logging

import pytest

from polyinterp.config import Settings, load_settings
from polyinterp.logging_config import setup_logging


def test_defaults():
    settings = load_settings()
    assert settings == Settings(max_points=10, significant_digits=8, log_level="WARNING")
    assert settings.log_level_value == logging.WARNING


def test_environment(monkeypatch):
    monkeypatch.setenv("POLYINTERP_MAX_POINTS", "0")
    monkeypatch.setenv("POLYINTERP_SIGNIFICANT_DIGITS", "12")
    monkeypatch.setenv("POLYINTERP_LOG_LEVEL", "debug")
    settings = load_settings()
    assert settings.max_points == 0
    assert settings.significant_digits == 12
    assert settings.log_level_value == logging.DEBUG


@pytest.mark.parametrize(
    "name, value",
    [
        ("POLYINTERP_MAX_POINTS", "ten"),
        ("POLYINTERP_MAX_POINTS", "-1"),
        ("POLYINTERP_SIGNIFICANT_DIGITS", "0"),
        ("POLYINTERP_LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_environment(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        load_settings()


def test_setup_logging(tmp_path):
    log_file = tmp_path / "polyinterp.log"
    logger = setup_logging(logging.INFO, log_file=str(log_file))
    try:
        assert logger.name == "polyinterp"
        assert logger.level == logging.INFO
        assert len(logger.handlers) == 2

        # Calling again replaces the handlers instead of stacking them
        logger = setup_logging(logging.DEBUG)
        assert len(logger.handlers) == 1
        assert logger.level == logging.DEBUG
    finally:
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
