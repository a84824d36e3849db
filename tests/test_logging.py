# tests/test_logging.py
import logging
from logging.handlers import RotatingFileHandler

from doublespairing.constants import DEBUG_ENV_VAR
from doublespairing.utils import setup_logger


def console_levels(lgr):
    return [
        h.level
        for h in lgr.handlers
        if isinstance(h, logging.StreamHandler)
        and not isinstance(h, RotatingFileHandler)
    ]


def test_console_shows_warnings_only_by_default(monkeypatch):
    monkeypatch.delenv(DEBUG_ENV_VAR, raising=False)
    lgr = setup_logger("doublespairing.tests.quiet")
    assert lgr.level == logging.INFO
    assert console_levels(lgr) == [logging.WARNING]


def test_debug_env_var_shows_debug_on_console(monkeypatch):
    monkeypatch.setenv(DEBUG_ENV_VAR, "1")
    lgr = setup_logger("doublespairing.tests.debug")
    assert lgr.level == logging.DEBUG
    assert console_levels(lgr) == [logging.DEBUG]
