import io
import logging

import pytest

from tinyrogue.logging_config import CHATTY_LOGGERS, ENV_LOG_LEVEL, configure_logging, resolve_level


@pytest.fixture
def restore_levels():
    names = ("",) + CHATTY_LOGGERS
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


@pytest.mark.parametrize(
    "verbosity,expected",
    [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
)
def test_verbosity_maps_to_level(verbosity, expected):
    assert resolve_level(verbosity, env={}) == expected


def test_env_level_overrides_verbosity():
    assert resolve_level(0, env={ENV_LOG_LEVEL: "debug"}) == logging.DEBUG
    assert resolve_level(2, env={ENV_LOG_LEVEL: " error "}) == logging.ERROR


def test_unknown_env_level_falls_back_to_verbosity():
    assert resolve_level(1, env={ENV_LOG_LEVEL: "chatty"}) == logging.INFO


def test_configure_quiets_engine_below_debug(restore_levels):
    level = configure_logging(1, stream=io.StringIO())
    assert level == logging.INFO
    assert logging.getLogger().level == logging.INFO
    for name in CHATTY_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING


def test_configure_lets_engine_through_at_debug(restore_levels):
    assert configure_logging(2, stream=io.StringIO()) == logging.DEBUG
    assert logging.getLogger("tinyrogue.engine").isEnabledFor(logging.DEBUG)


def test_configure_reads_env_override(monkeypatch, restore_levels):
    monkeypatch.setenv(ENV_LOG_LEVEL, "ERROR")
    assert configure_logging(0, stream=io.StringIO()) == logging.ERROR
    assert logging.getLogger("tinyrogue.engine").level == logging.ERROR
