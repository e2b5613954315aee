"""
日志与错误处理测试
Logger and Error Handler Tests
"""
import logging

import pytest

from hmac_rps.utils.error_handler import ErrorHandler
from hmac_rps.utils.exceptions import (
    ConfigurationException, GameException, InvalidInputException,
    MoveSetException, RandomSourceException
)
from hmac_rps.utils.logger import get_log_level, setup_logger, setup_logger_from_config


@pytest.fixture
def restore_log_levels():
    yield
    setup_logger_from_config({"level": "WARNING"})


def test_get_log_level():
    assert get_log_level("debug") == logging.DEBUG
    assert get_log_level("ERROR") == logging.ERROR
    assert get_log_level("nonsense") == logging.WARNING


def test_setup_logger_is_idempotent():
    first = setup_logger("HMAC_RPS.TestLogger")
    second = setup_logger("HMAC_RPS.TestLogger", level=logging.INFO)
    assert first is second
    assert len(second.handlers) == 1
    assert second.level == logging.INFO
    assert second.handlers[0].level == logging.INFO


def test_config_level_applies_to_component_loggers(restore_log_levels):
    import hmac_rps.game  # noqa: F401

    setup_logger_from_config({"level": "DEBUG"})
    assert logging.getLogger("HMAC_RPS.GameRules").level == logging.DEBUG
    assert logging.getLogger("HMAC_RPS.RoundController").level == logging.DEBUG


def test_log_file(tmp_path, restore_log_levels):
    log_file = tmp_path / "logs" / "game.log"
    logger = setup_logger_from_config({"level": "INFO", "file": str(log_file)}, name="HMAC_RPS.FileTest")
    logger.info("round finished")
    for handler in logger.handlers:
        handler.flush()
    assert "round finished" in log_file.read_text(encoding="utf-8")


@pytest.mark.parametrize("exception", [
    MoveSetException("duplicate move: rock", reason="duplicate"),
    ConfigurationException("bad digest", config_key="game.digest"),
    RandomSourceException("entropy exhausted", source="secrets"),
    GameException("illegal transition", game_state="EXIT"),
    InvalidInputException("not a number", raw_input="abc"),
])
def test_known_exceptions_are_handled(exception):
    assert ErrorHandler().handle(exception, "test") is True


def test_unknown_exception_is_not_handled():
    assert ErrorHandler().handle(ValueError("boom")) is False


def test_registered_handler_is_called():
    handler = ErrorHandler()
    calls = []
    handler.register_handler(KeyError, lambda exc, ctx: calls.append((exc, ctx)))
    error = KeyError("rock")
    assert handler.handle(error, "lookup") is True
    assert calls == [(error, "lookup")]


def test_move_set_error_takes_precedence_over_configuration_error():
    handler = ErrorHandler()
    calls = []
    handler.error_callbacks[MoveSetException] = lambda exc, ctx: calls.append("moves")
    handler.handle(MoveSetException("too few", reason="too_few"))
    assert calls == ["moves"]
