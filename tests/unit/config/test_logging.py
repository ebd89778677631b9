"""
Tests for logging setup.
"""

import logging

import pytest

from faucetbot.config.logging import ColoredFormatter, get_logger, setup_logging
from faucetbot.config.settings import Settings


@pytest.fixture
def restore_faucetbot_logger():
    logger = logging.getLogger("faucetbot")
    handlers, level, propagate = list(logger.handlers), logger.level, logger.propagate
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate


def _settings(**kwargs) -> Settings:
    return Settings(
        _env_file=None,
        matrix_access_token="tok",
        matrix_bot_user_id="@faucet:matrix.org",
        **kwargs,
    )


class TestGetLogger:
    def test_module_names_are_not_double_prefixed(self):
        assert get_logger("faucetbot.bot.commands").name == "faucetbot.bot.commands"

    def test_foreign_names_are_nested_under_faucetbot(self):
        assert get_logger("scripts").name == "faucetbot.scripts"


class TestSetupLogging:
    def test_console_only_by_default(self, restore_faucetbot_logger):
        setup_logging(_settings(log_level="DEBUG"))
        logger = restore_faucetbot_logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, ColoredFormatter)
        assert logger.propagate is False

    def test_repeated_setup_does_not_stack_handlers(self, restore_faucetbot_logger, tmp_path):
        settings = _settings(log_file=tmp_path / "bot.log")
        setup_logging(settings)
        setup_logging(settings)
        assert len(restore_faucetbot_logger.handlers) == 2

    def test_file_handler_writes_plain_level_names(self, restore_faucetbot_logger, tmp_path):
        log_file = tmp_path / "logs" / "bot.log"
        setup_logging(_settings(log_file=log_file))

        get_logger("faucetbot.test").warning("hello")
        for handler in restore_faucetbot_logger.handlers:
            handler.flush()

        content = log_file.read_text()
        assert "WARNING - test_file_handler_writes_plain_level_names" in content
        assert "\033[" not in content


class TestColoredFormatter:
    def test_level_name_is_coloured(self):
        record = logging.makeLogRecord({"levelname": "ERROR", "levelno": logging.ERROR, "msg": "x"})
        output = ColoredFormatter(fmt="%(levelname)s %(message)s").format(record)
        assert output == "\033[31mERROR\033[0m x"
        assert record.levelname == "ERROR"
