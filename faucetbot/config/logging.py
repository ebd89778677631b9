"""
Logging setup for the faucet bot.

Everything logs under the ``faucetbot`` logger: a coloured stream on stdout,
plus a plain-text file when LOG_FILE is set. The hierarchy does not
propagate to the root logger, so library loggers (nio, httpx) stay out of
the bot's output unless configured separately.
"""

import logging
import sys
from pathlib import Path

from faucetbot.config.settings import Settings

ROOT_LOGGER_NAME = "faucetbot"

CONSOLE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
FILE_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColoredFormatter(logging.Formatter):
    """Wraps the level name in an ANSI colour; other handlers see the record unchanged."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname)
        if color is None:
            return super().format(record)
        tinted = logging.makeLogRecord(record.__dict__)
        tinted.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(tinted)


def _handler(handler: logging.Handler, level: int, formatter: logging.Formatter) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(settings: Settings) -> None:
    """
    (Re)configure the ``faucetbot`` logger from LOG_LEVEL and LOG_FILE.

    Safe to call more than once; previous handlers are dropped.
    """
    level = logging.getLevelName(settings.log_level)
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    for old in logger.handlers:
        old.close()
    logger.handlers.clear()
    logger.propagate = False

    logger.addHandler(
        _handler(
            logging.StreamHandler(sys.stdout),
            level,
            ColoredFormatter(fmt=CONSOLE_FORMAT, datefmt=DATE_FORMAT),
        )
    )

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        logger.addHandler(
            _handler(
                logging.FileHandler(log_path),
                level,
                logging.Formatter(fmt=FILE_FORMAT, datefmt=DATE_FORMAT),
            )
        )

    destination = f"stdout and {settings.log_file}" if settings.log_file else "stdout"
    logger.info(f"Logging at {settings.log_level} to {destination}")


def get_logger(name: str) -> logging.Logger:
    """
    Logger for a module, always inside the ``faucetbot`` hierarchy.

    ``get_logger(__name__)`` from package modules keeps the module path as is;
    any other name is nested under ``faucetbot.``.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
