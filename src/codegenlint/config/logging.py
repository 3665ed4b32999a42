# topmark:header:start
#
#   project      : CodegenLint
#   file         : logging.py
#   file_relpath : src/codegenlint/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 CodegenLint contributors
#
# topmark:header:end

"""CodegenLint logging with a TRACE level and colored output.

The engine logs span resolution and preset dispatch at TRACE/DEBUG; the CLI
logs file-level progress at INFO. User-facing output never goes through the
logger (see `codegenlint.cli.console`).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from codegenlint.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class CodegenLogger(logging.Logger):
    """Logger class adding a `trace()` method below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` with severity TRACE.

        Args:
            msg (object): The message to be logged.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra record attributes.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(CodegenLogger)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the record and colorize it.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The colorized message.
        """
        message: str = super().format(record)
        return _color_for(record.levelno)(message)


def _color_for(level: int) -> Callable[[str], str]:
    if level >= logging.CRITICAL:
        return cast("Callable[[str], str]", chalk.red_bright)
    if level >= logging.ERROR:
        return cast("Callable[[str], str]", chalk.red)
    if level >= logging.WARNING:
        return cast("Callable[[str], str]", chalk.yellow)
    if level >= logging.INFO:
        return cast("Callable[[str], str]", chalk.green)
    if level >= logging.DEBUG:
        return cast("Callable[[str], str]", chalk.gray)
    return cast("Callable[[str], str]", chalk.blue)


def parse_log_level(value: str | None) -> int | None:
    """Translate a level name or number (``"TRACE"``, ``"10"``) to a logging level.

    Returns:
        int | None: The level, or None when ``value`` is empty or unknown.
    """
    if not value:
        return None
    v: str = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Return the logging level requested through ``CODEGENLINT_LOG_LEVEL``, if any."""
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV_VAR))


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a single colored stream handler.

    If ``level`` is None the environment is consulted; CRITICAL otherwise.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger: logging.Logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.propagate = False


def get_logger(name: str) -> CodegenLogger:
    """Return the `CodegenLogger` registered under ``name``."""
    return cast("CodegenLogger", logging.getLogger(name))
