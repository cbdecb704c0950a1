# topmark:header:start
#
#   project      : Classmix
#   file         : logging.py
#   file_relpath : src/classmix/config/logging.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Classmix logging with a TRACE level and colored output.

Composition runs at class-definition time, usually at import, so the library
stays silent unless asked: the root logger defaults to CRITICAL and the level
can be raised through ``CLASSMIX_LOG_LEVEL`` or the CLI.

Per-call events are logged at DEBUG; per-member merge decisions at TRACE.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Callable, Final, cast

from yachalk import chalk

from classmix.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class ClassmixLogger(logging.Logger):
    """Logger class adding a ``trace()`` method below DEBUG."""

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
            extra (Mapping[str, object] | None): Optional extra record attributes.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(ClassmixLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(name)s:%(lineno)d] [%(funcName)s] %(message)s"

# Highest threshold first; the first one a record reaches picks the style.
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)

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


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record according to its severity."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and wrap it in the style of its level.

        Args:
            record (logging.LogRecord): The record to format.

        Returns:
            str: The colorized message.
        """
        message: str = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim.red(message)


def parse_log_level(value: str) -> int | None:
    """Translate a level name (``"TRACE"``, ``"debug"``) or number (``"10"``).

    Returns:
        int | None: The numeric level, or ``None`` if ``value`` is not recognized.
    """
    token: str = value.strip().upper()
    if token.isdigit():
        return int(token)
    return _LEVEL_NAMES.get(token)


def resolve_env_log_level() -> int | None:
    """Return the level requested via ``CLASSMIX_LOG_LEVEL``, or ``None`` if unset."""
    raw: str | None = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not raw:
        return None
    return parse_log_level(raw)


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a single colored stdout handler.

    If ``level`` is None the environment is consulted via
    [`resolve_env_log_level`][classmix.config.logging.resolve_env_log_level];
    without either, the level is CRITICAL.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.propagate = False


def get_logger(name: str) -> ClassmixLogger:
    """Return the ClassmixLogger registered under ``name``.

    Args:
        name (str): The name of the logger, usually ``__name__``.

    Returns:
        ClassmixLogger: The logger instance.
    """
    return cast("ClassmixLogger", logging.getLogger(name))
