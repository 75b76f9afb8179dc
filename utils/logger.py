# utils/logger.py
# This file is part of Logos - A Propositional Logic Toolkit
#
# Process-wide logger with level control for library code and the CLI

"""Logging for the toolkit.

Library modules fetch the shared logger with :func:`get_logger` and log
internal detail at debug level and summaries at info level. Log records go
to stderr so they never mix with results the command-line front end prints
on stdout. Nothing below WARNING is shown until the level is lowered with
:func:`configure_logging` or :func:`set_log_level`.
"""

import logging
import sys
from enum import Enum
from typing import Dict, Optional, TextIO


class LogLevel(Enum):
    """Verbosity levels understood by the toolkit logger."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class LogosLogger:
    """Thin wrapper around one ``logging.Logger`` with a single stream handler."""

    def __init__(
        self,
        name: str = "logos",
        level: LogLevel = LogLevel.WARNING,
        stream: Optional[TextIO] = None,
    ):
        """Attach a fresh handler to the named logger.

        Args:
            name: Name of the underlying ``logging`` logger
            level: Initial verbosity
            stream: Destination of log records, stderr when omitted
        """
        self.logger = logging.getLogger(name)
        self.logger.handlers.clear()
        self.logger.propagate = False

        self._handler = logging.StreamHandler(stream or sys.stderr)
        self._handler.setFormatter(LogosFormatter())
        self.logger.addHandler(self._handler)

        self.set_level(level)

    def set_level(self, level: LogLevel):
        self.logger.setLevel(level.value)
        self._handler.setLevel(level.value)

    def is_enabled(self, level: LogLevel) -> bool:
        """Whether a record at ``level`` would be emitted."""
        return self.logger.isEnabledFor(level.value)

    def log(self, level: LogLevel, message: str):
        self.logger.log(level.value, message)

    def debug(self, message: str):
        self.log(LogLevel.DEBUG, message)

    def info(self, message: str):
        self.log(LogLevel.INFO, message)

    def warning(self, message: str):
        self.log(LogLevel.WARNING, message)

    def error(self, message: str):
        self.log(LogLevel.ERROR, message)

    # Formula processing events
    def conversion_step(self, step: int, name: str, formula: str):
        self.debug(f"  {step}. {name}: {formula}")

    def clause_summary(self, kind: str, true_count: int, false_count: int):
        self.info(
            f"{kind}: {true_count} tautological clause(s), "
            f"{false_count} other clause(s)"
        )


class LogosFormatter(logging.Formatter):
    """Bare messages for INFO, a level tag for everything else."""

    def format(self, record):
        message = record.getMessage()
        if record.levelno == logging.INFO:
            return message
        return f"[{record.levelname}] {message}"


_loggers: Dict[str, LogosLogger] = {}


def get_logger(name: str = "logos") -> LogosLogger:
    """Return the logger registered under ``name``, creating it on first use.

    Library code uses the default ``"logos"`` logger, which is the one the
    command-line flags configure.
    """
    if name not in _loggers:
        _loggers[name] = LogosLogger(name)
    return _loggers[name]


def set_log_level(level: LogLevel, name: str = "logos"):
    get_logger(name).set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Map command-line verbosity flags onto the logger level.

    Args:
        verbose: Show info-level summaries
        debug: Show every internal step (takes precedence over ``verbose``)
    """
    level = LogLevel.WARNING
    if debug:
        level = LogLevel.DEBUG
    elif verbose:
        level = LogLevel.INFO
    set_log_level(level)


def log_conversion_step(step: int, name: str, formula: str):
    get_logger().conversion_step(step, name, formula)


def log_clause_summary(kind: str, true_count: int, false_count: int):
    get_logger().clause_summary(kind, true_count, false_count)
