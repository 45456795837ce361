"""Logging for context7-mcporter.

Thin layer over the standard library ``logging`` module:

- StructuredLogger: keyword fields become ``extra`` on the log record
- JSONFormatter / HumanFormatter: output formats for the package logger
- configure_logging(): one-call setup, with env overrides
- get_logger(): component loggers under the ``context7_mcporter`` namespace

Example:
    >>> from context7_mcporter.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG", format="json")
    >>> logger = get_logger("bridge")
    >>> logger.info("mcporter call finished", operation="query-docs", duration_ms=812.4)
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, Literal

__all__ = [
    "ROOT_LOGGER_NAME",
    "HumanFormatter",
    "JSONFormatter",
    "StructuredLogger",
    "configure_logging",
    "get_logger",
]

ROOT_LOGGER_NAME = "context7_mcporter"

# Attributes every LogRecord has; anything else came in through ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys() | {"message", "asctime"}
)

LogFormat = Literal["human", "json"]


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {k: v for k, v in record.__dict__.items() if k not in _RESERVED_ATTRS}


# =============================================================================
# Formatters
# =============================================================================


class JSONFormatter(logging.Formatter):
    """Format records as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.levelno >= logging.ERROR:
            data["location"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }
        data.update(_extra_fields(record))
        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)
        return json.dumps(data, default=str)


class HumanFormatter(logging.Formatter):
    """Readable single-line format; extra fields are appended as key=value."""

    def __init__(self) -> None:
        super().__init__(fmt="%(asctime)s %(levelname)-7s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = _extra_fields(record)
        if fields:
            line += " " + " ".join(f"{k}={v}" for k, v in fields.items())
        return line


# =============================================================================
# StructuredLogger
# =============================================================================


class StructuredLogger:
    """Logger wrapper that accepts structured fields as keyword arguments.

    Example:
        >>> logger = StructuredLogger("context7_mcporter.lookup")
        >>> logger.debug("resolving library", library="FastAPI")
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._logger = logging.getLogger(name)

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def _log(self, level: int, msg: str, exc_info: Any = None, **fields: Any) -> None:
        if self._logger.isEnabledFor(level):
            self._logger.log(level, msg, exc_info=exc_info, extra=fields or None, stacklevel=3)

    def debug(self, msg: str, **fields: Any) -> None:
        self._log(logging.DEBUG, msg, **fields)

    def info(self, msg: str, **fields: Any) -> None:
        self._log(logging.INFO, msg, **fields)

    def warning(self, msg: str, **fields: Any) -> None:
        self._log(logging.WARNING, msg, **fields)

    def error(self, msg: str, **fields: Any) -> None:
        self._log(logging.ERROR, msg, **fields)

    def exception(self, msg: str, **fields: Any) -> None:
        fields.setdefault("exc_info", True)
        self._log(logging.ERROR, msg, **fields)

    def child(self, suffix: str) -> StructuredLogger:
        """Return a logger for ``{name}.{suffix}``."""
        return StructuredLogger(f"{self.name}.{suffix}")


def get_logger(component: str) -> StructuredLogger:
    """Get a StructuredLogger for a package component.

    Args:
        component: Dotted component name (e.g. "bridge", "lookup").
            Names already under the package namespace are used as-is.
    """
    if component == ROOT_LOGGER_NAME or component.startswith(f"{ROOT_LOGGER_NAME}."):
        return StructuredLogger(component)
    return StructuredLogger(f"{ROOT_LOGGER_NAME}.{component}")


# =============================================================================
# Configuration
# =============================================================================


def configure_logging(
    level: str | int | None = None,
    format: LogFormat | None = None,
    *,
    stream: Any = None,
) -> logging.Logger:
    """Configure the package logger.

    Args:
        level: Log level name or number. Defaults to ``CONTEXT7_LOG_LEVEL``
            or INFO.
        format: "human" or "json". Defaults to ``CONTEXT7_LOG_FORMAT`` or
            "human".
        stream: Output stream (default: stderr).

    Returns:
        The configured package logger.
    """
    level = level or os.environ.get("CONTEXT7_LOG_LEVEL", "INFO")
    format = format or os.environ.get("CONTEXT7_LOG_FORMAT", "human")  # type: ignore[assignment]
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JSONFormatter() if format == "json" else HumanFormatter())

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
