"""Error hierarchy for context7-mcporter.

All errors raised by this package derive from Context7Error, which carries
an optional hint and docs URL that are rendered into ``str(error)``.

Only transport failures are raised out of a lookup. Configuration and input
problems inside a tool invocation are reported as text results instead.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Literal

__all__ = [
    "Context7Error",
    "ConfigurationError",
    "ValidationError",
    "BridgeError",
    "BridgeTimeoutError",
    "BridgeProcessError",
    "BridgeOutputLimitError",
    "BridgeDecodeError",
    "log_exception",
]


# =============================================================================
# Base
# =============================================================================


class Context7Error(Exception):
    """Base exception for context7-mcporter.

    Attributes:
        message: Human-readable error message.
        details: Structured context for logging.
        hint: Suggested fix, shown after the message.
        docs_url: Link to relevant documentation.
    """

    def __init__(
        self,
        message: str,
        *,
        details: dict[str, Any] | None = None,
        hint: str | None = None,
        docs_url: str | None = None,
    ) -> None:
        self.message = message
        self.details = details or {}
        self.hint = hint
        self.docs_url = docs_url
        super().__init__(self._format())

    def _format(self) -> str:
        parts = [self.message]
        if self.hint:
            parts.append(f"Hint: {self.hint}")
        if self.docs_url:
            parts.append(f"Docs: {self.docs_url}")
        return "\n".join(parts)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r})"


# =============================================================================
# Configuration / input
# =============================================================================


class ConfigurationError(Context7Error):
    """Plugin configuration is missing or invalid."""

    def __init__(self, message: str, *, config_key: str | None = None, **kwargs: Any) -> None:
        self.config_key = config_key
        details = kwargs.pop("details", None) or {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details=details, **kwargs)


class ValidationError(Context7Error):
    """Tool input failed validation."""

    def __init__(self, message: str, *, field: str | None = None, **kwargs: Any) -> None:
        self.field = field
        details = kwargs.pop("details", None) or {}
        if field:
            details["field"] = field
        super().__init__(message, details=details, **kwargs)


# =============================================================================
# Bridge (mcporter subprocess) errors
# =============================================================================


class BridgeError(Context7Error):
    """A call through the mcporter bridge failed."""

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        command: Sequence[str] | None = None,
        **kwargs: Any,
    ) -> None:
        self.operation = operation
        self.command = list(command) if command is not None else None
        details = kwargs.pop("details", None) or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details=details, **kwargs)


class BridgeTimeoutError(BridgeError):
    """The bridge process did not finish within the timeout."""

    def __init__(self, message: str, *, timeout: float | None = None, **kwargs: Any) -> None:
        self.timeout = timeout
        details = kwargs.pop("details", None) or {}
        if timeout is not None:
            details["timeout"] = timeout
        super().__init__(message, details=details, **kwargs)


class BridgeProcessError(BridgeError):
    """The bridge process could not be started or exited with a non-zero status."""

    def __init__(
        self,
        message: str,
        *,
        exit_code: int | None = None,
        stderr: str = "",
        **kwargs: Any,
    ) -> None:
        self.exit_code = exit_code
        self.stderr = stderr
        details = kwargs.pop("details", None) or {}
        if exit_code is not None:
            details["exit_code"] = exit_code
        super().__init__(message, details=details, **kwargs)


class BridgeOutputLimitError(BridgeError):
    """The bridge process wrote more output than allowed."""

    def __init__(self, message: str, *, limit: int | None = None, **kwargs: Any) -> None:
        self.limit = limit
        details = kwargs.pop("details", None) or {}
        if limit is not None:
            details["limit"] = limit
        super().__init__(message, details=details, **kwargs)


class BridgeDecodeError(BridgeError):
    """The bridge process printed something that is not valid JSON."""

    def __init__(self, message: str, *, output: str = "", **kwargs: Any) -> None:
        self.output = output
        super().__init__(message, **kwargs)


# =============================================================================
# Helpers
# =============================================================================


def log_exception(
    logger: logging.Logger | Any,
    message: str,
    exc: BaseException,
    *,
    level: Literal["debug", "info", "warning", "error"] = "warning",
    include_traceback: bool = True,
) -> None:
    """Log an exception with its type name.

    Args:
        logger: A stdlib logger or StructuredLogger.
        message: Context for what was being attempted.
        exc: The exception to log.
        level: Log level name.
        include_traceback: Attach exc_info to the record.
    """
    log = getattr(logger, level)
    text = f"{message}: {type(exc).__name__}: {exc}"
    if include_traceback:
        log(text, exc_info=exc)
    else:
        log(text)
