"""Error hierarchy for mdchain.

Building and rendering a document never raises during normal operation.
The errors below report programmer mistakes (an unusable configuration, a
heading level outside 1-6) and are raised as early as possible, at
configuration or append time.

Every error class inherits from :class:`MarkdownError` and carries a
machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict, and an optional
``cause`` (chained exception).  Argument errors additionally subclass
:class:`ValueError` so that callers catching the builtin keep working.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error mdchain can raise."""

    INVALID_CONFIG = "INVALID_CONFIG"
    INVALID_HEADING_LEVEL = "INVALID_HEADING_LEVEL"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class MarkdownError(Exception):
    """Base exception for all mdchain errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Argument errors
# ---------------------------------------------------------------------------

class MarkdownConfigError(MarkdownError, ValueError):
    """A :class:`~mdchain.config.DocumentConfig` value is unusable.

    Context keys: ``field``, ``value``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CONFIG,
            message=message,
            context=context,
            cause=cause,
        )


class MarkdownHeadingError(MarkdownError, ValueError):
    """A heading level outside the 1-6 range was requested.

    Context keys: ``level``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_HEADING_LEVEL,
            message=message,
            context=context,
            cause=cause,
        )
