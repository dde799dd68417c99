"""Exception taxonomy and error classification.

Two families live here:
- Caller defects (InvalidInputError, InvalidAccessError): always raised at the
  offending call site, never folded into a failed result.
- Canonical failure payloads (NormalizedError and subclasses): produced by the
  normalizer and carried inside failed results.
"""

from __future__ import annotations

import traceback
from enum import StrEnum
from functools import lru_cache
from typing import Self

from pydantic import BaseModel


class AttemptError(Exception):
    """Base class for every exception raised or produced by this library."""


class InvalidInputError(AttemptError, TypeError):
    """A precondition violated by the caller (non-callable, async-only callable, bad handler)."""


class InvalidAccessError(AttemptError, TypeError):
    """Reading the value of a failure, the error of a success, or the status of a non-result."""


class NormalizedError(AttemptError, RuntimeError):
    """Canonical error built from a non-exception failure value."""


class TypeMismatchError(NormalizedError, TypeError):
    """Failure value of an unrecognized shape.

    The message is fixed; the offending object is kept on ``received``.
    """

    MESSAGE = "Invalid error type provided."

    def __init__(self, received: object = None) -> None:
        super().__init__(self.MESSAGE)
        self.received = received


class OperationCancelledError(NormalizedError):
    """Default reason carried by a cancelled token."""

    def __init__(self, message: str = "The operation was cancelled.") -> None:
        super().__init__(message)


class OperationTimeoutError(OperationCancelledError, TimeoutError):
    """Reason reported by a token whose deadline has passed."""

    def __init__(self, message: str = "The operation timed out.") -> None:
        super().__init__(message)


class ErrorCode(StrEnum):
    """Machine-readable error codes for failure payloads."""
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_ACCESS = "INVALID_ACCESS"
    TYPE_MISMATCH = "TYPE_MISMATCH"
    CANCELLED = "CANCELLED"
    TIMEOUT = "TIMEOUT"
    PARSE_ERROR = "PARSE_ERROR"
    NOT_FOUND = "NOT_FOUND"
    PERMISSION_DENIED = "PERMISSION_DENIED"
    NETWORK_ERROR = "NETWORK_ERROR"
    INVALID_VALUE = "INVALID_VALUE"
    RUNTIME_ERROR = "RUNTIME_ERROR"
    UNKNOWN = "UNKNOWN"


# Most specific first: OperationTimeoutError before OperationCancelledError
_TYPE_CODES: tuple[tuple[type[BaseException], ErrorCode], ...] = (
    (InvalidInputError, ErrorCode.INVALID_INPUT),
    (InvalidAccessError, ErrorCode.INVALID_ACCESS),
    (TypeMismatchError, ErrorCode.TYPE_MISMATCH),
    (OperationTimeoutError, ErrorCode.TIMEOUT),
    (OperationCancelledError, ErrorCode.CANCELLED),
    (NormalizedError, ErrorCode.RUNTIME_ERROR),
    (TimeoutError, ErrorCode.TIMEOUT),
)

_PATTERN_CODES: dict[str, ErrorCode] = {
    "timeout": ErrorCode.TIMEOUT,
    "cancel": ErrorCode.CANCELLED,
    "connection": ErrorCode.NETWORK_ERROR,
    "network": ErrorCode.NETWORK_ERROR,
    "permission": ErrorCode.PERMISSION_DENIED,
    "forbidden": ErrorCode.PERMISSION_DENIED,
    "notfound": ErrorCode.NOT_FOUND,
    "keyerror": ErrorCode.NOT_FOUND,
    "json": ErrorCode.PARSE_ERROR,
    "decode": ErrorCode.PARSE_ERROR,
    "parse": ErrorCode.PARSE_ERROR,
    "valueerror": ErrorCode.INVALID_VALUE,
    "validation": ErrorCode.INVALID_VALUE,
    "runtimeerror": ErrorCode.RUNTIME_ERROR,
}
_PATTERN_KEYS = tuple(_PATTERN_CODES.keys())


@lru_cache(maxsize=256)
def _classify_cached(exc_key: str) -> ErrorCode:
    haystack = exc_key.lower()
    for pattern in _PATTERN_KEYS:
        if pattern in haystack:
            return _PATTERN_CODES[pattern]
    return ErrorCode.UNKNOWN


def classify_exception(exc: BaseException) -> ErrorCode:
    """Map exception to error code: library types first, then name/message patterns."""
    for exc_type, code in _TYPE_CODES:
        if isinstance(exc, exc_type):
            return code
    return _classify_cached(f"{type(exc).__name__} {exc}")


class ErrorInfo(BaseModel):
    """Serializable snapshot of a failure payload."""

    model_config = {"frozen": True}

    type: str
    message: str
    code: ErrorCode = ErrorCode.UNKNOWN
    details: str | None = None

    @classmethod
    def from_exception(cls, exc: BaseException, *, include_trace: bool = True) -> Self:
        """Create from exception with auto-classification.

        ``details`` holds the formatted traceback when the exception carries one.
        """
        details = None
        if include_trace and exc.__traceback__ is not None:
            details = "".join(traceback.format_exception(exc)).rstrip()
        return cls(
            type=type(exc).__name__,
            message=str(exc),
            code=classify_exception(exc),
            details=details,
        )

    def render(self) -> str:
        """Format as a short human-readable block."""
        text = f"{self.type} [{self.code}]: {self.message}"
        return f"{text}\n\nDetails:\n{self.details}" if self.details else text

    __str__ = render
