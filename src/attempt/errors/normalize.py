"""Conversion of arbitrary failure values into canonical exceptions."""

from __future__ import annotations

from ..cancellation import is_cancellation_token
from .errors import NormalizedError, OperationCancelledError, TypeMismatchError


def normalize_error(obj: object) -> BaseException:
    """Turn any failure value into an exception instance. Never raises.

    - exceptions pass through unchanged
    - strings become ``NormalizedError(message)``
    - a cancelled token yields its normalized reason (``OperationCancelledError``
      when it has none); a token that is not cancelled is a type mismatch
    - everything else becomes ``TypeMismatchError``

    Example:
        >>> normalize_error("boom")
        NormalizedError('boom')
        >>> normalize_error(42).received
        42
    """
    seen: set[int] = set()
    current = obj
    while True:
        if isinstance(current, BaseException):
            return current
        if isinstance(current, str):
            return NormalizedError(current)
        if not is_cancellation_token(current) or id(current) in seen:
            return TypeMismatchError(obj)
        seen.add(id(current))
        try:
            if not current.cancelled:  # type: ignore[attr-defined]
                return TypeMismatchError(obj)
            reason = current.reason  # type: ignore[attr-defined]
        except Exception:
            return TypeMismatchError(obj)
        if reason is None:
            return OperationCancelledError()
        current = reason


def cancellation_error(reason: object) -> BaseException:
    """Normalize the reason of a token already known to be cancelled."""
    return OperationCancelledError() if reason is None else normalize_error(reason)
