"""Cooperative cancellation tokens.

The dispatcher and the normalizer only rely on the ``CancellationToken``
protocol: a boolean ``cancelled`` and a ``reason`` (string, exception or None).
Any object with that shape qualifies, whatever mechanism drives it.

``CancelToken`` is the bundled implementation:

    >>> token = CancelToken()
    >>> token.cancelled
    False
    >>> token.cancel("user left")
    >>> token.cancelled, token.reason
    (True, 'user left')

    >>> expiring = CancelToken(timeout=5.0)  # cancelled 5s after creation
"""

from __future__ import annotations

import inspect
import time
from dataclasses import dataclass, field
from typing import Protocol, Self, runtime_checkable

from .errors.errors import OperationCancelledError, OperationTimeoutError

Reason = BaseException | str | None

_TOKEN_ATTRS = ("cancelled", "reason")
_MISSING = object()


@runtime_checkable
class CancellationToken(Protocol):
    """Capability consulted once at dispatch entry."""

    @property
    def cancelled(self) -> bool: ...

    @property
    def reason(self) -> Reason: ...


def is_cancellation_token(obj: object) -> bool:
    """Structural check against CancellationToken. Strings and exceptions never qualify.

    Uses static lookup so properties such as ``cancelled`` are not evaluated.
    """
    if isinstance(obj, (str, BaseException)):
        return False
    return all(inspect.getattr_static(obj, name, _MISSING) is not _MISSING for name in _TOKEN_ATTRS)


@dataclass(slots=True)
class CancelToken:
    """Manually cancellable token with an optional deadline.

    Once cancelled (explicitly or by the deadline passing) it stays cancelled
    and its reason never changes.

    Args:
        timeout: Seconds from creation after which the token reports cancelled
            with an ``OperationTimeoutError`` reason. None disables the deadline.
    """

    timeout: float | None = None
    _reason: Reason = field(default=None, repr=False)
    _cancelled: bool = field(default=False, repr=False)
    _deadline: float | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.timeout is not None:
            if self.timeout < 0:
                raise ValueError("timeout must be non-negative")
            self._deadline = time.monotonic() + self.timeout

    @classmethod
    def cancelled_with(cls, reason: Reason = None) -> Self:
        """Create a token that is already cancelled."""
        token = cls()
        token.cancel(reason)
        return token

    def _poll(self) -> bool:
        if not self._cancelled and self._deadline is not None and time.monotonic() >= self._deadline:
            self._cancelled, self._reason = True, OperationTimeoutError()
        return self._cancelled

    @property
    def cancelled(self) -> bool:
        """Whether cancellation was requested or the deadline has passed."""
        return self._poll()

    @property
    def reason(self) -> Reason:
        """Why the token was cancelled; None while it is still active."""
        return self._reason if self._poll() else None

    def cancel(self, reason: Reason = None) -> None:
        """Request cancellation. Later calls are no-ops."""
        if self._poll():
            return
        self._cancelled = True
        self._reason = OperationCancelledError() if reason is None else reason

    def throw_if_cancelled(self) -> None:
        """Raise the normalized reason if the token is cancelled."""
        if self.cancelled:
            from .errors.normalize import normalize_error
            raise normalize_error(self)
