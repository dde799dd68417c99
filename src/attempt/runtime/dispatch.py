"""Dispatch an AttemptResult to a success or failure handler.

The chosen handler runs through the matching executor, so dispatching always
returns a new AttemptResult and can be chained:

    >>> parsed = attempt_sync(int, "42")
    >>> doubled = handle_result_sync(parsed, on_success=lambda n: n * 2)
    >>> doubled.value
    84

A cancelled token short-circuits before either handler runs:

    >>> token = CancelToken.cancelled_with("shutting down")
    >>> handle_result_sync(succeed(1), token=token).ok
    False
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from ..cancellation import is_cancellation_token
from ..errors import InvalidInputError, TypeMismatchError, cancellation_error
from ..result import AttemptResult, Status, fail
from .executor import attempt_async, attempt_sync, require_callable, require_sync_callable

if TYPE_CHECKING:
    from collections.abc import Awaitable

    from ..cancellation import CancellationToken

T = TypeVar("T")
U = TypeVar("U")

logger = logging.getLogger("attempt.runtime.dispatch")


def _pass_value(value: T) -> T:
    return value


def _check(
    result: object,
    on_success: object,
    on_failure: object,
    token: object,
    *,
    sync: bool,
) -> None:
    if not isinstance(result, AttemptResult):
        raise InvalidInputError(f"result must be an AttemptResult, got {type(result).__name__}.")
    require = require_sync_callable if sync else require_callable
    for name, handler in (("on_success", on_success), ("on_failure", on_failure)):
        if handler is not None:
            require(handler, name)
    if token is not None and not is_cancellation_token(token):
        raise InvalidInputError(f"token must expose 'cancelled' and 'reason', got {type(token).__name__}.")


def _cancelled(token: CancellationToken | None) -> AttemptResult[Any] | None:
    """Consult the token once; a failed result if it is cancelled or unreadable."""
    if token is None:
        return None
    try:
        if not token.cancelled:
            return None
        reason = token.reason
    except Exception:
        outcome = fail(TypeMismatchError(token))
    else:
        outcome = fail(cancellation_error(reason))
    logger.debug("dispatch skipped, token cancelled: %r", outcome.error)
    return outcome


def handle_result_sync(
    result: AttemptResult[T],
    *,
    on_success: Callable[[T], U] | None = None,
    on_failure: Callable[[BaseException], U] | None = None,
    token: CancellationToken | None = None,
) -> AttemptResult[U]:
    """Run ``on_success(value)`` or ``on_failure(error)`` through attempt_sync.

    Args:
        result: Result to dispatch on
        on_success: Handler for a succeeded result; defaults to identity
        on_failure: Handler for a failed result; defaults to returning
            ``result`` itself, so the error object is never re-raised
        token: Cancellation token checked once before dispatching

    Raises:
        InvalidInputError: Non-result input, non-callable or async handler, or malformed token
    """
    _check(result, on_success, on_failure, token, sync=True)
    if (cancelled := _cancelled(token)) is not None:
        return cancelled
    if result.status is Status.SUCCEEDED:
        return attempt_sync(_pass_value if on_success is None else on_success, result.value)  # type: ignore[arg-type]
    if on_failure is None:
        return result  # type: ignore[return-value]
    return attempt_sync(on_failure, result.error)  # type: ignore[arg-type]


async def handle_result_async(
    result: AttemptResult[T],
    *,
    on_success: Callable[[T], Awaitable[U] | U] | None = None,
    on_failure: Callable[[BaseException], Awaitable[U] | U] | None = None,
    token: CancellationToken | None = None,
) -> AttemptResult[U]:
    """Async analogue of handle_result_sync; handlers may be sync or async.

    Precondition violations raise InvalidInputError when awaited.
    """
    _check(result, on_success, on_failure, token, sync=False)
    if (cancelled := _cancelled(token)) is not None:
        return cancelled
    if result.status is Status.SUCCEEDED:
        return await attempt_async(_pass_value if on_success is None else on_success, result.value)  # type: ignore[arg-type]
    if on_failure is None:
        return result  # type: ignore[return-value]
    return await attempt_async(on_failure, result.error)  # type: ignore[arg-type]
