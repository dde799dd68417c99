"""Executors: run a callable and turn its return or raise into an AttemptResult.

    - attempt_sync: synchronous callables only
    - attempt_async: sync callables, coroutine functions, anything returning an awaitable
    - create_safe_sync_callback / create_safe_async_callback: wrap a callable
      so every call goes through the matching executor

Only ``Exception`` subclasses are captured. KeyboardInterrupt, SystemExit and
asyncio.CancelledError propagate, so task cancellation keeps working.

Example:
    >>> import json
    >>> attempt_sync(json.loads, '{"a": 1}')
    Succeeded({'a': 1})
    >>> attempt_sync(json.loads, "{bad").ok
    False

    >>> parse = create_safe_async_callback(json.loads)
    >>> value, error, ok = await parse("[1, 2]")
"""

from __future__ import annotations

import functools
import inspect
import logging
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar

from ..config import get_settings
from ..errors import InvalidInputError
from ..result import AttemptResult, fail, succeed

if TYPE_CHECKING:
    from collections.abc import Awaitable, Coroutine

P = ParamSpec("P")
T = TypeVar("T")

logger = logging.getLogger("attempt.runtime")


# ─────────────────────────────────────────────────────────────────────────────
# Preconditions
# ─────────────────────────────────────────────────────────────────────────────

def is_async_callable(fn: object) -> bool:
    """Whether calling ``fn`` is declared to produce a coroutine or async generator."""
    if inspect.iscoroutinefunction(fn) or inspect.isasyncgenfunction(fn):
        return True
    # callable instances declare it on their class
    call = getattr(type(fn), "__call__", None)
    return inspect.iscoroutinefunction(call) or inspect.isasyncgenfunction(call)


def require_callable(fn: object, name: str = "callback") -> None:
    if not callable(fn):
        raise InvalidInputError(f"{name} must be callable, got {type(fn).__name__}.")


def require_sync_callable(fn: object, name: str = "callback") -> None:
    require_callable(fn, name)
    if is_async_callable(fn):
        raise InvalidInputError(f"{name} cannot be an async callable; use the async variant.")


def _label(fn: object) -> str:
    return getattr(fn, "__qualname__", None) or repr(fn)


def _log_failure(fn: object, exc: Exception) -> None:
    settings = get_settings().logging
    if settings.log_failures:
        logger.log(
            logging.getLevelName(settings.failure_level),
            "%s raised %s: %s", _label(fn), type(exc).__name__, exc,
        )


# ─────────────────────────────────────────────────────────────────────────────
# Executors
# ─────────────────────────────────────────────────────────────────────────────

def attempt_sync(fn: Callable[P, T], /, *args: P.args, **kwargs: P.kwargs) -> AttemptResult[T]:
    """Call ``fn(*args, **kwargs)`` and capture the outcome.

    Returns:
        Succeeded result with the return value (an AttemptResult return value is
        adopted as-is), or a failed result with the raised exception

    Raises:
        InvalidInputError: If ``fn`` is not callable or is an async callable
    """
    require_sync_callable(fn)
    try:
        value = fn(*args, **kwargs)
    except Exception as exc:
        _log_failure(fn, exc)
        return fail(exc)
    return succeed(value)


async def attempt_async(
    fn: Callable[P, Awaitable[T] | T],
    /,
    *args: P.args,
    **kwargs: P.kwargs,
) -> AttemptResult[T]:
    """Call ``fn(*args, **kwargs)``, await the return value if awaitable, capture the outcome.

    A synchronous raise and a raise while awaiting produce the same failed result.
    The call runs inline on the current event loop.

    Raises:
        InvalidInputError: If ``fn`` is not callable (raised when awaited)
    """
    require_callable(fn)
    try:
        value = fn(*args, **kwargs)
        if inspect.isawaitable(value):
            value = await value
    except Exception as exc:
        _log_failure(fn, exc)
        return fail(exc)
    return succeed(value)  # type: ignore[arg-type]


# ─────────────────────────────────────────────────────────────────────────────
# Safe-Callback Factories
# ─────────────────────────────────────────────────────────────────────────────

def create_safe_sync_callback(fn: Callable[P, T]) -> Callable[P, AttemptResult[T]]:
    """Wrap ``fn`` so each call returns an AttemptResult instead of raising.

    Usable as a decorator. Raises InvalidInputError right away for a
    non-callable or async ``fn``.
    """
    require_sync_callable(fn)

    @functools.wraps(fn)
    def safe(*args: P.args, **kwargs: P.kwargs) -> AttemptResult[T]:
        return attempt_sync(fn, *args, **kwargs)

    return safe


def create_safe_async_callback(
    fn: Callable[P, Awaitable[T] | T],
) -> Callable[P, Coroutine[Any, Any, AttemptResult[T]]]:
    """Async analogue of create_safe_sync_callback; accepts sync or async ``fn``."""
    require_callable(fn)

    @functools.wraps(fn)
    async def safe(*args: P.args, **kwargs: P.kwargs) -> AttemptResult[T]:
        return await attempt_async(fn, *args, **kwargs)

    return safe


attempt = attempt_async
create_safe_callback = create_safe_async_callback
