"""Sequential composition: pipe each step's value into the next, stop at the first failure.

    >>> result = await attempt_all(lambda: "a", lambda v: v + "b")
    >>> result.value
    'ab'

Steps run strictly one at a time, left to right. A step returning an
AttemptResult has it adopted unchanged, so returning ``fail(...)`` stops the
chain like raising does.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from ..result import AttemptResult, succeed
from .executor import attempt_async, attempt_sync, require_callable, require_sync_callable

logger = logging.getLogger("attempt.runtime.sequence")

# Marks "no initial value": the first step is then called without arguments
_EMPTY: Any = object()


def _seed(initial: object) -> AttemptResult[Any]:
    return succeed(None if initial is _EMPTY else initial)


async def attempt_all(*fns: Callable[..., Any], initial: Any = _EMPTY) -> AttemptResult[Any]:
    """Run ``fns`` in order through attempt_async.

    Args:
        *fns: Steps; each receives the previous step's value
        initial: Value passed to the first step. When omitted the first step
            is called with no arguments

    Returns:
        The last step's succeeded result, the first failed result, or the
        seed when ``fns`` is empty

    Raises:
        InvalidInputError: If any step is not callable (checked before running any)
    """
    for index, fn in enumerate(fns):
        require_callable(fn, f"step {index}")

    outcome = _seed(initial)
    for index, fn in enumerate(fns):
        if not outcome.ok:
            logger.debug("sequence stopped before step %d of %d", index, len(fns))
            break
        if index == 0 and initial is _EMPTY:
            outcome = await attempt_async(fn)
        else:
            outcome = await attempt_async(fn, outcome.value)
    return outcome


def attempt_all_sync(*fns: Callable[..., Any], initial: Any = _EMPTY) -> AttemptResult[Any]:
    """Synchronous twin of attempt_all; async steps are rejected up front."""
    for index, fn in enumerate(fns):
        require_sync_callable(fn, f"step {index}")

    outcome = _seed(initial)
    for index, fn in enumerate(fns):
        if not outcome.ok:
            logger.debug("sequence stopped before step %d of %d", index, len(fns))
            break
        if index == 0 and initial is _EMPTY:
            outcome = attempt_sync(fn)
        else:
            outcome = attempt_sync(fn, outcome.value)
    return outcome
