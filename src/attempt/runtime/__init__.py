"""Runtime: executors, safe callbacks, dispatch and sequential composition."""

from .dispatch import handle_result_async, handle_result_sync
from .executor import (
    attempt,
    attempt_async,
    attempt_sync,
    create_safe_async_callback,
    create_safe_callback,
    create_safe_sync_callback,
    is_async_callable,
)
from .sequence import attempt_all, attempt_all_sync

__all__ = [
    # Executors
    "attempt_sync", "attempt_async", "attempt", "is_async_callable",
    # Safe callbacks
    "create_safe_sync_callback", "create_safe_async_callback", "create_safe_callback",
    # Dispatch
    "handle_result_sync", "handle_result_async",
    # Composition
    "attempt_all", "attempt_all_sync",
]
