"""attempt - immutable outcome values for fallible Python callables.

Run a callable that may raise (sync) or reject (async) and get back a frozen
``AttemptResult`` instead of an exception. Each result can be read by name or
destructured like a ``(value, error, ok)`` tuple.

Quick Start:
    >>> import json
    >>> from attempt import attempt_sync, succeed, fail
    >>>
    >>> value, error, ok = attempt_sync(json.loads, '{"a": 1}')
    >>> value, error, ok
    ({'a': 1}, None, True)
    >>>
    >>> result = attempt_sync(json.loads, "{bad")
    >>> result.ok, type(result.error).__name__
    (False, 'JSONDecodeError')

Async:
    >>> from attempt import attempt_async, attempt_all
    >>> result = await attempt_async(fetch_user, 42)
    >>> chained = await attempt_all(lambda: "a", lambda v: v + "b")  # Succeeded('ab')

Dispatch with cooperative cancellation:
    >>> from attempt import CancelToken, handle_result_sync
    >>> token = CancelToken(timeout=2.0)
    >>> handle_result_sync(result, on_failure=lambda e: None, token=token)
"""

from __future__ import annotations

__version__ = "0.4.0"

# Errors
from .errors import (
    AttemptError,
    ErrorCode,
    ErrorInfo,
    InvalidAccessError,
    InvalidInputError,
    NormalizedError,
    OperationCancelledError,
    OperationTimeoutError,
    TypeMismatchError,
    classify_exception,
    normalize_error,
)

# Cancellation
from .cancellation import CancellationToken, CancelToken

# Results
from .result import (
    FAILED,
    SUCCEEDED,
    AttemptResult,
    OutcomeReport,
    Status,
    describe,
    fail,
    failed,
    get_attempt_status,
    get_result_error,
    get_result_value,
    is_attempt_result,
    succeed,
    succeeded,
    throw_if_failed,
)

# Runtime
from .runtime import (
    attempt,
    attempt_all,
    attempt_all_sync,
    attempt_async,
    attempt_sync,
    create_safe_async_callback,
    create_safe_callback,
    create_safe_sync_callback,
    handle_result_async,
    handle_result_sync,
)

# Settings
from .config import AttemptSettings, clear_settings_cache, get_settings

__all__ = [
    "__version__",
    # Errors
    "AttemptError", "InvalidInputError", "InvalidAccessError", "NormalizedError",
    "TypeMismatchError", "OperationCancelledError", "OperationTimeoutError",
    "ErrorCode", "ErrorInfo", "classify_exception", "normalize_error",
    # Cancellation
    "CancellationToken", "CancelToken",
    # Results
    "AttemptResult", "Status", "SUCCEEDED", "FAILED", "succeed", "fail",
    "is_attempt_result", "succeeded", "failed",
    "get_result_value", "get_result_error", "get_attempt_status", "throw_if_failed",
    "OutcomeReport", "describe",
    # Runtime
    "attempt_sync", "attempt_async", "attempt",
    "create_safe_sync_callback", "create_safe_async_callback", "create_safe_callback",
    "handle_result_sync", "handle_result_async",
    "attempt_all", "attempt_all_sync",
    # Settings
    "AttemptSettings", "get_settings", "clear_settings_cache",
]
