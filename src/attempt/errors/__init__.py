"""Error taxonomy, classification and normalization.

- AttemptError: base of every library exception
- InvalidInputError/InvalidAccessError: caller defects, always raised
- NormalizedError/TypeMismatchError/OperationCancelledError: failure payloads
- ErrorCode/ErrorInfo: machine-readable classification and snapshots
- normalize_error: any failure value -> exception instance
"""

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
)
from .normalize import cancellation_error, normalize_error

__all__ = [
    # Exceptions
    "AttemptError", "InvalidInputError", "InvalidAccessError",
    "NormalizedError", "TypeMismatchError", "OperationCancelledError", "OperationTimeoutError",
    # Classification
    "ErrorCode", "ErrorInfo", "classify_exception",
    # Normalization
    "normalize_error", "cancellation_error",
]
