"""Outcome type: constructors, predicates, accessors and reports."""

from .report import OutcomeReport, describe
from .result import (
    FAILED,
    SUCCEEDED,
    AttemptResult,
    Status,
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

__all__ = [
    # Core type
    "AttemptResult", "Status", "SUCCEEDED", "FAILED",
    # Constructors
    "succeed", "fail",
    # Predicates & accessors
    "is_attempt_result", "succeeded", "failed",
    "get_result_value", "get_result_error", "get_attempt_status", "throw_if_failed",
    # Reporting
    "OutcomeReport", "describe",
]
