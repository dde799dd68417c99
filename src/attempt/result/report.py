"""Serializable snapshots of results for logs and API payloads."""

from __future__ import annotations

import reprlib
from typing import TYPE_CHECKING, Any, Literal

from pydantic import BaseModel

from ..config import get_settings
from ..errors import ErrorInfo

if TYPE_CHECKING:
    from .result import AttemptResult


class OutcomeReport(BaseModel):
    """Frozen, JSON-friendly view of an AttemptResult.

    ``value`` is a (possibly truncated) repr, never the live object.
    """

    model_config = {"frozen": True}

    status: Literal["succeeded", "failed"]
    ok: bool
    value: str | None = None
    error: ErrorInfo | None = None

    def render(self) -> str:
        if self.ok:
            return f"succeeded: {self.value}"
        return f"failed: {self.error.render() if self.error else 'unknown error'}"

    __str__ = render


def describe(
    result: AttemptResult[Any],
    *,
    include_traceback: bool | None = None,
    max_value_length: int | None = None,
) -> OutcomeReport:
    """Build an OutcomeReport; unset options fall back to ReportSettings."""
    settings = get_settings().report
    if include_traceback is None:
        include_traceback = settings.include_traceback
    if result.ok:
        shortener = reprlib.Repr()
        shortener.maxstring = shortener.maxother = max_value_length or settings.max_value_length
        return OutcomeReport(status="succeeded", ok=True, value=shortener.repr(result.value))
    return OutcomeReport(
        status="failed",
        ok=False,
        error=ErrorInfo.from_exception(result.error, include_trace=include_traceback),  # type: ignore[arg-type]
    )
