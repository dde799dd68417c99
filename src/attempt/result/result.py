"""Immutable outcome of a fallible operation.

An ``AttemptResult`` is a discriminated union with a visible ``status`` field:
- succeeded: ``value`` is meaningful, ``error`` is None
- failed: ``error`` holds a canonical exception, ``value`` is None

Two equivalent views over the same three fields:
- named: ``.status``, ``.value``, ``.error``, ``.ok``
- positional: ``result[0]``/``[1]``/``[2]`` = value/error/ok, so
  ``value, error, ok = result`` destructures like a tuple
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Generic, TypeGuard, TypeVar

from ..errors import InvalidAccessError, InvalidInputError, normalize_error

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .report import OutcomeReport

T = TypeVar("T")


class Status(Enum):
    """Result discriminant. Plain Enum so members never compare equal to strings."""

    SUCCEEDED = "succeeded"
    FAILED = "failed"

    def __repr__(self) -> str:
        return f"{type(self).__name__}.{self.name}"


SUCCEEDED = Status.SUCCEEDED
FAILED = Status.FAILED


@dataclass(frozen=True, slots=True)
class AttemptResult(Generic[T]):
    """Succeeded or failed outcome, frozen at construction.

    Build through ``succeed()``, ``fail()`` or an executor, not directly.

    Examples:
        >>> result = succeed(5)
        >>> result.ok, result.value, result.status
        (True, 5, Status.SUCCEEDED)
        >>> value, error, ok = fail("boom")
        >>> value, str(error), ok
        (None, 'boom', False)

        Pattern matching:
        >>> match succeed("x"):
        ...     case AttemptResult(value, None, True):
        ...         print(value)
        x
    """

    status: Status
    value: T | None = None
    error: BaseException | None = None

    __match_args__ = ("value", "error", "ok")

    def __post_init__(self) -> None:
        if self.status is Status.SUCCEEDED:
            if self.error is not None:
                raise InvalidInputError("A succeeded result cannot carry an error.")
        elif self.status is Status.FAILED:
            if not isinstance(self.error, BaseException):
                raise InvalidInputError("A failed result must carry an exception.")
            if self.value is not None:
                raise InvalidInputError("A failed result cannot carry a value.")
        else:
            raise InvalidInputError(f"Unknown status: {self.status!r}")

    # ─── Named View ──────────────────────────────────────────────────

    @property
    def ok(self) -> bool:
        """True for a succeeded result."""
        return self.status is Status.SUCCEEDED

    # ─── Positional View ─────────────────────────────────────────────

    def __len__(self) -> int:
        return 3

    def __getitem__(self, index: Any) -> Any:
        """Tuple semantics over ``(value, error, ok)``, slices included."""
        return (self.value, self.error, self.ok)[index]

    def __iter__(self) -> Iterator[Any]:
        yield self.value
        yield self.error
        yield self.ok

    # ─── Extraction ──────────────────────────────────────────────────

    def unwrap(self) -> T:
        """Value of a succeeded result. Raises InvalidAccessError on failure."""
        return get_result_value(self)

    def unwrap_err(self) -> BaseException:
        """Error of a failed result. Raises InvalidAccessError on success."""
        return get_result_error(self)

    def raise_if_failed(self) -> AttemptResult[T]:
        """Raise the carried error when failed, otherwise return self."""
        return throw_if_failed(self)

    def describe(self) -> OutcomeReport:
        """Serializable report of this result."""
        from .report import describe
        return describe(self)

    # ─── Dunder Methods ──────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self.ok

    def __repr__(self) -> str:
        if self.ok:
            return f"Succeeded({self.value!r})"
        return f"Failed({self.error!r})"


# ═════════════════════════════════════════════════════════════════════════════
# Constructors
# ═════════════════════════════════════════════════════════════════════════════


def succeed(value: T) -> AttemptResult[T]:
    """Wrap ``value`` as a succeeded result.

    An existing result (of either status) is returned unchanged.
    """
    if isinstance(value, AttemptResult):
        return value
    return AttemptResult(Status.SUCCEEDED, value, None)


def fail(err: object) -> AttemptResult[Any]:
    """Wrap ``err`` as a failed result, normalizing it into an exception.

    An existing result (of either status) is returned unchanged; the check
    happens before normalization.
    """
    if isinstance(err, AttemptResult):
        return err
    return AttemptResult(Status.FAILED, None, normalize_error(err))


# ═════════════════════════════════════════════════════════════════════════════
# Predicates & Accessors
# ═════════════════════════════════════════════════════════════════════════════


def is_attempt_result(obj: object) -> TypeGuard[AttemptResult[Any]]:
    return isinstance(obj, AttemptResult)


def succeeded(obj: object) -> TypeGuard[AttemptResult[Any]]:
    return isinstance(obj, AttemptResult) and obj.status is Status.SUCCEEDED


def failed(obj: object) -> TypeGuard[AttemptResult[Any]]:
    return isinstance(obj, AttemptResult) and obj.status is Status.FAILED


def get_result_value(result: AttemptResult[T]) -> T:
    """Value of a succeeded result.

    Raises:
        InvalidAccessError: If ``result`` is not a succeeded result
    """
    if not succeeded(result):
        raise InvalidAccessError(f"Cannot read the value of {_describe_input(result)}.")
    return result.value  # type: ignore[return-value]


def get_result_error(result: AttemptResult[Any]) -> BaseException:
    """Error of a failed result.

    Raises:
        InvalidAccessError: If ``result`` is not a failed result
    """
    if not failed(result):
        raise InvalidAccessError(f"Cannot read the error of {_describe_input(result)}.")
    return result.error  # type: ignore[return-value]


def get_attempt_status(result: AttemptResult[Any]) -> Status:
    """Discriminant of a result.

    Raises:
        InvalidAccessError: If ``result`` is not an AttemptResult
    """
    if not isinstance(result, AttemptResult):
        raise InvalidAccessError(f"Cannot read the status of {_describe_input(result)}.")
    return result.status


def throw_if_failed(result: AttemptResult[T]) -> AttemptResult[T]:
    """Raise the error of a failed result; return a succeeded one unchanged.

    Raises:
        InvalidInputError: If ``result`` is not an AttemptResult (e.g. an un-awaited coroutine)
        BaseException: The carried error, if ``result`` failed
    """
    if not isinstance(result, AttemptResult):
        raise InvalidInputError(f"Expected an AttemptResult, got {type(result).__name__}.")
    if result.status is Status.FAILED:
        raise result.error  # type: ignore[misc]
    return result


def _describe_input(obj: object) -> str:
    if isinstance(obj, AttemptResult):
        return f"a {obj.status.value} result"
    return f"a non-result {type(obj).__name__}"
