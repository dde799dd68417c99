"""Tests for result dispatch and cancellation short-circuiting."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from attempt import (
    CancelToken,
    InvalidInputError,
    NormalizedError,
    OperationCancelledError,
    TypeMismatchError,
    fail,
    handle_result_async,
    handle_result_sync,
    succeed,
    throw_if_failed,
)


class CountingToken:
    """Token that records how often it is consulted."""

    def __init__(self, cancelled: bool, reason: object = None) -> None:
        self._cancelled = cancelled
        self.reason = reason
        self.checks = 0

    @property
    def cancelled(self) -> bool:
        self.checks += 1
        return self._cancelled


class CountingCancelToken(CancelToken):
    """CancelToken that records reads of its public ``cancelled`` property."""

    checks = 0

    @property
    def cancelled(self) -> bool:
        self.checks += 1
        return CancelToken.cancelled.fget(self)  # type: ignore[attr-defined]


class UnreadableToken:
    reason = "never read"

    @property
    def cancelled(self) -> bool:
        raise RuntimeError("broken")


def unexpected(_: object) -> None:
    raise AssertionError("wrong branch invoked")


# ═════════════════════════════════════════════════════════════════════════════
# Synchronous Dispatch
# ═════════════════════════════════════════════════════════════════════════════


def test_sync_success_branch() -> None:
    result = handle_result_sync(succeed(21), on_success=lambda n: n * 2, on_failure=unexpected)
    assert result.value == 42


def test_sync_failure_branch() -> None:
    seen: list[BaseException] = []
    error = TypeError("Failed results should be handled by failure handler.")

    result = handle_result_sync(fail(error), on_success=unexpected, on_failure=seen.append)

    assert seen == [error]
    assert result.ok
    assert result.value is None


def test_sync_default_success_is_identity() -> None:
    assert handle_result_sync(succeed("value")).value == "value"


def test_sync_default_failure_returns_input() -> None:
    error = ValueError("unhandled")
    failure = fail(error)
    result = handle_result_sync(failure)

    assert result is failure
    assert result.error is error
    assert error.__traceback__ is None
    with pytest.raises(ValueError):
        throw_if_failed(result)


@pytest.mark.parametrize("error", [SystemExit(3), KeyboardInterrupt()])
def test_sync_default_failure_keeps_base_exceptions(error: BaseException) -> None:
    result = handle_result_sync(fail(error))

    assert not result.ok
    assert result.error is error


def test_sync_handler_raise_becomes_failure() -> None:
    def explode(_: object) -> None:
        raise RuntimeError("handler broke")

    result = handle_result_sync(succeed(1), on_success=explode)
    assert isinstance(result.error, RuntimeError)


def test_sync_handler_may_return_failure() -> None:
    result = handle_result_sync(succeed(-1), on_success=lambda n: fail("negative") if n < 0 else n)
    assert isinstance(result.error, NormalizedError)


def test_sync_chaining() -> None:
    first = handle_result_sync(succeed(1), on_success=lambda n: n + 1)
    second = handle_result_sync(first, on_success=lambda n: n * 10)
    assert second.value == 20


@pytest.mark.parametrize("bad", [["invalid"], None, (1, None, True)])
def test_sync_rejects_non_results(bad: object) -> None:
    with pytest.raises(InvalidInputError):
        handle_result_sync(bad)  # type: ignore[arg-type]


def test_sync_rejects_bad_handlers() -> None:
    async def async_handler(_: object) -> None:
        return None

    with pytest.raises(InvalidInputError):
        handle_result_sync(succeed(1), on_success="nope")  # type: ignore[arg-type]
    with pytest.raises(InvalidInputError):
        handle_result_sync(succeed(1), on_failure=42)  # type: ignore[arg-type]
    with pytest.raises(InvalidInputError):
        handle_result_sync(succeed(1), on_success=async_handler)


def test_sync_rejects_malformed_token() -> None:
    with pytest.raises(InvalidInputError):
        handle_result_sync(succeed(1), token="cancelled")  # type: ignore[arg-type]


# ═════════════════════════════════════════════════════════════════════════════
# Cancellation
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.parametrize("result", [succeed("fine"), fail("already failed")])
def test_cancelled_token_short_circuits(result: object) -> None:
    called: list[str] = []
    token = CancelToken.cancelled_with("shutting down")

    out = handle_result_sync(
        result,  # type: ignore[arg-type]
        on_success=lambda _: called.append("success"),
        on_failure=lambda _: called.append("failure"),
        token=token,
    )

    assert not out.ok
    assert str(out.error) == "shutting down"
    assert called == []


def test_cancelled_token_default_reason() -> None:
    out = handle_result_sync(succeed(1), token=CancelToken.cancelled_with())
    assert isinstance(out.error, OperationCancelledError)


def test_active_token_lets_dispatch_proceed() -> None:
    token = CancelToken()
    assert handle_result_sync(succeed(1), on_success=lambda n: n + 1, token=token).value == 2


def test_token_checked_exactly_once() -> None:
    token = CountingToken(cancelled=False)

    handle_result_sync(succeed(1), token=token)  # type: ignore[arg-type]

    assert token.checks == 1


def test_token_cancelled_during_handler_is_ignored() -> None:
    token = CancelToken()

    def cancel_midway(n: int) -> int:
        token.cancel("too late")
        return n

    assert handle_result_sync(succeed(3), on_success=cancel_midway, token=token).value == 3


def test_bundled_token_cancelled_read_once() -> None:
    token = CountingCancelToken.cancelled_with("stop")

    out = handle_result_sync(succeed(1), on_success=unexpected, token=token)

    assert str(out.error) == "stop"
    assert token.checks == 1


@pytest.mark.parametrize("result", [succeed(1), fail("x")])
def test_unreadable_token_fails_closed(result: object) -> None:
    token = UnreadableToken()

    out = handle_result_sync(result, on_success=unexpected, on_failure=unexpected, token=token)  # type: ignore[arg-type]

    assert isinstance(out.error, TypeMismatchError)
    assert out.error.received is token


def test_foreign_token() -> None:
    out = handle_result_sync(succeed(1), token=SimpleNamespace(cancelled=True, reason=KeyError("k")))  # type: ignore[arg-type]
    assert isinstance(out.error, KeyError)


# ═════════════════════════════════════════════════════════════════════════════
# Asynchronous Dispatch
# ═════════════════════════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_async_success_with_async_handler() -> None:
    async def double(n: int) -> int:
        return n * 2

    result = await handle_result_async(succeed(4), on_success=double, on_failure=unexpected)
    assert result.value == 8


@pytest.mark.asyncio
async def test_async_failure_with_sync_handler() -> None:
    result = await handle_result_async(fail("x"), on_success=unexpected, on_failure=lambda e: str(e))
    assert result.value == "x"


@pytest.mark.asyncio
async def test_async_default_failure_returns_input() -> None:
    error = LookupError("missing")
    failure = fail(error)
    result = await handle_result_async(failure)

    assert result is failure
    assert result.error is error
    with pytest.raises(LookupError):
        throw_if_failed(result)


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [SystemExit(3), KeyboardInterrupt()])
async def test_async_default_failure_keeps_base_exceptions(error: BaseException) -> None:
    result = await handle_result_async(fail(error))

    assert not result.ok
    assert result.error is error


@pytest.mark.asyncio
async def test_async_handler_rejection_becomes_failure() -> None:
    async def reject(_: object) -> None:
        raise ConnectionError("down")

    result = await handle_result_async(succeed(1), on_success=reject)
    assert isinstance(result.error, ConnectionError)


@pytest.mark.asyncio
async def test_async_precondition_violations() -> None:
    with pytest.raises(InvalidInputError):
        await handle_result_async(["invalid"])  # type: ignore[arg-type]
    with pytest.raises(InvalidInputError):
        await handle_result_async(succeed(1), on_success=None, on_failure="nope")  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_async_cancelled_token() -> None:
    token = CountingToken(cancelled=True, reason="stop")

    result = await handle_result_async(succeed(1), on_success=unexpected, token=token)  # type: ignore[arg-type]

    assert not result.ok
    assert str(result.error) == "stop"
    assert token.checks == 1


@pytest.mark.asyncio
async def test_async_unreadable_token_fails_closed() -> None:
    out = await handle_result_async(succeed(1), on_success=unexpected, token=UnreadableToken())  # type: ignore[arg-type]
    assert isinstance(out.error, TypeMismatchError)
