"""Tests for call_with_retry."""

import pydantic
import pytest

from pipe_eval.config.domain.gateway import RetryConfig
from pipe_eval.core.errors import PipeEvalError
from pipe_eval.core.retry import call_with_retry

_NO_BACKOFF = RetryConfig(max_attempts=3, initial_backoff_seconds=0.0)


class _Flaky:
    """Raises the queued errors in order, then returns "ok"."""

    def __init__(self, errors: list[Exception]) -> None:
        self._errors = list(errors)
        self.calls = 0

    async def __call__(self) -> str:
        self.calls += 1
        if self._errors:
            raise self._errors.pop(0)
        return "ok"


class TestCallWithRetry:
    async def test_success_first_try(self) -> None:
        operation = _Flaky([])
        retries: list[tuple[int, str, float]] = []

        result = await call_with_retry(
            operation, retry=_NO_BACKOFF, on_retry=lambda *a: retries.append(a)
        )

        assert result == "ok"
        assert operation.calls == 1
        assert retries == []

    async def test_retriable_error_is_retried(self) -> None:
        operation = _Flaky([PipeEvalError("rate limited", retriable=True)])
        retries: list[tuple[int, str, float]] = []

        result = await call_with_retry(
            operation, retry=_NO_BACKOFF, on_retry=lambda *a: retries.append(a)
        )

        assert result == "ok"
        assert operation.calls == 2
        assert retries == [(1, "rate limited", 0.0)]

    async def test_non_retriable_error_raises_immediately(self) -> None:
        operation = _Flaky([PipeEvalError("bad request")])

        with pytest.raises(PipeEvalError, match="bad request"):
            await call_with_retry(operation, retry=_NO_BACKOFF, on_retry=lambda *a: None)

        assert operation.calls == 1

    async def test_gives_up_after_max_attempts(self) -> None:
        operation = _Flaky([PipeEvalError(f"fail {i}", retriable=True) for i in range(5)])

        with pytest.raises(PipeEvalError, match="fail 2"):
            await call_with_retry(operation, retry=_NO_BACKOFF, on_retry=lambda *a: None)

        assert operation.calls == 3

    async def test_other_exceptions_are_not_retried(self) -> None:
        operation = _Flaky([RuntimeError("bug")])

        with pytest.raises(RuntimeError):
            await call_with_retry(operation, retry=_NO_BACKOFF, on_retry=lambda *a: None)

        assert operation.calls == 1

    async def test_backoff_grows_by_multiplier(self, monkeypatch: pytest.MonkeyPatch) -> None:
        slept: list[float] = []

        async def _fake_sleep(seconds: float) -> None:
            slept.append(seconds)

        monkeypatch.setattr("pipe_eval.core.retry.asyncio.sleep", _fake_sleep)
        operation = _Flaky(
            [PipeEvalError("a", retriable=True), PipeEvalError("b", retriable=True)]
        )
        retry = RetryConfig(max_attempts=3, initial_backoff_seconds=1.0, backoff_multiplier=2.0)

        await call_with_retry(operation, retry=retry, on_retry=lambda *a: None)

        assert slept == [1.0, 2.0]

    async def test_single_attempt_never_retries(self) -> None:
        operation = _Flaky([PipeEvalError("rate limited", retriable=True)])
        retry = RetryConfig(max_attempts=1, initial_backoff_seconds=0.0)

        with pytest.raises(PipeEvalError, match="rate limited"):
            await call_with_retry(operation, retry=retry, on_retry=lambda *a: None)

        assert operation.calls == 1

    def test_retry_config_requires_an_attempt(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            RetryConfig(max_attempts=0)
