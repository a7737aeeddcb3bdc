"""JudgeObserver port — domain events emitted during judge invocations."""

from typing import Protocol


class JudgeObserver(Protocol):
    """Observer port for judge domain events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def judge_scoring_started(self, test_case_id: str, model: str) -> None: ...

    def judge_scoring_completed(
        self, test_case_id: str, duration_ms: int, score: float, is_pass: bool
    ) -> None: ...

    def judge_scoring_retry(
        self, test_case_id: str, attempt: int, reason: str, backoff_seconds: float
    ) -> None: ...

    def judge_scoring_failed(self, test_case_id: str, reason: str) -> None: ...

    def judge_high_temperature_warned(self, model: str, temperature: float) -> None: ...
