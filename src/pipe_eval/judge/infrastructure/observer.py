"""Structlog implementation of the JudgeObserver port."""

import structlog


class StructlogJudgeObserver:
    """Delegates judge domain events to structlog.

    Satisfies the JudgeObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def judge_scoring_started(self, test_case_id: str, model: str) -> None:
        self._log.info("judge.scoring_started", test_case_id=test_case_id, model=model)

    def judge_scoring_completed(
        self, test_case_id: str, duration_ms: int, score: float, is_pass: bool
    ) -> None:
        self._log.info(
            "judge.scoring_completed",
            test_case_id=test_case_id,
            duration_ms=duration_ms,
            score=score,
            is_pass=is_pass,
        )

    def judge_scoring_retry(
        self, test_case_id: str, attempt: int, reason: str, backoff_seconds: float
    ) -> None:
        self._log.warning(
            "judge.scoring_retry",
            test_case_id=test_case_id,
            attempt=attempt,
            reason=reason,
            backoff_seconds=backoff_seconds,
        )

    def judge_scoring_failed(self, test_case_id: str, reason: str) -> None:
        self._log.error("judge.scoring_failed", test_case_id=test_case_id, reason=reason)

    def judge_high_temperature_warned(self, model: str, temperature: float) -> None:
        self._log.warning(
            "judge.high_temperature_warned", model=model, temperature=temperature
        )
