"""StructlogEvaluationObserver — production observer that delegates to structlog."""

import structlog


class StructlogEvaluationObserver:
    """Logs evaluation domain events to structlog.

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def run_started(
        self, run_id: str, dataset_id: str, model: str, total_cases: int
    ) -> None:
        self._log.info(
            "evaluation.run_started",
            run_id=run_id,
            dataset_id=dataset_id,
            model=model,
            total_cases=total_cases,
        )

    def case_started(self, run_id: str, case_index: int, test_case_id: str) -> None:
        self._log.debug(
            "evaluation.case_started",
            run_id=run_id,
            case_index=case_index,
            test_case_id=test_case_id,
        )

    def case_completed(
        self,
        run_id: str,
        case_index: int,
        test_case_id: str,
        score: float,
        is_pass: bool,
        latency_ms: int,
    ) -> None:
        self._log.info(
            "evaluation.case_completed",
            run_id=run_id,
            case_index=case_index,
            test_case_id=test_case_id,
            score=score,
            is_pass=is_pass,
            latency_ms=latency_ms,
        )

    def case_failed(
        self, run_id: str, case_index: int, test_case_id: str, reason: str
    ) -> None:
        self._log.error(
            "evaluation.case_failed",
            run_id=run_id,
            case_index=case_index,
            test_case_id=test_case_id,
            reason=reason,
        )

    def run_progress(self, run_id: str, completed: int, total: int) -> None:
        self._log.info(
            "evaluation.run_progress",
            run_id=run_id,
            completed=completed,
            total=total,
            percent=round(100.0 * completed / total, 1) if total else 0.0,
        )

    def run_completed(
        self,
        run_id: str,
        average_score: float,
        pass_rate: float,
        elapsed_seconds: float,
    ) -> None:
        self._log.info(
            "evaluation.run_completed",
            run_id=run_id,
            average_score=round(average_score, 4),
            pass_rate=round(pass_rate, 4),
            elapsed_seconds=round(elapsed_seconds, 2),
        )

    def run_failed(self, run_id: str, reason: str) -> None:
        self._log.error("evaluation.run_failed", run_id=run_id, reason=reason)
