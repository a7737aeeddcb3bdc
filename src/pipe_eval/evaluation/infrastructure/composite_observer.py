"""CompositeEvaluationObserver — fans out all events to a list of observers."""

from pipe_eval.evaluation.domain.observer import EvaluationObserver


class CompositeEvaluationObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[EvaluationObserver]) -> None:
        self._observers = observers

    def run_started(
        self, run_id: str, dataset_id: str, model: str, total_cases: int
    ) -> None:
        for obs in self._observers:
            obs.run_started(
                run_id=run_id, dataset_id=dataset_id, model=model, total_cases=total_cases
            )

    def case_started(self, run_id: str, case_index: int, test_case_id: str) -> None:
        for obs in self._observers:
            obs.case_started(run_id=run_id, case_index=case_index, test_case_id=test_case_id)

    def case_completed(
        self,
        run_id: str,
        case_index: int,
        test_case_id: str,
        score: float,
        is_pass: bool,
        latency_ms: int,
    ) -> None:
        for obs in self._observers:
            obs.case_completed(
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
        for obs in self._observers:
            obs.case_failed(
                run_id=run_id,
                case_index=case_index,
                test_case_id=test_case_id,
                reason=reason,
            )

    def run_progress(self, run_id: str, completed: int, total: int) -> None:
        for obs in self._observers:
            obs.run_progress(run_id=run_id, completed=completed, total=total)

    def run_completed(
        self,
        run_id: str,
        average_score: float,
        pass_rate: float,
        elapsed_seconds: float,
    ) -> None:
        for obs in self._observers:
            obs.run_completed(
                run_id=run_id,
                average_score=average_score,
                pass_rate=pass_rate,
                elapsed_seconds=elapsed_seconds,
            )

    def run_failed(self, run_id: str, reason: str) -> None:
        for obs in self._observers:
            obs.run_failed(run_id=run_id, reason=reason)
