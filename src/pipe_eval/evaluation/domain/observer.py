"""Observer port for the evaluation domain — defines events in domain language."""

from typing import Protocol


class EvaluationObserver(Protocol):
    """Observer port emitting structured events during an evaluation run.

    `run_progress` fires once per finished case with a strictly increasing
    `completed` count. Implementations may log to structlog, drive a progress
    bar, or record for tests.
    """

    def run_started(
        self, run_id: str, dataset_id: str, model: str, total_cases: int
    ) -> None: ...

    def case_started(self, run_id: str, case_index: int, test_case_id: str) -> None: ...

    def case_completed(
        self,
        run_id: str,
        case_index: int,
        test_case_id: str,
        score: float,
        is_pass: bool,
        latency_ms: int,
    ) -> None: ...

    def case_failed(
        self, run_id: str, case_index: int, test_case_id: str, reason: str
    ) -> None: ...

    def run_progress(self, run_id: str, completed: int, total: int) -> None: ...

    def run_completed(
        self,
        run_id: str,
        average_score: float,
        pass_rate: float,
        elapsed_seconds: float,
    ) -> None: ...

    def run_failed(self, run_id: str, reason: str) -> None: ...
