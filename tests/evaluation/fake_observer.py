"""FakeEvaluationObserver — records evaluation domain events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RunStartedEvent:
    run_id: str
    dataset_id: str
    model: str
    total_cases: int


@dataclass(frozen=True)
class CaseStartedEvent:
    run_id: str
    case_index: int
    test_case_id: str


@dataclass(frozen=True)
class CaseCompletedEvent:
    run_id: str
    case_index: int
    test_case_id: str
    score: float
    is_pass: bool
    latency_ms: int


@dataclass(frozen=True)
class CaseFailedEvent:
    run_id: str
    case_index: int
    test_case_id: str
    reason: str


@dataclass(frozen=True)
class RunProgressEvent:
    run_id: str
    completed: int
    total: int


@dataclass(frozen=True)
class RunCompletedEvent:
    run_id: str
    average_score: float
    pass_rate: float
    elapsed_seconds: float


@dataclass(frozen=True)
class RunFailedEvent:
    run_id: str
    reason: str


class FakeEvaluationObserver:
    """Records all emitted evaluation events as typed frozen dataclasses.

    Use in tests to assert which events were emitted and with what data,
    without mocking or patching. `events` keeps every event in emission order.
    """

    def __init__(self) -> None:
        self.events: list[object] = []
        self.started: list[RunStartedEvent] = []
        self.case_starts: list[CaseStartedEvent] = []
        self.case_completions: list[CaseCompletedEvent] = []
        self.case_failures: list[CaseFailedEvent] = []
        self.progress: list[RunProgressEvent] = []
        self.completed: list[RunCompletedEvent] = []
        self.failed: list[RunFailedEvent] = []

    def run_started(
        self, run_id: str, dataset_id: str, model: str, total_cases: int
    ) -> None:
        event = RunStartedEvent(
            run_id=run_id, dataset_id=dataset_id, model=model, total_cases=total_cases
        )
        self.started.append(event)
        self.events.append(event)

    def case_started(self, run_id: str, case_index: int, test_case_id: str) -> None:
        event = CaseStartedEvent(
            run_id=run_id, case_index=case_index, test_case_id=test_case_id
        )
        self.case_starts.append(event)
        self.events.append(event)

    def case_completed(
        self,
        run_id: str,
        case_index: int,
        test_case_id: str,
        score: float,
        is_pass: bool,
        latency_ms: int,
    ) -> None:
        event = CaseCompletedEvent(
            run_id=run_id,
            case_index=case_index,
            test_case_id=test_case_id,
            score=score,
            is_pass=is_pass,
            latency_ms=latency_ms,
        )
        self.case_completions.append(event)
        self.events.append(event)

    def case_failed(
        self, run_id: str, case_index: int, test_case_id: str, reason: str
    ) -> None:
        event = CaseFailedEvent(
            run_id=run_id, case_index=case_index, test_case_id=test_case_id, reason=reason
        )
        self.case_failures.append(event)
        self.events.append(event)

    def run_progress(self, run_id: str, completed: int, total: int) -> None:
        event = RunProgressEvent(run_id=run_id, completed=completed, total=total)
        self.progress.append(event)
        self.events.append(event)

    def run_completed(
        self,
        run_id: str,
        average_score: float,
        pass_rate: float,
        elapsed_seconds: float,
    ) -> None:
        event = RunCompletedEvent(
            run_id=run_id,
            average_score=average_score,
            pass_rate=pass_rate,
            elapsed_seconds=elapsed_seconds,
        )
        self.completed.append(event)
        self.events.append(event)

    def run_failed(self, run_id: str, reason: str) -> None:
        event = RunFailedEvent(run_id=run_id, reason=reason)
        self.failed.append(event)
        self.events.append(event)
