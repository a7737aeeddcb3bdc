"""Dashboard aggregates over the history index and the case store."""

from pydantic import BaseModel

from pipe_eval.dataset.application.store import CaseStore
from pipe_eval.history.application.index import RunHistoryIndex


class TrendPoint(BaseModel, frozen=True):
    timestamp: int
    average_score: float


class DashboardSummary(BaseModel, frozen=True):
    """Headline numbers for the overview screen.

    `latest_*` fields describe the most recent run and are None when history
    is empty. `accuracy_trend` is oldest-first.
    """

    total_runs: int
    latest_accuracy: float | None
    latest_average_latency_ms: int | None
    total_test_cases: int
    accuracy_trend: list[TrendPoint]


def build_dashboard(history: RunHistoryIndex, store: CaseStore) -> DashboardSummary:
    runs = history.runs()
    latest = history.latest()
    return DashboardSummary(
        total_runs=len(runs),
        latest_accuracy=latest.average_score if latest is not None else None,
        latest_average_latency_ms=latest.average_latency_ms if latest is not None else None,
        total_test_cases=store.total_case_count(),
        accuracy_trend=[
            TrendPoint(timestamp=r.timestamp, average_score=r.average_score)
            for r in reversed(runs)
        ],
    )
