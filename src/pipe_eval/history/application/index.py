"""RunHistoryIndex — the session's completed runs, most recent first."""

import threading
from datetime import UTC, tzinfo

from pipe_eval.evaluation.domain.run import Run
from pipe_eval.history.domain.filter import RunFilter


class RunHistoryIndex:
    """Ordered store of completed runs with filtering and lookup.

    Satisfies the RunRecorder protocol structurally. `record` takes a lock so
    several engines may share one index. Calendar-day filter bounds are
    interpreted in `tz`.
    """

    def __init__(self, tz: tzinfo = UTC) -> None:
        self._tz = tz
        self._runs: list[Run] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._runs)

    def record(self, run: Run) -> None:
        """Place run at index 0; the order of earlier runs is preserved."""
        with self._lock:
            self._runs = [run, *self._runs]

    def runs(self) -> list[Run]:
        return list(self._runs)

    def latest(self) -> Run | None:
        runs = self._runs
        return runs[0] if runs else None

    def get(self, run_id: str) -> Run | None:
        return next((r for r in self._runs if r.id == run_id), None)

    def distinct_models(self) -> set[str]:
        return {r.model for r in self._runs}

    def filter(self, run_filter: RunFilter | None = None) -> list[Run]:
        """Return a new list of the runs matching every set criterion, in history order."""
        if run_filter is None:
            return list(self._runs)

        start_ms = run_filter.start_bound_ms(tz=self._tz)
        end_ms = run_filter.end_bound_ms(tz=self._tz)

        def _matches(run: Run) -> bool:
            if run_filter.model is not None and run.model != run_filter.model:
                return False
            if run_filter.dataset_id is not None and run.dataset_id != run_filter.dataset_id:
                return False
            if start_ms is not None and run.timestamp < start_ms:
                return False
            if end_ms is not None and run.timestamp > end_ms:
                return False
            return True

        return [run for run in self._runs if _matches(run)]
