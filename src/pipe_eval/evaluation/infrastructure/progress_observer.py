"""ProgressEvaluationObserver — renders a Rich progress bar for a run on stderr."""

from __future__ import annotations

from rich.console import Console
from rich.progress import (
    Progress,
    ProgressColumn,
    Task,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.text import Text


class _CaseBarColumn(ProgressColumn):
    """Three-segment bar: scored cases, the case in flight, cases remaining."""

    def __init__(self, bar_width: int = 40) -> None:
        super().__init__()
        self.bar_width = bar_width

    def render(self, task: Task) -> Text:
        total = task.total or 0
        if total > 0:
            done_cells = int(task.completed / total * self.bar_width)
            inflight = 1 if task.fields.get("inflight") else 0
            inflight_cells = min(
                max(inflight, int(inflight / total * self.bar_width)),
                self.bar_width - done_cells,
            )
        else:
            done_cells = 0
            inflight_cells = 0
        remaining_cells = self.bar_width - done_cells - inflight_cells

        bar = Text()
        bar.append("█" * done_cells, style="bright_green")
        bar.append("▒" * inflight_cells, style="grey50")
        bar.append("░" * remaining_cells, style="dim white")
        return bar


class ProgressEvaluationObserver:
    """Shows "case k/N" progress, plus a running pass count, while a run executes.

    Pass ``disabled=True`` to track counts without any terminal output
    (useful in tests).

    Does NOT inherit from EvaluationObserver (structural typing via Protocol).
    """

    def __init__(self, disabled: bool = False) -> None:
        self._disabled = disabled
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None
        self.completed = 0
        self.total = 0
        self.passed = 0
        self.inflight = False

    def _refresh(self) -> None:
        if self._progress is None or self._task_id is None:
            return
        self._progress.update(
            self._task_id,
            completed=self.completed,
            inflight=self.inflight,
            passed=self.passed,
        )

    def _stop(self) -> None:
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task_id = None

    def run_started(
        self, run_id: str, dataset_id: str, model: str, total_cases: int
    ) -> None:
        self.completed = 0
        self.total = total_cases
        self.passed = 0
        self.inflight = False
        if self._disabled:
            return

        self._progress = Progress(
            TextColumn(f"[cyan]{model}[/cyan]"),
            _CaseBarColumn(bar_width=40),
            TextColumn("{task.completed:.0f}/{task.total:.0f} cases"),
            TextColumn("[green]{task.fields[passed]} passed[/green]"),
            TimeElapsedColumn(),
            console=Console(stderr=True),
            transient=False,
        )
        self._task_id = self._progress.add_task(
            description=run_id[:8], total=float(total_cases), inflight=False, passed=0
        )
        self._progress.start()

    def case_started(self, run_id: str, case_index: int, test_case_id: str) -> None:
        self.inflight = True
        self._refresh()

    def case_completed(
        self,
        run_id: str,
        case_index: int,
        test_case_id: str,
        score: float,
        is_pass: bool,
        latency_ms: int,
    ) -> None:
        if is_pass:
            self.passed += 1

    def case_failed(
        self, run_id: str, case_index: int, test_case_id: str, reason: str
    ) -> None:
        self.inflight = False
        self._refresh()

    def run_progress(self, run_id: str, completed: int, total: int) -> None:
        self.completed = completed
        self.inflight = False
        self._refresh()

    def run_completed(
        self,
        run_id: str,
        average_score: float,
        pass_rate: float,
        elapsed_seconds: float,
    ) -> None:
        self._stop()

    def run_failed(self, run_id: str, reason: str) -> None:
        self._stop()
