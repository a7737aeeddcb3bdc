"""Error types raised by the evaluation engine."""

from pipe_eval.core.errors import PipeEvalError


class RunFailedError(PipeEvalError):
    """Raised when a case's agent or judge call fails; the whole run is discarded.

    The gateway error is chained as __cause__.
    """

    def __init__(self, case_index: int, test_case_id: str, reason: str) -> None:
        self.case_index = case_index
        self.test_case_id = test_case_id
        self.reason = reason
        super().__init__(
            f"Failed to evaluate case {case_index + 1} ({test_case_id}): {reason}"
        )


class RunCancelledError(PipeEvalError):
    """Raised when a run is cancelled between cases; nothing is recorded."""

    def __init__(self, completed: int, total: int) -> None:
        self.completed = completed
        self.total = total
        super().__init__(
            f"Failed to complete run: cancelled after {completed}/{total} cases"
        )


class RunInProgressError(PipeEvalError):
    """Raised when start_run is called while the same engine is still running."""

    def __init__(self) -> None:
        super().__init__("Failed to start run: another run is already in progress")
