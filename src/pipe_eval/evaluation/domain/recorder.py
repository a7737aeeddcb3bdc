"""RunRecorder Protocol — where the engine hands off completed runs."""

from typing import Protocol

from pipe_eval.evaluation.domain.run import Run


class RunRecorder(Protocol):
    def record(self, run: Run) -> None: ...
