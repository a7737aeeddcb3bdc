"""Error types raised by dataset infrastructure."""

from pipe_eval.core.errors import PipeEvalError


class DatasetLoadError(PipeEvalError):
    """Raised when a JSONL case file cannot be loaded or is malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load dataset: {reason}")
