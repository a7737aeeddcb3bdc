"""Base exception classes shared by every pipe-eval context."""


class PipeEvalError(Exception):
    """Base class for all pipe-eval errors."""

    def __init__(self, message: str, retriable: bool = False) -> None:
        super().__init__(message)
        self.retriable = retriable


class ValidationError(PipeEvalError):
    """Raised when dataset or run input is malformed before any work starts."""

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__(f"Failed to validate input: {'; '.join(problems)}")
