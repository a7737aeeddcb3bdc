"""Error types raised by judge infrastructure."""

from pipe_eval.core.errors import PipeEvalError


class JudgeInvocationError(PipeEvalError):
    """Raised when the judge cannot be invoked or returns an unparseable verdict."""

    def __init__(self, reason: str, retriable: bool = False) -> None:
        self.reason = reason
        super().__init__(f"Failed to score response: {reason}", retriable=retriable)
