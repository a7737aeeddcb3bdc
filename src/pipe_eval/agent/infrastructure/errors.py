"""Error types raised by agent infrastructure."""

from pipe_eval.core.errors import PipeEvalError


class AgentInvocationError(PipeEvalError):
    """Raised when the agent model cannot be invoked or returns an unusable response.

    The underlying exception, when there is one, is chained as __cause__.
    """

    def __init__(self, reason: str, retriable: bool = False) -> None:
        self.reason = reason
        super().__init__(f"Failed to invoke agent: {reason}", retriable=retriable)
