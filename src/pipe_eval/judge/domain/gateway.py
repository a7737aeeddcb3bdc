"""JudgeGateway Protocol — structural interface for scoring one agent response."""

from typing import Protocol

from pipe_eval.dataset.domain.case import TestCase
from pipe_eval.judge.domain.score import JudgeResult


class JudgeGateway(Protocol):
    """Scores actual_output against the case's expected output.

    `guidance` is optional dataset-level context for the judge. Implementations
    raise JudgeInvocationError on failure.
    """

    async def evaluate_response(
        self,
        test_case: TestCase,
        actual_output: str,
        guidance: str | None = None,
    ) -> JudgeResult: ...
