"""EvalResult — the finalized outcome of one case within a run."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pipe_eval.judge.domain.score import JudgeResult


class EvalResult(BaseModel):
    """Judge verdict plus agent latency for one case.

    Case text is copied in so the result stays readable after its dataset is
    edited or deleted. Serialises with camelCase names (`testCaseId`, `isPass`, ...).
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    test_case_id: str
    input: str
    actual_output: str
    expected_output: str
    score: float = Field(ge=0.0, le=1.0)
    reasoning: str
    is_pass: bool
    latency_ms: int = Field(ge=0)

    @classmethod
    def from_judgement(cls, judged: JudgeResult, latency_ms: int) -> "EvalResult":
        return cls(
            test_case_id=judged.test_case_id,
            input=judged.input,
            actual_output=judged.actual_output,
            expected_output=judged.expected_output,
            score=judged.score,
            reasoning=judged.reasoning,
            is_pass=judged.is_pass,
            latency_ms=latency_ms,
        )
