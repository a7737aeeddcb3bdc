"""Judge value objects — the model's verdict and the per-case result built from it."""

from pydantic import BaseModel, ConfigDict, Field


class JudgeVerdict(BaseModel):
    """Structured response schema the judge model must produce.

    `score` and `is_pass` are reported independently; nothing here requires
    them to agree.
    """

    model_config = ConfigDict(frozen=True)

    score: float = Field(ge=0.0, le=1.0)
    is_pass: bool
    reasoning: str


class JudgeResult(BaseModel, frozen=True):
    """A verdict with the judged case's fields echoed back alongside it."""

    test_case_id: str
    input: str
    expected_output: str
    actual_output: str
    score: float = Field(ge=0.0, le=1.0)
    is_pass: bool
    reasoning: str
