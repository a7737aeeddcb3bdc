"""Run — one complete pass of the engine over a dataset, with aggregates."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pipe_eval.evaluation.domain import stats
from pipe_eval.evaluation.domain.result import EvalResult
from pipe_eval.evaluation.domain.status import EvalStatus

HEALTHY_PASS_RATE = 0.8


class RunHealth(StrEnum):
    HEALTHY = "healthy"
    NEEDS_ATTENTION = "needs_attention"


class Run(BaseModel):
    """Immutable record of a completed run, results in dataset case order.

    `dataset_id` may outlive the dataset it names. Serialises with camelCase
    names (`datasetId`, `averageScore`, `passRate`) and accepts either spelling.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    id: str = Field(min_length=1)
    dataset_id: str
    timestamp: int = Field(ge=0)
    model: str
    average_score: float = Field(ge=0.0, le=1.0)
    pass_rate: float = Field(ge=0.0, le=1.0)
    results: tuple[EvalResult, ...]
    status: EvalStatus

    @property
    def passed_count(self) -> int:
        return sum(1 for r in self.results if r.is_pass)

    @property
    def average_latency_ms(self) -> int | None:
        return stats.average_latency_ms(self.results) if self.results else None

    @property
    def health(self) -> RunHealth:
        if self.pass_rate >= HEALTHY_PASS_RATE:
            return RunHealth.HEALTHY
        return RunHealth.NEEDS_ATTENTION

    def search_results(self, query: str) -> list[EvalResult]:
        """Results whose input or actual output contains query, ignoring case."""
        needle = query.lower()
        return [
            r
            for r in self.results
            if needle in r.input.lower() or needle in r.actual_output.lower()
        ]
