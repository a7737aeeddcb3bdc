"""AgentOutput value object — what one agent invocation produced."""

from pydantic import BaseModel, Field


class AgentOutput(BaseModel, frozen=True):
    """Generated text plus the wall-clock time of the model call that produced it."""

    text: str
    latency_ms: int = Field(ge=0)
