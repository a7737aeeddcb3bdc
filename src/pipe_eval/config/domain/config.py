"""Top-level EvalConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from pipe_eval.config.domain.agent import AgentSection
from pipe_eval.config.domain.dataset import DatasetConfig
from pipe_eval.config.domain.gateway import GatewayConfig
from pipe_eval.config.domain.judge import JudgeConfig


class EvalConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a pipe-eval run.

    `dataset` may be omitted when the run targets a built-in seed dataset.
    """

    name: str = Field(min_length=1)
    agent: AgentSection
    judge: JudgeConfig
    dataset: DatasetConfig | None = None
    gateway: GatewayConfig = Field(default_factory=GatewayConfig)
