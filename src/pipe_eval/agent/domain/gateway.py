"""AgentGateway Protocol — structural interface for running one input through an agent."""

from typing import Protocol

from pipe_eval.agent.domain.output import AgentOutput
from pipe_eval.config.domain.agent import AgentConfig


class AgentGateway(Protocol):
    """Runs a single input through the agent described by config.

    Implementations raise AgentInvocationError on failure; they never return
    an empty substitute output.
    """

    async def run_agent_task(self, input: str, config: AgentConfig) -> AgentOutput: ...
