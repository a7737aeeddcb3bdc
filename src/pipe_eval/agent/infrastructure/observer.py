"""Structlog implementation of the AgentObserver port."""

import structlog


class StructlogAgentObserver:
    """Delegates agent domain events to structlog.

    Satisfies the AgentObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def agent_invocation_started(self, model: str) -> None:
        self._log.info("agent.invocation_started", model=model)

    def agent_invocation_completed(self, model: str, latency_ms: int) -> None:
        self._log.info("agent.invocation_completed", model=model, latency_ms=latency_ms)

    def agent_invocation_retry(
        self, model: str, attempt: int, reason: str, backoff_seconds: float
    ) -> None:
        self._log.warning(
            "agent.invocation_retry",
            model=model,
            attempt=attempt,
            reason=reason,
            backoff_seconds=backoff_seconds,
        )

    def agent_invocation_failed(self, model: str, reason: str) -> None:
        self._log.error("agent.invocation_failed", model=model, reason=reason)
