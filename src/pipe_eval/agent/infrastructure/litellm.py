"""LiteLLMAgentGateway — runs agent tasks against any litellm-supported model."""

import time
from typing import Any

import litellm

from pipe_eval.agent.domain.observer import AgentObserver
from pipe_eval.agent.domain.output import AgentOutput
from pipe_eval.agent.infrastructure.errors import AgentInvocationError
from pipe_eval.config.domain.agent import AgentConfig
from pipe_eval.config.domain.gateway import GatewayConfig
from pipe_eval.core.llm import is_retriable, quiet_litellm
from pipe_eval.core.retry import call_with_retry


class LiteLLMAgentGateway:
    """Agent gateway that sends (system instruction, input) to a chat model.

    Transient provider failures are retried with backoff according to the
    gateway config; the reported latency covers only the successful call.
    """

    def __init__(self, gateway: GatewayConfig, observer: AgentObserver) -> None:
        quiet_litellm()
        self._gateway = gateway
        self._observer = observer

    async def run_agent_task(self, input: str, config: AgentConfig) -> AgentOutput:
        """Invoke the model once per attempt and return its text and latency.

        Raises:
            AgentInvocationError: if the call fails after all permitted
                attempts, or the response carries no text.
        """
        self._observer.agent_invocation_started(model=config.model)

        def _on_retry(attempt: int, reason: str, backoff_seconds: float) -> None:
            self._observer.agent_invocation_retry(
                model=config.model,
                attempt=attempt,
                reason=reason,
                backoff_seconds=backoff_seconds,
            )

        try:
            output = await call_with_retry(
                operation=lambda: self._call_once(input=input, config=config),
                retry=self._gateway.retry,
                on_retry=_on_retry,
            )
        except AgentInvocationError as exc:
            self._observer.agent_invocation_failed(model=config.model, reason=exc.reason)
            raise

        self._observer.agent_invocation_completed(
            model=config.model, latency_ms=output.latency_ms
        )
        return output

    async def _call_once(self, input: str, config: AgentConfig) -> AgentOutput:
        start = time.monotonic()
        try:
            response = await litellm.acompletion(
                model=config.model,
                temperature=config.temperature,
                timeout=self._gateway.timeout_seconds,
                messages=_build_messages(
                    system_instruction=config.system_instruction, input=input
                ),
            )
        except Exception as exc:
            raise AgentInvocationError(
                reason=str(exc), retriable=is_retriable(exc)
            ) from exc
        latency_ms = int((time.monotonic() - start) * 1000)

        return AgentOutput(text=_extract_text(response=response), latency_ms=latency_ms)


def _build_messages(system_instruction: str, input: str) -> list[dict[str, str]]:
    messages: list[dict[str, str]] = []
    if system_instruction.strip():
        messages.append({"role": "system", "content": system_instruction})
    messages.append({"role": "user", "content": input})
    return messages


def _extract_text(response: Any) -> str:
    """
    Raises:
        AgentInvocationError: if the response is malformed or has no text.
    """
    try:
        content = response.choices[0].message.content
    except (AttributeError, IndexError, TypeError) as exc:
        raise AgentInvocationError(reason=f"malformed response: {exc}") from exc
    if not isinstance(content, str) or not content.strip():
        raise AgentInvocationError(reason="model returned an empty response")
    return content
