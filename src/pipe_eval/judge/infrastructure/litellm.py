"""LiteLLMJudgeGateway — judge implementation using LiteLLM structured output."""

import time

import litellm

from pipe_eval.config.domain.gateway import GatewayConfig
from pipe_eval.config.domain.judge import JudgeConfig
from pipe_eval.core.llm import is_retriable, quiet_litellm
from pipe_eval.core.retry import call_with_retry
from pipe_eval.dataset.domain.case import TestCase
from pipe_eval.judge.domain.observer import JudgeObserver
from pipe_eval.judge.domain.score import JudgeResult, JudgeVerdict
from pipe_eval.judge.infrastructure.errors import JudgeInvocationError

_SYSTEM_PROMPT = """\
You are an impartial evaluator of AI agents that automate steps of business \
processes (ticket triage, invoice extraction, candidate screening, lead \
qualification). Compare the agent's output against the expected output for the \
given input.

Judge semantic equivalence, not wording: field values, categories, priorities and \
extracted entities must match the expected output; phrasing and ordering may differ. \
Follow any process guidance supplied.

Respond with a JSON object containing:
- score: number between 0.0 (completely wrong) and 1.0 (fully correct)
- is_pass: boolean, true if the output would be acceptable in production
- reasoning: one or two sentences explaining the verdict
"""


class LiteLLMJudgeGateway:
    """Judge gateway that delegates scoring to an LLM via LiteLLM."""

    def __init__(
        self,
        config: JudgeConfig,
        gateway: GatewayConfig,
        observer: JudgeObserver,
    ) -> None:
        quiet_litellm()
        self._config = config
        self._gateway = gateway
        self._observer = observer

        if config.temperature > 0.0:
            self._observer.judge_high_temperature_warned(
                model=config.model, temperature=config.temperature
            )

    async def evaluate_response(
        self,
        test_case: TestCase,
        actual_output: str,
        guidance: str | None = None,
    ) -> JudgeResult:
        """Invoke the LLM judge and return its verdict merged with the case fields.

        Raises:
            JudgeInvocationError: if the LLM call fails after all permitted
                attempts, or the response cannot be parsed into a verdict.
        """
        self._observer.judge_scoring_started(
            test_case_id=test_case.id, model=self._config.model
        )
        user_message = _build_user_message(
            test_case=test_case, actual_output=actual_output, guidance=guidance
        )

        def _on_retry(attempt: int, reason: str, backoff_seconds: float) -> None:
            self._observer.judge_scoring_retry(
                test_case_id=test_case.id,
                attempt=attempt,
                reason=reason,
                backoff_seconds=backoff_seconds,
            )

        start = time.monotonic()
        try:
            verdict = await call_with_retry(
                operation=lambda: self._score_once(user_message=user_message),
                retry=self._gateway.retry,
                on_retry=_on_retry,
            )
        except JudgeInvocationError as exc:
            self._observer.judge_scoring_failed(
                test_case_id=test_case.id, reason=exc.reason
            )
            raise
        duration_ms = int((time.monotonic() - start) * 1000)

        self._observer.judge_scoring_completed(
            test_case_id=test_case.id,
            duration_ms=duration_ms,
            score=verdict.score,
            is_pass=verdict.is_pass,
        )
        return JudgeResult(
            test_case_id=test_case.id,
            input=test_case.input,
            expected_output=test_case.expected_output,
            actual_output=actual_output,
            score=verdict.score,
            is_pass=verdict.is_pass,
            reasoning=verdict.reasoning,
        )

    async def _score_once(self, user_message: str) -> JudgeVerdict:
        try:
            response = await litellm.acompletion(
                model=self._config.model,
                temperature=self._config.temperature,
                timeout=self._gateway.timeout_seconds,
                response_format=JudgeVerdict,
                messages=[
                    {"role": "system", "content": _SYSTEM_PROMPT},
                    {"role": "user", "content": user_message},
                ],
            )
        except Exception as exc:
            raise JudgeInvocationError(
                reason=str(exc), retriable=is_retriable(exc)
            ) from exc

        try:
            raw_content: str = response.choices[0].message.content
            return JudgeVerdict.model_validate_json(raw_content)
        except Exception as exc:
            raise JudgeInvocationError(
                reason=f"Failed to parse judge response: {exc}"
            ) from exc


def _build_user_message(
    test_case: TestCase, actual_output: str, guidance: str | None
) -> str:
    sections = [
        f"## Input\n{test_case.input}",
        f"## Expected Output\n{test_case.expected_output}",
        f"## Agent Output\n{actual_output}",
    ]
    if guidance:
        sections.append(f"## Process Guidance\n{guidance}")
    return "\n\n".join(sections)
