"""EvaluationEngine — drives an agent across a dataset and scores every case."""

import asyncio
import time
import uuid
from collections.abc import Callable

from pipe_eval.agent.domain.gateway import AgentGateway
from pipe_eval.config.domain.agent import AgentConfig
from pipe_eval.core.errors import PipeEvalError, ValidationError
from pipe_eval.dataset.domain.dataset import Dataset
from pipe_eval.evaluation.domain import stats
from pipe_eval.evaluation.domain.errors import (
    RunCancelledError,
    RunFailedError,
    RunInProgressError,
)
from pipe_eval.evaluation.domain.observer import EvaluationObserver
from pipe_eval.evaluation.domain.recorder import RunRecorder
from pipe_eval.evaluation.domain.result import EvalResult
from pipe_eval.evaluation.domain.run import Run
from pipe_eval.evaluation.domain.status import EvalStatus
from pipe_eval.judge.domain.gateway import JudgeGateway


def _epoch_ms() -> int:
    return time.time_ns() // 1_000_000


class EvaluationEngine:
    """Runs one dataset at a time through the agent and judge gateways.

    Cases are processed strictly in order: case i+1 starts only after case i's
    agent call and judge call have both returned. A run either completes and is
    recorded, or fails and leaves no trace in history.

    Gateways, the recorder and the observer are injected.
    """

    def __init__(
        self,
        agent_gateway: AgentGateway,
        judge_gateway: JudgeGateway,
        recorder: RunRecorder,
        observer: EvaluationObserver,
        clock: Callable[[], int] = _epoch_ms,
    ) -> None:
        self._agent_gateway = agent_gateway
        self._judge_gateway = judge_gateway
        self._recorder = recorder
        self._observer = observer
        self._clock = clock
        self._status = EvalStatus.IDLE

    @property
    def status(self) -> EvalStatus:
        return self._status

    async def start_run(
        self,
        dataset: Dataset,
        config: AgentConfig,
        cancel: asyncio.Event | None = None,
    ) -> Run:
        """Evaluate every case of dataset with config and record the finished Run.

        `cancel`, when set, is honoured between cases.

        Raises:
            RunInProgressError: if this engine is already running.
            ValidationError: if the dataset has no cases; no gateway is called
                and the status is left unchanged.
            RunFailedError: if any agent or judge call fails.
            RunCancelledError: if cancel was set before the last case started.
        """
        if self._status is EvalStatus.RUNNING:
            raise RunInProgressError()
        if not dataset.cases:
            raise ValidationError([f"dataset '{dataset.id}' has no cases"])

        run_id = str(uuid.uuid4())
        self._status = EvalStatus.RUNNING
        self._observer.run_started(
            run_id=run_id,
            dataset_id=dataset.id,
            model=config.model,
            total_cases=len(dataset.cases),
        )
        started_at = time.monotonic()

        try:
            results = await self._evaluate_cases(
                run_id=run_id, dataset=dataset, config=config, cancel=cancel
            )
        except BaseException as exc:
            # Partial results go out of scope here; nothing is recorded.
            self._status = EvalStatus.FAILED
            self._observer.run_failed(run_id=run_id, reason=str(exc) or type(exc).__name__)
            raise

        run = Run(
            id=run_id,
            dataset_id=dataset.id,
            timestamp=self._clock(),
            model=config.model,
            average_score=stats.average_score(results),
            pass_rate=stats.pass_rate(results),
            results=tuple(results),
            status=EvalStatus.COMPLETED,
        )
        self._status = EvalStatus.COMPLETED
        self._recorder.record(run)
        self._observer.run_completed(
            run_id=run_id,
            average_score=run.average_score,
            pass_rate=run.pass_rate,
            elapsed_seconds=time.monotonic() - started_at,
        )
        return run

    async def _evaluate_cases(
        self,
        run_id: str,
        dataset: Dataset,
        config: AgentConfig,
        cancel: asyncio.Event | None,
    ) -> list[EvalResult]:
        total = len(dataset.cases)
        results: list[EvalResult] = []

        for index, case in enumerate(dataset.cases):
            if cancel is not None and cancel.is_set():
                raise RunCancelledError(completed=index, total=total)

            self._observer.case_started(
                run_id=run_id, case_index=index, test_case_id=case.id
            )
            try:
                agent_output = await self._agent_gateway.run_agent_task(
                    input=case.input, config=config
                )
                judged = await self._judge_gateway.evaluate_response(
                    test_case=case,
                    actual_output=agent_output.text,
                    guidance=dataset.agent_context,
                )
            except PipeEvalError as exc:
                self._observer.case_failed(
                    run_id=run_id,
                    case_index=index,
                    test_case_id=case.id,
                    reason=str(exc),
                )
                raise RunFailedError(
                    case_index=index, test_case_id=case.id, reason=str(exc)
                ) from exc

            result = EvalResult.from_judgement(
                judged=judged, latency_ms=agent_output.latency_ms
            )
            results.append(result)
            self._observer.case_completed(
                run_id=run_id,
                case_index=index,
                test_case_id=case.id,
                score=result.score,
                is_pass=result.is_pass,
                latency_ms=result.latency_ms,
            )
            self._observer.run_progress(run_id=run_id, completed=index + 1, total=total)

        return results
