"""Shared builders for evaluation and history tests."""

from pipe_eval.dataset.domain.case import TestCase
from pipe_eval.dataset.domain.dataset import Dataset
from pipe_eval.dataset.domain.process import PipefyProcess
from pipe_eval.evaluation.domain.result import EvalResult
from pipe_eval.evaluation.domain.run import Run
from pipe_eval.evaluation.domain.status import EvalStatus


def make_dataset(
    case_count: int,
    dataset_id: str = "d1",
    agent_context: str | None = None,
) -> Dataset:
    return Dataset(
        id=dataset_id,
        name=f"Dataset {dataset_id}",
        process=PipefyProcess.IT_HELPDESK,
        description="Ticket triage.",
        agent_context=agent_context,
        cases=tuple(
            TestCase(
                id=f"c{i + 1}",
                input=f"Ticket {i + 1}",
                expected_output=f"Urgency {i + 1}",
            )
            for i in range(case_count)
        ),
    )


def make_result(
    test_case_id: str = "c1",
    score: float = 1.0,
    is_pass: bool = True,
    latency_ms: int = 100,
    input: str = "Ticket",
    actual_output: str = "Urgency: High",
) -> EvalResult:
    return EvalResult(
        test_case_id=test_case_id,
        input=input,
        actual_output=actual_output,
        expected_output="Urgency: High",
        score=score,
        reasoning="Reasoned.",
        is_pass=is_pass,
        latency_ms=latency_ms,
    )


def make_run(
    run_id: str = "run-0001-abcdef",
    model: str = "gemini/gemini-3-flash-preview",
    dataset_id: str = "d1",
    timestamp: int = 1_700_000_000_000,
    results: tuple[EvalResult, ...] | None = None,
    average_score: float = 1.0,
    pass_rate: float = 1.0,
) -> Run:
    return Run(
        id=run_id,
        dataset_id=dataset_id,
        timestamp=timestamp,
        model=model,
        average_score=average_score,
        pass_rate=pass_rate,
        results=results if results is not None else (make_result(),),
        status=EvalStatus.COMPLETED,
    )
