"""Tests for the Run and EvalResult domain models."""

import pydantic
import pytest

from pipe_eval.evaluation.domain.result import EvalResult
from pipe_eval.evaluation.domain.run import Run, RunHealth
from pipe_eval.evaluation.domain.status import EvalStatus
from pipe_eval.judge.domain.score import JudgeResult
from tests.evaluation.builders import make_result, make_run


class TestEvalResult:
    def test_from_judgement_copies_verdict_and_adds_latency(self) -> None:
        judged = JudgeResult(
            test_case_id="c1",
            input="Printer jammed",
            expected_output="Urgency: Low",
            actual_output="Urgency: Low",
            score=0.9,
            is_pass=True,
            reasoning="Close enough.",
        )

        result = EvalResult.from_judgement(judged=judged, latency_ms=420)

        assert result.test_case_id == "c1"
        assert result.input == "Printer jammed"
        assert result.score == pytest.approx(0.9)
        assert result.is_pass is True
        assert result.latency_ms == 420

    def test_serialises_with_camel_case_names(self) -> None:
        dumped = make_result().model_dump(by_alias=True)

        assert set(dumped) == {
            "testCaseId",
            "input",
            "actualOutput",
            "expectedOutput",
            "score",
            "reasoning",
            "isPass",
            "latencyMs",
        }

    def test_score_above_one_is_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            make_result(score=1.5)

    def test_negative_latency_is_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            make_result(latency_ms=-1)

    def test_is_frozen(self) -> None:
        result = make_result()

        with pytest.raises(pydantic.ValidationError):
            result.score = 0.0  # type: ignore[misc]


class TestRunProperties:
    def test_passed_count(self) -> None:
        run = make_run(
            results=(make_result(is_pass=True), make_result(is_pass=False)),
            pass_rate=0.5,
        )

        assert run.passed_count == 1

    def test_average_latency(self) -> None:
        run = make_run(
            results=(make_result(latency_ms=500), make_result(latency_ms=300))
        )

        assert run.average_latency_ms == 400

    def test_average_latency_none_without_results(self) -> None:
        assert make_run(results=()).average_latency_ms is None

    @pytest.mark.parametrize(
        ("pass_rate", "health"),
        [
            (1.0, RunHealth.HEALTHY),
            (0.8, RunHealth.HEALTHY),
            (0.79, RunHealth.NEEDS_ATTENTION),
            (0.0, RunHealth.NEEDS_ATTENTION),
        ],
    )
    def test_health_threshold(self, pass_rate: float, health: RunHealth) -> None:
        assert make_run(pass_rate=pass_rate).health is health


class TestRunSearch:
    def _run(self) -> Run:
        return make_run(
            results=(
                make_result(test_case_id="c1", input="VPN is down", actual_output="Urgency: High"),
                make_result(test_case_id="c2", input="Mouse broken", actual_output="Urgency: Low"),
            )
        )

    def test_matches_input_case_insensitively(self) -> None:
        assert [r.test_case_id for r in self._run().search_results("vpn")] == ["c1"]

    def test_matches_actual_output(self) -> None:
        assert [r.test_case_id for r in self._run().search_results("LOW")] == ["c2"]

    def test_empty_query_matches_all(self) -> None:
        assert len(self._run().search_results("")) == 2

    def test_no_match(self) -> None:
        assert self._run().search_results("payroll") == []


class TestRunModel:
    def test_accepts_camel_case_input(self) -> None:
        run = Run.model_validate(
            {
                "id": "r1",
                "datasetId": "d1",
                "timestamp": 1,
                "model": "m",
                "averageScore": 0.5,
                "passRate": 0.5,
                "results": [],
                "status": "COMPLETED",
            }
        )

        assert run.dataset_id == "d1"
        assert run.status is EvalStatus.COMPLETED

    def test_empty_id_is_rejected(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            make_run(run_id="")

    def test_status_values_are_uppercase(self) -> None:
        assert [s.value for s in EvalStatus] == ["IDLE", "RUNNING", "COMPLETED", "FAILED"]
