"""Aggregate statistics over a run's results."""

import statistics
from collections.abc import Sequence

from pipe_eval.evaluation.domain.result import EvalResult


def _require_results(results: Sequence[EvalResult]) -> None:
    if not results:
        raise ValueError("aggregate statistics are undefined for zero results")


def average_score(results: Sequence[EvalResult]) -> float:
    """Arithmetic mean of every result's score."""
    _require_results(results)
    return statistics.fmean(r.score for r in results)


def pass_rate(results: Sequence[EvalResult]) -> float:
    """Fraction of results the judge marked as passing."""
    _require_results(results)
    return sum(1 for r in results if r.is_pass) / len(results)


def average_latency_ms(results: Sequence[EvalResult]) -> int:
    """Mean agent latency, rounded to the nearest millisecond."""
    _require_results(results)
    return round(statistics.fmean(r.latency_ms for r in results))
