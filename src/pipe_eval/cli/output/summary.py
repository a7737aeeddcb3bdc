"""Terminal rendering of run summaries and per-case tables."""

from datetime import UTC, datetime
from pathlib import Path

import typer

from pipe_eval.evaluation.domain.result import EvalResult
from pipe_eval.evaluation.domain.run import Run, RunHealth
from pipe_eval.history.application.dashboard import DashboardSummary

# ---------------------------------------------------------------------------
# ANSI helpers
# ---------------------------------------------------------------------------
_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_CYAN = "\033[36m"
_YELLOW = "\033[33m"
_GREEN = "\033[32m"
_RED = "\033[31m"
_WHITE = "\033[97m"

_TEXT_W = 48


def _score_color(score: float) -> str:
    if score >= 0.8:
        return _GREEN
    if score >= 0.5:
        return _YELLOW
    return _RED


def _rule(width: int = 72, color: str = _DIM) -> None:
    typer.echo(f"{color}{'─' * width}{_RESET}")


def _truncate(text: str, max_len: int = _TEXT_W) -> str:
    """Collapse whitespace and cut to max_len, appending '…' if needed."""
    flat = " ".join(text.split())
    if len(flat) <= max_len:
        return flat
    return flat[: max_len - 1] + "…"


def _format_timestamp(timestamp_ms: int) -> str:
    moment = datetime.fromtimestamp(timestamp_ms / 1000, tz=UTC)
    return moment.strftime("%Y-%m-%d %H:%M:%S UTC")


def _format_elapsed(elapsed_seconds: float) -> str:
    """Format elapsed seconds as '1m 23.4s' or '5.2s'."""
    minutes, seconds = divmod(elapsed_seconds, 60)
    if minutes >= 1:
        return f"{int(minutes)}m {seconds:.1f}s"
    return f"{elapsed_seconds:.1f}s"


def print_run_summary(
    run: Run,
    dataset_name: str,
    export_path: Path | None = None,
    elapsed_seconds: float | None = None,
) -> None:
    """Print the run header: identity, aggregates and health badge."""
    health_color = _GREEN if run.health is RunHealth.HEALTHY else _YELLOW
    score_color = _score_color(run.average_score)

    typer.echo("")
    _rule(color=_CYAN)
    typer.echo(f"{_CYAN}{_BOLD}  pipe-eval  ·  Run #{run.id[:8]}{_RESET}")
    _rule(color=_CYAN)

    rows: list[tuple[str, str]] = [
        ("Dataset", dataset_name),
        ("Model", run.model),
        ("Timestamp", _format_timestamp(run.timestamp)),
        ("Status", run.status.value),
        ("Mean score", f"{score_color}{run.average_score * 100:.1f}%{_RESET}"),
        ("Cases passed", f"{run.passed_count}/{len(run.results)}"),
        ("Avg latency", f"{run.average_latency_ms}ms"),
        ("Health", f"{health_color}{run.health.value.upper()}{_RESET}"),
    ]
    if elapsed_seconds is not None:
        rows.append(("Elapsed", _format_elapsed(elapsed_seconds)))
    if export_path is not None:
        rows.append(("Export", str(export_path)))

    label_w = max(len(label) for label, _ in rows)
    for label, value in rows:
        typer.echo(f"  {_DIM}{label:<{label_w}}{_RESET}  {_WHITE}{value}{_RESET}")


def print_case_table(results: list[EvalResult]) -> None:
    """Print one row per case: pass mark, score, latency, input and output."""
    typer.echo("")
    typer.echo(
        f"  {_DIM}{'#':>3}  {'':1}  {'Score':>5}  {'Latency':>8}  {'Input':<{_TEXT_W}}{_RESET}"
    )
    typer.echo(f"  {'─' * (3 + 2 + 1 + 2 + 5 + 2 + 8 + 2 + _TEXT_W)}")
    if not results:
        typer.echo(f"  {_DIM}No cases match.{_RESET}")
        return

    for index, result in enumerate(results, start=1):
        mark = f"{_GREEN}✓{_RESET}" if result.is_pass else f"{_RED}✗{_RESET}"
        color = _score_color(result.score)
        typer.echo(
            f"  {index:>3}  {mark}  {color}{result.score:>5.2f}{_RESET}"
            f"  {result.latency_ms:>6}ms  {_truncate(result.input)}"
        )
        typer.echo(f"  {'':>14}  {_DIM}got:      {_truncate(result.actual_output)}{_RESET}")
        typer.echo(f"  {'':>14}  {_DIM}expected: {_truncate(result.expected_output)}{_RESET}")
        typer.echo(f"  {'':>14}  {_DIM}judge:    {_truncate(result.reasoning)}{_RESET}")


def print_dashboard(summary: DashboardSummary) -> None:
    """Print the headline numbers and the accuracy trend, oldest run first."""
    typer.echo("")
    _rule(color=_CYAN)
    typer.echo(f"{_CYAN}{_BOLD}  pipe-eval  ·  Dashboard{_RESET}")
    _rule(color=_CYAN)

    if summary.latest_accuracy is None:
        accuracy = "n/a"
    else:
        accuracy = (
            f"{_score_color(summary.latest_accuracy)}"
            f"{summary.latest_accuracy * 100:.1f}%{_RESET}"
        )
    latency = (
        "n/a"
        if summary.latest_average_latency_ms is None
        else f"{summary.latest_average_latency_ms}ms"
    )
    rows = [
        ("Total runs", str(summary.total_runs)),
        ("Latest accuracy", accuracy),
        ("Latest latency", latency),
        ("Test cases", str(summary.total_test_cases)),
    ]
    label_w = max(len(label) for label, _ in rows)
    for label, value in rows:
        typer.echo(f"  {_DIM}{label:<{label_w}}{_RESET}  {_WHITE}{value}{_RESET}")

    if summary.accuracy_trend:
        typer.echo("")
        typer.echo(f"  {_DIM}Accuracy trend{_RESET}")
        for point in summary.accuracy_trend:
            color = _score_color(point.average_score)
            typer.echo(
                f"  {_format_timestamp(point.timestamp)}"
                f"  {color}{point.average_score * 100:>5.1f}%{_RESET}"
            )


def print_run_history(runs: list[Run]) -> None:
    """Print one row per run, most recent first."""
    typer.echo("")
    typer.echo(
        f"  {_DIM}{'Run':<8}  {'Timestamp':<23}  {'Score':>6}  {'Pass':>6}  Model / Dataset{_RESET}"
    )
    if not runs:
        typer.echo(f"  {_DIM}No runs match.{_RESET}")
        return

    for run in runs:
        color = _score_color(run.average_score)
        typer.echo(
            f"  {run.id[:8]:<8}  {_format_timestamp(run.timestamp):<23}"
            f"  {color}{run.average_score * 100:>5.1f}%{_RESET}"
            f"  {run.pass_rate * 100:>5.0f}%  {run.model} / {run.dataset_id}"
        )
