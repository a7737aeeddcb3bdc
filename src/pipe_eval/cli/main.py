"""CLI entrypoint for pipe-eval — typer app with `run`, `view`, `dashboard` and `presets` commands."""

import asyncio
import logging
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import NoReturn

import structlog
import typer

from pipe_eval.agent.domain.presets import find_presets, resolve_system_instruction
from pipe_eval.agent.infrastructure.litellm import LiteLLMAgentGateway
from pipe_eval.agent.infrastructure.observer import StructlogAgentObserver
from pipe_eval.cli.output.summary import (
    print_case_table,
    print_dashboard,
    print_run_history,
    print_run_summary,
)
from pipe_eval.config.domain.agent import AgentConfig
from pipe_eval.config.domain.config import EvalConfig
from pipe_eval.config.infrastructure.observer import StructlogConfigObserver
from pipe_eval.config.infrastructure.yaml_loader import YamlConfigLoader
from pipe_eval.core.errors import PipeEvalError, ValidationError
from pipe_eval.dataset.application.store import CaseStore
from pipe_eval.dataset.domain.dataset import Dataset
from pipe_eval.dataset.infrastructure.jsonl_loader import JsonlCaseLoader
from pipe_eval.dataset.infrastructure.observer import StructlogDatasetObserver
from pipe_eval.dataset.infrastructure.seed import seed_datasets
from pipe_eval.evaluation.application.engine import EvaluationEngine
from pipe_eval.evaluation.domain.observer import EvaluationObserver
from pipe_eval.evaluation.infrastructure.composite_observer import (
    CompositeEvaluationObserver,
)
from pipe_eval.evaluation.infrastructure.observer import StructlogEvaluationObserver
from pipe_eval.evaluation.infrastructure.progress_observer import (
    ProgressEvaluationObserver,
)
from pipe_eval.export.run_export import load_run_export, write_run_export
from pipe_eval.history.application.dashboard import build_dashboard
from pipe_eval.history.application.index import RunHistoryIndex
from pipe_eval.history.domain.filter import RunFilter
from pipe_eval.judge.infrastructure.litellm import LiteLLMJudgeGateway
from pipe_eval.judge.infrastructure.observer import StructlogJudgeObserver

app = typer.Typer(add_completion=False)

_RED = "\033[31m"
_RESET = "\033[0m"


def _configure_structlog(log_format: str, verbose: bool) -> None:
    """Configure structlog to write to stderr in the requested format."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.DEBUG if verbose else logging.INFO
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _fail(exc: Exception) -> NoReturn:
    typer.echo(f"{_RED}{exc}{_RESET}", err=True)
    raise typer.Exit(code=1)


def _agent_config(config: EvalConfig) -> AgentConfig:
    section = config.agent
    if section.preset is not None:
        instruction = resolve_system_instruction(section.preset)
    else:
        instruction = section.system_instruction or ""
    return AgentConfig(
        model=section.model,
        system_instruction=instruction,
        temperature=section.temperature,
    )


def _target_dataset(
    config: EvalConfig, seed_dataset: str | None
) -> tuple[CaseStore, Dataset]:
    """Return the store and the dataset the run evaluates.

    Raises:
        ValidationError: if the seed id is unknown, or no seed id is given and
            the config has no dataset section.
        DatasetLoadError: if the config's case file cannot be loaded.
    """
    observer = StructlogDatasetObserver()
    if seed_dataset is not None:
        store = CaseStore(observer=observer, datasets=seed_datasets())
        dataset = store.get_dataset(seed_dataset)
        if dataset is None:
            known = ", ".join(d.id for d in store.list_datasets())
            raise ValidationError(
                [f"unknown seed dataset {seed_dataset!r} (known: {known})"]
            )
        return store, dataset

    section = config.dataset
    if section is None:
        raise ValidationError(
            ["config has no dataset section; add one or pass --seed-dataset"]
        )
    drafts = JsonlCaseLoader(
        observer=observer,
        input_key=section.input_key,
        expected_key=section.expected_key,
    ).load(path=section.path)
    store = CaseStore(observer=observer)
    dataset = store.create_dataset(
        name=section.name,
        description=section.description,
        process=section.process,
        cases=drafts,
        agent_context=section.agent_context,
    )
    return store, dataset


@app.command()
def run(
    config_path: Path = typer.Argument(..., help="Path to run config YAML"),
    output_dir: Path = typer.Option(
        Path("./results"),
        "--output-dir",
        "-o",
        help="Directory for the run export",
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Hide the progress bar"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug events"),
    seed_dataset: str | None = typer.Option(
        None,
        "--seed-dataset",
        help="Evaluate a built-in dataset by id instead of the config's case file",
    ),
) -> None:
    """Evaluate an agent against a case file and export the finished run."""
    _configure_structlog(log_format=log_format, verbose=verbose)

    try:
        config = YamlConfigLoader(observer=StructlogConfigObserver()).load(
            path=config_path
        )
        agent_config = _agent_config(config=config)

        store, dataset = _target_dataset(config=config, seed_dataset=seed_dataset)

        observers: list[EvaluationObserver] = [StructlogEvaluationObserver()]
        if log_format != "json" and not quiet:
            observers.append(ProgressEvaluationObserver())
        history = RunHistoryIndex()
        engine = EvaluationEngine(
            agent_gateway=LiteLLMAgentGateway(
                gateway=config.gateway, observer=StructlogAgentObserver()
            ),
            judge_gateway=LiteLLMJudgeGateway(
                config=config.judge,
                gateway=config.gateway,
                observer=StructlogJudgeObserver(),
            ),
            recorder=history,
            observer=CompositeEvaluationObserver(observers=observers),
        )

        started_at = time.monotonic()
        finished = asyncio.run(engine.start_run(dataset=dataset, config=agent_config))
        elapsed_seconds = time.monotonic() - started_at

        export_path = write_run_export(run=finished, output_dir=output_dir)
    except KeyboardInterrupt:
        typer.echo("Evaluation interrupted.", err=True)
        raise typer.Exit(code=1)
    except PipeEvalError as exc:
        _fail(exc)

    print_run_summary(
        run=finished,
        dataset_name=store.resolve_dataset_name(finished.dataset_id),
        export_path=export_path,
        elapsed_seconds=elapsed_seconds,
    )
    print_case_table(results=list(finished.results))


@app.command()
def view(
    export_path: Path = typer.Argument(..., help="Path to an eval_run_*.json export"),
    search: str = typer.Option(
        "", "--search", "-s", help="Only show cases whose input or output contains this"
    ),
) -> None:
    """Show a previously exported run."""
    try:
        stored = load_run_export(path=export_path)
    except PipeEvalError as exc:
        _fail(exc)

    # Exports outlive the session that produced them, so only the id is known.
    print_run_summary(run=stored, dataset_name=stored.dataset_id)
    print_case_table(results=stored.search_results(search))


@app.command()
def dashboard(
    results_dir: Path = typer.Argument(
        ..., help="Directory holding eval_run_*.json exports"
    ),
    model: str | None = typer.Option(None, "--model", help="Only list runs of this model"),
    dataset_id: str | None = typer.Option(
        None, "--dataset-id", help="Only list runs against this dataset id"
    ),
    since: datetime | None = typer.Option(
        None, "--since", formats=["%Y-%m-%d"], help="First calendar day to list (UTC)"
    ),
    until: datetime | None = typer.Option(
        None, "--until", formats=["%Y-%m-%d"], help="Last calendar day to list (UTC)"
    ),
) -> None:
    """Summarise the exported runs in a directory and list the matching ones."""
    if not results_dir.is_dir():
        _fail(ValidationError([f"results directory not found: {results_dir}"]))

    try:
        exported = [load_run_export(path=p) for p in results_dir.glob("eval_run_*.json")]
    except PipeEvalError as exc:
        _fail(exc)

    history = RunHistoryIndex()
    for stored in sorted(exported, key=lambda r: r.timestamp):
        history.record(stored)

    store = CaseStore(observer=StructlogDatasetObserver(), datasets=seed_datasets())
    print_dashboard(summary=build_dashboard(history=history, store=store))

    run_filter = RunFilter(
        model=model,
        dataset_id=dataset_id,
        start_date=since.date() if since is not None else None,
        end_date=until.date() if until is not None else None,
    )
    print_run_history(runs=history.filter(run_filter))


@app.command()
def presets(
    query: str = typer.Option("", "--query", "-q", help="Filter presets by label"),
) -> None:
    """List the built-in agent presets."""
    matches = find_presets(query)
    if not matches:
        typer.echo("No presets match.")
        return
    for preset in matches:
        typer.echo(f"{preset.id:<18} {preset.label}")


if __name__ == "__main__":
    app()
