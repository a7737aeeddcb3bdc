"""Run export — a self-contained JSON document mirroring one Run."""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from pipe_eval.core.errors import PipeEvalError
from pipe_eval.evaluation.domain.run import Run

_FILENAME_PREFIX = "eval_run_"


class ExportLoadError(PipeEvalError):
    """Raised when an export file is missing or does not describe a Run."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to load run export {path}: {reason}")


def export_filename(run: Run) -> str:
    """Build the artifact name: eval_run_{first 8 chars of the run id}.json."""
    return f"{_FILENAME_PREFIX}{run.id[:8]}.json"


def build_export(run: Run) -> dict[str, Any]:
    """Field-for-field mirror of the Run, camelCase keys, nested results included."""
    return run.model_dump(mode="json", by_alias=True)


def serialize_run(run: Run) -> str:
    return json.dumps(build_export(run), indent=2)


def write_run_export(run: Run, output_dir: Path) -> Path:
    """Write the export into output_dir (created if needed) and return its path."""
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / export_filename(run)
    path.write_text(serialize_run(run), encoding="utf-8")
    return path


def load_run_export(path: Path) -> Run:
    """
    Raises:
        ExportLoadError: if the file does not exist, cannot be read as UTF-8
            text, or is not a valid Run document.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ExportLoadError(path=path, reason="file not found") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ExportLoadError(path=path, reason=f"unreadable file ({exc})") from exc
    try:
        return Run.model_validate_json(raw)
    except PydanticValidationError as exc:
        raise ExportLoadError(path=path, reason=str(exc)) from exc
