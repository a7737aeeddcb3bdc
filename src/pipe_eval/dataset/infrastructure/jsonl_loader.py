"""JSONL case loader — reads a case file and returns CaseDraft objects."""

import json
from pathlib import Path
from typing import Any

from pipe_eval.dataset.domain.case import CaseDraft
from pipe_eval.dataset.domain.observer import DatasetObserver
from pipe_eval.dataset.infrastructure.errors import DatasetLoadError


class JsonlCaseLoader:
    """Loads one CaseDraft per non-empty JSONL line.

    The configured input and expected-output keys become the case text; any
    remaining keys on the line become the case context.
    """

    def __init__(
        self,
        observer: DatasetObserver,
        input_key: str = "input",
        expected_key: str = "expected_output",
    ) -> None:
        self._observer = observer
        self._input_key = input_key
        self._expected_key = expected_key

    def load(self, path: Path) -> list[CaseDraft]:
        """
        Collects ALL per-line errors before raising a single DatasetLoadError.

        Raises:
            DatasetLoadError: if the file is not found or not UTF-8 text, any line
                is invalid JSON or not an object, or any line is missing a
                configured key or holds a non-string value for one.
        """
        path_str = str(path)
        self._observer.dataset_loading_started(path=path_str)

        try:
            with open(path, encoding="utf-8") as fh:
                lines = [line for line in fh if line.strip()]
        except FileNotFoundError:
            reason = f"file not found: {path_str}"
            self._observer.dataset_loading_failed(path=path_str, reason=reason)
            raise DatasetLoadError(reason=reason)
        except (OSError, UnicodeDecodeError) as exc:
            reason = f"unreadable file {path_str}: {exc}"
            self._observer.dataset_loading_failed(path=path_str, reason=reason)
            raise DatasetLoadError(reason=reason) from exc

        drafts: list[CaseDraft] = []
        errors: list[str] = []
        for index, line in enumerate(lines):
            result = self._parse_line(line=line, index=index)
            if isinstance(result, str):
                errors.append(result)
            else:
                drafts.append(result)

        if errors:
            reason = "; ".join(errors)
            self._observer.dataset_loading_failed(path=path_str, reason=reason)
            raise DatasetLoadError(reason=reason)

        self._observer.dataset_loading_completed(path=path_str, total_cases=len(drafts))
        return drafts

    def _parse_line(self, line: str, index: int) -> CaseDraft | str:
        """Return a CaseDraft, or an error string describing the problem."""
        try:
            data: Any = json.loads(line)
        except json.JSONDecodeError as exc:
            return f"line {index}: invalid JSON: {exc}"
        if not isinstance(data, dict):
            return f"line {index}: expected a JSON object"

        missing = [k for k in (self._input_key, self._expected_key) if k not in data]
        if missing:
            keys = ", ".join(f"'{k}'" for k in missing)
            return f"line {index}: missing key(s) {keys}"

        not_text = [
            k for k in (self._input_key, self._expected_key) if not isinstance(data[k], str)
        ]
        if not_text:
            keys = ", ".join(f"'{k}'" for k in not_text)
            return f"line {index}: {keys} must be a string"

        context = {
            key: value
            for key, value in data.items()
            if key not in (self._input_key, self._expected_key)
        }
        return CaseDraft(
            input=data[self._input_key],
            expected_output=data[self._expected_key],
            context=context or None,
        )
