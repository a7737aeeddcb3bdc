"""CaseStore — the in-memory owner of every Dataset for a session."""

import uuid
from collections.abc import Iterable, Sequence

from pipe_eval.core.errors import ValidationError
from pipe_eval.dataset.domain.case import CaseDraft, TestCase
from pipe_eval.dataset.domain.dataset import Dataset
from pipe_eval.dataset.domain.observer import DatasetObserver
from pipe_eval.dataset.domain.process import PipefyProcess

DELETED_DATASET_LABEL = "Deleted Dataset"


class CaseStore:
    """Holds the active datasets, newest-first for ones created at runtime.

    Created once per session and passed explicitly to whatever needs it.
    Initial datasets keep the order they were given in.
    """

    def __init__(
        self,
        observer: DatasetObserver,
        datasets: Iterable[Dataset] | None = None,
    ) -> None:
        self._observer = observer
        self._datasets: list[Dataset] = list(datasets) if datasets is not None else []

    def create_dataset(
        self,
        name: str,
        description: str,
        process: PipefyProcess,
        cases: Sequence[CaseDraft],
        agent_context: str | None = None,
    ) -> Dataset:
        """Validate the drafts, assign fresh ids, and add the dataset at the front.

        Raises:
            ValidationError: listing every problem found, if the name or
                description is blank or any case lacks input/expected output.
        """
        problems = _validate(name=name, description=description, cases=cases)
        if problems:
            self._observer.dataset_rejected(name=name, reason="; ".join(problems))
            raise ValidationError(problems)

        dataset = Dataset(
            id=str(uuid.uuid4()),
            name=name,
            process=process,
            description=description,
            agent_context=agent_context or None,
            cases=tuple(
                TestCase(
                    id=str(uuid.uuid4()),
                    input=draft.input,
                    expected_output=draft.expected_output,
                    context=draft.context,
                )
                for draft in cases
            ),
        )
        self._datasets.insert(0, dataset)
        self._observer.dataset_created(
            dataset_id=dataset.id, name=dataset.name, total_cases=len(dataset.cases)
        )
        return dataset

    def delete_dataset(self, dataset_id: str) -> None:
        """Remove the dataset if present; deleting an unknown id is a no-op.

        Runs that reference the dataset are untouched.
        """
        remaining = [d for d in self._datasets if d.id != dataset_id]
        if len(remaining) != len(self._datasets):
            self._datasets = remaining
            self._observer.dataset_deleted(dataset_id=dataset_id)

    def list_datasets(self) -> list[Dataset]:
        return list(self._datasets)

    def get_dataset(self, dataset_id: str) -> Dataset | None:
        return next((d for d in self._datasets if d.id == dataset_id), None)

    def resolve_dataset_name(self, dataset_id: str) -> str:
        """Return the dataset's display name, or a placeholder if it was deleted."""
        dataset = self.get_dataset(dataset_id)
        return dataset.name if dataset is not None else DELETED_DATASET_LABEL

    def total_case_count(self) -> int:
        return sum(len(d.cases) for d in self._datasets)


def _validate(name: str, description: str, cases: Sequence[CaseDraft]) -> list[str]:
    problems: list[str] = []
    if not name.strip():
        problems.append("name is required")
    if not description.strip():
        problems.append("description is required")
    for index, draft in enumerate(cases):
        if not draft.input.strip():
            problems.append(f"case {index}: input is required")
        if not draft.expected_output.strip():
            problems.append(f"case {index}: expected output is required")
    return problems
