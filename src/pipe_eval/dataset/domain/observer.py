"""Observer port for the dataset domain — defines events in domain language."""

from typing import Protocol


class DatasetObserver(Protocol):
    def dataset_created(self, dataset_id: str, name: str, total_cases: int) -> None: ...

    def dataset_rejected(self, name: str, reason: str) -> None: ...

    def dataset_deleted(self, dataset_id: str) -> None: ...

    def dataset_loading_started(self, path: str) -> None: ...

    def dataset_loading_completed(self, path: str, total_cases: int) -> None: ...

    def dataset_loading_failed(self, path: str, reason: str) -> None: ...
