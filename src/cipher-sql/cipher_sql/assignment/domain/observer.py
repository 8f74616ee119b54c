"""Observer port for the assignment domain — defines events in domain language."""

from typing import Protocol


class AssignmentObserver(Protocol):
    def catalog_loaded(self, path: str, total_assignments: int) -> None: ...

    def catalog_load_failed(self, path: str, reason: str) -> None: ...
