"""AssignmentStore Protocol — read-only lookup of assignments by id."""

from typing import Protocol

from cipher_sql.assignment.domain.assignment import Assignment


class AssignmentStore(Protocol):
    """Static assignment data loaded once per process."""

    def list_all(self) -> list[Assignment]: ...

    def get(self, assignment_id: str) -> Assignment | None: ...
