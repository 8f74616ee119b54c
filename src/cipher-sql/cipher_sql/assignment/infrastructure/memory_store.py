"""InMemoryAssignmentStore — AssignmentStore backed by a dict built once at startup."""

from cipher_sql.assignment.domain.assignment import Assignment
from cipher_sql.assignment.infrastructure.errors import AssignmentLoadError


class InMemoryAssignmentStore:
    """Satisfies the AssignmentStore protocol. Keeps the catalog order for listing."""

    def __init__(self, assignments: list[Assignment]) -> None:
        by_id: dict[str, Assignment] = {}
        duplicates: list[str] = []
        for assignment in assignments:
            if assignment.id in by_id and assignment.id not in duplicates:
                duplicates.append(assignment.id)
            by_id[assignment.id] = assignment

        if duplicates:
            ids = ", ".join(f"'{d}'" for d in duplicates)
            raise AssignmentLoadError(reason=f"duplicate assignment id(s) {ids}")

        self._by_id = by_id

    def list_all(self) -> list[Assignment]:
        return list(self._by_id.values())

    def get(self, assignment_id: str) -> Assignment | None:
        return self._by_id.get(assignment_id)
