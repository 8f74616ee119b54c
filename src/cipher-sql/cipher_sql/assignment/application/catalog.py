"""AssignmentCatalog — the only way assignments leave the core, always redacted."""

from cipher_sql.assignment.domain.assignment import PublicAssignment, to_public
from cipher_sql.assignment.domain.errors import AssignmentNotFoundError
from cipher_sql.assignment.domain.store import AssignmentStore


class AssignmentCatalog:
    """Lists and fetches assignments as PublicAssignment views."""

    def __init__(self, store: AssignmentStore) -> None:
        self._store = store

    def list_assignments(self) -> list[PublicAssignment]:
        return [to_public(a) for a in self._store.list_all()]

    def get_assignment(self, assignment_id: str) -> PublicAssignment:
        """
        Return the public view of one assignment.

        Raises:
            AssignmentNotFoundError: if the store has no such id.
        """
        assignment = self._store.get(assignment_id)
        if assignment is None:
            raise AssignmentNotFoundError(assignment_id=assignment_id)
        return to_public(assignment)
