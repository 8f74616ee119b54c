"""Error types raised by the assignment domain."""

from cipher_sql.core.errors import CipherSqlError


class AssignmentNotFoundError(CipherSqlError):
    """Raised when no assignment exists for the requested id."""

    def __init__(self, assignment_id: str) -> None:
        self.assignment_id = assignment_id
        super().__init__("Assignment not found")
