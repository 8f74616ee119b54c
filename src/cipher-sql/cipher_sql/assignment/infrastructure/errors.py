"""Error types raised by assignment infrastructure."""

from cipher_sql.core.errors import CipherSqlError


class AssignmentLoadError(CipherSqlError):
    """Raised when the assignment catalog cannot be loaded or is malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load assignments: {reason}")
