"""Error types raised when the safety gate rejects a query."""

from cipher_sql.core.errors import CipherSqlError
from cipher_sql.safety.domain.reason import RejectionReason


class UnsafeQueryError(CipherSqlError):
    """Raised when a submitted query does not pass the safety gate.

    The message is the learner-facing reason; ``reason`` carries the code.
    """

    def __init__(self, reason: RejectionReason) -> None:
        self.reason = reason
        super().__init__(reason.message)
