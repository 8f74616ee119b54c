"""Error types raised when the database engine fails to run a query."""

from cipher_sql.core.errors import CipherSqlError


class QueryExecutionError(CipherSqlError):
    """Raised when the engine reports an error; the message is passed through verbatim."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class QueryTimeoutError(QueryExecutionError):
    """Raised when a query runs longer than the configured statement timeout."""

    def __init__(self, timeout_seconds: float) -> None:
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"Failed to execute query: timed out after {timeout_seconds:g} seconds"
        )
