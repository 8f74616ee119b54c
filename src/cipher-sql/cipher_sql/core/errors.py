"""Base exception class for all cipher-sql-specific errors."""


class CipherSqlError(Exception):
    """Base class for all cipher-sql errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
