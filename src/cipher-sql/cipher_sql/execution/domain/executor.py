"""QueryExecutor Protocol — structural interface for running SQL against the sandbox."""

from typing import Protocol

from cipher_sql.result.domain.result import QueryResult


class QueryExecutor(Protocol):
    """Runs a single, already admitted query and returns its result set.

    ``redact`` marks trusted reference queries whose text must not be logged.
    """

    async def execute(self, query: str, redact: bool = False) -> QueryResult: ...
