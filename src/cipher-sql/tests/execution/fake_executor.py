"""FakeQueryExecutor — in-memory QueryExecutor implementation for use in tests."""

from dataclasses import dataclass

from cipher_sql.result.domain.result import QueryResult


@dataclass(frozen=True)
class ExecutedQuery:
    query: str
    redact: bool


class FakeQueryExecutor:
    """Satisfies the QueryExecutor protocol.

    Returns the canned result registered for a query, or ``default``. Queries
    registered in ``errors`` raise the given exception instead.
    """

    def __init__(
        self,
        results: dict[str, QueryResult] | None = None,
        default: QueryResult | None = None,
        errors: dict[str, Exception] | None = None,
    ) -> None:
        self._results = results or {}
        self._default = default or QueryResult()
        self._errors = errors or {}
        self.executed: list[ExecutedQuery] = []

    async def execute(self, query: str, redact: bool = False) -> QueryResult:
        self.executed.append(ExecutedQuery(query=query, redact=redact))
        if query in self._errors:
            raise self._errors[query]
        return self._results.get(query, self._default)
