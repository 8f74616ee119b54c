"""SqliteQueryExecutor — runs admitted queries against the SQLite sandbox."""

import asyncio
import sqlite3
import time
from typing import Any

from cipher_sql.config.domain.execution import ExecutionConfig
from cipher_sql.execution.domain.errors import QueryExecutionError, QueryTimeoutError
from cipher_sql.execution.domain.observer import ExecutionObserver
from cipher_sql.execution.infrastructure.pool import ConnectionPool
from cipher_sql.result.domain.result import QueryResult

_ENGINE = "sqlite"
_REDACTED = "<reference>"
_FETCH_BATCH = 200
# Opcodes between progress handler calls; the handler aborts past the deadline.
_PROGRESS_INTERVAL = 10_000


class SqliteQueryExecutor:
    """Satisfies the QueryExecutor protocol on top of a pool of sqlite3 connections."""

    def __init__(
        self,
        pool: ConnectionPool[sqlite3.Connection],
        config: ExecutionConfig,
        observer: ExecutionObserver,
    ) -> None:
        self._pool = pool
        self._config = config
        self._observer = observer

    async def execute(self, query: str, redact: bool = False) -> QueryResult:
        """
        Run ``query`` on a pooled connection and return its columns and rows.

        Raises:
            QueryTimeoutError: if the statement outlives ``timeout_seconds``.
            QueryExecutionError: for any other error reported by SQLite.
        """
        self._observer.query_started(engine=_ENGINE, query=_REDACTED if redact else query)
        started = time.perf_counter()

        try:
            async with self._pool.acquire() as conn:
                result = await asyncio.to_thread(self._run, conn, query)
        except sqlite3.Error as exc:
            if _is_interrupt(exc):
                self._observer.query_timed_out(
                    engine=_ENGINE, timeout_seconds=self._config.timeout_seconds
                )
                raise QueryTimeoutError(self._config.timeout_seconds) from exc
            self._observer.query_failed(
                engine=_ENGINE, reason=_REDACTED if redact else str(exc)
            )
            raise QueryExecutionError(str(exc)) from exc

        self._observer.query_completed(
            engine=_ENGINE,
            row_count=len(result.rows),
            elapsed_ms=(time.perf_counter() - started) * 1000.0,
        )
        return result

    def _run(self, conn: sqlite3.Connection, query: str) -> QueryResult:
        deadline = time.perf_counter() + self._config.timeout_seconds

        def progress_handler() -> int:
            return 1 if time.perf_counter() > deadline else 0

        conn.set_progress_handler(progress_handler, _PROGRESS_INTERVAL)
        try:
            cur = conn.execute(query)
            columns = [d[0] for d in cur.description] if cur.description else []
            rows = self._fetch(cur) if columns else []
            cur.close()
        finally:
            conn.set_progress_handler(None, 0)

        return QueryResult(
            columns=columns,
            rows=[dict(zip(columns, row)) for row in rows],
        )

    def _fetch(self, cur: sqlite3.Cursor) -> list[tuple[Any, ...]]:
        rows: list[tuple[Any, ...]] = []
        while len(rows) < self._config.max_rows:
            batch = cur.fetchmany(min(_FETCH_BATCH, self._config.max_rows - len(rows)))
            if not batch:
                break
            rows.extend(batch)
        return rows


def _is_interrupt(exc: sqlite3.Error) -> bool:
    return isinstance(exc, sqlite3.OperationalError) and "interrupted" in str(exc).lower()
