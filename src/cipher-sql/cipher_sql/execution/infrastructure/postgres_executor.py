"""PostgresQueryExecutor — runs admitted queries in read-only PostgreSQL transactions."""

import asyncio
import time
from typing import Any

import psycopg2
import psycopg2.errors
import psycopg2.extensions

from cipher_sql.config.domain.execution import ExecutionConfig
from cipher_sql.execution.domain.errors import QueryExecutionError, QueryTimeoutError
from cipher_sql.execution.domain.observer import ExecutionObserver
from cipher_sql.execution.infrastructure.pool import ConnectionPool
from cipher_sql.result.domain.result import QueryResult

_ENGINE = "postgres"
_REDACTED = "<reference>"
_FETCH_BATCH = 200

type PgConnection = psycopg2.extensions.connection


def connect_postgres(dsn: str) -> PgConnection:
    """Open a connection whose sessions are read-only by default."""
    conn = psycopg2.connect(dsn)
    conn.set_session(readonly=True, autocommit=False)
    return conn


def reset_connection(conn: PgConnection) -> None:
    """Roll back any open transaction; raises if the connection is unusable."""
    if conn.closed:
        raise psycopg2.InterfaceError("connection already closed")
    conn.rollback()


def close_connection(conn: PgConnection) -> None:
    conn.close()


def error_message(exc: psycopg2.Error) -> str:
    """The server's primary message, without the ``LINE n:`` context that echoes the query."""
    diag = getattr(exc, "diag", None)
    primary = diag.message_primary if diag is not None else None
    return (primary or str(exc)).strip()


class PostgresQueryExecutor:
    """Satisfies the QueryExecutor protocol on top of a pool of psycopg2 connections.

    Each query runs in its own read-only transaction with a statement timeout
    and is always rolled back, so nothing a query does outlives it.
    """

    def __init__(
        self,
        pool: ConnectionPool[PgConnection],
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
            QueryTimeoutError: if PostgreSQL cancels the statement on timeout.
            QueryExecutionError: for any other error reported by the server.
        """
        self._observer.query_started(engine=_ENGINE, query=_REDACTED if redact else query)
        started = time.perf_counter()

        try:
            async with self._pool.acquire() as conn:
                result = await asyncio.to_thread(self._run, conn, query)
        except psycopg2.errors.QueryCanceled as exc:
            self._observer.query_timed_out(
                engine=_ENGINE, timeout_seconds=self._config.timeout_seconds
            )
            raise QueryTimeoutError(self._config.timeout_seconds) from exc
        except psycopg2.Error as exc:
            message = error_message(exc)
            self._observer.query_failed(
                engine=_ENGINE, reason=_REDACTED if redact else message
            )
            raise QueryExecutionError(message) from exc

        self._observer.query_completed(
            engine=_ENGINE,
            row_count=len(result.rows),
            elapsed_ms=(time.perf_counter() - started) * 1000.0,
        )
        return result

    def _run(self, conn: PgConnection, query: str) -> QueryResult:
        timeout_ms = int(self._config.timeout_seconds * 1000)
        try:
            with conn.cursor() as cur:
                cur.execute("SET LOCAL statement_timeout = %s", (timeout_ms,))
                cur.execute(query)

                columns: list[str] = []
                rows: list[tuple[Any, ...]] = []
                if cur.description:
                    columns = [d.name for d in cur.description]
                    while len(rows) < self._config.max_rows:
                        batch = cur.fetchmany(
                            min(_FETCH_BATCH, self._config.max_rows - len(rows))
                        )
                        if not batch:
                            break
                        rows.extend(batch)
        finally:
            if not conn.closed:
                conn.rollback()

        return QueryResult(
            columns=columns,
            rows=[dict(zip(columns, row)) for row in rows],
        )
