"""Builders for pooled SQLite executors backed by the fixture dataset."""

from pathlib import Path

from cipher_sql.config.domain.execution import ExecutionConfig
from cipher_sql.execution.infrastructure import sqlite_sandbox
from cipher_sql.execution.infrastructure.pool import ConnectionPool
from cipher_sql.execution.infrastructure.sqlite_executor import SqliteQueryExecutor
from cipher_sql.execution.infrastructure.sqlite_sandbox import SqliteSandbox
from tests.execution.fake_observer import FakeExecutionObserver

SEED_SCRIPT = Path(__file__).parents[2] / "fixtures" / "sandbox.sql"


def seeded_sandbox() -> SqliteSandbox:
    return SqliteSandbox.from_files(path=":memory:", seed_script=SEED_SCRIPT)


def sqlite_executor(
    sandbox: SqliteSandbox,
    observer: FakeExecutionObserver,
    timeout_seconds: float = 2.0,
    max_rows: int = 2000,
    max_size: int = 2,
) -> SqliteQueryExecutor:
    pool = ConnectionPool(
        engine="sqlite",
        connect=sandbox.connect,
        close=sqlite_sandbox.close_connection,
        max_size=max_size,
        observer=observer,
    )
    return SqliteQueryExecutor(
        pool=pool,
        config=ExecutionConfig(timeout_seconds=timeout_seconds, max_rows=max_rows),
        observer=observer,
    )
