"""ExecutionBackend registry — maps DatabaseConfig.engine to a pooled QueryExecutor."""

import asyncio
import sqlite3
from dataclasses import dataclass
from functools import partial
from typing import Any

from cipher_sql.config.domain.database import (
    DatabaseConfig,
    PostgresDatabaseConfig,
    SqliteDatabaseConfig,
)
from cipher_sql.config.domain.execution import ExecutionConfig, PoolConfig
from cipher_sql.execution.domain.executor import QueryExecutor
from cipher_sql.execution.domain.observer import ExecutionObserver
from cipher_sql.execution.infrastructure import postgres_executor, sqlite_sandbox
from cipher_sql.execution.infrastructure.pool import ConnectionPool
from cipher_sql.execution.infrastructure.postgres_executor import PostgresQueryExecutor
from cipher_sql.execution.infrastructure.sqlite_executor import SqliteQueryExecutor
from cipher_sql.execution.infrastructure.sqlite_sandbox import SqliteSandbox


@dataclass
class ExecutionBackend:
    """A QueryExecutor together with the resources it owns."""

    executor: QueryExecutor
    pool: ConnectionPool[Any]
    sandbox: SqliteSandbox | None = None

    async def aclose(self) -> None:
        await self.pool.close()
        if self.sandbox is not None:
            await asyncio.to_thread(self.sandbox.close)


def create_execution_backend(
    database: DatabaseConfig,
    pool: PoolConfig,
    execution: ExecutionConfig,
    observer: ExecutionObserver,
) -> ExecutionBackend:
    """Build the pool and executor for the configured database engine."""
    if isinstance(database, SqliteDatabaseConfig):
        return _sqlite_backend(database, pool, execution, observer)
    if isinstance(database, PostgresDatabaseConfig):
        return _postgres_backend(database, pool, execution, observer)
    raise ValueError(f"Unknown database engine: {database!r}")


def _sqlite_backend(
    database: SqliteDatabaseConfig,
    pool: PoolConfig,
    execution: ExecutionConfig,
    observer: ExecutionObserver,
) -> ExecutionBackend:
    sandbox = SqliteSandbox.from_files(path=database.path, seed_script=database.seed_script)
    sqlite_pool: ConnectionPool[sqlite3.Connection] = ConnectionPool(
        engine="sqlite",
        connect=sandbox.connect,
        close=sqlite_sandbox.close_connection,
        max_size=pool.max_size,
        observer=observer,
    )
    executor = SqliteQueryExecutor(pool=sqlite_pool, config=execution, observer=observer)
    return ExecutionBackend(executor=executor, pool=sqlite_pool, sandbox=sandbox)


def _postgres_backend(
    database: PostgresDatabaseConfig,
    pool: PoolConfig,
    execution: ExecutionConfig,
    observer: ExecutionObserver,
) -> ExecutionBackend:
    pg_pool: ConnectionPool[postgres_executor.PgConnection] = ConnectionPool(
        engine="postgres",
        connect=partial(postgres_executor.connect_postgres, database.dsn),
        close=postgres_executor.close_connection,
        reset=postgres_executor.reset_connection,
        max_size=pool.max_size,
        observer=observer,
    )
    executor = PostgresQueryExecutor(pool=pg_pool, config=execution, observer=observer)
    return ExecutionBackend(executor=executor, pool=pg_pool)
