"""Tests for the StudioConfig domain models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from cipher_sql.config.domain.config import StudioConfig
from cipher_sql.config.domain.database import PostgresDatabaseConfig, SqliteDatabaseConfig
from cipher_sql.config.domain.execution import ExecutionConfig, PoolConfig


class TestDatabaseDiscriminator:
    def test_sqlite_engine_selects_sqlite_config(self) -> None:
        cfg = StudioConfig.model_validate(
            {"assignments": "a.yaml", "database": {"engine": "sqlite", "path": ":memory:"}}
        )

        assert isinstance(cfg.database, SqliteDatabaseConfig)
        assert cfg.assignments == Path("a.yaml")

    def test_postgres_engine_selects_postgres_config(self) -> None:
        cfg = StudioConfig.model_validate(
            {
                "assignments": "a.yaml",
                "database": {"engine": "postgres", "dsn": "postgresql://localhost/db"},
            }
        )

        assert isinstance(cfg.database, PostgresDatabaseConfig)

    def test_postgres_requires_dsn(self) -> None:
        with pytest.raises(ValidationError):
            StudioConfig.model_validate(
                {"assignments": "a.yaml", "database": {"engine": "postgres"}}
            )

    def test_sqlite_requires_path(self) -> None:
        with pytest.raises(ValidationError):
            StudioConfig.model_validate(
                {"assignments": "a.yaml", "database": {"engine": "sqlite"}}
            )


class TestLimits:
    def test_defaults(self) -> None:
        assert PoolConfig().max_size == 5
        assert ExecutionConfig().timeout_seconds == 2.5
        assert ExecutionConfig().max_rows == 2000

    @pytest.mark.parametrize("max_size", [0, -1])
    def test_pool_size_must_be_positive(self, max_size: int) -> None:
        with pytest.raises(ValidationError):
            PoolConfig(max_size=max_size)

    def test_timeout_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            ExecutionConfig(timeout_seconds=0)

    def test_max_rows_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            ExecutionConfig(max_rows=0)
