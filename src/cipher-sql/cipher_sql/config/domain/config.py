"""Top-level StudioConfig aggregate — the root configuration object."""

from pathlib import Path

from pydantic import BaseModel, Field

from cipher_sql.config.domain.database import DatabaseConfig
from cipher_sql.config.domain.execution import ExecutionConfig, PoolConfig


class StudioConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a cipher-sql process."""

    assignments: Path
    database: DatabaseConfig
    pool: PoolConfig = Field(default_factory=PoolConfig)
    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)
