"""Execution and connection pool configuration models."""

from pydantic import BaseModel, Field


class PoolConfig(BaseModel, frozen=True):
    max_size: int = Field(default=5, ge=1)


class ExecutionConfig(BaseModel, frozen=True):
    timeout_seconds: float = Field(default=2.5, gt=0.0)
    max_rows: int = Field(default=2000, ge=1)
