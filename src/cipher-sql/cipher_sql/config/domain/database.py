"""Database configuration models — discriminated union on `engine` field."""

from pathlib import Path
from typing import Annotated, Literal

from pydantic import BaseModel, Field


class SqliteDatabaseConfig(BaseModel, frozen=True):
    """SQLite sandbox, either a database file or an in-memory copy built from a seed script."""

    engine: Literal["sqlite"]
    path: str = Field(min_length=1)
    seed_script: Path | None = None


class PostgresDatabaseConfig(BaseModel, frozen=True):
    """PostgreSQL sandbox reached through a libpq connection string."""

    engine: Literal["postgres"]
    dsn: str = Field(min_length=1)


type DatabaseConfig = Annotated[
    SqliteDatabaseConfig | PostgresDatabaseConfig,
    Field(discriminator="engine"),
]
