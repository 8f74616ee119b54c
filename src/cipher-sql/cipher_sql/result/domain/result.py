"""Result set value objects — raw executor output and its canonical form."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

type Row = dict[str, Any]
type NormalizedRow = dict[str, str | None]


class QueryResult(BaseModel, frozen=True):
    """Immutable value object holding one execution's columns and rows.

    ``columns`` keeps the executor's declared order. Each row maps a column name
    to a nullable scalar exactly as the database driver returned it.
    """

    model_config = ConfigDict(frozen=True)

    columns: list[str] = Field(default_factory=list)
    rows: list[Row] = Field(default_factory=list)


class NormalizedResult(QueryResult, frozen=True):
    """A QueryResult whose non-null cells are canonical, trimmed strings.

    ``None`` stays ``None``; it is never rendered as text.
    """

    rows: list[NormalizedRow] = Field(default_factory=list)
