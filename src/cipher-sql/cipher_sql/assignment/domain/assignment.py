"""Assignment domain value objects and the public (redacted) view."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

type Difficulty = Literal["Easy", "Medium", "Hard"]


class ColumnSchema(BaseModel, frozen=True):
    name: str = Field(min_length=1)
    type: str = Field(min_length=1)


class TableSchema(BaseModel, frozen=True):
    """One table of the sample dataset, with rows shown to the learner."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        loc_by_alias=False,
    )

    name: str = Field(min_length=1)
    columns: list[ColumnSchema] = Field(min_length=1)
    sample_rows: list[dict[str, Any]] = Field(default_factory=list)


class PublicAssignment(BaseModel, frozen=True):
    """What a learner may see of an assignment.

    Every Assignment field except the solution query. This is the only
    assignment shape that leaves the core.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        loc_by_alias=False,
        coerce_numbers_to_str=True,
    )

    id: str = Field(min_length=1)
    title: str = Field(min_length=1)
    difficulty: Difficulty
    description: str = ""
    question: str = Field(min_length=1)
    starter_query: str = ""
    tables: list[TableSchema] = Field(default_factory=list)


class Assignment(PublicAssignment, frozen=True):
    """A full assignment, including the hidden solution query.

    ``solution_query`` is excluded from every dump and from ``repr`` so that it
    cannot leak through accidental serialization or logging.
    """

    solution_query: str = Field(min_length=1, exclude=True, repr=False)


def to_public(assignment: Assignment) -> PublicAssignment:
    """Return the public view of ``assignment`` without the solution query."""
    return PublicAssignment.model_validate(assignment.model_dump())
