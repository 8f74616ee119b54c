"""Request bodies accepted by the HTTP API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ExecuteRequest(BaseModel):
    # Any JSON value; the safety gate rejects missing and non-string queries.
    query: Any = None


class ValidateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    assignment_id: str | int | None = Field(default=None, alias="assignmentId")
    query: Any = None

    @property
    def assignment_key(self) -> str:
        return "" if self.assignment_id is None else str(self.assignment_id)
