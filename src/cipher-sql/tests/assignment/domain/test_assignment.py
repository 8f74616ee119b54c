"""Tests for Assignment models and their public view."""

import pytest
from pydantic import ValidationError

from cipher_sql.assignment.domain.assignment import (
    Assignment,
    PublicAssignment,
    TableSchema,
    to_public,
)
from tests.assignment.factories import SELECT_ALL_SOLUTION, make_assignment


class TestAssignmentRedaction:
    """The solution query never leaves an Assignment through serialization."""

    def test_model_dump_excludes_solution_query(self) -> None:
        dumped = make_assignment().model_dump()

        assert "solution_query" not in dumped
        assert SELECT_ALL_SOLUTION not in str(dumped)

    def test_json_dump_excludes_solution_query(self) -> None:
        dumped = make_assignment().model_dump_json(by_alias=True)

        assert "solutionQuery" not in dumped
        assert SELECT_ALL_SOLUTION not in dumped

    def test_repr_excludes_solution_query(self) -> None:
        assert SELECT_ALL_SOLUTION not in repr(make_assignment())

    def test_solution_query_stays_readable(self) -> None:
        assert make_assignment().solution_query == SELECT_ALL_SOLUTION

    def test_to_public_returns_public_assignment(self) -> None:
        public = to_public(make_assignment())

        assert type(public) is PublicAssignment
        assert not hasattr(public, "solution_query")

    def test_to_public_keeps_every_other_field(self) -> None:
        assignment = make_assignment()
        public = to_public(assignment)

        assert public.id == assignment.id
        assert public.title == assignment.title
        assert public.difficulty == assignment.difficulty
        assert public.description == assignment.description
        assert public.question == assignment.question
        assert public.starter_query == assignment.starter_query
        assert public.tables == assignment.tables


class TestAssignmentValidation:
    def _entry(self, **overrides: object) -> dict[str, object]:
        entry: dict[str, object] = {
            "id": "1",
            "title": "Select all users",
            "difficulty": "Easy",
            "question": "Fetch every user.",
            "solution_query": "SELECT * FROM users;",
        }
        entry.update(overrides)
        return entry

    def test_numeric_id_becomes_string(self) -> None:
        assert Assignment.model_validate(self._entry(id=8)).id == "8"

    def test_optional_fields_default_to_empty(self) -> None:
        assignment = Assignment.model_validate(self._entry())

        assert assignment.description == ""
        assert assignment.starter_query == ""
        assert assignment.tables == []

    def test_camel_case_keys_are_accepted(self) -> None:
        entry = self._entry(starterQuery="SELECT 1;")
        entry["solutionQuery"] = entry.pop("solution_query")

        assignment = Assignment.model_validate(entry)

        assert assignment.starter_query == "SELECT 1;"
        assert assignment.solution_query == "SELECT * FROM users;"

    def test_solution_query_is_required(self) -> None:
        entry = self._entry()
        del entry["solution_query"]

        with pytest.raises(ValidationError):
            Assignment.model_validate(entry)

    def test_unknown_difficulty_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Assignment.model_validate(self._entry(difficulty="Impossible"))

    def test_table_needs_at_least_one_column(self) -> None:
        with pytest.raises(ValidationError):
            TableSchema(name="users", columns=[])

    def test_is_immutable(self) -> None:
        with pytest.raises(ValidationError):
            make_assignment().title = "changed"  # type: ignore[misc]


class TestPublicAssignmentSerialization:
    def test_dumps_with_camel_case_keys(self) -> None:
        dumped = to_public(make_assignment()).model_dump(mode="json", by_alias=True)

        assert dumped["starterQuery"] == "SELECT id, name, age FROM users;"
        assert dumped["tables"][0]["sampleRows"][0] == {"id": 1, "name": "Asha", "age": 22}
        assert dumped["tables"][0]["columns"][0] == {"name": "id", "type": "INT"}
