"""Tests for InMemoryAssignmentStore."""

import pytest

from cipher_sql.assignment.infrastructure.errors import AssignmentLoadError
from cipher_sql.assignment.infrastructure.memory_store import InMemoryAssignmentStore
from tests.assignment.factories import make_assignment


class TestInMemoryAssignmentStore:
    def test_get_returns_assignment_by_id(self) -> None:
        store = InMemoryAssignmentStore([make_assignment("1"), make_assignment("2")])

        found = store.get("2")

        assert found is not None
        assert found.id == "2"

    def test_get_unknown_returns_none(self) -> None:
        assert InMemoryAssignmentStore([make_assignment("1")]).get("99") is None

    def test_list_all_keeps_catalog_order(self) -> None:
        store = InMemoryAssignmentStore(
            [make_assignment("8"), make_assignment("1"), make_assignment("2")]
        )

        assert [a.id for a in store.list_all()] == ["8", "1", "2"]

    def test_duplicate_ids_are_rejected(self) -> None:
        with pytest.raises(AssignmentLoadError, match="duplicate assignment id\\(s\\) '1'"):
            InMemoryAssignmentStore([make_assignment("1"), make_assignment("1")])
