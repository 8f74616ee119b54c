"""YAML assignment catalog loader — reads the static catalog into an in-memory store."""

from pathlib import Path
from typing import Any, NoReturn

import yaml
from pydantic import ValidationError

from cipher_sql.assignment.domain.assignment import Assignment
from cipher_sql.assignment.domain.observer import AssignmentObserver
from cipher_sql.assignment.infrastructure.errors import AssignmentLoadError
from cipher_sql.assignment.infrastructure.memory_store import InMemoryAssignmentStore


class YamlAssignmentLoader:
    """Loads a YAML list of assignments and returns an InMemoryAssignmentStore."""

    def __init__(self, observer: AssignmentObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> InMemoryAssignmentStore:
        """
        Load every assignment in the catalog at ``path``.

        Collects ALL per-entry validation errors before raising a single
        AssignmentLoadError listing every issue found.

        Raises:
            AssignmentLoadError: if the file is missing, is not a YAML list,
                any entry is invalid, or two entries share an id.
        """
        path_str = str(path)
        try:
            raw = _read_yaml(path=path)
        except FileNotFoundError:
            self._fail(path=path_str, reason=f"file not found: {path_str}")
        except yaml.YAMLError as exc:
            self._fail(path=path_str, reason=f"invalid YAML: {exc}")

        if not isinstance(raw, list):
            self._fail(path=path_str, reason="expected a list of assignments")

        assignments, errors = _parse_entries(raw)
        if errors:
            self._fail(path=path_str, reason="; ".join(errors))

        try:
            store = InMemoryAssignmentStore(assignments=assignments)
        except AssignmentLoadError as exc:
            self._observer.catalog_load_failed(path=path_str, reason=str(exc))
            raise

        self._observer.catalog_loaded(path=path_str, total_assignments=len(assignments))
        return store

    def _fail(self, path: str, reason: str) -> NoReturn:
        self._observer.catalog_load_failed(path=path, reason=reason)
        raise AssignmentLoadError(reason=reason)


def _read_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return yaml.safe_load(fh)


def _parse_entries(raw: list[Any]) -> tuple[list[Assignment], list[str]]:
    """Validate each entry, collecting errors without aborting early."""
    assignments: list[Assignment] = []
    errors: list[str] = []

    for index, entry in enumerate(raw):
        try:
            assignments.append(Assignment.model_validate(entry))
        except ValidationError as exc:
            fields = ", ".join(
                ".".join(str(part) for part in err["loc"]) or "<entry>"
                for err in exc.errors()
            )
            errors.append(f"entry {index}: invalid field(s) {fields}")

    return assignments, errors
