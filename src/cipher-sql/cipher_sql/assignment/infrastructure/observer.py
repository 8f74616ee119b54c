"""Structlog implementation of the AssignmentObserver port."""

import structlog


class StructlogAssignmentObserver:
    """Delegates assignment domain events to structlog.

    Satisfies the AssignmentObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def catalog_loaded(self, path: str, total_assignments: int) -> None:
        self._log.info(
            "assignment.catalog_loaded",
            path=path,
            total_assignments=total_assignments,
        )

    def catalog_load_failed(self, path: str, reason: str) -> None:
        self._log.error("assignment.catalog_load_failed", path=path, reason=reason)
