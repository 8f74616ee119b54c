"""StructlogVerificationObserver — production observer that delegates to structlog."""

import structlog


class StructlogVerificationObserver:
    """Logs verification domain events to structlog.

    Does NOT inherit from VerificationObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def verification_started(self, assignment_id: str) -> None:
        self._log.info("verification.started", assignment_id=assignment_id)

    def verification_assignment_not_found(self, assignment_id: str) -> None:
        self._log.info("verification.assignment_not_found", assignment_id=assignment_id)

    def verification_rejected(self, assignment_id: str, reason: str) -> None:
        self._log.info(
            "verification.rejected",
            assignment_id=assignment_id,
            reason=reason,
        )

    def verification_completed(
        self, assignment_id: str, correct: bool, elapsed_ms: float
    ) -> None:
        self._log.info(
            "verification.completed",
            assignment_id=assignment_id,
            correct=correct,
            elapsed_ms=round(elapsed_ms, 2),
        )

    def verification_failed(self, assignment_id: str, reason: str) -> None:
        self._log.error(
            "verification.failed",
            assignment_id=assignment_id,
            reason=reason,
        )

    def execution_rejected(self, reason: str) -> None:
        self._log.info("execution.rejected", reason=reason)
