"""Observer port for the verification domain — defines events in domain language."""

from typing import Protocol


class VerificationObserver(Protocol):
    """Observer port emitting structured events during a verification attempt.

    Events never carry the reference query text.
    """

    def verification_started(self, assignment_id: str) -> None: ...

    def verification_assignment_not_found(self, assignment_id: str) -> None: ...

    def verification_rejected(self, assignment_id: str, reason: str) -> None: ...

    def verification_completed(
        self, assignment_id: str, correct: bool, elapsed_ms: float
    ) -> None: ...

    def verification_failed(self, assignment_id: str, reason: str) -> None: ...

    def execution_rejected(self, reason: str) -> None: ...
