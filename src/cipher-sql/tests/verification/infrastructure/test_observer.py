"""Tests for the structlog VerificationObserver."""

from collections.abc import Iterator

import pytest
import structlog
from structlog.testing import capture_logs

from cipher_sql.verification.infrastructure.observer import StructlogVerificationObserver


@pytest.fixture(autouse=True)
def _default_structlog() -> Iterator[None]:
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


class TestStructlogVerificationObserver:
    def test_completed_event_carries_outcome(self) -> None:
        with capture_logs() as logs:
            StructlogVerificationObserver().verification_completed(
                assignment_id="8", correct=False, elapsed_ms=4.0
            )

        assert logs[0]["event"] == "verification.completed"
        assert logs[0]["assignment_id"] == "8"
        assert logs[0]["correct"] is False

    def test_failure_is_an_error(self) -> None:
        with capture_logs() as logs:
            StructlogVerificationObserver().verification_failed(
                assignment_id="1", reason="no such table: orders"
            )

        assert logs[0]["log_level"] == "error"
        assert logs[0]["reason"] == "no such table: orders"

    def test_execution_rejected_event(self) -> None:
        with capture_logs() as logs:
            StructlogVerificationObserver().execution_rejected(reason="unsafe_keyword")

        assert logs == [
            {"event": "execution.rejected", "log_level": "info", "reason": "unsafe_keyword"}
        ]
