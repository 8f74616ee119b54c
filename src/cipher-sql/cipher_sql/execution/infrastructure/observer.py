"""Structlog implementation of the ExecutionObserver port."""

import structlog


class StructlogExecutionObserver:
    """Delegates execution domain events to structlog.

    Satisfies the ExecutionObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def connection_opened(self, engine: str, pool_size: int) -> None:
        self._log.debug("execution.connection_opened", engine=engine, pool_size=pool_size)

    def connection_discarded(self, engine: str, reason: str) -> None:
        self._log.warning("execution.connection_discarded", engine=engine, reason=reason)

    def query_started(self, engine: str, query: str) -> None:
        self._log.debug("execution.query_started", engine=engine, query=query)

    def query_completed(self, engine: str, row_count: int, elapsed_ms: float) -> None:
        self._log.info(
            "execution.query_completed",
            engine=engine,
            row_count=row_count,
            elapsed_ms=round(elapsed_ms, 2),
        )

    def query_failed(self, engine: str, reason: str) -> None:
        self._log.warning("execution.query_failed", engine=engine, reason=reason)

    def query_timed_out(self, engine: str, timeout_seconds: float) -> None:
        self._log.warning(
            "execution.query_timed_out",
            engine=engine,
            timeout_seconds=timeout_seconds,
        )
