"""Observer port for the execution domain — defines events in domain language."""

from typing import Protocol


class ExecutionObserver(Protocol):
    def connection_opened(self, engine: str, pool_size: int) -> None: ...

    def connection_discarded(self, engine: str, reason: str) -> None: ...

    def query_started(self, engine: str, query: str) -> None: ...

    def query_completed(self, engine: str, row_count: int, elapsed_ms: float) -> None: ...

    def query_failed(self, engine: str, reason: str) -> None: ...

    def query_timed_out(self, engine: str, timeout_seconds: float) -> None: ...
