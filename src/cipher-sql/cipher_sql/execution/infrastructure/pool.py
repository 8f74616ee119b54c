"""ConnectionPool — bounded, explicitly passed pool of blocking DB-API connections."""

import asyncio
import contextlib
from collections.abc import AsyncIterator, Callable

from cipher_sql.execution.domain.observer import ExecutionObserver


class ConnectionPool[C]:
    """Hands out at most ``max_size`` connections at a time.

    Connections are opened lazily in a worker thread and kept idle for reuse.
    ``acquire()`` blocks until a slot is free and always gives the slot back,
    whether the caller succeeds, raises, or is cancelled.

    ``reset`` runs on every release. If it raises, the connection is closed and
    dropped instead of going back to the idle list.
    """

    def __init__(
        self,
        engine: str,
        connect: Callable[[], C],
        close: Callable[[C], None],
        max_size: int,
        observer: ExecutionObserver,
        reset: Callable[[C], None] | None = None,
    ) -> None:
        if max_size < 1:
            raise ValueError(f"max_size must be >= 1, got {max_size}")
        self._engine = engine
        self._connect = connect
        self._close = close
        self._reset = reset
        self._max_size = max_size
        self._observer = observer
        self._slots = asyncio.Semaphore(max_size)
        self._idle: list[C] = []
        self._opened = 0
        self._in_use = 0
        self._closed = False

    @property
    def engine(self) -> str:
        return self._engine

    @property
    def max_size(self) -> int:
        return self._max_size

    @property
    def in_use(self) -> int:
        return self._in_use

    @property
    def idle(self) -> int:
        return len(self._idle)

    @property
    def opened(self) -> int:
        """Number of connections currently owned by the pool, idle or in use."""
        return self._opened

    @contextlib.asynccontextmanager
    async def acquire(self) -> AsyncIterator[C]:
        """Yield a connection for the duration of the ``async with`` block."""
        if self._closed:
            raise RuntimeError("connection pool is closed")

        async with self._slots:
            conn = self._idle.pop() if self._idle else await self._open()
            self._in_use += 1
            cancelled = False
            try:
                yield conn
            except asyncio.CancelledError:
                cancelled = True
                raise
            finally:
                self._in_use -= 1
                if cancelled:
                    # A worker thread may still hold the connection; drop it
                    # without touching it.
                    self._opened -= 1
                    self._observer.connection_discarded(
                        engine=self._engine, reason="cancelled"
                    )
                else:
                    await self._release(conn)

    async def close(self) -> None:
        """Close every idle connection and refuse further acquisitions."""
        self._closed = True
        idle, self._idle = self._idle, []
        for conn in idle:
            self._opened -= 1
            await asyncio.to_thread(self._close, conn)

    async def _open(self) -> C:
        conn = await asyncio.to_thread(self._connect)
        self._opened += 1
        self._observer.connection_opened(engine=self._engine, pool_size=self._opened)
        return conn

    async def _release(self, conn: C) -> None:
        if self._reset is not None:
            try:
                await asyncio.to_thread(self._reset, conn)
            except Exception as exc:
                self._observer.connection_discarded(engine=self._engine, reason=str(exc))
                await self._discard(conn)
                return

        if self._closed:
            await self._discard(conn)
            return

        self._idle.append(conn)

    async def _discard(self, conn: C) -> None:
        self._opened -= 1
        # The connection is already unusable; a failing close changes nothing.
        with contextlib.suppress(Exception):
            await asyncio.to_thread(self._close, conn)
