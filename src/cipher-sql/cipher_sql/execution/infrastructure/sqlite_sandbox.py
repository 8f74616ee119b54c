"""SqliteSandbox — owns the read-only SQLite dataset that learner queries run against."""

import sqlite3
import uuid
from pathlib import Path

_IN_MEMORY = ":memory:"


class SqliteSandbox:
    """Builds connection URIs for a SQLite dataset and opens read-only connections.

    For ``:memory:`` the dataset lives in a named shared-cache in-memory
    database, seeded once from ``seed_script``. An anchor connection keeps it
    alive until ``close()``. Every connection handed out by ``connect()`` has
    ``PRAGMA query_only`` enabled, so the dataset is never written through it.
    """

    def __init__(self, path: str, seed_script: str | None = None) -> None:
        self._anchor: sqlite3.Connection | None = None
        if path == _IN_MEMORY:
            self._uri = f"file:cipher_sql_{uuid.uuid4().hex}?mode=memory&cache=shared"
            self._anchor = sqlite3.connect(self._uri, uri=True, check_same_thread=False)
            if seed_script:
                self._anchor.executescript(seed_script)
                self._anchor.commit()
        else:
            self._uri = Path(path).resolve().as_uri() + "?mode=ro"

    @classmethod
    def from_files(cls, path: str, seed_script: Path | None = None) -> "SqliteSandbox":
        """Build a sandbox, reading the seed script from disk when one is given."""
        script = seed_script.read_text(encoding="utf-8") if seed_script else None
        return cls(path=path, seed_script=script)

    def connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self._uri, uri=True, check_same_thread=False)
        conn.execute("PRAGMA query_only = ON")
        return conn

    def close(self) -> None:
        if self._anchor is not None:
            self._anchor.close()
            self._anchor = None


def close_connection(conn: sqlite3.Connection) -> None:
    conn.close()
