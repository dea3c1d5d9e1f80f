"""SQLite driver adapter.

Wraps a single ``sqlite3`` connection behind three operations: open,
execute for side effects, and query for rows rendered as text.
"""

from __future__ import annotations

import sqlite3
from dataclasses import dataclass, field

from loguru import logger

from fastdb.errors import ExecutionError


@dataclass(frozen=True)
class ExecResult:
    """Structured result of a statement executed for side effects."""

    success: bool
    sql: str
    error: str = ""


@dataclass(frozen=True)
class QueryResult:
    """Column names plus every row, each cell a string or ``None`` for NULL."""

    columns: list[str]
    rows: list[list[str | None]] = field(default_factory=list)


class Database:
    """An open SQLite database file.

    The connection runs in autocommit mode so that ``BEGIN``, ``COMMIT`` and
    ``ROLLBACK`` statements go to the engine untouched.  Use as a context
    manager to guarantee the handle is released.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        self._conn: sqlite3.Connection | None = None

    @classmethod
    def open(cls, path: str) -> "Database":
        """Open *path*, raising :class:`ExecutionError` on failure."""
        db = cls(path)
        try:
            db._conn = sqlite3.connect(path, isolation_level=None)
        except sqlite3.Error as exc:
            raise ExecutionError(f"could not open database {path!r}: {exc}") from exc
        logger.debug(f"Opened database {path}")
        return db

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def execute(self, sql: str) -> ExecResult:
        """Execute *sql* without retrieving rows."""
        conn = self._require_conn()
        logger.debug(f"Executing: {sql}")
        try:
            conn.execute(sql)
        except sqlite3.Error as exc:
            logger.debug(f"Engine rejected statement: {exc}")
            return ExecResult(success=False, sql=sql, error=str(exc))
        return ExecResult(success=True, sql=sql)

    def query(self, sql: str) -> QueryResult:
        """Run *sql* and return its column names and rows as text."""
        conn = self._require_conn()
        logger.debug(f"Querying: {sql}")
        try:
            cursor = conn.execute(sql)
            columns = [desc[0] for desc in cursor.description or ()]
            rows = [[_as_text(conn, value) for value in row] for row in cursor]
        except sqlite3.Error as exc:
            raise ExecutionError(f"SQL error: {exc}") from exc
        return QueryResult(columns=columns, rows=rows)

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None
            logger.debug(f"Closed database {self.path}")

    def __enter__(self) -> "Database":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _require_conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise ExecutionError(f"database {self.path!r} is not open")
        return self._conn


def _as_text(conn: sqlite3.Connection, value: object) -> str | None:
    """Render a cell the way the engine's text accessor does."""
    if value is None:
        return None
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, float):
        # Python and SQLite disagree on float text (1e+20 vs 1.0e+20).
        (text,) = conn.execute("SELECT CAST(? AS TEXT)", (value,)).fetchone()
        return text
    return str(value)
