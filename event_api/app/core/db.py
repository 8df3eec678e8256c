"""
SQLite database client and simple migration system.

``Database`` wraps a single ``sqlite3`` connection that is opened when
the application starts and closed when it stops.  The FastAPI
application keeps one instance on ``app.state.db`` and route handlers
receive it through the ``get_db`` dependency, so nothing in this module
holds global connection state.

Every table uses an ``INTEGER PRIMARY KEY`` column.  SQLite assigns such
a key as one more than the largest key currently in the table (or 1 for
an empty table) while holding its write lock, which gives sequential
identifiers without a separate read-then-write step.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

logger = logging.getLogger(__name__)

MEMORY_PATH = ":memory:"

# Range of an SQLite INTEGER; larger Python ints cannot be bound.
SQLITE_INT_MIN = -(2 ** 63)
SQLITE_INT_MAX = 2 ** 63 - 1

MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: Initial schema
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS events (
            id INTEGER PRIMARY KEY,
            name TEXT,
            date TEXT,
            venue TEXT
        );

        -- event_id is not a foreign key: attendees may point at events
        -- that do not exist, and deleting an event leaves them in place.
        CREATE TABLE IF NOT EXISTS attendees (
            id INTEGER PRIMARY KEY,
            name TEXT,
            event_id INTEGER
        );

        CREATE TABLE IF NOT EXISTS organizers (
            id INTEGER PRIMARY KEY,
            name TEXT,
            contact TEXT
        );
        """,
    ),
]


def resolve_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    ``:memory:`` and absolute paths are returned unchanged.  Relative
    paths are resolved against the project root (the directory that
    contains the ``event_api`` package).
    """
    if database_url == MEMORY_PATH or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


class Database:
    """Process-wide SQLite client with an explicit open/close lifecycle."""

    def __init__(self, database_url: str) -> None:
        self.path = resolve_database_path(database_url)
        self._conn: Optional[sqlite3.Connection] = None

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    @property
    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("Database is not open")
        return self._conn

    def open(self) -> None:
        """Connect and bring the schema up to date.

        Errors are not caught here: a database that cannot be opened
        must stop the application from starting.
        """
        if self._conn is not None:
            return
        # Handlers run on the event loop thread while the connection
        # may have been created from another thread during startup.
        conn = sqlite3.connect(self.path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        self._conn = conn
        try:
            self.migrate()
        except Exception:
            self.close()
            raise
        logger.info("Database ready at %s", self.path)

    def close(self) -> None:
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.info("Database connection closed")

    @contextmanager
    def cursor(self) -> Iterator[sqlite3.Cursor]:
        """Yield a cursor; commit on success, roll back on error."""
        conn = self.connection
        cursor = conn.cursor()
        try:
            yield cursor
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            cursor.close()

    def migrate(self) -> int:
        """Apply pending migrations and return the resulting schema version."""
        with self.cursor() as cursor:
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    logger.info("Applying migration %s", version)
                    cursor.executescript(sql)
                    cursor.execute(
                        "INSERT INTO migrations (version) VALUES (?)", (version,)
                    )
                    current_version = version
        return current_version
