"""
SQLite-backed record store and a simple migration system.

Every collection of farm records is one key-value table: the key is
the record identifier and the value is the record serialised as JSON.
Tables are ``WITHOUT ROWID`` so SQLite keeps them as a B-tree ordered
by identifier, and listing a collection walks that order.

The store is an explicit object.  ``create_app`` builds one at start-up
and keeps it on ``app.state``; route handlers reach it through the
``get_store`` dependency.  Applied migration versions are recorded in
the ``migrations`` table and new migrations run in order.
"""

import json
import logging
import os
import sqlite3
from pathlib import Path
from typing import Any, Dict, List

from fastapi import Request

from .errors import StorageFault


logger = logging.getLogger(__name__)

# Collection tables known to the store.  Table names are interpolated
# into SQL, so only these are accepted.
TABLES = ("pigs", "feeds", "health_records", "inventory", "invoices")

MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: one key-value table per collection
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS pigs (
            id TEXT PRIMARY KEY,
            data TEXT NOT NULL
        ) WITHOUT ROWID;

        CREATE TABLE IF NOT EXISTS feeds (
            id TEXT PRIMARY KEY,
            data TEXT NOT NULL
        ) WITHOUT ROWID;

        CREATE TABLE IF NOT EXISTS health_records (
            id TEXT PRIMARY KEY,
            data TEXT NOT NULL
        ) WITHOUT ROWID;

        CREATE TABLE IF NOT EXISTS inventory (
            id TEXT PRIMARY KEY,
            data TEXT NOT NULL
        ) WITHOUT ROWID;

        CREATE TABLE IF NOT EXISTS invoices (
            id TEXT PRIMARY KEY,
            data TEXT NOT NULL
        ) WITHOUT ROWID;
        """,
    ),
]


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    ``:memory:`` and absolute paths are used as given.  Relative
    paths are resolved against the project root.
    """
    if database_url == ":memory:" or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


class RecordStore:
    """Ordered key-value tables for the farm record collections.

    Inserts and reads are single SQL statements on one connection,
    each treated as atomic.  Any ``sqlite3.Error`` surfaces as
    ``StorageFault``.
    """

    def __init__(self, database_url: str = ":memory:") -> None:
        self.path = get_database_path(database_url)
        try:
            # Handlers run on the event loop thread, which need not be
            # the thread that built the store.
            self.conn = sqlite3.connect(self.path, check_same_thread=False)
        except sqlite3.Error as exc:
            raise StorageFault(f"Cannot open database {self.path}: {exc}") from exc
        self.conn.row_factory = sqlite3.Row

    def init_db(self) -> None:
        """Create the ``migrations`` table and apply pending migrations."""
        try:
            cursor = self.conn.cursor()
            cursor.execute(
                "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
            )
            row = cursor.execute("SELECT MAX(version) as version FROM migrations").fetchone()
            current_version = row["version"] if row and row["version"] is not None else 0

            for version, sql in MIGRATIONS:
                if version > current_version:
                    cursor.executescript(sql)
                    cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
                    current_version = version
                    logger.info("Applied storage migration %s", version)
            self.conn.commit()
        except sqlite3.Error as exc:
            raise StorageFault(f"Failed to initialise storage: {exc}") from exc

    def insert(self, table: str, record_id: str, document: Dict[str, Any]) -> None:
        """Store ``document`` under ``record_id``.

        Identifiers are never reused: inserting an existing key fails
        instead of overwriting.
        """
        self._check_table(table)
        try:
            self.conn.execute(
                f"INSERT INTO {table} (id, data) VALUES (?, ?)",
                (record_id, json.dumps(document)),
            )
            self.conn.commit()
        except sqlite3.Error as exc:
            raise StorageFault(f"Insert into {table} failed: {exc}") from exc

    def values(self, table: str) -> List[Dict[str, Any]]:
        """Return every document of ``table`` ordered by identifier."""
        self._check_table(table)
        try:
            rows = self.conn.execute(f"SELECT data FROM {table} ORDER BY id").fetchall()
        except sqlite3.Error as exc:
            raise StorageFault(f"Read from {table} failed: {exc}") from exc
        return [json.loads(row["data"]) for row in rows]

    def close(self) -> None:
        self.conn.close()

    @staticmethod
    def _check_table(table: str) -> None:
        if table not in TABLES:
            raise StorageFault(f"Unknown collection {table!r}")


def get_store(request: Request) -> RecordStore:
    """FastAPI dependency returning the store held by the application."""
    return request.app.state.store
