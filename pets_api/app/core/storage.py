"""
Relational storage adapter used by the pets content provider.

``SQLiteStorage`` speaks a small query interface (query, insert,
update, delete against a named table with an optional selection and
positional arguments).  Every call opens its own connection and closes
it before returning, so one instance can be shared by any number of
callers; SQLite serialises concurrent writers.

Selections and sort orders are passed through as SQL fragments.  They
must come from trusted code (the provider or a route that builds them
from whitelisted column names), never straight from user input.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Any, Dict, List, Mapping, Optional, Sequence

from .db import get_connection

logger = logging.getLogger(__name__)


class SQLiteStorage:
    """Thin query interface over the application's SQLite database."""

    def open(self) -> sqlite3.Connection:
        """Return a new connection to the database."""
        return get_connection()

    def query_rows(
        self,
        table: str,
        columns: Optional[Sequence[str]] = None,
        selection: Optional[str] = None,
        selection_args: Optional[Sequence[Any]] = None,
        sort_order: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Run a SELECT and return the rows as dictionaries."""
        projection = ", ".join(columns) if columns else "*"
        query = f"SELECT {projection} FROM {table}"
        if selection:
            query += f" WHERE {selection}"
        if sort_order:
            query += f" ORDER BY {sort_order}"
        conn = self.open()
        try:
            rows = conn.execute(query, tuple(selection_args or ())).fetchall()
            return [dict(row) for row in rows]
        finally:
            conn.close()

    def insert_row(self, table: str, values: Mapping[str, Any]) -> Optional[int]:
        """Insert one row and return its new id.

        Returns ``None`` when the engine rejects the row (constraint
        violation, missing table, locked database, an integer too large
        for SQLite).  The error is logged, not raised.
        """
        if values:
            columns = ", ".join(values.keys())
            placeholders = ", ".join("?" for _ in values)
            query = f"INSERT INTO {table} ({columns}) VALUES ({placeholders})"
        else:
            query = f"INSERT INTO {table} DEFAULT VALUES"
        conn = self.open()
        try:
            cursor = conn.execute(query, tuple(values.values()))
            conn.commit()
            return cursor.lastrowid
        except (sqlite3.Error, OverflowError):
            logger.exception("Failed to insert row into %s", table)
            return None
        finally:
            conn.close()

    def update_rows(
        self,
        table: str,
        values: Mapping[str, Any],
        selection: Optional[str] = None,
        selection_args: Optional[Sequence[Any]] = None,
    ) -> int:
        """Update matching rows and return the number of rows changed."""
        assignments = ", ".join(f"{column} = ?" for column in values)
        query = f"UPDATE {table} SET {assignments}"
        if selection:
            query += f" WHERE {selection}"
        params = tuple(values.values()) + tuple(selection_args or ())
        conn = self.open()
        try:
            cursor = conn.execute(query, params)
            conn.commit()
            return cursor.rowcount
        finally:
            conn.close()

    def delete_rows(
        self,
        table: str,
        selection: Optional[str] = None,
        selection_args: Optional[Sequence[Any]] = None,
    ) -> int:
        """Delete matching rows and return the number of rows removed."""
        query = f"DELETE FROM {table}"
        if selection:
            query += f" WHERE {selection}"
        conn = self.open()
        try:
            cursor = conn.execute(query, tuple(selection_args or ()))
            conn.commit()
            return cursor.rowcount
        finally:
            conn.close()
