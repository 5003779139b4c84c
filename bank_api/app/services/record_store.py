"""
Request-scoped record store.

A ``RecordStore`` wraps one SQLite connection and one entity kind.  It
keeps the working set returned by the last ``load`` (ordered by
identifier, with an index by identifier next to it) and exposes the
primitives the resource controller is built on: ``load``, ``find``,
``exists``, ``add_or_update``, ``update``, ``remove`` and
``save_changes``.

Writes are executed immediately but only become durable when
``save_changes`` commits.  Closing a store without committing rolls
the pending work back, which is what happens when a request fails
half way.

The working set is a convenience buffer, not an authoritative cache:
``exists`` always asks the database, and writes made through other
connections are only seen after the next ``load``.

All statements are parameterised; table and column names come from
the entity kind descriptors, never from request data.
"""

from __future__ import annotations

import logging
import sqlite3
import uuid
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from bank_api.app.core.db import get_connection
from bank_api.app.schemas.common import RecordModel
from bank_api.app.services.entity_kinds import EntityKind
from bank_api.app.services.errors import InvalidInput, NotFound, StoreFailure


logger = logging.getLogger(__name__)


class RecordStore:
    """Working set of one entity kind bound to a database connection."""

    def __init__(self, kind: EntityKind, conn: sqlite3.Connection) -> None:
        self.kind = kind
        self._conn = conn
        self._items: List[RecordModel] = []
        self._index: Dict[int, RecordModel] = {}

    def __iter__(self) -> Iterator[RecordModel]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------
    def load(self) -> List[RecordModel]:
        """Replace the working set with every stored record of this kind."""
        kind = self.kind
        with self._translate_errors("load"):
            rows = self._conn.execute(
                f"SELECT {', '.join(kind.columns)} FROM {kind.table} ORDER BY {kind.id_field}"
            ).fetchall()
        self._items = [kind.from_row(row) for row in rows]
        self._index = {kind.get_id(item): item for item in self._items}
        logger.debug("Loaded %d %s records", len(self._items), kind.name.lower())
        return list(self._items)

    def find(self, record_id: int) -> Optional[RecordModel]:
        """Return the cached record with ``record_id`` or ``None``."""
        return self._index.get(record_id)

    def exists(self, record_id: Optional[int]) -> bool:
        """Return whether the database holds a record with ``record_id``."""
        if record_id is None:
            return False
        kind = self.kind
        with self._translate_errors("query"):
            row = self._conn.execute(
                f"SELECT 1 FROM {kind.table} WHERE {kind.id_field} = ?",
                (record_id,),
            ).fetchone()
        return row is not None

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------
    def add_or_update(self, entity: RecordModel) -> RecordModel:
        """Insert ``entity`` or overwrite the stored record with its identifier.

        A record is overwritten when the identifier carried by
        ``entity`` exists in the database.  Otherwise a new row is
        inserted, the identifier is assigned by the database and a
        ticket is generated when the payload has none.  Returns the
        record as stored.
        """
        record_id = self.kind.get_id(entity)
        if self.exists(record_id):
            stored = self._update(entity)
        else:
            stored = self._insert(entity)
        self._remember(stored)
        return stored

    def update(self, entity: RecordModel) -> RecordModel:
        """Overwrite the stored record with ``entity``'s identifier.

        Unlike ``add_or_update`` this never inserts: ``NotFound`` is
        raised when no row carries the identifier.
        """
        stored = self._update(entity)
        self._remember(stored)
        return stored

    def remove(self, entity: RecordModel) -> None:
        """Delete the stored record matching ``entity``'s identifier."""
        kind = self.kind
        record_id = kind.get_id(entity)
        with self._translate_errors("delete"):
            self._conn.execute(
                f"DELETE FROM {kind.table} WHERE {kind.id_field} = ?",
                (record_id,),
            )
        self._items = [item for item in self._items if kind.get_id(item) != record_id]
        self._index.pop(record_id, None)

    def save_changes(self) -> None:
        """Commit pending writes."""
        with self._translate_errors("commit"):
            self._conn.commit()

    def close(self) -> None:
        self._conn.close()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _insert(self, entity: RecordModel) -> RecordModel:
        kind = self.kind
        values = kind.to_row(entity)
        values.pop(kind.id_field)
        if not values.get(kind.ticket_field):
            values[kind.ticket_field] = str(uuid.uuid4())
        columns = list(values)
        with self._translate_errors("insert"):
            cursor = self._conn.execute(
                f"INSERT INTO {kind.table} ({', '.join(columns)}) "
                f"VALUES ({', '.join('?' for _ in columns)})",
                tuple(values.values()),
            )
        return self._fetch(cursor.lastrowid)

    def _update(self, entity: RecordModel) -> RecordModel:
        kind = self.kind
        values = kind.to_row(entity)
        record_id = values.pop(kind.id_field)
        # The ticket is immutable once assigned; keep it when the payload omits it.
        if values.get(kind.ticket_field) is None:
            values.pop(kind.ticket_field)
        assignments = ", ".join(f"{column} = ?" for column in values)
        with self._translate_errors("update"):
            cursor = self._conn.execute(
                f"UPDATE {kind.table} SET {assignments} WHERE {kind.id_field} = ?",
                (*values.values(), record_id),
            )
        if cursor.rowcount == 0:
            raise NotFound(f"{kind.name} {record_id} not found")
        return self._fetch(record_id)

    def _fetch(self, record_id: int) -> RecordModel:
        kind = self.kind
        with self._translate_errors("query"):
            row = self._conn.execute(
                f"SELECT {', '.join(kind.columns)} FROM {kind.table} WHERE {kind.id_field} = ?",
                (record_id,),
            ).fetchone()
        if row is None:
            raise NotFound(f"{kind.name} {record_id} not found")
        return kind.from_row(row)

    def _remember(self, entity: RecordModel) -> None:
        record_id = self.kind.get_id(entity)
        if record_id in self._index:
            self._items = [
                entity if self.kind.get_id(item) == record_id else item for item in self._items
            ]
        else:
            self._items.append(entity)
        self._index[record_id] = entity

    @contextmanager
    def _translate_errors(self, action: str) -> Iterator[None]:
        """Re-raise SQLite errors as resource layer errors."""
        try:
            yield
        except sqlite3.IntegrityError as exc:
            logger.warning("Rejected %s of %s: %s", action, self.kind.name.lower(), exc)
            raise InvalidInput(f"{self.kind.name} {action} violates a database constraint: {exc}") from exc
        except OverflowError as exc:
            # Raised by the driver when an integer does not fit in 64 bits.
            logger.warning("Rejected %s of %s: %s", action, self.kind.name.lower(), exc)
            raise InvalidInput(f"{self.kind.name} {action} has an out of range value") from exc
        except sqlite3.Error as exc:
            logger.exception("Failed to %s %s records", action, self.kind.name.lower())
            raise StoreFailure(f"Could not {action} {self.kind.name} records") from exc


@contextmanager
def open_record_store(kind: EntityKind) -> Iterator[RecordStore]:
    """Open a record store on a fresh connection and close it on exit.

    Nothing is committed on exit; callers commit through
    ``save_changes``.
    """
    try:
        conn = get_connection()
    except sqlite3.Error as exc:
        logger.exception("Could not open the database")
        raise StoreFailure("Could not open the database") from exc
    store = RecordStore(kind, conn)
    try:
        yield store
    finally:
        store.close()
