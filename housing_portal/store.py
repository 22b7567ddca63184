"""
Keyed record stores.

The workflow services only see ``RecordStore``: get/list/put/delete over
JSON-shaped dicts keyed by integer id. ``InMemoryRecordStore`` backs tests and
scripts; ``SqlRecordStore`` persists a collection table via ``get_db()``.
"""
import json
import logging
from typing import Dict, List, Optional

from housing_portal.database import DB_ERRORS, get_db
from housing_portal.exceptions import StoreUnavailable

logger = logging.getLogger(__name__)


class RecordStore:
    """Abstract keyed record store. Records keep insertion order."""

    def get(self, record_id: int) -> Optional[dict]:
        raise NotImplementedError

    def list(self) -> List[dict]:
        raise NotImplementedError

    def put(self, record_id: int, record: dict) -> None:
        """Insert a new record or replace an existing one in place."""
        raise NotImplementedError

    def delete(self, record_id: int) -> bool:
        """Delete a record. Returns False if it was absent."""
        raise NotImplementedError

    def ids(self) -> List[int]:
        return [record["id"] for record in self.list()]

    def next_id(self, base: int = 0) -> int:
        """Allocate max(existing ids, base) + 1."""
        return max([base] + [i for i in self.ids() if isinstance(i, int)]) + 1


class InMemoryRecordStore(RecordStore):
    def __init__(self, records: Optional[List[dict]] = None):
        self._records: Dict[int, dict] = {}
        for record in records or []:
            self._records[record["id"]] = dict(record)

    def get(self, record_id):
        record = self._records.get(record_id)
        return dict(record) if record is not None else None

    def list(self):
        return [dict(record) for record in self._records.values()]

    def put(self, record_id, record):
        self._records[record_id] = dict(record)

    def delete(self, record_id):
        return self._records.pop(record_id, None) is not None

    def ids(self):
        return list(self._records)


class SqlRecordStore(RecordStore):
    """Record collection stored as JSON text in one table."""

    def __init__(self, table: str):
        self.table = table

    def _fail(self, action: str, error: Exception):
        logger.error("Store %s: failed to %s: %s", self.table, action, error)
        raise StoreUnavailable(f"Failed to {action} {self.table}") from error

    def get(self, record_id):
        try:
            with get_db() as conn:
                cursor = conn.cursor()
                cursor.execute(f"SELECT data FROM {self.table} WHERE record_id = ?", (record_id,))
                row = cursor.fetchone()
        except DB_ERRORS as e:
            self._fail("read", e)
        return json.loads(row["data"]) if row else None

    def list(self):
        try:
            with get_db() as conn:
                cursor = conn.cursor()
                cursor.execute(f"SELECT data FROM {self.table} ORDER BY seq")
                rows = cursor.fetchall()
        except DB_ERRORS as e:
            self._fail("read", e)
        return [json.loads(row["data"]) for row in rows]

    def ids(self):
        try:
            with get_db() as conn:
                cursor = conn.cursor()
                cursor.execute(f"SELECT record_id FROM {self.table} ORDER BY seq")
                rows = cursor.fetchall()
        except DB_ERRORS as e:
            self._fail("read", e)
        return [row["record_id"] for row in rows]

    def put(self, record_id, record):
        data = json.dumps(record)
        try:
            with get_db() as conn:
                cursor = conn.cursor()
                cursor.execute(f"""
                    UPDATE {self.table}
                    SET data = ?, updated_at = CURRENT_TIMESTAMP
                    WHERE record_id = ?
                """, (data, record_id))
                if cursor.rowcount == 0:
                    cursor.execute(
                        f"INSERT INTO {self.table} (record_id, data) VALUES (?, ?)",
                        (record_id, data),
                    )
        except DB_ERRORS as e:
            self._fail("write", e)

    def delete(self, record_id):
        try:
            with get_db() as conn:
                cursor = conn.cursor()
                cursor.execute(f"DELETE FROM {self.table} WHERE record_id = ?", (record_id,))
                deleted = cursor.rowcount
        except DB_ERRORS as e:
            self._fail("delete from", e)
        return deleted > 0
