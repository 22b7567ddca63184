"""
Queue of pending entries awaiting an admin decision.

An entry is either present (pending) or absent (decided); approved and
rejected states are never stored.
"""
import logging
from typing import List

from housing_portal.config import PENDING_ID_BASE
from housing_portal.exceptions import NotFound, StoreUnavailable
from housing_portal.models import PendingEntry
from housing_portal.store import RecordStore

logger = logging.getLogger(__name__)


class PendingEntryStore:
    def __init__(self, store: RecordStore):
        self.store = store

    def list(self) -> List[PendingEntry]:
        """All pending entries in submission order; empty if the store is down."""
        try:
            records = self.store.list()
        except StoreUnavailable as e:
            logger.warning("Pending entries unavailable, returning empty list: %s", e)
            return []
        return [PendingEntry.from_record(record) for record in records]

    def get(self, entry_id: int) -> PendingEntry:
        record = self.store.get(entry_id)
        if record is None:
            raise NotFound("Pending entry not found")
        return PendingEntry.from_record(record)

    def next_id(self) -> int:
        return self.store.next_id(PENDING_ID_BASE)

    def add(self, entry: PendingEntry) -> PendingEntry:
        self.store.put(entry.id, entry.to_record())
        return entry

    def remove(self, entry_id: int) -> None:
        if not self.store.delete(entry_id):
            raise NotFound("Pending entry not found")
