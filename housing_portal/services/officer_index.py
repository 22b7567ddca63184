"""
Officers and the beneficiary ids assigned to each of them.
"""
import logging
from typing import List, Optional

from pydantic import ValidationError

from housing_portal.config import OFFICER_ID_BASE
from housing_portal.exceptions import AddFailed, MalformedInput, RemoveFailed, StoreUnavailable
from housing_portal.models import Officer
from housing_portal.store import RecordStore

logger = logging.getLogger(__name__)


class OfficerIndex:
    def __init__(self, store: RecordStore):
        self.store = store

    def list(self) -> List[Officer]:
        """Stored officers; records that do not validate are logged and skipped."""
        officers = []
        for record in self.store.list():
            try:
                officers.append(Officer.from_record(record))
            except ValidationError as e:
                logger.warning("Skipping invalid officer record %r: %s", record.get("id"), e.errors()[0]["msg"])
        return officers

    def find_by_name(self, name: str) -> Optional[Officer]:
        """First officer whose name matches exactly, or None."""
        for officer in self.list():
            if officer.name == name:
                return officer
        return None

    def add(self, data: dict) -> Officer:
        """Add an officer with the next free id. Any supplied id is ignored."""
        if not isinstance(data, dict):
            raise MalformedInput("Officer must be a JSON object")
        try:
            officer = Officer.model_validate({**data, "id": None})
        except ValidationError as e:
            raise MalformedInput(f"Invalid officer: {e.errors()[0]['msg']}") from e

        try:
            officer.id = self.store.next_id(OFFICER_ID_BASE)
            self.store.put(officer.id, officer.to_record())
        except StoreUnavailable as e:
            raise AddFailed() from e
        logger.info("Added officer %s (%s)", officer.id, officer.name)
        return officer

    def remove(self, officer_id: int) -> None:
        """Remove an officer. Removing an unknown id is a no-op."""
        try:
            removed = self.store.delete(officer_id)
        except StoreUnavailable as e:
            raise RemoveFailed() from e
        if removed:
            logger.info("Removed officer %s", officer_id)

    def assign_house(self, officer_name: str, beneficiary_id: int) -> bool:
        """
        Append a beneficiary id to the named officer's assigned houses.

        Returns False when no officer has that name. An id already assigned is
        not added twice.
        """
        officer = self.find_by_name(officer_name)
        if officer is None:
            return False
        if beneficiary_id not in officer.assigned_houses:
            officer.assigned_houses.append(beneficiary_id)
            self.store.put(officer.id, officer.to_record())
        return True
