"""
Canonical beneficiary records, keyed by beneficiary id.
"""
from typing import List

from housing_portal.config import BENEFICIARY_ID_BASE
from housing_portal.exceptions import NotFound
from housing_portal.models import Beneficiary
from housing_portal.store import RecordStore


class BeneficiaryStore:
    def __init__(self, store: RecordStore):
        self.store = store

    def list(self) -> List[Beneficiary]:
        return [Beneficiary.from_record(record) for record in self.store.list()]

    def get(self, beneficiary_id: int) -> Beneficiary:
        record = self.store.get(beneficiary_id)
        if record is None:
            raise NotFound("Beneficiary not found")
        return Beneficiary.from_record(record)

    def exists(self, beneficiary_id: int) -> bool:
        return self.store.get(beneficiary_id) is not None

    def next_id(self) -> int:
        return self.store.next_id(BENEFICIARY_ID_BASE)

    def add(self, beneficiary: Beneficiary) -> Beneficiary:
        """Append a new beneficiary. The id must not be in use."""
        if self.exists(beneficiary.id):
            raise ValueError(f"Beneficiary {beneficiary.id} already exists")
        self.store.put(beneficiary.id, beneficiary.to_record())
        return beneficiary

    def replace(self, beneficiary: Beneficiary) -> Beneficiary:
        """Overwrite an existing beneficiary in place."""
        if not self.exists(beneficiary.id):
            raise NotFound("Beneficiary not found")
        self.store.put(beneficiary.id, beneficiary.to_record())
        return beneficiary
