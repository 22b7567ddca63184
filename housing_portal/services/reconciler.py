"""
Approval and rejection of pending entries.

Approving merges an entry into the beneficiary store, either updating the
beneficiary it references or creating a new one, and only then removes it
from the pending queue. A failed merge leaves the entry queued so the same
approval can be retried. Assigning a new beneficiary to its officer runs
after the merge and cannot fail the approval.
"""
import logging
import threading

from housing_portal.exceptions import NotFound, OriginalNotFound
from housing_portal.models import Beneficiary, PendingEntry
from housing_portal.services.beneficiary_store import BeneficiaryStore
from housing_portal.services.officer_index import OfficerIndex
from housing_portal.services.pending_store import PendingEntryStore
from housing_portal.utils import today_iso

logger = logging.getLogger(__name__)

# Beneficiary fields a pending entry carries and an approval writes
MERGED_FIELDS = [
    "beneficiary_name",
    "constituency",
    "village",
    "stage",
    "progress",
    "contact_number",
    "aadhar_number",
    "family_members",
    "assigned_officer",
    "start_date",
    "expected_completion",
    "remarks",
    "lat",
    "lng",
    "images",
    "fund_details",
    "construction_details",
]

UPDATED_MESSAGE = "Updates approved and applied to beneficiary"
CREATED_MESSAGE = "New beneficiary approved and added to database"


class ApprovalResult:
    def __init__(self, beneficiary: Beneficiary, created: bool, officer_updated: bool = False):
        self.beneficiary = beneficiary
        self.created = created
        self.officer_updated = officer_updated

    @property
    def message(self) -> str:
        return CREATED_MESSAGE if self.created else UPDATED_MESSAGE


class ApprovalReconciler:
    def __init__(self, pending: PendingEntryStore, beneficiaries: BeneficiaryStore,
                 officers: OfficerIndex, lock=None):
        self.pending = pending
        self.beneficiaries = beneficiaries
        self.officers = officers
        self.lock = lock or threading.RLock()

    def reject(self, entry_id: int) -> None:
        """Discard a pending entry."""
        with self.lock:
            self.pending.remove(entry_id)
        logger.info("Rejected pending entry %s", entry_id)

    def approve(self, entry_id: int) -> ApprovalResult:
        """Merge a pending entry into the beneficiary store and dequeue it."""
        with self.lock:
            entry = self.pending.get(entry_id)
            if entry.is_update:
                beneficiary = self._apply_update(entry)
                result = ApprovalResult(beneficiary, created=False)
            else:
                beneficiary = self._create_beneficiary(entry)
                result = ApprovalResult(beneficiary, created=True)
            self.pending.remove(entry_id)

            if result.created and beneficiary.assigned_officer:
                result.officer_updated = self._assign_officer(beneficiary)

        logger.info(
            "Approved pending entry %s: %s beneficiary %s",
            entry_id, "created" if result.created else "updated", beneficiary.id,
        )
        return result

    def _apply_update(self, entry: PendingEntry) -> Beneficiary:
        """Replace the mutable fields of the referenced beneficiary."""
        try:
            current = self.beneficiaries.get(entry.original_house_id)
        except NotFound:
            logger.warning(
                "Pending entry %s references missing beneficiary %s; left in queue",
                entry.id, entry.original_house_id,
            )
            raise OriginalNotFound() from None

        changes = {
            field: value
            for field, value in entry.model_dump(include=set(MERGED_FIELDS)).items()
            if value is not None
        }
        data = {**current.model_dump(), **changes, "id": current.id, "last_updated": today_iso()}
        return self.beneficiaries.replace(Beneficiary.model_validate(data))

    def _create_beneficiary(self, entry: PendingEntry) -> Beneficiary:
        """Append a new beneficiary built from the entry, defaulting missing fields."""
        data = entry.model_dump(include=set(MERGED_FIELDS))
        data["id"] = self.beneficiaries.next_id()
        data["last_updated"] = today_iso()
        return self.beneficiaries.add(Beneficiary.model_validate(data))

    def _assign_officer(self, beneficiary: Beneficiary) -> bool:
        """Record a new beneficiary against its officer. Failures are logged only."""
        try:
            assigned = self.officers.assign_house(beneficiary.assigned_officer, beneficiary.id)
        except Exception:
            logger.exception(
                "Error updating assigned houses of officer %r for beneficiary %s",
                beneficiary.assigned_officer, beneficiary.id,
            )
            return False
        if not assigned:
            logger.info("No officer named %r; beneficiary %s not assigned",
                        beneficiary.assigned_officer, beneficiary.id)
        return assigned
