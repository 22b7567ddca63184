"""
Intake of submitted pending entries.

Submissions are validated, given defaults and an id, have their progress
recomputed from the construction details, and are queued. The beneficiary
store is only read here (to draft progress updates), never written.
"""
import logging
import threading

from pydantic import ValidationError

from housing_portal.config import DEFAULT_PROGRESS_STRATEGY, DEFAULT_SUBMITTER
from housing_portal.exceptions import MalformedInput
from housing_portal.models import (
    Beneficiary,
    FundDetails,
    PendingEntry,
    ProgressUpdateForm,
    UpdateType,
)
from housing_portal.progress import get_progress_strategy, split_weight_progress
from housing_portal.services.beneficiary_store import BeneficiaryStore
from housing_portal.services.pending_store import PendingEntryStore
from housing_portal.utils import derive_remaining, now_timestamp

logger = logging.getLogger(__name__)

# Assigned by intake; client values are discarded before validation
IGNORED_FIELDS = ("id", "status", "progress")


def _validation_message(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        location = ".".join(str(p) for p in err["loc"]) or "entry"
        parts.append(f"{location}: {err['msg']}")
    return "; ".join(parts)


class ProgressUpdateDraft:
    """A progress-update submission plus the percentage previewed to the officer."""

    def __init__(self, payload: dict, preview_progress: int):
        self.payload = payload
        self.preview_progress = preview_progress


class PendingEntryIntake:
    def __init__(self, pending: PendingEntryStore, beneficiaries: BeneficiaryStore,
                 strategy: str = DEFAULT_PROGRESS_STRATEGY, lock=None):
        self.pending = pending
        self.beneficiaries = beneficiaries
        self.strategy_name = strategy
        self.compute_progress = get_progress_strategy(strategy)
        self.lock = lock or threading.RLock()

    def submit(self, raw) -> PendingEntry:
        """Validate a raw submission and append it to the pending queue."""
        if not isinstance(raw, dict):
            raise MalformedInput("Pending entry must be a JSON object")

        data = {key: value for key, value in raw.items() if key not in IGNORED_FIELDS}
        try:
            entry = PendingEntry.model_validate(data)
        except ValidationError as e:
            raise MalformedInput(_validation_message(e)) from e

        if not entry.is_update and entry.beneficiary_name is None:
            entry.beneficiary_name = ""
        entry.submitted_by = entry.submitted_by or DEFAULT_SUBMITTER
        entry.submitted_on = entry.submitted_on or now_timestamp()
        entry.progress = self.compute_progress(entry.construction_details)

        with self.lock:
            entry.id = self.pending.next_id()
            self.pending.add(entry)

        logger.info(
            "Queued pending entry %s (%s) from %s, progress %s%%",
            entry.id,
            entry.update_type.value if entry.is_update else "new",
            entry.submitted_by,
            entry.progress,
        )
        return entry

    def draft_progress_update(self, beneficiary: Beneficiary,
                              form: ProgressUpdateForm) -> ProgressUpdateDraft:
        """Build a progress-update submission for an existing beneficiary."""
        details = form.construction_details.model_copy(deep=True)
        preview = split_weight_progress(details)

        fund = beneficiary.fund_details
        fund_details = FundDetails(
            allocated=fund.allocated,
            released=fund.released,
            utilized=form.fund_utilized,
            remaining=derive_remaining(fund.allocated, form.fund_utilized),
        )

        images = list(beneficiary.images)
        if form.new_images:
            images.extend(form.new_images)

        entry = PendingEntry(
            update_type=UpdateType.PROGRESS,
            original_house_id=beneficiary.id,
            beneficiary_name=beneficiary.beneficiary_name,
            constituency=beneficiary.constituency,
            village=beneficiary.village,
            stage=form.stage or beneficiary.stage,
            progress=preview,
            contact_number=beneficiary.contact_number,
            aadhar_number=beneficiary.aadhar_number,
            family_members=beneficiary.family_members,
            assigned_officer=beneficiary.assigned_officer,
            start_date=beneficiary.start_date,
            expected_completion=beneficiary.expected_completion,
            remarks=form.remarks or beneficiary.remarks,
            lat=beneficiary.lat,
            lng=beneficiary.lng,
            images=images,
            submitted_by=beneficiary.assigned_officer,
            submitted_on=now_timestamp(),
            fund_details=fund_details,
            construction_details=details,
        )
        return ProgressUpdateDraft(entry.to_record(), preview)

    def submit_progress_update(self, beneficiary_id: int, form: ProgressUpdateForm):
        """Draft a progress update for a beneficiary and queue it."""
        beneficiary = self.beneficiaries.get(beneficiary_id)
        draft = self.draft_progress_update(beneficiary, form)
        entry = self.submit(draft.payload)
        return entry, draft.preview_progress
