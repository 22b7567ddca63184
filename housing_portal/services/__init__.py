"""
Pending-entry workflow services and their wiring.
"""
import threading

from housing_portal import config
from housing_portal.services.beneficiary_store import BeneficiaryStore
from housing_portal.services.intake import PendingEntryIntake
from housing_portal.services.officer_index import OfficerIndex
from housing_portal.services.pending_store import PendingEntryStore
from housing_portal.services.reconciler import ApprovalReconciler
from housing_portal.store import InMemoryRecordStore, SqlRecordStore


class PortalServices:
    """The stores plus intake and reconciler, sharing one workflow lock."""

    def __init__(self, pending_records, beneficiary_records, officer_records,
                 strategy: str = config.DEFAULT_PROGRESS_STRATEGY):
        lock = threading.RLock()
        self.pending = PendingEntryStore(pending_records)
        self.beneficiaries = BeneficiaryStore(beneficiary_records)
        self.officers = OfficerIndex(officer_records)
        self.intake = PendingEntryIntake(self.pending, self.beneficiaries, strategy=strategy, lock=lock)
        self.reconciler = ApprovalReconciler(self.pending, self.beneficiaries, self.officers, lock=lock)


def build_sql_services() -> PortalServices:
    return PortalServices(
        SqlRecordStore(config.PENDING_ENTRIES_TABLE),
        SqlRecordStore(config.BENEFICIARIES_TABLE),
        SqlRecordStore(config.OFFICERS_TABLE),
    )


def build_memory_services(pending=None, beneficiaries=None, officers=None) -> PortalServices:
    return PortalServices(
        InMemoryRecordStore(pending),
        InMemoryRecordStore(beneficiaries),
        InMemoryRecordStore(officers),
    )
