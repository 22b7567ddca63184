"""
Script to seed canonical beneficiary records from Beneficiary Data.xlsx
(or a .csv export).

Seed records skip the approval queue. Progress is computed from the four
stage status columns, remaining funds are derived from allocated and
utilized, and each beneficiary is added to its officer's assigned houses.
"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pydantic import ValidationError

from housing_portal.config import BENEFICIARY_DATA_FILE, CONSTRUCTION_STAGES
from housing_portal.database import init_database
from housing_portal.models import Beneficiary, ConstructionDetails
from housing_portal.progress import compute_progress
from housing_portal.services import build_sql_services
from housing_portal.utils import derive_remaining, today_iso
from scripts.seed_utils import cell, number, read_sheet


def beneficiary_from_row(row, beneficiary_id: int) -> Beneficiary:
    details = ConstructionDetails.model_validate({
        stage: {
            "status": cell(row, stage.title()),
            "completionDate": cell(row, f"{stage.title()} Completed On"),
        }
        for stage in CONSTRUCTION_STAGES
    })
    allocated = cell(row, "Allocated")
    utilized = cell(row, "Utilized")

    return Beneficiary(
        id=beneficiary_id,
        beneficiary_name=cell(row, "Beneficiary Name"),
        constituency=cell(row, "Constituency"),
        village=cell(row, "Village"),
        stage=cell(row, "Stage"),
        progress=compute_progress(details),
        contact_number=cell(row, "Contact Number"),
        aadhar_number=cell(row, "Aadhar Number"),
        family_members=int(number(row, "Family Members", 0)),
        assigned_officer=cell(row, "Assigned Officer"),
        start_date=cell(row, "Start Date"),
        expected_completion=cell(row, "Expected Completion"),
        remarks=cell(row, "Remarks"),
        lat=number(row, "Latitude"),
        lng=number(row, "Longitude"),
        last_updated=today_iso(),
        fund_details={
            "allocated": allocated,
            "released": cell(row, "Released"),
            "utilized": utilized,
            "remaining": derive_remaining(allocated, utilized),
        },
        construction_details=details,
    )


def import_beneficiaries(path=BENEFICIARY_DATA_FILE, services=None):
    """Seed beneficiaries from a sheet. Returns the number added."""
    if services is None:
        init_database()
        services = build_sql_services()

    print(f"Reading beneficiaries from: {path}")
    df = read_sheet(path)
    print(f"Found {len(df)} rows in file")

    success_count = 0
    skip_count = 0

    for idx, row in df.iterrows():
        if not cell(row, "Beneficiary Name"):
            print(f"  Skipping row {idx}: Missing beneficiary name")
            skip_count += 1
            continue

        sheet_id = number(row, "ID")
        beneficiary_id = int(sheet_id) if sheet_id else services.beneficiaries.next_id()
        if services.beneficiaries.exists(beneficiary_id):
            print(f"  Skipping row {idx}: Beneficiary {beneficiary_id} already exists")
            skip_count += 1
            continue

        try:
            beneficiary = beneficiary_from_row(row, beneficiary_id)
        except ValidationError as e:
            print(f"  Error importing row {idx}: {e.errors()[0]['msg']}")
            skip_count += 1
            continue

        services.beneficiaries.add(beneficiary)
        if beneficiary.assigned_officer:
            services.officers.assign_house(beneficiary.assigned_officer, beneficiary.id)
        success_count += 1

    print(f"\n{'='*50}")
    print(f"Import complete!")
    print(f"  Beneficiaries imported: {success_count}")
    print(f"  Skipped: {skip_count}")
    print(f"{'='*50}")

    return success_count


if __name__ == "__main__":
    import_beneficiaries(sys.argv[1] if len(sys.argv) > 1 else BENEFICIARY_DATA_FILE)
