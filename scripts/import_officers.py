"""
Script to import field officers from Officer Data.xlsx (or a .csv export).

Expected columns: Name, Designation, Constituency, Contact Number, Email, Role.
Rows without a name are skipped. Officers whose name already exists are left
as they are.
"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from housing_portal.config import OFFICER_DATA_FILE
from housing_portal.database import init_database
from housing_portal.exceptions import PortalError
from housing_portal.services import build_sql_services
from scripts.seed_utils import cell, read_sheet


def officer_from_row(row) -> dict:
    return {
        "name": cell(row, "Name"),
        "designation": cell(row, "Designation"),
        "constituency": cell(row, "Constituency"),
        "contactNumber": cell(row, "Contact Number"),
        "email": cell(row, "Email").lower(),
        "role": cell(row, "Role", "officer"),
    }


def import_officers(path=OFFICER_DATA_FILE, services=None):
    """Import officers from a sheet. Returns the number of officers added."""
    if services is None:
        init_database()
        services = build_sql_services()

    print(f"Reading officers from: {path}")
    df = read_sheet(path)
    print(f"Found {len(df)} rows in file")

    existing = {officer.name for officer in services.officers.list()}
    success_count = 0
    skip_count = 0

    for idx, row in df.iterrows():
        data = officer_from_row(row)
        if not data["name"]:
            print(f"  Skipping row {idx}: Missing name")
            skip_count += 1
            continue
        if data["name"] in existing:
            print(f"  Skipping row {idx}: {data['name']} already exists")
            skip_count += 1
            continue
        try:
            officer = services.officers.add(data)
        except PortalError as e:
            print(f"  Error importing row {idx}: {e}")
            skip_count += 1
            continue
        existing.add(officer.name)
        success_count += 1

    print(f"\n{'='*50}")
    print(f"Import complete!")
    print(f"  Officers imported: {success_count}")
    print(f"  Skipped: {skip_count}")
    print(f"{'='*50}")

    return success_count


if __name__ == "__main__":
    import_officers(sys.argv[1] if len(sys.argv) > 1 else OFFICER_DATA_FILE)
