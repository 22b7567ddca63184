"""
Database initialization script.
Creates tables, imports officers, then seeds beneficiaries.
"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from housing_portal import config
from housing_portal.database import init_database as create_tables, reset_database


def init_database(reset=False):
    """Initialize the database with tables, officers, and beneficiaries."""
    print("=" * 60, flush=True)
    print("Housing Portal - Database Initialization", flush=True)
    print(f"Database: {'PostgreSQL' if config.USE_POSTGRES else 'SQLite'}", flush=True)
    print("=" * 60, flush=True)

    print("\nStep 1: Creating database tables...")
    print("-" * 40)
    if reset:
        reset_database()
    else:
        create_tables()

    print("\nStep 2: Importing officers...")
    print("-" * 40)
    if config.OFFICER_DATA_FILE.exists():
        from scripts.import_officers import import_officers
        import_officers(config.OFFICER_DATA_FILE)
    else:
        print(f"No officer file at {config.OFFICER_DATA_FILE}, skipping")

    print("\nStep 3: Seeding beneficiaries...")
    print("-" * 40)
    if config.BENEFICIARY_DATA_FILE.exists():
        from scripts.import_beneficiaries import import_beneficiaries
        import_beneficiaries(config.BENEFICIARY_DATA_FILE)
    else:
        print(f"No beneficiary file at {config.BENEFICIARY_DATA_FILE}, skipping")

    print("\n" + "=" * 60)
    print("SETUP COMPLETE!")
    print("=" * 60)
    print("\nStart the server with:")
    print("  python run.py")


if __name__ == "__main__":
    init_database(reset="--reset" in sys.argv)
