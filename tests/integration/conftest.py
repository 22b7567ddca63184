"""
Integration test conftest -- test database setup and FastAPI TestClient.
"""
import os
import sys
import pytest
from pathlib import Path

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

# Force SQLite for integration tests
os.environ["DATABASE_URL"] = ""

from starlette.testclient import TestClient


@pytest.fixture(scope="session")
def test_db():
    """Initialize a fresh SQLite test database."""
    import housing_portal.config as config

    # Use a temp file for test DB
    test_db_path = Path(__file__).resolve().parent.parent.parent / "test_housing_portal.db"
    config.DATABASE_PATH = test_db_path

    # Remove old test DB if exists
    if test_db_path.exists():
        test_db_path.unlink()

    from housing_portal.database import init_database
    init_database()

    yield test_db_path

    # Cleanup
    if test_db_path.exists():
        test_db_path.unlink()


@pytest.fixture(scope="session")
def client(test_db):
    """Create a TestClient for the FastAPI app."""
    import housing_portal.dependencies as dependencies
    from housing_portal.main import app

    dependencies._services = None
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


@pytest.fixture(autouse=True)
def clean_tables(test_db):
    """Every test starts from empty collections."""
    from housing_portal.database import reset_database
    reset_database()
    yield


@pytest.fixture
def seed_beneficiary(test_db):
    """Store a beneficiary record directly, bypassing approval."""
    from housing_portal.models import Beneficiary
    from housing_portal.services import build_sql_services

    services = build_sql_services()

    def _seed(record):
        return services.beneficiaries.add(Beneficiary.from_record(record))

    return _seed


@pytest.fixture
def seed_officer(test_db):
    """Store an officer record directly, keeping its id and assigned houses."""
    from housing_portal.store import SqlRecordStore
    from housing_portal import config

    store = SqlRecordStore(config.OFFICERS_TABLE)

    def _seed(record):
        store.put(record["id"], record)
        return record

    return _seed
