"""
Shared test fixtures -- mock records for unit and integration tests.
"""

NS = "Not Started"
IP = "In Progress"
DONE = "Completed"
DELAYED = "Delayed"


# ── Construction details ─────────────────────────────────────────────

def make_details(foundation=NS, walls=NS, roof=NS, finishing=NS, completed_on="2025-01-15"):
    """camelCase constructionDetails dict; completed stages get a completion date."""
    def stage(status):
        record = {"status": status}
        if status == DONE:
            record["completionDate"] = completed_on
        return record

    return {
        "foundation": stage(foundation),
        "walls": stage(walls),
        "roof": stage(roof),
        "finishing": stage(finishing),
    }


def make_fund_details(allocated="Rs. 1,20,000", released="Rs. 60,000",
                      utilized="Rs. 40,000", remaining="Rs. 80,000"):
    return {
        "allocated": allocated,
        "released": released,
        "utilized": utilized,
        "remaining": remaining,
    }


# ── Beneficiary fixtures ─────────────────────────────────────────────

def make_beneficiary(
    id=1,
    beneficiaryName="Lakshmi Devi",
    constituency="Kuppam",
    village="Gudupalle",
    stage="Foundation",
    progress=14,
    assignedOfficer="A. Sharma",
    images=None,
    **kwargs,
):
    base = {
        "id": id,
        "beneficiaryName": beneficiaryName,
        "constituency": constituency,
        "village": village,
        "stage": stage,
        "progress": progress,
        "contactNumber": "9876543210",
        "aadharNumber": "1234 5678 9012",
        "familyMembers": 4,
        "assignedOfficer": assignedOfficer,
        "startDate": "2024-11-01",
        "expectedCompletion": "2025-10-31",
        "remarks": "",
        "lat": 12.75,
        "lng": 78.34,
        "images": images if images is not None else ["img/house-1-a.jpg"],
        "lastUpdated": "2025-01-15",
        "fundDetails": make_fund_details(),
        "constructionDetails": make_details(foundation=DONE),
    }
    base.update(kwargs)
    return base


# ── Pending entry fixtures ───────────────────────────────────────────

def make_pending_entry(
    beneficiaryName="Ravi Kumar",
    constituency="Kuppam",
    village="Shantipuram",
    assignedOfficer="A. Sharma",
    submittedBy="A. Sharma",
    constructionDetails=None,
    **kwargs,
):
    """Raw submission payload for a new beneficiary (no id, no progress)."""
    base = {
        "beneficiaryName": beneficiaryName,
        "constituency": constituency,
        "village": village,
        "stage": "Not Started",
        "contactNumber": "9123456780",
        "aadharNumber": "9876 5432 1098",
        "familyMembers": 3,
        "assignedOfficer": assignedOfficer,
        "startDate": "2025-02-01",
        "expectedCompletion": "2026-01-31",
        "remarks": "New sanction",
        "images": [],
        "submittedBy": submittedBy,
        "submittedOn": "2025-02-01T09:30:00.000Z",
        "fundDetails": make_fund_details(utilized="Rs. 0", remaining="Rs. 1,20,000"),
        "constructionDetails": constructionDetails if constructionDetails is not None else make_details(),
    }
    base.update(kwargs)
    return base


def make_update_entry(original_house_id=1, update_type="progress", **kwargs):
    """Raw submission payload updating an existing beneficiary."""
    return make_pending_entry(
        updateType=update_type,
        originalHouseId=original_house_id,
        **kwargs,
    )


# ── Officer fixtures ─────────────────────────────────────────────────

def make_officer(
    id=1,
    name="A. Sharma",
    designation="Assistant Engineer",
    constituency="Kuppam",
    assignedHouses=None,
    **kwargs,
):
    base = {
        "id": id,
        "name": name,
        "designation": designation,
        "constituency": constituency,
        "contactNumber": "9000000001",
        "email": "a.sharma@housing.gov.in",
        "role": "officer",
        "assignedHouses": assignedHouses if assignedHouses is not None else [],
    }
    base.update(kwargs)
    return base
