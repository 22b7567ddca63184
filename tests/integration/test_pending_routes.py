"""
Integration tests for pending entry routes -- submit, list, get, approve and
reject against a SQLite database.
"""
import os
import sys
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))
os.environ.setdefault("DATABASE_URL", "")

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
from __mocks__.fixtures import (
    DONE, IP, NS,
    make_beneficiary, make_details, make_officer, make_pending_entry, make_update_entry,
)

pytestmark = pytest.mark.integration


def submit(client, payload):
    response = client.post("/api/pending-entries", json=payload)
    assert response.status_code == 200, response.text
    return response.json()["entry"]


class TestListAndGet:
    def test_empty_list(self, client):
        response = client.get("/api/pending-entries")
        assert response.status_code == 200
        assert response.json() == {"pendingEntries": []}

    def test_list_in_submission_order(self, client):
        first = submit(client, make_pending_entry(beneficiaryName="First"))
        second = submit(client, make_pending_entry(beneficiaryName="Second"))
        entries = client.get("/api/pending-entries").json()["pendingEntries"]
        assert [e["id"] for e in entries] == [first["id"], second["id"]]

    def test_get_entry(self, client):
        entry = submit(client, make_pending_entry(beneficiaryName="Meena"))
        response = client.get(f"/api/pending-entries/{entry['id']}")
        assert response.status_code == 200
        assert response.json()["entry"]["beneficiaryName"] == "Meena"

    def test_get_missing_entry(self, client):
        response = client.get("/api/pending-entries/999")
        assert response.status_code == 404
        assert response.json() == {"error": "Pending entry not found"}


class TestSubmit:
    def test_submit_assigns_id_and_progress(self, client):
        response = client.post(
            "/api/pending-entries",
            json=make_pending_entry(constructionDetails=make_details(DONE, DONE, IP, NS)),
        )
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["entry"]["id"] == 101
        assert body["entry"]["progress"] == 50

    def test_submit_defaults(self, client):
        entry = submit(client, {"village": "Gudupalle"})
        assert entry["beneficiaryName"] == ""
        assert entry["submittedBy"] == "Unknown"
        assert entry["submittedOn"]

    def test_submit_loose_form_values(self, client):
        response = client.post("/api/pending-entries", json=make_pending_entry(
            progress=150, familyMembers="4 adults", lat="", lng="",
        ))
        assert response.status_code == 200
        entry = response.json()["entry"]
        assert entry["progress"] == 0
        assert "familyMembers" not in entry
        assert "lat" not in entry

    def test_submit_non_object(self, client):
        response = client.post("/api/pending-entries", json=["not", "an", "entry"])
        assert response.status_code == 400
        assert "error" in response.json()

    def test_submit_invalid_json(self, client):
        response = client.post(
            "/api/pending-entries",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400

    def test_submit_bad_status(self, client):
        response = client.post(
            "/api/pending-entries",
            json=make_pending_entry(constructionDetails={"roof": {"status": "Almost"}}),
        )
        assert response.status_code == 400
        assert client.get("/api/pending-entries").json()["pendingEntries"] == []


class TestApprove:
    def test_approve_new_beneficiary(self, client, seed_beneficiary, seed_officer):
        seed_beneficiary(make_beneficiary(id=3))
        seed_officer(make_officer(id=1, name="A. Sharma", assignedHouses=[3]))
        entry = submit(client, make_pending_entry(assignedOfficer="A. Sharma"))

        response = client.post(f"/api/pending-entries/{entry['id']}/approve")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "New beneficiary approved and added to database"
        assert body["beneficiary"]["id"] == 4
        assert body["officerUpdated"] is True

        assert client.get("/api/pending-entries").json()["pendingEntries"] == []
        officers = client.get("/api/officers").json()["officers"]
        assert officers[0]["assignedHouses"] == [3, 4]

    def test_approve_update(self, client, seed_beneficiary, seed_officer):
        seed_beneficiary(make_beneficiary(id=3, constituency="Kuppam"))
        seed_officer(make_officer(id=1, name="A. Sharma", assignedHouses=[3]))
        raw = make_update_entry(original_house_id=3, stage="Roof", constructionDetails=make_details(DONE, DONE, DONE, NS))
        del raw["constituency"]
        entry = submit(client, raw)

        response = client.post(f"/api/pending-entries/{entry['id']}/approve")
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Updates approved and applied to beneficiary"
        assert body["beneficiary"]["id"] == 3
        assert body["beneficiary"]["constituency"] == "Kuppam"
        assert body["beneficiary"]["stage"] == "Roof"
        assert body["beneficiary"]["progress"] == 64
        assert body["officerUpdated"] is False

        officers = client.get("/api/officers").json()["officers"]
        assert officers[0]["assignedHouses"] == [3]

    def test_approve_update_without_name_keeps_name(self, client, seed_beneficiary):
        seed_beneficiary(make_beneficiary(id=3, beneficiaryName="Sita"))
        entry = submit(client, {"updateType": "edit", "originalHouseId": 3, "remarks": "roof done"})

        response = client.post(f"/api/pending-entries/{entry['id']}/approve")
        assert response.status_code == 200
        house = client.get("/api/houses/3").json()["beneficiary"]
        assert house["beneficiaryName"] == "Sita"
        assert house["remarks"] == "roof done"

    def test_approve_missing_original(self, client):
        entry = submit(client, make_update_entry(original_house_id=42))
        response = client.post(f"/api/pending-entries/{entry['id']}/approve")
        assert response.status_code == 404
        assert response.json() == {"error": "Original beneficiary not found"}
        # still queued for a retry
        assert client.get(f"/api/pending-entries/{entry['id']}").status_code == 200

    def test_approve_missing_entry(self, client):
        response = client.post("/api/pending-entries/999/approve")
        assert response.status_code == 404


class TestReject:
    def test_reject(self, client):
        entry = submit(client, make_pending_entry())
        response = client.post(f"/api/pending-entries/{entry['id']}/reject")
        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert client.get("/api/pending-entries").json()["pendingEntries"] == []
        assert client.get("/api/houses").json()["beneficiaries"] == []

    def test_reject_missing(self, client):
        entry = submit(client, make_pending_entry())
        response = client.post("/api/pending-entries/999/reject")
        assert response.status_code == 404
        entries = client.get("/api/pending-entries").json()["pendingEntries"]
        assert [e["id"] for e in entries] == [entry["id"]]
