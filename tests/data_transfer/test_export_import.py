import io
from datetime import datetime

import pytest
from openpyxl import load_workbook

from src.resourceflow.resourceflow.data_transfer.backup import backup_to_envelope, build_backup
from src.resourceflow.resourceflow.data_transfer.service import validate_import


def _populate(client):
    member = client.post("/api/team-members", json={"name": "John", "role": "Dev", "country": "Canada"}).get_json()
    other = client.post("/api/team-members", json={"name": "Maria", "role": "Dev", "country": "Brazil"}).get_json()
    project = client.post("/api/projects", json={"name": "Platform"}).get_json()
    client.post("/api/holidays", json={"name": "Canada Day", "date": "2026-07-01", "country": "Canada"})
    client.post("/api/vacations", json={"employeeId": other["id"], "startDate": "2026-04-01", "endDate": "2026-04-03"})
    client.post(
        "/api/project-allocations",
        json={"employeeId": member["id"], "projectId": project["id"], "startDate": "2026-03-02", "endDate": "2026-03-06"},
    )
    client.put("/api/settings", json={"buffer": 10})
    return member, other, project


def test_export_envelope_shape(client):
    _populate(client)

    data = client.get("/api/export").get_json()

    assert data["version"] == "1.0.0"
    assert data["metadata"]["exportSource"] == "resourceflow"
    assert data["metadata"]["exportType"] == "full"
    assert data["metadata"]["totalRecords"] == 2 + 1 + 1 + 1 + 1 + 3
    assert data["projectAllocations"][0]["employeeId"]
    assert data["settings"]["buffer"] == 10


def test_export_then_replace_import_reproduces_counts(client):
    _populate(client)
    exported = client.get("/api/export").get_json()

    resp = client.post("/api/import?mode=replace", json=exported)

    assert resp.status_code == 200
    assert resp.get_json()["message"] == "Data imported successfully"
    again = client.get("/api/export").get_json()
    for name in ("teamMembers", "projects", "holidays", "vacations", "projectAllocations"):
        assert len(again[name]) == len(exported[name])
    assert again["settings"] == exported["settings"]


def test_import_remaps_member_and_project_ids(client):
    _populate(client)
    exported = client.get("/api/export").get_json()

    client.post("/api/import", json=exported)

    members = {m["id"]: m["name"] for m in client.get("/api/team-members").get_json()}
    projects = {p["id"] for p in client.get("/api/projects").get_json()}
    allocations = client.get("/api/project-allocations").get_json()
    assert len(members) == 4
    assert len(allocations) == 2
    new_allocation = max(allocations, key=lambda a: a["id"])
    assert new_allocation["employee_id"] not in {m["id"] for m in exported["teamMembers"]}
    assert members[new_allocation["employee_id"]] == "John"
    assert new_allocation["project_id"] in projects


def test_import_skips_dangling_references(client):
    envelope = {
        "teamMembers": [],
        "projects": [],
        "holidays": [],
        "vacations": [],
        "projectAllocations": [{"employeeId": 77, "projectId": 88, "startDate": "2026-03-02", "endDate": "2026-03-02"}],
        "settings": {},
    }

    body = client.post("/api/import", json=envelope).get_json()

    assert body["skipped"]["projectAllocations"] == 1
    assert body["warnings"]
    assert client.get("/api/project-allocations").get_json() == []


def test_invalid_import_writes_nothing(client):
    resp = client.post("/api/import", json={"teamMembers": [{"name": "No role"}], "projects": []})

    assert resp.status_code == 400
    assert resp.get_json()["details"]
    assert client.get("/api/team-members").get_json() == []


def test_validate_import_reports_errors_and_version_warning():
    result = validate_import(
        {
            "teamMembers": [{"name": "A", "role": "B"}],
            "projects": [{}],
            "holidays": [],
            "vacations": [],
            "projectAllocations": [{"employeeId": 1}],
            "settings": {},
            "version": "0.9.0",
        }
    )

    assert not result.is_valid
    assert "Team member at index 0 is missing required fields" in result.errors
    assert "Project at index 0 is missing name" in result.errors
    assert "Allocation at index 0 is missing required fields" in result.errors
    assert result.warnings


def test_excel_export_has_one_sheet_per_entity(client):
    _populate(client)

    resp = client.get("/api/export?format=xlsx")

    assert resp.status_code == 200
    workbook = load_workbook(io.BytesIO(resp.data))
    assert workbook.sheetnames == ["Team Members", "Projects", "Holidays", "Vacations", "Allocations", "Settings"]


def test_backup_round_trip_through_envelope(client):
    _populate(client)
    exported = client.get("/api/export").get_json()

    backup = build_backup(exported, created=datetime(2026, 10, 18, 9, 0))
    envelope = backup_to_envelope(backup)

    assert backup["metadata"]["description"] == "ResourceFlow Database Backup"
    assert backup["summary"]["teamMembers"] == 2
    assert validate_import(envelope).is_valid


def test_unknown_import_mode_is_rejected(client):
    resp = client.post("/api/import?mode=merge", json={})

    assert resp.status_code == 400


@pytest.mark.parametrize("mode", ["append", "replace"])
def test_import_of_empty_envelope_succeeds(client, mode):
    envelope = {name: [] for name in ("teamMembers", "projects", "holidays", "vacations", "projectAllocations")}
    envelope["settings"] = {}

    assert client.post(f"/api/import?mode={mode}", json=envelope).status_code == 200


def _envelope(**collections):
    envelope = {name: [] for name in ("teamMembers", "projects", "holidays", "vacations", "projectAllocations")}
    envelope["settings"] = {}
    envelope.update(collections)
    return envelope


def test_replace_import_with_non_object_rows_keeps_existing_data(client):
    _populate(client)

    resp = client.post("/api/import?mode=replace", json=_envelope(holidays=["oops"]))

    assert resp.status_code == 400
    assert "Holiday at index 0 is not an object" in resp.get_json()["details"]
    assert len(client.get("/api/team-members").get_json()) == 2
    assert len(client.get("/api/holidays").get_json()) == 1


def test_replace_import_rolls_back_on_unexpected_error(app, client, monkeypatch):
    _populate(client)
    container = app.extensions["resourceflow"]

    def broken_create(payload):
        raise RuntimeError("disk full")

    monkeypatch.setattr(container.holiday_service, "create", broken_create)
    envelope = _envelope(
        teamMembers=[{"id": 1, "name": "New", "role": "Dev", "country": "Canada"}],
        holidays=[{"name": "Canada Day", "date": "2026-07-01", "country": "Canada"}],
    )

    resp = client.post("/api/import?mode=replace", json=envelope)

    assert resp.status_code == 500
    names = sorted(m["name"] for m in client.get("/api/team-members").get_json())
    assert names == ["John", "Maria"]
    assert len(client.get("/api/project-allocations").get_json()) == 1


def test_rows_of_a_skipped_member_are_not_attached_to_a_stored_member(client):
    kept = client.post("/api/team-members", json={"name": "Keep", "role": "Dev", "country": "Canada"}).get_json()
    envelope = _envelope(
        teamMembers=[{"id": kept["id"], "name": "Ghost", "role": "Dev", "country": "Mexico"}],
        vacations=[{"employeeId": kept["id"], "startDate": "2026-04-01", "endDate": "2026-04-03"}],
    )

    body = client.post("/api/import", json=envelope).get_json()

    assert body["skipped"]["teamMembers"] == 1
    assert body["skipped"]["vacations"] == 1
    assert body["imported"]["vacations"] == 0
    assert client.get("/api/vacations").get_json() == []


def test_import_tolerates_non_integer_row_ids(client):
    envelope = _envelope(teamMembers=[{"id": [1], "name": "Listy", "role": "Dev", "country": "Brazil"}])

    resp = client.post("/api/import", json=envelope)

    assert resp.status_code == 200
    assert [m["name"] for m in client.get("/api/team-members").get_json()] == ["Listy"]
