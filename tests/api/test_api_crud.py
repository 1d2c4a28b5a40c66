def _member(client, name="John Smith", country="Canada"):
    resp = client.post("/api/team-members", json={"name": name, "role": "Senior Developer", "country": country})
    assert resp.status_code == 201
    return resp.get_json()


def _project(client, name="Platform", color="#3b82f6"):
    resp = client.post("/api/projects", json={"name": name, "color": color})
    assert resp.status_code == 201
    return resp.get_json()


def _allocation(client, member_id, project_id, start="2026-03-02", end="2026-03-06"):
    resp = client.post(
        "/api/project-allocations",
        json={"employeeId": member_id, "projectId": project_id, "startDate": start, "endDate": end, "hoursPerDay": 8},
    )
    assert resp.status_code == 201
    return resp.get_json()


def test_hello(client):
    resp = client.get("/api/hello")

    assert resp.status_code == 200
    assert "message" in resp.get_json()


def test_security_headers_on_every_response(client):
    resp = client.get("/api/hello")

    assert resp.headers["X-Content-Type-Options"] == "nosniff"
    assert resp.headers["X-Frame-Options"] == "DENY"
    assert "Referrer-Policy" in resp.headers


def test_create_and_fetch_member_returns_snake_case(client):
    created = _member(client)
    resp = client.get(f"/api/team-members/{created['id']}")

    body = resp.get_json()
    assert body["name"] == "John Smith"
    assert body["is_active"] is True
    assert body["allocated_hours"] == 0


def test_member_name_is_sanitized(client):
    created = _member(client, name="<b>Maria</b> Silva")

    assert created["name"] == "Maria Silva"


def test_invalid_member_returns_validation_error(client):
    resp = client.post("/api/team-members", json={"name": "X", "role": "Dev", "country": "Mexico"})

    assert resp.status_code == 400
    body = resp.get_json()
    assert body["error"] == "Validation failed"
    assert body["details"]


def test_missing_member_returns_404(client):
    resp = client.get("/api/team-members/999")

    assert resp.status_code == 404
    assert resp.get_json()["error"] == "Not Found"


def test_unknown_route_returns_json_404(client):
    resp = client.get("/api/nope")

    assert resp.status_code == 404
    assert resp.get_json()["error"] == "Not Found"


def test_partial_update_keeps_other_fields(client):
    created = _member(client)
    resp = client.put(f"/api/team-members/{created['id']}", json={"role": "Tech Lead"})

    body = resp.get_json()
    assert body["role"] == "Tech Lead"
    assert body["name"] == "John Smith"


def test_allocation_for_missing_member_is_rejected(client):
    project = _project(client)
    resp = client.post(
        "/api/project-allocations",
        json={"employeeId": 999, "projectId": project["id"], "startDate": "2026-03-02", "endDate": "2026-03-06"},
    )

    assert resp.status_code == 400


def test_allocation_with_reversed_dates_is_rejected(client):
    member = _member(client)
    project = _project(client)
    resp = client.post(
        "/api/project-allocations",
        json={"employeeId": member["id"], "projectId": project["id"], "startDate": "2026-03-06", "endDate": "2026-03-02"},
    )

    assert resp.status_code == 400


def test_allocation_hours_per_day_bounds(client):
    member = _member(client)
    project = _project(client)
    resp = client.post(
        "/api/project-allocations",
        json={
            "employeeId": member["id"],
            "projectId": project["id"],
            "startDate": "2026-03-02",
            "endDate": "2026-03-02",
            "hoursPerDay": 25,
        },
    )

    assert resp.status_code == 400


def test_deleting_member_cascades_to_allocations_and_vacations(client):
    member = _member(client)
    keeper = _member(client, name="Maria Silva", country="Brazil")
    project = _project(client)
    _allocation(client, member["id"], project["id"])
    kept = _allocation(client, keeper["id"], project["id"])
    client.post(
        "/api/vacations",
        json={"employeeId": member["id"], "startDate": "2026-04-01", "endDate": "2026-04-03"},
    )

    resp = client.delete(f"/api/team-members/{member['id']}")

    assert resp.status_code == 200
    assert [a["id"] for a in client.get("/api/project-allocations").get_json()] == [kept["id"]]
    assert client.get("/api/vacations").get_json() == []


def test_deleting_project_leaves_other_projects_allocations(client):
    member = _member(client)
    doomed = _project(client, name="Doomed")
    other = _project(client, name="Other", color="#10b981")
    _allocation(client, member["id"], doomed["id"])
    kept = _allocation(client, member["id"], other["id"])

    client.delete(f"/api/projects/{doomed['id']}")

    remaining = client.get("/api/project-allocations").get_json()
    assert remaining == [kept]


def test_vacation_copies_member_name(client):
    member = _member(client)
    resp = client.post("/api/vacations", json={"employeeId": member["id"], "startDate": "2026-04-01", "endDate": "2026-04-03"})

    assert resp.status_code == 201
    assert resp.get_json()["employee_name"] == "John Smith"


def test_holiday_filters(client):
    client.post("/api/holidays", json={"name": "Canada Day", "date": "2026-07-01", "country": "Canada"})
    client.post("/api/holidays", json={"name": "Labour Day", "date": "2026-05-01", "country": "Brazil"})
    client.post("/api/holidays", json={"name": "Shared", "date": "2027-01-01", "country": "Both"})

    canada = client.get("/api/holidays?country=Canada").get_json()
    year_2026 = client.get("/api/holidays?year=2026").get_json()

    assert [h["name"] for h in canada] == ["Canada Day", "Shared"]
    assert [h["name"] for h in year_2026] == ["Labour Day", "Canada Day"]


def test_project_search_and_status_filter(client):
    _project(client, name="Mobile App")
    resp = client.post("/api/projects", json={"name": "Legacy", "status": "finished"})
    assert resp.status_code == 201

    assert [p["name"] for p in client.get("/api/projects?search=mobile").get_json()] == ["Mobile App"]
    assert [p["name"] for p in client.get("/api/projects?status=finished").get_json()] == ["Legacy"]


def test_settings_defaults_and_update(client):
    assert client.get("/api/settings").get_json() == {"buffer": 20, "canadaHours": 37.5, "brazilHours": 44}

    resp = client.put("/api/settings", json={"buffer": 15})

    assert resp.status_code == 200
    assert resp.get_json()["buffer"] == 15
    assert resp.get_json()["canadaHours"] == 37.5


def test_settings_reject_out_of_range_values(client):
    resp = client.put("/api/settings", json={"buffer": 150})

    assert resp.status_code == 400
    assert client.get("/api/settings").get_json()["buffer"] == 20


def test_planner_drop_conflict_returns_409(client):
    member = _member(client)
    project = _project(client)
    body = {"employeeId": member["id"], "projectId": project["id"], "date": "2026-03-10"}

    assert client.post("/api/planner/drop", json=body).status_code == 201
    resp = client.post("/api/planner/drop", json=body)

    assert resp.status_code == 409
    assert resp.get_json()["error"] == "Conflict"


def test_planner_move_and_resize(client):
    member = _member(client)
    project = _project(client)
    created = _allocation(client, member["id"], project["id"])

    moved = client.post(f"/api/planner/allocations/{created['id']}/move", json={"dayOffset": 7}).get_json()
    resized = client.post(
        f"/api/planner/allocations/{created['id']}/resize", json={"edge": "start", "date": "2026-03-11"}
    ).get_json()

    assert (moved["start_date"], moved["end_date"]) == ("2026-03-09", "2026-03-13")
    assert (resized["start_date"], resized["end_date"]) == ("2026-03-11", "2026-03-13")


def test_planner_move_far_outside_calendar_is_a_validation_error(client):
    member = _member(client)
    project = _project(client)
    created = _allocation(client, member["id"], project["id"])

    resp = client.post(f"/api/planner/allocations/{created['id']}/move", json={"dayOffset": 10000000})

    assert resp.status_code == 400
    assert resp.get_json()["error"] == "Validation failed"
    assert client.get(f"/api/project-allocations/{created['id']}").get_json() == created


def test_utilization_endpoint(client):
    member = _member(client)
    project = _project(client)
    _allocation(client, member["id"], project["id"])

    rows = client.get("/api/utilization?month=2026-03").get_json()

    assert rows[0]["available_hours"] == 120
    assert rows[0]["allocated_hours"] == 40


def test_utilization_timeline_and_bad_month(client):
    member = _member(client)

    timeline = client.get(f"/api/utilization/members/{member['id']}?start=2026-01&months=3").get_json()
    bad = client.get("/api/utilization?month=2026-13")

    assert [r["month"] for r in timeline] == ["2026-01", "2026-02", "2026-03"]
    assert bad.status_code == 400


def test_dashboard_shape(client):
    _member(client)
    _project(client)

    data = client.get("/api/dashboard?month=2026-03").get_json()

    assert data["member_count"] == 1
    assert data["active_project_count"] == 1
    assert set(data["charts"]) == {"utilization", "projects"}
