from salon_staff.db.models.staff import Staff


class TestCreateStaff:
    def test_create_attaches_default_schedule(self, client):
        response = client.post("/api/v1/staff", json={"tenant_id": 1, "name": "Layla"})
        assert response.status_code == 201
        body = response.json()
        assert body["role"] == "Stylist"
        assert body["is_active"] is True

        schedule = client.get(f"/api/v1/staff/{body['id']}/schedule").json()["schedule"]
        assert schedule["weeklyOffDays"] == ["sunday"]
        assert schedule["weeklyHours"]["saturday"] == {"isWorkingDay": True, "from": "10:00", "to": "16:00"}

    def test_create_with_schedule(self, client):
        hours = {"isWorkingDay": True, "from": "08:00", "to": "14:00"}
        schedule = {
            "weeklyHours": {d: hours for d in
                            ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]},
            "weeklyOffDays": [],
            "leaves": ["2024-12-25"],
            "holidays": [],
        }
        response = client.post("/api/v1/staff", json={"tenant_id": 1, "name": "Omar", "schedule": schedule})
        assert response.status_code == 201

        body = client.get(f"/api/v1/staff/{response.json()['id']}/schedule").json()
        assert body["schedule"]["leaves"] == ["2024-12-25"]
        assert body["conflicts"] == [{"date": "2024-12-25", "kind": "leave_on_working_day"}]

    def test_create_normalizes_supplied_schedule(self, client, session_factory):
        hours = {"isWorkingDay": True, "from": "08:00", "to": "14:00"}
        schedule = {
            "weeklyHours": {d: hours for d in
                            ["monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday"]},
            "weeklyOffDays": ["sunday", "sunday"],
            "leaves": ["2024-12-26", "2024-12-25", "2024-12-25"],
            "holidays": ["2024-12-25", "2025-01-01"],
        }
        response = client.post("/api/v1/staff", json={"tenant_id": 1, "name": "Omar", "schedule": schedule})
        assert response.status_code == 201

        db = session_factory()
        try:
            stored = db.get(Staff, response.json()["id"]).schedule
        finally:
            db.close()
        assert stored["weeklyOffDays"] == ["sunday"]
        assert stored["leaves"] == ["2024-12-25", "2024-12-26"]
        assert stored["holidays"] == ["2025-01-01"]

    def test_create_with_sparse_schedule_rejected(self, client):
        schedule = {"weeklyHours": {"monday": {"isWorkingDay": True, "from": "09:00", "to": "17:00"}}}
        response = client.post("/api/v1/staff", json={"tenant_id": 1, "name": "Omar", "schedule": schedule})
        assert response.status_code == 422

    def test_invalid_role(self, client):
        response = client.post("/api/v1/staff", json={"tenant_id": 1, "name": "Omar", "role": "Pilot"})
        assert response.status_code == 422


class TestReadUpdateDeleteStaff:
    def test_get(self, client, staff_id):
        response = client.get(f"/api/v1/staff/{staff_id}")
        assert response.status_code == 200
        assert response.json()["name"] == "Sara Ahmed"

    def test_get_missing(self, client):
        response = client.get("/api/v1/staff/999")
        assert response.status_code == 404
        assert response.json()["detail"] == "Staff not found"

    def test_list_for_tenant(self, client, staff_id):
        client.post("/api/v1/staff", json={"tenant_id": 2, "name": "Other tenant"})
        response = client.get("/api/v1/staff/tenant/1")
        assert [s["id"] for s in response.json()] == [staff_id]

    def test_update_partial(self, client, staff_id):
        response = client.put(f"/api/v1/staff/{staff_id}", json={"role": "Colorist"})
        assert response.status_code == 200
        body = response.json()
        assert body["role"] == "Colorist"
        assert body["name"] == "Sara Ahmed"

    def test_delete(self, client, staff_id, session_factory):
        response = client.delete(f"/api/v1/staff/{staff_id}")
        assert response.status_code == 204
        assert client.get(f"/api/v1/staff/{staff_id}/schedule").status_code == 404

        db = session_factory()
        try:
            assert db.get(Staff, staff_id) is None
        finally:
            db.close()


class TestHealth:
    def test_health(self, client):
        assert client.get("/health").json() == {"status": "ok"}
