from __future__ import annotations

from datetime import datetime

import pytest

from salarybox.main import create_app

NOW = datetime(2025, 5, 20, 9, 10)


@pytest.fixture
def client():
    app = create_app("salarybox.config.testing", clock=lambda: NOW)
    return app.test_client()


def login(client, email, password):
    return client.post("/api/auth/login", json={"email": email, "password": password})


def test_login_sets_session(client):
    resp = login(client, "employee@salarybox.com", "employee123")

    assert resp.status_code == 200
    assert resp.get_json()["data"]["role"] == "employee"
    assert client.get("/api/auth/me").get_json()["data"]["user_id"] == "2"


def test_bad_login_returns_notification(client):
    resp = login(client, "employee@salarybox.com", "wrong")

    assert resp.status_code == 401
    body = resp.get_json()
    assert body["success"] is False
    assert body["message"] == "Invalid credentials"


def test_requests_without_session_are_unauthorized(client):
    assert client.get("/api/attendance/2").status_code == 401


def test_attendance_month_serializes_records(client):
    login(client, "employee@salarybox.com", "employee123")

    resp = client.get("/api/attendance/2?month=2025-05")

    body = resp.get_json()
    assert resp.status_code == 200
    assert body["meta"]["month"] == "2025-05"
    assert len(body["data"]) == 31
    assert body["data"][0]["date"] == "2025-05-01"
    assert body["data"][0]["status"] == "holiday"


def test_employee_cannot_read_other_attendance(client):
    login(client, "employee@salarybox.com", "employee123")

    assert client.get("/api/attendance/3").status_code == 403


def test_check_in_then_duplicate_conflicts(client):
    login(client, "employee@salarybox.com", "employee123")

    first = client.post("/api/attendance/2/mark", json={"direction": "check-in", "photo": "data:image/png;base64,AAA"})
    again = client.post("/api/attendance/2/mark", json={"direction": "check-in", "photo": "data:image/png;base64,AAA"})

    assert first.status_code == 201
    assert first.get_json()["data"]["check_in_time"] == "2025-05-20T09:10:00"
    assert first.get_json()["data"]["check_out_time"] is None
    assert again.status_code == 409


def test_check_out_before_check_in_is_bad_request(client):
    login(client, "employee@salarybox.com", "employee123")

    resp = client.post("/api/attendance/2/mark", json={"direction": "check-out", "photo": "p"})

    assert resp.status_code == 400


def test_leave_request_flow(client):
    login(client, "employee@salarybox.com", "employee123")
    created = client.post(
        "/api/leaves",
        json={"start_date": "2025-06-02", "end_date": "2025-06-03", "type": "paid", "reason": "Trip"},
    )
    assert created.status_code == 201
    leave_id = created.get_json()["data"]["id"]

    assert client.post(f"/api/admin/leaves/{leave_id}/approve").status_code == 403

    client.post("/api/auth/logout")
    login(client, "admin@salarybox.com", "admin123")
    approved = client.post(f"/api/admin/leaves/{leave_id}/approve", json={"admin_note": "enjoy"})

    assert approved.status_code == 200
    assert approved.get_json()["data"]["status"] == "approved"
    assert client.post(f"/api/admin/leaves/{leave_id}/reject").status_code == 409


def test_leave_request_with_bad_dates(client):
    login(client, "employee@salarybox.com", "employee123")

    resp = client.post(
        "/api/leaves",
        json={"start_date": "2025-06-05", "end_date": "2025-06-03", "type": "paid", "reason": "Trip"},
    )

    assert resp.status_code == 400


def test_admin_payroll_generate_and_advance(client):
    login(client, "admin@salarybox.com", "admin123")

    generated = client.post("/api/admin/payroll/generate", json={"month": "2025-03"})
    assert generated.status_code == 201
    assert generated.get_json()["meta"]["created"] == 4

    record_id = generated.get_json()["data"][0]["id"]
    advanced = client.post(f"/api/admin/payroll/{record_id}/advance")
    assert advanced.get_json()["data"]["status"] == "processed"

    listing = client.get("/api/admin/payroll?month=2025-03").get_json()
    assert len(listing["data"]) == 4
    assert listing["meta"]["total_net"] == sum(r["net_salary"] for r in listing["data"])


def test_employee_detail_not_found_for_admin(client):
    login(client, "admin@salarybox.com", "admin123")

    assert client.get("/api/employees/1").status_code == 404
    assert client.get("/api/employees?department=Design").get_json()["meta"]["count"] == 1


def test_today_attendance_endpoint(client):
    login(client, "employee@salarybox.com", "employee123")

    assert client.get("/api/attendance/2/today").get_json()["data"] is None
    client.post("/api/attendance/2/mark", json={"direction": "check-in", "photo": "p"})

    data = client.get("/api/attendance/2/today").get_json()["data"]
    assert data["check_in_photo"] == "p"
    assert client.get("/api/attendance/3/today").status_code == 403
