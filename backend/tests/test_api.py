import pytest


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from app import app

    return TestClient(app)


def shift_payload(date_str, start, end, break_minutes=0, employee="emp-1", shift_id=None):
    return {
        "id": shift_id or f"{employee}-{date_str}-{start}",
        "date": date_str,
        "start_time": start,
        "end_time": end,
        "break_minutes": break_minutes,
        "employee_id": employee,
    }


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}


class TestRulesEndpoints:

    def test_get_rules(self, client):
        response = client.get("/compliance/rules")

        assert response.status_code == 200
        data = response.json()
        assert data["rules"]["max_daily_hours"] == 12
        assert data["rules"]["min_daily_rest_hours"] == 11
        assert data["rules"]["max_consecutive_work_days"] == 6
        assert data["reference"][0] == {"label": "Max. daily working time", "value": 12, "unit": "h"}

    def test_get_rules_prompt(self, client):
        response = client.get("/compliance/rules/prompt")

        assert response.status_code == 200
        assert "Max. daily working time: 12h" in response.json()["text"]


class TestCheckEndpoint:

    def test_empty_shift_list(self, client):
        response = client.post("/compliance/check", json={"shifts": []})

        assert response.status_code == 200
        data = response.json()
        assert data["is_compliant"] is True
        assert data["score"] == 100
        assert data["violations"] == []

    def test_rest_violation(self, client):
        response = client.post("/compliance/check", json={"shifts": [
            shift_payload("2024-03-04", "14:00", "22:00", break_minutes=30),
            shift_payload("2024-03-05", "06:00", "14:00", break_minutes=30),
        ]})

        assert response.status_code == 200
        data = response.json()
        assert data["is_compliant"] is False
        assert data["score"] == 80
        assert data["violation_count"] == 1
        violation = data["violations"][0]
        assert violation["type"] == "MIN_REST_TIME"
        assert violation["severity"] == "violation"
        assert violation["details"]["actual"] == 8.0
        assert violation["details"]["date"] == "2024-03-05"
        assert violation["details"]["employee_id"] == "emp-1"

    def test_break_defaults_to_zero(self, client):
        payload = shift_payload("2024-03-04", "08:00", "16:00")
        del payload["break_minutes"]

        response = client.post("/compliance/check", json={"shifts": [payload]})

        assert response.status_code == 200
        assert response.json()["violations"][0]["type"] == "MISSING_BREAK"

    def test_bad_time_format_rejected(self, client):
        response = client.post("/compliance/check", json={"shifts": [
            shift_payload("2024-03-04", "8:00", "16:00"),
        ]})

        assert response.status_code == 422

    def test_negative_break_rejected(self, client):
        response = client.post("/compliance/check", json={"shifts": [
            shift_payload("2024-03-04", "08:00", "16:00", break_minutes=-5),
        ]})

        assert response.status_code == 422

    def test_out_of_range_time_rejected(self, client):
        response = client.post("/compliance/check", json={"shifts": [
            shift_payload("2024-03-04", "25:00", "26:00"),
        ]})

        assert response.status_code == 422
        assert "Invalid shift data" in response.json()["detail"]


class TestWeeklyEndpoint:

    def test_weekly_violation(self, client):
        shifts = [shift_payload(f"2024-03-{d:02d}", "07:00", "18:00") for d in range(4, 10)]

        response = client.post("/compliance/check/week", json={"shifts": shifts, "week_start": "2024-03-04"})

        assert response.status_code == 200
        data = response.json()
        assert len(data) == 1
        assert data[0]["type"] == "MAX_WEEKLY_HOURS"
        assert data[0]["severity"] == "violation"
        assert data[0]["details"]["actual"] == 66.0

    def test_week_without_shifts(self, client):
        response = client.post("/compliance/check/week", json={"shifts": [], "week_start": "2024-03-04"})

        assert response.status_code == 200
        assert response.json() == []

    def test_invalid_week_start_rejected(self, client):
        response = client.post("/compliance/check/week", json={"shifts": [], "week_start": "2024-02-30"})

        assert response.status_code == 422


class TestRosterEndpoint:

    def test_reports_per_employee(self, client):
        response = client.post("/compliance/check/roster", json={"shifts": [
            shift_payload("2024-03-04", "08:00", "16:00", break_minutes=30, employee="emp-a"),
            shift_payload("2024-03-04", "08:00", "21:00", break_minutes=30, employee="emp-b"),
        ]})

        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"emp-a", "emp-b"}
        assert data["emp-a"]["score"] == 100
        assert data["emp-b"]["violations"][0]["type"] == "MAX_DAILY_HOURS"
