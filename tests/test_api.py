import pytest
from fastapi.testclient import TestClient

from shiftview.api.main import app
from shiftview.api.router import get_schedule_data
from shiftview.infrastructure.schedule_loader import load_schedule

PLANNED = {
    "id": 1,
    "employee": "A",
    "location": "X",
    "role": "Clerk",
    "startTime": "2025-01-01T09:00",
    "endTime": "2025-01-01T17:00",
}
ACTUAL = {**PLANNED, "id": 2, "startTime": "2025-01-01T09:15", "endTime": "2025-01-01T16:45"}


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_post_schedule_advanced(client):
    response = client.post(
        "/schedule",
        json={
            "planned": [PLANNED],
            "actual": [ACTUAL],
            "start_date": "2025-01-01",
            "end_date": "2025-01-01",
            "advanced": True,
        },
    )

    assert response.status_code == 200
    body = response.json()
    assert body["days"] == ["2025-01-01"]
    assert len(body["rows"]) == 1
    cell = body["rows"][0]["cells"][0]
    assert cell["is_late"] is True
    assert cell["is_early_leave"] is True
    assert cell["is_absent"] is False
    assert cell["duration"] == 450
    assert cell["duration_text"] == "7h 30m"
    assert cell["title"] == "09:00 - 17:00"


def test_post_schedule_basic_is_limited_and_ignores_actual(client):
    response = client.post(
        "/schedule",
        json={
            "planned": [PLANNED],
            "actual": [ACTUAL],
            "start_date": "2025-01-01",
            "end_date": "2025-01-10",
        },
    )

    body = response.json()
    assert response.status_code == 200
    assert body["end_date"] == "2025-01-04"
    assert body["range_limited"] is True
    assert body["rows"][0]["actual_shifts"] == []
    assert body["rows"][0]["cells"][0]["status"] == "planned"
    assert body["rows"][0]["cells"][0]["duration"] == 480


def test_post_schedule_outside_range_is_empty(client):
    response = client.post(
        "/schedule",
        json={"planned": [PLANNED], "start_date": "2025-01-02", "end_date": "2025-01-02"},
    )

    assert response.status_code == 200
    assert response.json()["rows"] == []


def test_post_schedule_bad_timestamp_is_400(client):
    bad = {**PLANNED, "startTime": "not-a-date"}
    response = client.post(
        "/schedule",
        json={"planned": [bad], "start_date": "2025-01-01", "end_date": "2025-01-01"},
    )

    assert response.status_code == 400


def test_classify_absent(client):
    response = client.post("/shift/classify", json={"planned": PLANNED, "advanced": True})

    assert response.status_code == 200
    body = response.json()
    assert body["is_absent"] is True
    assert body["status"] == "absent"
    assert body["title"] == "Absent"


def test_get_schedule_uses_loaded_data(client):
    app.dependency_overrides[get_schedule_data] = lambda: load_schedule(
        {"planned": [PLANNED], "actual": [ACTUAL]}
    )

    response = client.get(
        "/schedule", params={"start_date": "2025-01-01", "end_date": "2025-01-02", "advanced": True}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["days"] == ["2025-01-01", "2025-01-02"]
    assert body["rows"][0]["cells"][1] is None


def test_quick_ranges(client):
    response = client.get("/ranges/quick", params={"today": "2025-03-10"})

    assert response.status_code == 200
    body = response.json()
    assert [r["label"] for r in body] == ["Today", "4 days", "1 week", "2 weeks"]
    assert [r["available"] for r in body] == [True, True, False, False]
