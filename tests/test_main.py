# file: tests/test_main.py

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from backend import main, open_meteo_api
from backend.records import get_record, save_record
from tests.conftest import make_record


@pytest.fixture
def client(monkeypatch):
    async def no_fetch(city):
        return None

    monkeypatch.setattr(main, "fetch_city_and_save", no_fetch)
    return TestClient(main.app)


def test_cities(client):
    response = client.get("/cities")
    assert response.status_code == 200
    assert [city["name"] for city in response.json()] == ["London", "Paris", "Berlin", "Madrid", "Rome"]


def test_dashboard_view(client):
    save_record("London", make_record(hours=72))
    response = client.get("/air_quality/London", params={"window": 48})
    assert response.status_code == 200
    view = response.json()
    assert view["city"]["name"] == "London"
    assert view["window"] == 48
    assert view["hours"] == 48
    assert len(view["table"]) == 48
    assert view["table"][0] == {
        "time": "00:00", "pm2_5": "10.0", "pm10": "20.0", "co": "200.0",
        "no2": "15.0", "so2": "2.0", "o3": "60.0", "aqi": 30
    }
    assert view["distribution"]["labels"] == ["PM2.5", "PM10", "CO", "NO2", "SO2", "O3"]
    assert view["stats"][0]["value"] == 30


def test_default_window_is_24_hours(client):
    save_record("Paris", make_record(hours=72))
    assert client.get("/air_quality/Paris").json()["hours"] == 24


def test_window_clamped_to_available_hours(client):
    save_record("Paris", make_record(hours=30))
    view = client.get("/air_quality/Paris", params={"window": 72}).json()
    assert view["window"] == 72
    assert view["hours"] == 30


def test_city_lookup_is_case_insensitive(client):
    save_record("Rome", make_record(hours=3))
    assert client.get("/air_quality/rome").json()["city"]["name"] == "Rome"


def test_unknown_city(client):
    response = client.get("/air_quality/Atlantis")
    assert response.status_code == 404


def test_invalid_window(client):
    save_record("London", make_record(hours=3))
    response = client.get("/air_quality/London", params={"window": 12})
    assert response.status_code == 400


def test_missing_data(client):
    response = client.get("/air_quality/Berlin")
    assert response.status_code == 503
    assert response.json()["detail"] == "Failed to load air quality data"


def test_empty_record_reports_missing_data(client):
    save_record("Berlin", make_record(hours=0))
    response = client.get("/air_quality/Berlin")
    assert response.status_code == 503
    assert response.json()["detail"] == "Failed to load air quality data"


def test_fetches_on_demand(monkeypatch):
    async def fetch(city):
        record = make_record(hours=5)
        save_record(city.name, record)
        return record

    monkeypatch.setattr(main, "fetch_city_and_save", fetch)
    response = TestClient(main.app).get("/air_quality/Madrid")
    assert response.status_code == 200
    assert get_record("Madrid").hours == 5


def test_view_reused_until_record_changes(client):
    save_record("London", make_record(hours=24))
    first = client.get("/air_quality/London").json()
    assert client.get("/air_quality/London").json() == first
    save_record("London", make_record(hours=24, european_aqi=[99] * 24))
    assert client.get("/air_quality/London").json()["stats"][0]["value"] == 99


def test_raw_record(client):
    save_record("London", make_record(hours=2))
    response = client.get("/air_quality/London/raw")
    assert response.status_code == 200
    assert response.json()["pm2_5"] == [10.0, 11.0]


def test_raw_record_missing(client):
    assert client.get("/air_quality/London/raw").status_code == 503


def test_login(client):
    response = client.post("/login", json={"username": "demo", "password": "demo"})
    assert response.status_code == 200
    assert response.json() == {"username": "demo"}


def test_login_rejected(client):
    response = client.post("/login", json={"username": "demo", "password": "nope"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid credentials"


def test_refresh(client, monkeypatch):
    async def fake_refresh():
        return ["London", "Paris"]

    monkeypatch.setattr(main, "fetch_and_save", fake_refresh)
    response = client.post("/refresh")
    assert response.status_code == 200
    assert response.json() == ["London", "Paris"]


def test_stale_record_is_refetched(monkeypatch):
    save_record("Rome", make_record(hours=3))
    fresh = make_record(hours=6)

    async def fetch(city):
        save_record(city.name, fresh)
        return fresh

    monkeypatch.setattr(main, "fetch_city_and_save", fetch)
    monkeypatch.setattr(main, "record_age", lambda name: timedelta(days=1))
    assert TestClient(main.app).get("/air_quality/Rome").json()["hours"] == 6


def test_stale_record_kept_when_refetch_fails(client, monkeypatch):
    save_record("Rome", make_record(hours=3))
    monkeypatch.setattr(main, "record_age", lambda name: timedelta(days=1))
    assert client.get("/air_quality/Rome").json()["hours"] == 3


def test_invalid_upstream_json_reports_missing_data(monkeypatch):
    from tests.test_open_meteo_api import CitySession, FakeResponse, invalid_json

    responses = {city.lat: FakeResponse(body=invalid_json()) for city in main.CITIES}
    monkeypatch.setattr(open_meteo_api, "create_session", lambda: CitySession(responses))
    response = TestClient(main.app).get("/air_quality/Berlin")
    assert response.status_code == 503
    assert response.json()["detail"] == "Failed to load air quality data"
