# file: tests/conftest.py

from datetime import datetime, timedelta

import pytest

from backend.main import dashboard_cache
from backend.models import HourlyAirQuality
from backend.records import clear_records


def make_record(hours=3, start="2024-01-01T00:00", **series):
    """Record with `hours` hourly entries; any series can be overridden by keyword."""
    first = datetime.fromisoformat(start)
    data = {
        "time": [(first + timedelta(hours=i)).strftime("%Y-%m-%dT%H:%M") for i in range(hours)],
        "pm10": [20.0 + i for i in range(hours)],
        "pm2_5": [10.0 + i for i in range(hours)],
        "carbon_monoxide": [200.0 + i for i in range(hours)],
        "nitrogen_dioxide": [15.0 + i for i in range(hours)],
        "sulphur_dioxide": [2.0 + i for i in range(hours)],
        "ozone": [60.0 + i for i in range(hours)],
        "european_aqi": [30 + i for i in range(hours)],
    }
    data.update(series)
    return HourlyAirQuality(**data)


@pytest.fixture
def record():
    return make_record(hours=72)


@pytest.fixture(autouse=True)
def clean_state():
    clear_records()
    dashboard_cache.clear()
    yield
    clear_records()
    dashboard_cache.clear()
