# file: tests/test_frontend.py

import requests

from frontend import auth_api
from frontend.charts import (gas_line_figure, particulate_bar_figure, polar_area_figure, radar_figure,
                             timeline_figure)
from frontend.utils import format_trend, get_city_names, table_rows_to_frame

LABELS = ["PM2.5", "PM10", "CO", "NO2", "SO2", "O3"]


def chart(labels, *datasets):
    return {"labels": labels, "datasets": [{"label": label, "data": data} for label, data in datasets]}


def test_city_names_keep_catalog_order():
    cities = [{"name": "London", "lat": 51.5, "lon": -0.1}, {"name": "Berlin", "lat": 52.5, "lon": 13.4}]
    assert get_city_names(cities) == ["London", "Berlin"]


def test_table_rows_to_frame():
    rows = [{"time": "05:00", "pm2_5": "12.3", "pm10": "20.0", "co": "201.0", "no2": "-", "so2": "1.2",
             "o3": "60.0", "aqi": 42}]
    df = table_rows_to_frame(rows)
    assert list(df.columns) == ["Time", "PM2.5", "PM10", "CO", "NO₂", "SO₂", "O₃", "AQI"]
    assert df.iloc[0]["Time"] == "05:00"
    assert df.iloc[0]["AQI"] == 42


def test_empty_table():
    df = table_rows_to_frame([])
    assert df.empty
    assert "AQI" in df.columns


def test_format_trend():
    assert format_trend(33.3) == "+33.3%"
    assert format_trend(-5) == "-5.0%"
    assert format_trend(None) is None


def test_timeline_figure():
    fig = timeline_figure(chart(["00:00", "01:00"], ("European AQI", [30, 31])))
    assert fig.data[0].fill == "tozeroy"
    assert list(fig.data[0].y) == [30, 31]


def test_radar_figure_closes_polygon():
    fig = radar_figure(chart(LABELS, ("24h Average", [1, 2, 3, 4, 5, 6])))
    assert list(fig.data[0].r) == [1, 2, 3, 4, 5, 6, 1]
    assert list(fig.data[0].theta)[-1] == "PM2.5"


def test_polar_area_figure():
    fig = polar_area_figure(chart(LABELS, ("00:00", [1, 2, 3, 4, 5, 6])))
    assert len(fig.data[0].marker.color) == 6


def test_particulate_bars_grouped():
    fig = particulate_bar_figure(chart(["00:00"], ("PM2.5", [10]), ("PM10", [20])))
    assert fig.layout.barmode == "group"
    assert [trace.name for trace in fig.data] == ["PM2.5", "PM10"]


def test_gas_lines():
    fig = gas_line_figure(chart(["00:00"], ("NO2", [1]), ("SO2", [2]), ("O3", [3])))
    assert [trace.line.color for trace in fig.data] == ["rgb(239, 68, 68)", "rgb(234, 179, 8)", "rgb(34, 197, 94)"]


class FakeResponse:
    def __init__(self, status_code, body=None):
        self.status_code = status_code
        self.body = body

    def json(self):
        return self.body

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"HTTP {self.status_code}")


def test_login_accepted(monkeypatch):
    monkeypatch.setattr(auth_api.requests, "post", lambda *args, **kwargs: FakeResponse(200, {"username": "demo"}))
    assert auth_api.login("demo", "demo") == "demo"


def test_login_rejected(monkeypatch):
    monkeypatch.setattr(auth_api.requests, "post", lambda *args, **kwargs: FakeResponse(401))
    assert auth_api.login("demo", "nope") is None


def test_login_backend_unreachable(monkeypatch):
    def refuse(*args, **kwargs):
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(auth_api.requests, "post", refuse)
    assert auth_api.login("demo", "demo") is None
