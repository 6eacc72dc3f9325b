#file: frontend/utils.py

import pandas as pd

WINDOW_OPTIONS = {"24h" : 24, "48h" : 48, "72h" : 72}

TABLE_COLUMNS = {"time" : "Time", "pm2_5" : "PM2.5", "pm10" : "PM10", "co" : "CO", "no2" : "NO₂", "so2" : "SO₂",
    "o3" : "O₃", "aqi" : "AQI"}


def get_city_names(cities) :
    """City names in catalog order."""
    return [city["name"] for city in cities]


def table_rows_to_frame(rows) :
    """Convert table rows of a dashboard view into a display DataFrame."""
    if not rows :
        return pd.DataFrame(columns = list(TABLE_COLUMNS.values()))

    df = pd.DataFrame(rows)
    df = df[list(TABLE_COLUMNS)].rename(columns = TABLE_COLUMNS)
    df["AQI"] = df["AQI"].astype("Int64")
    return df


def format_trend(trend) :
    """Trend percentage as shown next to a stat, None when there is no trend."""
    if trend is None :
        return None
    return f"{trend:+.1f}%"
