# file: backend/presentation.py
"""Map sliced telemetry and averages into the structures the dashboard views draw."""

import math
from datetime import datetime
import pytz
from typing import List, Optional

from backend.config import DISPLAY_TIMEZONE
from backend.exceptions import EmptySliceError
from backend.models import Averages, ChartData, Dataset, HourlyAirQuality, StatHighlight, TableRow
from backend.utils import percent_change, series_mean

POLLUTANT_LABELS = ["PM2.5", "PM10", "CO", "NO2", "SO2", "O3"]
UNIT = "µg/m³"


def format_hour_label(timestamp: str, timezone: str = DISPLAY_TIMEZONE) -> str :
    """Render an ISO hour timestamp as HH:MM.

    Naive timestamps are already in local time (the upstream API is asked for the
    display timezone); offset-aware ones are converted to `timezone` first.
    """
    moment = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    if moment.tzinfo is not None :
        moment = moment.astimezone(pytz.timezone(timezone))
    return moment.strftime("%H:%M")


def format_value(value: Optional[float]) -> str :
    """One decimal place for display; missing readings render as '-'."""
    if value is None or math.isnan(value) :
        return "-"
    return f"{value:.1f}"


def time_labels(time_slice: HourlyAirQuality) -> List[str] :
    return [format_hour_label(timestamp) for timestamp in time_slice.time]


def _first_hour(time_slice: HourlyAirQuality) -> None :
    if time_slice.hours == 0 :
        raise EmptySliceError("Time window contains no hours")


def build_stats(time_slice: HourlyAirQuality) -> List[StatHighlight] :
    """Current (index 0) AQI, PM2.5, PM10 and ozone, each with its trend vs. the window mean."""
    _first_hour(time_slice)
    aqi = time_slice.european_aqi[0]
    stats = [
        StatHighlight(label = "Current AQI", value = aqi,
                      trend = percent_change(aqi, series_mean(time_slice.european_aqi)))
    ]
    for label, series in [("PM2.5", time_slice.pm2_5), ("PM10", time_slice.pm10), ("Ozone", time_slice.ozone)] :
        stats.append(StatHighlight(
            label = label,
            value = format_value(series[0]),
            unit = UNIT,
            trend = percent_change(series[0], series_mean(series))
        ))
    return stats


def build_timeline(time_slice: HourlyAirQuality) -> ChartData :
    return ChartData(
        labels = time_labels(time_slice),
        datasets = [Dataset(label = "European AQI", data = time_slice.european_aqi)]
    )


def build_distribution(averages: Averages, window: int) -> ChartData :
    """Window averages in fixed pollutant order."""
    return ChartData(
        labels = POLLUTANT_LABELS,
        datasets = [Dataset(
            label = f"{int(window)}h Average",
            data = [averages.pm2_5, averages.pm10, averages.co, averages.no2, averages.so2, averages.o3]
        )]
    )


def build_comparison(time_slice: HourlyAirQuality) -> ChartData :
    """First-hour values in fixed pollutant order."""
    _first_hour(time_slice)
    return ChartData(
        labels = POLLUTANT_LABELS,
        datasets = [Dataset(
            label = time_labels(time_slice)[0],
            data = [
                time_slice.pm2_5[0],
                time_slice.pm10[0],
                time_slice.carbon_monoxide[0],
                time_slice.nitrogen_dioxide[0],
                time_slice.sulphur_dioxide[0],
                time_slice.ozone[0],
            ]
        )]
    )


def build_particulate_bars(time_slice: HourlyAirQuality) -> ChartData :
    return ChartData(
        labels = time_labels(time_slice),
        datasets = [
            Dataset(label = "PM2.5", data = time_slice.pm2_5),
            Dataset(label = "PM10", data = time_slice.pm10),
        ]
    )


def build_gas_series(time_slice: HourlyAirQuality) -> ChartData :
    return ChartData(
        labels = time_labels(time_slice),
        datasets = [
            Dataset(label = "NO2", data = time_slice.nitrogen_dioxide),
            Dataset(label = "SO2", data = time_slice.sulphur_dioxide),
            Dataset(label = "O3", data = time_slice.ozone),
        ]
    )


def build_table_rows(time_slice: HourlyAirQuality) -> List[TableRow] :
    """One row per hour; pollutants with one decimal, AQI as-is."""
    return [
        TableRow(
            time = format_hour_label(timestamp),
            pm2_5 = format_value(time_slice.pm2_5[index]),
            pm10 = format_value(time_slice.pm10[index]),
            co = format_value(time_slice.carbon_monoxide[index]),
            no2 = format_value(time_slice.nitrogen_dioxide[index]),
            so2 = format_value(time_slice.sulphur_dioxide[index]),
            o3 = format_value(time_slice.ozone[index]),
            aqi = time_slice.european_aqi[index]
        )
        for index, timestamp in enumerate(time_slice.time)
    ]
