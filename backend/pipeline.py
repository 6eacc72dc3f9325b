# file: backend/pipeline.py

import logging
import threading
from typing import Dict, Optional, Tuple

from backend.exceptions import EmptySliceError
from backend.models import SERIES_FIELDS, Averages, City, DashboardView, HourlyAirQuality
from backend.presentation import (build_comparison, build_distribution, build_gas_series, build_particulate_bars,
                                  build_stats, build_table_rows, build_timeline)
from backend.utils import series_mean

# Averages field -> record series
POLLUTANT_SERIES = {
    "pm2_5" : "pm2_5",
    "pm10" : "pm10",
    "co" : "carbon_monoxide",
    "no2" : "nitrogen_dioxide",
    "so2" : "sulphur_dioxide",
    "o3" : "ozone"
}


def slice_record(record: Optional[HourlyAirQuality], window: int) -> Optional[HourlyAirQuality] :
    """Keep the first `window` hours of every series; shorter records are returned whole."""
    if record is None :
        return None
    hours = int(window)
    if hours < 0 :
        raise ValueError(f"Window must not be negative, got {hours}")
    return HourlyAirQuality(**{field : getattr(record, field)[:hours] for field in SERIES_FIELDS})


def compute_averages(time_slice: Optional[HourlyAirQuality]) -> Optional[Averages] :
    """Mean of each pollutant over the slice. AQI and time are not averaged."""
    if time_slice is None :
        return None
    if time_slice.hours == 0 :
        raise EmptySliceError("Cannot average an empty time window")
    return Averages(**{name : series_mean(getattr(time_slice, series)) for name, series in POLLUTANT_SERIES.items()})


def build_dashboard(city: City, window: int, record: Optional[HourlyAirQuality]) -> Optional[DashboardView] :
    """Run slicer, aggregator and every view mapper for one (city, window) selection."""
    time_slice = slice_record(record, window)
    averages = compute_averages(time_slice)
    if time_slice is None or averages is None :
        return None

    return DashboardView(
        city = city,
        window = int(window),
        hours = time_slice.hours,
        stats = build_stats(time_slice),
        timeline = build_timeline(time_slice),
        distribution = build_distribution(averages, window),
        comparison = build_comparison(time_slice),
        particulates = build_particulate_bars(time_slice),
        gases = build_gas_series(time_slice),
        table = build_table_rows(time_slice)
    )


class DashboardCache :
    """Memoized build_dashboard keyed by (city, window) and the identity of the record used."""

    def __init__(self) :
        self._views: Dict[Tuple[str, int], Tuple[HourlyAirQuality, DashboardView]] = {}
        self._lock = threading.Lock()

    def get(self, city: City, window: int, record: Optional[HourlyAirQuality]) -> Optional[DashboardView] :
        if record is None :
            return None
        key = (city.name, int(window))
        with self._lock :
            cached = self._views.get(key)
        if cached is not None and cached[0] is record :
            return cached[1]

        logging.info(f"Computing dashboard for {city.name} ({int(window)}h)")
        view = build_dashboard(city, window, record)
        with self._lock :
            self._views[key] = (record, view)
        return view

    def clear(self) -> None :
        with self._lock :
            self._views.clear()

    def __len__(self) -> int :
        with self._lock :
            return len(self._views)
