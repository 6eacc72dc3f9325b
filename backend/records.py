# file: backend/records.py

import logging
import threading
from datetime import datetime, timedelta
import pytz
from typing import Dict, Optional, Tuple

from backend.models import HourlyAirQuality

# city name -> (record, fetched at)
_records: Dict[str, Tuple[HourlyAirQuality, datetime]] = {}
_lock = threading.Lock()


def save_record(city_name: str, record: HourlyAirQuality) -> None :
    """Replace the latest record kept for a city."""
    with _lock :
        _records[city_name] = (record, datetime.now(pytz.utc))
    logging.info(f"Stored {record.hours} hours of air quality data for {city_name}")


def get_record(city_name: str) -> Optional[HourlyAirQuality] :
    with _lock :
        entry = _records.get(city_name)
    return entry[0] if entry else None


def record_age(city_name: str) -> Optional[timedelta] :
    """Time since the record for a city was stored, None if there is none."""
    with _lock :
        entry = _records.get(city_name)
    if entry is None :
        return None
    return datetime.now(pytz.utc) - entry[1]


def clear_records() -> None :
    with _lock :
        _records.clear()
