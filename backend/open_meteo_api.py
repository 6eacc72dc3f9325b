# file: backend/open_meteo_api.py

import aiohttp
import asyncio
from typing import Any, Dict, List, Optional
import logging
from pydantic import ValidationError
from tqdm.asyncio import tqdm
import certifi
import ssl

from backend.config import CITIES, DISPLAY_TIMEZONE, HOURLY_FIELDS, OPEN_METEO_URL, REQUEST_TIMEOUT
from backend.exceptions import MalformedRecordError
from backend.models import AirQualityPayload, City, HourlyAirQuality
from backend.records import save_record


def create_session() -> aiohttp.ClientSession:
    ssl_context = ssl.create_default_context(cafile=certifi.where())
    return aiohttp.ClientSession(
        connector=aiohttp.TCPConnector(ssl=ssl_context),
        timeout=aiohttp.ClientTimeout(total=REQUEST_TIMEOUT)
    )


def parse_payload(payload: Dict[str, Any]) -> HourlyAirQuality:
    """Validate an upstream payload and return its hourly record."""
    try:
        return AirQualityPayload.model_validate(payload).hourly
    except ValidationError as e:
        raise MalformedRecordError(f"Invalid air quality payload: {e}") from e


async def fetch_air_quality(session: aiohttp.ClientSession, city: City) -> Optional[HourlyAirQuality]:
    """Fetch hourly telemetry for one city. Any failure yields None, never a partial record."""
    params = {
        "latitude": city.lat,
        "longitude": city.lon,
        "hourly": ",".join(HOURLY_FIELDS)
    }
    if DISPLAY_TIMEZONE:
        params["timezone"] = DISPLAY_TIMEZONE
    try:
        async with session.get(OPEN_METEO_URL, params=params) as response:
            if response.status != 200:
                logging.warning(f"Skipping {city.name}: HTTP {response.status}")
                return None
            payload = await response.json()
    except (aiohttp.ClientError, asyncio.TimeoutError) as e:
        logging.error(f"Error fetching air quality for {city.name}: {e}")
        return None
    except ValueError as e:
        logging.error(f"Invalid JSON in air quality response for {city.name}: {e}")
        return None

    try:
        return parse_payload(payload)
    except MalformedRecordError as e:
        logging.error(f"Discarding data for {city.name}: {e}")
        return None


async def _fetch_named(session: aiohttp.ClientSession, city: City):
    return city, await fetch_air_quality(session, city)


async def fetch_all_cities(cities: List[City] = CITIES) -> Dict[str, HourlyAirQuality]:
    """Fetch every city concurrently; cities that failed are left out."""
    records = {}
    async with create_session() as session:
        tasks = [_fetch_named(session, city) for city in cities]
        with tqdm(total=len(tasks), desc="Fetching cities") as pbar:
            for future in asyncio.as_completed(tasks):
                city, record = await future
                if record is not None:
                    records[city.name] = record
                pbar.update(1)
    return records


async def fetch_city_and_save(city: City) -> Optional[HourlyAirQuality]:
    async with create_session() as session:
        record = await fetch_air_quality(session, city)
    if record is not None:
        save_record(city.name, record)
    return record


async def fetch_and_save() -> List[str]:
    """Refresh the stored record of every catalog city, returning the refreshed names."""
    records = await fetch_all_cities()
    if not records:
        logging.warning("No data fetched from Open-Meteo API")
    for city_name, record in records.items():
        save_record(city_name, record)
    return sorted(records)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(fetch_and_save())
