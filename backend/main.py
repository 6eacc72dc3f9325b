# file: backend/main.py

import logging
import uvicorn
from fastapi import FastAPI, Query, HTTPException, Path
from contextlib import asynccontextmanager
from datetime import timedelta
from typing import List

from backend.auth import authenticate
from backend.config import CITIES, LOG_LEVEL, REFRESH_INTERVAL_MINUTES, get_city
from backend.exceptions import InvalidCredentialsError, MissingDataError, UnknownCityError
from backend.models import City, DashboardView, HourlyAirQuality, LoginRequest, LoginResponse, TimeWindow
from backend.open_meteo_api import fetch_and_save, fetch_city_and_save
from backend.pipeline import DashboardCache
from backend.records import get_record, record_age
from backend.scheduler import run_schedule

# Configure logging
logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(levelname)s - %(message)s')

FAILED_TO_LOAD = "Failed to load air quality data"

dashboard_cache = DashboardCache()


@asynccontextmanager
async def lifespan(app: FastAPI) :
    """Start the refresh scheduler and prefetch every city on startup."""
    run_schedule()
    await fetch_and_save()
    yield


app = FastAPI(
    title = "Air Quality Dashboard",
    description = "Hourly air quality telemetry for European cities, sourced from Open-Meteo.",
    version = "0.1",
    lifespan = lifespan
)


def resolve_city(city_name: str) -> City :
    try :
        return get_city(city_name)
    except UnknownCityError as e :
        raise HTTPException(status_code = 404, detail = str(e))


async def load_record(city: City) -> HourlyAirQuality | None :
    """Stored record for a city, fetched on demand when missing or older than two refresh intervals."""
    record = get_record(city.name)
    if record is None :
        logging.info(f"No stored data for {city.name}, fetching")
        return await fetch_city_and_save(city)

    age = record_age(city.name)
    if age is not None and age > timedelta(minutes = 2 * REFRESH_INTERVAL_MINUTES) :
        logging.warning(f"Stored data for {city.name} is stale ({age}), refetching")
        fresh = await fetch_city_and_save(city)
        if fresh is not None :
            return fresh
    return record


@app.get("/cities", response_model=List[City])
async def cities():
    """List the city catalog."""
    return CITIES


@app.get("/air_quality/{city_name}", response_model=DashboardView)
async def air_quality(
    city_name: str = Path(..., description="City name from the catalog"),
    window: int = Query(24, description="Time window in hours (24, 48 or 72)")
):
    """Dashboard view for one city over the selected time window."""
    city = resolve_city(city_name)
    try :
        time_window = TimeWindow(window)
    except ValueError :
        raise HTTPException(status_code = 400, detail = "Invalid window. Expected one of 24, 48, 72")

    record = await load_record(city)
    try :
        view = dashboard_cache.get(city, time_window, record)
    except MissingDataError as e :
        logging.warning(f"No data for {city.name} ({time_window.label}): {e}")
        view = None

    if view is None :
        raise HTTPException(status_code = 503, detail = FAILED_TO_LOAD)
    return view


@app.get("/air_quality/{city_name}/raw", response_model=HourlyAirQuality)
async def raw_air_quality(city_name: str = Path(..., description="City name from the catalog")):
    """Latest upstream record stored for a city."""
    city = resolve_city(city_name)
    record = await load_record(city)
    if record is None :
        raise HTTPException(status_code = 503, detail = FAILED_TO_LOAD)
    return record


@app.post("/login", response_model=LoginResponse)
async def login(credentials: LoginRequest):
    try :
        username = authenticate(credentials.username, credentials.password)
    except InvalidCredentialsError as e :
        raise HTTPException(status_code = 401, detail = str(e))
    return LoginResponse(username = username)


@app.post("/refresh", response_model=List[str])
async def refresh():
    """Refetch every city now instead of waiting for the scheduler."""
    refreshed = await fetch_and_save()
    logging.info(f"Refreshed cities: {refreshed}")
    return refreshed


if __name__ == "__main__" :
    uvicorn.run(app, host = "0.0.0.0", port = 8000, log_level="info")
