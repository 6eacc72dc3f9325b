# file: backend/config.py

import os
from dotenv import load_dotenv

from backend.exceptions import UnknownCityError
from backend.models import City

load_dotenv()

OPEN_METEO_URL = os.getenv("OPEN_METEO_URL", "https://air-quality-api.open-meteo.com/v1/air-quality")
DISPLAY_TIMEZONE = os.getenv("DISPLAY_TIMEZONE", "UTC")
DASHBOARD_USERNAME = os.getenv("DASHBOARD_USERNAME", "demo")
DASHBOARD_PASSWORD = os.getenv("DASHBOARD_PASSWORD", "demo")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

try :
    REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "30"))
    REFRESH_INTERVAL_MINUTES = int(os.getenv("REFRESH_INTERVAL_MINUTES", "60"))
except ValueError as e :
    raise ValueError(f"Invalid numeric configuration value: {e}")

if REQUEST_TIMEOUT <= 0 or REFRESH_INTERVAL_MINUTES <= 0 :
    raise ValueError("REQUEST_TIMEOUT and REFRESH_INTERVAL_MINUTES must be positive")

HOURLY_FIELDS = [
    "pm10",
    "pm2_5",
    "carbon_monoxide",
    "nitrogen_dioxide",
    "sulphur_dioxide",
    "ozone",
    "european_aqi"
]

CITIES = [
    City(name = "London", lat = 51.5074, lon = -0.1278),
    City(name = "Paris", lat = 48.8566, lon = 2.3522),
    City(name = "Berlin", lat = 52.5200, lon = 13.4050),
    City(name = "Madrid", lat = 40.4168, lon = -3.7038),
    City(name = "Rome", lat = 41.9028, lon = 12.4964),
]


def get_city(name: str) -> City :
    """Look up a catalog city by name (case-insensitive)."""
    for city in CITIES :
        if city.name.lower() == name.lower() :
            return city
    raise UnknownCityError(f"Unknown city: {name}")
