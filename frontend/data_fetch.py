#file: frontend/data_fetch.py

import aiohttp
import logging
import os

FASTAPI_URL = os.getenv("FASTAPI_URL", "http://localhost:8000")

async def fetch_cities():
    """Fetch the city catalog from FastAPI asynchronously."""
    url = f"{FASTAPI_URL}/cities"
    try:
        async with aiohttp.ClientSession() as session:
            async with session.get(url) as response:
                response.raise_for_status()
                return await response.json()
    except aiohttp.ClientError as e:
        logging.error(f"Error fetching cities: {e}")
        return []

async def fetch_dashboard(city_name, window=24):
    """Fetch the dashboard view of one city for a time window; None on any failure."""
    url = f"{FASTAPI_URL}/air_quality/{city_name}"

    async with aiohttp.ClientSession() as session:
        try:
            async with session.get(url, params={"window": int(window)}) as response:
                response.raise_for_status()
                return await response.json()
        except aiohttp.ClientResponseError as e:
            logging.error(f"[ERROR] HTTP {e.status}: {e.message}")
        except aiohttp.ClientError as e:
            logging.error(f"[ERROR] Network request failed: {e}")

    return None
