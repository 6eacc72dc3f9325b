import asyncio
import threading
import schedule
import logging
import time
from backend.config import REFRESH_INTERVAL_MINUTES
from backend.open_meteo_api import fetch_and_save


def job() -> None :
    try :
        asyncio.run(fetch_and_save())
    except Exception as e :
        logging.error(f"Scheduled refresh failed: {e}")


def run_schedule() -> threading.Thread :
    """Schedule periodic refresh of every city's air quality data."""
    schedule.every(REFRESH_INTERVAL_MINUTES).minutes.do(job)

    def run_continuously() :
        while True :
            schedule.run_pending()
            time.sleep(60)

    thread = threading.Thread(target = run_continuously, daemon = True)
    thread.start()
    logging.info(f"Scheduler started in background thread (every {REFRESH_INTERVAL_MINUTES} min)")
    return thread
