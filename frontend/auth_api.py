#file: frontend/auth_api.py

import logging
import os
import requests

FASTAPI_URL = os.getenv("FASTAPI_URL", "http://localhost:8000")

def login(username, password) :
    """Check credentials against the backend. Returns the username, or None when rejected."""
    try:
        response = requests.post(f"{FASTAPI_URL}/login", json={"username": username, "password": password}, timeout=10)
        if response.status_code == 401:
            return None
        response.raise_for_status()
        return response.json()["username"]
    except requests.RequestException as e:
        logging.error(f"Error logging in: {e}")
        return None
