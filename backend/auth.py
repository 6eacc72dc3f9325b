# file: backend/auth.py

import logging
from backend.config import DASHBOARD_USERNAME, DASHBOARD_PASSWORD
from backend.exceptions import InvalidCredentialsError


def authenticate(username: str, password: str) -> str :
    """Accept only the configured demo credentials."""
    if username != DASHBOARD_USERNAME or password != DASHBOARD_PASSWORD :
        logging.warning(f"Rejected login for user: {username}")
        raise InvalidCredentialsError("Invalid credentials")
    logging.info(f"User logged in: {username}")
    return username
