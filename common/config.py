"""
Runtime configuration read from the environment.

Values come from process environment variables, with a `.env` file in the
working directory loaded first (without overriding variables that are already
set). Every setting has a default so the app runs with no configuration at all.

Settings:
    - `ALLHOOPS_LOG_LEVEL`: root log level (default `INFO`).
    - `ALLHOOPS_COOKIE_NAME` / `ALLHOOPS_COOKIE_DAYS`: cookie used to prefill
        the last email on the login form.
    - `ALLHOOPS_MAP_LAT` / `ALLHOOPS_MAP_LON` / `ALLHOOPS_MAP_ZOOM`: initial
        map region when no user location is available.
"""

# Import libraries
from __future__ import annotations
import logging
import os
from dotenv import load_dotenv

from .constants import DEFAULT_MAP_LAT, DEFAULT_MAP_LON

logger = logging.getLogger(__name__)

load_dotenv(override=False)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not a number), using %s", name, raw, default)
        return default


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer), using %s", name, raw, default)
        return default


LOG_LEVEL   = os.getenv("ALLHOOPS_LOG_LEVEL", "INFO").upper()
COOKIE_NAME = os.getenv("ALLHOOPS_COOKIE_NAME", "allhoops_email")
COOKIE_DAYS = _env_int("ALLHOOPS_COOKIE_DAYS", 7)
MAP_LAT     = _env_float("ALLHOOPS_MAP_LAT", DEFAULT_MAP_LAT)
MAP_LON     = _env_float("ALLHOOPS_MAP_LON", DEFAULT_MAP_LON)
MAP_ZOOM    = _env_int("ALLHOOPS_MAP_ZOOM", 7)

if not isinstance(logging.getLevelName(LOG_LEVEL), int):
    logger.warning("Unknown ALLHOOPS_LOG_LEVEL=%r, using INFO", LOG_LEVEL)
    LOG_LEVEL = "INFO"
