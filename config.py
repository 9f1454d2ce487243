# config.py

#!/usr/bin/env python3
import glob
import logging
import os
from pathlib import Path
from typing import Optional

import pytz
from dotenv import load_dotenv
from PIL import ImageFont

# ─── Environment helpers ───────────────────────────────────────────────────────

SCRIPT_DIR = os.path.dirname(os.path.abspath(__file__))


def _initialise_env() -> None:
    """Load environment variables from `.env` if present."""

    candidate_paths = []

    project_root = Path(SCRIPT_DIR)
    candidate_paths.append(project_root / ".env")

    cwd_path = Path.cwd() / ".env"
    if cwd_path != candidate_paths[0]:
        candidate_paths.append(cwd_path)

    for path in candidate_paths:
        if not path.is_file():
            continue
        try:
            load_dotenv(path, override=False)
        except OSError as exc:
            logging.warning("Failed to load %s: %s", path, exc)


_ENV_LOADED = False


def _should_load_env() -> bool:
    """Return ``True`` when dotenv files should be loaded."""

    if os.environ.get("REGIONAL_MAP_SKIP_DOTENV"):
        return False

    # Skip filesystem scans when running under pytest to keep test startup fast.
    if os.environ.get("PYTEST_CURRENT_TEST"):
        return False

    return True


def load_environment() -> None:
    """Load environment variables from `.env` files once, if allowed."""

    global _ENV_LOADED

    if _ENV_LOADED or not _should_load_env():
        return

    _initialise_env()
    _ENV_LOADED = True


load_environment()


def _get_first_env_var(*names: str):
    """Return the first populated environment variable from *names.*"""

    for name in names:
        value = os.environ.get(name)
        if value:
            return value

    return None


def _int_from_env(name: str, default: int) -> int:
    raw_value = os.environ.get(name)
    if raw_value is None:
        return default
    try:
        value = int(raw_value)
    except (TypeError, ValueError):
        logging.warning("Invalid %s value %r; using default %d", name, raw_value, default)
        return default
    if value <= 0:
        logging.warning("%s must be greater than zero; using default %d", name, default)
        return default
    return value


def _float_from_env(name: str, default: float) -> float:
    raw_value = os.environ.get(name)
    if raw_value is None or not raw_value.strip():
        return default
    try:
        return float(raw_value)
    except (TypeError, ValueError):
        logging.warning("Invalid %s value %r; using default %s", name, raw_value, default)
        return default


def _normalise_units(raw: Optional[str]) -> str:
    key = (raw or "").strip().lower()
    if key in {"metric", "si", "c", "celsius"}:
        return "metric"
    if key and key not in {"imperial", "us", "f", "fahrenheit"}:
        logging.warning("Unknown REGIONAL_UNITS '%s'; defaulting to imperial", raw)
    return "imperial"


def _load_timezone(name: str):
    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError:
        logging.warning("Unknown DISPLAY_TIMEZONE '%s'; defaulting to UTC", name)
        return pytz.utc


# ─── Viewer location ───────────────────────────────────────────────────────────

# Defaults to downtown Chicago; the state code picks the map projection.
LATITUDE  = _float_from_env("LATITUDE", 41.8781)
LONGITUDE = _float_from_env("LONGITUDE", -87.6298)
STATE     = (os.environ.get("STATE") or "IL").strip().upper()

logging.debug(
    "Regional map location configured: Lat=%s, Lon=%s, State=%s",
    LATITUDE,
    LONGITUDE,
    STATE,
)

# ─── National Weather Service ──────────────────────────────────────────────────

NWS_API_URL = (os.environ.get("NWS_API_URL") or "https://api.weather.gov").rstrip("/")
# api.weather.gov rejects anonymous clients; identify the app and a contact.
NWS_USER_AGENT = _get_first_env_var("NWS_USER_AGENT", "USER_AGENT") or (
    "regional-weather-map (contact: admin@example.com)"
)
NWS_TIMEOUT = _int_from_env("NWS_TIMEOUT", 10)
NWS_RETRIES = _int_from_env("NWS_RETRIES", 2)

REGIONAL_MAX_WORKERS     = _int_from_env("REGIONAL_MAX_WORKERS", 8)
REGIONAL_REFRESH_MINUTES = _int_from_env("REGIONAL_REFRESH_MINUTES", 10)

UNITS = _normalise_units(os.environ.get("REGIONAL_UNITS"))
DISPLAY_TIMEZONE = _load_timezone(os.environ.get("DISPLAY_TIMEZONE", "America/Chicago"))

# ─── Canvas ────────────────────────────────────────────────────────────────────

WIDTH  = 640
HEIGHT = 480

IMAGES_DIR = os.environ.get("REGIONAL_IMAGES_DIR") or os.path.join(SCRIPT_DIR, "images")
OUTPUT_DIR = os.environ.get("REGIONAL_OUTPUT_DIR") or os.path.join(SCRIPT_DIR, "output")

# ─── Fonts ─────────────────────────────────────────────────────────────────────
# Drop Star4000.ttf and Star4000 Large Compressed.ttf into a folder named
# `fonts` alongside this file. DejaVu from the system is used otherwise.
FONTS_DIR = os.environ.get("REGIONAL_FONTS_DIR") or os.path.join(SCRIPT_DIR, "fonts")


def _iter_font_paths(*names: str):
    seen = set()
    search_roots = [FONTS_DIR, "/usr/share/fonts", "/usr/local/share/fonts"]

    for root in search_roots:
        for name in names:
            direct = os.path.join(root, name)
            if os.path.isfile(direct) and direct not in seen:
                seen.add(direct)
                yield direct

        for name in names:
            for path in glob.glob(os.path.join(root, "**", name), recursive=True):
                if path not in seen and os.path.isfile(path):
                    seen.add(path)
                    yield path


def _load_font(size: int, *names: str) -> ImageFont.ImageFont:
    for path in _iter_font_paths(*names):
        try:
            return ImageFont.truetype(path, size)
        except OSError as exc:
            logging.debug("Unable to load font %s: %s", path, exc)

    logging.warning("Fonts %s not found; falling back to PIL default font", ", ".join(names))
    return ImageFont.load_default()


FONT_REGIONAL_TITLE = _load_font(24, "Star4000.ttf", "DejaVuSans-Bold.ttf")
FONT_REGIONAL_CITY  = _load_font(20, "Star4000.ttf", "DejaVuSans-Bold.ttf")
FONT_REGIONAL_TEMP  = _load_font(
    28, "Star4000 Large Compressed.ttf", "Star4000.ttf", "DejaVuSans-Bold.ttf"
)

REGIONAL_ICON_SIZE = 42
