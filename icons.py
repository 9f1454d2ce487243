"""Map api.weather.gov icon links to the regional map's icon images.

NWS icon links look like::

    https://api.weather.gov/icons/land/day/tsra_sct,40?size=medium
    https://api.weather.gov/icons/land/night/rain_showers,30/tsra,60?size=medium

The first condition code after ``day``/``night`` decides the icon.
"""

from __future__ import annotations

import re
from typing import Optional

_ICON_LINK_RE = re.compile(r"/icons/[^/]+/(day|night)/([a-z_]+)")

# condition code -> (day icon, night icon)
_REGIONAL_ICONS: dict[str, tuple[str, str]] = {
    "skc": ("sunny.png", "clear.png"),
    "few": ("sunny.png", "clear.png"),
    "sct": ("partly-cloudy.png", "partly-clear.png"),
    "bkn": ("mostly-cloudy.png", "mostly-cloudy-night.png"),
    "ovc": ("cloudy.png", "cloudy.png"),
    "wind_skc": ("wind.png", "wind.png"),
    "wind_few": ("wind.png", "wind.png"),
    "wind_sct": ("wind.png", "wind.png"),
    "wind_bkn": ("wind.png", "wind.png"),
    "wind_ovc": ("wind.png", "wind.png"),
    "snow": ("snow.png", "snow.png"),
    "rain_snow": ("rain-snow.png", "rain-snow.png"),
    "rain_sleet": ("rain-sleet.png", "rain-sleet.png"),
    "snow_sleet": ("snow-sleet.png", "snow-sleet.png"),
    "fzra": ("freezing-rain.png", "freezing-rain.png"),
    "rain_fzra": ("freezing-rain.png", "freezing-rain.png"),
    "snow_fzra": ("freezing-rain-snow.png", "freezing-rain-snow.png"),
    "sleet": ("sleet.png", "sleet.png"),
    "rain": ("rain.png", "rain.png"),
    "rain_showers": ("showers.png", "showers.png"),
    "rain_showers_hi": ("showers.png", "showers.png"),
    "tsra": ("thunderstorm.png", "thunderstorm.png"),
    "tsra_sct": ("scattered-tstorms.png", "scattered-tstorms-night.png"),
    "tsra_hi": ("scattered-tstorms.png", "scattered-tstorms-night.png"),
    "tornado": ("tornado.png", "tornado.png"),
    "hurricane": ("hurricane.png", "hurricane.png"),
    "tropical_storm": ("hurricane.png", "hurricane.png"),
    "dust": ("smoke.png", "smoke.png"),
    "smoke": ("smoke.png", "smoke.png"),
    "haze": ("haze.png", "haze.png"),
    "hot": ("hot.png", "hot.png"),
    "cold": ("cold.png", "cold.png"),
    "blizzard": ("blizzard.png", "blizzard.png"),
    "fog": ("fog.png", "fog.png"),
}

REGIONAL_ICON_DIR = "regional"


def condition_from_link(icon_link: Optional[str]) -> Optional[str]:
    if not icon_link:
        return None
    match = _ICON_LINK_RE.search(icon_link)
    return match.group(2) if match else None


def regional_icon_from_link(icon_link: Optional[str], is_night: bool) -> Optional[str]:
    """Return the icon path (relative to the images folder) or ``None``."""
    icons = _REGIONAL_ICONS.get(condition_from_link(icon_link) or "")
    if not icons:
        return None
    return f"{REGIONAL_ICON_DIR}/{icons[1] if is_night else icons[0]}"
