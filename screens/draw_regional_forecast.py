#!/usr/bin/env python3
"""
draw_regional_forecast.py

Regional map screens (640×480) in RGB.

Screen 0: latest observations
Screen 1: next forecast period
Screen 2: the period after that

  • Header gradient with a two-line title
  • Base map cropped around the viewer, scaled into a 640×312 band at y=90
  • Per city: condition icon, name, and temperature right-aligned by digit
"""

from __future__ import annotations

import datetime
import enum
import functools
import logging
from typing import Dict, Optional, Tuple

from PIL import Image, ImageDraw

from config import (
    FONT_REGIONAL_CITY,
    FONT_REGIONAL_TEMP,
    FONT_REGIONAL_TITLE,
    HEIGHT,
    LATITUDE,
    LONGITUDE,
    REGIONAL_ICON_SIZE,
    STATE,
    UNITS,
    WIDTH,
)
from icons import regional_icon_from_link
from projection import projection_for
from regional_forecast import ForecastRecord, RegionalForecastData, fetch_regional_forecast
from utils import (
    ScreenImage,
    clear_display,
    draw_outlined_text,
    fahrenheit_to_celsius,
    fetch_image,
    horizontal_gradient,
    load_image,
    log_call,
    paste_icon,
)

TOTAL_SCREENS = 3
MAP_Y_OFFSET = 90
MAP_SIZE = (640, 312)
BACKGROUND_IMAGE = "BackGround5_1.png"

BACKGROUND_COLOR = (36, 24, 96)
MAP_FALLBACK_COLOR = (60, 90, 60)
TOP_COLOR_1 = (192, 91, 2)
TOP_COLOR_2 = (72, 34, 64)
TRIANGLE_COLOR = (28, 10, 87)
TITLE_COLOR = (255, 255, 0)
CITY_COLOR = (255, 255, 255)
TEMP_COLOR = (255, 255, 0)


class Status(enum.Enum):
    LOADING = "loading"
    LOADED = "loaded"
    NO_DATA = "no data"


def display_temperature(fahrenheit: float, units: str = UNITS) -> int:
    if units == "metric":
        return int(round(fahrenheit_to_celsius(fahrenheit)))
    return int(round(fahrenheit))


def label_positions(
    record: ForecastRecord, temperature_text: str, y_offset: int = MAP_Y_OFFSET
) -> Dict[str, Tuple[int, int]]:
    """Anchor points for one city's icon, name and temperature."""
    return {
        "icon": (record.x, record.y - 15 + y_offset),
        "name": (record.x - 40, record.y - 15 + y_offset),
        "temperature": (record.x - len(temperature_text) * 15, record.y + 20 + y_offset),
    }


def screen_title(data: RegionalForecastData, screen_index: int) -> Tuple[str, str]:
    if screen_index == 0:
        return "Regional", "Observations"

    period = data.cities[0][screen_index]
    try:
        start = datetime.datetime.fromisoformat(period.period_start or "")
    except ValueError:
        logging.warning("Unreadable forecast start time %r", period.period_start)
        return "Forecast for", ""

    # The offset in startTime is local to the forecast point; keep it.
    day_name = start.strftime("%A")
    if period.daytime:
        return "Forecast for", day_name
    return "Forecast for", f"{day_name} Night"


@functools.lru_cache(maxsize=64)
def _regional_icon(icon_ref: str) -> Optional[Image.Image]:
    icon = load_image(icon_ref)
    if icon is None:
        return None
    return icon.resize((REGIONAL_ICON_SIZE, REGIONAL_ICON_SIZE), Image.Resampling.LANCZOS)


@functools.lru_cache(maxsize=128)
def _remote_icon(url: str) -> Optional[Image.Image]:
    return fetch_image(url, REGIONAL_ICON_SIZE)


def _icon_for(record: ForecastRecord) -> Optional[Image.Image]:
    icon_ref = regional_icon_from_link(record.icon, not record.daytime)
    icon = _regional_icon(icon_ref) if icon_ref else None
    if icon is None and record.icon:
        icon = _remote_icon(record.icon)
    return icon


def _draw_header(img: Image.Image, draw: ImageDraw.ImageDraw, title: Tuple[str, str]) -> None:
    horizontal_gradient(img, (0, 30, 500, 90), TOP_COLOR_1, TOP_COLOR_2)
    draw.polygon([(500, 30), (450, 90), (500, 90)], fill=TRIANGLE_COLOR)

    line1, line2 = title
    if line2:
        draw_outlined_text(draw, (170, 32), line1, FONT_REGIONAL_TITLE, TITLE_COLOR)
        draw_outlined_text(draw, (170, 58), line2, FONT_REGIONAL_TITLE, TITLE_COLOR)
    else:
        draw_outlined_text(draw, (170, 45), line1, FONT_REGIONAL_TITLE, TITLE_COLOR)


def _draw_base_map(img: Image.Image, data: RegionalForecastData) -> None:
    base_map = load_image(projection_for(data.region).base_map)
    if base_map is None:
        ImageDraw.Draw(img).rectangle(
            [0, MAP_Y_OFFSET, MAP_SIZE[0] - 1, MAP_Y_OFFSET + MAP_SIZE[1] - 1],
            fill=MAP_FALLBACK_COLOR,
        )
        return

    left = int(round(data.source.x))
    top = int(round(data.source.y))
    crop = base_map.crop((left, top, left + data.offset.x * 2, top + data.offset.y * 2))
    crop = crop.resize(MAP_SIZE, Image.Resampling.LANCZOS)
    img.paste(crop.convert("RGB"), (0, MAP_Y_OFFSET))


@log_call
def draw_regional_forecast(
    display,
    data: RegionalForecastData,
    screen_index: int,
    *,
    units: str = UNITS,
    transition: bool = False,
):
    if not data or not data.cities:
        return None

    background = load_image(BACKGROUND_IMAGE)
    if background is not None:
        img = background.convert("RGB").resize((WIDTH, HEIGHT))
    else:
        img = Image.new("RGB", (WIDTH, HEIGHT), BACKGROUND_COLOR)
    draw = ImageDraw.Draw(img)

    _draw_header(img, draw, screen_title(data, screen_index))
    _draw_base_map(img, data)

    for city in data.cities:
        period = city[screen_index]
        temperature = str(display_temperature(period.temperature, units))
        anchors = label_positions(period, temperature)

        paste_icon(img, _icon_for(period), anchors["icon"])
        draw_outlined_text(draw, anchors["name"], period.name, FONT_REGIONAL_CITY, CITY_COLOR)
        draw_outlined_text(draw, anchors["temperature"], temperature, FONT_REGIONAL_TEMP, TEMP_COLOR)

    if transition:
        return ScreenImage(img, displayed=False)

    clear_display(display)
    display.image(img)
    display.show()
    return ScreenImage(img, displayed=True)


class RegionalForecastScreen:
    """Holds one refresh worth of regional data and draws its three frames.

    ``render`` expects ``get_data`` to have finished with ``Status.LOADED``.
    """

    total_screens = TOTAL_SCREENS

    def __init__(self, client=None, units: str = UNITS):
        self.client = client
        self.units = units
        self.status = Status.LOADING
        self.data: Optional[RegionalForecastData] = None

    def get_data(self, latitude: float = LATITUDE, longitude: float = LONGITUDE, state: str = STATE) -> None:
        self.status = Status.LOADING
        self.data = fetch_regional_forecast(latitude, longitude, state, client=self.client)
        self.status = Status.LOADED if self.data is not None else Status.NO_DATA

    def render(self, display, screen_index: int, *, transition: bool = False):
        return draw_regional_forecast(
            display,
            self.data,
            screen_index,
            units=self.units,
            transition=transition,
        )
