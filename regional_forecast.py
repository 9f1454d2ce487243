#!/usr/bin/env python3
"""
regional_forecast.py

Fetch and assemble the regional map data: one observation and two forecast
periods for every city picked for the viewer's map window.

Record index 0 is the latest observation, 1 is the next forecast period
(e.g. "tonight" during the day) and 2 the period after that. Forecast period
0 is what is happening right now, so the observation stands in for it.
"""

from __future__ import annotations

import logging
import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from city_selection import SelectedCity, build_candidates, place_cities, select_cities
from config import REGIONAL_MAX_WORKERS
from projection import (
    BoundingBox,
    GeoPoint,
    PixelPosition,
    Region,
    ViewportOffset,
    projection_for,
    region_for_state,
    to_bounding_box,
    to_pixel,
)
from services.nws import ForecastPoint, NwsClient, ParseError
from utils import celsius_to_fahrenheit

CITY_NAME_MAX_CHARS = 12
_CITY_NAME_RE = re.compile(r"[^-;/\\,]*")


@dataclass(frozen=True)
class ForecastRecord:
    name: str
    daytime: bool
    temperature: float  # °F
    icon: str
    x: int
    y: int
    period_start: Optional[str] = None


CityForecast = Tuple[ForecastRecord, ForecastRecord, ForecastRecord]


@dataclass
class AssemblyResult:
    cities: List[CityForecast] = field(default_factory=list)
    failures: List[str] = field(default_factory=list)

    @property
    def no_data(self) -> bool:
        return not self.cities


@dataclass
class RegionalForecastData:
    region: Region
    offset: ViewportOffset
    source: PixelPosition
    bbox: BoundingBox
    cities: List[CityForecast]


def format_city_name(name: str) -> str:
    """Drop anything after punctuation so the label fits on the map."""
    return _CITY_NAME_RE.match(name).group(0)[:CITY_NAME_MAX_CHARS]


def _observation_temperature(observation: dict) -> float:
    temperature = observation.get("temperature")
    value = temperature.get("value") if isinstance(temperature, dict) else None
    if value is None:
        raise ParseError("Observation has no temperature")
    unit = str(temperature.get("unitCode") or "wmoUnit:degC")
    if unit.endswith("degF"):
        return float(value)
    return celsius_to_fahrenheit(value)


def build_observation_record(observation: dict, city: SelectedCity) -> ForecastRecord:
    icon = observation.get("icon")
    if not icon:
        raise ParseError("Observation has no icon")
    return ForecastRecord(
        name=format_city_name(city.name),
        daytime="/day/" in icon,
        temperature=_observation_temperature(observation),
        icon=icon,
        x=int(round(city.x)),
        y=int(round(city.y)),
    )


def build_forecast_record(period: dict, city: SelectedCity) -> ForecastRecord:
    temperature = float(period.get("temperature") or 0)
    if str(period.get("temperatureUnit") or "F").upper().startswith("C"):
        temperature = celsius_to_fahrenheit(temperature)
    return ForecastRecord(
        name=format_city_name(city.name),
        daytime=bool(period.get("isDaytime")),
        temperature=temperature,
        icon=period.get("icon") or "",
        x=int(round(city.x)),
        y=int(round(city.y)),
        period_start=period.get("startTime"),
    )


def _fetch_observation(client: NwsClient, point: ForecastPoint) -> dict:
    station = client.get_first_station(point.observation_stations_url)
    return client.get_latest_observation(station)


def fetch_city_forecast(city: SelectedCity, client: NwsClient) -> CityForecast:
    """Fetch and format the three records for ``city``; raises on any failure."""
    point = client.get_point(city.lat, city.lon)

    # The observation chain does not depend on the forecast, run them together.
    side = ThreadPoolExecutor(max_workers=1)
    try:
        observation_future = side.submit(_fetch_observation, client, point)
        forecast = client.get_forecast(point.forecast_url)
        observation = observation_future.result()
    except Exception:
        # The city is dropped either way; do not wait on the other request.
        side.shutdown(wait=False, cancel_futures=True)
        raise
    side.shutdown()

    periods = forecast["properties"].get("periods")
    if not isinstance(periods, list) or len(periods) < 3:
        raise ParseError("Forecast has fewer than three periods")

    return (
        build_observation_record(observation, city),
        build_forecast_record(periods[1], city),
        build_forecast_record(periods[2], city),
    )


def _city_task(city: SelectedCity, client: NwsClient) -> Optional[CityForecast]:
    try:
        return fetch_city_forecast(city, client)
    except Exception as exc:
        logging.warning("No regional forecast data for '%s': %s", city.name, exc)
        return None


def assemble_regional_forecast(
    cities: Sequence[SelectedCity],
    *,
    client: Optional[NwsClient] = None,
    max_workers: Optional[int] = None,
) -> AssemblyResult:
    """Fetch every city in parallel; cities that fail are left out."""
    result = AssemblyResult()
    if not cities:
        return result

    client = client or NwsClient()
    workers = max(1, min(max_workers or REGIONAL_MAX_WORKERS, len(cities)))

    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(_city_task, city, client) for city in cities]
        for city, future in zip(cities, futures):
            records = future.result()
            if records is None:
                result.failures.append(city.name)
            else:
                result.cities.append(records)

    logging.info(
        "Regional forecast: %d cities with data, %d failed",
        len(result.cities),
        len(result.failures),
    )
    return result


def fetch_regional_forecast(
    latitude: float,
    longitude: float,
    state: Optional[str],
    *,
    client: Optional[NwsClient] = None,
) -> Optional[RegionalForecastData]:
    """Build the regional map data around the viewer, or ``None`` when no city has data."""
    region = region_for_state(state)
    offset = projection_for(region).offset

    source = to_pixel(GeoPoint(latitude, longitude), offset, region)
    bbox = to_bounding_box(source.x, source.y, offset, region)

    chosen = select_cities(build_candidates(region), bbox)
    selected = place_cities(chosen, bbox, region)
    logging.info(
        "Regional map (%s) around %.4f,%.4f: %d cities selected",
        region.value,
        latitude,
        longitude,
        len(selected),
    )

    result = assemble_regional_forecast(selected, client=client)
    if result.no_data:
        logging.warning("No regional forecast data available")
        return None

    return RegionalForecastData(
        region=region,
        offset=offset,
        source=source,
        bbox=bbox,
        cities=result.cities,
    )
