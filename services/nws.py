"""Thin client for the api.weather.gov endpoints the regional map needs.

Every failure surfaces as an :class:`NwsError` subclass so callers can tell a
missing resource from a network problem or a payload they cannot read.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from config import NWS_API_URL, NWS_TIMEOUT
from services.http_client import get_session


class NwsError(Exception):
    """Base class for api.weather.gov failures."""


class NotFoundError(NwsError):
    """The requested resource does not exist (HTTP 404)."""


class NetworkError(NwsError):
    """Transport failure or unexpected HTTP status."""


class ParseError(NwsError):
    """The response body is not the JSON shape we expect."""


@dataclass(frozen=True)
class ForecastPoint:
    forecast_url: str
    observation_stations_url: str


def _properties(payload, what: str) -> dict:
    props = payload.get("properties") if isinstance(payload, dict) else None
    if not isinstance(props, dict):
        raise ParseError(f"{what} response has no properties")
    return props


class NwsClient:
    def __init__(
        self,
        session: Optional[requests.Session] = None,
        *,
        base_url: str = NWS_API_URL,
        timeout: float = NWS_TIMEOUT,
    ):
        self.session = session or get_session()
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def fetch_json(self, url: str):
        try:
            r = self.session.get(url, timeout=self.timeout)
            r.raise_for_status()
        except requests.exceptions.HTTPError as http_err:
            status = getattr(http_err.response, "status_code", None)
            if status == 404:
                raise NotFoundError(f"Not found: {url}") from http_err
            raise NetworkError(f"HTTP {status} fetching {url}") from http_err
        except requests.exceptions.RequestException as exc:
            raise NetworkError(f"Error fetching {url}: {exc}") from exc

        try:
            return r.json()
        except ValueError as exc:
            raise ParseError(f"Invalid JSON from {url}: {exc}") from exc

    def get_point(self, latitude: float, longitude: float) -> ForecastPoint:
        # The points endpoint redirects anything past four decimals.
        url = f"{self.base_url}/points/{latitude:.4f},{longitude:.4f}"
        props = _properties(self.fetch_json(url), "Point")

        forecast_url = props.get("forecast")
        stations_url = props.get("observationStations")
        if not forecast_url or not stations_url:
            raise ParseError(f"Point {latitude:.4f},{longitude:.4f} has no forecast links")
        return ForecastPoint(forecast_url, stations_url)

    def get_first_station(self, stations_url: str) -> str:
        payload = self.fetch_json(stations_url)
        features = payload.get("features") if isinstance(payload, dict) else None
        if not features:
            raise NotFoundError(f"No observation stations listed at {stations_url}")
        station = features[0].get("id") if isinstance(features[0], dict) else None
        if not station:
            raise ParseError(f"Station entry without id at {stations_url}")
        return station

    def get_latest_observation(self, station_id: str) -> dict:
        url = f"{station_id.rstrip('/')}/observations/latest"
        logging.debug("Fetching latest observation from %s", url)
        return _properties(self.fetch_json(url), "Observation")

    def get_forecast(self, forecast_url: str) -> dict:
        payload = self.fetch_json(forecast_url)
        _properties(payload, "Forecast")
        return payload
