"""Latitude/longitude to map pixel conversions for the regional base maps.

Each base map is a plain equirectangular bitmap, so both directions are a
linear scale and shift per axis. The constants for the continental, Alaska and
Hawaii maps live in :data:`REGION_PROJECTIONS`.

Two scale systems are in play and they are not derivable from one another:

* the *source* scale (:func:`to_pixel` / :func:`to_bounding_box`) locates the
  viewer on the full-size base map and picks the crop window;
* the *city* scale (:func:`city_to_pixel`) places labels on the 640×312 map
  area after the crop has been drawn.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

# Label placement window on the cropped map canvas.
CITY_X_MIN, CITY_X_MAX = 40, 580
CITY_Y_MIN, CITY_Y_MAX = 30, 282
CITY_LAT_SCALE = 70


class Region(enum.Enum):
    DEFAULT = "default"
    ALASKA = "alaska"
    HAWAII = "hawaii"


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class ViewportOffset:
    """Half-width/half-height of the crop window in source pixels."""

    x: int
    y: int


@dataclass(frozen=True)
class PixelPosition:
    x: float
    y: float


@dataclass(frozen=True)
class BoundingBox:
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float


@dataclass(frozen=True)
class RegionProjection:
    image_height: int
    image_width: int
    lat_origin: float
    lat_scale: float
    lon_origin: float
    lon_scale: float
    city_lon_scale: float
    target_distance: float
    base_map: str
    offset: ViewportOffset = ViewportOffset(240, 117)


REGION_PROJECTIONS = {
    Region.DEFAULT: RegionProjection(
        image_height=1600,
        image_width=2550,
        lat_origin=50.5,
        lat_scale=55.2,
        lon_origin=-127.5,
        lon_scale=41.775,
        city_lon_scale=57,
        target_distance=2.5,
        base_map="Basemap2.png",
    ),
    Region.ALASKA: RegionProjection(
        image_height=1142,
        image_width=1200,
        lat_origin=73.0,
        lat_scale=56,
        lon_origin=-175.0,
        lon_scale=25.0,
        city_lon_scale=37,
        target_distance=2.5,
        base_map="AlaskaRadarMap6.png",
    ),
    Region.HAWAII: RegionProjection(
        image_height=571,
        image_width=600,
        lat_origin=25.0,
        lat_scale=55.2,
        lon_origin=-164.5,
        lon_scale=41.775,
        city_lon_scale=57,
        target_distance=1,
        base_map="HawaiiRadarMap4.png",
    ),
}

_STATE_REGIONS = {
    "AK": Region.ALASKA,
    "HI": Region.HAWAII,
}


def region_for_state(state: Optional[str]) -> Region:
    """Pick the map projection for a two-letter state code."""
    return _STATE_REGIONS.get((state or "").strip().upper(), Region.DEFAULT)


def projection_for(region: Region) -> RegionProjection:
    return REGION_PROJECTIONS[region]


def _clamp(value: float, low: float, high: float) -> float:
    if value > high:
        return high
    if value < low:
        return low
    return value


def to_pixel(geo: GeoPoint, offset: ViewportOffset, region: Region) -> PixelPosition:
    """Return the top-left corner of the crop window centered on ``geo``.

    The corner is clamped so the window never leaves the base map.
    """
    proj = REGION_PROJECTIONS[region]

    y = (proj.lat_origin - geo.latitude) * proj.lat_scale
    y -= offset.y
    y = _clamp(y, 0, proj.image_height - offset.y * 2)

    x = (proj.lon_origin - geo.longitude) * proj.lon_scale * -1
    x -= offset.x
    x = _clamp(x, 0, proj.image_width - offset.x * 2)

    return PixelPosition(x, y)


def to_bounding_box(
    source_x: float, source_y: float, offset: ViewportOffset, region: Region
) -> BoundingBox:
    """Latitude/longitude limits of the crop window whose corner is (x, y).

    This inverts the unclamped form of :func:`to_pixel`; a window that was
    pushed back inside the map by clamping is reported where it actually is,
    not where the viewer is.
    """
    proj = REGION_PROJECTIONS[region]

    max_lat = proj.lat_origin - source_y / proj.lat_scale
    min_lat = proj.lat_origin - (source_y + offset.y * 2) / proj.lat_scale
    min_lon = proj.lon_origin + source_x / proj.lon_scale
    max_lon = proj.lon_origin + (source_x + offset.x * 2) / proj.lon_scale

    return BoundingBox(min_lat=min_lat, max_lat=max_lat, min_lon=min_lon, max_lon=max_lon)


def city_to_pixel(city, max_lat: float, min_lon: float, region: Region) -> PixelPosition:
    """Place ``city`` (anything with ``lat``/``lon``) on the cropped map canvas."""
    proj = REGION_PROJECTIONS[region]

    x = (city.lon - min_lon) * proj.city_lon_scale
    y = (max_lat - city.lat) * CITY_LAT_SCALE

    return PixelPosition(
        _clamp(x, CITY_X_MIN, CITY_X_MAX),
        _clamp(y, CITY_Y_MIN, CITY_Y_MAX),
    )
