"""Pick the cities that get a label on the regional map.

Selection is a single greedy pass over an ordered candidate list: a city is
kept when it is far enough (in plain lat/lon degrees) from every city kept
before it. The pass never revisits a rejected city, so the candidate order
decides which of two crowded cities survives. Curated cities are therefore
listed ahead of observation stations.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Mapping, Optional, Sequence

from projection import BoundingBox, Region, city_to_pixel, projection_for
from regional_cities import REGIONAL_CITIES, STATION_INFO
from utils import distance

DEFAULT_MIN_SEPARATION = 1.0
# Keeps labels from running off the right edge of the map.
RIGHT_EDGE_MARGIN = 1.0


@dataclass(frozen=True)
class CandidateCity:
    name: str
    lat: float
    lon: float
    min_separation: float = DEFAULT_MIN_SEPARATION


@dataclass(frozen=True)
class SelectedCity:
    name: str
    lat: float
    lon: float
    min_separation: float
    x: float
    y: float


def _candidate_from_entry(entry: Mapping, min_separation: Optional[float]) -> CandidateCity:
    separation = min_separation
    if separation is None:
        separation = entry.get("min_separation") or DEFAULT_MIN_SEPARATION
    return CandidateCity(
        name=str(entry["city"]),
        lat=float(entry["lat"]),
        lon=float(entry["lon"]),
        min_separation=float(separation),
    )


def build_candidates(
    region: Region,
    cities: Iterable[Mapping] = REGIONAL_CITIES,
    stations: Mapping[str, Mapping] = STATION_INFO,
) -> List[CandidateCity]:
    """Curated cities first, then stations spaced by the region's target distance."""
    target = projection_for(region).target_distance
    candidates = [_candidate_from_entry(entry, None) for entry in cities]
    candidates.extend(_candidate_from_entry(entry, target) for entry in stations.values())
    return candidates


def in_box(city, box: BoundingBox) -> bool:
    return (
        box.min_lat < city.lat < box.max_lat
        and box.min_lon < city.lon < box.max_lon - RIGHT_EDGE_MARGIN
    )


def select_cities(candidates: Sequence[CandidateCity], box: BoundingBox) -> List[CandidateCity]:
    selected: List[CandidateCity] = []
    for city in candidates:
        if not in_box(city, box):
            continue
        # The candidate's own threshold applies, not the accepted city's.
        if all(
            distance(city.lon, city.lat, kept.lon, kept.lat) >= city.min_separation
            for kept in selected
        ):
            selected.append(city)

    logging.debug(
        "Selected %d of %d regional city candidates", len(selected), len(candidates)
    )
    return selected


def place_cities(
    cities: Iterable[CandidateCity], box: BoundingBox, region: Region
) -> List[SelectedCity]:
    placed = []
    for city in cities:
        pos = city_to_pixel(city, box.max_lat, box.min_lon, region)
        placed.append(
            SelectedCity(
                name=city.name,
                lat=city.lat,
                lon=city.lon,
                min_separation=city.min_separation,
                x=pos.x,
                y=pos.y,
            )
        )
    return placed
