import itertools

import pytest

from city_selection import (
    CandidateCity,
    build_candidates,
    in_box,
    place_cities,
    select_cities,
)
from projection import BoundingBox, GeoPoint, Region, ViewportOffset, to_bounding_box, to_pixel
from utils import distance

BOX = BoundingBox(min_lat=30.0, max_lat=45.0, min_lon=-100.0, max_lon=-80.0)


def _names(cities):
    return [city.name for city in cities]


def test_in_box_bounds_are_strict_with_right_margin():
    assert in_box(CandidateCity("inside", 40.0, -90.0), BOX)
    assert not in_box(CandidateCity("south edge", 30.0, -90.0), BOX)
    assert not in_box(CandidateCity("north edge", 45.0, -90.0), BOX)
    assert not in_box(CandidateCity("west edge", 40.0, -100.0), BOX)
    # The last degree before the east edge is reserved for labels.
    assert not in_box(CandidateCity("margin", 40.0, -81.0), BOX)
    assert in_box(CandidateCity("near margin", 40.0, -81.5), BOX)


def test_select_drops_cities_too_close_to_accepted_ones():
    a = CandidateCity("A", 40.0, -90.0)
    b = CandidateCity("B", 40.5, -90.5)
    c = CandidateCity("C", 40.0, -88.0)
    outside = CandidateCity("Outside", 50.0, -90.0)

    assert _names(select_cities([a, b, outside, c], BOX)) == ["A", "C"]


def test_select_is_order_dependent():
    a = CandidateCity("A", 40.0, -90.0)
    b = CandidateCity("B", 40.5, -90.5)

    assert _names(select_cities([a, b], BOX)) == ["A"]
    assert _names(select_cities([b, a], BOX)) == ["B"]


def test_select_is_deterministic():
    candidates = build_candidates(Region.DEFAULT)
    assert select_cities(candidates, BOX) == select_cities(candidates, BOX)


def test_candidate_threshold_governs_not_accepted_city():
    wide = CandidateCity("Wide", 40.0, -90.0, min_separation=5.0)
    near = CandidateCity("Near", 40.0, -88.0, min_separation=1.0)
    assert _names(select_cities([wide, near], BOX)) == ["Wide", "Near"]

    narrow = CandidateCity("Narrow", 40.0, -90.0, min_separation=1.0)
    station = CandidateCity("Station", 40.0, -88.0, min_separation=2.5)
    assert _names(select_cities([narrow, station], BOX)) == ["Narrow"]


def test_rejected_city_is_never_reconsidered():
    a = CandidateCity("A", 40.0, -90.0)
    b = CandidateCity("B", 40.0, -89.5)  # rejected by A
    c = CandidateCity("C", 40.0, -89.0)  # 1.0 from A, accepted

    assert _names(select_cities([a, b, c], BOX)) == ["A", "C"]


def test_selected_cities_respect_min_separation():
    offset = ViewportOffset(240, 117)
    pos = to_pixel(GeoPoint(41.8781, -87.6298), offset, Region.DEFAULT)
    box = to_bounding_box(pos.x, pos.y, offset, Region.DEFAULT)

    selected = select_cities(build_candidates(Region.DEFAULT), box)

    assert selected
    for earlier, later in itertools.combinations(selected, 2):
        assert distance(earlier.lon, earlier.lat, later.lon, later.lat) >= later.min_separation


def test_build_candidates_puts_curated_cities_first():
    cities = [{"city": "Curated", "lat": 40.0, "lon": -90.0}]
    stations = {"KXYZ": {"id": "KXYZ", "city": "Station", "state": "IL", "lat": 41.0, "lon": -89.0}}

    candidates = build_candidates(Region.DEFAULT, cities, stations)

    assert _names(candidates) == ["Curated", "Station"]
    assert candidates[0].min_separation == 1.0
    assert candidates[1].min_separation == 2.5


def test_build_candidates_hawaii_station_distance_and_overrides():
    cities = [{"city": "Spaced", "lat": 21.0, "lon": -157.0, "min_separation": 2}]
    stations = {"PHXX": {"id": "PHXX", "city": "Station", "state": "HI", "lat": 20.0, "lon": -156.0}}

    candidates = build_candidates(Region.HAWAII, cities, stations)

    assert candidates[0].min_separation == 2.0
    assert candidates[1].min_separation == 1.0


def test_place_cities_fills_in_canvas_positions():
    city = CandidateCity("A", 43.0, -95.0)

    (placed,) = place_cities([city], BOX, Region.DEFAULT)

    assert placed.name == "A"
    assert placed.x == pytest.approx(5 * 57)
    assert placed.y == pytest.approx(2 * 70)
