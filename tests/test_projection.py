import pytest

from projection import (
    REGION_PROJECTIONS,
    BoundingBox,
    GeoPoint,
    Region,
    ViewportOffset,
    city_to_pixel,
    region_for_state,
    to_bounding_box,
    to_pixel,
)

OFFSET = ViewportOffset(240, 117)


class _City:
    def __init__(self, lat, lon):
        self.lat = lat
        self.lon = lon


def test_region_for_state():
    assert region_for_state("AK") is Region.ALASKA
    assert region_for_state("hi") is Region.HAWAII
    assert region_for_state("IL") is Region.DEFAULT
    assert region_for_state("") is Region.DEFAULT
    assert region_for_state(None) is Region.DEFAULT


def test_to_pixel_default_region_chicago():
    pos = to_pixel(GeoPoint(41.8781, -87.6298), OFFSET, Region.DEFAULT)

    assert pos.y == pytest.approx((50.5 - 41.8781) * 55.2 - 117)
    assert pos.x == pytest.approx((-87.6298 + 127.5) * 41.775 - 240)


def test_to_pixel_alaska_anchorage():
    pos = to_pixel(GeoPoint(61.2181, -149.9003), OFFSET, Region.ALASKA)

    assert pos.y == pytest.approx((73.0 - 61.2181) * 56 - 117)
    assert pos.x == pytest.approx((-149.9003 + 175.0) * 25.0 - 240)


@pytest.mark.parametrize("region", list(Region))
def test_to_pixel_always_inside_source_image(region):
    proj = REGION_PROJECTIONS[region]
    max_x = proj.image_width - OFFSET.x * 2
    max_y = proj.image_height - OFFSET.y * 2

    for lat in range(-10, 91, 5):
        for lon in range(-200, -39, 7):
            pos = to_pixel(GeoPoint(lat, lon), OFFSET, region)
            assert 0 <= pos.x <= max_x
            assert 0 <= pos.y <= max_y


@pytest.mark.parametrize(
    "region, lat, lon",
    [
        (Region.DEFAULT, 41.8781, -87.6298),
        (Region.DEFAULT, 35.0844, -106.6504),
        (Region.ALASKA, 61.2181, -149.9003),
        (Region.HAWAII, 21.3069, -157.8583),
    ],
)
def test_bounding_box_is_centered_on_unclamped_viewer(region, lat, lon):
    pos = to_pixel(GeoPoint(lat, lon), OFFSET, region)
    box = to_bounding_box(pos.x, pos.y, OFFSET, region)

    assert box.min_lat < lat < box.max_lat
    assert box.min_lon < lon < box.max_lon
    assert (box.min_lat + box.max_lat) / 2 == pytest.approx(lat)
    assert (box.min_lon + box.max_lon) / 2 == pytest.approx(lon)


def test_bounding_box_does_not_undo_clamping():
    # Far north-west of the continental map: the window is pinned to the corner.
    pos = to_pixel(GeoPoint(60.0, -140.0), OFFSET, Region.DEFAULT)
    assert (pos.x, pos.y) == (0, 0)

    box = to_bounding_box(pos.x, pos.y, OFFSET, Region.DEFAULT)
    assert isinstance(box, BoundingBox)
    assert box.max_lat == pytest.approx(50.5)
    assert box.min_lat == pytest.approx(50.5 - 234 / 55.2)
    assert box.min_lon == pytest.approx(-127.5)
    assert box.max_lon == pytest.approx(-127.5 + 480 / 41.775)
    assert not box.min_lat < 60.0 < box.max_lat


def test_same_point_projects_differently_per_region():
    geo = GeoPoint(41.8781, -87.6298)
    positions = {region: to_pixel(geo, OFFSET, region) for region in Region}

    assert len({(p.x, p.y) for p in positions.values()}) == 3
    # Alaska and Hawaii saturate against their own, smaller images.
    assert positions[Region.ALASKA].x == REGION_PROJECTIONS[Region.ALASKA].image_width - 480
    assert positions[Region.HAWAII].x == REGION_PROJECTIONS[Region.HAWAII].image_width - 480


def test_city_to_pixel_uses_region_longitude_scale():
    city = _City(lat=43.0, lon=-95.0)

    default = city_to_pixel(city, max_lat=45.0, min_lon=-100.0, region=Region.DEFAULT)
    alaska = city_to_pixel(city, max_lat=45.0, min_lon=-100.0, region=Region.ALASKA)
    hawaii = city_to_pixel(city, max_lat=45.0, min_lon=-100.0, region=Region.HAWAII)

    assert default.x == pytest.approx(5 * 57)
    assert alaska.x == pytest.approx(5 * 37)
    assert hawaii.x == pytest.approx(5 * 57)
    assert default.y == alaska.y == hawaii.y == pytest.approx(2 * 70)


def test_city_to_pixel_clamps_to_label_window():
    top_left = city_to_pixel(_City(45.0, -100.0), 45.0, -100.0, Region.DEFAULT)
    bottom_right = city_to_pixel(_City(20.0, -60.0), 45.0, -100.0, Region.DEFAULT)

    assert (top_left.x, top_left.y) == (40, 30)
    assert (bottom_right.x, bottom_right.y) == (580, 282)
