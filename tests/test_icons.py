import pytest

from icons import condition_from_link, regional_icon_from_link


@pytest.mark.parametrize(
    "link, expected",
    [
        ("https://api.weather.gov/icons/land/day/skc?size=medium", "skc"),
        ("https://api.weather.gov/icons/land/night/tsra_sct,40?size=medium", "tsra_sct"),
        ("https://api.weather.gov/icons/land/night/rain_showers,30/tsra,60?size=medium", "rain_showers"),
        ("https://example.com/not-an-nws-icon.png", None),
        ("", None),
        (None, None),
    ],
)
def test_condition_from_link(link, expected):
    assert condition_from_link(link) == expected


def test_day_and_night_icons_differ_where_available():
    link = "https://api.weather.gov/icons/land/day/few?size=medium"

    assert regional_icon_from_link(link, is_night=False) == "regional/sunny.png"
    assert regional_icon_from_link(link, is_night=True) == "regional/clear.png"


def test_unknown_condition_has_no_icon():
    link = "https://api.weather.gov/icons/land/day/volcano?size=medium"

    assert regional_icon_from_link(link, is_night=False) is None
    assert regional_icon_from_link(None, is_night=True) is None
