import logging

import pytest
from PIL import Image, ImageFont

import utils
from utils import (
    ScreenImage,
    celsius_to_fahrenheit,
    clear_display,
    distance,
    draw_outlined_text,
    fahrenheit_to_celsius,
    horizontal_gradient,
    load_image,
    paste_icon,
)


def test_temperature_conversions():
    assert celsius_to_fahrenheit(0) == pytest.approx(32)
    assert celsius_to_fahrenheit(-40) == pytest.approx(-40)
    assert fahrenheit_to_celsius(212) == pytest.approx(100)
    assert fahrenheit_to_celsius(celsius_to_fahrenheit(21.5)) == pytest.approx(21.5)


def test_distance_is_euclidean():
    assert distance(0, 0, 3, 4) == pytest.approx(5)
    assert distance(-90, 40, -90, 40) == 0
    assert distance(1, 2, 4, 6) == distance(4, 6, 1, 2)


def test_load_image_missing_file_returns_none(tmp_path, caplog):
    caplog.set_level(logging.WARNING)

    assert load_image(str(tmp_path / "missing.png")) is None
    assert any("Image not found" in message for message in caplog.messages)


def test_load_image_reads_absolute_path(tmp_path):
    path = tmp_path / "dot.png"
    Image.new("RGB", (4, 3), (10, 20, 30)).save(path)
    utils._open_image.cache_clear()

    img = load_image(str(path))

    assert img.mode == "RGBA"
    assert img.size == (4, 3)
    assert img.getpixel((0, 0)) == (10, 20, 30, 255)


def test_horizontal_gradient_runs_start_to_end():
    img = Image.new("RGB", (10, 4), "black")

    horizontal_gradient(img, (0, 0, 10, 4), (0, 0, 0), (90, 180, 255))

    assert img.getpixel((0, 1)) == (0, 0, 0)
    assert img.getpixel((9, 1)) == (90, 180, 255)
    assert img.getpixel((4, 3))[0] == 40


def test_paste_icon_uses_alpha_and_skips_none():
    img = Image.new("RGB", (20, 20), "black")
    icon = Image.new("RGBA", (4, 4), (0, 0, 0, 0))
    icon.putpixel((1, 1), (255, 0, 0, 255))

    paste_icon(img, icon, (5.4, 5.6))
    paste_icon(img, None, (0, 0))

    assert img.getpixel((6, 7)) == (255, 0, 0)
    assert img.getpixel((5, 6)) == (0, 0, 0)


def test_draw_outlined_text_with_bitmap_font_draws_something():
    img = Image.new("RGB", (60, 30), "black")
    draw = utils.ImageDraw.Draw(img)

    draw_outlined_text(draw, (2, 2), "72", ImageFont.load_default(), (255, 255, 0))

    assert img.getbbox() is not None


def test_clear_display_falls_back_to_blank_frame():
    class _NoClear:
        width, height = 8, 6

        def __init__(self):
            self.frames = []
            self.shown = False

        def clear(self):
            raise RuntimeError("unsupported")

        def image(self, img):
            self.frames.append(img)

        def show(self):
            self.shown = True

    display = _NoClear()
    clear_display(display)

    (frame,) = display.frames
    assert frame.size == (8, 6)
    assert display.shown


def test_screen_image_defaults_to_not_displayed():
    assert ScreenImage(Image.new("RGB", (1, 1))).displayed is False
