#!/usr/bin/env python3
"""
utils.py

Core utilities for the regional weather map:
- Logging decorator and colored console formatter
- Screen image container and display helpers
- Unit conversion and planar distance
- Image loading and drawing helpers
"""
import functools
import logging
import math
import os
from dataclasses import dataclass
from io import BytesIO
from typing import Optional, Tuple

import requests
from PIL import Image, ImageDraw, ImageFont

from config import HEIGHT, IMAGES_DIR, WIDTH

# Colored logging
from colorama import init as colorama_init, Fore, Style
colorama_init(autoreset=True)

# ─── Logging decorator ──────────────────────────────────────────────────────
def log_call(func):
    """
    Decorator that logs entry & exit at DEBUG level only.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        logging.debug(f"→ {func.__name__}()")
        result = func(*args, **kwargs)
        logging.debug(f"← {func.__name__}()")
        return result
    return wrapper


class ColorFormatter(logging.Formatter):
    """Prefix the level name with a terminal color."""

    LEVEL_COLORS = {
        logging.DEBUG: Fore.CYAN,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.RED + Style.BRIGHT,
    }

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{Style.RESET_ALL}"


def configure_logging(level: int = logging.INFO) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(
        ColorFormatter("%(asctime)s %(levelname)-8s %(message)s", datefmt="%H:%M:%S")
    )
    logging.basicConfig(level=level, handlers=[handler], force=True)
    logging.getLogger("requests").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


@dataclass
class ScreenImage:
    """Container for a rendered screen image.

    Attributes
    ----------
    image:
        The full PIL image representing the screen.
    displayed:
        Whether the image has already been pushed to the display by the
        originating function. This allows callers to skip redundant redraws
        while still accessing the image data (e.g., for screenshots).
    """

    image: Image.Image
    displayed: bool = False

# ─── Basic utilities ────────────────────────────────────────────────────────
@log_call
def clear_display(display):
    """
    Clear the connected display, falling back to a blank frame.
    """
    try:
        display.clear()
    except Exception:
        try:
            blank = Image.new("RGB", (getattr(display, "width", WIDTH), getattr(display, "height", HEIGHT)), "black")
            display.image(blank)
            display.show()
        except Exception:
            pass


def celsius_to_fahrenheit(value: float) -> float:
    return (float(value) * 9 / 5) + 32


def fahrenheit_to_celsius(value: float) -> float:
    return (float(value) - 32) * 5 / 9


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Straight-line distance between two points in the same planar units."""
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)

# ─── Images ─────────────────────────────────────────────────────────────────
@functools.lru_cache(maxsize=64)
def _open_image(path: str) -> Image.Image:
    with Image.open(path) as img:
        return img.convert("RGBA")


def load_image(name: str) -> Image.Image | None:
    """Load ``name`` from the images folder (or an absolute path), or ``None``."""
    path = name if os.path.isabs(name) else os.path.join(IMAGES_DIR, name)
    try:
        return _open_image(path).copy()
    except FileNotFoundError:
        logging.warning("Image not found: %s", path)
    except OSError as exc:
        logging.warning("Image load failed '%s': %s", path, exc)
    return None


@log_call
def fetch_image(url: str, size: int) -> Image.Image | None:
    if not url:
        return None
    try:
        response = requests.get(url, timeout=5)
        response.raise_for_status()
        icon = Image.open(BytesIO(response.content)).convert("RGBA")
        return icon.resize((size, size), Image.Resampling.LANCZOS)
    except Exception as exc:  # pragma: no cover - network failures are non-fatal
        logging.warning("Image fetch failed for %s: %s", url, exc)
        return None

# ─── Drawing helpers ────────────────────────────────────────────────────────
def draw_outlined_text(
    draw: ImageDraw.ImageDraw,
    xy: Tuple[float, float],
    text: str,
    font: ImageFont.ImageFont,
    fill,
    *,
    outline: int = 2,
):
    """Draw ``text`` with a black outline of ``outline`` pixels."""
    x, y = xy
    kwargs = {"font": font, "fill": fill}
    if outline and isinstance(font, ImageFont.FreeTypeFont):
        kwargs["stroke_width"] = outline
        kwargs["stroke_fill"] = (0, 0, 0)
    draw.text((int(round(x)), int(round(y))), str(text), **kwargs)


@log_call
def horizontal_gradient(
    img: Image.Image,
    box: Tuple[int, int, int, int],
    start: Tuple[int, int, int],
    end: Tuple[int, int, int],
) -> None:
    """Fill ``box`` (x1, y1, x2, y2) with a left-to-right gradient."""
    x1, y1, x2, y2 = box
    draw = ImageDraw.Draw(img)
    span = max(1, x2 - x1 - 1)
    for offset in range(x2 - x1):
        ratio = offset / span
        color = tuple(int(round(s + (e - s) * ratio)) for s, e in zip(start, end))
        draw.line([(x1 + offset, y1), (x1 + offset, y2 - 1)], fill=color)


def paste_icon(img: Image.Image, icon: Optional[Image.Image], xy: Tuple[float, float]) -> None:
    if icon is None:
        return
    x, y = (int(round(v)) for v in xy)
    mask = icon if icon.mode == "RGBA" else None
    img.paste(icon, (x, y), mask)
