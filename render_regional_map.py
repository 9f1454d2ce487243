#!/usr/bin/env python3
"""Render the three regional map screens to PNG and optionally archive them into a dated ZIP."""
from __future__ import annotations

import argparse
import datetime as _dt
import io
import logging
import os
import sys
import time
import zipfile
from typing import Iterable, Optional, Tuple

from PIL import Image

from config import (
    DISPLAY_TIMEZONE,
    HEIGHT,
    LATITUDE,
    LONGITUDE,
    OUTPUT_DIR,
    REGIONAL_REFRESH_MINUTES,
    STATE,
    UNITS,
    WIDTH,
)
from screens.draw_regional_forecast import RegionalForecastScreen, Status
from utils import ScreenImage, configure_logging

SCREEN_NAMES = ("observations", "next_period", "following_period")


class HeadlessDisplay:
    """Minimal display stub that captures the latest image frame."""

    def __init__(self, width: int = WIDTH, height: int = HEIGHT):
        self.width = width
        self.height = height
        self._current = Image.new("RGB", (self.width, self.height), "black")

    def clear(self) -> None:
        self._current = Image.new("RGB", (self.width, self.height), "black")

    def image(self, pil_img: Image.Image) -> None:
        if pil_img.mode != "RGB":
            pil_img = pil_img.convert("RGB")
        self._current = pil_img.copy()

    def show(self) -> None:  # pragma: no cover - no hardware interaction
        pass

    @property
    def current_image(self) -> Image.Image:
        return self._current


def _extract_image(result: object, display: HeadlessDisplay) -> Optional[Image.Image]:
    if isinstance(result, ScreenImage):
        return result.image
    if result is None:
        return None
    return display.current_image.copy()


def _write_pngs(
    assets: Iterable[Tuple[str, Image.Image]], output_dir: str, timestamp: _dt.datetime
) -> list[str]:
    os.makedirs(output_dir, exist_ok=True)
    ts_suffix = timestamp.strftime("%Y%m%d_%H%M%S")
    saved: list[str] = []
    for name, image in assets:
        path = os.path.join(output_dir, f"regional_{name}_{ts_suffix}.png")
        image.save(path)
        saved.append(path)
    return saved


def _write_zip(
    assets: Iterable[Tuple[str, Image.Image]], output_dir: str, timestamp: _dt.datetime
) -> str:
    os.makedirs(output_dir, exist_ok=True)
    zip_path = os.path.join(output_dir, f"regional_{timestamp.strftime('%Y%m%d_%H%M%S')}.zip")
    with zipfile.ZipFile(zip_path, "w", compression=zipfile.ZIP_DEFLATED) as zf:
        for name, image in assets:
            buf = io.BytesIO()
            image.save(buf, format="PNG")
            zf.writestr(f"regional_{name}.png", buf.getvalue())
    return zip_path


def render_regional_map(
    *,
    latitude: float = LATITUDE,
    longitude: float = LONGITUDE,
    state: str = STATE,
    units: str = UNITS,
    output_dir: str = OUTPUT_DIR,
    create_archive: bool = False,
    screen: Optional[RegionalForecastScreen] = None,
) -> int:
    screen = screen or RegionalForecastScreen(units=units)
    screen.get_data(latitude, longitude, state)
    if screen.status is not Status.LOADED:
        logging.error("No regional forecast data; nothing rendered.")
        return 1

    display = HeadlessDisplay()
    assets: list[Tuple[str, Image.Image]] = []
    for index in range(screen.total_screens):
        name = SCREEN_NAMES[index]
        logging.info("Rendering '%s'", name)
        image = _extract_image(screen.render(display, index, transition=True), display)
        if image is None:
            logging.warning("No image returned for '%s'", name)
            continue
        assets.append((name, image))

    if not assets:
        logging.error("No screen images were produced.")
        return 1

    now = _dt.datetime.now(DISPLAY_TIMEZONE)
    saved = _write_pngs(assets, output_dir, now)
    logging.info("Wrote %d screen(s) to %s", len(saved), output_dir)

    if create_archive:
        archive_path = _write_zip(assets, output_dir, now)
        logging.info("Archived %d screen(s) → %s", len(assets), archive_path)
        print(archive_path)

    return 0


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--lat", type=float, default=LATITUDE, help="Viewer latitude.")
    parser.add_argument("--lon", type=float, default=LONGITUDE, help="Viewer longitude.")
    parser.add_argument(
        "--state",
        default=STATE,
        help="Two-letter state code; AK and HI select their own maps.",
    )
    parser.add_argument("--units", choices=("imperial", "metric"), default=UNITS)
    parser.add_argument("--output-dir", default=OUTPUT_DIR)
    parser.add_argument(
        "--archive",
        action="store_true",
        help="Also bundle the rendered screens into a dated ZIP.",
    )
    parser.add_argument(
        "--loop",
        action="store_true",
        help=f"Keep refreshing every REGIONAL_REFRESH_MINUTES ({REGIONAL_REFRESH_MINUTES}).",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = _build_arg_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    def _run() -> int:
        return render_regional_map(
            latitude=args.lat,
            longitude=args.lon,
            state=args.state,
            units=args.units,
            output_dir=args.output_dir,
            create_archive=args.archive,
        )

    if not args.loop:
        return _run()

    try:
        while True:
            _run()
            time.sleep(REGIONAL_REFRESH_MINUTES * 60)
    except KeyboardInterrupt:
        logging.info("Stopping regional map refresh loop")
    return 0


if __name__ == "__main__":
    sys.exit(main())
