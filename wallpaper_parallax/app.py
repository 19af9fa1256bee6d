"""
Command-line entry point.

Usage:
    wallpaper-parallax IMAGE --profile Phone
    wallpaper-parallax --size 4000x3000 --screen 1080x2340 --smallest-width 411 --rtl
    wallpaper-parallax IMAGE --detect --fit 2048x2048
    wallpaper-parallax --list-profiles

Prints the crop plan as JSON.
"""

import argparse
import json
import logging
import os
import sys
from pathlib import Path

from wallpaper_parallax import __version__
from wallpaper_parallax.display import metrics_for_screen, query_primary_display
from wallpaper_parallax.image_io import get_image_size
from wallpaper_parallax.models import Alignment, Direction, DisplayMetrics, Size
from wallpaper_parallax.planner import plan_crop
from wallpaper_parallax.profiles import find_profile, load_profiles, profile_to_metrics

logger = logging.getLogger(__name__)


def _parse_size(text: str) -> Size:
    """Parse ``WxH`` into a Size."""
    parts = text.lower().split("x")
    try:
        w, h = (int(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {text!r}") from None
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError(f"dimensions must be positive, got {text!r}")
    return Size(w, h)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wallpaper-parallax",
        description="Compute the parallax-aware crop of a wallpaper for a display.",
    )
    parser.add_argument("image", nargs="?", type=Path, help="wallpaper file to read the size from")
    parser.add_argument("--size", type=_parse_size, help="wallpaper size as WxH instead of IMAGE")

    display = parser.add_mutually_exclusive_group()
    display.add_argument("--profile", help="name of a saved display profile")
    display.add_argument("--screen", type=_parse_size, help="screen size as WxH")
    display.add_argument("--detect", action="store_true",
                         help="read the primary screen via Qt (needs a graphical display)")

    parser.add_argument("--smallest-width", type=int, metavar="DP",
                        help="smallest screen width in dp (only with --screen)")
    parser.add_argument("--rtl", action="store_true", help="right-to-left layout (only with --screen)")
    parser.add_argument("--align", choices=[a.value for a in Alignment], default=Alignment.CENTERED.value)
    parser.add_argument("--zoom", type=float, help="wallpaper zoom (default: cover zoom)")
    parser.add_argument("--fit", type=_parse_size, metavar="WxH", help="also rescale the crop to fit WxH")
    parser.add_argument("--list-profiles", action="store_true", help="print saved profiles and exit")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _detect_metrics() -> DisplayMetrics:
    # Without a display Qt aborts instead of raising.
    if (sys.platform.startswith("linux") and "QT_QPA_PLATFORM" not in os.environ
            and not os.environ.get("DISPLAY") and not os.environ.get("WAYLAND_DISPLAY")):
        raise RuntimeError("--detect needs a graphical display (set DISPLAY or QT_QPA_PLATFORM)")

    from PyQt6.QtGui import QGuiApplication

    qt_app = QGuiApplication.instance() or QGuiApplication(sys.argv[:1])
    logger.debug("Qt platform: %s", qt_app.platformName())
    return query_primary_display()


def _resolve_metrics(args: argparse.Namespace, parser: argparse.ArgumentParser) -> DisplayMetrics:
    if args.detect:
        return _detect_metrics()
    if args.screen is not None:
        return metrics_for_screen(
            args.screen, args.smallest_width or 0, Direction.RTL if args.rtl else Direction.LTR,
        )
    if args.profile is None:
        parser.error("one of --profile, --screen or --detect is required")
    profile = find_profile(load_profiles(), args.profile)
    if profile is None:
        parser.error(f"unknown profile {args.profile!r}")
    return profile_to_metrics(profile)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.list_profiles:
        try:
            profiles = load_profiles()
        except OSError as exc:
            logger.error("%s", exc)
            return 1
        print(json.dumps(profiles, indent=2, ensure_ascii=False))
        return 0

    if (args.image is None) == (args.size is None):
        parser.error("give exactly one of IMAGE or --size")
    if args.screen is None and (args.rtl or args.smallest_width is not None):
        parser.error("--rtl and --smallest-width only apply with --screen")

    try:
        metrics = _resolve_metrics(args, parser)
        raw_size = args.size if args.size is not None else get_image_size(args.image)
        plan = plan_crop(
            raw_size, metrics,
            zoom=args.zoom,
            alignment=Alignment(args.align),
            fit_to=args.fit,
        )
    except (ValueError, OSError, RuntimeError) as exc:
        logger.error("%s", exc)
        return 1

    print(json.dumps(plan.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
