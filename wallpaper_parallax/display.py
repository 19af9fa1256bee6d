"""
Display inputs for the crop geometry.

Turns ``DisplayMetrics`` into the primitive values the geometry functions
take, and provides a thin PyQt6 adapter that reads the primary screen.
PyQt6 is imported lazily so the rest of the package stays Qt-free.
"""

import logging

from wallpaper_parallax.config import DEFAULT_MAX_ZOOM_OUT_SCALE, LARGE_SCREEN_MIN_WIDTH_DP
from wallpaper_parallax.geometry import ideal_crop_size
from wallpaper_parallax.models import Direction, DisplayMetrics, Size

logger = logging.getLogger(__name__)


# =============================================================================
# Metrics helpers
# =============================================================================
def display_dims(metrics: DisplayMetrics) -> tuple[int, int]:
    """Return ``(min_dim, max_dim)``: the short and long display dimensions.

    The real size wins when known.  Without it, the long side comes from
    the largest size and the short side from the larger component of the
    smallest size.
    """
    if metrics.real_size is not None:
        real = metrics.real_size
        return min(real.width, real.height), max(real.width, real.height)
    max_dim = max(metrics.max_size.width, metrics.max_size.height)
    min_dim = max(metrics.min_size.width, metrics.min_size.height)
    return min_dim, max_dim


def is_large_screen(smallest_width_dp: int) -> bool:
    return smallest_width_dp >= LARGE_SCREEN_MIN_WIDTH_DP


def screen_size(metrics: DisplayMetrics) -> Size:
    """Screen size in the current orientation."""
    if metrics.real_size is not None:
        return metrics.real_size
    return metrics.max_size


def default_crop_surface_size(metrics: DisplayMetrics) -> Size:
    """Ideal crop surface for this display, with parallax room in both orientations."""
    min_dim, max_dim = display_dims(metrics)
    large = is_large_screen(metrics.smallest_width_dp)
    size = ideal_crop_size(min_dim, max_dim, large)
    logger.debug(
        "Crop surface for %dx%d (%s): %dx%d",
        min_dim, max_dim, "large" if large else "handheld", size.width, size.height,
    )
    return size


def metrics_for_screen(real: Size, smallest_width_dp: int, direction: Direction = Direction.LTR,
                       max_zoom_out_scale: float = DEFAULT_MAX_ZOOM_OUT_SCALE) -> DisplayMetrics:
    """DisplayMetrics for a fixed screen of known physical size.

    Without an app-area size range, the range collapses to the short and
    long sides of the real size.
    """
    short_side = min(real.width, real.height)
    long_side = max(real.width, real.height)
    return DisplayMetrics(
        min_size=Size(short_side, short_side),
        max_size=Size(long_side, long_side),
        real_size=real,
        smallest_width_dp=smallest_width_dp,
        direction=direction,
        max_zoom_out_scale=max_zoom_out_scale,
    )


def system_wallpaper_max_scale(metrics: DisplayMetrics) -> float:
    """Platform upper bound for wallpaper zoom-out, passed through as-is."""
    return metrics.max_zoom_out_scale


# =============================================================================
# Qt adapter
# =============================================================================
def metrics_from_screen(screen, direction: Direction = Direction.LTR) -> DisplayMetrics:
    """Build DisplayMetrics from a ``QScreen``.

    Qt reports geometry in device-independent pixels, which stand in for
    dp; physical pixels are those times the device pixel ratio.
    """
    dpr = screen.devicePixelRatio()
    geom = screen.geometry()
    avail = screen.availableGeometry()

    real = Size(round(geom.width() * dpr), round(geom.height() * dpr))
    app_area = Size(round(avail.width() * dpr), round(avail.height() * dpr))
    short_side = min(app_area.width, app_area.height)
    long_side = max(app_area.width, app_area.height)

    return DisplayMetrics(
        min_size=Size(short_side, short_side),
        max_size=Size(long_side, long_side),
        real_size=real,
        smallest_width_dp=min(geom.width(), geom.height()),
        direction=direction,
        max_zoom_out_scale=DEFAULT_MAX_ZOOM_OUT_SCALE,
    )


def query_primary_display() -> DisplayMetrics:
    """Read the primary screen of the running QGuiApplication.

    Raises RuntimeError if no application has been created or there is no
    primary screen.
    """
    from PyQt6.QtCore import Qt
    from PyQt6.QtGui import QGuiApplication

    app = QGuiApplication.instance()
    if app is None:
        raise RuntimeError("A QGuiApplication must exist before querying the display")
    screen = QGuiApplication.primaryScreen()
    if screen is None:
        raise RuntimeError("No primary screen available")

    rtl = QGuiApplication.layoutDirection() == Qt.LayoutDirection.RightToLeft
    metrics = metrics_from_screen(screen, Direction.RTL if rtl else Direction.LTR)
    logger.info(
        "Primary display %s: %dx%d px, sw%ddp, %s",
        screen.name(), metrics.real_size.width, metrics.real_size.height,
        metrics.smallest_width_dp, metrics.direction.value,
    )
    return metrics
