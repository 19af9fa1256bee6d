"""
Crop geometry for parallax wallpapers.

Pure functions mapping one source image onto a display: the parallax
travel model, ideal crop-surface sizing, rectangle positioning, cover-fit
zoom, and final crop-rectangle resolution.  Nothing here touches the host
platform; display facts arrive as plain parameters (see ``display``).

Rounding follows two rules throughout: "round" is half-up
(``floor(x + 0.5)``) and edge coordinates derived from float extents are
truncated toward zero.
"""

import math

from wallpaper_parallax.config import (
    ASPECT_RATIO_LANDSCAPE, ASPECT_RATIO_PORTRAIT,
    TRAVEL_RATIO_LANDSCAPE, TRAVEL_RATIO_PORTRAIT,
    WALLPAPER_SCREENS_SPAN,
)
from wallpaper_parallax.models import Point, Rect, Size


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _require_positive(size: Size, label: str) -> None:
    if size.width <= 0 or size.height <= 0:
        raise ValueError(f"{label} must have positive dimensions, got {size.width}x{size.height}")


def _width_binds(outer: Size, inner: Size) -> bool:
    # Strict ">": equal aspect ratios take the height branch.
    return inner.width / inner.height > outer.width / outer.height


# =============================================================================
# Parallax travel
# =============================================================================
def travel_ratio(width: int, height: int) -> float:
    """Parallax travel (extra width factor) for a screen of the given resolution.

    Linear in the aspect ratio, through 16:10 -> 1.2 and 10:16 -> 1.5.
    Aspect ratios outside that range are extrapolated, not clamped.
    """
    if height <= 0:
        raise ValueError(f"height must be positive, got {height}")
    aspect = width / height
    slope = (TRAVEL_RATIO_LANDSCAPE - TRAVEL_RATIO_PORTRAIT) / (
        ASPECT_RATIO_LANDSCAPE - ASPECT_RATIO_PORTRAIT
    )
    intercept = TRAVEL_RATIO_PORTRAIT - slope * ASPECT_RATIO_PORTRAIT
    return slope * aspect + intercept


def ideal_crop_size(min_dim: int, max_dim: int, is_large_screen: bool) -> Size:
    """Crop surface with room for parallax in both orientations.

    Large screens get ``travel_ratio`` worth of extra width; handheld
    devices get a fixed two-screen span, never narrower than ``max_dim``.
    """
    if min_dim <= 0 or max_dim <= 0:
        raise ValueError(f"display dimensions must be positive, got {min_dim}x{max_dim}")
    if is_large_screen:
        width = _round_half_up(max_dim * travel_ratio(max_dim, min_dim))
    else:
        width = max(_round_half_up(min_dim * WALLPAPER_SCREENS_SPAN), max_dim)
    return Size(width, max_dim)


# =============================================================================
# Positioning
# =============================================================================
def center_position(outer: Size, inner: Size, align_start: bool = False,
                    is_rtl: bool = False) -> Point:
    """Offset of *inner* relative to the top-left corner of *outer*.

    Vertically always centered.  Horizontally centered, or pinned to the
    reading-start edge when *align_start* is set (left for LTR, right for
    RTL).

    Raises ValueError if *inner* does not fit inside *outer*.
    """
    if inner.width > outer.width or inner.height > outer.height:
        raise ValueError(
            f"Inner rectangle {inner.width}x{inner.height} should be contained "
            f"completely within the outer rectangle {outer.width}x{outer.height}."
        )
    if align_start:
        x = outer.width - inner.width if is_rtl else 0
    else:
        x = _round_half_up((outer.width - inner.width) / 2)
    y = _round_half_up((outer.height - inner.height) / 2)
    return Point(x, y)


# =============================================================================
# Cover zoom
# =============================================================================
def min_zoom(outer: Size, inner: Size) -> float:
    """Smallest zoom at which *outer*, scaled up, fully covers *inner*."""
    _require_positive(outer, "outer")
    _require_positive(inner, "inner")
    if _width_binds(outer, inner):
        return inner.width / outer.width
    return inner.height / outer.height


def visible_rect(outer: Size, inner: Size) -> Rect:
    """Centered area of *outer* that shows through *inner* at ``min_zoom``.

    Edges are truncated, so odd extents can come out one pixel lopsided.
    """
    zoom = min_zoom(outer, inner)
    center_x = outer.width / 2
    center_y = outer.height / 2
    if _width_binds(outer, inner):
        half_height = inner.height / zoom / 2
        return Rect(0, int(center_y - half_height), outer.width, int(center_y + half_height))
    half_width = inner.width / zoom / 2
    return Rect(int(center_x - half_width), 0, int(center_x + half_width), outer.height)


# =============================================================================
# Crop resolution
# =============================================================================
def resolve_crop_rect(
    raw_size: Size,
    visible_raw_rect: Rect,
    zoom: float,
    screen_size: Size,
    ideal_size: Size,
    is_rtl: bool = False,
) -> Rect:
    """Crop rectangle in scaled-wallpaper pixels.

    Starts as the screen-sized window at the current scroll offset, then
    takes up to ``ideal_size - screen_size`` extra width on the reading-end
    side (left for RTL, right for LTR) and the same amount of extra height
    above and below, all within the bounds of the scaled wallpaper.

    Parameters
    ----------
    raw_size : Size
        Size of the unscaled wallpaper.
    visible_raw_rect : Rect
        Area of the unscaled wallpaper the user expects to see; only its
        top-left corner (the scroll position) is used.
    zoom : float
        Factor applied to the raw wallpaper.
    screen_size, ideal_size : Size
        Current screen size and the crop surface from ``ideal_crop_size``.
    """
    if zoom <= 0:
        raise ValueError(f"zoom must be positive, got {zoom}")

    bounds = Rect(0, 0, int(raw_size.width * zoom), int(raw_size.height * zoom))
    scroll_x = int(visible_raw_rect.left * zoom)
    scroll_y = int(visible_raw_rect.top * zoom)

    left, top = scroll_x, scroll_y
    right, bottom = scroll_x + screen_size.width, scroll_y + screen_size.height

    extra_width = ideal_size.width - screen_size.width
    extra_height = int((ideal_size.height - screen_size.height) / 2)

    if is_rtl:
        left = max(left - extra_width, bounds.left)
    else:
        right = min(right + extra_width, bounds.right)

    # Vertical growth stays symmetric, limited by the tighter side.
    room_above = top - max(bounds.top, top - extra_height)
    room_below = min(bounds.bottom, bottom + extra_height) - bottom
    grow = min(room_above, room_below)

    return Rect(left, top - grow, right, bottom + grow)


# =============================================================================
# Rescaling
# =============================================================================
def fit_to_size(rect: Rect, out_width: int, out_height: int) -> Rect:
    """Scale *rect* so its larger side matches the larger of the out dimensions.

    Every coordinate is scaled, not just the extent.  Empty rectangles and
    rectangles that already fit come back unchanged.
    """
    if rect.is_empty:
        return rect
    scale = max(out_width, out_height) / max(rect.width, rect.height)
    if scale == 1.0:
        return rect
    return Rect(
        _round_half_up(rect.left * scale),
        _round_half_up(rect.top * scale),
        _round_half_up(rect.right * scale),
        _round_half_up(rect.bottom * scale),
    )
