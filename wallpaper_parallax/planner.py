"""
End-to-end crop planning for one wallpaper on one display.

Chains the geometry functions the way a wallpaper picker uses them: cover
zoom for the screen, an initial visible area, then the crop rectangle with
parallax margin.
"""

import logging
from dataclasses import dataclass

from wallpaper_parallax.display import default_crop_surface_size, screen_size, system_wallpaper_max_scale
from wallpaper_parallax.geometry import (
    center_position, fit_to_size, min_zoom, resolve_crop_rect, visible_rect,
)
from wallpaper_parallax.models import Alignment, Direction, DisplayMetrics, Rect, Size

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CropPlan:
    """Result of ``plan_crop``.  ``crop_rect`` is in scaled-wallpaper pixels."""
    raw_size: Size
    screen_size: Size
    ideal_size: Size
    zoom: float
    visible_rect: Rect
    crop_rect: Rect
    direction: Direction
    max_zoom_out_scale: float
    fitted_rect: Rect | None = None

    def to_dict(self) -> dict:
        """JSON-safe representation."""
        data = {
            "raw_size": [self.raw_size.width, self.raw_size.height],
            "screen_size": [self.screen_size.width, self.screen_size.height],
            "ideal_size": [self.ideal_size.width, self.ideal_size.height],
            "zoom": self.zoom,
            "visible_rect": list(self.visible_rect.as_tuple()),
            "crop_rect": list(self.crop_rect.as_tuple()),
            "direction": self.direction.value,
            "max_zoom_out_scale": self.max_zoom_out_scale,
        }
        if self.fitted_rect is not None:
            data["fitted_rect"] = list(self.fitted_rect.as_tuple())
        return data


def initial_visible_rect(raw_size: Size, screen: Size, alignment: Alignment,
                         direction: Direction) -> Rect:
    """Area of the raw wallpaper shown before the user pans.

    Centered by default; start-aligned pins it to the reading-start edge.
    """
    centered = visible_rect(raw_size, screen)
    if not alignment.align_start:
        return centered
    pos = center_position(raw_size, centered.size, align_start=True, is_rtl=direction.is_rtl)
    return Rect(pos.x, pos.y, pos.x + centered.width, pos.y + centered.height)


def plan_crop(
    raw_size: Size,
    metrics: DisplayMetrics,
    visible_raw_rect: Rect | None = None,
    zoom: float | None = None,
    alignment: Alignment = Alignment.CENTERED,
    fit_to: Size | None = None,
) -> CropPlan:
    """
    Plan the crop of a *raw_size* wallpaper for the display in *metrics*.

    *zoom* defaults to the cover zoom for the screen and *visible_raw_rect*
    to ``initial_visible_rect``.  When *fit_to* is given the crop rectangle
    is additionally rescaled to fit it.

    Raises ValueError on non-positive sizes or zoom.
    """
    screen = screen_size(metrics)
    if zoom is None:
        zoom = min_zoom(raw_size, screen)
    if visible_raw_rect is None:
        visible_raw_rect = initial_visible_rect(raw_size, screen, alignment, metrics.direction)

    ideal = default_crop_surface_size(metrics)
    crop = resolve_crop_rect(
        raw_size, visible_raw_rect, zoom, screen, ideal, is_rtl=metrics.direction.is_rtl,
    )
    fitted = fit_to_size(crop, fit_to.width, fit_to.height) if fit_to is not None else None

    logger.debug(
        "Planned crop %s at zoom %.4f for %dx%d wallpaper on %dx%d screen",
        crop.as_tuple(), zoom, raw_size.width, raw_size.height, screen.width, screen.height,
    )
    return CropPlan(
        raw_size=raw_size,
        screen_size=screen,
        ideal_size=ideal,
        zoom=zoom,
        visible_rect=visible_raw_rect,
        crop_rect=crop,
        direction=metrics.direction,
        max_zoom_out_scale=system_wallpaper_max_scale(metrics),
        fitted_rect=fitted,
    )
