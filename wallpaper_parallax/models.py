"""
Value types shared by the geometry, display and planning modules.

Every type is immutable; operations that "adjust" a rectangle return a
new instance instead of mutating the caller's copy.
"""

from dataclasses import dataclass
from enum import Enum

from wallpaper_parallax.config import DEFAULT_MAX_ZOOM_OUT_SCALE


# =============================================================================
# Enums
# =============================================================================
class Direction(Enum):
    """Text layout direction."""
    LTR = "ltr"
    RTL = "rtl"

    @property
    def is_rtl(self) -> bool:
        return self is Direction.RTL


class Alignment(Enum):
    """Horizontal placement of an inner rectangle inside an outer one."""
    CENTERED = "centered"
    START = "start"

    @property
    def align_start(self) -> bool:
        return self is Alignment.START


# =============================================================================
# Data classes
# =============================================================================
@dataclass(frozen=True)
class Size:
    width: int = 0
    height: int = 0


@dataclass(frozen=True)
class Point:
    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Rect:
    """Rectangle in pixel coordinates; right and bottom are exclusive."""
    left: int = 0
    top: int = 0
    right: int = 0
    bottom: int = 0

    @property
    def width(self) -> int:
        return self.right - self.left

    @property
    def height(self) -> int:
        return self.bottom - self.top

    @property
    def is_empty(self) -> bool:
        return self.left >= self.right or self.top >= self.bottom

    @property
    def top_left(self) -> Point:
        return Point(self.left, self.top)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    def contains(self, other: "Rect") -> bool:
        """True if *other* lies entirely inside this rectangle."""
        return (
            self.left <= other.left and self.top <= other.top
            and other.right <= self.right and other.bottom <= self.bottom
        )

    def as_tuple(self) -> tuple[int, int, int, int]:
        return self.left, self.top, self.right, self.bottom


@dataclass(frozen=True)
class DisplayMetrics:
    """Everything the host platform tells us about one display.

    ``min_size``/``max_size`` are the application-area size range across
    orientations and may be non-normalized (width < height or the
    reverse).  ``real_size`` is the full physical size in the current
    orientation, when known.
    """
    min_size: Size
    max_size: Size
    real_size: Size | None = None
    smallest_width_dp: int = 0
    direction: Direction = Direction.LTR
    max_zoom_out_scale: float = DEFAULT_MAX_ZOOM_OUT_SCALE
