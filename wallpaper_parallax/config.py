"""
Application constants and configuration.

The calibration constants drive the parallax travel model and crop-surface
sizing.  DEFAULT_PROFILES provides the built-in fallback display profiles;
runtime profiles are loaded from profiles.json via the profiles module.

The ``config_dir()`` helper returns the platform-appropriate config
directory used by the persistence modules.
"""

import os
import sys
from pathlib import Path

# =============================================================================
# APP IDENTITY & CONFIG DIRECTORY
# =============================================================================
APP_NAME = "wallpaper-parallax"


def config_dir() -> Path:
    """Return the platform-appropriate config directory, creating it if needed."""
    if sys.platform == "win32":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))
    directory = base / APP_NAME
    directory.mkdir(parents=True, exist_ok=True)
    return directory


# =============================================================================
# PARALLAX CALIBRATION
# =============================================================================
# At 16:10 the parallax effect spans 1.2 screen widths, at 10:16 it spans 1.5.
ASPECT_RATIO_LANDSCAPE = 16 / 10
ASPECT_RATIO_PORTRAIT = 10 / 16
TRAVEL_RATIO_LANDSCAPE = 1.2
TRAVEL_RATIO_PORTRAIT = 1.5

# Crop surface width for handheld devices, in screens
WALLPAPER_SCREENS_SPAN = 2.0

# Smallest-width (dp) at which a device counts as a large screen
LARGE_SCREEN_MIN_WIDTH_DP = 720

# Zoom-out bound reported when the platform provides none
DEFAULT_MAX_ZOOM_OUT_SCALE = 1.0

# =============================================================================
# DEFAULT PROFILES: built-in fallback when profiles.json is missing or corrupt
# =============================================================================
DEFAULT_PROFILES = [
    {
        "name": "Phone",
        "real_w": 1080,
        "real_h": 2340,
        "smallest_width_dp": 411,
    },
    {
        "name": "Tablet",
        "real_w": 1600,
        "real_h": 2560,
        "smallest_width_dp": 800,
    },
    {
        "name": "Desktop",
        "real_w": 1920,
        "real_h": 1080,
        "smallest_width_dp": 1080,
    },
]

# Supported wallpaper extensions for size probing
IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".bmp", ".tiff", ".tif", ".webp", ".psd"}
