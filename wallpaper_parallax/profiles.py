"""
Display profiles persistence: load, save, and validate profile configuration.

A profile describes a display the crop is planned for, so crops can be
computed for devices other than the one the tool runs on.  Profiles are
stored in a JSON file in the user's config directory (provided by
``config.config_dir()``).  On first launch (or if the file is
missing/corrupt), the file is created from DEFAULT_PROFILES.

The on-disk format uses a versioned envelope::

    {"version": 1, "profiles": [ ... ]}

Each profile has ``name``, ``real_w``, ``real_h`` and
``smallest_width_dp``, plus optional ``rtl`` and ``max_zoom_out_scale``.
"""

import json
import logging
from copy import deepcopy
from pathlib import Path

from wallpaper_parallax.config import DEFAULT_MAX_ZOOM_OUT_SCALE, DEFAULT_PROFILES, config_dir
from wallpaper_parallax.display import metrics_for_screen
from wallpaper_parallax.models import Direction, DisplayMetrics, Size

logger = logging.getLogger(__name__)

_PROFILES_FILENAME = "profiles.json"
_FORMAT_VERSION = 1

_REQUIRED_KEYS = {"name", "real_w", "real_h", "smallest_width_dp"}
_INT_KEYS = ("real_w", "real_h", "smallest_width_dp")


def _profiles_path() -> Path:
    """Return the full path to profiles.json."""
    return config_dir() / _PROFILES_FILENAME


def _is_positive_int(val: object) -> bool:
    # bool is an int subclass; reject it explicitly
    return isinstance(val, int) and not isinstance(val, bool) and val > 0


# =============================================================================
# Validation
# =============================================================================
def validate_profiles(data: object) -> list[str]:
    """
    Validate a profiles data structure.

    Returns a list of error strings (empty means valid).
    """
    errors: list[str] = []

    if not isinstance(data, list):
        errors.append("Profiles data must be a list")
        return errors

    names_seen: set[str] = set()

    for i, profile in enumerate(data):
        prefix = f"Profile #{i + 1}"

        if not isinstance(profile, dict):
            errors.append(f"{prefix}: must be a dict")
            continue

        missing = _REQUIRED_KEYS - profile.keys()
        if missing:
            errors.append(f"{prefix}: missing keys: {', '.join(sorted(missing))}")
            continue

        name = profile.get("name", "")
        if not isinstance(name, str) or not name.strip():
            errors.append(f"{prefix}: name must be a non-empty string")
        elif name.strip().lower() in names_seen:
            errors.append(f"{prefix}: duplicate profile name '{name}'")
        else:
            names_seen.add(name.strip().lower())

        for key in _INT_KEYS:
            val = profile.get(key)
            if not _is_positive_int(val):
                errors.append(f"{prefix}: {key} must be a positive integer, got {val!r}")

        if "rtl" in profile and not isinstance(profile["rtl"], bool):
            errors.append(f"{prefix}: rtl must be true or false, got {profile['rtl']!r}")

        if "max_zoom_out_scale" in profile:
            scale = profile["max_zoom_out_scale"]
            if isinstance(scale, bool) or not isinstance(scale, (int, float)) or scale <= 0:
                errors.append(f"{prefix}: max_zoom_out_scale must be a positive number, got {scale!r}")

    return errors


# =============================================================================
# Load / Save
# =============================================================================
def load_profiles() -> list[dict]:
    """
    Load profiles from profiles.json.

    If the file is missing, corrupt, or fails validation, writes the
    defaults and returns them.
    """
    path = _profiles_path()

    if not path.exists():
        logger.info("profiles.json not found, creating with defaults at %s", path)
        _write_defaults(path)
        return deepcopy(DEFAULT_PROFILES)

    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Failed to read profiles.json (%s), restoring defaults", exc)
        _write_defaults(path)
        return deepcopy(DEFAULT_PROFILES)

    if not isinstance(raw, dict) or raw.get("version") != _FORMAT_VERSION or "profiles" not in raw:
        logger.warning("profiles.json missing version envelope, restoring defaults")
        _write_defaults(path)
        return deepcopy(DEFAULT_PROFILES)

    data = raw["profiles"]
    errors = validate_profiles(data)
    if errors:
        logger.warning(
            "profiles.json validation failed:\n  %s\nRestoring defaults.",
            "\n  ".join(errors),
        )
        _write_defaults(path)
        return deepcopy(DEFAULT_PROFILES)

    return data


def save_profiles(profiles: list[dict]) -> None:
    """
    Validate and write profiles to profiles.json in versioned envelope.

    Raises ValueError if validation fails.
    Raises OSError if the file cannot be written.
    """
    errors = validate_profiles(profiles)
    if errors:
        raise ValueError("Invalid profiles data:\n  " + "\n  ".join(errors))

    envelope = {"version": _FORMAT_VERSION, "profiles": profiles}
    path = _profiles_path()
    path.write_text(json.dumps(envelope, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("Saved %d profile(s) to %s", len(profiles), path)


def _write_defaults(path: Path) -> None:
    """Write DEFAULT_PROFILES to the given path in versioned envelope."""
    try:
        envelope = {"version": _FORMAT_VERSION, "profiles": deepcopy(DEFAULT_PROFILES)}
        path.write_text(json.dumps(envelope, indent=2, ensure_ascii=False), encoding="utf-8")
    except OSError as exc:
        logger.error("Could not write default profiles to %s: %s", path, exc)


# =============================================================================
# Lookup
# =============================================================================
def find_profile(profiles: list[dict], name: str) -> dict | None:
    """Return the profile called *name* (case-insensitive), or None."""
    wanted = name.strip().lower()
    for profile in profiles:
        if profile["name"].strip().lower() == wanted:
            return profile
    return None


def profile_to_metrics(profile: dict) -> DisplayMetrics:
    """Build DisplayMetrics for a (validated) profile."""
    return metrics_for_screen(
        Size(profile["real_w"], profile["real_h"]),
        profile["smallest_width_dp"],
        direction=Direction.RTL if profile.get("rtl", False) else Direction.LTR,
        max_zoom_out_scale=float(profile.get("max_zoom_out_scale", DEFAULT_MAX_ZOOM_OUT_SCALE)),
    )
