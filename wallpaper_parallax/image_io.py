"""
Image size probing.

Reads a wallpaper's pixel dimensions without decoding the image data:
Pillow for raster formats, psd-tools for PSD.
"""

import logging
from pathlib import Path

from PIL import Image
from psd_tools import PSDImage

from wallpaper_parallax.config import IMAGE_EXTENSIONS
from wallpaper_parallax.models import Size

logger = logging.getLogger(__name__)

# Allow very large images (Pillow's default limit is ~178MP)
Image.MAX_IMAGE_PIXELS = None


def get_image_size(path: Path) -> Size:
    """Get image dimensions without fully loading/compositing.

    Raises ValueError for unsupported file types.
    """
    ext = path.suffix.lower()
    if ext not in IMAGE_EXTENSIONS:
        raise ValueError(f"Unsupported image type '{ext}' for {path.name}")
    if ext == ".psd":
        psd = PSDImage.open(str(path))
        size = Size(psd.width, psd.height)
    else:
        with Image.open(path) as img:
            size = Size(*img.size)
    logger.debug("%s: %dx%d", path.name, size.width, size.height)
    return size