"""
Image Importer for ComposeDoc

Creates ImageElements sized from the pixel dimensions of an image file.
The pixels themselves are not kept; the element only references its source.
"""

from pathlib import Path
from typing import Optional, Tuple
import logging

from PIL import Image

from ..core.elements import ImageElement, round_half_up

logger = logging.getLogger(__name__)


class ImageImporter:
    """
    Import raster images as ImageElements.

    Large images can be scaled down to fit a maximum size while keeping
    their aspect ratio.
    """

    def __init__(self, max_size: Optional[Tuple[int, int]] = None):
        """
        Initialize image importer.

        Args:
            max_size: Maximum (width, height). If None, uses the pixel size as is.
        """
        self.max_size = max_size

    def read_size(self, filepath: str) -> Tuple[int, int]:
        """Return the pixel size of an image without decoding its data."""
        with Image.open(filepath) as img:
            return img.size

    def fit_size(self, width: int, height: int) -> Tuple[int, int]:
        """Scale (width, height) down to fit max_size, keeping aspect ratio."""
        if self.max_size is None:
            return width, height
        max_w, max_h = self.max_size
        if width <= max_w and height <= max_h:
            return width, height
        scale = min(max_w / width, max_h / height)
        return round_half_up(width * scale), round_half_up(height * scale)

    def import_image(self, filepath: str, x: int = 0, y: int = 0) -> ImageElement:
        """
        Import an image file as an element positioned at (x, y).

        Args:
            filepath: Path to image file
            x: X position of the top-left corner
            y: Y position of the top-left corner

        Returns:
            ImageElement referencing the file
        """
        original_width, original_height = self.read_size(filepath)
        width, height = self.fit_size(original_width, original_height)
        if (width, height) != (original_width, original_height):
            logger.info(f"Downscaled image from {original_width}x{original_height} to {width}x{height}")
        return ImageElement(x, y, width, height, str(filepath), name=Path(filepath).stem)
