"""
Monochrome bitmap collaborator for bit-image and raster printing.

Wraps a Pillow image, thresholds it to black/white dots and serializes it in
the two layouts thermal printers understand:

- bit-image rows (ESC *): column-major stripes of 8 or 24 dots, one byte per
  8 vertical dots, MSB at the top;
- raster (GS v 0): row-major, ``ceil(width / 8)`` bytes per row, MSB at the left.

A set bit means "print a dot" (black).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final, List, Union

from PIL import Image

from posify.exceptions import InvalidArgumentError

logger: Final = logging.getLogger(__name__)

__all__ = ["Bitmap", "DEFAULT_THRESHOLD"]

DEFAULT_THRESHOLD: Final[int] = 128


class Bitmap:
    """
    Black/white dot matrix built from a Pillow image.

    Args:
        image: Any Pillow image. Transparent areas print as white.
        threshold: Luminance below which a pixel becomes a black dot (0-255).

    Example:
        >>> bmp = Bitmap.from_path("logo.png")
        >>> printer.raster(bmp)
    """

    def __init__(self, image: Image.Image, threshold: int = DEFAULT_THRESHOLD) -> None:
        if not 0 <= threshold <= 255:
            raise InvalidArgumentError("threshold", threshold)
        gray = self._flatten(image).convert("L")
        self._width, self._height = gray.size
        data = gray.tobytes()
        self._dots: List[bytes] = [
            bytes(1 if px < threshold else 0 for px in data[y * self._width : (y + 1) * self._width])
            for y in range(self._height)
        ]
        logger.debug("Bitmap %dx%d built (threshold=%d)", self._width, self._height, threshold)

    @classmethod
    def from_path(cls, path: Union[str, Path], threshold: int = DEFAULT_THRESHOLD) -> "Bitmap":
        with Image.open(path) as img:
            img.load()
            return cls(img, threshold)

    @staticmethod
    def _flatten(image: Image.Image) -> Image.Image:
        if image.mode in ("RGBA", "LA") or (image.mode == "P" and "transparency" in image.info):
            rgba = image.convert("RGBA")
            background = Image.new("RGBA", rgba.size, (255, 255, 255, 255))
            return Image.alpha_composite(background, rgba)
        return image

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def is_black(self, x: int, y: int) -> bool:
        return bool(self._dots[y][x])

    def bitimage_lines(self, chunk_height: int) -> List[bytes]:
        """
        Split the bitmap into horizontal stripes for ESC * transfer.

        Args:
            chunk_height: Stripe height in dots, a multiple of 8 (8 or 24).

        Returns:
            ``ceil(height / chunk_height)`` stripes, top to bottom. Each stripe
            holds ``width * chunk_height / 8`` bytes; rows past the image bottom
            are padded white.
        """
        if chunk_height <= 0 or chunk_height % 8:
            raise InvalidArgumentError("chunk height", chunk_height)
        bytes_per_column = chunk_height // 8
        lines: List[bytes] = []
        for top in range(0, self._height, chunk_height):
            stripe = bytearray()
            for x in range(self._width):
                for slot in range(bytes_per_column):
                    byte = 0
                    for bit in range(8):
                        y = top + slot * 8 + bit
                        if y < self._height and self._dots[y][x]:
                            byte |= 0x80 >> bit
                    stripe.append(byte)
            lines.append(bytes(stripe))
        return lines

    def raster_bytes(self) -> bytes:
        """Serialize the whole bitmap row by row for GS v 0."""
        width_bytes = (self._width + 7) // 8
        out = bytearray()
        for row in self._dots:
            for xb in range(width_bytes):
                byte = 0
                for bit in range(8):
                    x = xb * 8 + bit
                    if x < self._width and row[x]:
                        byte |= 0x80 >> bit
                out.append(byte)
        return bytes(out)
