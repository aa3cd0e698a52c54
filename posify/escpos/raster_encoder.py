"""
Bit-image and raster command encoder.

Converts a bitmap collaborator into the ordered list of byte blocks the
printer expects. The encoder never reorders, merges or drops stripes.

Bit-image (ESC *):
    ESC 3 0                          line spacing 0 so stripes touch
    repeated per stripe, top to bottom:
        ESC * m                      density header
        nL nH                        column count, little-endian
        d1..dk                       stripe bytes
        LF

Raster (GS v 0):
    GS v 0 m  xL xH  yL yH  d1..dk   x = ceil(width / 8), y = height
"""

from __future__ import annotations

import logging
from typing import Final, List, Protocol, Sequence, runtime_checkable

from posify.escpos.commands.graphics import BIT_IMAGE_HEADERS, RASTER_HEADERS, u16le
from posify.escpos.commands.line_spacing import line_spacing
from posify.escpos.commands.positioning import CTL_LF
from posify.exceptions import InvalidArgumentError
from posify.model.enums import BitImageDensity, RasterMode

logger: Final = logging.getLogger(__name__)

__all__ = [
    "BitmapSource",
    "MAX_DIMENSION",
    "bit_image_blocks",
    "raster_blocks",
]

MAX_DIMENSION: Final[int] = 0xFFFF


@runtime_checkable
class BitmapSource(Protocol):
    """Image collaborator consumed by the encoder (posify.model.image.Bitmap implements it)."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def bitimage_lines(self, chunk_height: int) -> Sequence[bytes]: ...

    def raster_bytes(self) -> bytes: ...


def _check_dimension(name: str, value: int) -> None:
    if not 0 <= value <= MAX_DIMENSION:
        raise InvalidArgumentError(f"image {name}", value)


def bit_image_blocks(bitmap: BitmapSource, density: BitImageDensity) -> List[bytes]:
    """
    Byte blocks for ESC * transfer, in wire order.

    The count field holds the number of dot columns in the stripe, that is
    the stripe length divided by the bytes per column (1 for 8-dot, 3 for
    24-dot densities).
    """
    _check_dimension("width", bitmap.width)
    header = BIT_IMAGE_HEADERS[density]
    per_column = density.bytes_per_column
    blocks: List[bytes] = [line_spacing(0)]
    lines = bitmap.bitimage_lines(density.chunk_height)
    for line in lines:
        blocks.append(header)
        blocks.append(u16le(len(line) // per_column))
        blocks.append(bytes(line))
        blocks.append(CTL_LF)
    logger.debug("Bit-image %s: %d stripes", density.value, len(lines))
    return blocks


def raster_blocks(bitmap: BitmapSource, mode: RasterMode) -> List[bytes]:
    """Byte blocks for GS v 0 transfer: header, x, y, then the whole raster."""
    _check_dimension("width", bitmap.width)
    _check_dimension("height", bitmap.height)
    width_bytes = (bitmap.width + 7) // 8
    return [
        RASTER_HEADERS[mode],
        u16le(width_bytes),
        u16le(bitmap.height),
        bytes(bitmap.raster_bytes()),
    ]
