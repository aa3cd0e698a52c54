"""
Bit-image (ESC *) and raster (GS v 0) graphics commands.

Bit-image mode sends the picture as stripes of 8 or 24 dots, each stripe
preceded by its own header and column count. Raster mode sends the whole
picture after one header.

Reference: ESC * m nL nH d1...dk, GS v 0 m xL xH yL yH d1...dk
"""

import struct
from typing import Final, Mapping

from posify.model.enums import BitImageDensity, RasterMode

__all__ = [
    "BITMAP_S8",
    "BITMAP_D8",
    "BITMAP_S24",
    "BITMAP_D24",
    "BIT_IMAGE_HEADERS",
    "RASTER_NORMAL",
    "RASTER_DOUBLE_WIDE",
    "RASTER_DOUBLE_HIGH",
    "RASTER_QUADRUPLE",
    "RASTER_HEADERS",
    "u16le",
]

# =============================================================================
# BIT-IMAGE (ESC *)
# =============================================================================

BITMAP_S8: Final[bytes] = b"\x1b\x2a\x00"
"""8-dot single density. Command: ESC * 0, Hex: 1B 2A 00"""

BITMAP_D8: Final[bytes] = b"\x1b\x2a\x01"
"""8-dot double density. Command: ESC * 1, Hex: 1B 2A 01"""

BITMAP_S24: Final[bytes] = b"\x1b\x2a\x20"
"""24-dot single density. Command: ESC * 32, Hex: 1B 2A 20"""

BITMAP_D24: Final[bytes] = b"\x1b\x2a\x21"
"""24-dot double density. Command: ESC * 33, Hex: 1B 2A 21"""

BIT_IMAGE_HEADERS: Final[Mapping[BitImageDensity, bytes]] = {
    BitImageDensity.S8: BITMAP_S8,
    BitImageDensity.D8: BITMAP_D8,
    BitImageDensity.S24: BITMAP_S24,
    BitImageDensity.D24: BITMAP_D24,
}

# =============================================================================
# RASTER (GS v 0)
# =============================================================================

RASTER_NORMAL: Final[bytes] = b"\x1d\x76\x30\x00"
"""Normal scale. Command: GS v 0 0, Hex: 1D 76 30 00"""

RASTER_DOUBLE_WIDE: Final[bytes] = b"\x1d\x76\x30\x01"
"""Double width. Command: GS v 0 1, Hex: 1D 76 30 01"""

RASTER_DOUBLE_HIGH: Final[bytes] = b"\x1d\x76\x30\x02"
"""Double height. Command: GS v 0 2, Hex: 1D 76 30 02"""

RASTER_QUADRUPLE: Final[bytes] = b"\x1d\x76\x30\x03"
"""Double width and height. Command: GS v 0 3, Hex: 1D 76 30 03"""

RASTER_HEADERS: Final[Mapping[RasterMode, bytes]] = {
    RasterMode.NORMAL: RASTER_NORMAL,
    RasterMode.DOUBLE_WIDE: RASTER_DOUBLE_WIDE,
    RasterMode.DOUBLE_HIGH: RASTER_DOUBLE_HIGH,
    RasterMode.QUADRUPLE: RASTER_QUADRUPLE,
}


def u16le(n: int) -> bytes:
    """Little-endian 16-bit field (nL nH)."""
    return struct.pack("<H", n)
