"""
1D barcode ESC/POS commands (GS w, GS h, GS H, GS f, GS k).

A barcode is printed as a five-command prologue followed by the payload:

    GS w n   module width
    GS h n   bar height in dots
    GS H n   HRI text position
    GS f n   HRI font
    GS k m   symbology, then payload bytes, then NUL

CODE128 payloads additionally start with a code set selector ``{ B``.

Reference: SNBC BTP programming manual, chapter "Bar code commands"
           P3 command reference, "GS k" (format 1, NUL terminated)
"""

from typing import Final

from posify.exceptions import InvalidArgumentError

__all__ = [
    "GS_BARCODE_WIDTH",
    "GS_BARCODE_HEIGHT",
    "GS_HRI_POSITION",
    "GS_HRI_FONT",
    "GS_BARCODE_PRINT",
    "HRI_FONT_STANDARD",
    "HRI_FONT_SMALL",
    "BARCODE_TYPE_EAN13",
    "BARCODE_TYPE_CODE128",
    "CODE128_SET_A",
    "CODE128_SET_B",
    "CODE128_SET_C",
    "BARCODE_TERMINATOR",
    "barcode_command",
]

GS_BARCODE_WIDTH: Final[bytes] = b"\x1d\x77"
"""
Module width prefix, GS w n (Hex: 1D 77 n).

SNBC: 2 <= n <= 6, default 2.
P3: manual states 1 <= n <= 6 (a second table lists 0x81-0x86), default 3.
"""

GS_BARCODE_HEIGHT: Final[bytes] = b"\x1d\x68"
"""
Bar height prefix, GS h n (Hex: 1D 68 n), 1 <= n <= 255 dots.

P3 default is 0xA2: 8 dots per mm, so 20.25 mm * 8 = 162 dots.
"""

GS_HRI_POSITION: Final[bytes] = b"\x1d\x48"
"""HRI position prefix, GS H n (Hex: 1D 48 n): 0 off, 1 above, 2 below, 3 both."""

GS_HRI_FONT: Final[bytes] = b"\x1d\x66"
"""HRI font prefix, GS f n (Hex: 1D 66 n)."""

GS_BARCODE_PRINT: Final[bytes] = b"\x1d\x6b"
"""Print barcode prefix, GS k m (Hex: 1D 6B m)."""

HRI_FONT_STANDARD: Final[int] = 0x00
"""Standard font (SNBC) / Font A (P3)."""

HRI_FONT_SMALL: Final[int] = 0x01
"""Compressed font (SNBC) / Font B (P3)."""

BARCODE_TYPE_EAN13: Final[int] = 0x02
BARCODE_TYPE_CODE128: Final[int] = 0x08

# CODE128 code sets:
#   A: ASCII 00-95 (0-9, A-Z, control codes), special characters, FNC 1-4
#   B: ASCII 32-127 (0-9, A-Z, a-z), special characters, FNC 1-4
#   C: 00-99, two digits per code point, FNC1
CODE128_SET_A: Final[bytes] = b"\x7b\x41"
CODE128_SET_B: Final[bytes] = b"\x7b\x42"
CODE128_SET_C: Final[bytes] = b"\x7b\x43"

BARCODE_TERMINATOR: Final[bytes] = b"\x00"


def barcode_command(prefix: bytes, n: int, argument: str = "barcode parameter") -> bytes:
    """
    Append a single parameter byte to a GS prefix.

    Raises:
        InvalidArgumentError: If n does not fit in one byte.
    """
    if not 0 <= n <= 0xFF:
        raise InvalidArgumentError(argument, n)
    return prefix + bytes([n])
