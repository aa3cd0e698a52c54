"""
Character font selection (ESC M n).

Font C is only present on some firmware; printers without it fall back to font A.
"""

from typing import Final, Mapping

from posify.model.enums import FontFamily

__all__ = [
    "TXT_FONT_A",
    "TXT_FONT_B",
    "TXT_FONT_C",
    "FONT_FAMILIES",
]

TXT_FONT_A: Final[bytes] = b"\x1b\x4d\x00"
"""Font A (12x24). Command: ESC M 0, Hex: 1B 4D 00"""

TXT_FONT_B: Final[bytes] = b"\x1b\x4d\x01"
"""Font B (9x17). Command: ESC M 1, Hex: 1B 4D 01"""

TXT_FONT_C: Final[bytes] = b"\x1b\x4d\x02"
"""Font C. Command: ESC M 2, Hex: 1B 4D 02"""

FONT_FAMILIES: Final[Mapping[FontFamily, bytes]] = {
    FontFamily.A: TXT_FONT_A,
    FontFamily.B: TXT_FONT_B,
    FontFamily.C: TXT_FONT_C,
}
