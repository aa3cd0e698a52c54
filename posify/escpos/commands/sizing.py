"""
Character size commands (ESC !).

Each command rewrites the whole print-mode byte, so "double width" and
"double height" are sent as separate ESC ! commands after a reset to normal.

Reference: ESC ! n, print mode selection (bit 4 double height, bit 5 double width)
"""

from typing import Final

__all__ = [
    "TXT_NORMAL",
    "TXT_2HEIGHT",
    "TXT_2WIDTH",
]

TXT_NORMAL: Final[bytes] = b"\x1b\x21\x00"
"""Normal size text. Command: ESC ! 0, Hex: 1B 21 00"""

TXT_2HEIGHT: Final[bytes] = b"\x1b\x21\x10"
"""Double height text. Command: ESC ! 16, Hex: 1B 21 10"""

TXT_2WIDTH: Final[bytes] = b"\x1b\x21\x20"
"""Double width text. Command: ESC ! 32, Hex: 1B 21 20"""
