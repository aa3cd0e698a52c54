"""
Line spacing commands (ESC 2 / ESC 3 n).

Same encoding on SNBC and P3.

Reference: ESC 2 (default line spacing), ESC 3 n (set line spacing)
"""

from typing import Final

__all__ = [
    "LINE_SPACING_DEFAULT",
    "LINE_SPACING_PREFIX",
    "line_spacing",
]

LINE_SPACING_DEFAULT: Final[bytes] = b"\x1b\x32"
"""
Select default line spacing.

Command: ESC 2
Hex: 1B 32
Effect: Approximately 4.23 mm (1/6 inch).
"""

LINE_SPACING_PREFIX: Final[bytes] = b"\x1b\x33"


def line_spacing(n: int) -> bytes:
    """
    Build the line spacing command.

    Command: ESC 3 n
    Hex: 1B 33 n

    Args:
        n: Spacing in vertical motion units (0-255).

    Returns:
        ``ESC 3 n`` when n is in range, otherwise ``ESC 2`` (reset to default).
        Out-of-range values are a documented fallback, not an error.

    Notes:
        - In standard mode the vertical motion unit (y) of GS P is used.
        - The printer never feeds more than 1016 mm (40 inches) per line.

    Example:
        >>> line_spacing(0)     # contiguous image rows
        b'\\x1b3\\x00'
        >>> line_spacing(300)
        b'\\x1b2'
    """
    if 0 <= n <= 255:
        return LINE_SPACING_PREFIX + bytes([n])
    return LINE_SPACING_DEFAULT
