"""
Text emphasis ESC/POS commands (bold, underline).

Identical on SNBC and P3 printers.

Reference: SNBC BTP series programming manual, "ESC E", "ESC -"
           P3 command reference, character commands
"""

from typing import Final, Mapping

from posify.model.enums import TextStyle, Underline

__all__ = [
    "TXT_BOLD_ON",
    "TXT_BOLD_OFF",
    "TXT_UNDERL_OFF",
    "TXT_UNDERL_ON",
    "TXT_UNDERL2_ON",
    "UNDERLINE_COMMANDS",
    "underline_command",
    "style_commands",
]

# =============================================================================
# BOLD (EMPHASIZED) MODE
# =============================================================================

TXT_BOLD_OFF: Final[bytes] = b"\x1b\x45\x00"
"""
Disable emphasized printing.

Command: ESC E 0
Hex: 1B 45 00
"""

TXT_BOLD_ON: Final[bytes] = b"\x1b\x45\x01"
"""
Enable emphasized printing.

Command: ESC E 1
Hex: 1B 45 01
Note: Only the least significant bit of n is evaluated by the printer.
"""

# =============================================================================
# UNDERLINE MODE
# =============================================================================

TXT_UNDERL_OFF: Final[bytes] = b"\x1b\x2d\x00"
"""Underline off. Command: ESC - 0, Hex: 1B 2D 00"""

TXT_UNDERL_ON: Final[bytes] = b"\x1b\x2d\x01"
"""1-dot underline. Command: ESC - 1, Hex: 1B 2D 01"""

TXT_UNDERL2_ON: Final[bytes] = b"\x1b\x2d\x02"
"""
2-dot (thick) underline.

Command: ESC - 2
Hex: 1B 2D 02
Note: Underline is not applied to rotated characters or white/black reversed text.
"""

UNDERLINE_COMMANDS: Final[Mapping[Underline, bytes]] = {
    Underline.OFF: TXT_UNDERL_OFF,
    Underline.ON: TXT_UNDERL_ON,
    Underline.THICK: TXT_UNDERL2_ON,
}


def underline_command(mode: Underline) -> bytes:
    return UNDERLINE_COMMANDS[mode]


def style_commands(style: TextStyle) -> tuple[bytes, bytes]:
    """
    Return the (bold, underline) command pair for a combined style.

    Example:
        >>> style_commands(TextStyle.BOLD_UNDERLINE2)
        (b'\\x1bE\\x01', b'\\x1b-\\x02')
    """
    bold = TXT_BOLD_ON if style.bold else TXT_BOLD_OFF
    return bold, underline_command(style.underline)
