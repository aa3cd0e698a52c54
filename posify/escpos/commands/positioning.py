"""
Control characters and justification commands.

Reference: ASCII control characters as interpreted by ESC/POS printers,
           ESC a n (select justification)
"""

from typing import Final, Mapping

from posify.model.enums import Alignment, ControlCode

__all__ = [
    "CTL_LF",
    "CTL_FF",
    "CTL_CR",
    "CTL_HT",
    "CTL_VT",
    "CONTROL_CODES",
    "TXT_ALIGN_LT",
    "TXT_ALIGN_CT",
    "TXT_ALIGN_RT",
    "ALIGNMENTS",
]

# =============================================================================
# CONTROL CHARACTERS
# =============================================================================

CTL_LF: Final[bytes] = b"\x0a"
"""
Line feed.

Hex: 0A
Effect: Prints the line buffer and feeds one line at the current line spacing.
Also used as the terminator for println() and feed().
"""

CTL_FF: Final[bytes] = b"\x0c"
"""Form feed. Hex: 0C (prints and returns to standard mode in page mode)"""

CTL_CR: Final[bytes] = b"\x0d"
"""Carriage return. Hex: 0D (ignored by most thermal printers with auto LF off)"""

CTL_HT: Final[bytes] = b"\x09"
"""Horizontal tab. Hex: 09"""

CTL_VT: Final[bytes] = b"\x0b"
"""Vertical tab. Hex: 0B"""

CONTROL_CODES: Final[Mapping[ControlCode, bytes]] = {
    ControlCode.LF: CTL_LF,
    ControlCode.FF: CTL_FF,
    ControlCode.CR: CTL_CR,
    ControlCode.HT: CTL_HT,
    ControlCode.VT: CTL_VT,
}

# =============================================================================
# JUSTIFICATION
# =============================================================================

TXT_ALIGN_LT: Final[bytes] = b"\x1b\x61\x00"
"""Left justification. Command: ESC a 0, Hex: 1B 61 00"""

TXT_ALIGN_CT: Final[bytes] = b"\x1b\x61\x01"
"""Centering. Command: ESC a 1, Hex: 1B 61 01"""

TXT_ALIGN_RT: Final[bytes] = b"\x1b\x61\x02"
"""Right justification. Command: ESC a 2, Hex: 1B 61 02"""

ALIGNMENTS: Final[Mapping[Alignment, bytes]] = {
    Alignment.LEFT: TXT_ALIGN_LT,
    Alignment.CENTER: TXT_ALIGN_CT,
    Alignment.RIGHT: TXT_ALIGN_RT,
}
