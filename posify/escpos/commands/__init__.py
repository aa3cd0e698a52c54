"""
ESC/POS command constants for SNBC and P3 thermal receipt printers.

This package contains the low-level, dialect-independent byte sequences.
Commands whose encoding differs between printers (enable/disable, cutting,
barcode module width) live in posify.escpos.dialects instead.

Module Structure:
    commands/
    ├── __init__.py             # This file (public API exports)
    ├── text_formatting.py      # Bold, underline
    ├── sizing.py               # Normal, double width, double height
    ├── positioning.py          # Control characters, justification
    ├── fonts.py                # Font A/B/C
    ├── line_spacing.py         # ESC 2 / ESC 3 n
    ├── hardware.py             # Initialize, cash drawer, paper-end limit
    ├── barcode.py              # GS w/h/H/f/k barcode prologue
    ├── graphics.py             # ESC * bit-image and GS v 0 raster headers
    └── status.py               # Status and counter queries

Usage:
    >>> from posify.escpos.commands import TXT_BOLD_ON, TXT_BOLD_OFF
    >>> sink.write(TXT_BOLD_ON + b"TOTAL" + TXT_BOLD_OFF)
"""

from posify.escpos.commands.barcode import (
    BARCODE_TERMINATOR,
    CODE128_SET_B,
    barcode_command,
)
from posify.escpos.commands.fonts import FONT_FAMILIES, TXT_FONT_A, TXT_FONT_B, TXT_FONT_C
from posify.escpos.commands.graphics import (
    BIT_IMAGE_HEADERS,
    RASTER_HEADERS,
    u16le,
)
from posify.escpos.commands.hardware import (
    CD_KICK_2,
    CD_KICK_5,
    HW_INIT,
    cash_drawer,
    paper_end_limit,
)
from posify.escpos.commands.line_spacing import LINE_SPACING_DEFAULT, line_spacing
from posify.escpos.commands.positioning import (
    ALIGNMENTS,
    CONTROL_CODES,
    CTL_CR,
    CTL_FF,
    CTL_HT,
    CTL_LF,
    CTL_VT,
    TXT_ALIGN_CT,
    TXT_ALIGN_LT,
    TXT_ALIGN_RT,
)
from posify.escpos.commands.sizing import TXT_2HEIGHT, TXT_2WIDTH, TXT_NORMAL
from posify.escpos.commands.status import StatusQuery
from posify.escpos.commands.text_formatting import (
    TXT_BOLD_OFF,
    TXT_BOLD_ON,
    TXT_UNDERL2_ON,
    TXT_UNDERL_OFF,
    TXT_UNDERL_ON,
    style_commands,
    underline_command,
)

__all__ = [
    # Text formatting
    "TXT_BOLD_ON",
    "TXT_BOLD_OFF",
    "TXT_UNDERL_OFF",
    "TXT_UNDERL_ON",
    "TXT_UNDERL2_ON",
    "style_commands",
    "underline_command",
    # Sizing
    "TXT_NORMAL",
    "TXT_2HEIGHT",
    "TXT_2WIDTH",
    # Positioning
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
    # Fonts
    "TXT_FONT_A",
    "TXT_FONT_B",
    "TXT_FONT_C",
    "FONT_FAMILIES",
    # Line spacing
    "LINE_SPACING_DEFAULT",
    "line_spacing",
    # Hardware
    "HW_INIT",
    "CD_KICK_2",
    "CD_KICK_5",
    "cash_drawer",
    "paper_end_limit",
    # Barcode
    "BARCODE_TERMINATOR",
    "CODE128_SET_B",
    "barcode_command",
    # Graphics
    "BIT_IMAGE_HEADERS",
    "RASTER_HEADERS",
    "u16le",
    # Status
    "StatusQuery",
]
