"""
Status and counter queries.

Each query is a fixed op-code answered by a fixed-size response. The same
op-codes are used on SNBC and P3 printers.

| Query            | Op-code   | Response |
|------------------|-----------|----------|
| serial number    | 1C EA 52  | 16 bytes |
| cut count        | 1D E2     | 16 bytes |
| ROM version      | 1D 49 03  | 4 bytes  |
| power-on count   | 1D E5     | 8 bytes  |
| printed length   | 1D E3     | 8 bytes  |
| remaining paper  | 1D E1     | 8 bytes  |
| paper sensor     | 1D 72 01  | 1 byte   |
| off-line status  | 10 04 02  | 1 byte   |

DLE EOT n (10 04 n) supports more status kinds than are wrapped here:
0x01 device, 0x02 off-line, 0x03 error, 0x04 paper roll sensor,
0x11 print, 0x14 full status, 0x15 device id.
"""

from dataclasses import dataclass
from typing import Final

__all__ = [
    "StatusQuery",
    "QUERY_SERIAL",
    "QUERY_CUT_COUNT",
    "QUERY_ROM_VERSION",
    "QUERY_POWER_COUNT",
    "QUERY_PRINTED_LENGTH",
    "QUERY_REMAINING_PAPER",
    "QUERY_PAPER_SENSOR",
    "QUERY_OFFLINE_STATUS",
    "PAPER_PRESENT",
    "COVER_OPEN_MASK",
    "STATUS_COVER_OPEN",
    "STATUS_OK",
]


@dataclass(frozen=True, slots=True)
class StatusQuery:
    """Request op-code and expected response length of one query."""

    name: str
    opcode: bytes
    response_size: int


QUERY_SERIAL: Final = StatusQuery("serial", b"\x1c\xea\x52", 16)
# 16 bytes is plenty for today's counters; revisit if a firmware pads wider
QUERY_CUT_COUNT: Final = StatusQuery("cut count", b"\x1d\xe2", 16)
QUERY_ROM_VERSION: Final = StatusQuery("rom version", b"\x1d\x49\x03", 4)
QUERY_POWER_COUNT: Final = StatusQuery("power count", b"\x1d\xe5", 8)
QUERY_PRINTED_LENGTH: Final = StatusQuery("printed length", b"\x1d\xe3", 8)
QUERY_REMAINING_PAPER: Final = StatusQuery("remaining paper", b"\x1d\xe1", 8)
QUERY_PAPER_SENSOR: Final = StatusQuery("paper sensor", b"\x1d\x72\x01", 1)
QUERY_OFFLINE_STATUS: Final = StatusQuery("off-line status", b"\x10\x04\x02", 1)

PAPER_PRESENT: Final[int] = 0x00
"""Paper sensor response meaning "paper loaded"."""

COVER_OPEN_MASK: Final[int] = 1 << 2
"""Bit 2 of the off-line status byte is set while the cover is open."""

STATUS_COVER_OPEN: Final[str] = "Cover open"
STATUS_OK: Final[str] = "No Errors"
