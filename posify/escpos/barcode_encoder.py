"""
Barcode command encoder.

Turns a BarcodeSpec into the five-command GS prologue (width, height, HRI
position, HRI font, symbology) and the terminated payload. All functions
are pure; nothing here touches the output sink.

Symbology table:
    Only EAN13 (0x02) and CODE128 (0x08) have their own wire byte. Every
    other BarcodeType falls back to the EAN13 byte. This table is known to
    be incomplete and is kept as is until the vendor byte values are
    confirmed; see DESIGN.md.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final, List, Mapping

from posify.escpos.commands.barcode import (
    BARCODE_TERMINATOR,
    BARCODE_TYPE_CODE128,
    BARCODE_TYPE_EAN13,
    CODE128_SET_B,
    GS_BARCODE_HEIGHT,
    GS_BARCODE_PRINT,
    GS_BARCODE_WIDTH,
    GS_HRI_FONT,
    GS_HRI_POSITION,
    HRI_FONT_SMALL,
    HRI_FONT_STANDARD,
    barcode_command,
)
from posify.escpos.dialects import get_dialect_table
from posify.model.enums import BarcodeType, Font, PrinterDialect, TextPosition

logger: Final = logging.getLogger(__name__)

__all__ = [
    "BarcodeSpec",
    "resolve_type",
    "resolve_font",
    "encode_payload",
]

_TYPE_BYTES: Final[Mapping[BarcodeType, int]] = {
    BarcodeType.EAN13: BARCODE_TYPE_EAN13,
    BarcodeType.CODE128: BARCODE_TYPE_CODE128,
}


def resolve_type(kind: BarcodeType) -> int:
    """Wire byte for GS k; unmapped symbologies use the EAN13 byte."""
    value = _TYPE_BYTES.get(kind)
    if value is None:
        logger.debug("No GS k byte for %s, sending EAN13 byte", kind.name)
        return BARCODE_TYPE_EAN13
    return value


def resolve_font(font: Font) -> int:
    return HRI_FONT_SMALL if font.is_small else HRI_FONT_STANDARD


def encode_payload(kind: BarcodeType, code: bytes) -> bytes:
    """
    Payload bytes sent after the prologue.

    CODE128 is prefixed with the code set B selector ``7B 42``; code sets A
    and C are not selectable. Every payload ends with NUL.
    """
    prefix = CODE128_SET_B if kind is BarcodeType.CODE128 else b""
    return prefix + code + BARCODE_TERMINATOR


@dataclass(frozen=True, slots=True)
class BarcodeSpec:
    """
    Transient barcode parameter record, built once per barcode call.

    Attributes:
        dialect: Printer dialect, decides the valid width range.
        width: Module width; out-of-range values become the dialect default.
        height: Bar height in dots, documented range 1-255, sent unclamped;
            values outside 0-255 raise InvalidArgumentError.
        font: HRI font.
        kind: Symbology.
        position: HRI position.
    """

    dialect: PrinterDialect
    width: int
    height: int
    font: Font
    kind: BarcodeType
    position: TextPosition

    def width_command(self) -> bytes:
        width = get_dialect_table(self.dialect).resolve_barcode_width(self.width)
        return barcode_command(GS_BARCODE_WIDTH, width)

    def height_command(self) -> bytes:
        return barcode_command(GS_BARCODE_HEIGHT, self.height, "barcode height")

    def text_position_command(self) -> bytes:
        return barcode_command(GS_HRI_POSITION, self.position.value)

    def font_command(self) -> bytes:
        return barcode_command(GS_HRI_FONT, resolve_font(self.font))

    def type_command(self) -> bytes:
        return barcode_command(GS_BARCODE_PRINT, resolve_type(self.kind))

    def prologue(self) -> List[bytes]:
        """
        All five prologue commands in wire order.

        Built eagerly so a dialect error surfaces before anything is written.
        """
        return [
            self.width_command(),
            self.height_command(),
            self.text_position_command(),
            self.font_command(),
            self.type_command(),
        ]
