"""
model/enums.py

(Краткое RU: Перечисления параметров команд для термопринтеров SNBC и P3.)

EN: Domain enums for the posify command layer. Every enum here is a pure value;
NO byte/ESC-POS command logic lives in this module (see posify.escpos for that).

- Printer dialects (SNBC, P3, unknown).
- Barcode parameters: symbology, HRI text position, HRI font.
- Text options: underline, alignment, font family, style, control codes.
- Image transfer options: bit-image density, raster scaling mode.

Enums accepting free-form caller input provide ``parse`` (strict, raises
InvalidArgumentError) or ``coerce`` (lenient, falls back to a documented default).
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Final, Mapping, Optional, Type, TypeVar, Union

from posify.exceptions import InvalidArgumentError

_logger: Final[logging.Logger] = logging.getLogger(__name__)

__all__ = [
    "PrinterDialect",
    "TextPosition",
    "BarcodeType",
    "Font",
    "Underline",
    "Alignment",
    "FontFamily",
    "TextStyle",
    "ControlCode",
    "BitImageDensity",
    "RasterMode",
]

_E = TypeVar("_E", bound=Enum)


def _normalize(value: object) -> str:
    return str(value).strip().upper().replace("-", "_").replace("+", "_").replace(" ", "_")


def _lookup(
    enum_cls: Type[_E],
    value: Union[_E, str, None],
    aliases: Mapping[str, str],
) -> Optional[_E]:
    """Resolve an enum member from a member, its name, its value or an alias."""
    if isinstance(value, enum_cls):
        return value
    if value is None:
        return None
    key = _normalize(value)
    key = aliases.get(key, key)
    for member in enum_cls:
        if key == member.name or key == _normalize(member.value):
            return member
    return None


# === DIALECTS ===


class PrinterDialect(str, Enum):
    """
    Printer command dialect, selected once per Printer.

    SNBC (dialect A) and P3 (dialect B) disagree on enable/disable, cutting
    and barcode module width. UNKNOWN is accepted at construction so new
    printers can be wired in, but every dialect-dependent command rejects it.
    """

    SNBC = "snbc"
    P3 = "p3"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: Union["PrinterDialect", str]) -> "PrinterDialect":
        member = _lookup(cls, value, {"A": "SNBC", "B": "P3", "UNSPECIFIED": "UNKNOWN"})
        if member is None:
            raise InvalidArgumentError("printer dialect", value)
        return member


# === BARCODE PARAMETERS ===


class TextPosition(Enum):
    """HRI (human readable interpretation) text position; same byte on every dialect."""

    OFF = 0x00
    ABOVE = 0x01
    BELOW = 0x02
    BOTH = 0x03


class BarcodeType(Enum):
    """
    Barcode symbologies.

    The values are documentation discriminants only (the alternates 65..78 are
    also found in vendor manuals). The wire byte is chosen by
    posify.escpos.barcode_encoder.resolve_type, never from ``.value``.
    """

    UPCA = 0  # or 65?
    UPCE = 1  # or 66?
    EAN13 = 2  # or 67?
    EAN8 = 3  # or 68?
    CODE39 = 4  # or 69?
    ITF = 5  # or 70?
    CODE93 = 72
    CODABAR = 6  # or 71?
    CODE128 = 73
    PDF417 = 10  # or 75?
    QRCODE = 11  # or 76?
    MAXICODE = 12  # or 77?
    GS1 = 13  # or 78?


class Font(Enum):
    """
    HRI font.

    STANDARD/COMPRESSED are the SNBC manual names, FONT_A/FONT_B the P3 ones;
    COMPRESSED and FONT_B select the same font.
    """

    STANDARD = "standard"
    COMPRESSED = "compressed"
    FONT_A = "font_a"
    FONT_B = "font_b"

    @property
    def is_small(self) -> bool:
        return self in {Font.COMPRESSED, Font.FONT_B}


# === TEXT OPTIONS ===


class Underline(str, Enum):
    OFF = "OFF"
    ON = "ON"
    THICK = "THICK"

    @classmethod
    def coerce(cls, value: Union["Underline", str, None]) -> "Underline":
        """Unknown or missing modes fall back to OFF."""
        member = _lookup(cls, value, {})
        if member is None:
            if value is not None:
                _logger.debug("Unknown underline mode %r, using OFF", value)
            return cls.OFF
        return member


class Alignment(str, Enum):
    LEFT = "LT"
    CENTER = "CT"
    RIGHT = "RT"

    @classmethod
    def parse(cls, value: Union["Alignment", str]) -> "Alignment":
        member = _lookup(cls, value, {"CENTRE": "CENTER"})
        if member is None:
            raise InvalidArgumentError("alignment", value)
        return member


class FontFamily(str, Enum):
    A = "A"
    B = "B"
    C = "C"

    @classmethod
    def parse(cls, value: Union["FontFamily", str]) -> "FontFamily":
        member = _lookup(cls, value, {"FONT_A": "A", "FONT_B": "B", "FONT_C": "C"})
        if member is None:
            raise InvalidArgumentError("font family", value)
        return member


class TextStyle(str, Enum):
    """Combined bold/underline style; short names follow the receipt-printer convention."""

    NORMAL = "NORMAL"
    BOLD = "B"
    UNDERLINE = "U"
    UNDERLINE2 = "U2"
    BOLD_UNDERLINE = "BU"
    BOLD_UNDERLINE2 = "BU2"

    @property
    def bold(self) -> bool:
        return self in {TextStyle.BOLD, TextStyle.BOLD_UNDERLINE, TextStyle.BOLD_UNDERLINE2}

    @property
    def underline(self) -> Underline:
        if self in {TextStyle.UNDERLINE, TextStyle.BOLD_UNDERLINE}:
            return Underline.ON
        if self in {TextStyle.UNDERLINE2, TextStyle.BOLD_UNDERLINE2}:
            return Underline.THICK
        return Underline.OFF

    @classmethod
    def coerce(cls, value: Union["TextStyle", str, None]) -> "TextStyle":
        """Unknown kinds are treated as NORMAL."""
        member = _lookup(cls, value, {})
        if member is None:
            _logger.debug("Unknown text style %r, using NORMAL", value)
            return cls.NORMAL
        return member


class ControlCode(str, Enum):
    LF = "LF"
    FF = "FF"
    CR = "CR"
    HT = "HT"
    VT = "VT"

    @classmethod
    def parse(cls, value: Union["ControlCode", str]) -> "ControlCode":
        member = _lookup(cls, value, {})
        if member is None:
            raise InvalidArgumentError("control action", value)
        return member


# === IMAGE TRANSFER ===


class BitImageDensity(str, Enum):
    """
    ESC * bit-image density.

    S8/D8 send 8-dot rows (1 byte per column), S24/D24 send 24-dot rows
    (3 bytes per column).
    """

    S8 = "S8"
    D8 = "D8"
    S24 = "S24"
    D24 = "D24"

    @property
    def bytes_per_column(self) -> int:
        return 1 if self in {BitImageDensity.S8, BitImageDensity.D8} else 3

    @property
    def chunk_height(self) -> int:
        return self.bytes_per_column * 8

    @classmethod
    def coerce(cls, value: Union["BitImageDensity", str, None]) -> "BitImageDensity":
        """Missing or unknown densities use D24."""
        member = _lookup(cls, value, {})
        if member is None:
            if value is not None:
                _logger.debug("Unknown bit-image density %r, using D24", value)
            return cls.D24
        return member


class RasterMode(str, Enum):
    NORMAL = "NORMAL"
    DOUBLE_WIDE = "DW"
    DOUBLE_HIGH = "DH"
    QUADRUPLE = "QD"

    @classmethod
    def coerce(cls, value: Union["RasterMode", str, None]) -> "RasterMode":
        """Missing or unknown modes use NORMAL."""
        member = _lookup(cls, value, {"DOUBLE_WIDTH": "DW", "DOUBLE_HEIGHT": "DH"})
        if member is None:
            if value is not None:
                _logger.debug("Unknown raster mode %r, using NORMAL", value)
            return cls.NORMAL
        return member
