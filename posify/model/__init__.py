"""Value types used by the posify command layer: enums, text encoding policy, bitmaps."""

from posify.model.encoding import TextEncoding
from posify.model.enums import (
    Alignment,
    BarcodeType,
    BitImageDensity,
    ControlCode,
    Font,
    FontFamily,
    PrinterDialect,
    RasterMode,
    TextPosition,
    TextStyle,
    Underline,
)
from posify.model.image import Bitmap

__all__ = [
    "Alignment",
    "BarcodeType",
    "BitImageDensity",
    "Bitmap",
    "ControlCode",
    "Font",
    "FontFamily",
    "PrinterDialect",
    "RasterMode",
    "TextEncoding",
    "TextPosition",
    "TextStyle",
    "Underline",
]
