"""
ESC/POS encoding layer.

    escpos/
    ├── commands/           # Dialect-independent byte constants and builders
    ├── dialects.py         # SNBC / P3 / unknown command tables
    ├── barcode_encoder.py  # GS w/h/H/f/k prologue and payload
    └── raster_encoder.py   # ESC * bit-image and GS v 0 raster blocks

Nothing here writes to a sink; posify.printer.Printer does that.
"""

from posify.escpos.barcode_encoder import BarcodeSpec, encode_payload, resolve_font, resolve_type
from posify.escpos.dialects import (
    DIALECT_TABLES,
    P3_TABLE,
    SNBC_TABLE,
    UNKNOWN_TABLE,
    DialectTable,
    get_dialect_table,
)
from posify.escpos.raster_encoder import (
    MAX_DIMENSION,
    BitmapSource,
    bit_image_blocks,
    raster_blocks,
)

__all__ = [
    # Dialects
    "DialectTable",
    "SNBC_TABLE",
    "P3_TABLE",
    "UNKNOWN_TABLE",
    "DIALECT_TABLES",
    "get_dialect_table",
    # Barcodes
    "BarcodeSpec",
    "encode_payload",
    "resolve_font",
    "resolve_type",
    # Images
    "BitmapSource",
    "MAX_DIMENSION",
    "bit_image_blocks",
    "raster_blocks",
]
