"""
barcodegen

Software-rendered codes for printers without native support.

Public API:
    - render_qr: QR payload to posify.model.image.Bitmap

Зависимости:
    Pillow, qrcode
"""

from posify.barcodegen.qr_image import ERROR_CORRECTION_LEVELS, render_qr

__all__ = [
    "render_qr",
    "ERROR_CORRECTION_LEVELS",
]
