"""
RU: Рендеринг QR-кода в монохромный битмап для растровой печати.
EN: Renders QR payloads to a Bitmap so they can be printed as a raster image.

Used when a printer has no native 2D barcode support (neither SNBC nor P3
tables in posify expose GS ( k).

Requirements: Pillow, qrcode
"""

from __future__ import annotations

import logging
from typing import Final, Mapping

import qrcode
import qrcode.image.pil
from PIL import Image
from qrcode.constants import ERROR_CORRECT_H, ERROR_CORRECT_L, ERROR_CORRECT_M, ERROR_CORRECT_Q

from posify.exceptions import InvalidArgumentError
from posify.model.image import Bitmap

logger = logging.getLogger(__name__)

__all__ = ["render_qr", "ERROR_CORRECTION_LEVELS"]

ERROR_CORRECTION_LEVELS: Final[Mapping[str, int]] = {
    "L": ERROR_CORRECT_L,
    "M": ERROR_CORRECT_M,
    "Q": ERROR_CORRECT_Q,
    "H": ERROR_CORRECT_H,
}


def render_qr(
    data: str,
    *,
    box_size: int = 4,
    border: int = 4,
    level: str = "L",
) -> Bitmap:
    """
    Render ``data`` as a QR code bitmap.

    Args:
        data: Payload, must be non-empty.
        box_size: Dots per QR module.
        border: Quiet zone width in modules.
        level: Error correction level L, M, Q or H; unknown levels use L.

    Raises:
        InvalidArgumentError: On empty data or non-positive box size.
    """
    if not data:
        raise InvalidArgumentError("QR data", repr(data))
    if box_size <= 0:
        raise InvalidArgumentError("QR box size", box_size)
    if border < 0:
        raise InvalidArgumentError("QR border", border)

    error_correction = ERROR_CORRECTION_LEVELS.get(str(level).upper(), ERROR_CORRECT_L)
    qr = qrcode.QRCode(
        version=None,
        error_correction=error_correction,
        box_size=box_size,
        border=border,
    )
    qr.add_data(data)
    qr.make(fit=True)
    qr_img = qr.make_image(
        fill_color="black",
        back_color="white",
        image_factory=qrcode.image.pil.PilImage,
    )
    if hasattr(qr_img, "get_image"):
        qr_img = qr_img.get_image()
    if not isinstance(qr_img, Image.Image):
        raise TypeError("QR code rendering did not produce a PIL.Image")
    logger.debug("QR version %s rendered at %s", qr.version, qr_img.size)
    return Bitmap(qr_img)
