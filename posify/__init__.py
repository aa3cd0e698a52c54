"""
posify
======

ESC/POS command layer for SNBC and P3 thermal receipt printers.

Пакет предоставляет:
    - Printer: фасад команд (текст, выравнивание, шрифты, штрих-коды,
      изображения, отрезка, денежный ящик, запросы статуса)
    - Диалекты SNBC (A) и P3 (B) с разными кодами enable/disable и отрезки
    - Растровую и bit-image печать изображений через Pillow
    - QR-коды, отрисованные qrcode и напечатанные растром

Пример:
    >>> from posify import Printer, PrinterDialect
    >>>
    >>> with open("/dev/usb/lp0", "r+b", buffering=0) as sink:
    ...     printer = Printer(sink, PrinterDialect.SNBC)
    ...     printer.initialize()
    ...     printer.enable()
    ...     printer.println("hello")
    ...     printer.partial_cut()
    ...     printer.flush()

Логирование:
    >>> import os
    >>> os.environ["POSIFY_LOG_LEVEL"] = "DEBUG"
    >>> os.environ["POSIFY_LOG_DIR"] = "/var/log/posify"

Версия: 0.1.0
Лицензия: MIT
Python: 3.11+
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Dict

# =============================================================================
# VERSION METADATA
# =============================================================================

__version__ = "0.1.0"
__author__ = "posify developers"
__description__ = "ESC/POS command encoding for SNBC and P3 thermal receipt printers"
__license__ = "MIT"
__python_requires__ = ">=3.11"

VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

if sys.version_info < (3, 11):
    raise RuntimeError(
        f"posify requires Python 3.11 or newer. "
        f"Current version: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# LOGGING
# =============================================================================

LOG_LEVEL_ENV: str = "POSIFY_LOG_LEVEL"
LOG_DIR_ENV: str = "POSIFY_LOG_DIR"

_LOG_LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _setup_logging() -> None:
    """
    Configure the ``posify`` logger once per process.

    - stderr handler for WARNING and above
    - rotating file handler for every level, only when POSIFY_LOG_DIR is set
    - level from POSIFY_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR, CRITICAL),
      INFO by default

    Idempotent: a logger that already has handlers is left alone.
    """
    log_level = _LOG_LEVELS.get(os.environ.get(LOG_LEVEL_ENV, "INFO").upper(), logging.INFO)

    package_logger = logging.getLogger("posify")
    if package_logger.handlers:
        return

    package_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    log_dir = os.environ.get(LOG_DIR_ENV)
    if log_dir:
        try:
            path = Path(log_dir)
            path.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                filename=path / "posify.log",
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
        except OSError as e:
            package_logger.warning("Cannot set up file logging in %s: %s", log_dir, e)

    package_logger.propagate = False


def get_logger(module_name: str) -> logging.Logger:
    """
    Return a logger inside the ``posify`` namespace.

    Args:
        module_name: Usually ``__name__``; names outside the package are
            prefixed with ``posify.``, ``__main__`` becomes ``posify.main``.

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("Receipt %s printed", receipt_id)
    """
    if module_name == "posify" or module_name.startswith("posify."):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger("posify.main")
    return logging.getLogger(f"posify.{module_name.lstrip('.')}")


_setup_logging()

# =============================================================================
# PUBLIC API
# =============================================================================

# Imported after logging setup so module loggers inherit the handlers.
from posify.barcodegen import render_qr  # noqa: E402
from posify.config import default_config, load_config  # noqa: E402
from posify.exceptions import (  # noqa: E402
    DecodingError,
    EncodingError,
    InvalidArgumentError,
    PosifyError,
    ResponseTimeoutError,
    UnsupportedOperationError,
)
from posify.model import (  # noqa: E402
    Alignment,
    BarcodeType,
    BitImageDensity,
    Bitmap,
    ControlCode,
    Font,
    FontFamily,
    PrinterDialect,
    RasterMode,
    TextEncoding,
    TextPosition,
    TextStyle,
    Underline,
)
from posify.printer import DEFAULT_READ_TIMEOUT, Printer, PrinterChain, PrinterSink  # noqa: E402

__all__ = [
    # Metadata
    "__version__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    # Utilities
    "get_logger",
    "load_config",
    "default_config",
    # Facade
    "Printer",
    "PrinterChain",
    "PrinterSink",
    "DEFAULT_READ_TIMEOUT",
    # Model
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
    "render_qr",
    # Errors
    "PosifyError",
    "UnsupportedOperationError",
    "InvalidArgumentError",
    "EncodingError",
    "DecodingError",
    "ResponseTimeoutError",
]
