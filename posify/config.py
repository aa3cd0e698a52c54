"""
Configuration loading for posify.

Configuration is a flat JSON object merged over _DEFAULT_CONFIG. A missing
or malformed file is not an error: defaults are used and a warning is logged.

Keys:
    - dialect: str - "snbc", "p3" or "unknown"
    - codec: str - Python codec used for text, e.g. "utf-8", "cp437"
    - errors: str - encoder trap ("replace", "strict", "ignore", ...)
    - read_timeout_seconds: float | None - deadline for status query responses
    - bit_image_density: str - default ESC * density (S8, D8, S24, D24)
    - raster_mode: str - default GS v 0 mode (NORMAL, DW, DH, QD)
    - qr_box_size: int - dots per QR module for qr_image()
    - qr_border: int - quiet zone in QR modules for qr_image()
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Final, Optional

logger: Final = logging.getLogger(__name__)

__all__ = ["DEFAULT_CONFIG_FILE", "load_config", "default_config"]

DEFAULT_CONFIG_FILE: Final[str] = "posify.json"

_DEFAULT_CONFIG: Dict[str, Any] = {
    "dialect": "snbc",
    "codec": "utf-8",
    "errors": "replace",
    "read_timeout_seconds": 5.0,
    "bit_image_density": "D24",
    "raster_mode": "NORMAL",
    "qr_box_size": 4,
    "qr_border": 4,
}


def default_config() -> Dict[str, Any]:
    return _DEFAULT_CONFIG.copy()


def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load configuration from a JSON file, falling back to defaults.

    Args:
        config_path: Path to the JSON file. If None, ``posify.json`` in the
            current directory is used.

    Returns:
        A dict that always contains every default key, with user values
        overriding the defaults.

    Example:
        >>> config = load_config(Path("/etc/posify.json"))
        >>> printer = Printer.from_config(sink, config)
    """
    if config_path is None:
        config_path = Path(DEFAULT_CONFIG_FILE)

    config = default_config()

    if not config_path.exists():
        logger.info("Config file %s not found, using defaults", config_path)
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = json.load(f)

        if not isinstance(user_config, dict):
            raise ValueError(
                f"config file must contain a JSON object, got {type(user_config).__name__}"
            )

        config.update(user_config)
        logger.info("Configuration loaded from %s", config_path)
        logger.debug("Configuration: %s", config)

    except json.JSONDecodeError as e:
        logger.warning(
            "Cannot parse %s: invalid JSON at line %d, column %d. Using defaults.",
            config_path,
            e.lineno,
            e.colno,
        )
    except OSError as e:
        logger.warning("Cannot read %s: %s. Using defaults.", config_path, e)
    except ValueError as e:
        logger.warning("Invalid configuration format: %s. Using defaults.", e)

    return config
