"""
Printer hardware control: initialization, cash drawer kick, paper-end limit.

Reference: ESC @, ESC p m t1 t2, GS 0xE6 (SNBC/P3 vendor extension)
"""

from typing import Final

from posify.exceptions import InvalidArgumentError

__all__ = [
    "HW_INIT",
    "CD_KICK_2",
    "CD_KICK_5",
    "cash_drawer",
    "paper_end_limit",
]

# =============================================================================
# INITIALIZATION
# =============================================================================

HW_INIT: Final[bytes] = b"\x1b\x40"
"""
Initialize printer.

Command: ESC @
Hex: 1B 40
Effect: Clears the print buffer and restores power-on print modes.
Notes:
    - The receive buffer is not cleared.
    - Macro definitions and NV bitmaps are kept.
Same bytes on SNBC and P3.
"""

# =============================================================================
# CASH DRAWER
# =============================================================================

CD_KICK_2: Final[bytes] = b"\x1b\x70\x00\x19\xfa"
"""
Pulse drawer kick-out connector pin 2.

Command: ESC p 0 t1 t2
Hex: 1B 70 00 19 FA
Pulse: on 25 x 2 ms, off 250 x 2 ms
"""

CD_KICK_5: Final[bytes] = b"\x1b\x70\x01\x19\xfa"
"""
Pulse drawer kick-out connector pin 5.

Command: ESC p 1 t1 t2
Hex: 1B 70 01 19 FA
"""


def cash_drawer(pin: int) -> bytes:
    """Pin 5 selects CD_KICK_5, any other value CD_KICK_2."""
    return CD_KICK_5 if pin == 5 else CD_KICK_2


# =============================================================================
# PAPER END LIMIT
# =============================================================================


def paper_end_limit(centimeters: int) -> bytes:
    """
    Set the remaining-paper threshold that triggers the paper-near-end signal.

    Command: GS 0xE6 nH nL
    Hex: 1D E6 nH nL

    Args:
        centimeters: Remaining length in cm (0-65535).
            nH = cm // 256, nL = cm - nH * 256.
            Example: 15 m = 1500 cm gives nH = 0x05, nL = 0xDC.

    Raises:
        InvalidArgumentError: If the length does not fit in 16 bits.
    """
    if not 0 <= centimeters <= 0xFFFF:
        raise InvalidArgumentError("paper end limit", centimeters)
    n_h, n_l = divmod(centimeters, 256)
    return b"\x1d\xe6" + bytes([n_h, n_l])
