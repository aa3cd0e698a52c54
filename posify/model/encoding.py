"""
Text encoding policy for printer output.

A TextEncoding pairs a Python codec with an error trap (the ``errors``
argument of ``str.encode``). The default is UTF-8 with ``replace``, so
unencodable characters become ``?`` instead of failing the print job.

Supported traps: strict, replace, ignore, xmlcharrefreplace,
backslashreplace, namereplace.
"""

from __future__ import annotations

import codecs
import logging
from dataclasses import dataclass
from typing import Final

from posify.exceptions import EncodingError, InvalidArgumentError

logger: Final = logging.getLogger(__name__)

__all__ = ["TextEncoding", "DEFAULT_CODEC", "DEFAULT_ERRORS"]

DEFAULT_CODEC: Final[str] = "utf-8"
DEFAULT_ERRORS: Final[str] = "replace"

_KNOWN_TRAPS: Final[frozenset[str]] = frozenset(
    {"strict", "replace", "ignore", "xmlcharrefreplace", "backslashreplace", "namereplace"}
)


@dataclass(frozen=True, slots=True)
class TextEncoding:
    """Immutable codec + error trap pair."""

    codec: str = DEFAULT_CODEC
    errors: str = DEFAULT_ERRORS

    def __post_init__(self) -> None:
        try:
            codecs.lookup(self.codec)
        except LookupError as e:
            raise InvalidArgumentError("codec", self.codec) from e
        if self.errors not in _KNOWN_TRAPS:
            raise InvalidArgumentError("encoder trap", self.errors)

    def encode(self, text: str) -> bytes:
        """
        Encode text for the sink.

        Raises:
            EncodingError: if the text cannot be encoded even with the trap.
        """
        try:
            return text.encode(self.codec, self.errors)
        except UnicodeError as e:
            logger.error("Cannot encode text with %s/%s: %s", self.codec, self.errors, e)
            raise EncodingError(
                f"Cannot encode text with codec {self.codec}: {e}",
                context={"codec": self.codec, "errors": self.errors},
            ) from e
