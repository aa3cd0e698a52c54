"""
Centralized exceptions for the posify command layer.

Every error raised by the printer facade or the encoders derives from
PosifyError, so callers can abort a print job with a single ``except``.

Hierarchy:
    PosifyError (base)
    ├── UnsupportedOperationError   command has no encoding for the dialect
    ├── InvalidArgumentError        unrecognized enum-like argument
    ├── EncodingError               text could not be encoded for the sink
    ├── DecodingError               query response is not valid text
    └── ResponseTimeoutError        query response did not arrive in time

Nothing is written to the sink before UnsupportedOperationError or
InvalidArgumentError is raised for a single-command operation.

Example:
    >>> from posify.exceptions import PosifyError
    >>> try:
    ...     printer.full_cut()
    ... except UnsupportedOperationError as e:
    ...     printer.partial_cut()
"""

from __future__ import annotations

from typing import Any, Dict, Optional

__all__: list[str] = [
    "PosifyError",
    "UnsupportedOperationError",
    "InvalidArgumentError",
    "EncodingError",
    "DecodingError",
    "ResponseTimeoutError",
]


class PosifyError(Exception):
    """
    Base exception for all posify errors.

    Attributes:
        message: Human readable error message.
        context: Optional extra details for debugging (never raw payloads).
    """

    def __init__(
        self,
        message: str,
        *,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = dict(context) if context else {}

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{k}={v!r}" for k, v in sorted(self.context.items()))
        return f"{self.message} ({details})"


class UnsupportedOperationError(PosifyError):
    """The active printer dialect has no encoding for the requested command."""

    def __init__(
        self,
        command: str,
        dialect: Any,
        *,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        name = getattr(dialect, "name", str(dialect))
        super().__init__(
            f"Command '{command}' not supported by printer dialect {name}",
            context=context,
        )
        self.command = command
        self.dialect = dialect


class InvalidArgumentError(PosifyError, ValueError):
    """A caller supplied value is not one of the recognized choices."""

    def __init__(
        self,
        argument: str,
        value: Any,
        *,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(f"Invalid {argument}: {value}", context=context)
        self.argument = argument
        self.value = value


class EncodingError(PosifyError):
    """Text could not be encoded with the configured codec and error trap."""


class DecodingError(PosifyError):
    """A status query returned bytes that are not valid text."""

    def __init__(
        self,
        message: str,
        raw: bytes = b"",
        *,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, context=context)
        self.raw = raw


class ResponseTimeoutError(PosifyError, TimeoutError):
    """The device did not send the full fixed-size response before the deadline."""

    def __init__(self, expected: int, received: int, timeout: Optional[float]) -> None:
        super().__init__(
            f"Expected {expected} response bytes, received {received}",
            context={"timeout": timeout},
        )
        self.expected = expected
        self.received = received
        self.timeout = timeout
