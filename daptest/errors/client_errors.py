"""Error hierarchy for the daptest client.

Connection failures are fatal and propagate to the caller. Wire-level errors
(framing and decoding) are raised by the codec and turned into soft test
failures by the expectation accessors. A message of the wrong kind raises
:class:`UnexpectedMessageError`, which pytest reports as an assertion failure.
"""

from __future__ import annotations

from typing import Any


class DapTestError(Exception):
    """Base exception for all daptest errors."""

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a dictionary for reporting."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message} (caused by: {self.cause!s})"
        return self.message


class ConfigurationError(DapTestError):
    """Raised when the client configuration is invalid."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, error_code="ConfigurationError", details=details, **kwargs)
        self.config_key = config_key


class DapConnectionError(DapTestError):
    """Raised when the transport cannot be established or is not open."""

    def __init__(
        self,
        message: str,
        *,
        address: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if address:
            details["address"] = address
        super().__init__(message, error_code="ConnectionError", details=details, **kwargs)
        self.address = address


class ProtocolError(DapTestError):
    """Raised when a message on the wire violates the DAP base protocol."""

    def __init__(
        self,
        message: str,
        *,
        command: str | None = None,
        sequence: int | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        error_code = kwargs.pop("error_code", "ProtocolError")
        if command:
            details["command"] = command
        if sequence is not None:
            details["sequence"] = sequence
        super().__init__(message, error_code=error_code, details=details, **kwargs)
        self.command = command
        self.sequence = sequence


class FramingError(ProtocolError):
    """Raised for a malformed header or a truncated message body."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message, error_code="FramingError", **kwargs)


class MessageDecodeError(ProtocolError):
    """Raised when a framed payload cannot be decoded into a known message kind.

    ``field`` names the offending top-level field (``type``, ``command`` or
    ``event``) when the payload was valid JSON but used unknown vocabulary.
    """

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        value: Any = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if field:
            details["field"] = field
            details["value"] = value
        super().__init__(message, error_code="MessageDecodeError", details=details, **kwargs)
        self.field = field
        self.value = value


class UnexpectedMessageError(DapTestError, AssertionError):
    """Raised when the next decoded message is not of the expected kind."""

    def __init__(
        self,
        expected: str,
        received: str,
        received_message: dict[str, Any] | None = None,
    ) -> None:
        message = f"expected {expected}, got {received}: {received_message!r}"
        super().__init__(
            message,
            error_code="UnexpectedMessage",
            details={"expected": expected, "received": received},
        )
        self.expected = expected
        self.received = received
        self.received_message = received_message
