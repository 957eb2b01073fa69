"""Error types raised across the SDA tool layer.

Purpose:
- Give every failure a machine-readable :class:`ErrorKind` so callers and
  tests can branch on it without parsing messages.
- Keep HTTP-oriented context (status code, raw body) attached to the error.

Usage:
- Lower layers raise the specific subclass (``TransportError``,
  ``ServerError``...).
- The dispatcher wraps whatever it caught into :class:`ToolInvocationError`,
  which is the only error handed back to the MCP caller.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    UNKNOWN_OPERATION = "unknown_operation"
    TRANSPORT = "transport"
    SERVER = "server"
    SERIALIZATION = "serialization"
    CANCELLED = "cancelled"


class SdaMcpError(Exception):
    """Base error for the SDA tool layer.

    Args:
        message: Human-readable error description.
        status_code: Optional HTTP status code associated with the failure.
        details: Optional payload from the server or parser (e.g., raw body).
    """

    kind: ErrorKind = ErrorKind.VALIDATION

    def __init__(self, message: str, *, status_code: Optional[int] = None, details: Optional[Any] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.details = details


class ValidationError(SdaMcpError):
    """Arguments are malformed or incomplete. Never reaches the network."""

    kind = ErrorKind.VALIDATION


class UnknownOperationError(ValidationError):
    kind = ErrorKind.UNKNOWN_OPERATION

    def __init__(self, name: str) -> None:
        super().__init__(f"unknown operation: '{name}'")
        self.name = name


class TransportError(SdaMcpError):
    """Connection, read or timeout failure talking to the archive API."""

    kind = ErrorKind.TRANSPORT


class ServerError(SdaMcpError):
    """Non-success HTTP status. ``details`` holds the response body verbatim."""

    kind = ErrorKind.SERVER

    def __init__(self, status_code: int, body: str = "") -> None:
        message = f"HTTP {status_code}: {body}" if body else f"HTTP {status_code}"
        super().__init__(message, status_code=status_code, details=body)

    @property
    def body(self) -> str:
        return self.details or ""


class SerializationError(SdaMcpError):
    kind = ErrorKind.SERIALIZATION


class OperationCancelledError(SdaMcpError):
    kind = ErrorKind.CANCELLED


class ToolInvocationError(SdaMcpError):
    """Failure of one tool invocation, decorated with what was being attempted.

    The rendered message reads ``failed to <action>: <cause>``. The root
    failure stays reachable through :attr:`cause` and :attr:`kind`.
    """

    def __init__(self, operation: str, action: str, cause: SdaMcpError) -> None:
        super().__init__(
            f"failed to {action}: {cause.message}",
            status_code=cause.status_code,
            details=cause.details,
        )
        self.operation = operation
        self.action = action
        self.cause = cause
        self.kind = cause.kind
