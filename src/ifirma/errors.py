from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class IfirmaError(Exception):
    """Base class for every error raised by this package."""


class CredentialError(IfirmaError, ValueError):
    """A secret key could not be decoded from hex, or the username is missing."""


class ConfigurationError(IfirmaError, ValueError):
    pass


class TransportError(IfirmaError):
    """The request never produced a response (connection, timeout, protocol)."""

    def __init__(self, message: str, *, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.url = url


class ServiceErrorKind(Enum):
    INVALID_PARAMETERS = 201
    MALFORMED_REQUEST = 400
    UNKNOWN = -1


_DEFAULT_MESSAGES = {
    ServiceErrorKind.INVALID_PARAMETERS: "Bad request parameters",
    ServiceErrorKind.MALFORMED_REQUEST: "Bad request structure",
    ServiceErrorKind.UNKNOWN: "Unknown error",
}


class ServiceError(IfirmaError):
    """The service answered with a non-zero ``Kod`` in its response envelope.

    ``kind`` is one of the closed set of ``ServiceErrorKind`` values; ``code``
    keeps the raw value reported by the service.
    """

    kind: ServiceErrorKind = ServiceErrorKind.UNKNOWN

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        code: Any = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message or _DEFAULT_MESSAGES[self.kind])
        self.code = self.kind.value if code is None else code
        self.details = details or {}

    @staticmethod
    def from_code(code: Any, details: Optional[dict[str, Any]] = None) -> "ServiceError":
        message = None
        if details:
            message = details.get("Informacja") or None
        if code == ServiceErrorKind.INVALID_PARAMETERS.value:
            return InvalidParametersError(message, code=code, details=details)
        if code == ServiceErrorKind.MALFORMED_REQUEST.value:
            return MalformedRequestError(message, code=code, details=details)
        return UnknownServiceError(message, code=code, details=details)


class InvalidParametersError(ServiceError):
    kind = ServiceErrorKind.INVALID_PARAMETERS


class MalformedRequestError(ServiceError):
    kind = ServiceErrorKind.MALFORMED_REQUEST


class UnknownServiceError(ServiceError):
    kind = ServiceErrorKind.UNKNOWN


class ProtocolError(UnknownServiceError):
    """The response body is not a JSON object carrying a ``response`` envelope."""
