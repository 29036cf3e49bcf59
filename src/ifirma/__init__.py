"""Client for the invoice endpoints of the iFirma API."""

from __future__ import annotations

from ifirma.domain.auth.credentials import AuthCredential
from ifirma.domain.invoice.entities import Address, Client, InvoiceRequest, Position
from ifirma.domain.invoice.exceptions import MissingFieldError
from ifirma.domain.invoice.vat import VatRate
from ifirma.errors import (
    ConfigurationError,
    CredentialError,
    IfirmaError,
    InvalidParametersError,
    MalformedRequestError,
    ProtocolError,
    ServiceError,
    ServiceErrorKind,
    TransportError,
    UnknownServiceError,
)
from ifirma.infrastructure.http.httpx_transport import HttpxTransport
from ifirma.infrastructure.ifirma.client import CreatedInvoice, IfirmaClient

__all__ = [
    "Address",
    "AuthCredential",
    "Client",
    "ConfigurationError",
    "CreatedInvoice",
    "CredentialError",
    "HttpxTransport",
    "IfirmaClient",
    "IfirmaError",
    "InvalidParametersError",
    "InvoiceRequest",
    "MalformedRequestError",
    "MissingFieldError",
    "Position",
    "ProtocolError",
    "ServiceError",
    "ServiceErrorKind",
    "TransportError",
    "UnknownServiceError",
    "VatRate",
]
