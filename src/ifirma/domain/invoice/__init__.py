from __future__ import annotations

from ifirma.domain.invoice.entities import Address, Client, InvoiceRequest, Position
from ifirma.domain.invoice.exceptions import MissingFieldError
from ifirma.domain.invoice.vat import VatRate

__all__ = ["Address", "Client", "InvoiceRequest", "MissingFieldError", "Position", "VatRate"]
