from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ifirma.domain.invoice.entities import InvoiceRequest


@runtime_checkable
class InvoiceGateway(Protocol):
    """Remote store of issued invoices."""

    def create_invoice(self, invoice: InvoiceRequest) -> tuple[Optional[str], Optional[str]]:
        ...

    def get_invoice_number(self, invoice_id: str) -> Optional[str]:
        ...

    def get_invoice_pdf(self, invoice_id: str) -> bytes:
        ...
