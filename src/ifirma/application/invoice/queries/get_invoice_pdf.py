from __future__ import annotations

import logging
from pathlib import Path

from ifirma.application.contracts.invoice_dtos import InvoicePdfDto, InvoicePdfRequest
from ifirma.domain.repositories.invoice_gateway import InvoiceGateway

logger = logging.getLogger(__name__)


class GetInvoicePdfQuery:
    """Fetch the PDF of an issued invoice, optionally saving it to disk."""

    def __init__(self, gateway: InvoiceGateway) -> None:
        self._gateway = gateway

    def execute(self, request: InvoicePdfRequest) -> InvoicePdfDto:
        content = self._gateway.get_invoice_pdf(request.invoice_id)
        if request.destination is None:
            return InvoicePdfDto(invoice_id=request.invoice_id, content=content)

        path = Path(request.destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
        logger.info("invoice.pdf.saved id=%s path=%s bytes=%d", request.invoice_id, path, len(content))
        return InvoicePdfDto(invoice_id=request.invoice_id, content=content, path=path)
