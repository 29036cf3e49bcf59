from __future__ import annotations

import logging

from ifirma.application.contracts.invoice_dtos import CreatedInvoiceDto
from ifirma.domain.invoice.entities import InvoiceRequest
from ifirma.domain.repositories.invoice_gateway import InvoiceGateway

logger = logging.getLogger(__name__)


class CreateInvoiceCommand:
    def __init__(self, gateway: InvoiceGateway) -> None:
        self._gateway = gateway

    def execute(self, request: InvoiceRequest) -> CreatedInvoiceDto:
        invoice_id, invoice_number = self._gateway.create_invoice(request)
        if invoice_id is None:
            logger.warning("invoice.create.no_identifier client=%s", request.client.name)
        return CreatedInvoiceDto(invoice_id=invoice_id, invoice_number=invoice_number)
