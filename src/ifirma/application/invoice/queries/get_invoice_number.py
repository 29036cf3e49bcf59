from __future__ import annotations

from typing import Any, Optional

from ifirma.domain.repositories.invoice_gateway import InvoiceGateway


class GetInvoiceNumberQuery:
    def __init__(self, gateway: InvoiceGateway) -> None:
        self._gateway = gateway

    def execute(self, invoice_id: Any) -> Optional[str]:
        return self._gateway.get_invoice_number(invoice_id)
