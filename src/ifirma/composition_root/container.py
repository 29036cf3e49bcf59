from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ifirma.application.invoice.commands.create_invoice import CreateInvoiceCommand
from ifirma.application.invoice.queries.get_invoice_number import GetInvoiceNumberQuery
from ifirma.application.invoice.queries.get_invoice_pdf import GetInvoicePdfQuery
from ifirma.config import IfirmaSettings
from ifirma.domain.auth.credentials import AuthCredential
from ifirma.env import load_env
from ifirma.infrastructure.http.httpx_transport import HttpxTransport
from ifirma.infrastructure.http.transport import Transport
from ifirma.infrastructure.ifirma.client import IfirmaClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IfirmaContainer:
    settings: IfirmaSettings
    client: IfirmaClient
    create_invoice_command: CreateInvoiceCommand
    get_invoice_number_query: GetInvoiceNumberQuery
    get_invoice_pdf_query: GetInvoicePdfQuery

    def close(self) -> None:
        self.client.close()


def create_ifirma_container(
    settings: Optional[IfirmaSettings] = None,
    transport: Optional[Transport] = None,
) -> IfirmaContainer:
    if settings is None:
        load_env()
        settings = IfirmaSettings.from_env()

    credentials = AuthCredential.from_hex(settings.username, settings.invoice_key, settings.user_key)
    owns_transport = transport is None
    if transport is None:
        transport = HttpxTransport(timeout_s=settings.timeout_s)

    client = IfirmaClient(credentials, transport, settings.base_url, owns_transport=owns_transport)
    logger.debug("ifirma.container user=%s base_url=%s", credentials.username, settings.base_url)

    return IfirmaContainer(
        settings=settings,
        client=client,
        create_invoice_command=CreateInvoiceCommand(client),
        get_invoice_number_query=GetInvoiceNumberQuery(client),
        get_invoice_pdf_query=GetInvoicePdfQuery(client),
    )
