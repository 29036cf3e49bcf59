from __future__ import annotations

import json
import logging
import re
from typing import Any, NamedTuple, Optional

from ifirma.application.invoice.payload_builder import build_invoice_payload, serialize_payload
from ifirma.domain.auth.credentials import INVOICE_KEY_NAME, AuthCredential
from ifirma.domain.invoice.entities import InvoiceRequest
from ifirma.errors import ProtocolError, ServiceError
from ifirma.infrastructure.http.httpx_transport import HttpxTransport
from ifirma.infrastructure.http.transport import Transport, TransportRequest, TransportResponse
from ifirma.infrastructure.ifirma.signer import build_authentication_header

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://www.ifirma.pl/iapi"

_JSON_CONTENT_TYPE = "application/json; charset=UTF-8"
_PDF_CONTENT_TYPE = "application/pdf; charset=UTF-8"


class CreatedInvoice(NamedTuple):
    invoice_id: Any
    invoice_number: Optional[str]


def _decode_json(resp: TransportResponse) -> Any:
    try:
        return json.loads(resp.content.decode("utf-8"))
    except (UnicodeDecodeError, ValueError) as exc:
        raise ProtocolError("Response body is not valid JSON", code=-1) from exc


def _unwrap_envelope(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict) or not isinstance(data.get("response"), dict):
        raise ProtocolError("Unknown error", code=-1)
    return data["response"]


_NUMERIC_CODE = re.compile(r"-?[0-9]+")


def _response_code(envelope: dict[str, Any]) -> Any:
    code = envelope.get("Kod", -1)
    if isinstance(code, str) and _NUMERIC_CODE.fullmatch(code.strip()):
        return int(code)
    if isinstance(code, bool):
        return -1
    return code


class IfirmaClient:
    """Signed calls against the invoice endpoints of the iFirma API.

    Every call is self-contained: it builds its own body and headers, signs
    them with the invoice key and hands them to the transport once.
    """

    def __init__(
        self,
        credentials: AuthCredential,
        transport: Transport,
        base_url: str = DEFAULT_BASE_URL,
        *,
        owns_transport: bool = False,
    ) -> None:
        self.credentials = credentials
        self._transport = transport
        self._base_url = base_url.rstrip("/")
        self._owns_transport = owns_transport

    @classmethod
    def from_keys(
        cls,
        username: str,
        invoice_key_hex: str,
        user_key_hex: Optional[str] = None,
        *,
        transport: Optional[Transport] = None,
        base_url: str = DEFAULT_BASE_URL,
    ) -> "IfirmaClient":
        """Decode the hex keys and build a client, with an httpx transport by default."""
        credentials = AuthCredential.from_hex(username, invoice_key_hex, user_key_hex)
        if transport is None:
            return cls(credentials, HttpxTransport(), base_url, owns_transport=True)
        return cls(credentials, transport, base_url)

    def __enter__(self) -> "IfirmaClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_transport:
            self._transport.close()

    # urls

    def invoice_create_url(self) -> str:
        return f"{self._base_url}/fakturakraj.json"

    def invoice_url(self, invoice_id: Any) -> str:
        return f"{self._base_url}/fakturakraj/{invoice_id}.json"

    def invoice_pdf_url(self, invoice_id: Any) -> str:
        return f"{self._base_url}/fakturakraj/{invoice_id}.pdf"

    # headers

    def _headers(self, url: str, content_type: str, body: Optional[bytes] = None) -> dict[str, str]:
        accept = content_type.split(";", 1)[0]
        return {
            "Accept": accept,
            "Content-type": content_type,
            "Authentication": build_authentication_header(
                self.credentials.username,
                self.credentials.invoice_key,
                url,
                INVOICE_KEY_NAME,
                body,
            ),
        }

    def _send(self, method: str, url: str, content_type: str, body: Optional[bytes] = None) -> TransportResponse:
        request = TransportRequest(
            method=method,
            url=url,
            headers=self._headers(url, content_type, body),
            body=body,
        )
        resp = self._transport.send(request)
        if not resp.is_success:
            logger.warning("ifirma.http_status method=%s url=%s status=%s", method, url, resp.status_code)
        return resp

    # operations

    def create_invoice(self, invoice: InvoiceRequest) -> CreatedInvoice:
        """Issue a domestic invoice and resolve its full number.

        Returns ``(None, None)`` when the service accepts the request but
        reports no identifier; the number is not looked up in that case.
        """
        url = self.invoice_create_url()
        body = serialize_payload(build_invoice_payload(invoice))
        logger.info(
            "ifirma.create_invoice url=%s user=%s positions=%d",
            url,
            self.credentials.username,
            len(invoice.positions),
        )

        envelope = _unwrap_envelope(_decode_json(self._send("POST", url, _JSON_CONTENT_TYPE, body)))
        code = _response_code(envelope)
        if code != 0:
            logger.warning("ifirma.create_invoice.rejected code=%s", code)
            raise ServiceError.from_code(code, envelope)

        invoice_id = envelope.get("Identyfikator")
        if not invoice_id:
            logger.info("ifirma.create_invoice.no_identifier")
            return CreatedInvoice(None, None)

        return CreatedInvoice(invoice_id, self.get_invoice_number(invoice_id))

    def get_invoice_number(self, invoice_id: Any) -> Optional[str]:
        # The envelope code is not checked here, only logged.
        url = self.invoice_url(invoice_id)
        logger.info("ifirma.get_invoice_number id=%s", invoice_id)
        try:
            data = _decode_json(self._send("GET", url, _JSON_CONTENT_TYPE))
        except ProtocolError:
            logger.warning("ifirma.get_invoice_number.not_json id=%s", invoice_id)
            return None

        envelope = data.get("response") if isinstance(data, dict) else None
        if not isinstance(envelope, dict):
            logger.warning("ifirma.get_invoice_number.no_envelope id=%s", invoice_id)
            return None
        code = _response_code(envelope)
        if code != 0:
            logger.warning("ifirma.get_invoice_number.code id=%s code=%s", invoice_id, code)
        return envelope.get("PelnyNumer")

    def get_invoice_pdf(self, invoice_id: Any) -> bytes:
        url = self.invoice_pdf_url(invoice_id)
        logger.info("ifirma.get_invoice_pdf id=%s", invoice_id)
        return self._send("GET", url, _PDF_CONTENT_TYPE).content

