from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
import sys
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from ifirma.domain.auth.credentials import AuthCredential
from ifirma.domain.invoice.entities import Address, Client, InvoiceRequest, Position
from ifirma.domain.invoice.vat import VatRate
from ifirma.infrastructure.http.transport import TransportRequest, TransportResponse

USERNAME = "$DEMO254343"
INVOICE_KEY_HEX = "C501C88284462384"
USER_KEY_HEX = "B83E825D4D28BD11"


class FakeTransport:
    """Records requests and replays queued responses in order."""

    def __init__(self, *responses: TransportResponse) -> None:
        self.requests: list[TransportRequest] = []
        self._responses = list(responses)
        self.closed = False

    def queue(self, response: TransportResponse) -> None:
        self._responses.append(response)

    def send(self, request: TransportRequest) -> TransportResponse:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"Unexpected request: {request.method} {request.url}")
        return self._responses.pop(0)

    def close(self) -> None:
        self.closed = True


def json_response(payload: Any, status_code: int = 200) -> TransportResponse:
    return TransportResponse(
        status_code=status_code,
        content=json.dumps(payload).encode("utf-8"),
        headers={"Content-Type": "application/json"},
    )


@pytest.fixture()
def credentials() -> AuthCredential:
    return AuthCredential.from_hex(USERNAME, INVOICE_KEY_HEX, USER_KEY_HEX)


@pytest.fixture()
def fake_transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def sample_client() -> Client:
    return Client("Acme", "PL1231231212", Address("Otwock", "00-000"), "e@x.com")


@pytest.fixture()
def sample_position() -> Position:
    return Position(VatRate.VAT_23, 2, 100.00, "Widget", "pcs")


@pytest.fixture()
def sample_invoice(sample_client: Client, sample_position: Position) -> InvoiceRequest:
    return InvoiceRequest(sample_client, [sample_position], issued_at=datetime(2024, 3, 15, 10, 30))
