from __future__ import annotations

import json
from datetime import date
from decimal import Decimal
from typing import Any, Iterable, Optional

from ifirma.domain.invoice.entities import Client, InvoiceRequest, Position

SETTLEMENT_BASIS = "BRT"
SALE_DATE_FORMAT = "MSC"
PAYMENT_METHOD = "P24"
RECIPIENT_SIGNATURE_TYPE = "BPO"
VAT_RATE_TYPE = "PRC"

_HUNDRED = Decimal("100")


def _to_decimal(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    return Decimal(str(value))


def _to_json_number(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, float):
        # unwraps VatRate members
        return float(value)
    return value


def position_price(position: Position) -> Decimal:
    price = _to_decimal(position.quantity) * _to_decimal(position.base_price)
    if position.discount_percent:
        price *= 1 - _to_decimal(position.discount_percent) / _HUNDRED
    return price


def calculate_total_price(positions: Iterable[Position] | None) -> Decimal:
    total = Decimal("0")
    for position in positions or []:
        total += position_price(position)
    return total


def build_client_record(client: Client) -> dict[str, Optional[str]]:
    address = client.address
    return {
        "Nazwa": client.name,
        "NIP": client.tax_id,
        "KodPocztowy": address.zip_code,
        "Ulica": address.street,
        "Miejscowosc": address.city,
        "Kraj": address.country,
        "Email": client.email,
        "Telefon": client.phone_number,
    }


def build_position_record(position: Position) -> dict[str, Any]:
    return {
        "StawkaVat": _to_json_number(position.vat_rate),
        "Ilosc": _to_json_number(position.quantity),
        "CenaJednostkowa": _to_json_number(position.base_price),
        "NazwaPelna": position.full_name,
        "Jednostka": position.unit,
        "TypStawkiVat": VAT_RATE_TYPE,
        "Rabat": _to_json_number(position.discount_percent),
    }


def build_invoice_payload(invoice: InvoiceRequest, *, issue_date: Optional[date] = None) -> dict[str, Any]:
    """Map an invoice request onto the field set of ``fakturakraj.json``.

    The total is recomputed from the positions on every call. Both the date
    of issue and the date of sale come from ``issue_date``, which defaults to
    the date the request was issued at.
    """
    total_price = float(calculate_total_price(invoice.positions))
    date_str = (issue_date or invoice.issue_date).strftime("%Y-%m-%d")

    return {
        "Zaplacono": total_price,
        "ZaplaconoNaDokumencie": total_price,
        "LiczOd": SETTLEMENT_BASIS,
        "DataWystawienia": date_str,
        "DataSprzedazy": date_str,
        "FormatDatySprzedazy": SALE_DATE_FORMAT,
        "SposobZaplaty": PAYMENT_METHOD,
        "RodzajPodpisuOdbiorcy": RECIPIENT_SIGNATURE_TYPE,
        "WidocznyNumerGios": False,
        "Numer": None,
        "Pozycje": [build_position_record(position) for position in invoice.positions],
        "Kontrahent": build_client_record(invoice.client),
    }


def serialize_payload(payload: dict[str, Any]) -> bytes:
    """Encode a payload to the exact bytes that are signed and sent.

    Non-ASCII characters and slashes are written unescaped.
    """
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
