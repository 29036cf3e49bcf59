from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Optional, Union

from ifirma.domain.invoice.exceptions import MissingFieldError
from ifirma.domain.invoice.vat import VatRate

Number = Union[int, float]


def _require(owner: str, field_name: str, value: Any) -> None:
    if value is None:
        raise MissingFieldError(owner, field_name)
    if isinstance(value, str) and not value.strip():
        raise MissingFieldError(owner, field_name)


@dataclass(frozen=True)
class Address:
    city: str
    zip_code: str
    street: Optional[str] = None
    country: Optional[str] = None

    def __post_init__(self) -> None:
        _require("Address", "city", self.city)
        _require("Address", "zip_code", self.zip_code)


@dataclass(frozen=True)
class Client:
    name: str
    tax_id: str
    address: Address
    email: Optional[str] = None
    phone_number: Optional[str] = None

    def __post_init__(self) -> None:
        _require("Client", "name", self.name)
        _require("Client", "tax_id", self.tax_id)
        _require("Client", "address", self.address)


@dataclass(frozen=True)
class Position:
    """A single line item of an invoice.

    ``discount_percent`` is applied multiplicatively to ``quantity * base_price``.
    ``pkwiu`` is carried as-is and never interpreted.
    """

    vat_rate: Union[VatRate, float]
    quantity: Number
    base_price: Number
    full_name: str
    unit: str
    pkwiu: Optional[str] = None
    discount_percent: Optional[Number] = None

    def __post_init__(self) -> None:
        _require("Position", "vat_rate", self.vat_rate)
        _require("Position", "quantity", self.quantity)
        _require("Position", "base_price", self.base_price)
        _require("Position", "full_name", self.full_name)
        _require("Position", "unit", self.unit)


@dataclass(frozen=True)
class InvoiceRequest:
    """A new domestic invoice: one client plus ordered positions.

    ``issued_at`` defaults to the construction time; its date is used both as
    the date of issue and the date of sale.
    """

    client: Client
    positions: tuple[Position, ...] = ()
    issued_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        _require("InvoiceRequest", "client", self.client)
        object.__setattr__(self, "positions", tuple(self.positions or ()))
        if self.issued_at is None:
            object.__setattr__(self, "issued_at", datetime.now())

    @property
    def issue_date(self) -> date:
        return self.issued_at.date()
