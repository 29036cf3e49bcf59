from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional


@dataclass(frozen=True)
class CreatedInvoiceDto:
    invoice_id: Any
    invoice_number: Optional[str]

    @property
    def is_issued(self) -> bool:
        return self.invoice_id is not None


@dataclass(frozen=True)
class InvoicePdfRequest:
    invoice_id: Any
    destination: Optional[Path] = None


@dataclass(frozen=True)
class InvoicePdfDto:
    invoice_id: Any
    content: bytes
    path: Optional[Path] = None
