from __future__ import annotations

from enum import Enum


class VatRate(float, Enum):
    """VAT rates accepted by the remote service, expressed as fractions.

    Positions also accept a plain float for rates not listed here.
    """

    VAT_0 = 0.00
    VAT_5 = 0.05
    VAT_8 = 0.08
    VAT_23 = 0.23
