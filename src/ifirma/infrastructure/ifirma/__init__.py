from __future__ import annotations

from ifirma.infrastructure.ifirma.client import DEFAULT_BASE_URL, IfirmaClient
from ifirma.infrastructure.ifirma.signer import build_authentication_header

__all__ = ["DEFAULT_BASE_URL", "IfirmaClient", "build_authentication_header"]
