from __future__ import annotations

from ifirma.infrastructure.http.httpx_transport import HttpxTransport
from ifirma.infrastructure.http.transport import Transport, TransportRequest, TransportResponse

__all__ = ["HttpxTransport", "Transport", "TransportRequest", "TransportResponse"]
