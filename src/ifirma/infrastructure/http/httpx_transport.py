from __future__ import annotations

import logging
from typing import Optional

import httpx

from ifirma.errors import TransportError
from ifirma.infrastructure.http.transport import TransportRequest, TransportResponse

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_S = 8.0


class HttpxTransport:
    """Blocking transport backed by ``httpx.Client``.

    A client passed in by the caller is left open on ``close()``.
    """

    def __init__(self, client: Optional[httpx.Client] = None, timeout_s: float = DEFAULT_TIMEOUT_S) -> None:
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout_s)

    def send(self, request: TransportRequest) -> TransportResponse:
        logger.debug("http.send method=%s url=%s", request.method, request.url)
        try:
            resp = self._client.request(
                request.method,
                request.url,
                headers=dict(request.headers),
                content=request.body,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            logger.warning("http.failed method=%s url=%s error=%s", request.method, request.url, type(exc).__name__)
            raise TransportError(f"{request.method} {request.url} failed: {exc}", url=request.url) from exc

        logger.debug("http.done url=%s status=%s bytes=%d", request.url, resp.status_code, len(resp.content))
        return TransportResponse(
            status_code=resp.status_code,
            content=resp.content,
            headers=dict(resp.headers),
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()
