from __future__ import annotations

import hashlib
import hmac
from typing import Optional

from ifirma.domain.auth.credentials import INVOICE_KEY_NAME

AUTH_SCHEME = "IAPIS"


def build_request_hash_text(
    url: str,
    username: str,
    key_name: str = INVOICE_KEY_NAME,
    body: Optional[bytes] = None,
) -> bytes:
    """Concatenate URL, username, key name and body in the order the service hashes them."""
    text = f"{url}{username}{key_name}".encode("utf-8")
    if body:
        text += body
    return text


def sign(key: bytes, message: bytes) -> str:
    return hmac.new(key, message, hashlib.sha1).hexdigest()


def build_authentication_header(
    username: str,
    key: bytes,
    url: str,
    key_name: str = INVOICE_KEY_NAME,
    body: Optional[bytes] = None,
) -> str:
    """Return the ``Authentication`` header value for one request.

    ``body`` must be the exact bytes handed to the transport; any difference
    in whitespace or key order yields a signature the service rejects.
    """
    digest = sign(key, build_request_hash_text(url, username, key_name, body))
    return f"{AUTH_SCHEME} user={username}, hmac-sha1={digest}"
