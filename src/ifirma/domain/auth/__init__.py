from __future__ import annotations

from ifirma.domain.auth.credentials import (
    INVOICE_KEY_NAME,
    USER_KEY_NAME,
    AuthCredential,
    CredentialError,
    unhex_key,
)

__all__ = ["INVOICE_KEY_NAME", "USER_KEY_NAME", "AuthCredential", "CredentialError", "unhex_key"]
