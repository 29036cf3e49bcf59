from __future__ import annotations

import binascii
from dataclasses import dataclass
from typing import Optional

from ifirma.errors import CredentialError

INVOICE_KEY_NAME = "faktura"
USER_KEY_NAME = "abonent"


def unhex_key(text: str, *, key_name: str = INVOICE_KEY_NAME) -> bytes:
    raw = (text or "").strip()
    if not raw:
        raise CredentialError(f"Key '{key_name}' is empty.")
    try:
        return binascii.unhexlify(raw)
    except (binascii.Error, ValueError) as exc:
        raise CredentialError(f"Key '{key_name}' is not a valid hex value.") from exc


@dataclass(frozen=True, repr=False)
class AuthCredential:
    """API username plus decoded secret keys.

    Keys given as hex text are decoded once, at construction; a malformed key
    fails with ``CredentialError``.
    """

    username: str
    invoice_key: bytes
    user_key: Optional[bytes] = None

    def __post_init__(self) -> None:
        if not (self.username or "").strip():
            raise CredentialError("Username is required.")
        if isinstance(self.invoice_key, str):
            object.__setattr__(self, "invoice_key", unhex_key(self.invoice_key, key_name=INVOICE_KEY_NAME))
        if not self.invoice_key:
            raise CredentialError(f"Key '{INVOICE_KEY_NAME}' is required.")
        if isinstance(self.user_key, str):
            user_key = unhex_key(self.user_key, key_name=USER_KEY_NAME) if self.user_key.strip() else None
            object.__setattr__(self, "user_key", user_key)

    @classmethod
    def from_hex(
        cls,
        username: str,
        invoice_key_hex: str,
        user_key_hex: Optional[str] = None,
    ) -> "AuthCredential":
        return cls(
            username=(username or "").strip(),
            invoice_key=unhex_key(invoice_key_hex, key_name=INVOICE_KEY_NAME),
            user_key=unhex_key(user_key_hex, key_name=USER_KEY_NAME) if (user_key_hex or "").strip() else None,
        )

    @property
    def has_user_key(self) -> bool:
        return self.user_key is not None

    def __repr__(self) -> str:
        return f"AuthCredential(username={self.username!r}, user_key={'set' if self.has_user_key else 'unset'})"
