"""Runtime configuration loaded from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from ifirma.errors import ConfigurationError
from ifirma.infrastructure.http.httpx_transport import DEFAULT_TIMEOUT_S
from ifirma.infrastructure.ifirma.client import DEFAULT_BASE_URL


def clean_env_value(value: Optional[str]) -> str:
    """Strip whitespace and surrounding quotes from an environment value."""
    if not value:
        return ""
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in {'"', "'"}:
        value = value[1:-1]
    return value.strip()


def env_float(name: str, default: float) -> float:
    raw = clean_env_value(os.getenv(name))
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True, repr=False)
class IfirmaSettings:
    username: str
    invoice_key: str
    user_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    timeout_s: float = DEFAULT_TIMEOUT_S

    @classmethod
    def from_env(cls) -> "IfirmaSettings":
        username = clean_env_value(os.getenv("IFIRMA_USERNAME"))
        invoice_key = clean_env_value(os.getenv("IFIRMA_INVOICE_KEY"))

        missing = [
            name
            for name, value in {
                "IFIRMA_USERNAME": username,
                "IFIRMA_INVOICE_KEY": invoice_key,
            }.items()
            if not value
        ]
        if missing:
            raise ConfigurationError(f"Missing environment variables: {', '.join(missing)}")

        return cls(
            username=username,
            invoice_key=invoice_key,
            user_key=clean_env_value(os.getenv("IFIRMA_USER_KEY")) or None,
            base_url=clean_env_value(os.getenv("IFIRMA_BASE_URL")) or DEFAULT_BASE_URL,
            timeout_s=env_float("IFIRMA_TIMEOUT_S", DEFAULT_TIMEOUT_S),
        )

    def __repr__(self) -> str:
        return f"IfirmaSettings(username={self.username!r}, base_url={self.base_url!r}, timeout_s={self.timeout_s!r})"
