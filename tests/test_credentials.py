from __future__ import annotations

import pytest

from conftest import FakeTransport, INVOICE_KEY_HEX, USER_KEY_HEX, USERNAME
from ifirma.domain.auth.credentials import AuthCredential, unhex_key
from ifirma.errors import CredentialError, IfirmaError
from ifirma.infrastructure.ifirma.client import IfirmaClient


def test_keys_are_decoded_at_construction(credentials: AuthCredential) -> None:
    assert credentials.username == USERNAME
    assert credentials.invoice_key == bytes.fromhex(INVOICE_KEY_HEX)
    assert credentials.user_key == bytes.fromhex(USER_KEY_HEX)
    assert credentials.has_user_key


def test_user_key_is_optional() -> None:
    credentials = AuthCredential.from_hex(USERNAME, INVOICE_KEY_HEX)

    assert credentials.user_key is None
    assert not credentials.has_user_key


def test_constructor_accepts_hex_text() -> None:
    credentials = AuthCredential(USERNAME, INVOICE_KEY_HEX, USER_KEY_HEX)

    assert credentials.invoice_key == bytes.fromhex(INVOICE_KEY_HEX)
    assert credentials.user_key == bytes.fromhex(USER_KEY_HEX)


@pytest.mark.parametrize("bad_key", ["XYZ123", "C501C8828446238", "", "   ", "ą1"])
def test_malformed_invoice_key_is_rejected(bad_key: str) -> None:
    with pytest.raises(CredentialError):
        AuthCredential.from_hex(USERNAME, bad_key)


def test_malformed_user_key_is_rejected() -> None:
    with pytest.raises(CredentialError):
        AuthCredential.from_hex(USERNAME, INVOICE_KEY_HEX, "not-hex")


def test_credential_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        unhex_key("zz")
    assert issubclass(CredentialError, IfirmaError)


def test_username_is_required() -> None:
    with pytest.raises(CredentialError):
        AuthCredential.from_hex("  ", INVOICE_KEY_HEX)


def test_repr_hides_keys(credentials: AuthCredential) -> None:
    text = repr(credentials)

    assert USERNAME in text
    assert "c501" not in text.lower()
    assert "\\x" not in text


def test_bad_key_never_reaches_the_network() -> None:
    transport = FakeTransport()

    with pytest.raises(CredentialError):
        IfirmaClient.from_keys(USERNAME, "not-hex", transport=transport)

    assert transport.requests == []


@pytest.mark.parametrize("blank", ["", "   "])
def test_blank_user_key_means_no_user_key(blank: str) -> None:
    assert AuthCredential.from_hex(USERNAME, INVOICE_KEY_HEX, blank).user_key is None
    assert AuthCredential(USERNAME, INVOICE_KEY_HEX, blank).user_key is None
