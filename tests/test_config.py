from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from ifirma import env as env_module
from ifirma.config import IfirmaSettings, clean_env_value, env_float
from ifirma.errors import ConfigurationError
from ifirma.infrastructure.ifirma.client import DEFAULT_BASE_URL
from ifirma.logging_setup import setup_logging

_ENV_NAMES = ["IFIRMA_USERNAME", "IFIRMA_INVOICE_KEY", "IFIRMA_USER_KEY", "IFIRMA_BASE_URL", "IFIRMA_TIMEOUT_S"]


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _ENV_NAMES:
        # setenv first so values written by load_env are removed on teardown
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


def test_clean_env_value_strips_quotes_and_whitespace() -> None:
    assert clean_env_value('  "abc"  ') == "abc"
    assert clean_env_value("'abc'") == "abc"
    assert clean_env_value(None) == ""
    assert clean_env_value('"') == '"'


def test_env_float_falls_back_on_invalid_values(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("IFIRMA_TIMEOUT_S", "abc")
    assert env_float("IFIRMA_TIMEOUT_S", 8.0) == 8.0
    clean_env.setenv("IFIRMA_TIMEOUT_S", "-1")
    assert env_float("IFIRMA_TIMEOUT_S", 8.0) == 8.0
    clean_env.setenv("IFIRMA_TIMEOUT_S", "2.5")
    assert env_float("IFIRMA_TIMEOUT_S", 8.0) == 2.5


def test_settings_from_env(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("IFIRMA_USERNAME", '"$DEMO254343"')
    clean_env.setenv("IFIRMA_INVOICE_KEY", "C501C88284462384")
    clean_env.setenv("IFIRMA_USER_KEY", "B83E825D4D28BD11")
    clean_env.setenv("IFIRMA_TIMEOUT_S", "3")

    settings = IfirmaSettings.from_env()

    assert settings.username == "$DEMO254343"
    assert settings.invoice_key == "C501C88284462384"
    assert settings.user_key == "B83E825D4D28BD11"
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout_s == 3.0
    assert "C501" not in repr(settings)


def test_settings_report_missing_variables(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv("IFIRMA_USERNAME", "user")

    with pytest.raises(ConfigurationError) as exc_info:
        IfirmaSettings.from_env()

    assert "IFIRMA_INVOICE_KEY" in str(exc_info.value)
    assert "IFIRMA_USERNAME" not in str(exc_info.value)


def test_load_env_reads_dotenv_without_overriding(
    clean_env: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    (tmp_path / ".env").write_text(
        "IFIRMA_USERNAME=from-file\nIFIRMA_INVOICE_KEY=C501C88284462384\n",
        encoding="utf-8",
    )
    clean_env.setattr(env_module, "_LOADED", False)
    clean_env.setattr(env_module, "_candidates", lambda: [tmp_path / "missing.env", tmp_path / ".env"])
    clean_env.setenv("IFIRMA_USERNAME", "from-process")

    loaded = env_module.load_env()

    assert loaded == tmp_path / ".env"
    settings = IfirmaSettings.from_env()
    assert settings.username == "from-process"
    assert settings.invoice_key == "C501C88284462384"
    assert env_module.load_env() is None


@pytest.fixture()
def pristine_root_logger():
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    configured = getattr(root_logger, "_ifirma_logging_configured", False)
    root_logger._ifirma_logging_configured = False
    yield root_logger
    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
    root_logger._ifirma_logging_configured = configured


def test_setup_logging_with_file_handler(
    pristine_root_logger: logging.Logger, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("IFIRMA_DEBUG", raising=False)
    monkeypatch.delenv("IFIRMA_LOG_DIR", raising=False)

    setup_logging(tmp_path / "logs")

    assert pristine_root_logger.level == logging.INFO
    file_handlers = [h for h in pristine_root_logger.handlers if isinstance(h, RotatingFileHandler)]
    assert len(file_handlers) == 1
    assert (tmp_path / "logs").is_dir()


def test_setup_logging_is_idempotent_and_honours_debug(
    pristine_root_logger: logging.Logger, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("IFIRMA_DEBUG", raising=False)
    monkeypatch.delenv("IFIRMA_LOG_DIR", raising=False)

    setup_logging()
    handler_count = len(pristine_root_logger.handlers)
    monkeypatch.setenv("IFIRMA_DEBUG", "1")
    setup_logging()

    assert len(pristine_root_logger.handlers) == handler_count
    assert pristine_root_logger.level == logging.DEBUG
