"""
Unit-тесты для пакета symcrypt: метаданные, публичный API и логирование.
"""

from __future__ import annotations

import logging
import logging.handlers
import re
from pathlib import Path

import pytest

import symcrypt


def test_version_format() -> None:
    assert re.match(r"^\d+\.\d+\.\d+$", symcrypt.__version__)


def test_public_api_exports() -> None:
    for name in symcrypt.__all__:
        assert hasattr(symcrypt, name), name


def test_top_level_usage() -> None:
    key = symcrypt.SymmetricKey.generate(128).unwrap()
    token = symcrypt.encrypt("aes-128-cbc", key, "hello").unwrap().token
    assert symcrypt.decrypt(token, key) == symcrypt.Ok("hello")


class TestLogging:
    def test_package_logger_configured(self) -> None:
        logger = logging.getLogger(symcrypt.LOGGER_NAME)
        assert logger.handlers
        assert logger.propagate is False

    def test_setup_is_idempotent(self) -> None:
        logger = logging.getLogger(symcrypt.LOGGER_NAME)
        before = list(logger.handlers)
        symcrypt._setup_logging()
        assert logger.handlers == before

    def test_level_and_file_from_env(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        logger = logging.getLogger(symcrypt.LOGGER_NAME)
        saved_handlers = list(logger.handlers)
        saved_level = logger.level
        log_file = tmp_path / "symcrypt.log"
        monkeypatch.setenv("SYMCRYPT_LOG_LEVEL", "debug")
        monkeypatch.setenv("SYMCRYPT_LOG_FILE", str(log_file))
        try:
            logger.handlers = []
            symcrypt._setup_logging()
            assert logger.level == logging.DEBUG
            assert any(
                isinstance(h, logging.handlers.RotatingFileHandler) for h in logger.handlers
            )
            symcrypt.get_logger("test").debug("written")
            for handler in logger.handlers:
                handler.flush()
            assert "written" in log_file.read_text(encoding="utf-8")
        finally:
            for handler in logger.handlers:
                handler.close()
            logger.handlers = saved_handlers
            logger.setLevel(saved_level)

    def test_get_logger_namespacing(self) -> None:
        assert symcrypt.get_logger("x").name == "symcrypt.x"
        assert symcrypt.get_logger("symcrypt.keys").name == "symcrypt.keys"
