"""
Unit-тесты для видов ошибок.

Проверяет иерархию, форматирование сообщений и отсутствие секретов.
"""

from __future__ import annotations

import pytest

from symcrypt.core.exceptions import (
    AlgorithmKeyMismatch,
    CryptoError,
    CryptoKeyError,
    DecryptionFailed,
    EmptyPlaintext,
    EncryptionFailed,
    InternalFailure,
    InvalidEncoding,
    InvalidKeyLength,
    InvalidToken,
    KeyNotConfigured,
    UnsupportedOrInvalidAlgorithm,
)


@pytest.mark.parametrize(
    "error",
    [
        InvalidKeyLength(64, (128, 192, 256)),
        AlgorithmKeyMismatch("aes-256-gcm", 256, 128),
        KeyNotConfigured("ENCRYPTION_KEY_HEX"),
        InvalidEncoding("hex"),
        EmptyPlaintext(),
        UnsupportedOrInvalidAlgorithm("rot13"),
        InvalidToken("bad"),
        EncryptionFailed("x"),
        DecryptionFailed("x"),
        InternalFailure("encrypt", RuntimeError("boom")),
    ],
)
def test_all_kinds_are_crypto_errors(error: CryptoError) -> None:
    assert isinstance(error, CryptoError)
    assert error.kind == type(error).__name__
    assert str(error).startswith(type(error).__name__)


class TestCryptoError:
    def test_str_includes_algorithm_and_context(self) -> None:
        error = CryptoError("failed", algorithm="aes-128-cbc", context={"a": 1})
        assert str(error) == "CryptoError: failed [algorithm=aes-128-cbc] (a=1)"

    def test_cause_is_preserved(self) -> None:
        cause = ValueError("inner")
        error = DecryptionFailed("Failed to decrypt", cause=cause)
        assert error.__cause__ is cause

    def test_repr(self) -> None:
        assert repr(CryptoError("m")) == (
            "CryptoError(message='m', algorithm=None, context={})"
        )


def test_invalid_key_length_fields() -> None:
    error = InvalidKeyLength(64, [128, 192, 256])
    assert isinstance(error, CryptoKeyError)
    assert error.actual_bits == 64
    assert error.supported_bits == (128, 192, 256)
    assert "128, 192, 256" in error.message
    assert "64 bits" in error.message


def test_algorithm_key_mismatch_fields() -> None:
    error = AlgorithmKeyMismatch("aes-192-gcm", 192, 256)
    assert error.algorithm == "aes-192-gcm"
    assert error.expected_bits == 192
    assert error.actual_bits == 256
    assert error.message == (
        "Invalid key length for aes-192-gcm: expected 192 bits, got 256 bits"
    )


def test_unsupported_algorithm_truncates_long_values() -> None:
    value = "x" * 500
    error = UnsupportedOrInvalidAlgorithm(value)
    assert error.value == value
    assert len(error.context["value"]) < 40


def test_internal_failure_records_exception_class_only() -> None:
    cause = RuntimeError("secret-ish detail")
    error = InternalFailure("decrypt", cause, algorithm="aes-256-gcm")
    assert error.__cause__ is cause
    assert error.context == {"operation": "decrypt", "exception": "RuntimeError"}
    assert "secret-ish" not in str(error)
