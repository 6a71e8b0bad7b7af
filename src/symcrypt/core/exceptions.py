# -*- coding: utf-8 -*-
"""
RU: Типизированные виды ошибок криптомодуля. Экземпляры возвращаются внутри
Err и не выбрасываются через публичную границу.

EN: Typed error kinds for the token cipher. Instances are returned inside
``Err`` values; the public API never raises them.

Hierarchy:
    CryptoError
    ├── CryptoKeyError
    │   ├── InvalidKeyLength
    │   ├── AlgorithmKeyMismatch
    │   └── KeyNotConfigured
    ├── InvalidEncoding
    ├── EmptyPlaintext
    ├── UnsupportedOrInvalidAlgorithm
    ├── InvalidToken
    ├── EncryptionFailed
    ├── DecryptionFailed
    └── InternalFailure

Security Note:
    Messages and context never carry keys, IVs, tags, plaintext or
    ciphertext. Only lengths, algorithm identifiers and exception class
    names are recorded.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

__all__: list[str] = [
    "CryptoError",
    "CryptoKeyError",
    "InvalidKeyLength",
    "AlgorithmKeyMismatch",
    "KeyNotConfigured",
    "InvalidEncoding",
    "EmptyPlaintext",
    "UnsupportedOrInvalidAlgorithm",
    "InvalidToken",
    "EncryptionFailed",
    "DecryptionFailed",
    "InternalFailure",
]


class CryptoError(Exception):
    """
    Base class for every error kind.

    Attributes:
        message: Human readable description.
        algorithm: Algorithm identifier involved, if any.
        context: Extra diagnostic fields (never secrets).

    The underlying exception, when there is one, is kept in ``__cause__``.
    """

    def __init__(
        self,
        message: str,
        *,
        algorithm: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.algorithm = algorithm
        self.context = context or {}
        self.__cause__ = cause

    @property
    def kind(self) -> str:
        return self.__class__.__name__

    def __str__(self) -> str:
        parts = [self.__class__.__name__, ": ", self.message]
        if self.algorithm:
            parts.append(f" [algorithm={self.algorithm}]")
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f" ({ctx_str})")
        return "".join(parts)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"algorithm={self.algorithm!r}, "
            f"context={self.context!r})"
        )


# ==============================================================================
# KEY ERRORS
# ==============================================================================


class CryptoKeyError(CryptoError):
    """Base class for key related failures."""


class InvalidKeyLength(CryptoKeyError):
    """Key length is not one of the supported lengths."""

    def __init__(self, actual_bits: int, supported_bits: Sequence[int]) -> None:
        supported = tuple(supported_bits)
        super().__init__(
            "Invalid key length: expected one of "
            f"{', '.join(str(b) for b in supported)} bits, got {actual_bits} bits",
            context={"actual_bits": actual_bits, "supported_bits": supported},
        )
        self.actual_bits = actual_bits
        self.supported_bits = supported


class AlgorithmKeyMismatch(CryptoKeyError):
    """Key length is valid in general but wrong for the selected algorithm."""

    def __init__(self, algorithm: str, expected_bits: int, actual_bits: int) -> None:
        super().__init__(
            f"Invalid key length for {algorithm}: expected {expected_bits} bits, "
            f"got {actual_bits} bits",
            algorithm=algorithm,
            context={"expected_bits": expected_bits, "actual_bits": actual_bits},
        )
        self.expected_bits = expected_bits
        self.actual_bits = actual_bits


class KeyNotConfigured(CryptoKeyError):
    """No key material found in the configured environment variable."""

    def __init__(self, env_var: str) -> None:
        super().__init__(
            f"Environment variable {env_var} is not set",
            context={"env_var": env_var},
        )
        self.env_var = env_var


# ==============================================================================
# INPUT ERRORS
# ==============================================================================


class InvalidEncoding(CryptoError):
    """Input string is not valid in the declared encoding."""

    def __init__(
        self,
        encoding: str,
        message: Optional[str] = None,
        *,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(
            message or f"Input is not valid {encoding}",
            context={"encoding": encoding},
            cause=cause,
        )
        self.encoding = encoding


class EmptyPlaintext(CryptoError):
    """Encrypt was called with an empty plaintext."""

    def __init__(self) -> None:
        super().__init__("Plaintext cannot be empty")


class UnsupportedOrInvalidAlgorithm(CryptoError):
    """Algorithm identifier is not one of the supported identifiers."""

    def __init__(self, value: object) -> None:
        # Identifiers can come from untrusted tokens; keep the echo short.
        shown = str(value)
        if len(shown) > 32:
            shown = shown[:32] + "..."
        super().__init__(
            f"Unsupported or invalid algorithm: {shown!r}",
            context={"value": shown},
        )
        self.value = value


class InvalidToken(CryptoError):
    """Token failed structural parsing."""

    def __init__(self, reason: str, *, algorithm: Optional[str] = None) -> None:
        super().__init__(
            f"Invalid token: {reason}",
            algorithm=algorithm,
            context={"reason": reason},
        )
        self.reason = reason


# ==============================================================================
# OPERATION ERRORS
# ==============================================================================


class EncryptionFailed(CryptoError):
    """Cipher failed while encrypting."""


class DecryptionFailed(CryptoError):
    """Cipher or authentication failed, or the decrypted buffer was unusable."""


class InternalFailure(CryptoError):
    """Unexpected exception from an underlying primitive."""

    def __init__(
        self,
        operation: str,
        cause: BaseException,
        *,
        algorithm: Optional[str] = None,
    ) -> None:
        super().__init__(
            f"{operation} encountered an exception",
            algorithm=algorithm,
            context={"operation": operation, "exception": type(cause).__name__},
            cause=cause,
        )
        self.operation = operation
