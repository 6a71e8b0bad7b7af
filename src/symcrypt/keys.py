# -*- coding: utf-8 -*-
"""
RU: Симметричный ключ фиксированной длины. Длина проверяется на каждом пути
создания; фабрики возвращают Result вместо исключений.

EN: Validated fixed-length symmetric key. Every construction path checks the
length against the registry; the factories return ``Result`` values.

Example:
    >>> res = SymmetricKey.from_encoded(os.environ["ENCRYPTION_KEY_HEX"], "hex")
    >>> if res.is_err():
    ...     logger.error("bad key: %s", res.error)
    >>> key = res.unwrap()

Security notes:
    - ``repr`` never shows key bytes.
    - Python ``bytes`` cannot be wiped; keep key objects short-lived.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Final, Union

from symcrypt.core.exceptions import (
    CryptoError,
    InternalFailure,
    InvalidEncoding,
    InvalidKeyLength,
)
from symcrypt.core.registry import SUPPORTED_KEY_LENGTHS, is_supported_key_length
from symcrypt.core.result import Err, Ok, Result
from symcrypt.utils import (
    b64_decode,
    b64_encode,
    generate_random_bytes,
    hex_decode,
    hex_encode,
    secure_compare,
)

_LOGGER: Final = logging.getLogger(__name__)

__all__ = ["KeyEncoding", "SymmetricKey"]


class KeyEncoding(str, Enum):
    """Text encodings accepted for key material."""

    HEX = "hex"
    BASE64 = "base64"


class SymmetricKey:
    """
    Immutable holder of raw key bytes.

    Use :meth:`generate` or :meth:`from_encoded`. Calling the constructor
    directly with a bad length raises :class:`InvalidKeyLength`, so no
    instance ever violates the length invariant.
    """

    __slots__ = ("_raw",)

    def __init__(self, raw_key: Union[bytes, bytearray]) -> None:
        if not isinstance(raw_key, (bytes, bytearray)):
            raise TypeError(f"Key must be bytes, got {type(raw_key).__name__}")
        bits = len(raw_key) * 8
        if not is_supported_key_length(bits):
            raise InvalidKeyLength(bits, SUPPORTED_KEY_LENGTHS)
        object.__setattr__(self, "_raw", bytes(raw_key))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("SymmetricKey is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError("SymmetricKey is immutable")

    @property
    def raw_key(self) -> bytes:
        return self._raw

    @property
    def length_bits(self) -> int:
        return len(self._raw) * 8

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SymmetricKey):
            return NotImplemented
        return secure_compare(self._raw, other._raw)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"SymmetricKey(length_bits={self.length_bits})"

    # ---- factories ----

    @classmethod
    def generate(cls, length_bits: int) -> Result[SymmetricKey, CryptoError]:
        """
        Generate a random key.

        Args:
            length_bits: one of 128, 192, 256.

        Returns:
            ``Ok(key)``, ``Err(InvalidKeyLength)`` for unsupported sizes, or
            ``Err(InternalFailure)`` if the RNG fails.
        """
        if (
            isinstance(length_bits, bool)
            or not isinstance(length_bits, int)
            or not is_supported_key_length(length_bits)
        ):
            bits = length_bits if isinstance(length_bits, int) else -1
            return Err(InvalidKeyLength(bits, SUPPORTED_KEY_LENGTHS))
        try:
            return Ok(cls(generate_random_bytes(length_bits // 8)))
        except Exception as exc:
            _LOGGER.error("Key generation failed: %s", exc.__class__.__name__)
            return Err(InternalFailure("generate", exc))

    @classmethod
    def from_encoded(
        cls,
        text: str,
        encoding: Union[KeyEncoding, str] = KeyEncoding.HEX,
    ) -> Result[SymmetricKey, CryptoError]:
        """
        Decode key material from text.

        Args:
            text: encoded key.
            encoding: ``"hex"`` (default) or ``"base64"``.

        Returns:
            ``Ok(key)``; ``Err(InvalidEncoding)`` if the text does not decode
            or the encoding is unknown; ``Err(InvalidKeyLength)`` if the
            decoded length is unsupported.
        """
        try:
            enc = KeyEncoding(encoding)
        except ValueError:
            return Err(
                InvalidEncoding(str(encoding), f"Unsupported key encoding: {encoding!s}")
            )

        if not isinstance(text, str):
            return Err(InvalidEncoding(enc.value, "Key material must be a string"))

        try:
            raw = hex_decode(text) if enc is KeyEncoding.HEX else b64_decode(text)
        except ValueError as exc:
            _LOGGER.debug("Key material is not valid %s", enc.value)
            return Err(InvalidEncoding(enc.value, cause=exc))

        bits = len(raw) * 8
        if not is_supported_key_length(bits):
            return Err(InvalidKeyLength(bits, SUPPORTED_KEY_LENGTHS))
        try:
            return Ok(cls(raw))
        except Exception as exc:
            return Err(InternalFailure("from_encoded", exc))

    def to_encoded(self, encoding: Union[KeyEncoding, str] = KeyEncoding.HEX) -> str:
        """
        Encode the key as text (inverse of :meth:`from_encoded`).

        Raises:
            ValueError: for an unknown encoding.
        """
        enc = KeyEncoding(encoding)
        if enc is KeyEncoding.HEX:
            return hex_encode(self._raw)
        return b64_encode(self._raw)
