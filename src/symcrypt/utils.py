# -*- coding: utf-8 -*-
"""
RU: Утилиты: ГСЧ с HKDF-микшированием и проверками энтропии, строгие кодеки
Hex/Base64 и сравнение в константное время.

EN: Helpers shared by key generation and the engine: a mixed-source RNG with
sanity checks, strict hex/base64 codecs and constant-time comparison.
"""
from __future__ import annotations

import base64
import binascii
import hmac
import logging
import os
import re
import secrets
from collections import Counter
from typing import Final, Union

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

_LOGGER: Final = logging.getLogger(__name__)

_MAX_RANDOM_BYTES: Final[int] = 1024 * 1024
_SMALL_APT_MIN_N: Final[int] = 32
_HEX_RE: Final = re.compile(r"\A(?:[0-9a-fA-F]{2})+\Z")


def generate_random_bytes(n: int) -> bytes:
    """
    Generate cryptographically secure random bytes.

    Uses dual-source XOR (os.urandom + secrets.token_bytes) mixed via
    HKDF-SHA256, then runs repetition/adaptive-proportion sanity checks.

    Args:
        n: number of bytes to generate (1..1MiB).

    Returns:
        Random bytes of requested length.

    Raises:
        ValueError: if n is out of range or the output looks degenerate.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0 or n > _MAX_RANDOM_BYTES:
        raise ValueError("Requested random size must be in 1..1MiB")

    src1 = os.urandom(n)
    src2 = secrets.token_bytes(n)
    ikm = bytes(a ^ b for a, b in zip(src1, src2))
    salt = src2[:16]
    hkdf = HKDF(algorithm=hashes.SHA256(), length=n, salt=salt, info=b"SYMCRYPT-RNG-v1")
    out = hkdf.derive(ikm)

    _rct_apt_checks(out)
    _LOGGER.debug("Generated %d random bytes", n)
    return out


def _rct_apt_checks(data: bytes) -> None:
    """
    Repetition Count Test (RCT) and Adaptive Proportion Test (APT) sanity checks.

    Raises:
        ValueError: if data fails basic entropy sanity checks.
    """
    if not data:
        raise ValueError("Empty data for entropy checks")
    if len(data) > 1 and all(b == data[0] for b in data):
        raise ValueError("Degenerate RNG output (all bytes equal)")
    if len(data) >= _SMALL_APT_MIN_N:
        freq: Counter[int] = Counter(data)
        max_prop = max(freq.values()) / float(len(data))
        if max_prop > 0.80:
            raise ValueError("RNG output fails adaptive proportion sanity check")


def secure_compare(a: Union[bytes, bytearray], b: Union[bytes, bytearray]) -> bool:
    """Constant-time bytes comparison."""
    return hmac.compare_digest(bytes(a), bytes(b))


def is_valid_hex(text: object) -> bool:
    """
    Check that ``text`` is non-empty hex made of whole bytes.

    Whitespace, ``0x`` prefixes and odd lengths are rejected, unlike
    ``bytes.fromhex``.
    """
    return isinstance(text, str) and _HEX_RE.match(text) is not None


def hex_encode(data: bytes) -> str:
    """Encode bytes to a lowercase hex string."""
    return data.hex()


def hex_decode(text: str) -> bytes:
    """
    Decode a hex string to bytes.

    Raises:
        ValueError: on anything :func:`is_valid_hex` rejects.
    """
    if not is_valid_hex(text):
        raise ValueError("Invalid hex string")
    return bytes.fromhex(text)


def b64_encode(data: bytes) -> str:
    """Encode bytes to base64 ASCII string (no newlines)."""
    return base64.b64encode(data).decode("ascii")


def b64_decode(text: str) -> bytes:
    """
    Decode base64 ASCII string to bytes.

    Raises:
        ValueError: on invalid base64.
    """
    try:
        return base64.b64decode(text.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise ValueError("Invalid base64 string") from exc


__all__ = [
    "generate_random_bytes",
    "secure_compare",
    "is_valid_hex",
    "hex_encode",
    "hex_decode",
    "b64_encode",
    "b64_decode",
]
