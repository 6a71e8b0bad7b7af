# -*- coding: utf-8 -*-
"""
RU: Статический реестр поддерживаемых симметричных алгоритмов: длина ключа,
длина IV и порядок полей токена.

EN: Static registry of the supported symmetric algorithms. Each identifier
maps to exactly one immutable descriptor holding the key length, IV length and
token field order.

Example:
    >>> from symcrypt.core.registry import get_descriptor
    >>> desc = get_descriptor("aes-256-gcm").unwrap()
    >>> desc.key_length_bits, desc.iv_length_bytes, desc.is_aead
    (256, 11, True)

Thread Safety:
    The table is built at import time and exposed read-only, so lookups need
    no locking.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Final, Mapping, Tuple, Union

from symcrypt.core.exceptions import UnsupportedOrInvalidAlgorithm
from symcrypt.core.result import Err, Ok, Result

logger = logging.getLogger(__name__)

__all__ = [
    "SymmetricAlgorithm",
    "CipherMode",
    "TokenField",
    "AlgorithmDescriptor",
    "AEAD_FIELD_ORDER",
    "BLOCK_FIELD_ORDER",
    "SUPPORTED_KEY_LENGTHS",
    "get_descriptor",
    "supported_algorithms",
    "is_supported_key_length",
]


class SymmetricAlgorithm(str, Enum):
    """Closed set of algorithm identifiers (also the first token field)."""

    AES_128_GCM = "aes-128-gcm"
    AES_192_GCM = "aes-192-gcm"
    AES_256_GCM = "aes-256-gcm"
    AES_128_CBC = "aes-128-cbc"
    AES_192_CBC = "aes-192-cbc"
    AES_256_CBC = "aes-256-cbc"

    def __str__(self) -> str:
        return self.value


class CipherMode(str, Enum):
    GCM = "gcm"
    CBC = "cbc"


class TokenField(str, Enum):
    ALGORITHM = "algorithm"
    IV = "iv"
    AUTH_TAG = "authTag"
    CIPHERTEXT = "ciphertext"


AEAD_FIELD_ORDER: Final[Tuple[TokenField, ...]] = (
    TokenField.ALGORITHM,
    TokenField.IV,
    TokenField.AUTH_TAG,
    TokenField.CIPHERTEXT,
)
BLOCK_FIELD_ORDER: Final[Tuple[TokenField, ...]] = (
    TokenField.ALGORITHM,
    TokenField.IV,
    TokenField.CIPHERTEXT,
)

GCM_IV_BITS: Final[int] = 92
CBC_IV_BITS: Final[int] = 128


@dataclass(frozen=True)
class AlgorithmDescriptor:
    """
    Immutable description of one algorithm.

    Attributes:
        algorithm: Identifier.
        mode: Block cipher mode.
        key_length_bits: Required key length.
        iv_length_bits: IV length drawn per encryption.
        field_order: Token layout, algorithm first.
    """

    algorithm: SymmetricAlgorithm
    mode: CipherMode
    key_length_bits: int
    iv_length_bits: int
    field_order: Tuple[TokenField, ...]

    @property
    def is_aead(self) -> bool:
        return self.mode is CipherMode.GCM

    @property
    def key_length_bytes(self) -> int:
        return self.key_length_bits // 8

    @property
    def iv_length_bytes(self) -> int:
        # 92-bit GCM IVs round down to whole bytes (11).
        return self.iv_length_bits // 8

    @property
    def field_count(self) -> int:
        return len(self.field_order)


def _gcm(algorithm: SymmetricAlgorithm, key_bits: int) -> AlgorithmDescriptor:
    return AlgorithmDescriptor(
        algorithm, CipherMode.GCM, key_bits, GCM_IV_BITS, AEAD_FIELD_ORDER
    )


def _cbc(algorithm: SymmetricAlgorithm, key_bits: int) -> AlgorithmDescriptor:
    return AlgorithmDescriptor(
        algorithm, CipherMode.CBC, key_bits, CBC_IV_BITS, BLOCK_FIELD_ORDER
    )


_DESCRIPTORS: Final[Mapping[SymmetricAlgorithm, AlgorithmDescriptor]] = (
    MappingProxyType(
        {
            SymmetricAlgorithm.AES_128_GCM: _gcm(SymmetricAlgorithm.AES_128_GCM, 128),
            SymmetricAlgorithm.AES_192_GCM: _gcm(SymmetricAlgorithm.AES_192_GCM, 192),
            SymmetricAlgorithm.AES_256_GCM: _gcm(SymmetricAlgorithm.AES_256_GCM, 256),
            SymmetricAlgorithm.AES_128_CBC: _cbc(SymmetricAlgorithm.AES_128_CBC, 128),
            SymmetricAlgorithm.AES_192_CBC: _cbc(SymmetricAlgorithm.AES_192_CBC, 192),
            SymmetricAlgorithm.AES_256_CBC: _cbc(SymmetricAlgorithm.AES_256_CBC, 256),
        }
    )
)

SUPPORTED_KEY_LENGTHS: Final[Tuple[int, ...]] = tuple(
    sorted({d.key_length_bits for d in _DESCRIPTORS.values()})
)


def get_descriptor(
    identifier: Union[SymmetricAlgorithm, str],
) -> Result[AlgorithmDescriptor, UnsupportedOrInvalidAlgorithm]:
    """
    Look up the descriptor for an algorithm.

    Args:
        identifier: Enum member or its string value (exact, case-sensitive).

    Returns:
        ``Ok(descriptor)`` or ``Err(UnsupportedOrInvalidAlgorithm)``.
    """
    if isinstance(identifier, SymmetricAlgorithm):
        return Ok(_DESCRIPTORS[identifier])
    if isinstance(identifier, str):
        try:
            return Ok(_DESCRIPTORS[SymmetricAlgorithm(identifier)])
        except ValueError:
            pass
    logger.debug("Unknown algorithm identifier requested")
    return Err(UnsupportedOrInvalidAlgorithm(identifier))


def supported_algorithms() -> Tuple[SymmetricAlgorithm, ...]:
    return tuple(_DESCRIPTORS)


def is_supported_key_length(bits: int) -> bool:
    return bits in SUPPORTED_KEY_LENGTHS
