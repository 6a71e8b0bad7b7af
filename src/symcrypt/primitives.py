# -*- coding: utf-8 -*-
"""
RU: Обёртки над AES-GCM и AES-CBC (PKCS7) из библиотеки cryptography.

EN: Thin block-cipher layer over ``cryptography``: AES-GCM (AEAD) and
AES-CBC with PKCS7 padding. Functions here raise; the engine converts
failures into result values.

Security notes:
    - GCM tags are 16 bytes; shorter tags are rejected on decrypt.
    - CBC has no integrity protection. A tampered ciphertext either fails
      unpadding or yields garbage.
"""

from __future__ import annotations

import logging
from typing import Final, Optional, Tuple

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from symcrypt.core.registry import AlgorithmDescriptor, CipherMode

_LOGGER: Final = logging.getLogger(__name__)

AES_BLOCK_BITS: Final[int] = 128
GCM_TAG_LEN: Final[int] = 16

__all__ = ["encrypt_block", "decrypt_block", "GCM_TAG_LEN"]


def _check_key(descriptor: AlgorithmDescriptor, key: bytes) -> None:
    if len(key) != descriptor.key_length_bytes:
        raise ValueError(
            f"{descriptor.algorithm.value} requires a "
            f"{descriptor.key_length_bytes}-byte key, got {len(key)}"
        )


def encrypt_block(
    descriptor: AlgorithmDescriptor,
    key: bytes,
    iv: bytes,
    plaintext: bytes,
) -> Tuple[bytes, Optional[bytes]]:
    """
    Encrypt ``plaintext`` in the descriptor's mode.

    Returns:
        ``(ciphertext, tag)`` for GCM, ``(ciphertext, None)`` for CBC.

    Raises:
        ValueError: on a key of the wrong size or an IV the mode rejects.
    """
    _check_key(descriptor, key)

    if descriptor.mode is CipherMode.GCM:
        encryptor = Cipher(algorithms.AES(key), modes.GCM(iv)).encryptor()
        ciphertext = encryptor.update(plaintext) + encryptor.finalize()
        return ciphertext, encryptor.tag

    padder = padding.PKCS7(AES_BLOCK_BITS).padder()
    padded = padder.update(plaintext) + padder.finalize()
    encryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    return encryptor.update(padded) + encryptor.finalize(), None


def decrypt_block(
    descriptor: AlgorithmDescriptor,
    key: bytes,
    iv: bytes,
    ciphertext: bytes,
    tag: Optional[bytes] = None,
) -> bytes:
    """
    Decrypt ``ciphertext`` in the descriptor's mode.

    Raises:
        cryptography.exceptions.InvalidTag: GCM authentication failed.
        ValueError: bad key/IV/tag size or bad CBC padding/length.
    """
    _check_key(descriptor, key)

    if descriptor.mode is CipherMode.GCM:
        if tag is None:
            raise ValueError("GCM decryption requires an authentication tag")
        decryptor = Cipher(
            algorithms.AES(key), modes.GCM(iv, tag, min_tag_length=GCM_TAG_LEN)
        ).decryptor()
        return decryptor.update(ciphertext) + decryptor.finalize()

    decryptor = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    padded = decryptor.update(ciphertext) + decryptor.finalize()
    unpadder = padding.PKCS7(AES_BLOCK_BITS).unpadder()
    return unpadder.update(padded) + unpadder.finalize()
