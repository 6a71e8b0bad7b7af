# -*- coding: utf-8 -*-
from __future__ import annotations

import os

import pytest
from cryptography.exceptions import InvalidTag

from symcrypt.core.registry import SymmetricAlgorithm, get_descriptor
from symcrypt.primitives import GCM_TAG_LEN, decrypt_block, encrypt_block

GCM = get_descriptor(SymmetricAlgorithm.AES_256_GCM).unwrap()
CBC = get_descriptor(SymmetricAlgorithm.AES_128_CBC).unwrap()


def test_gcm_roundtrip_with_11_byte_iv() -> None:
    key = os.urandom(32)
    iv = os.urandom(GCM.iv_length_bytes)
    ct, tag = encrypt_block(GCM, key, iv, b"hello")
    assert tag is not None and len(tag) == GCM_TAG_LEN
    assert len(ct) == 5
    assert decrypt_block(GCM, key, iv, ct, tag) == b"hello"


def test_gcm_tampered_ciphertext_fails() -> None:
    key = os.urandom(32)
    iv = os.urandom(11)
    ct, tag = encrypt_block(GCM, key, iv, b"payload")
    tampered = bytes([ct[0] ^ 0x01]) + ct[1:]
    with pytest.raises(InvalidTag):
        decrypt_block(GCM, key, iv, tampered, tag)


def test_gcm_requires_full_tag() -> None:
    key = os.urandom(32)
    iv = os.urandom(11)
    ct, tag = encrypt_block(GCM, key, iv, b"payload")
    assert tag is not None
    with pytest.raises(ValueError):
        decrypt_block(GCM, key, iv, ct, tag[:8])
    with pytest.raises(ValueError):
        decrypt_block(GCM, key, iv, ct, None)


def test_cbc_roundtrip_and_padding() -> None:
    key = os.urandom(16)
    iv = os.urandom(16)
    ct, tag = encrypt_block(CBC, key, iv, b"x" * 16)
    assert tag is None
    # full block of padding is appended
    assert len(ct) == 32
    assert decrypt_block(CBC, key, iv, ct) == b"x" * 16


def test_cbc_bad_length_fails() -> None:
    key = os.urandom(16)
    with pytest.raises(ValueError):
        decrypt_block(CBC, key, os.urandom(16), os.urandom(15))


def test_key_size_checked() -> None:
    with pytest.raises(ValueError):
        encrypt_block(GCM, os.urandom(16), os.urandom(11), b"x")
    with pytest.raises(ValueError):
        decrypt_block(CBC, os.urandom(32), os.urandom(16), os.urandom(16))
