# -*- coding: utf-8 -*-
from __future__ import annotations

import os

import pytest

from symcrypt import utils as U


def test_generate_random_bytes_basic_and_bounds() -> None:
    out = U.generate_random_bytes(32)
    assert isinstance(out, bytes) and len(out) == 32
    assert out != U.generate_random_bytes(32)
    for bad in (0, -1, 2 * 1024 * 1024):
        with pytest.raises(ValueError):
            U.generate_random_bytes(bad)
    with pytest.raises(ValueError):
        U.generate_random_bytes(True)  # type: ignore[arg-type]


def test_generate_random_bytes_gcm_iv_size() -> None:
    assert len(U.generate_random_bytes(11)) == 11


def test_rct_apt_rejects_degenerate_output() -> None:
    with pytest.raises(ValueError):
        U._rct_apt_checks(b"\x00" * 16)
    with pytest.raises(ValueError):
        U._rct_apt_checks(b"\x01" * 30 + b"\x02\x03")
    with pytest.raises(ValueError):
        U._rct_apt_checks(b"")
    U._rct_apt_checks(os.urandom(64))


def test_degenerate_rng_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    class FakeHKDF:
        def __init__(self, *a: object, **k: object) -> None:
            pass

        def derive(self, ikm: bytes) -> bytes:
            return b"\x00" * len(ikm)

    monkeypatch.setattr("symcrypt.utils.HKDF", FakeHKDF)
    with pytest.raises(ValueError):
        U.generate_random_bytes(16)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("00ff", True),
        ("ABcd", True),
        ("", False),
        ("abc", False),
        ("zz", False),
        ("ab cd", False),
        ("0xab", False),
        ("ab\n", False),
        (None, False),
        (b"ab", False),
    ],
)
def test_is_valid_hex(text: object, expected: bool) -> None:
    assert U.is_valid_hex(text) is expected


def test_hex_codec() -> None:
    data = os.urandom(24)
    encoded = U.hex_encode(data)
    assert encoded == encoded.lower()
    assert U.hex_decode(encoded) == data
    assert U.hex_decode("DEADBEEF") == b"\xde\xad\xbe\xef"
    with pytest.raises(ValueError):
        U.hex_decode("de ad")


def test_b64_codec() -> None:
    data = os.urandom(16)
    assert U.b64_decode(U.b64_encode(data)) == data
    with pytest.raises(ValueError):
        U.b64_decode("not*base64")
    with pytest.raises(ValueError):
        U.b64_decode("ключ")


def test_secure_compare_semantics() -> None:
    assert U.secure_compare(b"a", b"a") is True
    assert U.secure_compare(b"a", bytearray(b"a")) is True
    assert U.secure_compare(b"a", b"b") is False
    assert U.secure_compare(b"abc", b"ab") is False
