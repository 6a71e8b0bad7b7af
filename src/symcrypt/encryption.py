# -*- coding: utf-8 -*-
"""
RU: Движок шифрования: encrypt/decrypt и сериализация токена
``algorithm:iv[:authTag]:ciphertext``.

EN: Encryption engine. Encrypts short UTF-8 strings into a self-describing,
colon-delimited token and decrypts such tokens back.

Token format:
    AEAD (GCM):  ``<algorithm>:<iv-hex>:<authTag-hex>:<ciphertext-hex>``
    CBC:         ``<algorithm>:<iv-hex>:<ciphertext-hex>``

Decrypt pipeline (each stage is a strict gate):
    Parsing -> KeyValidation -> CipherExecution -> Done

Example:
    >>> key = SymmetricKey.generate(256).unwrap()
    >>> token = encrypt("aes-256-gcm", key, "DO NOT SHARE THIS SECRET").unwrap().token
    >>> decrypt(token, key).unwrap()
    'DO NOT SHARE THIS SECRET'

Security notes:
    - A fresh random IV is drawn on every encrypt call.
    - Tokens are untrusted input on the decrypt path regardless of origin.
    - Only GCM tokens are authenticated. A tampered CBC token can decrypt to
      garbage; that asymmetry is inherent to the mode and kept as is.
    - Errors never include key material, IVs, tags or plaintext.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Final, List, Optional, Union

from symcrypt.core.exceptions import (
    AlgorithmKeyMismatch,
    CryptoError,
    DecryptionFailed,
    EmptyPlaintext,
    EncryptionFailed,
    InternalFailure,
    InvalidToken,
)
from symcrypt.core.registry import (
    AlgorithmDescriptor,
    SymmetricAlgorithm,
    TokenField,
    get_descriptor,
)
from symcrypt.core.result import Err, Ok, Result
from symcrypt.keys import SymmetricKey
from symcrypt.primitives import decrypt_block, encrypt_block
from symcrypt.utils import generate_random_bytes, hex_decode, hex_encode, is_valid_hex

_LOGGER: Final = logging.getLogger(__name__)

TOKEN_SEPARATOR: Final[str] = ":"

__all__ = [
    "EncryptionResult",
    "TOKEN_SEPARATOR",
    "encrypt",
    "decrypt",
    "parse_token",
]


@dataclass(frozen=True)
class EncryptionResult:
    """
    Output of one encrypt call (or of parsing a token).

    ``token`` is the canonical serialized form and the only part callers are
    expected to persist. ``auth_tag`` is set for AEAD algorithms only.
    """

    algorithm: SymmetricAlgorithm
    iv: bytes
    ciphertext: bytes
    token: str
    auth_tag: Optional[bytes] = None

    @property
    def is_aead(self) -> bool:
        return self.auth_tag is not None

    def __repr__(self) -> str:
        return (
            f"EncryptionResult(algorithm={self.algorithm.value!r}, "
            f"iv_len={len(self.iv)}, ciphertext_len={len(self.ciphertext)}, "
            f"aead={self.is_aead})"
        )


def _check_key_for(
    descriptor: AlgorithmDescriptor, key: SymmetricKey
) -> Optional[AlgorithmKeyMismatch]:
    actual_bits = len(key.raw_key) * 8
    if actual_bits != descriptor.key_length_bits:
        return AlgorithmKeyMismatch(
            descriptor.algorithm.value, descriptor.key_length_bits, actual_bits
        )
    return None


def _serialize(descriptor: AlgorithmDescriptor, fields: Dict[TokenField, bytes]) -> str:
    parts: List[str] = []
    for name in descriptor.field_order:
        if name is TokenField.ALGORITHM:
            parts.append(descriptor.algorithm.value)
        else:
            parts.append(hex_encode(fields[name]))
    return TOKEN_SEPARATOR.join(parts)


def encrypt(
    algorithm: Union[SymmetricAlgorithm, str],
    key: SymmetricKey,
    plaintext: str,
) -> Result[EncryptionResult, CryptoError]:
    """
    Encrypt a UTF-8 string.

    Args:
        algorithm: One of the six supported identifiers.
        key: Key whose length matches the algorithm.
        plaintext: Non-empty text.

    Returns:
        ``Ok(EncryptionResult)`` or ``Err`` with one of
        ``UnsupportedOrInvalidAlgorithm``, ``EmptyPlaintext``,
        ``AlgorithmKeyMismatch``, ``EncryptionFailed``, ``InternalFailure``.
    """
    looked_up = get_descriptor(algorithm)
    if isinstance(looked_up, Err):
        return looked_up
    descriptor = looked_up.value
    algo_name = descriptor.algorithm.value

    try:
        if not plaintext:
            return Err(EmptyPlaintext())

        mismatch = _check_key_for(descriptor, key)
        if mismatch is not None:
            _LOGGER.warning("%s encrypt rejected: key length mismatch", algo_name)
            return Err(mismatch)

        data = plaintext.encode("utf-8")
        # One IV per call; never reused across encryptions.
        iv = generate_random_bytes(descriptor.iv_length_bytes)

        try:
            ciphertext, tag = encrypt_block(descriptor, key.raw_key, iv, data)
        except Exception as exc:
            _LOGGER.error("%s encryption failed: %s", algo_name, exc.__class__.__name__)
            return Err(
                EncryptionFailed(
                    f"{algo_name} encryption failed", algorithm=algo_name, cause=exc
                )
            )

        if descriptor.is_aead and not tag:
            return Err(EncryptionFailed("Authentication tag is empty", algorithm=algo_name))
        if not ciphertext:
            return Err(EncryptionFailed("Ciphertext is empty", algorithm=algo_name))

        fields: Dict[TokenField, bytes] = {
            TokenField.IV: iv,
            TokenField.CIPHERTEXT: ciphertext,
        }
        if tag is not None:
            fields[TokenField.AUTH_TAG] = tag

        result = EncryptionResult(
            algorithm=descriptor.algorithm,
            iv=iv,
            ciphertext=ciphertext,
            token=_serialize(descriptor, fields),
            auth_tag=tag if descriptor.is_aead else None,
        )
        _LOGGER.debug("%s: encrypted %d bytes", algo_name, len(data))
        return Ok(result)
    except Exception as exc:
        _LOGGER.error("encrypt encountered %s", exc.__class__.__name__)
        return Err(InternalFailure("encrypt", exc, algorithm=algo_name))


def parse_token(token: str) -> Result[EncryptionResult, CryptoError]:
    """
    Parse a token without decrypting it.

    The algorithm field selects the layout; the field count must match it
    exactly and every other field must be non-empty hex. IV, tag and
    ciphertext lengths are not checked here; the cipher enforces them.

    Returns:
        ``Ok(EncryptionResult)``, ``Err(UnsupportedOrInvalidAlgorithm)`` or
        ``Err(InvalidToken)``.
    """
    if not isinstance(token, str):
        return Err(InvalidToken("token must be a string"))

    parts = token.split(TOKEN_SEPARATOR)
    looked_up = get_descriptor(parts[0])
    if isinstance(looked_up, Err):
        return looked_up
    descriptor = looked_up.value
    algo_name = descriptor.algorithm.value

    if len(parts) != descriptor.field_count:
        return Err(
            InvalidToken(
                f"expected {descriptor.field_count} fields, got {len(parts)}",
                algorithm=algo_name,
            )
        )

    fields: Dict[TokenField, bytes] = {}
    for name, part in zip(descriptor.field_order[1:], parts[1:]):
        if not is_valid_hex(part):
            return Err(InvalidToken(f"{name.value} field is not valid hex", algorithm=algo_name))
        fields[name] = hex_decode(part)

    return Ok(
        EncryptionResult(
            algorithm=descriptor.algorithm,
            iv=fields[TokenField.IV],
            ciphertext=fields[TokenField.CIPHERTEXT],
            token=token,
            auth_tag=fields.get(TokenField.AUTH_TAG),
        )
    )


def decrypt(token: str, key: SymmetricKey) -> Result[str, CryptoError]:
    """
    Decrypt a token produced by :func:`encrypt`.

    Returns:
        ``Ok(plaintext)`` or ``Err`` with one of
        ``UnsupportedOrInvalidAlgorithm``, ``InvalidToken``,
        ``AlgorithmKeyMismatch``, ``DecryptionFailed``, ``InternalFailure``.
    """
    # Parsing
    parsed = parse_token(token)
    if isinstance(parsed, Err):
        _LOGGER.info("decrypt rejected token: %s", parsed.error.kind)
        return parsed
    data = parsed.value
    descriptor = get_descriptor(data.algorithm).unwrap()
    algo_name = descriptor.algorithm.value

    try:
        # KeyValidation
        mismatch = _check_key_for(descriptor, key)
        if mismatch is not None:
            _LOGGER.warning("%s decrypt rejected: key length mismatch", algo_name)
            return Err(mismatch)

        # CipherExecution
        try:
            plain = decrypt_block(
                descriptor, key.raw_key, data.iv, data.ciphertext, data.auth_tag
            )
        except Exception as exc:
            _LOGGER.warning("%s decryption failed: %s", algo_name, exc.__class__.__name__)
            return Err(DecryptionFailed("Failed to decrypt", algorithm=algo_name, cause=exc))

        if not plain:
            return Err(DecryptionFailed("Failed to decrypt", algorithm=algo_name))
        try:
            text = plain.decode("utf-8")
        except UnicodeDecodeError as exc:
            return Err(
                DecryptionFailed(
                    "Decrypted data is not valid UTF-8", algorithm=algo_name, cause=exc
                )
            )
        return Ok(text)
    except Exception as exc:
        _LOGGER.error("decrypt encountered %s", exc.__class__.__name__)
        return Err(InternalFailure("decrypt", exc, algorithm=algo_name))
