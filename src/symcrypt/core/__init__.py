"""
Building blocks of the token cipher: result container, error kinds and the
algorithm registry.
"""

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
from symcrypt.core.registry import (
    SUPPORTED_KEY_LENGTHS,
    AlgorithmDescriptor,
    CipherMode,
    SymmetricAlgorithm,
    TokenField,
    get_descriptor,
    is_supported_key_length,
    supported_algorithms,
)
from symcrypt.core.result import Err, Ok, Result, UnwrapError, err, ok

__all__ = [
    "Ok",
    "Err",
    "Result",
    "UnwrapError",
    "ok",
    "err",
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
    "SymmetricAlgorithm",
    "CipherMode",
    "TokenField",
    "AlgorithmDescriptor",
    "SUPPORTED_KEY_LENGTHS",
    "get_descriptor",
    "supported_algorithms",
    "is_supported_key_length",
]
