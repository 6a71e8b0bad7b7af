"""
symcrypt
========

Symmetric encryption of short strings into self-describing tokens.

Supported algorithms: AES-128/192/256-GCM (authenticated) and
AES-128/192/256-CBC (not authenticated).

Basic usage:
    >>> from symcrypt import SymmetricKey, encrypt, decrypt
    >>>
    >>> key = SymmetricKey.generate(256).unwrap()
    >>> res = encrypt("aes-256-gcm", key, "DO NOT SHARE THIS SECRET")
    >>> token = res.unwrap().token
    >>> decrypt(token, key).unwrap()
    'DO NOT SHARE THIS SECRET'

Every fallible operation returns ``Ok``/``Err`` instead of raising:
    >>> res = SymmetricKey.from_encoded("0123456789abcdef", "hex")
    >>> res.is_err(), res.error.kind
    (True, 'InvalidKeyLength')

Logging:
    The ``symcrypt`` logger is configured on import. ``SYMCRYPT_LOG_LEVEL``
    sets the level (default WARNING); ``SYMCRYPT_LOG_FILE`` adds a rotating
    file handler.

Python: 3.11+
"""

import logging
import logging.handlers
import os
import sys

__version__ = "0.1.0"
__license__ = "MIT"
__python_requires__ = ">=3.11"

if sys.version_info < (3, 11):
    raise RuntimeError(
        f"symcrypt requires Python 3.11 or newer. "
        f"Current version: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

LOGGER_NAME = "symcrypt"

_LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _setup_logging() -> None:
    """
    Configure the package logger once.

    - stderr handler at the configured level
    - rotating file handler when SYMCRYPT_LOG_FILE is set
    - idempotent: a logger that already has handlers is left alone
    """
    package_logger = logging.getLogger(LOGGER_NAME)
    if package_logger.handlers:
        return

    level = _LOG_LEVELS.get(
        os.environ.get("SYMCRYPT_LOG_LEVEL", "WARNING").upper(), logging.WARNING
    )
    package_logger.setLevel(level)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    log_file = os.environ.get("SYMCRYPT_LOG_FILE")
    if log_file:
        try:
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_file,
                maxBytes=10 * 1024 * 1024,  # 10 MB
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
        except OSError as e:
            package_logger.warning(
                "File logging unavailable (%s); using console only", e.__class__.__name__
            )

    package_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger."""
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


_setup_logging()

from symcrypt.config import CipherConfig, CipherProfile, load_key  # noqa: E402
from symcrypt.core import (  # noqa: E402
    SUPPORTED_KEY_LENGTHS,
    AlgorithmDescriptor,
    AlgorithmKeyMismatch,
    CryptoError,
    DecryptionFailed,
    EmptyPlaintext,
    EncryptionFailed,
    Err,
    InternalFailure,
    InvalidEncoding,
    InvalidKeyLength,
    InvalidToken,
    KeyNotConfigured,
    Ok,
    Result,
    SymmetricAlgorithm,
    UnsupportedOrInvalidAlgorithm,
    get_descriptor,
)
from symcrypt.encryption import EncryptionResult, decrypt, encrypt, parse_token  # noqa: E402
from symcrypt.keys import KeyEncoding, SymmetricKey  # noqa: E402
from symcrypt.service import TokenCipher  # noqa: E402

__all__ = [
    "__version__",
    "get_logger",
    # Engine
    "encrypt",
    "decrypt",
    "parse_token",
    "EncryptionResult",
    # Keys
    "SymmetricKey",
    "KeyEncoding",
    # Registry
    "SymmetricAlgorithm",
    "AlgorithmDescriptor",
    "SUPPORTED_KEY_LENGTHS",
    "get_descriptor",
    # Results
    "Ok",
    "Err",
    "Result",
    # Errors
    "CryptoError",
    "InvalidKeyLength",
    "InvalidEncoding",
    "AlgorithmKeyMismatch",
    "EmptyPlaintext",
    "UnsupportedOrInvalidAlgorithm",
    "InvalidToken",
    "EncryptionFailed",
    "DecryptionFailed",
    "InternalFailure",
    "KeyNotConfigured",
    # Config / service
    "CipherConfig",
    "CipherProfile",
    "load_key",
    "TokenCipher",
]
