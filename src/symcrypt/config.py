# -*- coding: utf-8 -*-
"""
RU: Конфигурация шифратора токенов с профилями и загрузкой из окружения.
EN: Token cipher configuration with predefined profiles and environment loading.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Final, Mapping, Optional

from symcrypt.core.exceptions import CryptoError, KeyNotConfigured
from symcrypt.core.registry import SymmetricAlgorithm
from symcrypt.core.result import Err, Result
from symcrypt.keys import KeyEncoding, SymmetricKey

_LOGGER: Final = logging.getLogger(__name__)

ENV_ALGORITHM: Final[str] = "SYMCRYPT_ALGORITHM"
ENV_KEY_ENCODING: Final[str] = "SYMCRYPT_KEY_ENCODING"
ENV_KEY_ENV_VAR: Final[str] = "SYMCRYPT_KEY_ENV_VAR"
DEFAULT_KEY_ENV_VAR: Final[str] = "ENCRYPTION_KEY_HEX"


class CipherProfile(str, Enum):
    """Predefined algorithm choices."""

    # AES-256-GCM (default)
    DEFAULT = "default"

    # AES-128-GCM, shorter keys
    COMPACT = "compact"

    # AES-256-CBC, no authentication; only for reading existing tokens
    LEGACY = "legacy"


@dataclass(frozen=True)
class CipherConfig:
    """
    Token cipher configuration.

    Attributes:
        algorithm: Algorithm used for new tokens.
        key_encoding: Encoding of the key material in the environment.
        key_env_var: Environment variable holding the key.

    Examples:
        >>> CipherConfig.from_profile(CipherProfile.COMPACT).algorithm.value
        'aes-128-gcm'

        >>> CipherConfig(algorithm="aes-256-cbc").algorithm
        <SymmetricAlgorithm.AES_256_CBC: 'aes-256-cbc'>
    """

    algorithm: SymmetricAlgorithm = SymmetricAlgorithm.AES_256_GCM
    key_encoding: KeyEncoding = KeyEncoding.HEX
    key_env_var: str = DEFAULT_KEY_ENV_VAR

    def __post_init__(self) -> None:
        """Validate and normalize string values to enums."""
        try:
            object.__setattr__(self, "algorithm", SymmetricAlgorithm(self.algorithm))
        except ValueError as exc:
            raise ValueError(f"Unsupported algorithm: {self.algorithm!r}") from exc
        try:
            object.__setattr__(self, "key_encoding", KeyEncoding(self.key_encoding))
        except ValueError as exc:
            raise ValueError(f"Unsupported key encoding: {self.key_encoding!r}") from exc
        if not isinstance(self.key_env_var, str) or not self.key_env_var.strip():
            raise ValueError("key_env_var must be a non-empty string")

    @staticmethod
    def from_profile(profile: CipherProfile) -> "CipherConfig":
        """Create configuration from a predefined profile."""
        return _PROFILE_PARAMS[CipherProfile(profile)]

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> "CipherConfig":
        """
        Build configuration from environment variables.

        Reads ``SYMCRYPT_ALGORITHM``, ``SYMCRYPT_KEY_ENCODING`` and
        ``SYMCRYPT_KEY_ENV_VAR``; unset variables keep their defaults.

        Raises:
            ValueError: if a variable holds an unsupported value.
        """
        env = os.environ if environ is None else environ
        defaults = CipherConfig()
        cfg = CipherConfig(
            algorithm=env.get(ENV_ALGORITHM, defaults.algorithm.value).strip(),
            key_encoding=env.get(ENV_KEY_ENCODING, defaults.key_encoding.value).strip(),
            key_env_var=env.get(ENV_KEY_ENV_VAR, defaults.key_env_var).strip(),
        )
        _LOGGER.debug(
            "Loaded cipher config: algorithm=%s encoding=%s",
            cfg.algorithm.value,
            cfg.key_encoding.value,
        )
        return cfg


# Predefined profiles
_PROFILE_PARAMS: Final[dict[CipherProfile, CipherConfig]] = {
    CipherProfile.DEFAULT: CipherConfig(algorithm=SymmetricAlgorithm.AES_256_GCM),
    CipherProfile.COMPACT: CipherConfig(algorithm=SymmetricAlgorithm.AES_128_GCM),
    CipherProfile.LEGACY: CipherConfig(algorithm=SymmetricAlgorithm.AES_256_CBC),
}


def load_key(
    config: CipherConfig,
    environ: Optional[Mapping[str, str]] = None,
) -> Result[SymmetricKey, CryptoError]:
    """
    Read and decode the key named by ``config.key_env_var``.

    Returns:
        ``Ok(key)``, ``Err(KeyNotConfigured)`` if the variable is unset or
        blank, or the errors of :meth:`SymmetricKey.from_encoded`.
    """
    env = os.environ if environ is None else environ
    value = env.get(config.key_env_var, "").strip()
    if not value:
        _LOGGER.warning("Key variable %s is not set", config.key_env_var)
        return Err(KeyNotConfigured(config.key_env_var))
    return SymmetricKey.from_encoded(value, config.key_encoding)


__all__ = [
    "CipherProfile",
    "CipherConfig",
    "load_key",
    "DEFAULT_KEY_ENV_VAR",
    "ENV_ALGORITHM",
    "ENV_KEY_ENCODING",
    "ENV_KEY_ENV_VAR",
]
