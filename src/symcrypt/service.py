# -*- coding: utf-8 -*-
"""
TokenCipher façade.

- Binds one key and one configuration so callers deal only with text and tokens.
- Decryption follows the algorithm named in the token, so tokens written under
  an older configured algorithm stay readable with the same key length.
- No secrets are logged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final, Mapping, Optional

from symcrypt.config import CipherConfig, load_key
from symcrypt.core.exceptions import CryptoError
from symcrypt.core.result import Err, Result
from symcrypt.encryption import decrypt, encrypt
from symcrypt.keys import SymmetricKey

LOGGER: Final = logging.getLogger(__name__)


@dataclass(slots=True)
class TokenCipher:
    """
    Token encryption service for one key.

    Example:
        >>> cipher = TokenCipher.from_env().unwrap()
        >>> token = cipher.encrypt("secret").unwrap()
        >>> cipher.decrypt(token).unwrap()
        'secret'
    """

    key: SymmetricKey
    config: CipherConfig = field(default_factory=CipherConfig)

    @staticmethod
    def from_env(
        environ: Optional[Mapping[str, str]] = None,
    ) -> Result["TokenCipher", CryptoError]:
        """
        Build a cipher from environment configuration and key material.

        Raises:
            ValueError: if the configuration variables hold unsupported values.
        """
        cfg = CipherConfig.from_env(environ)
        return load_key(cfg, environ).map(lambda key: TokenCipher(key, cfg))

    def encrypt(self, plaintext: str) -> Result[str, CryptoError]:
        """Encrypt ``plaintext`` with the configured algorithm and return the token."""
        return encrypt(self.config.algorithm, self.key, plaintext).map(lambda r: r.token)

    def decrypt(self, token: str) -> Result[str, CryptoError]:
        return decrypt(token, self.key)

    def reencrypt(self, token: str) -> Result[str, CryptoError]:
        """
        Decrypt ``token`` and encrypt the plaintext again with the configured
        algorithm and a fresh IV.
        """
        res = self.decrypt(token).and_then(self.encrypt)
        if isinstance(res, Err):
            LOGGER.info("Re-encryption failed: %s", res.error.kind)
        return res

    def __repr__(self) -> str:
        return f"TokenCipher(algorithm={self.config.algorithm.value!r}, key={self.key!r})"


__all__ = ["TokenCipher"]
