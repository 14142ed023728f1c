"""
Request signing for the authenticated API.

Private requests carry four headers: the API key, the passphrase, a Unix
timestamp in seconds and a signature.  The signature is the base64
encoded HMAC-SHA256 of ``timestamp + METHOD + path + body`` keyed with the
base64-decoded API secret.  The timestamp signed must be the one sent in
``cb-access-timestamp`` and the path must be byte-identical to the one
requested, otherwise the exchange rejects the call.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from .exceptions import ConfigurationError, InvalidSecretError


def _read_secret(name: str) -> Optional[str]:
    """Read ``name`` from ``{name}_FILE`` if set, else from the environment."""
    file_path = os.getenv(f"{name}_FILE")
    if file_path:
        path = Path(file_path)
        try:
            return path.read_text(encoding="utf-8").strip()
        except OSError as exc:
            raise ConfigurationError(
                f"Could not read {name}_FILE", config_key=f"{name}_FILE"
            ) from exc
    return os.getenv(name)


@dataclass(frozen=True)
class Credentials:
    """API key, secret and passphrase.  None of them appear in ``repr``."""

    key: str = field(repr=False)
    secret: str = field(repr=False)
    passphrase: str = field(repr=False)

    @classmethod
    def from_env(cls) -> "Credentials":
        """Load credentials from ``COINBASE_API_KEY``, ``COINBASE_API_SECRET``
        (or ``COINBASE_API_SECRET_FILE``) and ``COINBASE_PASSPHRASE``.
        """
        values: Dict[str, str] = {}
        for attr, name in (
            ("key", "COINBASE_API_KEY"),
            ("secret", "COINBASE_API_SECRET"),
            ("passphrase", "COINBASE_PASSPHRASE"),
        ):
            value = _read_secret(name)
            if not value:
                raise ConfigurationError(f"{name} is not set", config_key=name)
            values[attr] = value
        return cls(**values)


class RequestSigner:
    """Computes ``cb-access-sign`` values for one API secret."""

    def __init__(self, secret: str) -> None:
        try:
            self._key = base64.b64decode(secret, validate=True)
        except (binascii.Error, ValueError):
            # decoder messages may echo the secret
            raise InvalidSecretError() from None

    def __repr__(self) -> str:
        return "RequestSigner(<secret>)"

    def sign(self, timestamp: int, method: str, path: str, body: str = "") -> str:
        """Return the base64 HMAC-SHA256 signature for one request."""
        message = f"{timestamp}{method.upper()}{path}{body}".encode()
        mac = hmac.new(self._key, message, hashlib.sha256)
        return base64.b64encode(mac.digest()).decode()
