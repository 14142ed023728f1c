"""
Client configuration.

The exchange exposes exactly two REST endpoints, a sandbox and the live
service, modelled by :class:`Environment`.  :class:`ClientSettings` gathers
the remaining knobs from environment variables so that scripts and
services can build clients without threading options through by hand.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum, unique
from typing import Union

from . import __version__
from .exceptions import ConfigurationError

DEFAULT_USER_AGENT = f"coinbase-pro-client/{__version__}"

_TRUTHY = {"true", "1", "yes"}


@unique
class Environment(str, Enum):
    """Base URL of a Coinbase Pro REST deployment."""

    SANDBOX = "https://api-public.sandbox.pro.coinbase.com"
    # Test against the sandbox before switching to the live API.
    LIVE = "https://api.pro.coinbase.com"

    @classmethod
    def resolve(cls, base: Union["Environment", str]) -> "Environment":
        """Return the environment for ``base`` or raise :class:`ConfigurationError`."""
        try:
            return cls(base)
        except ValueError as exc:
            raise ConfigurationError(
                f"Unsupported base URL {base!r}; use Environment.SANDBOX or Environment.LIVE",
                config_key="base_url",
            ) from exc

    @property
    def base_url(self) -> str:
        return self.value


SANDBOX = Environment.SANDBOX
LIVE = Environment.LIVE


@dataclass(frozen=True)
class ClientSettings:
    """Settings read from the process environment."""

    sandbox: bool = field(
        default_factory=lambda: os.getenv("COINBASE_SANDBOX", "true").lower() in _TRUTHY
    )
    user_agent: str = field(
        default_factory=lambda: os.getenv("COINBASE_USER_AGENT", DEFAULT_USER_AGENT)
    )

    @classmethod
    def from_env(cls) -> "ClientSettings":
        return cls()

    @property
    def environment(self) -> Environment:
        return Environment.SANDBOX if self.sandbox else Environment.LIVE
