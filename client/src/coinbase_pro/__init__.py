"""
Typed asynchronous client for the Coinbase Pro REST API.

This package provides:
- ``PublicClient`` for market data (products, books, tickers, trades,
  candles, stats, currencies, server time)
- ``PrivateClient`` for signed account endpoints (accounts, ledger, holds,
  orders, fills, trailing volume)
- ``PreciseNumber`` for prices and sizes kept as exact decimal text
- Book detail levels ``Best``, ``Aggregated`` and ``Full``
"""

__version__ = "0.4.0"

from .book_level import Aggregated, Best, BookLevel, Full  # noqa: E402
from .clients import Granularity, PrivateClient, PublicClient  # noqa: E402
from .config import LIVE, SANDBOX, ClientSettings, Environment  # noqa: E402
from .exceptions import (  # noqa: E402
    CoinbaseError,
    ConfigurationError,
    DecodeError,
    InvalidSecretError,
    TransportError,
)
from .precise import PreciseNumber  # noqa: E402
from .signing import Credentials, RequestSigner  # noqa: E402

__all__ = [
    "Aggregated",
    "Best",
    "BookLevel",
    "ClientSettings",
    "CoinbaseError",
    "ConfigurationError",
    "Credentials",
    "DecodeError",
    "Environment",
    "Full",
    "Granularity",
    "InvalidSecretError",
    "LIVE",
    "PreciseNumber",
    "PrivateClient",
    "PublicClient",
    "RequestSigner",
    "SANDBOX",
    "TransportError",
    "__version__",
]
