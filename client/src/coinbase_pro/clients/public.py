"""
Unauthenticated market data client.

Every method is a plain GET with no signing.  Example::

    async with PublicClient(SANDBOX) as client:
        for product in await client.products():
            print(product.id)
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from enum import IntEnum, unique
from typing import List, Optional, Union
from urllib.parse import quote

from ..book_level import BookLevel, BookT
from ..config import ClientSettings
from ..models import Candle, Currency, Product, ServerTime, Stats, Ticker, Trade
from .base import BaseClient


@unique
class Granularity(IntEnum):
    """Candle widths accepted by the exchange, in seconds."""

    ONE_MINUTE = 60
    FIVE_MINUTES = 300
    FIFTEEN_MINUTES = 900
    ONE_HOUR = 3600
    SIX_HOURS = 21600
    ONE_DAY = 86400


GranularityLike = Union[Granularity, int, timedelta]


def granularity_seconds(granularity: GranularityLike) -> int:
    """Return the granularity in seconds, or raise ``ValueError`` if unsupported."""
    if isinstance(granularity, timedelta):
        seconds = granularity.total_seconds()
        if not seconds.is_integer():
            raise ValueError(f"Unsupported candle granularity: {granularity}")
        granularity = int(seconds)
    return int(Granularity(granularity))


def rfc3339_millis(moment: datetime) -> str:
    """Format an aware datetime as UTC RFC 3339 with milliseconds, e.g. ``2018-01-01T00:00:00.000Z``."""
    if moment.tzinfo is None or moment.utcoffset() is None:
        raise ValueError("datetime must be timezone-aware")
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def _segment(value: str) -> str:
    return quote(value, safe="")


class PublicClient(BaseClient):
    """HTTP client for the public market data API."""

    client_name = "public"

    @classmethod
    def from_settings(cls, settings: Optional[ClientSettings] = None, **kwargs) -> "PublicClient":
        settings = settings or ClientSettings.from_env()
        return cls(settings.environment, user_agent=settings.user_agent, **kwargs)

    async def products(self) -> List[Product]:
        """List currency pairs available for trading."""
        return await self._get("/products", List[Product])

    async def book(self, product_id: str, level: BookLevel[BookT]) -> BookT:
        """Return the order book of a product at the given detail level.

        - ``Best()`` shows only the best bid and ask.
        - ``Aggregated()`` shows the top 50 bids and asks, aggregated.
        - ``Full()`` shows the full, non aggregated book.
        """
        path = f"/products/{_segment(product_id)}/book?{level.query}"
        return await self._get(path, level.book_type)

    async def ticker(self, product_id: str) -> Ticker:
        """Last trade, best bid/ask and 24h volume."""
        return await self._get(f"/products/{_segment(product_id)}/ticker", Ticker)

    async def trades(self, product_id: str) -> List[Trade]:
        """Latest trades for a product."""
        return await self._get(f"/products/{_segment(product_id)}/trades", List[Trade])

    async def candles(
        self,
        product_id: str,
        granularity: GranularityLike,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[Candle]:
        """Historic rates for a product.

        ``start`` and ``end`` must be given together; without them the
        exchange returns the latest 300 candles.  Ranges producing more than
        300 candles are rejected by the exchange, not here.
        """
        if (start is None) != (end is None):
            raise ValueError("start and end must be given together")
        path = f"/products/{_segment(product_id)}/candles?"
        if start is not None and end is not None:
            path += f"start={rfc3339_millis(start)}&end={rfc3339_millis(end)}&"
        path += f"granularity={granularity_seconds(granularity)}"
        return await self._get(path, List[Candle])

    async def latest_candles(self, product_id: str, granularity: GranularityLike) -> List[Candle]:
        """The latest 300 candles for a product."""
        return await self.candles(product_id, granularity)

    async def stats(self, product_id: str) -> Stats:
        """24h stats for a product."""
        return await self._get(f"/products/{_segment(product_id)}/stats", Stats)

    async def currencies(self) -> List[Currency]:
        return await self._get("/currencies", List[Currency])

    async def time(self) -> ServerTime:
        """API server time."""
        return await self._get("/time", ServerTime)
