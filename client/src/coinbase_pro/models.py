"""
Response models for the Coinbase Pro REST API using Pydantic.

Each model mirrors one JSON object returned by the exchange.  Models are
frozen and ignore keys they do not declare, so additions on the exchange
side do not break decoding.  Every price, size and balance is a
:class:`~coinbase_pro.precise.PreciseNumber` and every instant is a
timezone-aware datetime.
"""

from __future__ import annotations

from enum import Enum, unique
from typing import Any, NamedTuple, Optional, Tuple

from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, model_validator

from .precise import PreciseNumber


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


# =============================================================================
# Enumerations
# =============================================================================


@unique
class Side(str, Enum):
    """Order side.  For trades this is the maker side."""

    BUY = "buy"
    SELL = "sell"


@unique
class OrderType(str, Enum):
    LIMIT = "limit"
    MARKET = "market"


@unique
class HoldType(str, Enum):
    ORDER = "order"
    TRANSFER = "transfer"


@unique
class ActivityType(str, Enum):
    TRANSFER = "transfer"
    MATCH = "match"
    FEE = "fee"
    REBATE = "rebate"


# =============================================================================
# Market data
# =============================================================================


class Product(_Record):
    """A currency pair available for trading."""

    id: str = Field(..., description="Product identifier, e.g. BTC-USD")
    base_currency: str
    quote_currency: str
    base_min_size: PreciseNumber
    base_max_size: PreciseNumber
    quote_increment: PreciseNumber


class AggregatedEntry(NamedTuple):
    """One price level of a level 1 or level 2 book."""

    price: PreciseNumber
    size: PreciseNumber
    num_orders: int


class FullEntry(NamedTuple):
    """One resting order of a level 3 book."""

    price: PreciseNumber
    size: PreciseNumber
    order_id: str


class AggregatedBook(_Record):
    """Order book with orders at the same price merged into one entry."""

    sequence: int
    bids: Tuple[AggregatedEntry, ...]
    asks: Tuple[AggregatedEntry, ...]


class FullBook(_Record):
    """Order book listing every resting order individually."""

    sequence: int
    bids: Tuple[FullEntry, ...]
    asks: Tuple[FullEntry, ...]


class Ticker(_Record):
    """Last trade, best bid/ask and 24h volume."""

    trade_id: int
    price: PreciseNumber
    size: PreciseNumber
    bid: PreciseNumber
    ask: PreciseNumber
    volume: PreciseNumber
    time: AwareDatetime


class Trade(_Record):
    time: AwareDatetime
    trade_id: int
    price: PreciseNumber
    size: PreciseNumber
    side: Side = Field(..., description="Maker side: buy is a down-tick, sell an up-tick")


_CANDLE_FIELDS = ("time", "low", "high", "open", "close", "volume")


class Candle(_Record):
    """One bucket of historic rates.

    The exchange sends candles as ``[time, low, high, open, close, volume]``
    arrays; ``time`` is the bucket start in Unix seconds.
    """

    time: AwareDatetime
    low: PreciseNumber
    high: PreciseNumber
    open: PreciseNumber
    close: PreciseNumber
    volume: PreciseNumber

    @model_validator(mode="before")
    @classmethod
    def _from_array(cls, data: Any) -> Any:
        if isinstance(data, (list, tuple)):
            if len(data) != len(_CANDLE_FIELDS):
                raise ValueError(
                    f"candle must have {len(_CANDLE_FIELDS)} elements, got {len(data)}"
                )
            return dict(zip(_CANDLE_FIELDS, data))
        return data


class Stats(_Record):
    """24h stats.  ``volume`` is in base units, prices in quote units."""

    open: PreciseNumber
    high: PreciseNumber
    low: PreciseNumber
    volume: PreciseNumber


class Currency(_Record):
    id: str
    name: str
    min_size: PreciseNumber


class ServerTime(_Record):
    iso: AwareDatetime
    epoch: float


# =============================================================================
# Private API
# =============================================================================


class Account(_Record):
    """A trading account holding one currency."""

    id: str
    currency: str
    balance: PreciseNumber
    available: PreciseNumber
    hold: PreciseNumber
    profile_id: str


class ActivityDetails(_Record):
    order_id: Optional[str] = None
    trade_id: Optional[str] = None
    product_id: Optional[str] = None
    transfer_id: Optional[str] = None
    transfer_type: Optional[str] = None


class Activity(_Record):
    """One ledger entry of an account."""

    id: int
    created_at: AwareDatetime
    amount: PreciseNumber
    balance: PreciseNumber
    activity_type: ActivityType = Field(..., alias="type")
    details: ActivityDetails


class Hold(_Record):
    id: str
    created_at: AwareDatetime
    updated_at: Optional[AwareDatetime] = None
    amount: PreciseNumber
    hold_type: HoldType = Field(..., alias="type")
    hold_ref: str = Field(..., alias="ref", description="Order or transfer id holding the funds")


class Order(_Record):
    id: str
    price: Optional[PreciseNumber] = None
    size: Optional[PreciseNumber] = None
    product_id: str
    side: Side
    stp: Optional[str] = None
    funds: Optional[PreciseNumber] = None
    specified_funds: Optional[PreciseNumber] = None
    order_type: OrderType = Field(..., alias="type")
    time_in_force: Optional[str] = None
    post_only: bool
    created_at: AwareDatetime
    done_at: Optional[AwareDatetime] = None
    done_reason: Optional[str] = None
    fill_fees: PreciseNumber
    filled_size: PreciseNumber
    executed_value: PreciseNumber
    status: str
    settled: bool


class Fill(_Record):
    trade_id: int
    product_id: str
    price: PreciseNumber
    size: PreciseNumber
    order_id: str
    created_at: AwareDatetime
    liquidity: str
    fee: PreciseNumber
    settled: bool
    side: Side


class TrailingVolume(_Record):
    """30-day trailing volume for one product."""

    product_id: str
    exchange_volume: PreciseNumber
    volume: PreciseNumber
    recorded_at: AwareDatetime
