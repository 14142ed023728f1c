"""Tests for decoding exchange JSON into the response models."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from typing import List

import pytest
from pydantic import TypeAdapter, ValidationError

from coinbase_pro.models import (
    Account,
    Activity,
    ActivityType,
    AggregatedBook,
    AggregatedEntry,
    Candle,
    Currency,
    Fill,
    FullBook,
    Hold,
    HoldType,
    Order,
    OrderType,
    Product,
    ServerTime,
    Side,
    Stats,
    Ticker,
    Trade,
    TrailingVolume,
)
from coinbase_pro.precise import PreciseNumber


def test_product_ignores_unknown_keys() -> None:
    payload = {
        "id": "ETH-USD",
        "base_currency": "ETH",
        "quote_currency": "USD",
        "base_min_size": "0.01",
        "base_max_size": "1000000",
        "quote_increment": "0.01",
        "display_name": "ETH/USD",
        "status": "online",
    }
    product = Product.model_validate_json(json.dumps(payload))
    assert product.quote_increment == PreciseNumber("0.01")
    assert not hasattr(product, "display_name")


def test_models_are_frozen() -> None:
    currency = Currency.model_validate({"id": "BTC", "name": "Bitcoin", "min_size": "0.00000001"})
    with pytest.raises(ValidationError):
        currency.name = "Other"  # type: ignore[misc]


def test_aggregated_book_entries() -> None:
    body = '{"sequence": 3, "bids": [["6500.11", "0.45054140", 1]], "asks": [["6500.15", "0.57753524", 2]]}'
    book = AggregatedBook.model_validate_json(body)
    assert book.sequence == 3
    assert book.bids[0] == AggregatedEntry(PreciseNumber("6500.11"), PreciseNumber("0.45054140"), 1)
    assert book.asks[0].num_orders == 2
    assert book.asks[0].price.text == "6500.15"


def test_full_book_entries() -> None:
    body = (
        '{"sequence": 3, "bids": [["295.96", "0.05088265", "3b0f1225-7f84-490b-a29f-0faef9de823a"]],'
        ' "asks": [["295.97", "5.72036512", "da863862-25f4-4868-ac41-005d11ab0a5f"]]}'
    )
    book = FullBook.model_validate_json(body)
    assert book.bids[0].order_id == "3b0f1225-7f84-490b-a29f-0faef9de823a"
    assert book.asks[0].size.to_float64() == pytest.approx(5.72036512)


def test_full_book_payload_does_not_fit_aggregated_schema() -> None:
    body = '{"sequence": 3, "bids": [["295.96", "0.05", "3b0f1225-7f84"]], "asks": []}'
    with pytest.raises(ValidationError):
        AggregatedBook.model_validate_json(body)


def test_ticker_time_is_timezone_aware() -> None:
    body = (
        '{"trade_id": 4729088, "price": "333.99", "size": "0.193", "bid": "333.98",'
        ' "ask": "333.99", "volume": "5957.11914015", "time": "2015-11-14T20:46:03.511254Z"}'
    )
    ticker = Ticker.model_validate_json(body)
    assert ticker.time.tzinfo is not None
    assert ticker.time == datetime(2015, 11, 14, 20, 46, 3, 511254, tzinfo=timezone.utc)


def test_naive_timestamps_are_rejected() -> None:
    body = '{"time": "2014-11-07T22:19:28.578544", "trade_id": 74, "price": "10.0", "size": "0.01", "side": "buy"}'
    with pytest.raises(ValidationError):
        Trade.model_validate_json(body)


def test_trade_side_is_a_closed_set() -> None:
    good = '{"time": "2014-11-07T22:19:28.578544Z", "trade_id": 74, "price": "10.0", "size": "0.01", "side": "sell"}'
    assert Trade.model_validate_json(good).side is Side.SELL
    with pytest.raises(ValidationError):
        Trade.model_validate_json(good.replace('"sell"', '"short"'))


def test_candles_decode_from_arrays() -> None:
    candles = [Candle.model_validate(row) for row in json.loads("[[1415398768, 0.32, 4.2, 0.35, 4.2, 12.3]]")]
    candle = candles[0]
    assert candle.time == datetime.fromtimestamp(1415398768, tz=timezone.utc)
    assert candle.low.text == "0.32"
    assert candle.close.to_float64() == 4.2
    assert candle.volume.text == "12.3"


def test_candle_with_wrong_arity_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Candle.model_validate([1415398768, 0.32, 4.2])


def test_stats_and_server_time() -> None:
    stats = Stats.model_validate_json('{"open": "34.19", "high": "95.70", "low": "7.06", "volume": "2.41"}')
    assert stats.high.text == "95.70"
    server_time = ServerTime.model_validate_json('{"iso": "2015-01-07T23:47:25.201Z", "epoch": 1420674445.201}')
    assert server_time.epoch == pytest.approx(1420674445.201)
    assert server_time.iso.tzinfo is not None


def test_account() -> None:
    body = (
        '{"id": "71452118-efc7-4cc4-8780-a5e22d4baa53", "currency": "BTC", "balance": "0.0000000000000000",'
        ' "available": "0.0000000000000000", "hold": "0.0000000000000000",'
        ' "profile_id": "75da88c5-05bf-4f54-bc85-5c775bd68254"}'
    )
    account = Account.model_validate_json(body)
    assert account.balance.text == "0.0000000000000000"
    assert account.hold.to_float64() == 0.0


def test_activity_uses_wire_names() -> None:
    body = (
        '{"id": 100, "created_at": "2014-11-07T08:19:27.028459Z", "amount": "0.001", "balance": "239.669",'
        ' "type": "fee", "details": {"order_id": "d50ec984", "trade_id": "74", "product_id": "BTC-USD"}}'
    )
    activity = Activity.model_validate_json(body)
    assert activity.activity_type is ActivityType.FEE
    assert activity.details.product_id == "BTC-USD"
    assert activity.details.transfer_id is None
    assert activity.model_dump(by_alias=True)["type"] == ActivityType.FEE


def test_hold_reference_and_type() -> None:
    body = (
        '{"id": "82dcd140-c3c7-4507-8de4-2c529cd1a28f", "account_id": "e0b3f39a",'
        ' "created_at": "2014-11-06T10:34:47.123456Z", "updated_at": "2014-11-06T10:40:47.123456Z",'
        ' "amount": "4.23", "type": "order", "ref": "0a205de4-dd35-4370-a285-fe8fc375a273"}'
    )
    hold = Hold.model_validate_json(body)
    assert hold.hold_type is HoldType.ORDER
    assert hold.hold_ref == "0a205de4-dd35-4370-a285-fe8fc375a273"


def test_market_order_has_optional_price() -> None:
    body = {
        "id": "b93d1ae3-6d3a-4ac3-b3a2-8a9f1e2b8d7c",
        "size": "1.00000000",
        "product_id": "BTC-USD",
        "side": "buy",
        "stp": "dc",
        "funds": "9.9750623400000000",
        "specified_funds": "10.0000000000000000",
        "type": "market",
        "post_only": False,
        "created_at": "2016-12-08T20:09:05.508883Z",
        "done_at": "2016-12-08T20:09:05.527Z",
        "done_reason": "filled",
        "fill_fees": "0.0249376391550000",
        "filled_size": "0.01291771",
        "executed_value": "9.9750556620000000",
        "status": "done",
        "settled": True,
    }
    order = Order.model_validate_json(json.dumps(body))
    assert order.price is None
    assert order.order_type is OrderType.MARKET
    assert order.side is Side.BUY
    assert order.done_at is not None and order.done_at.tzinfo is not None
    assert order.fill_fees.text == "0.0249376391550000"


def test_fills_and_trailing_volume() -> None:
    fills_body = (
        '[{"trade_id": 74, "product_id": "BTC-USD", "price": "10.00", "size": "0.01", "order_id": "d50ec984",'
        ' "created_at": "2014-11-07T22:19:28.578544Z", "liquidity": "T", "fee": "0.00025", "settled": true,'
        ' "side": "buy"}]'
    )
    fills = [Fill.model_validate(item) for item in json.loads(fills_body)]
    assert fills[0].liquidity == "T"
    assert fills[0].fee.text == "0.00025"

    volume = TrailingVolume.model_validate_json(
        '{"product_id": "BTC-USD", "exchange_volume": "11800.00000000", "volume": "100.00000000",'
        ' "recorded_at": "1973-11-29T00:05:01.123456Z"}'
    )
    assert volume.exchange_volume.text == "11800.00000000"


def test_models_round_trip_decimal_text() -> None:
    product = Product.model_validate(
        {
            "id": "BTC-USD",
            "base_currency": "BTC",
            "quote_currency": "USD",
            "base_min_size": "0.00100000",
            "base_max_size": "10000.00000000",
            "quote_increment": "0.01000000",
        }
    )
    assert json.loads(product.model_dump_json())["base_min_size"] == "0.00100000"


def test_list_of_products_type() -> None:
    products = TypeAdapter(List[Product]).validate_json("[]")
    assert products == []
