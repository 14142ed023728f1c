#!/usr/bin/env python
"""Market snapshot harness.

This script builds a :class:`~coinbase_pro.PublicClient` from environment
settings and prints the server time, the ticker, the 24h stats and the
best bid/ask for each requested product.  It is meant for operators who
want to check connectivity to the sandbox or live API before wiring the
client into a service.

Usage
-----

.. code-block:: bash

    COINBASE_SANDBOX=true python scripts/market_snapshot.py BTC-USD ETH-USD

``COINBASE_SANDBOX``
    Set to ``false`` to query the live API.  Defaults to ``true``.

``LOG_LEVEL``
    Logging level for the client (default ``INFO``).

Failures are reported per product; one failing product does not stop the
others.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
from typing import List, Optional, Sequence

from coinbase_pro import Best, CoinbaseError, DecodeError, PublicClient

logger = logging.getLogger(__name__)


async def snapshot(client: PublicClient, product_id: str) -> List[str]:
    """Return printable lines describing one product."""
    ticker, stats, book = await asyncio.gather(
        client.ticker(product_id),
        client.stats(product_id),
        client.book(product_id, Best()),
    )
    lines = [
        f"{product_id}: last {ticker.price} size {ticker.size} at {ticker.time.isoformat()}",
        f"  24h open {stats.open} high {stats.high} low {stats.low} volume {stats.volume}",
    ]
    if book.bids and book.asks:
        bid, ask = book.bids[0], book.asks[0]
        lines.append(
            f"  best bid {bid.price} x {bid.size} ({bid.num_orders} orders), "
            f"best ask {ask.price} x {ask.size} ({ask.num_orders} orders)"
        )
    return lines


async def run(product_ids: Sequence[str]) -> int:
    """Print a snapshot per product and return the number of failures."""
    failures = 0
    async with PublicClient.from_settings() as client:
        server_time = await client.time()
        print(f"Server time ({client.environment.name}): {server_time.iso.isoformat()}")
        for product_id in product_ids:
            try:
                for line in await snapshot(client, product_id):
                    print(line)
            except DecodeError as exc:
                failures += 1
                logger.error("%s: unexpected response %s", product_id, exc.text or exc.text_error)
            except CoinbaseError as exc:
                failures += 1
                logger.error("%s: %s", product_id, exc)
    return failures


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print public market data for products.")
    parser.add_argument("products", nargs="*", default=["BTC-USD"], help="Product ids, e.g. BTC-USD.")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "INFO"))
    args = parse_args(argv)
    return 1 if asyncio.run(run(args.products)) else 0


if __name__ == "__main__":
    try:
        raise SystemExit(main())
    except KeyboardInterrupt:
        pass
