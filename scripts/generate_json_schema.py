"""
generate_json_schema
====================

This script exports JSON Schema definitions for the response models of
the Coinbase Pro client.  It uses Pydantic's built-in JSON schema
generator to produce one schema per model defined in
``coinbase_pro.models``.  Prices and sizes appear as strings with
``format: decimal``.

Usage
-----

Run this script from the project root and specify an output file:

.. code-block:: bash

    python scripts/generate_json_schema.py --out schemas.json

If no output file is provided, the schema will be printed to stdout.
"""

from __future__ import annotations

import argparse
import json
from typing import Any, Dict, Optional, Sequence, Type

from pydantic import BaseModel

from coinbase_pro.models import (
    Account,
    Activity,
    AggregatedBook,
    Candle,
    Currency,
    Fill,
    FullBook,
    Hold,
    Order,
    Product,
    ServerTime,
    Stats,
    Ticker,
    Trade,
    TrailingVolume,
)


def collect_models() -> Dict[str, Type[BaseModel]]:
    models = (
        Product,
        AggregatedBook,
        FullBook,
        Ticker,
        Trade,
        Candle,
        Stats,
        Currency,
        ServerTime,
        Account,
        Activity,
        Hold,
        Order,
        Fill,
        TrailingVolume,
    )
    return {model.__name__: model for model in models}


def generate_schema(models: Dict[str, Type[BaseModel]]) -> Dict[str, Any]:
    schema: Dict[str, Any] = {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "definitions": {},
    }
    for name, model in models.items():
        # by_alias keeps the wire names ("type", "ref")
        schema["definitions"][name] = model.model_json_schema(by_alias=True)
    return schema


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Generate JSON schemas for response models.")
    ap.add_argument("--out", help="Output file path. Defaults to stdout if omitted.")
    return ap.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    schema = generate_schema(collect_models())
    if args.out:
        with open(args.out, "w", encoding="utf-8") as f:
            json.dump(schema, f, indent=2)
        print(f"Schema written to {args.out}")
    else:
        print(json.dumps(schema, indent=2))


if __name__ == "__main__":
    main()
