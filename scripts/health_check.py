#!/usr/bin/env python
"""Simple health check utility.

This script prints which Coinbase client settings are present in the
environment and which API environment would be selected.  Secret values
are never printed, only whether they are set.
"""

from __future__ import annotations

import os
from typing import Dict, Optional

from coinbase_pro.config import ClientSettings

KEYS = [
    "COINBASE_SANDBOX",
    "COINBASE_USER_AGENT",
    "COINBASE_API_KEY",
    "COINBASE_API_SECRET",
    "COINBASE_API_SECRET_FILE",
    "COINBASE_PASSPHRASE",
    "LOG_LEVEL",
]


def collect_status() -> Dict[str, str]:
    status: Dict[str, str] = {}
    for key in KEYS:
        val: Optional[str] = os.environ.get(key)
        status[key] = "set" if val else "missing"
    return status


def main() -> None:
    settings = ClientSettings.from_env()
    print("Health Check:")
    print(f"environment: {settings.environment.name} ({settings.environment.base_url})")
    for key, state in collect_status().items():
        print(f"{key}: {state}")


if __name__ == "__main__":
    main()
