"""
Authenticated account and trading client.

Each request reads the wall clock once, signs ``timestamp + "GET" + path``
with the account secret and sends the four ``cb-access-*`` headers.  The
secret is decoded when the client is built, so an invalid secret fails
before any request is made.
"""

from __future__ import annotations

import time
from typing import Dict, List, Optional, Union
from urllib.parse import quote

import aiohttp

from ..config import DEFAULT_USER_AGENT, ClientSettings, Environment
from ..models import Account, Activity, Fill, Hold, Order, TrailingVolume
from ..signing import Credentials, RequestSigner
from .base import BaseClient


def _segment(value: str) -> str:
    return quote(value, safe="")


class PrivateClient(BaseClient):
    """HTTP client for the authenticated private API."""

    client_name = "private"

    def __init__(
        self,
        environment: Union[Environment, str],
        credentials: Credentials,
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        # Decode the secret before anything else is allocated.
        self._signer = RequestSigner(credentials.secret)
        self._credentials = credentials
        super().__init__(environment, user_agent=user_agent, session=session)

    def __repr__(self) -> str:
        return f"PrivateClient({self.environment.name})"

    @classmethod
    def from_settings(
        cls,
        settings: Optional[ClientSettings] = None,
        credentials: Optional[Credentials] = None,
        **kwargs,
    ) -> "PrivateClient":
        """Build a client from environment settings and credentials."""
        settings = settings or ClientSettings.from_env()
        credentials = credentials or Credentials.from_env()
        return cls(settings.environment, credentials, user_agent=settings.user_agent, **kwargs)

    def _auth_headers(self, method: str, path: str, body: str = "") -> Dict[str, str]:
        timestamp = int(time.time())
        return {
            "cb-access-key": self._credentials.key,
            "cb-access-passphrase": self._credentials.passphrase,
            "cb-access-timestamp": str(timestamp),
            "cb-access-sign": self._signer.sign(timestamp, method, path, body),
        }

    async def _signed_get(self, path: str, target):
        return await self._get(path, target, headers=self._auth_headers("GET", path))

    async def accounts(self) -> List[Account]:
        """All trading accounts of the profile."""
        return await self._signed_get("/accounts", List[Account])

    async def account(self, account_id: str) -> Account:
        return await self._signed_get(f"/accounts/{_segment(account_id)}", Account)

    async def ledger(self, account_id: str) -> List[Activity]:
        """Account activity: transfers, matches, fees and rebates."""
        return await self._signed_get(f"/accounts/{_segment(account_id)}/ledger", List[Activity])

    async def holds(self, account_id: str) -> List[Hold]:
        """Funds on hold for open orders or pending withdrawals."""
        return await self._signed_get(f"/accounts/{_segment(account_id)}/holds", List[Hold])

    async def orders(self) -> List[Order]:
        """Orders of every status."""
        return await self._signed_get("/orders?status=all", List[Order])

    async def orders_for_product(self, product_id: str) -> List[Order]:
        return await self._signed_get(
            f"/orders?status=all&product_id={_segment(product_id)}", List[Order]
        )

    async def order(self, order_id: str) -> Order:
        return await self._signed_get(f"/orders/{_segment(order_id)}", Order)

    async def fills(self) -> List[Fill]:
        return await self._signed_get("/fills", List[Fill])

    async def fills_for_product(self, product_id: str) -> List[Fill]:
        return await self._signed_get(f"/fills?product_id={_segment(product_id)}", List[Fill])

    async def fills_for_order(self, order_id: str) -> List[Fill]:
        return await self._signed_get(f"/fills?order_id={_segment(order_id)}", List[Fill])

    async def trailing_volume(self) -> List[TrailingVolume]:
        """30-day trailing volume per product for the user."""
        return await self._signed_get("/users/self/trailing-volume", List[TrailingVolume])
