"""
HTTPS transport built on aiohttp.

A :class:`Transport` owns one :class:`aiohttp.ClientSession` (and so one
connection pool) shared by every request of a client.  The session is
created lazily inside the running event loop unless the caller supplies
one.  Plain HTTP is refused twice: URLs must use the ``https`` scheme and
the connector itself rejects any request that is not TLS.  Redirects are
never followed.

The transport does not retry and sets no timeout of its own; callers that
need bounded latency wrap calls in :func:`asyncio.wait_for`.
"""

from __future__ import annotations

import logging
import ssl
from typing import Dict, Optional, Tuple

import aiohttp
from yarl import URL

from .exceptions import ConfigurationError, TransportError

logger = logging.getLogger(__name__)


class HttpsOnlyConnector(aiohttp.TCPConnector):
    """TCP connector that never opens an unencrypted connection."""

    async def connect(self, req, traces, timeout):  # type: ignore[override]
        if not req.is_ssl():
            raise aiohttp.ClientConnectionError(
                f"Refusing unencrypted connection to {req.host}"
            )
        return await super().connect(req, traces, timeout)


class Transport:
    """Issue GET requests and return ``(status, body)``."""

    def __init__(self, session: Optional[aiohttp.ClientSession] = None) -> None:
        try:
            self._ssl_context = ssl.create_default_context()
        except ssl.SSLError as exc:
            raise ConfigurationError("Could not build TLS context") from exc
        self._session = session
        self._owns_session = session is None

    def _get_session(self) -> aiohttp.ClientSession:
        # No await between check and assignment, so concurrent first calls
        # on one loop share a single session.
        if self._session is None:
            connector = HttpsOnlyConnector(ssl=self._ssl_context)
            self._session = aiohttp.ClientSession(
                connector=connector,
                timeout=aiohttp.ClientTimeout(total=None),
            )
        return self._session

    async def get(self, url: str, headers: Dict[str, str]) -> Tuple[int, bytes]:
        """Send a GET and read the whole body.

        ``url`` is sent exactly as given (no re-quoting), so a signature
        computed over its path stays valid on the wire.

        Raises:
            TransportError: On non-HTTPS URLs and on any aiohttp client error.
        """
        if not url.startswith("https://"):
            raise TransportError(ValueError("only https URLs are allowed"), url)
        session = self._get_session()
        logger.debug("GET %s", url)
        try:
            async with session.get(
                URL(url, encoded=True), headers=headers, allow_redirects=False
            ) as resp:
                body = await resp.read()
                return resp.status, body
        except aiohttp.ClientError as exc:
            raise TransportError(exc, url) from exc

    async def close(self) -> None:
        """Close the session if this transport created it."""
        if self._owns_session and self._session is not None:
            await self._session.close()
            self._session = None
