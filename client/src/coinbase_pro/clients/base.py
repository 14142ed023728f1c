"""
Shared request pipeline for the public and private clients.

``_get`` is the only place a request is issued: it adds the User-Agent,
sends the request through the :class:`~coinbase_pro.transport.Transport`,
decodes the body into the caller's type and records metrics.  Endpoint
methods in the subclasses only build paths.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional, Union

import aiohttp

from ..config import DEFAULT_USER_AGENT, Environment
from ..decoder import decode
from ..exceptions import DecodeError, TransportError
from ..metrics import (
    OUTCOME_DECODE_ERROR,
    OUTCOME_OK,
    OUTCOME_TRANSPORT_ERROR,
    REQUEST_SECONDS,
    REQUESTS,
)
from ..transport import Transport

logger = logging.getLogger(__name__)


class BaseClient:
    """Base URL, transport and the fetch/decode pipeline."""

    client_name = "base"

    def __init__(
        self,
        environment: Union[Environment, str] = Environment.SANDBOX,
        *,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[aiohttp.ClientSession] = None,
    ) -> None:
        """Construct the client.

        Args:
            environment: ``Environment.SANDBOX`` or ``Environment.LIVE`` (or
                their URL strings).  Anything else raises ``ConfigurationError``.
            user_agent: Value of the ``User-Agent`` header.
            session: Optional aiohttp session to share.  When omitted the
                client creates and owns one, closed by :meth:`close`.
        """
        self.environment = Environment.resolve(environment)
        self.base_url = self.environment.base_url
        self.user_agent = user_agent
        self._transport = Transport(session=session)

    async def _get(
        self, path: str, target: Any, headers: Optional[Dict[str, str]] = None
    ) -> Any:
        url = f"{self.base_url}{path}"
        request_headers = {"User-Agent": self.user_agent}
        if headers:
            request_headers.update(headers)

        started = time.perf_counter()
        try:
            status, body = await self._transport.get(url, request_headers)
        except TransportError as exc:
            REQUESTS.labels(client=self.client_name, outcome=OUTCOME_TRANSPORT_ERROR).inc()
            logger.warning("GET %s failed: %s", path, exc.cause)
            raise
        REQUEST_SECONDS.labels(client=self.client_name).observe(time.perf_counter() - started)

        if status >= 400:
            # Avoid logging full response bodies; truncate to prevent leakage
            logger.warning(
                "REST API error %s on %s: %s",
                status,
                path,
                body[:200].decode("utf-8", errors="replace"),
            )
        try:
            result = decode(body, target, status=status, url=url)
        except DecodeError:
            REQUESTS.labels(client=self.client_name, outcome=OUTCOME_DECODE_ERROR).inc()
            logger.warning("GET %s returned a body that does not match %s", path, target)
            raise
        REQUESTS.labels(client=self.client_name, outcome=OUTCOME_OK).inc()
        return result

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()
