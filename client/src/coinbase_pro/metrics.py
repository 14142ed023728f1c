"""
Prometheus metrics for REST requests.

Metrics are registered on the default registry when this module is
imported.  The library never starts an HTTP server; applications that
want to scrape these series call :func:`prometheus_client.start_http_server`
themselves.

Metrics
-------

* ``coinbase_client_requests_total{client, outcome}`` - completed requests,
  where ``outcome`` is ``ok``, ``transport_error`` or ``decode_error``.
* ``coinbase_client_request_seconds{client}`` - time from sending the
  request to having the full body, excluding decoding.
"""

from __future__ import annotations

from prometheus_client import Counter, Histogram

OUTCOME_OK = "ok"
OUTCOME_TRANSPORT_ERROR = "transport_error"
OUTCOME_DECODE_ERROR = "decode_error"

REQUESTS = Counter(
    "coinbase_client_requests_total",
    "Coinbase REST requests by client and outcome",
    labelnames=["client", "outcome"],
)

REQUEST_SECONDS = Histogram(
    "coinbase_client_request_seconds",
    "Coinbase REST request latency in seconds",
    labelnames=["client"],
)
