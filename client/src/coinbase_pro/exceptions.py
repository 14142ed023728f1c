"""
Exceptions raised by the Coinbase Pro client.

Every request either returns a decoded value or raises exactly one of two
errors:

* :class:`TransportError` when no response body could be obtained
  (connection refused, TLS failure, protocol error).
* :class:`DecodeError` when a body arrived but could not be validated into
  the expected type.  The raw body is kept, together with its text form,
  because the exchange frequently answers with an error object such as
  ``{"message": "invalid signature"}`` that simply fails validation.

:class:`ConfigurationError` is raised only while building a client.  None
of these exceptions ever carry credential material.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import ValidationError


class CoinbaseError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


# =============================================================================
# Request Errors
# =============================================================================


class TransportError(CoinbaseError):
    """Raised when the HTTP exchange itself failed and no body was read."""

    def __init__(self, cause: BaseException, url: Optional[str] = None):
        details: Dict[str, Any] = {"cause": type(cause).__name__}
        if url:
            details["url"] = url
        super().__init__(f"Request failed: {cause}", details)
        self.cause = cause
        self.url = url


class DecodeError(CoinbaseError):
    """Raised when a response body does not match the expected schema.

    Attributes:
        error: The pydantic validation error (covers malformed JSON too).
        body: The raw response bytes.
        text: ``body`` decoded as UTF-8, or ``None`` if it is not valid UTF-8.
        text_error: The :class:`UnicodeDecodeError` when ``text`` is ``None``.
        status: HTTP status of the response, when known.
        url: Request URL, when known.
    """

    def __init__(
        self,
        error: ValidationError,
        body: bytes,
        status: Optional[int] = None,
        url: Optional[str] = None,
    ):
        self.error = error
        self.body = body
        self.status = status
        self.url = url
        try:
            self.text: Optional[str] = body.decode("utf-8")
            self.text_error: Optional[UnicodeDecodeError] = None
        except UnicodeDecodeError as exc:
            self.text = None
            self.text_error = exc

        details: Dict[str, Any] = {"errors": error.error_count()}
        if status is not None:
            details["status"] = status
        if url:
            details["url"] = url
        if self.text is not None:
            details["body"] = self.text[:200]
        super().__init__(f"Could not decode response as {error.title}", details)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(CoinbaseError):
    """Raised when a client cannot be constructed."""

    def __init__(self, message: str, config_key: Optional[str] = None):
        details = {}
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, details)
        self.config_key = config_key


class InvalidSecretError(ConfigurationError):
    """Raised when the API secret is not valid base64."""

    def __init__(self) -> None:
        super().__init__("API secret is not valid base64", config_key="secret")
