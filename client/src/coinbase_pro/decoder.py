"""
JSON response decoding.

Bodies are validated straight from bytes with a cached
:class:`pydantic.TypeAdapter` per target type.  Malformed JSON and schema
mismatches both surface as :class:`~coinbase_pro.exceptions.DecodeError`,
which keeps the raw body so that exchange error objects stay readable.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError

from .exceptions import DecodeError


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def decode(
    body: bytes,
    target: Any,
    *,
    status: Optional[int] = None,
    url: Optional[str] = None,
) -> Any:
    """Validate ``body`` as JSON into ``target``.

    Args:
        body: Raw response body.
        target: Any type pydantic can validate, e.g. ``List[Product]``.
        status: HTTP status, recorded on the error for diagnostics.
        url: Request URL, recorded on the error for diagnostics.

    Returns:
        The validated value.

    Raises:
        DecodeError: If the body is not valid JSON or does not match ``target``.
    """
    try:
        return _adapter(target).validate_json(body)
    except ValidationError as exc:
        raise DecodeError(exc, body, status=status, url=url) from exc
