"""
Exact decimal values for prices and sizes.

The exchange sends every monetary and quantity field as a JSON string so
that no precision is lost in transit.  :class:`PreciseNumber` keeps that
string exactly as received and only converts to a native float when the
caller explicitly asks for one.  The conversion is best-effort: it returns
``None`` rather than raising when the text is not a finite number that
fits the requested width.

No arithmetic is defined on this type; it is a transport and display
representation.  Callers that need exact arithmetic can build a
:class:`decimal.Decimal` from ``str(value)``.
"""

from __future__ import annotations

import math
import re
import struct
from decimal import Decimal
from fractions import Fraction
from typing import Any, Optional, Union

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic_core import core_schema

# Plain decimal or scientific notation, no whitespace, underscores, nan or inf.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

Numeric = Union[int, float, Decimal, str]

_F32_INF_BITS = 0x7F800000


def _pack_f32(value: float) -> bytes:
    return struct.pack("<f", value)


def _unpack_f32(raw: bytes) -> float:
    return struct.unpack("<f", raw)[0]


def _f32_bits(value: float) -> int:
    return struct.unpack("<I", _pack_f32(value))[0]


def _f32_from_bits(bits: int) -> float:
    return _unpack_f32(struct.pack("<I", bits))


class PreciseNumber:
    """A decimal number stored as its exact textual representation."""

    __slots__ = ("_text",)

    def __init__(self, value: Numeric) -> None:
        # bool is an int subclass but never a quantity
        if isinstance(value, bool):
            raise TypeError("PreciseNumber cannot be built from a bool")
        if isinstance(value, str):
            text = value
        elif isinstance(value, int):
            text = str(value)
        elif isinstance(value, float):
            text = repr(value)
        elif isinstance(value, Decimal):
            text = str(value)
        else:
            raise TypeError(
                f"PreciseNumber cannot be built from {type(value).__name__}"
            )
        object.__setattr__(self, "_text", text)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("PreciseNumber is immutable")

    @property
    def text(self) -> str:
        """The stored decimal text, unmodified."""
        return self._text

    def to_float64(self) -> Optional[float]:
        """Parse the text as a double, or return ``None`` if it is not a finite number."""
        if not _NUMBER_RE.fullmatch(self._text):
            return None
        result = float(self._text)
        if not math.isfinite(result):
            return None
        return result

    def to_float32(self) -> Optional[float]:
        """Parse the text and round it once to the nearest single.

        Ties round to even.  Returns ``None`` when the text is not numeric
        or the value does not fit in an IEEE-754 single.
        """
        wide = self.to_float64()
        if wide is None:
            return None
        try:
            narrowed = _unpack_f32(_pack_f32(abs(wide)))
        except OverflowError:
            return None
        if not math.isfinite(narrowed):
            return None
        # text -> double -> single can round twice; the true nearest single
        # is the narrowed value or one of its neighbours.
        exact = abs(Fraction(Decimal(self._text)))
        bits = _f32_bits(narrowed)
        candidates = [b for b in (bits - 1, bits, bits + 1) if 0 <= b < _F32_INF_BITS]
        best = min(
            candidates,
            key=lambda b: (abs(Fraction(_f32_from_bits(b)) - exact), b & 1),
        )
        return math.copysign(_f32_from_bits(best), wide)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"PreciseNumber({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PreciseNumber):
            return self._text == other._text
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)

    def __reduce__(self):
        return (PreciseNumber, (self._text,))

    # pydantic integration -------------------------------------------------

    @classmethod
    def _validate(cls, value: Any) -> "PreciseNumber":
        if isinstance(value, PreciseNumber):
            return value
        try:
            return cls(value)
        except TypeError as exc:
            # pydantic only wraps ValueError/AssertionError into ValidationError
            raise ValueError(str(exc)) from exc

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="always"
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> dict:
        return {"type": "string", "format": "decimal"}
