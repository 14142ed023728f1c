"""
Order book detail levels.

``/products/{id}/book`` returns differently shaped payloads depending on
its ``level`` query parameter: levels 1 and 2 share the aggregated schema
while level 3 lists every order.  Each level is a marker class generic
over the model it decodes into, so a type checker infers the result of
``client.book("BTC-USD", Full())`` as :class:`FullBook` and rejects code
that treats it as an :class:`AggregatedBook`.

The set is closed: ``Best``, ``Aggregated`` and ``Full`` are the only
levels, and defining another subclass of :class:`BookLevel` raises
:class:`TypeError`.
"""

from __future__ import annotations

from typing import ClassVar, Generic, Tuple, TypeVar

from .models import AggregatedBook, FullBook

BookT = TypeVar("BookT", AggregatedBook, FullBook)


class BookLevel(Generic[BookT]):
    """Base for the three detail levels.  Not instantiable itself."""

    level: ClassVar[int]
    book_type: ClassVar[type]

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__:
            raise TypeError(
                "BookLevel is a closed set; use Best(), Aggregated() or Full()"
            )

    def __new__(cls):
        if cls is BookLevel:
            raise TypeError("BookLevel cannot be instantiated; use Best(), Aggregated() or Full()")
        return super().__new__(cls)

    @property
    def query(self) -> str:
        """Query string fragment selecting this level."""
        return f"level={self.level}"

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Best(BookLevel[AggregatedBook]):
    """Only the best bid and ask."""

    level = 1
    book_type = AggregatedBook


class Aggregated(BookLevel[AggregatedBook]):
    """Top 50 bids and asks, aggregated by price."""

    level = 2
    book_type = AggregatedBook


class Full(BookLevel[FullBook]):
    """Full order book, not aggregated."""

    level = 3
    book_type = FullBook


LEVELS: Tuple[BookLevel, ...] = (Best(), Aggregated(), Full())
