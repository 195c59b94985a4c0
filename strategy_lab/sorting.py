"""Interchangeable in-place sort strategies for book lists.

Each strategy reorders the list it is given and returns ``None``. Tie order
is whatever the underlying algorithm produces; callers should not rely on it.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from .books import Book

__all__ = [
    "SortStrategy",
    "SortByAuthor",
    "SortByYearDescending",
    "SortByPriceAscending",
    "SORT_STRATEGIES",
    "get_sort_strategy",
]


class SortStrategy(ABC):
    """Common contract: sort ``books`` in place."""

    key: str = ""
    name: str = ""

    @abstractmethod
    def sort(self, books: list[Book]) -> None:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class SortByAuthor(SortStrategy):
    key = "author"
    name = "SortByAuthor"

    def sort(self, books: list[Book]) -> None:
        # str ordering is by code point, never locale
        books.sort(key=lambda b: b.author)


class SortByYearDescending(SortStrategy):
    """Newest first, via an adjacent-exchange (bubble) sort.

    Kept quadratic on purpose to show a hand-written algorithm behind the
    same interface as the library-backed strategies.
    """

    key = "year"
    name = "SortByYearDescending"

    def sort(self, books: list[Book]) -> None:
        n = len(books)
        for _ in range(n - 1):
            for j in range(n - 1):
                if books[j].year < books[j + 1].year:
                    books[j], books[j + 1] = books[j + 1], books[j]


class SortByPriceAscending(SortStrategy):
    key = "price"
    name = "SortByPriceAscending"

    def sort(self, books: list[Book]) -> None:
        books.sort(key=lambda b: b.price)


SORT_STRATEGIES: dict[str, type[SortStrategy]] = {
    cls.key: cls for cls in (SortByAuthor, SortByYearDescending, SortByPriceAscending)
}


def get_sort_strategy(key: str) -> SortStrategy:
    """Instantiate the strategy registered under ``key``."""
    try:
        return SORT_STRATEGIES[key]()
    except KeyError:
        valid = ", ".join(sorted(SORT_STRATEGIES))
        raise KeyError(f"Unknown sort strategy {key!r}; expected one of: {valid}") from None
