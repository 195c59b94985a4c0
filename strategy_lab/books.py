"""Book record and console table formatting."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

__all__ = ["Book", "format_book", "format_table"]

_RULE = "-" * 70


@dataclass(frozen=True)
class Book:
    """Immutable book record compared by value."""

    title: str
    author: str
    year: int
    price: float

    def __str__(self) -> str:
        return format_book(self)


def format_book(book: Book) -> str:
    return f'{book.author:<20} | "{book.title:<20}" | {book.year} | {book.price:7.2f} UAH'


def format_table(books: Iterable[Book]) -> str:
    """Return the fixed-width library table, one row per book."""
    lines = [
        _RULE,
        f"{'Author':<20} | {'Title':<20} | Year | Price",
        _RULE,
    ]
    lines.extend(format_book(b) for b in books)
    lines.append(_RULE)
    return "\n".join(lines) + "\n"
