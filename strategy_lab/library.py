"""Library context: owns the books and delegates sorting to a strategy."""
from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Callable, Iterator, overload

from .books import Book
from .sorting import SortByAuthor, SortStrategy

__all__ = ["InvalidArgument", "BookView", "Library", "StrategyListener"]

logger = logging.getLogger(__name__)

StrategyListener = Callable[[str], None]


class InvalidArgument(ValueError):
    """Raised when a required book or strategy is missing."""


class BookView(Sequence):
    """Read-only live view over a library's books.

    Iteration walks the current list each time, so the view is restartable
    and reflects later sorts or additions.
    """

    def __init__(self, books: list[Book]) -> None:
        self._books = books

    @overload
    def __getitem__(self, index: int) -> Book: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Book, ...]: ...

    def __getitem__(self, index: int | slice) -> Book | tuple[Book, ...]:
        if isinstance(index, slice):
            return tuple(self._books[index])
        return self._books[index]

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        yield from self._books

    def __repr__(self) -> str:
        return f"BookView({list(self._books)!r})"


class Library:
    def __init__(self) -> None:
        self._books: list[Book] = []
        self._strategy: SortStrategy = SortByAuthor()
        self._listeners: list[StrategyListener] = []

    @property
    def strategy(self) -> SortStrategy:
        return self._strategy

    def __len__(self) -> int:
        return len(self._books)

    def subscribe(self, listener: StrategyListener) -> StrategyListener:
        """Register ``listener`` for strategy-changed notifications.

        The listener is returned so the method also works as a decorator.
        """
        self._listeners.append(listener)
        return listener

    def unsubscribe(self, listener: StrategyListener) -> None:
        self._listeners.remove(listener)

    def add(self, book: Book | None) -> None:
        if book is None:
            raise InvalidArgument("book must not be None")
        self._books.append(book)
        logger.debug("Added %r (total %d)", book.title, len(self._books))

    def set_strategy(self, strategy: SortStrategy | None) -> None:
        """Swap the active strategy and notify listeners.

        Does not re-sort; call :meth:`sort_books` afterwards.
        """
        if strategy is None:
            raise InvalidArgument("strategy must not be None")
        self._strategy = strategy
        logger.debug("Sort strategy set to %s", strategy.name)
        for listener in list(self._listeners):
            listener(strategy.name)

    def sort_books(self) -> None:
        if not self._books:
            return
        self._strategy.sort(self._books)
        logger.debug("Sorted %d books with %s", len(self._books), self._strategy.name)

    def list_books(self) -> BookView:
        return BookView(self._books)
