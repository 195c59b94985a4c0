"""Strategy pattern demos: swappable book sorting and function graphing.

Typical usage
-------------
>>> from strategy_lab import Book, Library, SortByYearDescending
>>> lib = Library()
>>> lib.add(Book("Kobzar", "Shevchenko T.", 1840, 350.0))
>>> lib.set_strategy(SortByYearDescending())
>>> lib.sort_books()
"""
from importlib.metadata import version as _version  # type: ignore

from .books import Book
from .functions import ArctanRatioFunction, ExpressionFunction, FunctionStrategy, SineFunction
from .library import InvalidArgument, Library
from .renderer import GraphFrame, GraphRenderer, Segment, Viewport
from .sorting import SortByAuthor, SortByPriceAscending, SortByYearDescending, SortStrategy

__all__ = [
    "Book",
    "Library",
    "InvalidArgument",
    "SortStrategy",
    "SortByAuthor",
    "SortByYearDescending",
    "SortByPriceAscending",
    "FunctionStrategy",
    "ArctanRatioFunction",
    "SineFunction",
    "ExpressionFunction",
    "GraphRenderer",
    "GraphFrame",
    "Segment",
    "Viewport",
    "__version__",
]

try:
    __version__ = _version("strategy_lab")
except Exception:  # pragma: no cover – package not installed yet
    __version__ = "0.0.0"
