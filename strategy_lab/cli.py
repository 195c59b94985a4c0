"""Command‑line entry points for the books and graph demos."""
from __future__ import annotations

import argparse
import logging
import sys

from . import constants as C
from .books import Book, format_table
from .functions import FUNCTION_STRATEGIES, ExpressionFunction, FunctionStrategy, get_function
from .library import Library
from .renderer import GraphRenderer, Viewport
from .sorting import get_sort_strategy

__all__ = ["books_main", "graph_main"]

_LOG_LEVELS = ["WARNING", "INFO", "DEBUG"]


def _add_log_level(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default="WARNING",
        help="Logging level for strategy_lab",
    )


def _configure_logging(level_name: str) -> None:
    """Attach a handler to the package logger without touching the root level."""
    logging.basicConfig(level=logging.WARNING)
    level = getattr(logging, level_name)
    pkg_logger = logging.getLogger("strategy_lab")
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(logging.BASIC_FORMAT))
    handler.setLevel(level)
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False
    pkg_logger.setLevel(level)


# --- books demo --------------------------------------------------------------------------------


def _announce_strategy(name: str) -> None:
    print(f"[System] Strategy changed to: {name}")


def _parse_books_cli(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sort a small book library with swappable strategies")
    _add_log_level(parser)
    return parser.parse_args(argv)


def books_main(argv: list[str] | None = None) -> int:
    ns = _parse_books_cli(argv)
    _configure_logging(ns.log_level)

    print(C.DEMO_TITLE + "\n")

    library = Library()
    library.subscribe(_announce_strategy)
    for data in C.DEMO_BOOKS:
        library.add(Book(**data))

    print("--- Initial state (default sort: Author) ---")
    library.sort_books()
    print(format_table(library.list_books()))

    for key in ("year", "price"):
        library.set_strategy(get_sort_strategy(key))
        library.sort_books()
        print(format_table(library.list_books()))

    print("Program finished.")
    return 0


# --- graph demo --------------------------------------------------------------------------------


def _parse_graph_cli(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plot a function chosen from swappable strategies")
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--function",
        default=next(iter(FUNCTION_STRATEGIES)),
        help=f"Initial built-in function ({', '.join(FUNCTION_STRATEGIES)})",
    )
    source.add_argument("--expr", help="Custom expression in x, e.g. 'x**2 / 4'")
    parser.add_argument("--out", help="Render headlessly to this PNG path instead of opening a window")
    parser.add_argument("--width", type=int, default=C.DEFAULT_SIZE[0], help="PNG width in pixels")
    parser.add_argument("--height", type=int, default=C.DEFAULT_SIZE[1], help="PNG height in pixels")
    parser.add_argument(
        "--viewport",
        nargs=4,
        type=float,
        metavar=("MIN_X", "MAX_X", "MIN_Y", "MAX_Y"),
        default=list(C.DEFAULT_VIEWPORT),
        help="Visible math-space rectangle",
    )
    parser.add_argument("--margin", type=float, default=C.DEFAULT_MARGIN, help="Pixel margin on every side")
    _add_log_level(parser)
    return parser.parse_args(argv)


def _resolve_function(ns: argparse.Namespace) -> FunctionStrategy:
    if ns.expr is not None:
        try:
            return ExpressionFunction(ns.expr)
        except ValueError as exc:
            sys.exit(f"Error: {exc}")
    try:
        return get_function(ns.function)
    except KeyError as exc:
        sys.exit(f"Error: {exc.args[0]}")


def graph_main(argv: list[str] | None = None) -> int:
    ns = _parse_graph_cli(argv)
    _configure_logging(ns.log_level)

    try:
        viewport = Viewport(*ns.viewport)
    except ValueError as exc:
        sys.exit(f"Error: {exc}")
    function = _resolve_function(ns)

    if ns.out:
        from .plot import render_png

        path = render_png(
            function,
            width=ns.width,
            height=ns.height,
            viewport=viewport,
            margin=ns.margin,
            path=ns.out,
        )
        print(f"✔ Graph written to {path}")
        return 0

    from .gui import GraphWindow  # imported lazily to avoid GUI deps

    window = GraphWindow(renderer=GraphRenderer(viewport, ns.margin), initial=function)
    window.show()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(books_main())
