"""Package‑wide constants and demo assets."""

from typing import Any

# Math-space rectangle shown by the graph demo: (min_x, max_x, min_y, max_y)
DEFAULT_VIEWPORT: tuple[float, float, float, float] = (-10.0, 10.0, -20.0, 20.0)
DEFAULT_MARGIN: int = 40
DEFAULT_SIZE: tuple[int, int] = (800, 600)

# |x| below this is treated as the removable singularity of (3x + 1) / atan(x)
SINGULARITY_EPSILON: float = 1e-4

DEMO_TITLE = "=== Lab 7: Strategy Pattern (Books) ==="

DEMO_BOOKS: list[dict[str, Any]] = [
    {"title": "Kobzar", "author": "Shevchenko T.", "year": 1840, "price": 350.00},
    {"title": "1984", "author": "Orwell G.", "year": 1949, "price": 210.50},
    {"title": "It", "author": "King S.", "year": 1986, "price": 450.00},
    {"title": "Harry Potter", "author": "Rowling J.K.", "year": 1997, "price": 300.00},
    {"title": "Zakhar Berkut", "author": "Franko I.", "year": 1883, "price": 180.00},
]

__all__ = [
    "DEFAULT_VIEWPORT",
    "DEFAULT_MARGIN",
    "DEFAULT_SIZE",
    "SINGULARITY_EPSILON",
    "DEMO_TITLE",
    "DEMO_BOOKS",
]
