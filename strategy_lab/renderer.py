"""Math-to-screen mapping and polyline sampling for function graphs.

Screen coordinates follow the usual raster convention: origin top-left,
y growing downward. Math y grows upward, so the vertical transform flips.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import NamedTuple

import numpy as np

from .constants import DEFAULT_MARGIN, DEFAULT_VIEWPORT
from .functions import FunctionStrategy

__all__ = ["Viewport", "Segment", "GraphFrame", "GraphRenderer"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Viewport:
    """Visible math-space rectangle."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    def __post_init__(self) -> None:
        if not self.min_x < self.max_x:
            raise ValueError(f"Viewport needs min_x < max_x, got {self.min_x} and {self.max_x}")
        if not self.min_y < self.max_y:
            raise ValueError(f"Viewport needs min_y < max_y, got {self.min_y} and {self.max_y}")

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


class Segment(NamedTuple):
    x1: float
    y1: float
    x2: float
    y2: float


@dataclass(frozen=True)
class GraphFrame:
    axes: tuple[Segment, ...] = ()
    curve: tuple[Segment, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.axes and not self.curve


class GraphRenderer:
    """Turns a function strategy into screen-space line segments."""

    def __init__(self, viewport: Viewport | None = None, margin: float = DEFAULT_MARGIN) -> None:
        self.viewport = viewport or Viewport(*DEFAULT_VIEWPORT)
        self.margin = margin

    # ------------------------------------------------------------------
    # geometry
    def drawable_size(self, width: float, height: float) -> tuple[float, float]:
        return width - 2 * self.margin, height - 2 * self.margin

    def scales(self, width: float, height: float) -> tuple[float, float]:
        dw, dh = self.drawable_size(width, height)
        return dw / self.viewport.width, dh / self.viewport.height

    def to_screen(self, x: float, y: float, width: float, height: float) -> tuple[float, float]:
        vp = self.viewport
        _, dh = self.drawable_size(width, height)
        sx, sy = self.scales(width, height)
        return (
            self.margin + (x - vp.min_x) * sx,
            self.margin + dh - (y - vp.min_y) * sy,
        )

    def to_math(self, px: float, py: float, width: float, height: float) -> tuple[float, float]:
        """Inverse of :meth:`to_screen`."""
        vp = self.viewport
        _, dh = self.drawable_size(width, height)
        sx, sy = self.scales(width, height)
        return (
            vp.min_x + (px - self.margin) / sx,
            vp.min_y + (self.margin + dh - py) / sy,
        )

    # ------------------------------------------------------------------
    # rendering
    def _axes(self, width: float, height: float) -> list[Segment]:
        dw, dh = self.drawable_size(width, height)
        left, top = self.margin, self.margin
        right, bottom = left + dw, top + dh
        origin_x, origin_y = self.to_screen(0.0, 0.0, width, height)

        axes: list[Segment] = []
        if top <= origin_y <= bottom:
            axes.append(Segment(left, origin_y, right, origin_y))
        if left <= origin_x <= right:
            axes.append(Segment(origin_x, top, origin_x, bottom))
        return axes

    def _is_break(self, y: float | None) -> bool:
        vp = self.viewport
        if y is None or not math.isfinite(y):
            return True
        if abs(y) > 2 * vp.max_y:
            return True
        return not vp.min_y <= y <= vp.max_y

    def _curve(self, function: FunctionStrategy, width: float, height: float) -> list[Segment]:
        vp = self.viewport
        dw, _ = self.drawable_size(width, height)
        samples = max(int(math.ceil(dw)), 1)
        # Roughly one sample per horizontal pixel, endpoints included
        xs = np.linspace(vp.min_x, vp.max_x, samples + 1)

        segments: list[Segment] = []
        prev: tuple[float, float] | None = None
        for x in xs:
            y = function.evaluate(float(x))
            if self._is_break(y):
                prev = None
                continue
            point = self.to_screen(float(x), float(y), width, height)  # type: ignore[arg-type]
            if prev is not None:
                segments.append(Segment(prev[0], prev[1], point[0], point[1]))
            prev = point
        return segments

    def render(self, width: float, height: float, function: FunctionStrategy) -> GraphFrame:
        """Build the axes and curve segments for a ``width`` x ``height`` surface."""
        dw, dh = self.drawable_size(width, height)
        if dw <= 0 or dh <= 0:
            logger.debug("Drawable area %sx%s is empty; nothing to render", dw, dh)
            return GraphFrame()

        frame = GraphFrame(
            axes=tuple(self._axes(width, height)),
            curve=tuple(self._curve(function, width, height)),
        )
        logger.debug(
            "Rendered %s at %sx%s: %d axis and %d curve segments",
            function.name,
            width,
            height,
            len(frame.axes),
            len(frame.curve),
        )
        return frame
