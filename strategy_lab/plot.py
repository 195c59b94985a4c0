"""Matplotlib drawing helpers for rendered graph frames."""
from __future__ import annotations

import logging
import os
import tempfile
import warnings
from pathlib import Path
from typing import Any

from .constants import DEFAULT_MARGIN, DEFAULT_SIZE
from .functions import FunctionStrategy
from .renderer import GraphFrame, GraphRenderer, Viewport

__all__ = ["select_backend", "draw_frame", "render_png"]

logger = logging.getLogger(__name__)

AXIS_COLOR = "black"
CURVE_COLOR = "tab:blue"


def select_backend() -> str:
    """Pick a usable matplotlib backend before pyplot is imported.

    Keeps an already-active Agg/TkAgg backend, prefers TkAgg when a display
    is available, and otherwise falls back to Agg.
    """
    try:
        import matplotlib  # type: ignore
    except Exception as exc:  # pragma: no cover - environment-dependent
        raise RuntimeError("matplotlib is required to draw graphs.") from exc

    try:
        backend = matplotlib.get_backend().lower()
    except Exception:
        backend = ""
    if backend not in {"agg", "tkagg"}:
        env_backend = os.environ.get("MPLBACKEND", "").lower()
        prefer_tk = bool(os.environ.get("DISPLAY")) or env_backend == "tkagg"
        if prefer_tk:
            try:
                matplotlib.use("TkAgg")
            except Exception as exc:  # pragma: no cover - depends on system backend
                warnings.warn(
                    f"Preferred GUI backend 'TkAgg' unavailable; falling back to 'Agg': {exc}",
                    RuntimeWarning,
                )
                matplotlib.use("Agg")
        else:
            matplotlib.use("Agg")
    backend = matplotlib.get_backend().lower()
    logger.debug("Using matplotlib backend %s", backend)
    return backend


def draw_frame(ax: Any, frame: GraphFrame, width: float, height: float) -> None:
    """Draw ``frame`` onto ``ax`` using screen-pixel coordinates (y down)."""
    from matplotlib.collections import LineCollection  # type: ignore

    ax.clear()
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
    ax.set_axis_off()
    if frame.axes:
        lines = [((s.x1, s.y1), (s.x2, s.y2)) for s in frame.axes]
        ax.add_collection(LineCollection(lines, colors=AXIS_COLOR, linewidths=1.5))
    if frame.curve:
        lines = [((s.x1, s.y1), (s.x2, s.y2)) for s in frame.curve]
        ax.add_collection(LineCollection(lines, colors=CURVE_COLOR, linewidths=2.0))


def render_png(
    function: FunctionStrategy,
    *,
    width: int = DEFAULT_SIZE[0],
    height: int = DEFAULT_SIZE[1],
    viewport: Viewport | None = None,
    margin: float = DEFAULT_MARGIN,
    path: str | os.PathLike[str] | None = None,
    dpi: int = 100,
) -> str:
    """Render ``function`` to a **PNG file** and return the file path."""
    select_backend()
    import matplotlib.pyplot as plt  # type: ignore

    renderer = GraphRenderer(viewport, margin)
    frame = renderer.render(width, height, function)

    if path is None:
        fd, tmp = tempfile.mkstemp(suffix=".png")
        os.close(fd)
        png_path = Path(tmp)
    else:
        png_path = Path(path)

    fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    try:
        ax = fig.add_axes((0.0, 0.0, 1.0, 1.0))
        draw_frame(ax, frame, width, height)
        ax.text(margin, margin / 2, function.name, va="center")
        fig.savefig(png_path, format="png", dpi=dpi)
    finally:
        plt.close(fig)
    logger.info("Wrote %s to %s", function.name, png_path)
    return str(png_path)
