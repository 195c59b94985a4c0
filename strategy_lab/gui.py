"""Interactive graph window: a function selector beside a drawing area."""
from __future__ import annotations

import logging
from typing import Any, Iterable

from .constants import DEFAULT_SIZE
from .functions import FunctionStrategy, available_functions
from .plot import draw_frame, select_backend
from .renderer import GraphFrame, GraphRenderer

__all__ = ["GraphWindow"]

logger = logging.getLogger(__name__)

_SELECTOR_RECT = (0.01, 0.70, 0.28, 0.28)
_PLOT_RECT = (0.30, 0.0, 0.70, 1.0)


class GraphWindow:
    """Single-figure window that redraws on selection change or resize.

    Pass ``figure`` to attach to an existing (e.g. headless) figure instead
    of opening a pyplot window.
    """

    def __init__(
        self,
        functions: Iterable[FunctionStrategy] | None = None,
        renderer: GraphRenderer | None = None,
        *,
        initial: FunctionStrategy | None = None,
        figure: Any | None = None,
        dpi: int = 100,
    ) -> None:
        from matplotlib.widgets import RadioButtons  # type: ignore

        self.functions: list[FunctionStrategy] = (
            available_functions() if functions is None else list(functions)
        )
        if initial is not None and initial.name not in {f.name for f in self.functions}:
            self.functions.append(initial)
        if not self.functions:
            raise ValueError("GraphWindow needs at least one function strategy")
        self.renderer = renderer or GraphRenderer()
        self.current = initial or self.functions[0]

        if figure is None:
            select_backend()
            import matplotlib.pyplot as plt  # type: ignore

            figure = plt.figure(figsize=(DEFAULT_SIZE[0] / dpi, DEFAULT_SIZE[1] / dpi), dpi=dpi)
        self.figure = figure
        self.plot_ax = figure.add_axes(_PLOT_RECT)
        selector_ax = figure.add_axes(_SELECTOR_RECT)
        labels = [f.name for f in self.functions]
        self.selector = RadioButtons(selector_ax, labels, active=labels.index(self.current.name))
        self.selector.on_clicked(self._on_select)
        self._resize_cid = figure.canvas.mpl_connect("resize_event", self._on_resize)

        self.last_frame: GraphFrame = self.redraw()

    def _on_select(self, label: str | None) -> None:
        for func in self.functions:
            if func.name == label:
                self.current = func
                break
        logger.info("Selected function %s", self.current.name)
        self.redraw()

    def _on_resize(self, _event: Any) -> None:
        self.redraw()

    def redraw(self) -> GraphFrame:
        bbox = self.plot_ax.get_window_extent()
        width, height = bbox.width, bbox.height
        frame = self.renderer.render(width, height, self.current)
        draw_frame(self.plot_ax, frame, width, height)
        self.plot_ax.text(self.renderer.margin, self.renderer.margin / 2, self.current.name, va="center")
        self.figure.canvas.draw_idle()
        self.last_frame = frame
        return frame

    def show(self) -> None:  # pragma: no cover - opens a window
        import matplotlib.pyplot as plt  # type: ignore

        plt.show()
