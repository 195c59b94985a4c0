from __future__ import annotations

import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from matplotlib.backends.backend_agg import FigureCanvasAgg  # noqa: E402
from matplotlib.figure import Figure  # noqa: E402

from strategy_lab.functions import (  # noqa: E402
    ArctanRatioFunction,
    ExpressionFunction,
    SineFunction,
)
from strategy_lab.gui import GraphWindow  # noqa: E402


def _figure() -> Figure:
    fig = Figure(figsize=(8, 6), dpi=100)
    FigureCanvasAgg(fig)
    return fig


def test_window_draws_first_function_on_open() -> None:
    window = GraphWindow(figure=_figure())
    assert isinstance(window.current, ArctanRatioFunction)
    assert window.last_frame.curve
    assert window.plot_ax.collections


def test_selection_change_redraws_with_new_strategy() -> None:
    window = GraphWindow(figure=_figure())
    before = window.last_frame
    window.selector.set_active(1)
    assert isinstance(window.current, SineFunction)
    assert window.last_frame is not before
    assert window.last_frame.curve != before.curve


def test_resize_redraws_to_new_pixel_size() -> None:
    fig = _figure()
    window = GraphWindow(figure=fig)
    before = len(window.last_frame.curve)
    fig.set_size_inches(4, 3)
    fig.canvas.callbacks.process("resize_event", SimpleNamespace(name="resize_event", canvas=fig.canvas))
    assert len(window.last_frame.curve) < before


def test_custom_initial_function_is_listed_and_selected() -> None:
    custom = ExpressionFunction("x / 2")
    window = GraphWindow(figure=_figure(), initial=custom)
    assert window.current is custom
    assert window.functions[-1] is custom
    assert window.selector.value_selected == "y = x / 2"


def test_window_requires_functions() -> None:
    with pytest.raises(ValueError):
        GraphWindow(functions=[], figure=_figure())
