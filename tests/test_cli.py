from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from strategy_lab import cli  # noqa: E402


@pytest.fixture
def isolated_logging() -> Any:
    root = logging.getLogger()
    old_handlers = root.handlers[:]
    old_level = root.level
    for h in old_handlers:
        root.removeHandler(h)

    pkg_logger = logging.getLogger("strategy_lab")
    pkg_old_handlers = pkg_logger.handlers[:]
    pkg_old_level = pkg_logger.level
    pkg_old_propagate = pkg_logger.propagate
    try:
        yield
    finally:
        for h in root.handlers[:]:
            root.removeHandler(h)
        for h in old_handlers:
            root.addHandler(h)
        root.setLevel(old_level)
        for h in pkg_logger.handlers[:]:
            pkg_logger.removeHandler(h)
        for h in pkg_old_handlers:
            pkg_logger.addHandler(h)
        pkg_logger.setLevel(pkg_old_level)
        pkg_logger.propagate = pkg_old_propagate


def test_books_main_prints_three_tables(capsys: Any, isolated_logging: Any) -> None:
    assert cli.books_main([]) == 0
    out = capsys.readouterr().out

    assert out.startswith("=== Lab 7: Strategy Pattern (Books) ===")
    assert out.count("Author               | Title") == 3
    assert "[System] Strategy changed to: SortByYearDescending" in out
    assert "[System] Strategy changed to: SortByPriceAscending" in out
    assert out.rstrip().endswith("Program finished.")

    tables = out.split("[System]")
    author_rows = [line.split("|")[0].strip() for line in tables[0].splitlines() if "UAH" in line]
    assert author_rows == ["Franko I.", "King S.", "Orwell G.", "Rowling J.K.", "Shevchenko T."]
    year_rows = [int(line.split("|")[2]) for line in tables[1].splitlines() if "UAH" in line]
    assert year_rows == [1997, 1986, 1949, 1883, 1840]
    price_rows = [line.split("|")[3].strip() for line in tables[2].splitlines() if "UAH" in line]
    assert price_rows == ["180.00 UAH", "210.50 UAH", "300.00 UAH", "350.00 UAH", "450.00 UAH"]


def test_log_level_is_isolated(capsys: Any, isolated_logging: Any) -> None:
    cli.books_main(["--log-level", "DEBUG"])
    logging.getLogger().debug("root debug")
    err = capsys.readouterr().err
    assert "Sorted 5 books with SortByAuthor" in err
    assert "root debug" not in err


def test_graph_main_writes_png(tmp_path: Path, capsys: Any, isolated_logging: Any) -> None:
    out = tmp_path / "sine.png"
    assert cli.graph_main(["--function", "sine", "--out", str(out), "--width", "200", "--height", "150"]) == 0
    assert out.is_file()
    assert str(out) in capsys.readouterr().out


def test_graph_main_accepts_expression(tmp_path: Path, isolated_logging: Any) -> None:
    out = tmp_path / "expr.png"
    assert cli.graph_main(["--expr", "x**2 / 4", "--out", str(out), "--viewport", "-5", "5", "-1", "10"]) == 0
    assert out.is_file()


def test_graph_main_opens_window_without_out(monkeypatch: pytest.MonkeyPatch, isolated_logging: Any) -> None:
    import strategy_lab.gui as gui

    opened: dict[str, Any] = {}

    class FakeWindow:
        def __init__(self, *, renderer: Any, initial: Any) -> None:
            opened["renderer"] = renderer
            opened["initial"] = initial

        def show(self) -> None:
            opened["shown"] = True

    monkeypatch.setattr(gui, "GraphWindow", FakeWindow)
    assert cli.graph_main(["--function", "sine", "--margin", "10"]) == 0
    assert opened["shown"] is True
    assert opened["initial"].key == "sine"
    assert opened["renderer"].margin == 10


@pytest.mark.parametrize(
    "argv, message",
    [
        (["--function", "cosine"], "Unknown function"),
        (["--expr", "x + a"], "unknown symbols a"),
        (["--expr", "f(x)", "--out", "unused.png"], "unknown functions f"),
        (["--expr", "besselj(0, x)", "--out", "unused.png"], "unsupported function"),
        (["--viewport", "1", "1", "0", "1"], "min_x < max_x"),
    ],
)
def test_graph_main_reports_bad_input(argv: list[str], message: str, isolated_logging: Any) -> None:
    with pytest.raises(SystemExit) as exc:
        cli.graph_main(argv)
    assert message in str(exc.value.code)
