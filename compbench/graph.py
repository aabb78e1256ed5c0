"""The graph command: draw one plot per benchmark test from recorded results."""

from __future__ import annotations

import os
import sys
from pathlib import Path

from compbench.container_io import read_containers
from compbench.containers import TestCaseContainer
from compbench.enums import Folder, name, title
from compbench.plot import Plot, PlotTab

_DARK_GRAY = (128, 128, 128, 255)


def insert_test_case(tabs: PlotTab, container: TestCaseContainer) -> Plot:
    """Add a result to the plot of its test, titling the plot."""
    testcase = container.testcase
    plot = tabs.insert(name(testcase.id))
    plot.title = f"{title(testcase.id)}, {testcase.count} iteracji"
    plot.subtitle = "Wiecej iteracji = wieksza wydajność"
    plot.subtitle_color = _DARK_GRAY
    plot.insert(container)
    return plot


def load_from_file(tabs: PlotTab, file_name: str | os.PathLike[str]) -> int:
    """Add every test-case record of a result file; return how many were added."""
    added = 0
    for container in read_containers(file_name):
        if isinstance(container, TestCaseContainer):
            insert_test_case(tabs, container)
            added += 1
    return added


def save_plots(tabs: PlotTab, directory: str | os.PathLike[str]) -> list[Path]:
    """Save every plot as ``<test name>.png`` in ``directory``; return the paths."""
    target = Path(directory)
    target.mkdir(parents=True, exist_ok=True)
    saved = []
    for plot in tabs:
        path = target / f"{plot.test_name}.png"
        plot.save_to_file(path)
        saved.append(path)
    return saved


def main(argv: list[str] | None = None) -> int:
    """Read every result file in the data folder and save the plots."""
    args = sys.argv[1:] if argv is None else argv
    home = Path.home()
    data_dir = Path(args[0]) if args else home / name(Folder.Data)
    plot_dir = Path(args[1]) if len(args) > 1 else home / name(Folder.Plot)
    tabs = PlotTab()
    if data_dir.is_dir():
        files = sorted(
            (path for path in data_dir.iterdir() if path.is_file() and "." in path.name),
            key=lambda path: path.name,
            reverse=True,
        )
        for path in files:
            load_from_file(tabs, path)
    for plot in tabs:
        plot.generate()
    save_plots(tabs, plot_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())