"""Horizontal bar charts comparing benchmark results for one test."""

from __future__ import annotations

import os
from collections.abc import Iterator
from dataclasses import dataclass, field

from matplotlib.figure import Figure

from compbench.containers import TestCaseContainer
from compbench.enums import name
from compbench.style import Font, FontType, color, gui_font, paper_font

_SAVE_SIZE = (2000, 1125)
_SAVE_DPI = 100

RGBA = tuple[int, int, int, int]


def _mpl_color(rgba: RGBA) -> tuple[float, float, float, float]:
    return tuple(channel / 255 for channel in rgba)  # type: ignore[return-value]


@dataclass
class Bar:
    """One bar of a plot: a single benchmark result."""

    name: str
    position: int
    value: float
    edge_color: RGBA
    face_color: RGBA


@dataclass
class Plot:
    """Results of one benchmark test, drawn as one bar per build."""

    test_name: str
    title: str = ""
    subtitle: str = ""
    title_color: RGBA = (0, 0, 0, 255)
    subtitle_color: RGBA = (0, 0, 0, 255)
    tests: list[TestCaseContainer] = field(default_factory=list)
    bars: list[Bar] = field(default_factory=list)
    labels: list[str] = field(default_factory=list)
    x_range: tuple[float, float] = (0.0, 0.01)
    y_range: tuple[float, float] = (-2.0, 1.0)

    def insert(self, test: TestCaseContainer) -> None:
        """Add a result to the plot."""
        self.tests.append(test)

    def generate(self) -> None:
        """Lay out the bars, slowest build first, with their labels and legend names."""
        self.tests.sort(key=lambda t: t.testcase.ips)
        self.bars = []
        self.labels = []
        peak = 0.0
        x_upper = 0.01
        for position, test in enumerate(self.tests):
            compiler, platform, testcase = test.compiler, test.platform, test.testcase
            self.labels.append(
                f"{name(platform.platform)}/{name(platform.arch)} {name(compiler.id)} "
                f"{compiler.version}\n{compiler.flags}"
            )
            self.bars.append(
                Bar(
                    name=f"{testcase.ips}ir/s",
                    position=position,
                    value=float(testcase.ips),
                    edge_color=color(int(compiler.id), 125, 255),
                    face_color=color(int(compiler.id), 125, 180),
                )
            )
            peak = max(peak, float(testcase.ips))
            if x_upper < testcase.ips:
                x_upper = testcase.ips * 1.25
        for bar, test in zip(self.bars[:-1], self.tests[:-1]):
            ips = test.testcase.ips
            if ips > 0:
                bar.name += f", +{int(peak / ips * 100) - 100}%"
        self.x_range = (0.0, x_upper)
        self.y_range = (-1.0, float(len(self.tests)))

    def _render(self, fonts: dict[FontType, Font]) -> Figure:
        width, height = _SAVE_SIZE
        figure = Figure(figsize=(width / _SAVE_DPI, height / _SAVE_DPI), dpi=_SAVE_DPI)
        axes = figure.add_subplot(1, 1, 1)
        title_font = fonts[FontType.Title]
        subtitle_font = fonts[FontType.Subtitle]
        figure.suptitle(
            self.title,
            fontsize=title_font.point_size,
            fontweight=title_font.weight,
            color=_mpl_color(self.title_color),
        )
        axes.set_title(
            self.subtitle,
            fontsize=subtitle_font.point_size,
            fontweight=subtitle_font.weight,
            color=_mpl_color(self.subtitle_color),
        )
        # Highest result first in the legend.
        for bar in reversed(self.bars):
            axes.barh(
                bar.position,
                bar.value,
                color=_mpl_color(bar.face_color),
                edgecolor=_mpl_color(bar.edge_color),
                linewidth=2,
                label=bar.name,
            )
        y_font = fonts[FontType.YAxis]
        x_font = fonts[FontType.XAxis]
        axes.set_yticks([bar.position for bar in self.bars])
        axes.set_yticklabels(self.labels, fontsize=y_font.point_size, fontweight=y_font.weight)
        axes.tick_params(axis="x", labelsize=x_font.point_size)
        axes.set_xlim(*self.x_range)
        axes.set_ylim(*self.y_range)
        axes.set_xlabel("Czas (s)", fontsize=y_font.point_size, fontweight=y_font.weight)
        axes.grid(True, axis="x", color=(0, 0, 0, 25 / 255), linestyle="-")
        axes.grid(True, axis="y", color=(0, 0, 0, 25 / 255), linestyle="-")
        axes.minorticks_on()
        axes.grid(True, axis="x", which="minor", color=(0, 0, 0, 25 / 255), linestyle=":")
        if self.bars:
            legend_font = fonts[FontType.Legend]
            legend = axes.legend(
                loc="lower right",
                prop={"size": legend_font.point_size, "weight": legend_font.weight},
                facecolor=(1.0, 1.0, 1.0, 150 / 255),
                edgecolor=(130 / 255, 130 / 255, 130 / 255, 150 / 255),
            )
            legend.get_frame().set_alpha(None)
        figure.tight_layout()
        return figure

    def save_to_file(self, file_name: str | os.PathLike[str]) -> None:
        """Render a print-sized copy of the plot to a PNG file."""
        copy = Plot(
            self.test_name,
            title=self.title,
            subtitle=self.subtitle,
            title_color=self.title_color,
            subtitle_color=self.subtitle_color,
            tests=list(self.tests),
        )
        copy.generate()
        fonts = {font_type: paper_font(font_type) for font_type in FontType}
        fonts[FontType.Title] = gui_font(FontType.Title)
        fonts[FontType.Subtitle] = gui_font(FontType.Subtitle)
        figure = copy._render(fonts)
        figure.savefig(os.fspath(file_name), format="png")


class PlotTab:
    """A set of plots keyed by test name, in the order they were first asked for."""

    def __init__(self) -> None:
        self._plots: dict[str, Plot] = {}

    def insert(self, name: str) -> Plot:
        """Return the plot for ``name``, creating it if needed."""
        plot = self._plots.get(name)
        if plot is None:
            plot = Plot(name)
            self._plots[name] = plot
        return plot

    def __iter__(self) -> Iterator[Plot]:
        return iter(list(self._plots.values()))

    def __len__(self) -> int:
        return len(self._plots)

    def __contains__(self, name: object) -> bool:
        return name in self._plots