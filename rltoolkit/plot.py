"""Training-metric plots and density colouring of scatter points."""

from __future__ import annotations

import sys
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

Point = tuple[float, float]
GridPoint = tuple[int, int]


@dataclass(frozen=True)
class Hsl:
    """A colour given as hue (degrees), saturation and lightness (percent)."""

    h: float
    s: float
    l: float  # noqa: E741

    def __iter__(self):
        return iter((self.h, self.s, self.l))


def interpolate(a: float, b: float, p: float) -> float:
    """Linear interpolation from ``a`` to ``b`` at fraction ``p``."""
    return a + p * (b - a)


def linear_gradient(gradient: tuple[Hsl, Hsl], percent: float) -> Hsl:
    """The colour ``percent`` of the way along ``gradient``, component by component."""
    start, end = gradient
    return Hsl(
        interpolate(start.h, end.h, percent),
        interpolate(start.s, end.s, percent),
        interpolate(start.l, end.l, percent),
    )


def _cell(point: GridPoint) -> GridPoint:
    # Braille cells are two dots wide and four dots high.
    x, y = point
    return x // 2, y // 4


def density_colors(
    grid_points: Iterable[GridPoint], gradient: tuple[Hsl, Hsl]
) -> list[tuple[GridPoint, Hsl]]:
    """Colour each grid point by how many points share its braille cell.

    A cell's density is the number of its points beyond the first; colours run
    along ``gradient`` relative to twice the mean density (at least 5).
    """
    points = list(grid_points)
    if not points:
        return []

    counts = Counter(_cell(p) for p in points)
    densities = {cell: count - 1 for cell, count in counts.items()}
    mean_density = max(sum(densities.values()) / len(densities), 5.0)

    colors = {
        cell: linear_gradient(gradient, density / (2.0 * mean_density))
        for cell, density in densities.items()
    }
    return [(p, colors[_cell(p)]) for p in points]


def _labels(bounds: Sequence[float]) -> list[str]:
    return [f"{b:.2f}" for b in bounds]


class Plot:
    """A scatter plot of one metric against the episode number."""

    def __init__(self, y_title: str) -> None:
        self.x_title = "Episode"
        self.y_title = y_title
        self.x_bounds = [sys.float_info.max, -sys.float_info.max]
        self.y_bounds = [sys.float_info.max, -sys.float_info.max]
        self.x_labels: list[str] = []
        self.y_labels: list[str] = []
        self.data: list[Point] = []

    def with_x_bounds(self, bounds: Sequence[float]) -> Plot:
        """Set the initial x bounds and return the plot."""
        self.x_bounds = [float(bounds[0]), float(bounds[1])]
        self.x_labels = _labels(self.x_bounds)
        return self

    def with_y_bounds(self, bounds: Sequence[float]) -> Plot:
        """Set the initial y bounds and return the plot."""
        self.y_bounds = [float(bounds[0]), float(bounds[1])]
        self.y_labels = _labels(self.y_bounds)
        return self

    def update(self, point: Point) -> None:
        """Add a point, widening the bounds and relabelling axes as needed."""
        x, y = point
        x_changed = y_changed = False
        if x > self.x_bounds[1]:
            self.x_bounds[1] = x
            x_changed = True
        if x < self.x_bounds[0]:
            self.x_bounds[0] = x
            x_changed = True
        if y < self.y_bounds[0]:
            self.y_bounds[0] = y
            y_changed = True
        if y > self.y_bounds[1]:
            self.y_bounds[1] = y
            y_changed = True

        if x_changed:
            self.x_labels = _labels(self.x_bounds)
        if y_changed:
            self.y_labels = _labels(self.y_bounds)

        self.data.append((x, y))


class Plots:
    """A set of named plots sharing an episode axis, one of them selected."""

    def __init__(self, names: Iterable[str], episodes: int) -> None:
        self.plot_names = list(names)
        self.plots = [
            Plot(name).with_x_bounds((0.0, float(episodes))) for name in self.plot_names
        ]
        self.selected = 0

    def __len__(self) -> int:
        return len(self.plot_names)

    def _require_plots(self) -> None:
        if not self.plot_names:
            raise IndexError("there are no plots to select")

    def next_plot(self) -> None:
        """Select the following plot, wrapping around."""
        self._require_plots()
        self.selected = (self.selected + 1) % len(self)

    def prev_plot(self) -> None:
        """Select the preceding plot, wrapping around."""
        self._require_plots()
        self.selected = (self.selected - 1) % len(self)

    @property
    def selected_plot(self) -> Plot:
        """The currently selected plot."""
        self._require_plots()
        return self.plots[self.selected]

    def update(self, episode: int, data: Sequence[float]) -> None:
        """Add one value per plot, in order, at ``episode``."""
        if len(data) > len(self.plots):
            raise IndexError(
                f"got {len(data)} values for {len(self.plots)} plots"
            )
        for plot, metric in zip(self.plots, data):
            plot.update((float(episode), metric))