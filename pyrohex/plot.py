"""Chart of surviving trees against forest density."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Sequence

from matplotlib.figure import Figure
from matplotlib.ticker import StrMethodFormatter

DEFAULT_OUTPUT = "survivors_vs_density.png"


def padded_range(values: Iterable[float]) -> tuple[float, float]:
    """Return the span of ``values`` widened by 5% on both sides."""
    values = list(values)
    if not values:
        raise ValueError("cannot compute the range of no values")
    low, high = min(values), max(values)
    pad = 0.05 * (high - low)
    return low - pad, high + pad


def plot_results(
    results: Sequence[tuple[float, float]],
    output_path: str | Path = DEFAULT_OUTPUT,
) -> Path | None:
    """Draw the results as an 800x600 PNG; return its path, or None if empty."""
    if not results:
        print("no data")
        return None

    densities = [d for d, _ in results]
    survivors = [s for _, s in results]
    x_low, x_high = padded_range(densities)
    y_low, y_high = padded_range(survivors)

    figure = Figure(figsize=(8, 6), dpi=100)
    axes = figure.add_subplot()
    axes.plot(densities, survivors, color="blue", label="Survivors")
    if x_low < x_high:
        axes.set_xlim(x_low, x_high)
    if y_low < y_high:
        axes.set_ylim(y_low, y_high)
    axes.set_title("Surviving Trees vs. Density", fontsize=18)
    axes.set_xlabel("Tree Density", fontsize=11)
    axes.set_ylabel("Average Surviving Trees", fontsize=11)
    axes.xaxis.set_major_formatter(StrMethodFormatter("{x:.1f}"))
    axes.yaxis.set_major_formatter(StrMethodFormatter("{x:.0f}"))
    axes.grid(True)
    axes.legend(facecolor="white", edgecolor="black", framealpha=0.8)

    path = Path(output_path)
    figure.savefig(path, format="png")
    print(f"Plot saved as {path}")
    return path