"""SVG charts of correction success rates."""

from __future__ import annotations

import os
from collections.abc import Sequence

import matplotlib
from matplotlib.figure import Figure

_WIDTH_PX, _HEIGHT_PX = 800, 600
_DPI = 100
_TITLE_SIZE = 22
_LABEL_SIZE = 14


def _new_figure() -> Figure:
    figure = Figure(figsize=(_WIDTH_PX / _DPI, _HEIGHT_PX / _DPI), dpi=_DPI)
    figure.patch.set_facecolor("white")
    return figure


def _style_legend(axes) -> None:
    legend = axes.legend(facecolor="white", edgecolor="black", framealpha=0.8)
    legend.get_frame().set_linewidth(1.0)


def _save(figure: Figure, output_file: str | os.PathLike[str]) -> None:
    with matplotlib.rc_context({"svg.fonttype": "none"}):
        figure.savefig(output_file, format="svg", facecolor="white")
    print(f"Chart has been saved to {os.fspath(output_file)}")


def plot_success_rates(
    bit_flip_success: float,
    phase_flip_success: float,
    output_file: str | os.PathLike[str],
) -> None:
    """Draw the success rates of the two codes side by side as a line chart."""
    figure = _new_figure()
    axes = figure.add_subplot()
    axes.set_title("Error Correction Success Rates", fontsize=_TITLE_SIZE)
    axes.set_xlim(0, 3)
    axes.set_ylim(0.0, 100.0)
    axes.set_ylabel("Success Rate (%)")
    axes.grid(True, axis="y")
    axes.plot(
        [1, 2],
        [bit_flip_success * 100.0, phase_flip_success * 100.0],
        color="blue",
        label="Success Rates",
    )
    figure.text(180 / _WIDTH_PX, 1 - 500 / _HEIGHT_PX, "Bit Flip Code", fontsize=_LABEL_SIZE)
    figure.text(500 / _WIDTH_PX, 1 - 500 / _HEIGHT_PX, "Phase Flip Code", fontsize=_LABEL_SIZE)
    _style_legend(axes)
    _save(figure, output_file)


def plot_error_vs_success(
    error_rates: Sequence[float],
    bit_flip_success_rates: Sequence[float],
    phase_flip_success_rates: Sequence[float],
    output_file: str | os.PathLike[str],
) -> None:
    """Draw how the success rate of each code changes with the error rate."""
    if not error_rates:
        raise ValueError("error_rates must not be empty")

    max_success = max([0.0, *bit_flip_success_rates, *phase_flip_success_rates]) * 100.0

    figure = _new_figure()
    axes = figure.add_subplot()
    axes.set_title("Error Rate vs. Success Rate", fontsize=_TITLE_SIZE)
    axes.set_xlim(0.0, max(error_rates) * 1.1)
    axes.set_ylim(0.0, max_success * 1.1)
    axes.set_xlabel("Error Rate")
    axes.set_ylabel("Success Rate (%)")
    axes.grid(True)

    for rates, color, label in (
        (bit_flip_success_rates, "red", "Bit Flip Code"),
        (phase_flip_success_rates, "blue", "Phase Flip Code"),
    ):
        points = list(zip(error_rates, rates))
        axes.plot(
            [x for x, _ in points],
            [y * 100.0 for _, y in points],
            color=color,
            label=label,
        )

    _style_legend(axes)
    _save(figure, output_file)