"""
Plotting utilities for FinGrow timelines.

Purpose
-------
Visualizes a year-by-year timeline: the balance line over the amount paid
in, with the gap between them (accumulated interest) shaded. Kept apart
from the engine so the core never imports matplotlib.

Usage
-----
>>> from fingrow.timeline import build_timeline
>>> from fingrow.plotting import plot_timeline
>>> entries = build_timeline(1000, 0.05, 10, 12, 100)
>>> fig, ax = plot_timeline(entries, return_fig_ax=True)
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from .constants import (
    DEFAULT_ALPHA_BANDS,
    DEFAULT_FIGSIZE,
    DEFAULT_LINEWIDTH,
    DEFAULT_LINEWIDTH_THICK,
)
from .timeline import TimelineEntry, timeline_to_frame
from .utils import thousands_formatter

__all__ = ["plot_timeline"]


def plot_timeline(
    entries: Sequence[TimelineEntry],
    *,
    title: Optional[str] = None,
    figsize: Optional[Tuple[int, int]] = None,
    save_path: Optional[str] = None,
    return_fig_ax: bool = False,
):
    """
    Plot balance versus cumulative contributions per year.

    Parameters
    ----------
    entries : sequence of TimelineEntry
        Output of timeline(); must not be empty.
    title : str, optional
        Figure title. Default: "Investment Growth".
    figsize : tuple, optional
        Figure size in inches. Default: DEFAULT_FIGSIZE.
    save_path : str, optional
        If given, the figure is saved there (PNG, 150 dpi).
    return_fig_ax : bool, default False
        Return (fig, ax) instead of None.

    Raises
    ------
    ValueError
        If *entries* is empty.
    """
    if not entries:
        raise ValueError("plot_timeline requires at least one timeline entry")

    import matplotlib.pyplot as plt
    from matplotlib.ticker import FuncFormatter, MaxNLocator

    frame = timeline_to_frame(entries)
    years = frame.index.to_numpy()
    balance = frame["balance"].to_numpy()
    paid_in = frame["cumulative_contributions"].to_numpy()

    fig, ax = plt.subplots(figsize=figsize or DEFAULT_FIGSIZE)

    ax.plot(years, balance, label="Balance", linewidth=DEFAULT_LINEWIDTH_THICK, marker="o")
    ax.plot(
        years, paid_in,
        label="Total Contributions",
        linewidth=DEFAULT_LINEWIDTH,
        linestyle="--",
    )
    ax.fill_between(
        years, paid_in, balance,
        where=balance >= paid_in,
        alpha=DEFAULT_ALPHA_BANDS,
        label="Interest",
    )

    ax.set_xlabel("Year", fontsize=11)
    ax.set_ylabel("Amount", fontsize=11)
    ax.set_title(title or "Investment Growth", fontsize=12, fontweight='bold')
    ax.xaxis.set_major_locator(MaxNLocator(integer=True))
    ax.yaxis.set_major_formatter(FuncFormatter(thousands_formatter))
    ax.legend(loc='best', fontsize=10)
    ax.grid(True, alpha=0.3)
    plt.tight_layout()

    if save_path:
        fig.savefig(save_path, bbox_inches='tight', dpi=150)

    if return_fig_ax:
        return fig, ax
    return None
