from __future__ import annotations

from typing import Optional

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import ListedColormap

from .cell import rule_lkt
from .utils import int_to_bits


DEFAULT_BG_COLOR = "#f7e9f0"  # very light pink
DEFAULT_ACTIVE_COLOR = "#21b0ff"  # neon blue
DEFAULT_BORDER_COLOR = "#ffffff"


def plot_spacetime(
    states: np.ndarray,
    title: str = "",
    *,
    cmap: Optional[str] = None,
    background_color: str = DEFAULT_BG_COLOR,
    active_color: str = DEFAULT_ACTIVE_COLOR,
    border_color: str = DEFAULT_BORDER_COLOR,
    border_width: float = 0.2,
    ax: Optional[plt.Axes] = None,
    show: bool = True,
) -> plt.Axes:
    """Plot a space-time diagram, e.g. the output of ``Automaton.run``."""
    states = np.asarray(states)
    if states.ndim != 2:
        raise ValueError("states must have shape (steps, num_cells)")
    if ax is None:
        _, ax = plt.subplots(figsize=(max(3, states.shape[1] * 0.5), 4))
    ax.set_facecolor(background_color)
    _plot_states(
        ax,
        states,
        cmap=cmap,
        background_color=background_color,
        active_color=active_color,
        border_color=border_color,
        border_width=border_width,
    )
    ax.set_xlabel("cell index")
    ax.set_ylabel("time step")
    ax.set_title(title)
    if show:
        plt.show()
    return ax


def plot_rule_table(
    rule: int,
    num_neighbors: int = 3,
    *,
    background_color: str = DEFAULT_BG_COLOR,
    active_color: str = DEFAULT_ACTIVE_COLOR,
    border_color: str = DEFAULT_BORDER_COLOR,
    border_width: float = 0.4,
    ax: Optional[plt.Axes] = None,
    show: bool = True,
) -> plt.Axes:
    """Plot every neighborhood pattern (highest first) with the rule's output."""
    lkt = rule_lkt(rule, num_neighbors)
    n_patterns = lkt.size
    values = range(n_patterns - 1, -1, -1)
    patterns = np.array([int_to_bits(v, num_neighbors) for v in values])
    grid = np.hstack([patterns, lkt[list(values)][:, None]])

    if ax is None:
        _, ax = plt.subplots(figsize=(num_neighbors + 5, max(2, n_patterns * 0.25)))
    ax.set_facecolor(background_color)
    _plot_states(
        ax,
        grid,
        cmap=None,
        background_color=background_color,
        active_color=active_color,
        border_color=border_color,
        border_width=border_width,
    )
    ax.set_yticks(np.arange(n_patterns) + 0.5)
    ax.set_yticklabels([np.binary_repr(v, width=num_neighbors) for v in values])
    ax.set_xticks(np.arange(num_neighbors + 1) + 0.5)
    ax.set_xticklabels([str(d) for d in range(num_neighbors)] + ["Out"])
    ax.set_title(f"Rule {rule} table")
    ax.tick_params(axis="both", length=0)
    ax.set_xlabel("neighborhood / output")
    if show:
        plt.show()
    return ax


def _plot_states(
    ax: plt.Axes,
    states: np.ndarray,
    *,
    cmap: Optional[str],
    background_color: str,
    active_color: str,
    border_color: str,
    border_width: float,
) -> None:
    if cmap:
        ax.imshow(states, aspect="auto", interpolation="nearest", cmap=cmap)
        return
    colors = ListedColormap([background_color, active_color])
    height, width = states.shape
    x_edges = np.arange(0, width + 1)
    y_edges = np.arange(0, height + 1)
    ax.pcolormesh(
        x_edges,
        y_edges,
        states,
        cmap=colors,
        vmin=0,
        vmax=1,
        edgecolors=border_color,
        linewidth=border_width,
        shading="flat",
        antialiased=True,
    )
    ax.set_xlim(0, width)
    ax.set_ylim(height, 0)
