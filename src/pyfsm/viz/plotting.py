"""Plotting utilities."""

from __future__ import annotations

import matplotlib.pyplot as plt
import numpy as np

from pyfsm.analysis.matrix import MISSING, transition_matrix
from pyfsm.core.automaton import Automaton


def plot_transition_matrix(
    automaton: Automaton,
    title: str = "Transition Table",
    ax=None,
    annotate: bool = True,
):
    """
    Render the dense transition table as a heatmap.

    Rows are source states, columns are symbols, and cell colour is the
    destination state index. Missing transitions are left blank. Accepting
    states are marked with "*" in the row labels.

    Args:
        automaton: Automaton to render.
        title: Plot title.
        ax: Matplotlib axes object (optional). A new figure is created if None.
        annotate: Write the destination state name in each filled cell.

    Returns:
        The matplotlib Axes drawn on.
    """
    matrix = transition_matrix(automaton)
    if ax is None:
        _, ax = plt.subplots()

    masked = np.ma.masked_equal(matrix.table, MISSING)
    ax.imshow(masked, cmap="viridis", aspect="auto", interpolation="nearest")

    row_labels = [
        f"{state}*" if state in automaton.accept_states else str(state) for state in matrix.states
    ]
    ax.set_xticks(range(len(matrix.symbols)))
    ax.set_xticklabels([str(symbol) for symbol in matrix.symbols])
    ax.set_yticks(range(len(matrix.states)))
    ax.set_yticklabels(row_labels)
    ax.set_xlabel("symbol")
    ax.set_ylabel("state")
    ax.set_title(title)

    if annotate:
        for i, j in zip(*np.nonzero(matrix.table != MISSING)):
            destination = matrix.states[int(matrix.table[i, j])]
            ax.text(int(j), int(i), str(destination), ha="center", va="center", color="white")

    return ax
