from __future__ import annotations

import matplotlib.pyplot as plt

from pyfsm.tasks.regexp import any_of_one_or_more
from pyfsm.viz.plotting import plot_transition_matrix


def test_plot_transition_matrix_returns_axes(light_switch) -> None:
    ax = plot_transition_matrix(light_switch, title="Switch")
    try:
        assert ax.get_title() == "Switch"
        assert [t.get_text() for t in ax.get_yticklabels()] == ["off", "on"]
        assert [t.get_text() for t in ax.get_xticklabels()] == ["flip"]
        assert len(ax.texts) == 2
    finally:
        plt.close(ax.figure)


def test_plot_transition_matrix_marks_accept_states() -> None:
    fsm = any_of_one_or_more("ab")
    fig, ax = plt.subplots()
    try:
        returned = plot_transition_matrix(fsm, ax=ax, annotate=False)
        assert returned is ax
        labels = [t.get_text() for t in ax.get_yticklabels()]
        assert labels == ["a*", "b*", "start"]
        assert len(ax.texts) == 0
    finally:
        plt.close(fig)
