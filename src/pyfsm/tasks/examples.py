from __future__ import annotations

from pyfsm.core.automaton import Automaton


def make_light_switch() -> Automaton:
    return Automaton(
        initial="off",
        transitions={
            ("off", "flip"): "on",
            ("on", "flip"): "off",
        },
    )


def make_div3_automaton() -> Automaton:
    """Accepts binary strings whose value is divisible by three."""
    return Automaton(
        initial="q0",
        transitions={
            ("q0", "0"): "q0",
            ("q0", "1"): "q1",
            ("q1", "0"): "q2",
            ("q1", "1"): "q0",
            ("q2", "0"): "q1",
            ("q2", "1"): "q2",
        },
        accept_states={"q0"},
    )
