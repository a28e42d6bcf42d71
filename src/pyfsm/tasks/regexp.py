"""
Regex-like matchers built on the automaton engine.

Each builder returns a fresh Automaton whose symbols are single characters.
Matching feeds a string one character at a time and stops at the first
character with no transition.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Hashable

from pyfsm.core.automaton import Automaton
from pyfsm.core.types import StepResult

logger = logging.getLogger(__name__)

START = "start"


def _require_single_char(name: str, s: str) -> None:
    if len(s) != 1:
        raise ValueError(f"{name} must be passed a string of length 1")


def only_one(s: str) -> Automaton:
    """Matches exactly one occurrence of `s`, like ^s$."""
    _require_single_char("only_one", s)
    final = s + "_end"
    return Automaton(START, {(START, s): final}, accept_states={final})


def one_or_more(s: str) -> Automaton:
    """Matches one or more occurrences of `s`, like ^s+$."""
    _require_single_char("one_or_more", s)
    return Automaton(
        START,
        {
            (START, s): s,
            (s, s): s,
        },
        accept_states={s},
    )


def any_of_one_or_more(chars: str) -> Automaton:
    """
    One or more repetitions of a single character drawn from `chars`.

    Each character gets its own accepting state with a self-loop, so a run
    that switches characters (e.g. "aabb") does not match. Ranges like A-Z
    are not interpreted.
    """
    if len(chars) == 0:
        raise ValueError("any_of_one_or_more requires at least one character")

    transitions: dict[tuple[str, str], str] = {}
    for c in chars:
        transitions.setdefault((START, c), c)
        transitions.setdefault((c, c), c)

    return Automaton(START, transitions, accept_states=set(chars))


def process_symbols(automaton: Automaton, symbols: Iterable[Hashable]) -> StepResult | None:
    """
    Step through `symbols`, stopping at the first unmatched one.

    Returns the failing StepResult, the last successful one, or None when
    `symbols` is empty.
    """
    result = None
    for symbol in symbols:
        result = automaton.step(symbol)
        if not result.ok:
            break
    return result


def check_match(automaton: Automaton, symbols: Iterable[Hashable]) -> bool:
    """True when every symbol is consumed and the automaton ends accepting."""
    result = process_symbols(automaton, symbols)
    if result is not None and not result.ok:
        logger.debug("no match: %s", result.error)
        return False
    return automaton.accepted()


def fullmatch(automaton: Automaton, symbols: Iterable[Hashable]) -> bool:
    """check_match from the initial state, leaving the automaton reset."""
    automaton.reset()
    try:
        return check_match(automaton, symbols)
    finally:
        automaton.reset()
