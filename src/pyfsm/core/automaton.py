from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Hashable

from pyfsm.core.config import AutomatonConfig
from pyfsm.core.errors import UnmatchedTransition
from pyfsm.core.table import TransitionTable, build_table, derive_alphabet, derive_states
from pyfsm.core.types import StepResult, TransitionKey

logger = logging.getLogger(__name__)


class Automaton:
    """
    Deterministic finite-state machine driven one symbol at a time.

    The transition table, state set, initial state and accept set are fixed at
    construction. The current state is the only mutable field and changes
    only through step() and reset(). Instances are not thread-safe; the
    table itself is read-only and may be shared.
    """

    def __init__(
        self,
        initial: Hashable,
        transitions,
        accept_states: Iterable[Hashable] = (),
        config: AutomatonConfig | None = None,
    ):
        self.config = config or AutomatonConfig()
        self._transitions: TransitionTable = build_table(transitions, self.config)
        self._states: frozenset = derive_states(self._transitions)
        self._alphabet: frozenset = derive_alphabet(self._transitions)
        self._initial_state = initial
        self._accept_states: frozenset = frozenset(accept_states)
        self._current_state = initial

        logger.debug(
            "built automaton: %d transitions, %d states, initial=%r, accept=%d",
            len(self._transitions),
            len(self._states),
            initial,
            len(self._accept_states),
        )

    @classmethod
    def _from_table(
        cls,
        initial: Hashable,
        transitions: TransitionTable,
        states: frozenset,
        alphabet: frozenset,
        accept_states: frozenset,
        config: AutomatonConfig,
    ) -> "Automaton":
        automaton = cls.__new__(cls)
        automaton.config = config
        automaton._transitions = transitions
        automaton._states = states
        automaton._alphabet = alphabet
        automaton._initial_state = initial
        automaton._accept_states = accept_states
        automaton._current_state = initial
        return automaton

    @property
    def initial_state(self) -> Hashable:
        return self._initial_state

    @property
    def current_state(self) -> Hashable:
        return self._current_state

    @property
    def states(self) -> frozenset:
        """All states appearing as a source or destination in the table."""
        return self._states

    @property
    def alphabet(self) -> frozenset:
        """All symbols appearing in the table."""
        return self._alphabet

    @property
    def accept_states(self) -> frozenset:
        return self._accept_states

    @property
    def transitions(self) -> TransitionTable:
        return self._transitions

    def get_transition(self, state: Hashable, symbol: Hashable) -> TransitionKey:
        """
        Return the table key for (state, symbol) without moving.

        Raises:
            UnmatchedTransition: If no transition is registered for the pair.
        """
        key = TransitionKey(state=state, symbol=symbol)
        if key not in self._transitions:
            raise UnmatchedTransition(symbol=symbol, state=state)
        return key

    def destination(self, state: Hashable, symbol: Hashable) -> Hashable:
        """Return the state reached from `state` on `symbol`."""
        return self._transitions[self.get_transition(state, symbol)]

    def step(self, symbol: Hashable) -> StepResult:
        """
        Apply one symbol.

        A missing transition is reported in the returned StepResult and leaves
        the current state unchanged.
        """
        previous = self._current_state
        try:
            key = self.get_transition(previous, symbol)
        except UnmatchedTransition as exc:
            logger.debug("unmatched transition: state=%r symbol=%r", previous, symbol)
            return StepResult(previous_state=previous, symbol=symbol, state=previous, error=exc)

        self._current_state = self._transitions[key]
        return StepResult(previous_state=previous, symbol=symbol, state=self._current_state)

    def accepted(self) -> bool:
        return self._current_state in self._accept_states

    def reset(self) -> None:
        self._current_state = self._initial_state

    def clone(self) -> "Automaton":
        """New instance sharing this table, positioned at the initial state."""
        return self._from_table(
            self._initial_state,
            self._transitions,
            self._states,
            self._alphabet,
            self._accept_states,
            self.config,
        )

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(current_state={self._current_state!r}, "
            f"initial_state={self._initial_state!r}, states={len(self._states)}, "
            f"transitions={len(self._transitions)})"
        )
