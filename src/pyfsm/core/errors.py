"""Exceptions raised by the automaton engine."""

from __future__ import annotations

from typing import Hashable


class AutomatonError(Exception):
    """Base exception for all pyfsm errors."""


class UnmatchedTransition(AutomatonError, LookupError):
    """No transition is registered for a (state, symbol) pair."""

    def __init__(self, symbol: Hashable, state: Hashable) -> None:
        self.symbol = symbol
        self.state = state
        super().__init__(f"no transition from state {state!r} with input {symbol!r}")

    def __reduce__(self):
        return (type(self), (self.symbol, self.state))


class DuplicateTransitionError(AutomatonError, ValueError):
    """A (state, symbol) pair was registered twice under the reject policy."""

    def __init__(self, state: Hashable, symbol: Hashable, existing: Hashable, new: Hashable) -> None:
        self.state = state
        self.symbol = symbol
        self.existing = existing
        self.new = new
        super().__init__(
            f"duplicate transition from state {state!r} with input {symbol!r}: "
            f"{existing!r} already registered, got {new!r}"
        )

    def __reduce__(self):
        return (type(self), (self.state, self.symbol, self.existing, self.new))
