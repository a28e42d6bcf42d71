"""
Core value types for pyfsm: TransitionKey, StepResult.

Pure data containers. No engine logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable, Optional

from pyfsm.core.errors import UnmatchedTransition


@dataclass(frozen=True)
class TransitionKey:
    """
    Composite key of the transition table: a source state and an input symbol.

    Equality and hashing are structural, so two keys built from equal values
    address the same table entry.
    """

    state: Hashable
    symbol: Hashable

    @classmethod
    def coerce(cls, key) -> "TransitionKey":
        """Accept a TransitionKey or a (state, symbol) pair."""
        if isinstance(key, cls):
            return key
        if isinstance(key, (str, bytes)):
            raise TypeError(
                f"transition key must be a TransitionKey or (state, symbol) pair, got {key!r}"
            )
        try:
            state, symbol = key
        except (TypeError, ValueError):
            raise TypeError(
                f"transition key must be a TransitionKey or (state, symbol) pair, got {key!r}"
            ) from None
        return cls(state=state, symbol=symbol)


@dataclass(frozen=True)
class StepResult:
    """
    Outcome of applying one symbol.

    On success `state` is the destination and `error` is None. On failure
    `state` equals `previous_state` and `error` describes the missing
    transition.
    """

    previous_state: Hashable
    symbol: Hashable
    state: Hashable
    error: Optional[UnmatchedTransition] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def raise_for_error(self) -> None:
        """Raise the carried UnmatchedTransition, if any."""
        if self.error is not None:
            raise self.error
