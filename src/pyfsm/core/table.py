from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Hashable

from pyfsm.core.config import AutomatonConfig
from pyfsm.core.errors import DuplicateTransitionError
from pyfsm.core.types import TransitionKey

TransitionTable = Mapping[TransitionKey, Hashable]


def _iter_entries(transitions) -> Iterable[tuple[object, Hashable]]:
    if isinstance(transitions, Mapping):
        return transitions.items()
    return transitions


def build_table(transitions, config: AutomatonConfig | None = None) -> TransitionTable:
    """
    Normalise transitions into a read-only table keyed by TransitionKey.

    Accepts a mapping or an iterable of (key, destination) pairs, where each
    key is a TransitionKey or a (state, symbol) tuple. Repeated keys keep the
    last destination. Under config.duplicates == "reject" a repeated key with
    a different destination raises DuplicateTransitionError instead.
    """
    config = config or AutomatonConfig()
    reject = config.duplicates == "reject"

    table: dict[TransitionKey, Hashable] = {}
    for raw_key, destination in _iter_entries(transitions):
        key = TransitionKey.coerce(raw_key)
        if reject and key in table and table[key] != destination:
            raise DuplicateTransitionError(key.state, key.symbol, table[key], destination)
        table[key] = destination

    return MappingProxyType(table)


def derive_states(table: TransitionTable) -> frozenset:
    states = set()
    for key, destination in table.items():
        states.add(key.state)
        states.add(destination)
    return frozenset(states)


def derive_alphabet(table: TransitionTable) -> frozenset:
    return frozenset(key.symbol for key in table)
