"""
Dense and sparse numeric views of an automaton's transition table.

States and symbols are ordered by repr so that the same table always yields
the same matrix layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Hashable

import numpy as np
from scipy.sparse import coo_matrix, csr_matrix
from scipy.sparse.csgraph import breadth_first_order

from pyfsm.core.automaton import Automaton

MISSING = -1


def _ordered(values) -> tuple:
    return tuple(sorted(values, key=repr))


@dataclass(frozen=True)
class TransitionMatrix:
    """
    Dense transition table.

    table[i, j] is the index into `states` of the destination reached from
    states[i] on symbols[j], or MISSING when no transition is registered.
    """

    states: tuple
    symbols: tuple
    table: np.ndarray

    def __post_init__(self):
        expected = (len(self.states), len(self.symbols))
        if self.table.shape != expected:
            raise ValueError(f"table shape must be {expected}, got {self.table.shape}")
        table = np.array(self.table, dtype=np.int64, copy=True)
        table.flags.writeable = False
        object.__setattr__(self, "table", table)

    def state_index(self, state: Hashable) -> int:
        return self.states.index(state)

    def symbol_index(self, symbol: Hashable) -> int:
        return self.symbols.index(symbol)


def _state_order(automaton: Automaton) -> tuple:
    states = set(automaton.states)
    states.add(automaton.initial_state)
    return _ordered(states)


def transition_matrix(automaton: Automaton) -> TransitionMatrix:
    states = _state_order(automaton)
    symbols = _ordered(automaton.alphabet)
    state_to_idx = {state: idx for idx, state in enumerate(states)}
    symbol_to_idx = {symbol: idx for idx, symbol in enumerate(symbols)}

    table = np.full((len(states), len(symbols)), MISSING, dtype=np.int64)
    for key, destination in automaton.transitions.items():
        table[state_to_idx[key.state], symbol_to_idx[key.symbol]] = state_to_idx[destination]

    return TransitionMatrix(states=states, symbols=symbols, table=table)


def adjacency_matrix(automaton: Automaton) -> tuple[csr_matrix, tuple]:
    """
    Sparse state graph: entry (i, j) counts the symbols leading from
    states[i] to states[j].
    """
    states = _state_order(automaton)
    state_to_idx = {state: idx for idx, state in enumerate(states)}
    n_states = len(states)
    n_edges = len(automaton.transitions)

    row = np.empty(n_edges, dtype=np.int64)
    col = np.empty(n_edges, dtype=np.int64)
    for edge, (key, destination) in enumerate(automaton.transitions.items()):
        row[edge] = state_to_idx[key.state]
        col[edge] = state_to_idx[destination]
    data = np.ones(n_edges, dtype=np.int64)

    coo = coo_matrix((data, (row, col)), shape=(n_states, n_states), dtype=np.int64)
    # coo -> csr sums duplicate (row, col) entries
    return csr_matrix(coo), states


def reachable_states(automaton: Automaton) -> frozenset:
    """States reachable from the initial state, including the initial state."""
    graph, states = adjacency_matrix(automaton)
    start = states.index(automaton.initial_state)
    order = breadth_first_order(graph, start, directed=True, return_predecessors=False)
    return frozenset(states[int(idx)] for idx in order)
