from __future__ import annotations

from collections.abc import Sequence
from typing import Hashable

import numpy as np
from numpy.random import Generator

from pyfsm.core.automaton import Automaton
from pyfsm.tasks.regexp import fullmatch


def random_strings(
    alphabet: Sequence[str],
    n_strings: int,
    max_length: int,
    rng: Generator,
    min_length: int = 0,
) -> list[str]:
    if not alphabet:
        raise ValueError("alphabet must not be empty")
    if n_strings < 0:
        raise ValueError("n_strings must be >= 0")
    if min_length < 0:
        raise ValueError("min_length must be >= 0")
    if max_length < min_length:
        raise ValueError("max_length must be >= min_length")

    symbols = list(alphabet)
    lengths = rng.integers(min_length, max_length + 1, size=n_strings)
    strings: list[str] = []
    for length in lengths:
        picks = rng.integers(0, len(symbols), size=int(length))
        strings.append("".join(symbols[int(i)] for i in picks))
    return strings


def match_results(automaton: Automaton, strings: Sequence[Sequence[Hashable]]) -> np.ndarray:
    """Boolean array: whether each input fully matches from the initial state."""
    return np.array([fullmatch(automaton, s) for s in strings], dtype=bool)


def match_accuracy(
    automaton: Automaton,
    strings: Sequence[Sequence[Hashable]],
    expected: Sequence[bool],
) -> float:
    if len(strings) != len(expected):
        raise ValueError("strings and expected must have same length")
    if len(strings) == 0:
        raise ValueError("strings must not be empty")

    predicted = match_results(automaton, strings)
    return float(np.mean(predicted == np.asarray(expected, dtype=bool)))


def acceptance_confusion_matrix(
    predicted: Sequence[bool],
    expected: Sequence[bool],
) -> np.ndarray:
    """
    2x2 counts, rows = expected, cols = predicted, index 0 = reject,
    index 1 = accept.
    """
    predicted = np.asarray(predicted, dtype=bool)
    expected = np.asarray(expected, dtype=bool)
    if predicted.shape != expected.shape:
        raise ValueError("predicted and expected must have same length")
    if predicted.size == 0:
        raise ValueError("predicted must not be empty")

    matrix = np.zeros((2, 2), dtype=np.int64)
    pred_idx = predicted.astype(np.int64)
    true_idx = expected.astype(np.int64)
    np.add.at(matrix, (true_idx, pred_idx), 1)
    return matrix
