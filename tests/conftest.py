"""
Pytest configuration and fixtures for pyfsm tests.

Provides deterministic RNG and small automata for unit and integration tests.
"""

import matplotlib

matplotlib.use("Agg")

import pytest


@pytest.fixture
def deterministic_rng():
    """
    Create a deterministic RNG seeded with 12345.

    Used throughout test suite to ensure reproducible results.
    """
    from pyfsm.core.rng import make_rng
    return make_rng(12345)


@pytest.fixture
def light_switch():
    """Two-state toggle: off <-> on on "flip"."""
    from pyfsm.tasks.examples import make_light_switch
    return make_light_switch()


@pytest.fixture
def one_or_more_a():
    """Automaton accepting ^a+$."""
    from pyfsm.tasks.regexp import one_or_more
    return one_or_more("a")
