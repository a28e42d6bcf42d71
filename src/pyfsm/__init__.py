"""pyfsm: a deterministic finite-state-machine engine."""

import logging

from pyfsm.core.automaton import Automaton
from pyfsm.core.config import AutomatonConfig, LoggingConfig
from pyfsm.core.errors import AutomatonError, DuplicateTransitionError, UnmatchedTransition
from pyfsm.core.log import configure_logging
from pyfsm.core.types import StepResult, TransitionKey

__version__ = "0.1.0"

__all__ = [
    "Automaton",
    "AutomatonConfig",
    "AutomatonError",
    "DuplicateTransitionError",
    "LoggingConfig",
    "StepResult",
    "TransitionKey",
    "UnmatchedTransition",
    "configure_logging",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
