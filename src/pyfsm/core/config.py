"""Configuration dataclasses with validation."""

from __future__ import annotations

import logging
from dataclasses import dataclass

DUPLICATE_POLICIES = ("overwrite", "reject")

DEFAULT_LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class AutomatonConfig:
    """
    Construction options for an Automaton.

    duplicates:
        "overwrite" keeps the last destination registered for a repeated
        (state, symbol) key. "reject" raises DuplicateTransitionError instead.
    """

    duplicates: str = "overwrite"

    def __post_init__(self):
        if self.duplicates not in DUPLICATE_POLICIES:
            raise ValueError(f"duplicates must be in {DUPLICATE_POLICIES}")


@dataclass(frozen=True)
class LoggingConfig:
    """Settings for configure_logging."""

    level: str = "WARNING"
    console: bool = True
    fmt: str = DEFAULT_LOG_FORMAT
    datefmt: str = DEFAULT_DATE_FORMAT

    def __post_init__(self):
        if not isinstance(logging.getLevelName(self.level.upper()), int):
            raise ValueError(f"level must be a logging level name, got {self.level!r}")

    @property
    def numeric_level(self) -> int:
        return logging.getLevelName(self.level.upper())
