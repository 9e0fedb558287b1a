"""
config.py
=========
Central configuration module for Detective Quest.

All tunable constants live here so they can be adjusted without touching
the data structures or the game flow.

Usage:
    from config import INDEX_CONFIG, JUDGMENT_CONFIG, GAME_CONFIG
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet


# ---------------------------------------------------------------------------
# Evidence index
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class IndexConfig:
    """
    Sizing of the clue -> suspect hash table.

    Attributes:
        table_size: Number of buckets. A prime keeps DJB2 hashes spread
                    evenly; 101 is far larger than the nine clues of the
                    reference case, so chains stay at length one or two.
    """
    table_size: int = 101


# ---------------------------------------------------------------------------
# Judgment
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class JudgmentConfig:
    """
    Attributes:
        valid_threshold: Minimum number of collected clues that must point to
                         the accused for the accusation to hold.
    """
    valid_threshold: int = 2


# ---------------------------------------------------------------------------
# Game / input settings
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GameConfig:
    """
    Console and session settings.

    Attributes:
        left_keys:     First characters accepted as "go left" (esquerda).
        right_keys:    First characters accepted as "go right" (direita).
        stop_keys:     First characters accepted as "stop exploring" (sair).
        log_level_env: Environment variable read by the entry points to pick
                       the logging level.
    """
    left_keys:     FrozenSet[str] = frozenset({"e", "E"})
    right_keys:    FrozenSet[str] = frozenset({"d", "D"})
    stop_keys:     FrozenSet[str] = frozenset({"s", "S"})
    log_level_env: str = "DETECTIVE_QUEST_LOG_LEVEL"


# ---------------------------------------------------------------------------
# Singleton instances (import-ready)
# ---------------------------------------------------------------------------

INDEX_CONFIG    = IndexConfig()
JUDGMENT_CONFIG = JudgmentConfig()
GAME_CONFIG     = GameConfig()

LOG_FORMAT      = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT     = "%Y-%m-%d %H:%M:%S"
