"""
config.py
=========
Central configuration module for Mansion Investigation.

All tunable constants, table sizes, and game-balance parameters live here
so they can be adjusted without touching business logic.

Usage:
    from config import MAP_CONFIG, DIRECTORY_CONFIG, ACCUSATION_CONFIG, GAME_CONFIG
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


# ---------------------------------------------------------------------------
# Room map limits
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MapConfig:
    """
    Length caps applied when rooms are created.

    Attributes:
        max_name_length: Characters kept from a room name; longer names are
                         truncated silently.
        max_clue_length: Characters kept from a clue placed in a room.
    """
    max_name_length: int = 59
    max_clue_length: int = 119


# ---------------------------------------------------------------------------
# Suspect directory (hash table) sizing
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DirectoryConfig:
    """
    Parameters of the djb2 chained hash table.

    Attributes:
        bucket_count: Number of buckets. A small prime keeps chains short for
                      the handful of bindings a case needs.
        hash_seed:    Initial djb2 accumulator.
        hash_factor:  Per-byte multiplier (hash * 33 + byte).
        hash_mask:    Accumulator width; 64 bits, like an unsigned long.
    """
    bucket_count: int = 101
    hash_seed:    int = 5381
    hash_factor:  int = 33
    hash_mask:    int = 0xFFFFFFFFFFFFFFFF


# ---------------------------------------------------------------------------
# Accusation policy
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AccusationConfig:
    """
    Attributes:
        sustain_threshold: Minimum number of collected clues that must point
                           at the accused for the accusation to be sustained.
    """
    sustain_threshold: int = 2


# ---------------------------------------------------------------------------
# Game / shell parameters
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GameConfig:
    """
    Settings shared by the console and Streamlit shells.

    Attributes:
        title:          Banner shown at the top of both shells.
        log_level:      Default level for the "mansion" logger tree. The
                        shells let MANSION_LOG_LEVEL override it.
        log_level_env:  Name of that environment variable.
        unknown_label:  Text shown for a clue with no suspect binding.
    """
    title:         str = "MANSION: Final Investigation"
    log_level:     str = "WARNING"
    log_level_env: str = "MANSION_LOG_LEVEL"
    unknown_label: str = "unknown"


# ---------------------------------------------------------------------------
# Singleton instances (import-ready)
# ---------------------------------------------------------------------------

MAP_CONFIG        = MapConfig()
DIRECTORY_CONFIG  = DirectoryConfig()
ACCUSATION_CONFIG = AccusationConfig()
GAME_CONFIG       = GameConfig()


# ---------------------------------------------------------------------------
# Navigation tokens
# ---------------------------------------------------------------------------

CHOICE_TOKENS: Dict[str, str] = {
    # left
    "l": "left", "left": "left", "e": "left", "esquerda": "left",
    # right
    "r": "right", "right": "right", "d": "right", "direita": "right",
    # exit
    "x": "exit", "exit": "exit", "s": "exit", "sair": "exit",
    "q": "exit", "quit": "exit",
}
"""
Player input tokens (lower-cased, stripped) mapped to navigation choices.

Both the English and the Portuguese single-letter shortcuts are accepted, so
"e"/"d"/"s" keep working for players used to the esquerda/direita/sair keys.
Anything not listed here is rejected as malformed input.
"""
