"""
scoring.py
==========
Deterministic, side-effect-free accusation logic.

Extracted from the game engine so it can be unit-tested independently and
adjusted by changing AccusationConfig in config.py without touching any
game logic or UI code.
"""

from __future__ import annotations

from typing import Iterable, List

from config import ACCUSATION_CONFIG
from models import AccusationResult
from suspect_directory import SuspectDirectory


class NoCluesCollectedError(ValueError):
    """Raised when an accusation is evaluated with no collected clues."""


def _same_suspect(a: str, b: str) -> bool:
    return a.casefold() == b.casefold()


def matching_clues(
    clues: Iterable[str],
    directory: SuspectDirectory,
    suspect_name: str,
) -> List[str]:
    """
    Clues (in the order given) whose bound suspect is `suspect_name`, ignoring case.

    Clues without a binding never match.
    """
    matches: List[str] = []
    for clue in clues:
        bound = directory.lookup(clue)
        if bound is not None and _same_suspect(bound, suspect_name):
            matches.append(clue)
    return matches


def count_clues_for(
    clues: Iterable[str],
    directory: SuspectDirectory,
    suspect_name: str,
) -> int:
    """
    Count collected clues pointing at `suspect_name`.

    Args:
        clues:        Collected clues, typically a ClueIndex (walked in order).
        directory:    Clue → suspect bindings.
        suspect_name: Accused name; compared case-insensitively.

    Returns:
        Number of distinct collected clues bound to that suspect.

    Examples:
        >>> count_clues_for(["Folha rasgada", "Pegadas no tapete"], directory, "sra. beatriz")
        2
    """
    return len(matching_clues(clues, directory, suspect_name))


def sustain(count: int) -> bool:
    """True when `count` reaches the fixed sustain threshold (2)."""
    return count >= ACCUSATION_CONFIG.sustain_threshold


def evaluate_accusation(
    clues: Iterable[str],
    directory: SuspectDirectory,
    suspect_name: str,
) -> AccusationResult:
    """
    Score an accusation and return the full verdict.

    Raises:
        NoCluesCollectedError: `clues` is empty. Callers are expected to
            short-circuit to "impossible to accuse" before getting here.
    """
    collected = list(clues)
    if not collected:
        raise NoCluesCollectedError("No clues collected; an accusation cannot be evaluated.")

    matches = matching_clues(collected, directory, suspect_name)
    return AccusationResult(
        accused=suspect_name,
        matching_clues=matches,
        count=len(matches),
        threshold=ACCUSATION_CONFIG.sustain_threshold,
        sustained=sustain(len(matches)),
    )
