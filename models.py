"""
models.py
=========
Shared data models for Mansion Investigation.

Contains:
  - Room             : Dataclass node of the mansion map (binary tree).
  - MoveResult       : Dataclass describing the outcome of one navigation step.
  - GameState        : Mutable dataclass tracking per-session player progress.
  - ClueReport       : Pydantic schema for one collected clue and its suspect.
  - AccusationResult : Pydantic schema for an evaluated accusation.

Keeping these in one module guarantees a single source of truth for data
shapes used across game_engine.py, scoring.py, cli.py and the Streamlit UI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Set

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Room map node
# ---------------------------------------------------------------------------

@dataclass(eq=False)
class Room:
    """
    One location of the mansion.

    Attributes:
        name:  Display name (already truncated by room_map.create_room).
        clue:  Clue waiting in the room, or None once there is nothing left
               to collect.
        left:  Room reached by going left, if any.
        right: Room reached by going right, if any.
    """

    name:  str
    clue:  Optional[str] = None
    left:  Optional["Room"] = field(default=None, repr=False)
    right: Optional["Room"] = field(default=None, repr=False)

    def take_clue(self) -> Optional[str]:
        """Remove and return the pending clue, leaving None behind."""
        clue, self.clue = self.clue, None
        return clue

    def child(self, choice: str) -> Optional["Room"]:
        """Return the child on the `choice` side ("left" / "right")."""
        if choice == "left":
            return self.left
        if choice == "right":
            return self.right
        return None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


# ---------------------------------------------------------------------------
# Navigation outcome
# ---------------------------------------------------------------------------

@dataclass
class MoveResult:
    """
    What happened after the player made (or attempted) a choice.

    Attributes:
        accepted:  False when the choice was rejected; the position is then
                   unchanged and `reason` explains why.
        room:      Room the player is in after the step.
        choice:    The parsed choice, or None for unrecognised input.
        collected: Clue picked up on entering `room`, if any.
        is_new:    True when `collected` was not already in the clue index.
        finished:  True once the player chose to exit.
        reason:    Human-readable rejection reason.
    """

    accepted:  bool
    room:      Room
    choice:    Optional[str] = None
    collected: Optional[str] = None
    is_new:    bool = False
    finished:  bool = False
    reason:    str = ""


# ---------------------------------------------------------------------------
# Game state
# ---------------------------------------------------------------------------

@dataclass
class GameState:
    """
    Mutable snapshot of the player's progress through one session.

    Owned by MansionInvestigation and mutated in place; the shells read it
    for status displays.

    Attributes:
        moves:            Accepted left/right moves.
        invalid_choices:  Rejected inputs (unknown token or missing path).
        rooms_visited:    Names of every room entered at least once.
        exploration_over: True once the player chose to exit.
        accusation_made:  True once accuse() evaluated an accusation.
        sustained:        Verdict of that accusation, None before it.
    """

    moves:            int  = 0
    invalid_choices:  int  = 0
    rooms_visited:    Set[str] = field(default_factory=set)
    exploration_over: bool = False
    accusation_made:  bool = False
    sustained:        Optional[bool] = None

    def record_move(self, result: MoveResult) -> None:
        """Update counters from a controller MoveResult."""
        if not result.accepted:
            self.invalid_choices += 1
            return
        if result.finished:
            self.exploration_over = True
            return
        self.moves += 1
        self.rooms_visited.add(result.room.name)


# ---------------------------------------------------------------------------
# Pydantic result schemas
# ---------------------------------------------------------------------------

class ClueReport(BaseModel):
    """
    One collected clue annotated with the suspect it points to.

    Fields:
        clue:    Clue text as stored in the clue index.
        suspect: Suspect bound to the clue, or None when no binding exists.
    """

    clue: str
    suspect: Optional[str] = None


class AccusationResult(BaseModel):
    """
    Validated outcome of an accusation.

    Fields:
        accused:        Name typed by the player, as given.
        matching_clues: Collected clues (in alphabetical order) whose suspect
                        matches the accused name, ignoring case.
        count:          len(matching_clues).
        threshold:      Count needed for the accusation to stand.
        sustained:      count >= threshold.
    """

    accused: str
    matching_clues: List[str] = Field(default_factory=list)
    count: int = Field(ge=0)
    threshold: int = Field(ge=1)
    sustained: bool
