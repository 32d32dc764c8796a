"""
game_engine.py
==============
Core game engine for Mansion Investigation.

Contains:
  ExplorationController: the left/right/exit state machine that walks the
                          room map and moves each newly found clue into the
                          clue index.
  MansionInvestigation:  the single orchestrating class that owns the map,
                          clue index, suspect directory and GameState, and
                          exposes a clean API consumed by both the Streamlit
                          UI (app.py) and the CLI runner (cli.py).

Public API summary:
    game = MansionInvestigation()
    game.current_room                   → Room
    game.arrival                        → MoveResult for the entry room
    game.move(token)                    → MoveResult
    game.available_choices()            → ["left", "right", "exit"] subset
    game.clue_report()                  → [ClueReport, ...]
    game.can_accuse()                   → bool
    game.accuse(name)                   → AccusationResult | None
    game.close()                        → None
    game.reset()                        → None

Logging
-------
Every significant event is emitted through the standard ``logging`` module
so that the host application (Streamlit, CLI, or any test harness) can route,
filter, and aggregate log output without changing this file.

The logger name for this module is ``mansion.game_engine``.
"""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Sequence, Tuple

from case_data import ENTRY_ROOM, MANSION_LAYOUT, SUSPECT_BINDINGS
from clue_index import ClueIndex
from models import AccusationResult, ClueReport, GameState, MoveResult, Room
from room_map import build_map, count_pending_clues
from scoring import evaluate_accusation
from suspect_directory import SuspectDirectory
from ui_helpers import parse_choice

logger = logging.getLogger("mansion.game_engine")


class ExplorationFinishedError(RuntimeError):
    """Raised when a choice is made after the player already exited."""


class SessionClosedError(RuntimeError):
    """Raised when a closed MansionInvestigation is used again."""


# ---------------------------------------------------------------------------
# Exploration state machine
# ---------------------------------------------------------------------------

class ExplorationController:
    """
    Walks the room tree one choice at a time.

    The controller is always in one of two states: at a room (`current`), or
    finished after an explicit exit. Reaching a leaf does not finish the
    exploration; from a leaf only "exit" is accepted.

    Entering a room with a clue inserts the clue into the index and clears
    it from the room, so coming back never collects it again.

    Attributes:
        current:  Room the player is standing in.
        finished: True once "exit" was chosen.
        arrival:  MoveResult of entering the entry room on construction.
    """

    def __init__(self, entry: Room, clues: ClueIndex) -> None:
        self.clues = clues
        self.finished = False
        self.current = entry
        self.arrival = self._enter(entry, choice=None)

    def _enter(self, room: Room, choice: Optional[str]) -> MoveResult:
        self.current = room
        collected: Optional[str] = None
        is_new = False
        if room.clue:
            collected = room.clue
            is_new = self.clues.add(collected)
            room.take_clue()
            logger.info("Clue found in %s: %r (new=%s)", room.name, collected, is_new)
        return MoveResult(
            accepted=True,
            room=room,
            choice=choice,
            collected=collected,
            is_new=is_new,
        )

    def available_choices(self) -> List[str]:
        choices: List[str] = []
        if self.current.left is not None:
            choices.append("left")
        if self.current.right is not None:
            choices.append("right")
        choices.append("exit")
        return choices

    def choose(self, choice: Optional[str]) -> MoveResult:
        """
        Apply one player choice.

        Args:
            choice: "left", "right", "exit", or None for input that could not
                    be parsed.

        Returns:
            A MoveResult. Rejected choices have accepted=False, leave the
            position unchanged and carry a `reason`.

        Raises:
            ExplorationFinishedError: the player already exited.
        """
        if self.finished:
            raise ExplorationFinishedError("Exploration already finished.")

        if choice == "exit":
            self.finished = True
            logger.info("Exploration finished at %s.", self.current.name)
            return MoveResult(
                accepted=True, room=self.current, choice=choice, finished=True
            )

        if choice in ("left", "right"):
            target = self.current.child(choice)
            if target is None:
                logger.warning("No path %s from %s.", choice, self.current.name)
                return MoveResult(
                    accepted=False,
                    room=self.current,
                    choice=choice,
                    reason=f"There is no path to the {choice}.",
                )
            logger.debug("Moving %s: %s -> %s", choice, self.current.name, target.name)
            return self._enter(target, choice)

        logger.warning("Unrecognised choice %r at %s.", choice, self.current.name)
        return MoveResult(
            accepted=False,
            room=self.current,
            choice=None,
            reason="Invalid option. Use 'l' (left), 'r' (right) or 'x' (exit).",
        )


# ---------------------------------------------------------------------------
# Session orchestrator
# ---------------------------------------------------------------------------

class MansionInvestigation:
    """
    Main game engine.

    Owns the room map, the clue index, the suspect directory and the shared
    GameState. The shells interact with this class exclusively.

    Attributes:
        state:      Current GameState (moves, rooms visited, verdict).
        entry_room: Root of the room map (None after close()).
        clues:      ClueIndex of collected clues.
        directory:  SuspectDirectory seeded from the bindings.
        controller: ExplorationController driving navigation.
        last_result: AccusationResult of the last accusation, if any.
    """

    def __init__(
        self,
        layout: Mapping[str, Mapping[str, Optional[str]]] = MANSION_LAYOUT,
        entry: str = ENTRY_ROOM,
        bindings: Sequence[Tuple[str, str]] = SUSPECT_BINDINGS,
    ) -> None:
        self._layout = layout
        self._entry = entry
        self._bindings = bindings
        self._start()

    def _start(self) -> None:
        self.state = GameState()
        self.entry_room: Optional[Room] = build_map(self._layout, self._entry)
        self.clues = ClueIndex()
        self.directory = SuspectDirectory.from_bindings(self._bindings)
        self.controller = ExplorationController(self.entry_room, self.clues)
        self.state.rooms_visited.add(self.entry_room.name)
        self.last_result: Optional[AccusationResult] = None
        self._closed = False

        logger.info(
            "MansionInvestigation initialised — entry=%r, clues_in_map=%d",
            self._entry,
            count_pending_clues(self.entry_room) + len(self.clues),
        )

    def _require_open(self) -> None:
        if self._closed:
            raise SessionClosedError("This investigation has been closed.")

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    @property
    def current_room(self) -> Room:
        return self.controller.current

    @property
    def arrival(self) -> MoveResult:
        """MoveResult of entering the entry room (its clue, if any, is already collected)."""
        return self.controller.arrival

    @property
    def exploring(self) -> bool:
        return not self.controller.finished

    def available_choices(self) -> List[str]:
        return self.controller.available_choices()

    def move(self, token: Optional[str]) -> MoveResult:
        """
        Parse a raw player token and apply it.

        Malformed tokens and missing paths are reported through the returned
        MoveResult; they never end the exploration.
        """
        self._require_open()
        result = self.controller.choose(parse_choice(token))
        self.state.record_move(result)
        return result

    # ------------------------------------------------------------------
    # Clues and accusation
    # ------------------------------------------------------------------

    def clue_report(self) -> List[ClueReport]:
        """Collected clues in alphabetical order, each with its bound suspect (or None)."""
        return [
            ClueReport(clue=clue, suspect=self.directory.lookup(clue))
            for clue in self.clues
        ]

    def can_accuse(self) -> bool:
        return bool(self.clues)

    def accuse(self, suspect_name: str) -> Optional[AccusationResult]:
        """
        Evaluate an accusation against the collected clues.

        Returns:
            The AccusationResult, or None when no clue was collected; in that
            case the accusation is impossible and nothing is evaluated.
        """
        self._require_open()
        if not self.can_accuse():
            logger.info("Accusation of %r refused — no clues collected.", suspect_name)
            return None

        result = evaluate_accusation(self.clues, self.directory, suspect_name)
        self.state.accusation_made = True
        self.state.sustained = result.sustained
        self.last_result = result

        logger.info(
            "Accusation received — suspect=%r | matching=%d/%d | sustained=%s",
            suspect_name,
            result.count,
            len(self.clues),
            result.sustained,
        )
        return result

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Release the room map, the clue index and the suspect directory, in that order."""
        if self._closed:
            logger.debug("close() called on an already closed investigation.")
            return
        self.entry_room = None
        self.clues.clear()
        self.directory.release()
        self._closed = True
        logger.info("Investigation closed.")

    def reset(self) -> None:
        """Close the current session and start a fresh one from the same case data."""
        self.close()
        logger.debug("Resetting investigation.")
        self._start()
