"""
cli.py
======
Command-line interface for Mansion Investigation.

Provides a text-based game loop. All game logic is delegated to
MansionInvestigation; this module only handles I/O.

Usage:
    python cli.py
    mansion-investigation          # console script, once installed

Choices during exploration:
    l / left  / e / esquerda   : go to the room on the left
    r / right / d / direita    : go to the room on the right
    x / exit  / s / sair       : stop exploring and accuse a suspect
"""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

from config import GAME_CONFIG
from game_engine import MansionInvestigation
from models import MoveResult
from ui_helpers import describe_options, format_clue_report, format_verdict


def _announce_room(result: MoveResult) -> None:
    print(f"\n== You are in: {result.room.name} ==")
    if result.collected:
        print(f'Clue found: "{result.collected}"')
    else:
        print("No new clue here.")


def _explore(game: MansionInvestigation) -> None:
    """Run the left/right/exit loop until the player exits (or input ends)."""
    _announce_room(game.arrival)

    while game.exploring:
        print("\nOptions:")
        for line in describe_options(game.current_room):
            print(line)

        try:
            token = input("Choice: ")
        except EOFError:
            token = "exit"

        result = game.move(token)
        if not result.accepted:
            print(result.reason)
        elif result.finished:
            print("You chose to end the investigation.")
        else:
            _announce_room(result)


def run_cli() -> None:
    """
    Main CLI game loop.

    Builds the mansion, lets the player explore it, lists the collected clues
    with the suspect each one points to, then asks for an accusation and
    prints the verdict.
    """
    game = MansionInvestigation()

    # --- Banner ---
    print("\n" + "=" * 60)
    print(f"   {GAME_CONFIG.title.upper()}")
    print("=" * 60)
    print("Explore the mansion and collect clues.")
    print("Navigate with: (l) left, (r) right, (x) exit and accuse.")

    try:
        _explore(game)

        if not game.can_accuse():
            print("\nYou did not collect any clues. Impossible to accuse.")
        else:
            print("\n--- Collected clues and their suspects ---")
            for line in format_clue_report(game.clue_report()):
                print(line)

            try:
                accused = input("\nName the suspect you want to accuse: ").strip()
            except EOFError:
                print("Invalid input.")
                return

            result = game.accuse(accused)
            print()
            for line in format_verdict(result):
                print(line)
    finally:
        game.close()

    print("\nInvestigation closed. Thanks for playing!")


def configure_logging() -> None:
    """
    Configure the root logger once, at the entry point.

    All mansion.* loggers emit through this handler. The level defaults to
    GAME_CONFIG.log_level and can be overridden with MANSION_LOG_LEVEL
    (also read from a .env file).
    """
    load_dotenv()
    level = os.environ.get(GAME_CONFIG.log_level_env, GAME_CONFIG.log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def main() -> None:
    configure_logging()
    run_cli()


if __name__ == "__main__":
    main()
