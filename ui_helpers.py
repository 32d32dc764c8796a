"""
ui_helpers.py
=============
Stateless presentation helpers shared by the console and Streamlit shells.

These functions carry no game state of their own; they receive all
required data as arguments. Keeping them separate from cli.py and app.py
means they can be imported and tested without a terminal or a live
Streamlit session.

Contains:
  - parse_choice()       : raw player token → "left" | "right" | "exit" | None
  - describe_options()   : menu lines for the current room
  - format_clue_report() : "clue -> suspect" lines for the end-of-game summary
  - format_verdict()     : verdict lines for an AccusationResult
  - build_css()          : returns the dark-noir CSS string
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from config import CHOICE_TOKENS, GAME_CONFIG
from models import AccusationResult, ClueReport, Room


# ---------------------------------------------------------------------------
# Input parsing
# ---------------------------------------------------------------------------

def parse_choice(token: Optional[str]) -> Optional[str]:
    """
    Map a raw player token to a navigation choice.

    Args:
        token: Text typed by the player. Case and surrounding whitespace are
               ignored.

    Returns:
        "left", "right" or "exit", or None when the token is not recognised.

    Example:
        >>> parse_choice("  E ")
        'left'
        >>> parse_choice("up") is None
        True
    """
    if token is None:
        return None
    return CHOICE_TOKENS.get(token.strip().lower())


# ---------------------------------------------------------------------------
# Text formatting
# ---------------------------------------------------------------------------

def describe_options(room: Room) -> List[str]:
    """Menu lines for `room`; only the sides that actually lead somewhere are listed."""
    lines: List[str] = []
    if room.left is not None:
        lines.append(f"  (l) Go left  -> {room.left.name}")
    if room.right is not None:
        lines.append(f"  (r) Go right -> {room.right.name}")
    lines.append("  (x) Leave and accuse a suspect")
    return lines


def format_clue_report(reports: Iterable[ClueReport]) -> List[str]:
    """One "- clue -> points to: suspect" line per collected clue."""
    return [
        f"- {r.clue}  -> points to: {r.suspect or '(' + GAME_CONFIG.unknown_label + ')'}"
        for r in reports
    ]


def format_verdict(result: AccusationResult) -> List[str]:
    """Verdict block printed after an accusation."""
    lines = [
        f"You accused: {result.accused}",
        f"Clues pointing to {result.accused}: {result.count}",
        "",
    ]
    if result.sustained:
        lines.append("Result: ACCUSATION SUSTAINED.")
        lines.append(f"There is enough evidence to hold {result.accused} responsible.")
    else:
        lines.append("Result: ACCUSATION NOT SUSTAINED.")
        lines.append(
            f"At least {result.threshold} clues are needed to sustain the accusation."
        )
    return lines


# ---------------------------------------------------------------------------
# Dark-noir CSS
# ---------------------------------------------------------------------------

def build_css() -> str:
    """
    Return the dark-noir CSS string injected into the Streamlit app.

    Returns:
        A raw CSS string (without <style> tags; the caller wraps it).
    """
    return """
    @import url('https://fonts.googleapis.com/css2?family=Special+Elite&family=Courier+Prime:wght@400;700&display=swap');

    /* ── Global dark background ── */
    html, body, .stApp, .main, .block-container {
        background: linear-gradient(180deg, #0a0a0a 0%, #141414 60%, #0d0d0d 100%) !important;
        color: #c0c0c0 !important;
    }

    /* ── Sidebar ── */
    [data-testid="stSidebar"],
    section[data-testid="stSidebar"] > div {
        background: #0d0d0d !important;
        border-right: 1px solid #222 !important;
    }
    [data-testid="stSidebar"] p,
    [data-testid="stSidebar"] span,
    [data-testid="stSidebar"] li { color: #c0c0c0 !important; }

    /* ── Typography ── */
    .main-header {
        text-align: center; color: #8B0000;
        font-family: 'Special Elite', cursive;
        text-shadow: 2px 2px 4px #000; letter-spacing: 3px;
    }
    .sub-header {
        text-align: center; color: #666;
        font-family: 'Courier Prime', monospace; font-style: italic;
    }
    .sidebar-header {
        color: #8B0000; font-family: 'Special Elite', cursive;
        letter-spacing: 2px; text-align: center; padding: 10px;
        border-bottom: 1px solid #333;
    }

    /* ── Room card ── */
    .room-card {
        background: linear-gradient(145deg, #1a1a1a, #2d2d2d);
        padding: 25px; border-radius: 5px;
        border-left: 4px solid #8B0000; border-top: 1px solid #333;
        box-shadow: 0 4px 15px rgba(0,0,0,0.5);
        font-family: 'Courier Prime', monospace;
    }
    .room-card h3 { color: #8B0000; font-family: 'Special Elite', cursive; letter-spacing: 2px; }

    /* ── Verdict ── */
    .verdict {
        font-size: 40px; font-weight: bold; text-align: center;
        font-family: 'Special Elite', cursive; text-shadow: 2px 2px 4px #000;
    }

    /* ── Buttons ── */
    .stButton > button {
        background: linear-gradient(145deg, #2d2d2d, #1a1a1a);
        color: #c0c0c0; border: 1px solid #444;
        font-family: 'Courier Prime', monospace; transition: all 0.3s ease;
    }
    .stButton > button:hover { border-color: #8B0000; color: #8B0000; box-shadow: 0 0 10px rgba(139,0,0,0.3); }
    .stButton > button[kind="primary"] {
        background: linear-gradient(145deg, #8B0000, #5a0000); color: #fff; border: none;
    }

    /* ── Inputs ── */
    .stTextInput input {
        background-color: #141414 !important; color: #c0c0c0 !important;
        border: 1px solid #333 !important; border-radius: 8px !important;
        font-family: 'Courier Prime', monospace;
    }
"""
