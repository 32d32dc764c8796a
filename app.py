"""
app.py
======
Streamlit web UI for Mansion Investigation.

Responsibilities:
  - Configure and render the Streamlit page (layout, dark-noir theme).
  - Manage session state initialisation and reset.
  - Render sidebar components (collected clues, investigation status).
  - Render main-panel components (current room, navigation buttons,
    accusation form, verdict).

This file contains only UI logic. All game logic lives in game_engine.py,
all narrative data in case_data.py, and all shared presentation helpers in
ui_helpers.py.

Run with:
    streamlit run app.py
"""

from __future__ import annotations

import logging
import os

import streamlit as st
from dotenv import load_dotenv

# Load .env before configuring logging so MANSION_LOG_LEVEL is honoured.
load_dotenv()

# ---------------------------------------------------------------------------
# Logging configuration
#
# basicConfig is called here, at the Streamlit entry point, so it runs exactly
# once per process regardless of how many times Streamlit reruns the script.
# All modules under "mansion.*" emit to this handler automatically.
# ---------------------------------------------------------------------------
from config import GAME_CONFIG

logging.basicConfig(
    level=getattr(
        logging,
        os.environ.get(GAME_CONFIG.log_level_env, GAME_CONFIG.log_level).upper(),
        logging.WARNING,
    ),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("mansion.app")

from case_data import SUSPECTS
from game_engine import MansionInvestigation
from models import MoveResult
from room_map import count_pending_clues
from ui_helpers import build_css, format_verdict


# ============================================================
# PAGE CONFIGURATION
# ============================================================

st.set_page_config(
    page_title="Mansion Investigation",
    page_icon="🔍",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown(f"<style>{build_css()}</style>", unsafe_allow_html=True)


# ============================================================
# SESSION STATE
# ============================================================

def _arrival_message(result: MoveResult) -> str:
    if result.collected:
        return f"🔎 {result.room.name}: clue found — *{result.collected}*"
    return f"🚪 {result.room.name}: no new clue here."


def init_session_state() -> None:
    """
    Initialise all Streamlit session state variables on first run.

    Uses a defaults dict so new keys can be added in one place without
    multiple scattered `if key not in st.session_state` guards.
    """
    if "game" not in st.session_state:
        game = MansionInvestigation()
        st.session_state.game = game
        st.session_state.journal = [_arrival_message(game.arrival)]

    defaults: dict = {
        "accusation_result": None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def reset_game() -> None:
    """Start a brand-new investigation and wipe per-game UI state."""
    game: MansionInvestigation = st.session_state.game
    game.reset()
    st.session_state.journal            = [_arrival_message(game.arrival)]
    st.session_state.accusation_result  = None
    logger.info("Streamlit session reset.")


# ============================================================
# SIDEBAR COMPONENTS
# ============================================================

def render_clue_sidebar() -> None:
    """List the collected clues alphabetically, as the clue index stores them."""
    game: MansionInvestigation = st.session_state.game

    st.sidebar.markdown(
        '<div class="sidebar-header">🗝️ CLUES</div>', unsafe_allow_html=True
    )
    if not game.can_accuse():
        st.sidebar.markdown("*No clues collected yet.*")
        return
    for clue in game.clues:
        st.sidebar.markdown(f"- {clue}")


def render_game_status() -> None:
    """Render the move counter and exploration progress in the sidebar."""
    game: MansionInvestigation = st.session_state.game
    state = game.state

    st.sidebar.markdown("---")
    st.sidebar.markdown(
        '<div class="sidebar-header">📊 INVESTIGATION</div>',
        unsafe_allow_html=True,
    )
    collected = len(game.clues)
    pending   = count_pending_clues(game.entry_room)
    st.sidebar.progress(collected / max(1, collected + pending))
    st.sidebar.markdown(f"**Rooms visited:** {len(state.rooms_visited)}")
    st.sidebar.markdown(f"**Moves:** {state.moves}")
    if state.invalid_choices:
        st.sidebar.markdown(f"**Wrong turns:** {state.invalid_choices}")


# ============================================================
# MAIN-PANEL COMPONENTS
# ============================================================

def render_room() -> None:
    """Render the current room card and one button per valid choice."""
    game: MansionInvestigation = st.session_state.game
    room = game.current_room

    st.markdown(f"""
    <div class="room-card">
        <h3>📍 {room.name}</h3>
    </div>
    """, unsafe_allow_html=True)

    for line in st.session_state.journal[-5:]:
        st.markdown(line)

    st.markdown("---")
    labels = {
        "left":  f"⬅️ Left — {room.left.name}" if room.left else "",
        "right": f"➡️ Right — {room.right.name}" if room.right else "",
        "exit":  "⚖️ Leave and accuse",
    }
    choices = game.available_choices()
    for col, choice in zip(st.columns(len(choices)), choices):
        with col:
            button_type = "primary" if choice == "exit" else "secondary"
            if st.button(labels[choice], key=f"move_{choice}", type=button_type,
                         use_container_width=True):
                _apply_move(choice)
                st.rerun()


def _apply_move(choice: str) -> None:
    game: MansionInvestigation = st.session_state.game
    result = game.move(choice)
    if not result.accepted:
        st.session_state.journal.append(f"⚠️ {result.reason}")
    elif result.finished:
        st.session_state.journal.append("You chose to end the investigation.")
    else:
        st.session_state.journal.append(_arrival_message(result))


def render_accusation_form() -> None:
    """
    Render the clue summary and the accusation form once exploration is over.

    With no clues collected the form is replaced by the "impossible to
    accuse" notice and no evaluation takes place.
    """
    game: MansionInvestigation = st.session_state.game

    st.markdown("""
    <div style="text-align: center; padding: 20px;">
        <span style="font-family: 'Special Elite', cursive; font-size: 28px; color: #8B0000;">
            ⚖️ MAKE YOUR ACCUSATION
        </span>
    </div>
    """, unsafe_allow_html=True)

    if not game.can_accuse():
        st.error("You did not collect any clues. Impossible to accuse.")
        return

    st.markdown("**Collected clues and their suspects**")
    for report in game.clue_report():
        suspect = report.suspect or f"({GAME_CONFIG.unknown_label})"
        st.markdown(f"- {report.clue} → points to: **{suspect}**")

    st.caption(f"Known suspects: {', '.join(SUSPECTS)}")
    accused = st.text_input("Name the suspect you want to accuse:")

    if st.button("🔨 I ACCUSE…", type="primary", use_container_width=True,
                 disabled=not accused.strip()):
        st.session_state.accusation_result = game.accuse(accused.strip())
        st.rerun()


def render_game_result() -> None:
    """Render the verdict banner and the matching clues."""
    result = st.session_state.accusation_result
    colour = "#228B22" if result.sustained else "#8B0000"
    title  = "ACCUSATION SUSTAINED" if result.sustained else "ACCUSATION NOT SUSTAINED"

    st.markdown(
        f'<div class="verdict" style="color: {colour};">{title}</div>',
        unsafe_allow_html=True,
    )
    st.markdown("\n\n".join(line for line in format_verdict(result) if line))

    if result.matching_clues:
        with st.expander("📋 Evidence", expanded=True):
            for clue in result.matching_clues:
                st.markdown(f"- {clue}")


def main() -> None:
    """
    Entry point, called by Streamlit on every render pass.

    Flow:
      1. Initialise session state on first run.
      2. Render the page header and sidebar.
      3. Render the room while exploring, the accusation form after exit,
         and the verdict once an accusation was evaluated.
    """
    init_session_state()
    game: MansionInvestigation = st.session_state.game

    st.markdown(f"""
    <h1 class='main-header'>🔍 {GAME_CONFIG.title.upper()}</h1>
    <h3 class='sub-header'>Explore the mansion. Collect clues. Name the culprit.</h3>
    """, unsafe_allow_html=True)

    render_clue_sidebar()
    render_game_status()

    st.sidebar.markdown("---")
    if st.sidebar.button("🔄 NEW CASE", use_container_width=True):
        reset_game()
        st.rerun()

    if game.exploring:
        render_room()
    elif st.session_state.accusation_result is not None:
        render_game_result()
    else:
        render_accusation_form()


if __name__ == "__main__":
    main()
