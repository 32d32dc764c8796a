"""
case_data.py
============
All narrative content for the mansion case.

Centralising story data here means you can swap out the entire mystery
(rooms, clues, suspects) without touching any map, index, engine, or UI
logic.

To create a new case:
    1. Replace the constants below with your new story.
    2. Name exactly one room as ENTRY_ROOM; every other room must be
       reachable from it through MANSION_LAYOUT's left/right links.
    3. Keep the dict / tuple shapes identical so nothing else breaks.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple


# ---------------------------------------------------------------------------
# Map layout
# ---------------------------------------------------------------------------

ENTRY_ROOM: str = "Hall de Entrada"

MANSION_LAYOUT: Dict[str, Dict[str, Optional[str]]] = {
    "Hall de Entrada": {
        "clue":  "Bilhete com endereço",
        "left":  "Sala de Estar",
        "right": "Cozinha",
    },
    "Sala de Estar": {
        "clue":  "Pegadas no tapete",
        "left":  "Jardim",
        "right": None,
    },
    "Cozinha": {
        "clue":  "Faca com manchas",
        "left":  None,
        "right": "Biblioteca",
    },
    "Jardim": {
        "clue":  "Folha rasgada",
        "left":  None,
        "right": None,
    },
    "Biblioteca": {
        "clue":  "Livro deslocado",
        "left":  None,
        "right": None,
    },
}
"""
Room name → {"clue", "left", "right"}.

"clue" is the text found on first entering the room (None / "" for none);
"left" and "right" name the child rooms. The shape is fixed at startup:
room_map.build_map() wires it once and nothing edits it afterwards.
"""


# ---------------------------------------------------------------------------
# Suspect bindings (clue → suspect)
# ---------------------------------------------------------------------------

SUSPECT_BINDINGS: List[Tuple[str, str]] = [
    ("Bilhete com endereço", "Sr. Almeida"),
    ("Pegadas no tapete",    "Sra. Beatriz"),
    ("Faca com manchas",     "Carlos"),
    ("Folha rasgada",        "Sra. Beatriz"),
    ("Livro deslocado",      "Carlos"),
]
"""
Fixed rules seeding the SuspectDirectory, inserted in this order.

Several clues may point at the same suspect (Sra. Beatriz and Carlos each
have two), which is what makes a sustained accusation possible.
"""

SUSPECTS: List[str] = sorted({suspect for _, suspect in SUSPECT_BINDINGS})
"""Distinct suspect names, alphabetical. Offered as hints in the Streamlit form."""
