"""
room_map.py
===========
Construction and traversal of the mansion map.

The map is a plain binary tree of models.Room nodes. Rooms are created once,
wired to their children, and never reshaped afterwards; the only thing that
changes during play is each room's clue field (see Room.take_clue()).

Contains:
  - create_room()          : build one room, applying the length caps.
  - connect()              : wire left/right children onto a room.
  - build_map()            : build the whole tree from a case_data layout.
  - iter_rooms()           : pre-order walk of every room.
  - count_pending_clues()  : rooms still holding an uncollected clue.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterator, Mapping, Optional

from config import MAP_CONFIG
from models import Room

logger = logging.getLogger("mansion.room_map")


class MapLayoutError(ValueError):
    """Raised when a layout does not describe a single binary tree."""


def create_room(name: str, clue: Optional[str] = None) -> Room:
    """
    Create a room with no children.

    Args:
        name: Room name; truncated to MAP_CONFIG.max_name_length characters.
        clue: Clue text, or None / "" for a room without a clue. Truncated to
              MAP_CONFIG.max_clue_length characters.

    Returns:
        A new Room. A MemoryError from the allocation propagates unchanged.
    """
    name = name[:MAP_CONFIG.max_name_length]
    clue = clue[:MAP_CONFIG.max_clue_length] if clue else None
    return Room(name=name, clue=clue)


def connect(
    parent: Room,
    left: Optional[Room] = None,
    right: Optional[Room] = None,
) -> Room:
    """Attach children to `parent` and return it. None leaves a side as it is."""
    if left is not None:
        parent.left = left
    if right is not None:
        parent.right = right
    return parent


def build_map(
    layout: Mapping[str, Mapping[str, Optional[str]]],
    entry: str,
) -> Room:
    """
    Build the room tree described by `layout` and return its entry room.

    Args:
        layout: Room name → {"clue", "left", "right"}, as in
                case_data.MANSION_LAYOUT.
        entry:  Name of the root room.

    Raises:
        MapLayoutError: the entry is unknown, a link names an unknown room,
                        a room has two parents, the entry has a parent, or some
                        room is unreachable from the entry.
    """
    if entry not in layout:
        raise MapLayoutError(f"Entry room {entry!r} is not in the layout.")

    rooms: Dict[str, Room] = {
        name: create_room(name, details.get("clue"))
        for name, details in layout.items()
    }
    parent_of: Dict[str, str] = {}

    for name, details in layout.items():
        for side in ("left", "right"):
            child_name = details.get(side)
            if not child_name:
                continue
            if child_name not in rooms:
                raise MapLayoutError(
                    f"Room {name!r} links {side} to unknown room {child_name!r}."
                )
            if child_name in parent_of:
                raise MapLayoutError(
                    f"Room {child_name!r} has two parents: "
                    f"{parent_of[child_name]!r} and {name!r}."
                )
            parent_of[child_name] = name
            connect(rooms[name], **{side: rooms[child_name]})

    if entry in parent_of:
        raise MapLayoutError(
            f"Entry room {entry!r} is a child of {parent_of[entry]!r}."
        )

    root = rooms[entry]
    reachable = {id(room) for room in iter_rooms(root)}
    missing = sorted(name for name, room in rooms.items() if id(room) not in reachable)
    if missing:
        raise MapLayoutError(f"Rooms unreachable from {entry!r}: {missing}")

    logger.info("Map built — entry=%r, rooms=%d", entry, len(rooms))
    return root


def iter_rooms(root: Optional[Room]) -> Iterator[Room]:
    """Yield every room of the tree in pre-order (room, left subtree, right subtree)."""
    if root is None:
        return
    yield root
    yield from iter_rooms(root.left)
    yield from iter_rooms(root.right)


def count_pending_clues(root: Optional[Room]) -> int:
    """Number of rooms that still hold an uncollected clue."""
    return sum(1 for room in iter_rooms(root) if room.clue)
