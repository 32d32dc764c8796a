"""
clue_index.py
=============
Ordered set of collected clues, kept as an unbalanced binary search tree.

Clues are compared as Python strings, i.e. by code point, which orders them
the same way a byte-wise comparison of their UTF-8 encodings would. Equal
text is a duplicate and is dropped silently; the empty string is never
stored. The index only grows during a session.

The node-level functions follow an "insert into subtree, get the subtree
back" contract so the caller always owns the root:

    root = insert(root, "Folha rasgada")

ClueIndex wraps that root for the game engine.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

logger = logging.getLogger("mansion.clue_index")


@dataclass(eq=False)
class ClueNode:
    """One distinct clue. `text` is never changed after the node is created."""

    text:  str
    left:  Optional["ClueNode"] = field(default=None, repr=False)
    right: Optional["ClueNode"] = field(default=None, repr=False)


def insert(root: Optional[ClueNode], text: str) -> Optional[ClueNode]:
    """
    Insert `text` into the subtree rooted at `root` and return the subtree root.

    Empty text and duplicates leave the tree unchanged.
    """
    if not text:
        return root
    if root is None:
        return ClueNode(text)

    if text < root.text:
        root.left = insert(root.left, text)
    elif text > root.text:
        root.right = insert(root.right, text)
    return root


def iter_in_order(root: Optional[ClueNode]) -> Iterator[str]:
    """Lazily yield the clue texts of the subtree in ascending order."""
    if root is None:
        return
    yield from iter_in_order(root.left)
    yield root.text
    yield from iter_in_order(root.right)


def contains(root: Optional[ClueNode], text: str) -> bool:
    node = root
    while node is not None:
        if text == node.text:
            return True
        node = node.left if text < node.text else node.right
    return False


def height(root: Optional[ClueNode]) -> int:
    """Number of nodes on the longest root-to-leaf path (0 for an empty tree)."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


class ClueIndex:
    """
    Session-owned handle on the clue BST.

    Iterating yields clues alphabetically; the iteration does not mutate the
    tree, so it can be restarted any number of times.
    """

    def __init__(self) -> None:
        self.root: Optional[ClueNode] = None
        self._size = 0

    def add(self, text: str) -> bool:
        """
        Insert a clue.

        Returns:
            True when a new entry was created, False for empty text or a
            clue already present.
        """
        if not text or contains(self.root, text):
            return False
        self.root = insert(self.root, text)
        self._size += 1
        logger.debug("Clue indexed: %r (total=%d)", text, self._size)
        return True

    def clear(self) -> None:
        """Drop every entry. Used once, at session teardown."""
        self.root = None
        self._size = 0

    def height(self) -> int:
        return height(self.root)

    def __iter__(self) -> Iterator[str]:
        return iter_in_order(self.root)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self.root is not None

    def __contains__(self, text: object) -> bool:
        return isinstance(text, str) and contains(self.root, text)

    def __repr__(self) -> str:
        return f"ClueIndex({list(self)!r})"
