"""
suspect_directory.py
====================
Hash table mapping clue text to the suspect it incriminates.

Implementation details that matter for compatibility:
  - Hash: djb2 over the UTF-8 bytes of the clue (seed 5381, hash * 33 + byte),
    kept to 64 bits, reduced modulo the bucket count (101 by default).
  - Collisions: separate chaining with singly linked Binding nodes.
  - Insertion prepends to the chain, so a newer binding for the same clue
    shadows the older one on lookup (both stay in the chain).
  - Lookup is an exact, case-sensitive comparison of clue text.

The table is seeded once from case_data.SUSPECT_BINDINGS and only read
afterwards.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

from config import DIRECTORY_CONFIG

logger = logging.getLogger("mansion.suspect_directory")


def djb2(text: str) -> int:
    """
    djb2 hash of `text`'s UTF-8 bytes, wrapped to 64 bits.

    Example:
        >>> djb2("")
        5381
        >>> djb2("a")
        177670
    """
    cfg = DIRECTORY_CONFIG
    value = cfg.hash_seed
    for byte in text.encode("utf-8"):
        value = (value * cfg.hash_factor + byte) & cfg.hash_mask
    return value


@dataclass(eq=False)
class Binding:
    """One chain node: `clue` → `suspect`, linked to the next node in its bucket."""

    clue:    str
    suspect: str
    next:    Optional["Binding"] = field(default=None, repr=False)


class SuspectDirectory:
    """
    Chained hash table of clue → suspect bindings.

    Attributes:
        bucket_count: Number of buckets, fixed at construction.
    """

    def __init__(self, bucket_count: int = DIRECTORY_CONFIG.bucket_count) -> None:
        if bucket_count < 1:
            raise ValueError(f"bucket_count must be positive, got {bucket_count}")
        self.bucket_count = bucket_count
        self._buckets: List[Optional[Binding]] = [None] * bucket_count
        self._size = 0

    @classmethod
    def from_bindings(
        cls,
        bindings: Iterable[Tuple[str, str]],
        bucket_count: int = DIRECTORY_CONFIG.bucket_count,
    ) -> "SuspectDirectory":
        """Build a directory and insert `bindings` in order."""
        directory = cls(bucket_count)
        for clue, suspect in bindings:
            directory.insert(clue, suspect)
        logger.info(
            "Suspect directory seeded — bindings=%d, buckets=%d",
            len(directory),
            directory.bucket_count,
        )
        return directory

    def bucket_index(self, clue: str) -> int:
        return djb2(clue) % self.bucket_count

    def insert(self, clue: str, suspect: str) -> None:
        """Prepend `clue` → `suspect` to its bucket. Empty clues are ignored."""
        if not clue:
            return
        index = self.bucket_index(clue)
        self._buckets[index] = Binding(clue, suspect, self._buckets[index])
        self._size += 1
        logger.debug("Binding %r -> %r stored in bucket %d", clue, suspect, index)

    def lookup(self, clue: str) -> Optional[str]:
        """
        Return the suspect bound to `clue`, or None when there is no binding.

        The most recently inserted binding wins when a clue was bound twice.
        """
        node = self._buckets[self.bucket_index(clue)]
        while node is not None:
            if node.clue == clue:
                return node.suspect
            node = node.next
        return None

    def chain(self, index: int) -> List[Binding]:
        """Bindings stored in bucket `index`, head first."""
        nodes: List[Binding] = []
        node = self._buckets[index]
        while node is not None:
            nodes.append(node)
            node = node.next
        return nodes

    def release(self) -> None:
        """Unlink every chain. The directory behaves as empty afterwards."""
        for index in range(self.bucket_count):
            node = self._buckets[index]
            while node is not None:
                following = node.next
                node.next = None
                node = following
            self._buckets[index] = None
        logger.debug("Suspect directory released (%d bindings).", self._size)
        self._size = 0

    def __iter__(self) -> Iterator[Binding]:
        for index in range(self.bucket_count):
            yield from self.chain(index)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, clue: object) -> bool:
        return isinstance(clue, str) and self.lookup(clue) is not None
