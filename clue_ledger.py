"""
clue_ledger.py
==============
The detective's notebook: a binary search tree of collected clues.

The module-level functions work on a bare root (``None`` for an empty
ledger) and always return the root so callers can rebind it. ClueLedger
wraps a root for code that prefers an object.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterator, List, Optional

from models import ClueEntry

logger = logging.getLogger("detective_quest.clue_ledger")

Announce = Callable[[str], None]


def insert(root: Optional[ClueEntry], clue: Optional[str]) -> Optional[ClueEntry]:
    """
    Insert ``clue`` if it is not already present.

    Smaller texts go left, larger go right, equal texts leave the tree
    untouched. Empty or missing clues are ignored.

    Returns:
        The root of the tree, which is the new entry when ``root`` was None.
    """
    if not clue:
        return root
    if root is None:
        return ClueEntry(clue)

    node = root
    while True:
        if clue == node.text:
            return root
        if clue < node.text:
            if node.left is None:
                node.left = ClueEntry(clue)
                return root
            node = node.left
        else:
            if node.right is None:
                node.right = ClueEntry(clue)
                return root
            node = node.right


def add_and_announce(
    root: Optional[ClueEntry],
    clue: Optional[str],
    announce: Optional[Announce] = None,
) -> Optional[ClueEntry]:
    """
    Record a clue the player just found and tell the caller about it.

    ``announce`` fires for every non-empty clue, even one the ledger
    already holds.
    """
    if not clue:
        return root
    if announce is not None:
        announce(clue)
    logger.debug("Clue found: %r", clue)
    return insert(root, clue)


def contains(root: Optional[ClueEntry], clue: str) -> bool:
    node = root
    while node is not None:
        if clue == node.text:
            return True
        node = node.left if clue < node.text else node.right
    return False


def iter_in_order(root: Optional[ClueEntry]) -> Iterator[str]:
    """Yield clue texts in ascending order."""
    stack: List[ClueEntry] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.text
        node = node.right


def in_order_list(root: Optional[ClueEntry]) -> List[str]:
    return list(iter_in_order(root))


class ClueLedger:
    """An owned clue tree with a small object interface."""

    def __init__(self) -> None:
        self.root: Optional[ClueEntry] = None

    def add(self, clue: Optional[str]) -> None:
        self.root = insert(self.root, clue)

    def add_and_announce(self, clue: Optional[str], announce: Optional[Announce] = None) -> None:
        self.root = add_and_announce(self.root, clue, announce)

    def clues(self) -> List[str]:
        return in_order_list(self.root)

    @property
    def is_empty(self) -> bool:
        return self.root is None

    def clear(self) -> None:
        self.root = None

    def __contains__(self, clue: object) -> bool:
        return isinstance(clue, str) and contains(self.root, clue)

    def __iter__(self) -> Iterator[str]:
        return iter_in_order(self.root)

    def __len__(self) -> int:
        return sum(1 for _ in iter_in_order(self.root))
