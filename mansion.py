"""
mansion.py
==========
Builds the static room tree and answers which clue a room holds.
"""

from __future__ import annotations

import logging
from typing import Iterator, Mapping, Optional

from models import CaseScenario, Room

logger = logging.getLogger("detective_quest.mansion")


def build_mansion(scenario: CaseScenario) -> Room:
    """
    Build the Room tree described by a validated scenario.

    Children are built before their parent so every Room can be frozen at
    construction.
    """

    def build(name: str) -> Room:
        left_name, right_name = scenario.layout.get(name, (None, None))
        return Room(
            name=name,
            left=build(left_name) if left_name else None,
            right=build(right_name) if right_name else None,
        )

    root = build(scenario.root_room)
    logger.debug(
        "Mansion built: root=%s, rooms=%d",
        root.name, sum(1 for _ in iter_rooms(root)),
    )
    return root


def room_clue(name: str, room_clues: Mapping[str, str]) -> Optional[str]:
    """The clue hidden in room ``name``, or None if the room is empty."""
    return room_clues.get(name) or None


def iter_rooms(root: Optional[Room]) -> Iterator[Room]:
    """Pre-order walk over the tree."""
    stack = [root] if root is not None else []
    while stack:
        room = stack.pop()
        yield room
        if room.right is not None:
            stack.append(room.right)
        if room.left is not None:
            stack.append(room.left)


def find_room(root: Optional[Room], name: str) -> Optional[Room]:
    return next((room for room in iter_rooms(root) if room.name == name), None)
