"""
exploration.py
==============
Interactive descent through the mansion.

The engine is a two-state machine: it is either at a room or finished.
Each call to step() consumes one command line and returns the events it
produced, so the CLI and the Streamlit UI can narrate them however they like.

    engine = ExplorationEngine(root, ROOM_CLUES, ledger)
    engine.start()     -> [ENTERED_ROOM, CLUE_FOUND]
    engine.step("d")   -> [ENTERED_ROOM, CLUE_FOUND]
    engine.step("x")   -> [INVALID_COMMAND]
    engine.step("s")   -> [FINISHED]
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import List, Mapping, Optional

from clue_ledger import ClueLedger
from config import GAME_CONFIG, GameConfig
from mansion import room_clue
from models import ExplorationEvent, Room, Signal

logger = logging.getLogger("detective_quest.exploration")


class Command(str, Enum):
    LEFT  = "left"
    RIGHT = "right"
    STOP  = "stop"


def parse_command(raw: Optional[str], config: GameConfig = GAME_CONFIG) -> Optional[Command]:
    """
    Map a command line to a Command using its first character only.

    Returns None for blank or unrecognised input.

    Example:
        >>> parse_command("Direita")
        <Command.RIGHT: 'right'>
    """
    token = (raw or "").strip()
    if not token:
        return None
    first = token[0]
    if first in config.left_keys:
        return Command.LEFT
    if first in config.right_keys:
        return Command.RIGHT
    if first in config.stop_keys:
        return Command.STOP
    return None


class ExplorationEngine:
    """
    Walks the room tree one command at a time, filling the ledger.

    Attributes:
        root:       The room where exploration starts.
        room_clues: room name -> clue text.
        ledger:     Receives every clue found.
        current:    The room the player is standing in.
        finished:   True after ``stop``; no further steps are accepted.
    """

    def __init__(
        self,
        root: Room,
        room_clues: Mapping[str, str],
        ledger: ClueLedger,
        config: GameConfig = GAME_CONFIG,
    ) -> None:
        self.root       = root
        self.room_clues = room_clues
        self.ledger     = ledger
        self.config     = config
        self.current: Room = root
        self.finished = False
        self._started = False

    def start(self) -> List[ExplorationEvent]:
        """Enter the root room. Calling it twice re-enters the current room."""
        self._started = True
        return self._enter(self.current)

    def step(self, raw: Optional[str]) -> List[ExplorationEvent]:
        """
        Process one command line.

        A blank line re-enters the current room, announcing it (and its clue)
        again. Unknown input and moves towards a missing child leave the
        player where they are.
        """
        if self.finished:
            logger.warning("step(%r) ignored: exploration already finished", raw)
            return []

        events: List[ExplorationEvent] = [] if self._started else self.start()

        if not (raw or "").strip():
            events.extend(self._enter(self.current))
            return events

        command = parse_command(raw, self.config)
        here = self.current

        if command is Command.STOP:
            self.finished = True
            logger.info("Exploration finished in room %s", here.name)
            events.append(ExplorationEvent(Signal.FINISHED, here.name))
        elif command is Command.LEFT:
            if here.left is not None:
                events.extend(self._move_to(here.left))
            else:
                events.append(ExplorationEvent(Signal.NO_ROOM_LEFT, here.name))
        elif command is Command.RIGHT:
            if here.right is not None:
                events.extend(self._move_to(here.right))
            else:
                events.append(ExplorationEvent(Signal.NO_ROOM_RIGHT, here.name))
        else:
            logger.debug("Invalid command %r in room %s", raw, here.name)
            events.append(ExplorationEvent(Signal.INVALID_COMMAND, here.name))
        return events

    # ------------------------------------------------------------------
    # Internal transitions
    # ------------------------------------------------------------------

    def _move_to(self, room: Room) -> List[ExplorationEvent]:
        logger.debug("Moving %s -> %s", self.current.name, room.name)
        self.current = room
        return self._enter(room)

    def _enter(self, room: Room) -> List[ExplorationEvent]:
        events = [ExplorationEvent(Signal.ENTERED_ROOM, room.name)]
        clue = room_clue(room.name, self.room_clues)
        if clue is None:
            events.append(ExplorationEvent(Signal.NO_CLUE, room.name))
        else:
            self.ledger.add_and_announce(
                clue,
                lambda text: events.append(
                    ExplorationEvent(Signal.CLUE_FOUND, room.name, text)
                ),
            )
        return events
