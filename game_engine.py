"""
game_engine.py
==============
Core game engine for Detective Quest.

Contains:
  DetectiveQuestGame — the single orchestrating class that wires together
                       the mansion tree, the evidence index, the clue ledger
                       and the exploration engine, and exposes a clean API
                       consumed by both the Streamlit UI (app.py) and the
                       CLI runner (cli.py).

Public API summary:
    game = DetectiveQuestGame()
    game.start()                    → [ExplorationEvent]
    game.move(command)              → [ExplorationEvent]
    game.current_room               → Room
    game.collected_clues()          → [str] (ascending)
    game.can_accuse()               → bool
    game.run_judgment(read_accused) → JudgmentResult
    game.make_accusation(name)      → JudgmentResult
    game.suspects()                 → [str]
    game.reset()                    → None

Logging
-------
Every significant event is emitted through the standard ``logging`` module
under the ``detective_quest.*`` namespace. Configure level and destination
once at your entry point; see cli.py and app.py.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from case_data import load_scenario
from clue_ledger import ClueLedger
from evidence_index import EvidenceIndex, build_index
from exploration import ExplorationEngine
from judgment import ReadAccused, judge
from mansion import build_mansion
from models import CaseScenario, ExplorationEvent, GameState, JudgmentResult, Room, Signal

logger = logging.getLogger("detective_quest.game_engine")


class DetectiveQuestGame:
    """
    Main game engine.

    Owns the room tree, the evidence index, the clue ledger and the
    exploration engine for one session. The UIs interact with this class
    exclusively.

    Attributes:
        scenario: The validated case data.
        mansion:  Root of the room tree (read-only).
        index:    Clue -> suspect table, loaded once before exploration.
        ledger:   Clues collected so far.
        explorer: The exploration state machine.
        state:    Progress counters for status displays.
    """

    def __init__(self, scenario: Optional[CaseScenario] = None) -> None:
        self.scenario: CaseScenario = scenario or load_scenario()
        self.mansion: Room = build_mansion(self.scenario)
        self.index: EvidenceIndex = build_index(self.scenario)
        self.state = GameState()
        self._new_session()

        logger.info(
            "DetectiveQuestGame initialised: case=%r, rooms=%d, evidence=%d",
            self.scenario.title,
            len(self.scenario.room_names()),
            len(self.index),
        )

    def _new_session(self) -> None:
        self.ledger = ClueLedger()
        self.explorer = ExplorationEngine(
            self.mansion, self.scenario.room_clues, self.ledger
        )

    # ------------------------------------------------------------------
    # Exploration
    # ------------------------------------------------------------------

    @property
    def current_room(self) -> Room:
        return self.explorer.current

    @property
    def exploring(self) -> bool:
        return not self.explorer.finished

    def start(self) -> List[ExplorationEvent]:
        """Place the player in the entrance and collect its clue."""
        return self._record(self.explorer.start(), count_step=False)

    def move(self, command: Optional[str]) -> List[ExplorationEvent]:
        """
        Forward one command line to the exploration engine.

        Returns an empty list (and logs a warning) once exploration is over.
        """
        if self.explorer.finished:
            logger.warning("move(%r) called after exploration finished", command)
            return []
        return self._record(self.explorer.step(command), count_step=True)

    def _record(self, events: List[ExplorationEvent], count_step: bool) -> List[ExplorationEvent]:
        if count_step:
            self.state.steps += 1
        for event in events:
            if event.signal is Signal.ENTERED_ROOM:
                self.state.add_visit(event.room)
            elif event.signal is Signal.FINISHED:
                self.state.exploration_finished = True
                logger.info(
                    "Exploration over after %d steps; %d distinct clues collected",
                    self.state.steps, len(self.ledger),
                )
        return events

    def collected_clues(self) -> List[str]:
        return self.ledger.clues()

    # ------------------------------------------------------------------
    # Judgment
    # ------------------------------------------------------------------

    def can_accuse(self) -> bool:
        """False while the ledger is empty: there are no grounds to accuse."""
        return not self.ledger.is_empty

    def run_judgment(self, read_accused: ReadAccused) -> JudgmentResult:
        """
        Interactive judgment. ``read_accused`` is only called when at least
        one clue was collected.
        """
        result = judge(self.ledger.root, self.index, read_accused)
        self.state.last_result = result
        self.state.accusation_made = result.verdict is not None
        return result

    def make_accusation(self, accused: Optional[str]) -> JudgmentResult:
        """Non-interactive form of run_judgment() for UIs that already hold the name."""
        return self.run_judgment(lambda _clues: accused)

    def suspects(self) -> List[str]:
        """Suspect names known to the case, for display only."""
        return self.scenario.suspects()

    # ------------------------------------------------------------------
    # Reset
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """
        Reset the game for a new playthrough.

        The mansion and the index are static and kept; the ledger and the
        exploration engine are rebuilt from scratch.
        """
        logger.info("Game reset requested")
        self.state.reset()
        self._new_session()
