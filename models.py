"""
models.py
=========
Shared data models for Detective Quest.

Contains:
  - Room              : node of the static mansion layout tree.
  - ClueEntry         : node of the clue ledger BST.
  - EvidenceRecord    : one clue -> suspect record in an index bucket.
  - Signal / ExplorationEvent : what the exploration engine reports per step.
  - Verdict / JudgmentStatus / JudgmentResult : outcome of the final judgment.
  - CaseScenario      : Pydantic schema that validates the static case data.
  - GameState         : mutable dataclass tracking per-session progress.

Keeping these in one module guarantees a single source of truth for data
shapes used across the engines, the CLI and the Streamlit UI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Set, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator


# ---------------------------------------------------------------------------
# Structural nodes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, eq=False)
class Room:
    """
    A room of the mansion. Children are owned by their parent; the whole tree
    is built once from the scenario and never mutated.
    """

    name:  str
    left:  Optional[Room] = None
    right: Optional[Room] = None

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


@dataclass(eq=False)
class ClueEntry:
    """Node of the clue ledger, ordered by ``text``."""

    text:  str
    left:  Optional[ClueEntry] = None
    right: Optional[ClueEntry] = None


@dataclass
class EvidenceRecord:
    """One link of a bucket chain. ``suspect`` is replaced in place on re-insert."""

    clue:    str
    suspect: str


# ---------------------------------------------------------------------------
# Exploration events
# ---------------------------------------------------------------------------

class Signal(str, Enum):
    ENTERED_ROOM    = "entered_room"
    CLUE_FOUND      = "clue_found"
    NO_CLUE         = "no_clue"
    NO_ROOM_LEFT    = "no_room_left"
    NO_ROOM_RIGHT   = "no_room_right"
    INVALID_COMMAND = "invalid_command"
    FINISHED        = "finished"


@dataclass(frozen=True)
class ExplorationEvent:
    """
    A single observable outcome of an exploration step.

    Attributes:
        signal: What happened.
        room:   The room the player is in after the event.
        clue:   The clue text for CLUE_FOUND events, otherwise None.
    """

    signal: Signal
    room:   str
    clue:   Optional[str] = None


# ---------------------------------------------------------------------------
# Judgment
# ---------------------------------------------------------------------------

class Verdict(str, Enum):
    VALID = "valid"
    WEAK  = "weak"


class JudgmentStatus(str, Enum):
    NO_GROUNDS = "no_grounds"   # nothing collected, nobody can be accused
    NO_SUSPECT = "no_suspect"   # the player gave no name
    DECIDED    = "decided"


class JudgmentResult(BaseModel):
    """
    Validated outcome of the judgment phase.

    Fields:
        status:  Whether a verdict was reached, and if not, why.
        accused: The name the player typed, minus surrounding whitespace
                 (DECIDED only). Case is preserved.
        clues:   Collected clues in ascending order (empty for NO_GROUNDS).
        count:   How many of ``clues`` resolve to ``accused``.
        verdict: VALID / WEAK when status is DECIDED, otherwise None.
    """

    status:  JudgmentStatus
    accused: Optional[str] = None
    clues:   List[str] = Field(default_factory=list)
    count:   int = 0
    verdict: Optional[Verdict] = None

    @property
    def is_valid(self) -> bool:
        return self.verdict is Verdict.VALID


# ---------------------------------------------------------------------------
# Scenario schema
# ---------------------------------------------------------------------------

class CaseScenario(BaseModel):
    """
    Static case data: the mansion layout plus the two lookup tables.

    Fields:
        title:         Display name of the case.
        root_room:     Where exploration starts.
        layout:        room -> (left child, right child); leaves may be omitted.
        room_clues:    room -> clue found there. Rooms without a clue are absent.
        clue_suspects: clue -> suspect the clue implicates.

    The validator guarantees that ``layout`` describes a strict binary tree
    rooted at ``root_room``: no shared children, no self-links, nothing
    unreachable (which also excludes cycles).
    """

    model_config = ConfigDict(frozen=True)

    title:         str
    root_room:     str = Field(min_length=1)
    layout:        Dict[str, Tuple[Optional[str], Optional[str]]]
    room_clues:    Dict[str, str] = Field(default_factory=dict)
    clue_suspects: Dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def check_tree(self) -> CaseScenario:
        parents: Dict[str, str] = {}
        for parent, children in self.layout.items():
            if not parent:
                raise ValueError("room names must not be empty")
            for child in children:
                if child is None:
                    continue
                if not child:
                    raise ValueError(f"room {parent!r} has an empty child name")
                if child == parent:
                    raise ValueError(f"room {parent!r} lists itself as a child")
                if child in parents:
                    raise ValueError(
                        f"room {child!r} has two parents: "
                        f"{parents[child]!r} and {parent!r}"
                    )
                parents[child] = parent

        if self.root_room in parents:
            raise ValueError(
                f"root room {self.root_room!r} is a child of {parents[self.root_room]!r}"
            )

        reachable = set(self.room_names())
        unreachable = sorted(set(self.layout) - reachable)
        if unreachable:
            raise ValueError(f"rooms not reachable from the root: {unreachable}")

        unknown = sorted(set(self.room_clues) - reachable)
        if unknown:
            raise ValueError(f"clues assigned to unknown rooms: {unknown}")

        for room, clue in self.room_clues.items():
            if not clue:
                raise ValueError(f"room {room!r} has an empty clue")
        for clue, suspect in self.clue_suspects.items():
            if not clue or not suspect:
                raise ValueError(f"empty clue or suspect in pair ({clue!r}, {suspect!r})")
        return self

    def room_names(self) -> List[str]:
        """Every room reachable from the root, in breadth-first order."""
        order: List[str] = []
        seen: Set[str] = set()
        queue = [self.root_room]
        while queue:
            name = queue.pop(0)
            if name in seen:
                continue
            seen.add(name)
            order.append(name)
            queue.extend(c for c in self.layout.get(name, (None, None)) if c)
        return order

    def suspects(self) -> List[str]:
        """Distinct suspect names in first-seen order."""
        return list(dict.fromkeys(self.clue_suspects.values()))


# ---------------------------------------------------------------------------
# Game state
# ---------------------------------------------------------------------------

@dataclass
class GameState:
    """
    Mutable snapshot of the player's progress.

    Owned by DetectiveQuestGame and mutated in place; the UIs read it for
    status displays.

    Attributes:
        steps:                Commands processed during exploration.
        rooms_visited:        Room names in the order they were entered.
        exploration_finished: True once the player issued ``stop``.
        accusation_made:      True once a judgment produced a verdict.
        last_result:          The most recent JudgmentResult, if any.
    """

    steps:                int = 0
    rooms_visited:        List[str] = field(default_factory=list)
    exploration_finished: bool = False
    accusation_made:      bool = False
    last_result:          Optional[JudgmentResult] = None

    def add_visit(self, room_name: str) -> None:
        self.rooms_visited.append(room_name)

    def reset(self) -> None:
        """Reset all mutable fields to their initial values for a new game."""
        self.steps                = 0
        self.rooms_visited        = []
        self.exploration_finished = False
        self.accusation_made      = False
        self.last_result          = None
