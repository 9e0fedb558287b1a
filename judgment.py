"""
judgment.py
===========
Deterministic, side-effect-free judgment logic.

Counts how many collected clues point at the accused and turns that count
into a verdict. Kept apart from the game engine so it can be unit-tested
on hand-built ledgers and indexes.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from clue_ledger import in_order_list, iter_in_order
from config import JUDGMENT_CONFIG
from evidence_index import EvidenceIndex
from models import ClueEntry, JudgmentResult, JudgmentStatus, Verdict

logger = logging.getLogger("detective_quest.judgment")

ReadAccused = Callable[[List[str]], Optional[str]]


def tally(root: Optional[ClueEntry], index: EvidenceIndex, accused: str) -> int:
    """
    Number of ledger clues whose suspect is exactly ``accused``.

    Comparison is case-sensitive: "sra. rosa" does not match "Sra. Rosa".
    Clues missing from the index implicate nobody and are skipped.

    Example:
        ledger = {"Marcas de arraste", "Pegadas lamacentas", "Vidro quebrado"}
        index  = {... -> "Sr. Verde", ... -> "Sr. Verde", ... -> "Sra. Rosa"}
        tally(ledger, index, "Sr. Verde") == 2
    """
    return sum(1 for clue in iter_in_order(root) if index.get(clue) == accused)


def verdict(count: int, threshold: int = JUDGMENT_CONFIG.valid_threshold) -> Verdict:
    """VALID when at least ``threshold`` clues support the accusation."""
    return Verdict.VALID if count >= threshold else Verdict.WEAK


def judge(
    root: Optional[ClueEntry],
    index: EvidenceIndex,
    read_accused: ReadAccused,
) -> JudgmentResult:
    """
    Run the whole judgment phase.

    Steps:
      1. An empty ledger ends here with NO_GROUNDS; ``read_accused`` is
         never called.
      2. ``read_accused`` receives the ordered clue list and returns the
         name the player typed (surrounding whitespace is dropped).
      3. No name ends with NO_SUSPECT and nothing is tallied.
      4. Otherwise the clues are tallied and a verdict is attached.

    Args:
        root:         Root of the clue ledger.
        index:        Clue -> suspect table.
        read_accused: Asks the player for a name. This is the only point
                      where judgment waits on input.

    Returns:
        JudgmentResult describing the outcome.
    """
    if root is None:
        logger.info("Judgment skipped: no clues collected")
        return JudgmentResult(status=JudgmentStatus.NO_GROUNDS)

    clues = in_order_list(root)
    accused = (read_accused(clues) or "").strip()
    if not accused:
        logger.info("Judgment aborted: no suspect named")
        return JudgmentResult(status=JudgmentStatus.NO_SUSPECT, clues=clues)

    count = tally(root, index, accused)
    outcome = verdict(count)
    logger.info(
        "Accusation against %r: %d of %d clues match -> %s",
        accused, count, len(clues), outcome.value,
    )
    return JudgmentResult(
        status=JudgmentStatus.DECIDED,
        accused=accused,
        clues=clues,
        count=count,
        verdict=outcome,
    )
