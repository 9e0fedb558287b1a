"""
evidence_index.py
=================
Chained hash table mapping a clue to the suspect it implicates.

The table owns its buckets; callers only see put() / get() and a few
read-only size queries. Collisions are resolved by chaining, and putting an
existing key replaces its suspect instead of adding a second record.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple

from config import INDEX_CONFIG
from models import CaseScenario, EvidenceRecord

logger = logging.getLogger("detective_quest.evidence_index")

_DJB2_SEED = 5381
_MASK_64   = 0xFFFFFFFFFFFFFFFF


def djb2(key: str) -> int:
    """
    DJB2 string hash over the UTF-8 bytes of ``key``.

    ``h = h * 33 + byte`` starting from 5381, kept to 64 unsigned bits.

    Example:
        >>> djb2("a")
        177670
    """
    h = _DJB2_SEED
    for byte in key.encode("utf-8"):
        h = ((h << 5) + h + byte) & _MASK_64
    return h


class EvidenceIndex:
    """
    Clue -> suspect lookup table.

    Args:
        table_size: Number of buckets (defaults to IndexConfig.table_size).

    Raises:
        ValueError: if ``table_size`` is not positive.
    """

    def __init__(self, table_size: int = INDEX_CONFIG.table_size) -> None:
        if table_size <= 0:
            raise ValueError(f"table_size must be positive, got {table_size}")
        self._buckets: List[List[EvidenceRecord]] = [[] for _ in range(table_size)]
        self._size = 0

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[Tuple[str, str]],
        table_size: int = INDEX_CONFIG.table_size,
    ) -> EvidenceIndex:
        """Bulk-load ``(clue, suspect)`` pairs in order; later pairs win."""
        index = cls(table_size)
        for clue, suspect in pairs:
            index.put(clue, suspect)
        logger.debug(
            "Evidence index loaded: %d records in %d buckets",
            len(index), index.table_size,
        )
        return index

    # ------------------------------------------------------------------
    # Core operations
    # ------------------------------------------------------------------

    def hash(self, key: str) -> int:
        """Bucket number for ``key``."""
        return djb2(key) % len(self._buckets)

    def put(self, key: str, value: str) -> None:
        """
        Associate ``key`` with ``value``.

        An existing record for ``key`` has its value replaced in place; the
        chain does not grow. Empty keys or values are ignored.
        """
        if not key or not value:
            return
        chain = self._buckets[self.hash(key)]
        for record in chain:
            if record.clue == key:
                if record.suspect != value:
                    logger.debug(
                        "Replacing suspect for %r: %r -> %r", key, record.suspect, value
                    )
                record.suspect = value
                return
        chain.append(EvidenceRecord(clue=key, suspect=value))
        self._size += 1

    def get(self, key: str) -> Optional[str]:
        """Return the suspect for ``key``, or None when the clue is unknown."""
        if not key:
            return None
        for record in self._buckets[self.hash(key)]:
            if record.clue == key:
                return record.suspect
        return None

    # ------------------------------------------------------------------
    # Read-only queries
    # ------------------------------------------------------------------

    @property
    def table_size(self) -> int:
        return len(self._buckets)

    def chain_length(self, key: str) -> int:
        """Number of records sharing ``key``'s bucket."""
        return len(self._buckets[self.hash(key)])

    def items(self) -> List[Tuple[str, str]]:
        """All (clue, suspect) pairs, bucket by bucket."""
        return [(r.clue, r.suspect) for chain in self._buckets for r in chain]

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None


def build_index(scenario: CaseScenario) -> EvidenceIndex:
    """Populate an index from the scenario's clue -> suspect table."""
    return EvidenceIndex.from_pairs(scenario.clue_suspects.items())
