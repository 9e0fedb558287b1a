"""
case_data.py
============
All narrative content for the Detective Quest mansion case.

Centralising story data here means you can swap out the entire mystery
(layout, clues, suspects) without touching any engine or UI logic.

To create a new case:
    1. Replace the constants below with your new story.
    2. Keep the dict shapes identical so nothing else breaks.
    3. load_scenario() validates the result; a broken layout fails at startup.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple

from models import CaseScenario


CASE_TITLE = "Detective Quest: O Mistério da Mansão"

ROOT_ROOM = "Entrada"


# ---------------------------------------------------------------------------
# Mansion layout: room -> (left, right). Leaf rooms are not listed.
# ---------------------------------------------------------------------------

MANSION_LAYOUT: Dict[str, Tuple[Optional[str], Optional[str]]] = {
    "Entrada":    ("Salão",      "Cozinha"),
    "Salão":      ("Biblioteca", "Escritório"),
    "Cozinha":    ("Quarto",     "Varanda"),
    "Biblioteca": ("Sótão",      None),
    "Escritório": (None,         "Porão"),
}


# ---------------------------------------------------------------------------
# Clue found in each room
# ---------------------------------------------------------------------------

ROOM_CLUES: Dict[str, str] = {
    "Entrada":    "Pegadas lamacentas",
    "Salão":      "Vidro quebrado",
    "Cozinha":    "Faca com impressões",
    "Biblioteca": "Livro deslocado",
    "Escritório": "Carta rasgada",
    "Quarto":     "Frascos vazios",
    "Varanda":    "Fibra vermelha",
    "Sótão":      "Marcas de arraste",
    "Porão":      "Pegada pequena",
}


# ---------------------------------------------------------------------------
# Who each clue points to
# ---------------------------------------------------------------------------

CLUE_SUSPECTS: Dict[str, str] = {
    "Pegadas lamacentas":  "Sr. Verde",
    "Vidro quebrado":      "Sra. Rosa",
    "Faca com impressões": "Sr. Preto",
    "Livro deslocado":     "Sra. Rosa",
    "Carta rasgada":       "Sr. Preto",
    "Frascos vazios":      "Dr. Azul",
    "Fibra vermelha":      "Sra. Rosa",
    "Marcas de arraste":   "Sr. Verde",
    "Pegada pequena":      "Sra. Rosa",
}
"""
Loaded into the evidence index in this order before exploration starts.
Suspect names are matched case-sensitively at judgment time.
"""


def load_scenario() -> CaseScenario:
    """Validate the constants above into a CaseScenario."""
    return CaseScenario(
        title=CASE_TITLE,
        root_room=ROOT_ROOM,
        layout=MANSION_LAYOUT,
        room_clues=ROOM_CLUES,
        clue_suspects=CLUE_SUSPECTS,
    )
