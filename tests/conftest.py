"""
Shared fixtures for the Detective Quest tests.
"""

import os
import sys

import pytest

# Make the flat modules importable without installing the project.
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from case_data import load_scenario
from clue_ledger import ClueLedger
from evidence_index import EvidenceIndex, build_index
from game_engine import DetectiveQuestGame
from mansion import build_mansion


@pytest.fixture
def scenario():
    return load_scenario()


@pytest.fixture
def mansion(scenario):
    return build_mansion(scenario)


@pytest.fixture
def index(scenario):
    return build_index(scenario)


@pytest.fixture
def ledger():
    return ClueLedger()


@pytest.fixture
def small_index():
    """The three-clue example: two clues for Sr. Verde, one for Sra. Rosa."""
    return EvidenceIndex.from_pairs([
        ("Pegadas lamacentas", "Sr. Verde"),
        ("Vidro quebrado", "Sra. Rosa"),
        ("Marcas de arraste", "Sr. Verde"),
    ])


@pytest.fixture
def game():
    return DetectiveQuestGame()
