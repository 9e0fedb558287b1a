"""
cli.py
======
Command-line interface for Detective Quest.

Provides the text-based game loop: explore the mansion one command at a
time, then name a suspect. All game logic is delegated to
DetectiveQuestGame; this module only handles I/O.

Usage:
    python cli.py

Commands during exploration (only the first letter counts):
    e  — go to the room on the left
    d  — go to the room on the right
    s  — stop exploring and move on to the accusation
"""

from __future__ import annotations

import logging
import os
from typing import Iterable, List, Optional

from dotenv import load_dotenv

from config import GAME_CONFIG, LOG_DATEFMT, LOG_FORMAT
from game_engine import DetectiveQuestGame
from models import ExplorationEvent
from ui_helpers import COMMAND_HELP, describe_judgment, format_clue_list, narrate


def _print_events(events: Iterable[ExplorationEvent]) -> None:
    for event in events:
        print(narrate(event))


def _ask_accused(clues: List[str]) -> Optional[str]:
    """Show the notebook and read the accused's name (None on end of input)."""
    print("Pistas coletadas:")
    print(format_clue_list(clues))
    try:
        return input("\nDigite o nome do suspeito que você deseja acusar: ")
    except EOFError:
        return None


def run_cli(game: Optional[DetectiveQuestGame] = None) -> None:
    """
    Main CLI game loop.

    Prints the case banner, runs exploration until the player stops (or
    input ends), then runs the judgment phase and prints the verdict.
    """
    game = game or DetectiveQuestGame()

    # --- Case banner ---
    print("\n" + "=" * 60)
    print(f"   {game.scenario.title.upper()}")
    print("=" * 60)
    print(f"Suspeitos: {', '.join(game.suspects())}")

    print("\n--- Início da exploração da mansão ---")
    _print_events(game.start())

    while game.exploring:
        print(COMMAND_HELP)
        try:
            command = input("> ")
        except EOFError:
            command = "s"
        _print_events(game.move(command))

    print("--- Fim da exploração ---\n")

    result = game.run_judgment(_ask_accused)
    print()
    for line in describe_judgment(result):
        print(line)

    print("\nObrigado por jogar Detective Quest!")


def main() -> None:
    # Configure logging at the entry point so all detective_quest.* loggers
    # share one handler. Defaults to WARNING so log lines do not interleave
    # with the narration.
    load_dotenv()
    logging.basicConfig(
        level=os.environ.get(GAME_CONFIG.log_level_env, "WARNING").upper(),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
    run_cli()


if __name__ == "__main__":
    main()
