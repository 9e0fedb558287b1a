"""
ui_helpers.py
=============
Stateless presentation helpers shared by the CLI and the Streamlit UI.

These functions turn engine results into player-facing text but carry no
game state of their own. Keeping them separate from cli.py and app.py means
they can be tested without a terminal or a live Streamlit session.

Contains:
  - narrate()            : ExplorationEvent → narration line
  - format_clue_list()   : ordered clues → bullet list
  - describe_judgment()  : JudgmentResult → narration lines
  - build_css()          : returns the dark-noir CSS string
"""

from __future__ import annotations

from typing import Dict, List

from config import JUDGMENT_CONFIG
from models import ExplorationEvent, JudgmentResult, JudgmentStatus, Signal, Verdict


COMMAND_HELP = "Escolha: (e) esquerdo, (d) direito, (s) sair da exploração"

_NARRATION: Dict[Signal, str] = {
    Signal.ENTERED_ROOM:    "Você está na sala: {room}",
    Signal.CLUE_FOUND:      '> Pista encontrada: "{clue}"\nPista adicionada ao caderno do jogador.',
    Signal.NO_CLUE:         "Não há pistas aparentes nesta sala.",
    Signal.NO_ROOM_LEFT:    "Não há sala à esquerda.",
    Signal.NO_ROOM_RIGHT:   "Não há sala à direita.",
    Signal.INVALID_COMMAND: "Opção inválida. Use e, d ou s.",
    Signal.FINISHED:        "Saindo da exploração...",
}


def narrate(event: ExplorationEvent) -> str:
    """
    Player-facing line for a single exploration event.

    Example:
        >>> narrate(ExplorationEvent(Signal.ENTERED_ROOM, "Cozinha"))
        'Você está na sala: Cozinha'
    """
    return _NARRATION[event.signal].format(room=event.room, clue=event.clue or "")


def format_clue_list(clues: List[str]) -> str:
    """Bulleted clue list, one per line, in the order given."""
    return "\n".join(f" - {clue}" for clue in clues)


def describe_judgment(result: JudgmentResult) -> List[str]:
    """
    Narration lines for the end of the game.

    The clue list itself is not included; the caller shows it before asking
    for the accused.
    """
    if result.status is JudgmentStatus.NO_GROUNDS:
        return ["Nenhuma pista foi coletada. Não é possível acusar com fundamento."]
    if result.status is JudgmentStatus.NO_SUSPECT:
        return ["Nenhum suspeito informado. Encerrando julgamento."]

    lines = [
        f"Você acusou: {result.accused}",
        f"Pistas que apontam para {result.accused}: {result.count}",
    ]
    if result.verdict is Verdict.VALID:
        lines.append(
            "DESFECHO: Acusação válida! Há provas suficientes para sustentar o caso."
        )
    else:
        lines.append(
            "DESFECHO: Acusação fraca. Pelo menos "
            f"{JUDGMENT_CONFIG.valid_threshold} pistas são necessárias para condenar."
        )
    return lines


# ---------------------------------------------------------------------------
# Dark-noir CSS
# ---------------------------------------------------------------------------

def build_css() -> str:
    """
    Return the CSS string injected into the Streamlit app.

    Returns:
        A raw CSS string (without <style> tags — the caller wraps it).
    """
    return """
    @import url('https://fonts.googleapis.com/css2?family=Special+Elite&family=Courier+Prime:wght@400;700&display=swap');

    html, body, .stApp, .main, .block-container {
        background: linear-gradient(180deg, #0a0a0a 0%, #141414 60%, #0d0d0d 100%) !important;
        color: #c0c0c0 !important;
    }
    [data-testid="stSidebar"], section[data-testid="stSidebar"] > div {
        background: #0d0d0d !important;
        border-right: 1px solid #222 !important;
    }

    .main-header {
        text-align: center; color: #8B0000;
        font-family: 'Special Elite', cursive;
        text-shadow: 2px 2px 4px #000; letter-spacing: 3px;
    }
    .sub-header {
        text-align: center; color: #666;
        font-family: 'Courier Prime', monospace; font-style: italic;
    }
    .room-card {
        background: linear-gradient(145deg, #1a1a1a, #2d2d2d);
        padding: 25px; border-radius: 5px; text-align: center;
        border-left: 4px solid #8B0000; border-top: 1px solid #333;
        box-shadow: 0 4px 15px rgba(0,0,0,0.5);
        font-family: 'Special Elite', cursive; font-size: 28px; color: #c0c0c0;
    }
    .narration {
        font-family: 'Courier Prime', monospace; color: #888; line-height: 1.8;
    }
    .sidebar-header {
        color: #8B0000; font-family: 'Special Elite', cursive;
        letter-spacing: 2px; text-align: center; padding: 10px;
        border-bottom: 1px solid #333;
    }
    .verdict {
        font-family: 'Special Elite', cursive; font-size: 40px; text-align: center;
        text-shadow: 2px 2px 4px #000;
    }

    .stButton > button {
        background: linear-gradient(145deg, #2d2d2d, #1a1a1a);
        color: #c0c0c0; border: 1px solid #444;
        font-family: 'Courier Prime', monospace; min-height: 50px;
    }
    .stButton > button:hover { border-color: #8B0000; color: #8B0000; }
    .stButton > button[kind="primary"] {
        background: linear-gradient(145deg, #8B0000, #5a0000); color: #fff; border: none;
    }
    .stTextInput input {
        background-color: #141414 !important; color: #c0c0c0 !important;
        border: 1px solid #333 !important; font-family: 'Courier Prime', monospace;
    }
"""
