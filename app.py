"""
app.py
======
Streamlit web UI for Detective Quest.

Responsibilities:
  - Configure and render the Streamlit page (layout, dark-noir theme).
  - Manage session state initialisation and reset.
  - Render sidebar components (detective's notebook, exploration status).
  - Render main-panel components (current room, navigation, accusation form,
    verdict).

This file contains only UI logic. All game logic lives in game_engine.py
and the engines it wires together, all narrative data in case_data.py, and
all shared presentation helpers in ui_helpers.py.

Run with:
    streamlit run app.py
"""

from __future__ import annotations

import logging
import os

import streamlit as st
from dotenv import load_dotenv

# Load .env before anything reads the environment.
load_dotenv()

from config import GAME_CONFIG, LOG_DATEFMT, LOG_FORMAT

# ---------------------------------------------------------------------------
# Logging configuration
#
# basicConfig is called here — the Streamlit entry point — so it runs exactly
# once per process regardless of how many times Streamlit reruns the script.
# All modules under "detective_quest.*" emit to this handler automatically.
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=os.environ.get(GAME_CONFIG.log_level_env, "INFO").upper(),
    format=LOG_FORMAT,
    datefmt=LOG_DATEFMT,
)
logger = logging.getLogger("detective_quest.app")

from game_engine import DetectiveQuestGame
from models import JudgmentStatus, Verdict
from ui_helpers import build_css, describe_judgment, narrate

_LOG_LINES_SHOWN = 12


# ============================================================
# PAGE CONFIGURATION
# ============================================================

st.set_page_config(
    page_title="Detective Quest",
    page_icon="🔍",
    layout="wide",
    initial_sidebar_state="expanded",
)

st.markdown(f"<style>{build_css()}</style>", unsafe_allow_html=True)


# ============================================================
# SESSION STATE
# ============================================================

def _fresh_game() -> DetectiveQuestGame:
    game = DetectiveQuestGame()
    st.session_state.narration = [narrate(e) for e in game.start()]
    return game


def init_session_state() -> None:
    """
    Initialise all Streamlit session state variables on first run.

    Uses a defaults dict so new keys can be added in one place.
    """
    if "game" not in st.session_state:
        st.session_state.game = _fresh_game()
    defaults: dict = {
        "narration":         [],
        "judgment_result":   None,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value


def reset_game() -> None:
    """Start a brand-new investigation."""
    logger.info("New case requested from the UI")
    st.session_state.game            = _fresh_game()
    st.session_state.judgment_result = None


def _send_command(command: str) -> None:
    events = st.session_state.game.move(command)
    st.session_state.narration.extend(narrate(e) for e in events)


# ============================================================
# SIDEBAR COMPONENTS
# ============================================================

def render_notebook() -> None:
    """Render the ordered clue ledger in the sidebar."""
    game = st.session_state.game
    st.sidebar.markdown(
        '<div class="sidebar-header">📓 CADERNO DE PISTAS</div>',
        unsafe_allow_html=True,
    )
    clues = game.collected_clues()
    if not clues:
        st.sidebar.markdown("*Nenhuma pista ainda.*")
    for clue in clues:
        st.sidebar.markdown(f"🔎 {clue}")


def render_status() -> None:
    """Render exploration progress in the sidebar."""
    state = st.session_state.game.state
    st.sidebar.markdown("---")
    st.sidebar.markdown(
        '<div class="sidebar-header">📊 INVESTIGAÇÃO</div>',
        unsafe_allow_html=True,
    )
    st.sidebar.markdown(f"**Comandos usados:** {state.steps}")
    st.sidebar.markdown(f"**Salas visitadas:** {len(set(state.rooms_visited))}")
    if state.rooms_visited:
        st.sidebar.caption(" → ".join(state.rooms_visited))
    st.sidebar.markdown("---")
    st.sidebar.markdown("**Suspeitos:**")
    for name in st.session_state.game.suspects():
        st.sidebar.markdown(f"🎭 {name}")


# ============================================================
# MAIN-PANEL COMPONENTS
# ============================================================

def render_room() -> None:
    """Current room card, recent narration and the navigation buttons."""
    game = st.session_state.game
    room = game.current_room

    st.markdown(f"<div class='room-card'>🚪 {room.name}</div>", unsafe_allow_html=True)
    st.markdown("")

    lines = st.session_state.narration[-_LOG_LINES_SHOWN:]
    st.markdown(
        "<div class='narration'>" + "<br>".join(lines).replace("\n", "<br>") + "</div>",
        unsafe_allow_html=True,
    )
    st.markdown("")

    col1, col2, col3 = st.columns(3)
    with col1:
        if st.button("⬅️ Esquerda (e)", use_container_width=True, disabled=not game.exploring):
            _send_command("e")
            st.rerun()
    with col2:
        if st.button("➡️ Direita (d)", use_container_width=True, disabled=not game.exploring):
            _send_command("d")
            st.rerun()
    with col3:
        if st.button(
            "⏹️ Sair (s)", type="primary", use_container_width=True,
            disabled=not game.exploring,
        ):
            _send_command("s")
            st.rerun()


def render_accusation_form() -> None:
    """
    Render the accusation form once exploration is over.

    With an empty notebook the judgment short-circuits straight away and no
    name is asked for.
    """
    game = st.session_state.game
    st.markdown("---")
    st.markdown("### ⚖️ JULGAMENTO")

    if game.exploring:
        st.info("Explore a mansão e clique em 'Sair' para fazer sua acusação.")
        return

    if not game.can_accuse():
        st.session_state.judgment_result = game.run_judgment(lambda _clues: None)
        st.rerun()

    accused = st.text_input(
        "Digite o nome do suspeito que você deseja acusar:",
        placeholder="ex.: Sra. Rosa",
    )
    st.caption("O nome deve ser digitado exatamente como aparece na lista de suspeitos.")
    if st.button("🔨 ACUSAR", type="primary", use_container_width=True):
        st.session_state.judgment_result = game.make_accusation(accused)
        st.rerun()


def render_result() -> None:
    """Verdict banner plus the narration lines for the judgment."""
    result = st.session_state.judgment_result
    st.markdown("---")

    if result.status is JudgmentStatus.DECIDED:
        colour = "#228B22" if result.verdict is Verdict.VALID else "#8B0000"
        label  = "ACUSAÇÃO VÁLIDA" if result.verdict is Verdict.VALID else "ACUSAÇÃO FRACA"
        st.markdown(
            f"<div class='verdict' style='color:{colour};'>{label}</div>",
            unsafe_allow_html=True,
        )
        if result.is_valid:
            st.balloons()

    for line in describe_judgment(result):
        st.markdown(line)

    if result.clues:
        with st.expander("📓 Pistas coletadas", expanded=False):
            for clue in result.clues:
                st.markdown(f"- {clue}")

    if st.button("🔄 NOVO CASO", type="primary", use_container_width=True):
        reset_game()
        st.rerun()


# ============================================================
# MAIN
# ============================================================

def main() -> None:
    """
    Entry point — called by Streamlit on every render pass.

    Flow:
      1. Initialise session state on first run.
      2. Render the page header.
      3. Render sidebar (notebook, progress, new-case button).
      4. Render main panel: the verdict if judgment is done, otherwise the
         current room and the accusation form.
    """
    init_session_state()
    game = st.session_state.game

    st.markdown(f"""
    <h1 class='main-header'>🔍 DETECTIVE QUEST</h1>
    <h3 class='sub-header'>{game.scenario.title}</h3>
    """, unsafe_allow_html=True)

    render_notebook()
    render_status()
    if st.sidebar.button("🔄 NOVO CASO", use_container_width=True, key="sidebar_reset"):
        reset_game()
        st.rerun()

    if st.session_state.judgment_result is not None:
        render_result()
    else:
        render_room()
        render_accusation_form()


if __name__ == "__main__":
    main()
