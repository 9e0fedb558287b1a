"""
End-to-end tests through DetectiveQuestGame.
"""

import logging

from game_engine import DetectiveQuestGame
from models import CaseScenario, JudgmentStatus, Signal, Verdict


def _play(game, *commands):
    game.start()
    for command in commands:
        game.move(command)


class TestScenarios:
    """Full playthroughs over the reference mansion."""

    def test_right_right_accuse_rosa_is_weak(self, game):
        _play(game, "d", "d", "s")
        assert game.collected_clues() == [
            "Faca com impressões", "Fibra vermelha", "Pegadas lamacentas",
        ]
        result = game.make_accusation("Sra. Rosa")
        assert result.count == 1
        assert result.verdict is Verdict.WEAK

    def test_left_to_attic_accuse_verde_is_valid(self, game):
        _play(game, "e", "e", "e", "s")
        result = game.make_accusation("Sr. Verde")
        assert result.count == 2
        assert result.verdict is Verdict.VALID

    def test_left_to_attic_accuse_rosa_is_valid(self, game):
        _play(game, "e", "e", "e", "s")
        result = game.make_accusation("Sra. Rosa")
        assert result.count == 2
        assert result.verdict is Verdict.VALID

    def test_study_to_cellar(self, game):
        _play(game, "e", "d", "d", "s")
        assert game.current_room.name == "Porão"
        assert game.make_accusation("Sra. Rosa").verdict is Verdict.VALID
        assert game.make_accusation("Sr. Preto").count == 1

    def test_lowercase_name_matches_nothing(self, game):
        _play(game, "e", "e", "e", "s")
        result = game.make_accusation("sr. verde")
        assert result.count == 0
        assert result.verdict is Verdict.WEAK

    def test_stop_at_entrance(self, game):
        _play(game, "s")
        result = game.make_accusation("Sr. Verde")
        assert result.count == 1
        assert result.verdict is Verdict.WEAK


class TestNoGrounds:
    """A case with no clues cannot be judged."""

    def test_empty_ledger_short_circuits(self, scenario):
        bare = CaseScenario(
            title="vazio",
            root_room=scenario.root_room,
            layout=scenario.layout,
            room_clues={},
            clue_suspects=scenario.clue_suspects,
        )
        game = DetectiveQuestGame(bare)
        _play(game, "d", "s")
        assert not game.can_accuse()

        calls = []
        result = game.run_judgment(lambda clues: calls.append(clues) or "Sr. Verde")
        assert result.status is JudgmentStatus.NO_GROUNDS
        assert calls == []
        assert not game.state.accusation_made


class TestState:
    """Progress tracking and reset."""

    def test_visits_and_steps(self, game):
        _play(game, "d", "x", "d")
        assert game.state.steps == 3
        assert game.state.rooms_visited == ["Entrada", "Cozinha", "Varanda"]
        assert not game.state.exploration_finished

    def test_stop_marks_finished(self, game):
        _play(game, "s")
        assert game.state.exploration_finished
        assert not game.exploring

    def test_move_after_stop_is_ignored(self, game, caplog):
        _play(game, "s")
        with caplog.at_level(logging.WARNING, logger="detective_quest"):
            assert game.move("d") == []
        assert game.current_room.name == "Entrada"
        assert "after exploration finished" in caplog.text

    def test_accusation_recorded(self, game):
        _play(game, "s")
        result = game.make_accusation("Sr. Verde")
        assert game.state.accusation_made
        assert game.state.last_result == result

    def test_empty_name_does_not_count_as_accusation(self, game):
        _play(game, "s")
        result = game.make_accusation("")
        assert result.status is JudgmentStatus.NO_SUSPECT
        assert not game.state.accusation_made

    def test_reset(self, game):
        _play(game, "d", "d", "s")
        game.make_accusation("Sra. Rosa")
        game.reset()

        assert game.state.steps == 0
        assert game.state.rooms_visited == []
        assert game.state.last_result is None
        assert game.collected_clues() == []
        assert game.exploring

        events = game.start()
        assert events[0].signal is Signal.ENTERED_ROOM
        assert game.collected_clues() == ["Pegadas lamacentas"]

    def test_index_is_loaded(self, game):
        assert len(game.index) == 9
        assert game.index.get("Pegada pequena") == "Sra. Rosa"

    def test_suspects(self, game):
        assert "Dr. Azul" in game.suspects()
