"""Tests for round-score and name validation."""

import pytest

from src.pool_tracker.game_state import PlayerStatus
from src.pool_tracker.score_rules import ScoreRules, ValidationError
from tests.helpers import make_state


class TestParseRoundScores:
    def test_parses_strings_and_numbers(self):
        rules = ScoreRules(make_state([0, 0, 0]))
        scores = rules.parse_round_scores({"p1": "12", "p2": " 0 ", "p3": 7})
        assert scores == {"p1": 12, "p2": 0, "p3": 7}

    @pytest.mark.parametrize("bad", ["", "abc", "1.5", None])
    def test_rejects_non_numeric(self, bad):
        rules = ScoreRules(make_state([0, 0]))
        with pytest.raises(ValidationError, match="Invalid score"):
            rules.parse_round_scores({"p1": "3", "p2": bad})

    def test_rejects_negative(self):
        rules = ScoreRules(make_state([0, 0]))
        with pytest.raises(ValidationError, match="negative"):
            rules.parse_round_scores({"p1": "3", "p2": "-1"})

    def test_error_names_the_player(self):
        rules = ScoreRules(make_state([0, 0]))
        with pytest.raises(ValidationError, match="Player 2"):
            rules.parse_round_scores({"p1": "3", "p2": "x"})

    def test_rejects_missing_active_player(self):
        rules = ScoreRules(make_state([0, 0, 0]))
        with pytest.raises(ValidationError, match="Missing scores for: Player 3"):
            rules.parse_round_scores({"p1": 1, "p2": 2})

    def test_rejects_inactive_player(self):
        state = make_state([0, 120], [PlayerStatus.ACTIVE, PlayerStatus.ELIMINATED])
        with pytest.raises(ValidationError, match="not in play"):
            ScoreRules(state).parse_round_scores({"p1": 1, "p2": 2})

    def test_rejects_finished_game(self):
        rules = ScoreRules(make_state([0, 0], is_finished=True))
        with pytest.raises(ValidationError, match="already finished"):
            rules.parse_round_scores({"p1": 1, "p2": 2})


class TestValidatePlayerName:
    def test_trims(self):
        assert ScoreRules.validate_player_name("  Ravi ") == "Ravi"

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_rejects_blank(self, name):
        with pytest.raises(ValidationError, match="player name"):
            ScoreRules.validate_player_name(name)
