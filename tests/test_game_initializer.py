"""Tests for game creation."""

import pytest

from src.pool_tracker.game_initializer import GameInitializer, generate_game_id
from src.pool_tracker.game_state import PlayerStatus


@pytest.fixture
def initializer():
    return GameInitializer()


class TestGenerateGameId:
    def test_four_digits(self):
        for _ in range(200):
            game_id = generate_game_id()
            assert len(game_id) == 4
            assert game_id.isdigit()
            assert 1000 <= int(game_id) <= 9999

    def test_uses_random_range(self, monkeypatch):
        calls = []

        def fake_randint(lo, hi):
            calls.append((lo, hi))
            return 1000

        monkeypatch.setattr(
            "src.pool_tracker.game_initializer.random.randint", fake_randint
        )
        assert generate_game_id() == "1000"
        assert calls == [(1000, 9999)]


class TestCreateGame:
    def test_basic_game(self, initializer):
        state = initializer.create_game(101, 100, ["A", "B", "C", "D"])
        assert len(state.game_id) == 4
        assert state.target_points == 101
        assert state.amount_per_player == 100.0
        assert state.total_pool == 400.0
        assert state.rounds == ()
        assert not state.is_finished
        assert state.created_at

    def test_players_start_even(self, initializer):
        state = initializer.create_game(101, 100, ["A", "B", "C", "D"])
        assert [p.name for p in state.players] == ["A", "B", "C", "D"]
        for p in state.players:
            assert p.status == PlayerStatus.ACTIVE
            assert p.total_score == 0
            assert p.current_share == 0.25

    def test_unique_player_ids(self, initializer):
        state = initializer.create_game(101, 100, ["A", "B", "C"])
        assert len({p.id for p in state.players}) == 3

    def test_names_trimmed(self, initializer):
        state = initializer.create_game(101, 100, ["  A ", "B"])
        assert state.players[0].name == "A"

    @pytest.mark.parametrize("target", [0, -5])
    def test_rejects_bad_target(self, initializer, target):
        with pytest.raises(ValueError, match="Target points"):
            initializer.create_game(target, 100, ["A", "B"])

    @pytest.mark.parametrize("amount", [0, -1.5])
    def test_rejects_bad_amount(self, initializer, amount):
        with pytest.raises(ValueError, match="Amount per player"):
            initializer.create_game(101, amount, ["A", "B"])

    def test_rejects_too_few_players(self, initializer):
        with pytest.raises(ValueError, match="At least 2"):
            initializer.create_game(101, 100, ["A"])

    def test_rejects_blank_name(self, initializer):
        with pytest.raises(ValueError, match="filled in"):
            initializer.create_game(101, 100, ["A", "   "])

    def test_rejects_duplicate_names(self, initializer):
        with pytest.raises(ValueError, match="unique"):
            initializer.create_game(101, 100, ["A", "B", "A "])

    def test_defaults(self):
        assert GameInitializer.get_default_target_points() == 101
        assert GameInitializer.get_default_amount_per_player() == 100.0
