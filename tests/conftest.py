"""Shared fixtures for the pool tracker test suite."""

import pytest

from tests.helpers import make_state


@pytest.fixture
def four_player_game():
    """The standard 4-player game: target 101, 100 per player, pool 400."""
    return make_state()


@pytest.fixture
def tmp_storage(tmp_path):
    """Provide a temporary directory for game storage."""
    return tmp_path / "games"
