"""Factories shared across the test modules."""

from src.pool_tracker.game_state import GameState, Player, PlayerStatus
from src.pool_tracker.share_engine import compute_shares


def make_state(scores=(0, 0, 0, 0), statuses=None, **overrides):
    """Game with players p1..pN holding the given totals and statuses."""
    statuses = statuses or [PlayerStatus.ACTIVE] * len(scores)
    players = [
        Player(id=f"p{i + 1}", name=f"Player {i + 1}", total_score=score,
               status=status)
        for i, (score, status) in enumerate(zip(scores, statuses))
    ]
    defaults = {
        "game_id": "1234",
        "target_points": 101,
        "amount_per_player": 100.0,
        "players": tuple(compute_shares(players)),
        "rounds": (),
        "total_pool": 100.0 * len(players),
        "created_at": "2025-01-01T00:00:00",
        "is_finished": False,
    }
    defaults.update(overrides)
    return GameState(**defaults)
