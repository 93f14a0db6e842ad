from src.pool_tracker.game_controller import GameController
from src.pool_tracker.game_initializer import GameInitializer, generate_game_id
from src.pool_tracker.game_state import GameState, Player, PlayerStatus, Round
from src.pool_tracker.score_rules import ScoreRules, ValidationError
from src.pool_tracker.share_engine import (
    compute_shares,
    next_shuffler,
    round_winners,
)
from src.pool_tracker.state_persistence import StatePersistence
from src.pool_tracker.transitions import (
    add_player,
    apply_round,
    finish_game,
    rejoin,
    undo_last_round,
    withdraw,
)

__all__ = [
    "GameController",
    "GameInitializer",
    "GameState",
    "Player",
    "PlayerStatus",
    "Round",
    "ScoreRules",
    "StatePersistence",
    "ValidationError",
    "add_player",
    "apply_round",
    "compute_shares",
    "finish_game",
    "generate_game_id",
    "next_shuffler",
    "rejoin",
    "round_winners",
    "undo_last_round",
    "withdraw",
]
