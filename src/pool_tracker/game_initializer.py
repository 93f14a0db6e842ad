"""Game initialization - creates new games from setup input."""

import logging
import random
import uuid
from datetime import datetime
from typing import List

from src.pool_tracker.config import (
    DEFAULT_AMOUNT_PER_PLAYER,
    DEFAULT_TARGET_POINTS,
    GAME_ID_MAX,
    GAME_ID_MIN,
    MIN_PLAYERS,
)
from src.pool_tracker.game_state import GameState, Player, PlayerStatus
from src.pool_tracker.share_engine import compute_shares

logger = logging.getLogger(__name__)


def generate_game_id() -> str:
    """Random 4-digit join code. Collisions with saved games are not checked."""
    return str(random.randint(GAME_ID_MIN, GAME_ID_MAX))


class GameInitializer:
    """Handles creation of new games."""

    def create_game(
        self,
        target_points: int,
        amount_per_player: float,
        player_names: List[str],
    ) -> GameState:
        """
        Create a new game.

        Args:
            target_points: Elimination threshold (> 0)
            amount_per_player: Entry fee charged per player (> 0)
            player_names: Unique, non-blank names in seating order

        Returns:
            GameState with every player active, zero scores and equal shares
        """
        names = [name.strip() for name in player_names]
        self._validate_inputs(target_points, amount_per_player, names)

        players = [
            Player(id=uuid.uuid4().hex, name=name, status=PlayerStatus.ACTIVE)
            for name in names
        ]

        game_state = GameState(
            game_id=generate_game_id(),
            target_points=target_points,
            amount_per_player=float(amount_per_player),
            players=tuple(compute_shares(players)),
            rounds=(),
            total_pool=len(players) * float(amount_per_player),
            created_at=datetime.now().isoformat(),
            is_finished=False,
        )

        logger.info(
            "Created game %s: %d players, target %d, %.2f per player",
            game_state.game_id,
            len(players),
            target_points,
            amount_per_player,
        )

        return game_state

    def _validate_inputs(
        self,
        target_points: int,
        amount_per_player: float,
        player_names: List[str],
    ):
        """Validate game setup inputs."""
        if target_points <= 0:
            raise ValueError("Target points must be a positive number")

        if amount_per_player <= 0:
            raise ValueError("Amount per player must be a positive number")

        if len(player_names) < MIN_PLAYERS:
            raise ValueError(f"At least {MIN_PLAYERS} players are required")

        if any(not name for name in player_names):
            raise ValueError("All player names must be filled in")

        if len(set(player_names)) != len(player_names):
            raise ValueError("All player names must be unique")

    @staticmethod
    def get_default_target_points() -> int:
        return DEFAULT_TARGET_POINTS

    @staticmethod
    def get_default_amount_per_player() -> float:
        return DEFAULT_AMOUNT_PER_PLAYER
