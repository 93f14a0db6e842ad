"""Game controller - orchestrates round flow, roster changes and saving."""

import logging
from typing import Dict, List, Optional

from src.pool_tracker import transitions
from src.pool_tracker.game_state import GameState, Player, PlayerStatus
from src.pool_tracker.score_rules import ScoreRules, ValidationError
from src.pool_tracker.share_engine import (
    next_shuffler,
    round_winners,
    withdrawal_payout,
)
from src.pool_tracker.state_persistence import StatePersistence

logger = logging.getLogger(__name__)


class GameController:
    """Holds the current game snapshot and replaces it after every action.

    Coordinates between ScoreRules (input validation), the transition
    functions (state changes) and StatePersistence (saving). Also tracks
    who shuffles next, which is derived from join order and the last
    round's shuffler rather than stored in the state.
    """

    def __init__(
        self,
        game_state: GameState,
        persistence: Optional[StatePersistence] = None,
        first_shuffler_id: Optional[str] = None,
    ):
        self.game_state = game_state
        self.persistence = persistence

        last_round = game_state.last_round
        if last_round is not None:
            self.current_shuffler_id = next_shuffler(
                game_state.players, last_round.shuffler_id
            )
        elif first_shuffler_id is not None:
            self.current_shuffler_id = first_shuffler_id
        else:
            active = game_state.active_players()
            self.current_shuffler_id = active[0].id if active else None

    @classmethod
    def load(
        cls, persistence: StatePersistence, game_id: str
    ) -> Optional["GameController"]:
        """Resume a saved game, None if it does not exist."""
        game_state = persistence.load_game(game_id)
        if game_state is None:
            return None
        return cls(game_state, persistence=persistence)

    @property
    def is_finished(self) -> bool:
        return self.game_state.is_finished

    def submit_round(self, raw_scores: Dict[str, object]) -> List[str]:
        """Validate and record a round.

        Args:
            raw_scores: Active player id -> score as entered.

        Returns:
            Ids of the round winners, or an empty list when this round
            finished the game.

        Raises:
            ValidationError: If the scores are invalid or the game is over.
        """
        try:
            scores = ScoreRules(self.game_state).parse_round_scores(raw_scores)
        except ValidationError as e:
            logger.warning("Invalid round attempted: %s", e)
            raise

        shuffler_id = self.current_shuffler_id
        self.game_state = transitions.apply_round(self.game_state, scores, shuffler_id)

        eliminated = [
            p.name
            for p in self.game_state.players
            if p.status == PlayerStatus.ELIMINATED and p.id in scores
        ]
        logger.info(
            "Game %s round %d recorded (shuffler %s), eliminated: %s",
            self.game_state.game_id,
            len(self.game_state.rounds),
            shuffler_id,
            ", ".join(eliminated) or "none",
        )

        # Game ends with one player left (or none, if all bust together)
        active = self.game_state.active_players()
        if len(active) <= 1:
            self.game_state = transitions.finish_game(self.game_state)
            logger.info(
                "Game %s finished: %s",
                self.game_state.game_id,
                f"{active[0].name} is the last player standing"
                if active
                else "no active players left",
            )
            self._save()
            return []

        self._save()
        self.current_shuffler_id = next_shuffler(self.game_state.players, shuffler_id)
        return round_winners(scores)

    def undo_last_round(self) -> bool:
        """Revert the last round. Returns False when there is nothing to undo."""
        self._ensure_not_finished()
        if not self.game_state.rounds:
            return False

        undone_round = self.game_state.last_round
        self.game_state = transitions.undo_last_round(self.game_state)

        last_round = self.game_state.last_round
        if last_round is not None:
            self.current_shuffler_id = next_shuffler(
                self.game_state.players, last_round.shuffler_id
            )
        else:
            self.current_shuffler_id = undone_round.shuffler_id

        logger.info(
            "Game %s: undid round %d",
            self.game_state.game_id,
            undone_round.round_number,
        )
        self._save()
        return True

    def add_player(self, name: str) -> Player:
        """Seat a new player; returns the created player."""
        self._ensure_not_finished()
        name = ScoreRules.validate_player_name(name)

        self.game_state = transitions.add_player(self.game_state, name)
        new_player = self.game_state.players[-1]

        logger.info(
            "Game %s: %s joined at %d points (pool %.2f)",
            self.game_state.game_id,
            name,
            new_player.total_score,
            self.game_state.total_pool,
        )
        self._save()
        return new_player

    def withdrawal_quote(self, player_id: str) -> float:
        """Payout the player would receive if they withdrew now."""
        player = self._require_player(player_id)
        return withdrawal_payout(player, self.game_state.total_pool)

    def withdraw(self, player_id: str) -> float:
        """Withdraw an active player; returns the payout."""
        self._ensure_not_finished()
        player = self._require_player(player_id)
        if not player.is_active:
            raise ValidationError(f"{player.name} is not in play ({player.status})")

        if self.current_shuffler_id == player_id:
            self.current_shuffler_id = next_shuffler(
                self.game_state.players, player_id
            )

        self.game_state, payout = transitions.withdraw(self.game_state, player_id)

        logger.info(
            "Game %s: %s withdrew with %.2f (pool now %.2f)",
            self.game_state.game_id,
            player.name,
            payout,
            self.game_state.total_pool,
        )
        self._save()
        return payout

    def rejoin(self, player_id: str) -> Player:
        """Bring a withdrawn player back for a fresh entry fee."""
        self._ensure_not_finished()
        player = self._require_player(player_id)
        if player.status != PlayerStatus.WITHDRAWN:
            raise ValidationError(f"Only withdrawn players can rejoin ({player.name})")

        self.game_state = transitions.rejoin(self.game_state, player_id)
        rejoined = self.game_state.get_player(player_id)

        logger.info(
            "Game %s: %s rejoined at %d points (pool %.2f)",
            self.game_state.game_id,
            rejoined.name,
            rejoined.total_score,
            self.game_state.total_pool,
        )
        self._save()
        return rejoined

    def finish(self) -> GameState:
        """End the game now."""
        self._ensure_not_finished()
        self.game_state = transitions.finish_game(self.game_state)
        logger.info("Game %s finished by request", self.game_state.game_id)
        self._save()
        return self.game_state

    def _require_player(self, player_id: str) -> Player:
        player = self.game_state.get_player(player_id)
        if player is None:
            raise ValidationError(f"Player {player_id} not found")
        return player

    def _ensure_not_finished(self):
        if self.game_state.is_finished:
            logger.warning(
                "Action refused, game %s is finished", self.game_state.game_id
            )
            raise ValidationError("Game is already finished")

    def _save(self):
        if self.persistence is not None:
            self.persistence.save_game(self.game_state)
