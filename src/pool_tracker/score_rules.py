"""Round-score and player input validation."""

from typing import Dict, Optional, Tuple

from src.pool_tracker.game_state import GameState


class ValidationError(Exception):
    """Raised when user input or a requested action is not allowed."""

    pass


class ScoreRules:
    """Checks raw input before it reaches the engine."""

    def __init__(self, game_state: GameState):
        self.game_state = game_state

    def parse_round_scores(self, raw_scores: Dict[str, object]) -> Dict[str, int]:
        """
        Convert typed-in scores to integers.

        Returns:
            Mapping of active player id to non-negative score.

        Raises:
            ValidationError: If the game is finished, the ids do not match the
                active players exactly, or a score is not a non-negative integer.
        """
        if self.game_state.is_finished:
            raise ValidationError("Game is already finished")

        is_valid, error_msg = self._validate_player_ids(raw_scores)
        if not is_valid:
            raise ValidationError(error_msg)

        scores = {}
        for player_id, raw in raw_scores.items():
            try:
                score = int(str(raw).strip())
            except ValueError:
                raise ValidationError(
                    f"Invalid score {raw!r} for {self._name(player_id)}"
                )
            if score < 0:
                raise ValidationError(
                    f"Invalid score {score} for {self._name(player_id)}: "
                    "scores cannot be negative"
                )
            scores[player_id] = score

        return scores

    def _validate_player_ids(
        self, raw_scores: Dict[str, object]
    ) -> Tuple[bool, Optional[str]]:
        active_ids = {p.id for p in self.game_state.active_players()}
        submitted = set(raw_scores)

        missing = active_ids - submitted
        if missing:
            names = ", ".join(sorted(self._name(pid) for pid in missing))
            return False, f"Missing scores for: {names}"

        extra = submitted - active_ids
        if extra:
            return False, f"Scores given for players not in play: {sorted(extra)}"

        return True, None

    def _name(self, player_id: str) -> str:
        player = self.game_state.get_player(player_id)
        return player.name if player else player_id

    @staticmethod
    def validate_player_name(name: str) -> str:
        """Return the trimmed name, raising ValidationError if blank."""
        trimmed = (name or "").strip()
        if not trimmed:
            raise ValidationError("Please enter a player name")
        return trimmed
