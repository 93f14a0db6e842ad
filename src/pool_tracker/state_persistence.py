"""State persistence - save and load game state to/from JSON files."""

import json
import logging
import re
from pathlib import Path
from typing import Dict, List, Optional

from src.pool_tracker.config import GAME_KEY_PREFIX, GAMES_DIR
from src.pool_tracker.game_state import GameState, Player, PlayerStatus, Round

logger = logging.getLogger(__name__)

_GAME_ID_PATTERN = re.compile(r"[0-9]{4}")


def is_valid_game_id(text: str) -> bool:
    """True for exactly four ASCII digits."""
    return bool(_GAME_ID_PATTERN.fullmatch(text or ""))


class StatePersistence:
    """Keyed store of game snapshots, one JSON file per game."""

    def __init__(self, storage_dir: Optional[Path] = None):
        self.storage_dir = storage_dir or GAMES_DIR
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    def _game_path(self, game_id: str) -> Path:
        return self.storage_dir / f"{GAME_KEY_PREFIX}{game_id}.json"

    def save_game(self, game_state: GameState) -> Path:
        """Overwrite the saved blob for this game.

        Args:
            game_state: The complete game state to persist.

        Returns:
            Path to the saved file.
        """
        filepath = self._game_path(game_state.game_id)

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(self._game_state_to_dict(game_state), f, indent=2)

        logger.info(
            "Saved game %s (round %d, pool %.2f) to %s",
            game_state.game_id,
            len(game_state.rounds),
            game_state.total_pool,
            filepath,
        )

        return filepath

    def load_game(self, game_id: str) -> Optional[GameState]:
        """Load game state from its JSON file.

        Returns:
            GameState if found, None otherwise.
        """
        filepath = self._game_path(game_id)

        if not filepath.exists():
            logger.warning("Game file not found: %s", filepath)
            return None

        try:
            with open(filepath, "r", encoding="utf-8") as f:
                state_dict = json.load(f)
            game_state = self._dict_to_game_state(state_dict)
        except (
            json.JSONDecodeError,
            UnicodeDecodeError,
            KeyError,
            TypeError,
            AttributeError,
            ValueError,
        ) as e:
            logger.warning("Corrupt game file %s: %s", filepath, e)
            return None

        logger.info("Loaded game %s from %s", game_id, filepath)
        return game_state

    def game_exists(self, game_id: str) -> bool:
        return self._game_path(game_id).exists()

    def list_saved_games(self) -> List[Dict]:
        """List all saved games with metadata.

        Returns:
            List of dicts with game_id, created_at, is_finished, rounds_played,
            player_count, active_count, total_pool. Most recent first.
        """
        games = []

        for filepath in self.storage_dir.glob(f"{GAME_KEY_PREFIX}*.json"):
            try:
                with open(filepath, "r", encoding="utf-8") as f:
                    data = json.load(f)

                players = data.get("players", [])
                games.append(
                    {
                        "game_id": data["gameId"],
                        "created_at": data.get("createdAt", ""),
                        "is_finished": data.get("isFinished", False),
                        "rounds_played": len(data.get("rounds", [])),
                        "player_count": len(players),
                        "active_count": sum(
                            1 for p in players if p.get("status") == "active"
                        ),
                        "total_pool": data.get("totalPool", 0.0),
                    }
                )
            except (
                json.JSONDecodeError,
                UnicodeDecodeError,
                OSError,
                KeyError,
                TypeError,
                AttributeError,
            ) as e:
                logger.warning("Skipping corrupt game file %s: %s", filepath, e)
                continue

        return sorted(games, key=lambda x: x["created_at"], reverse=True)

    def delete_game(self, game_id: str) -> bool:
        """Delete a saved game.

        Returns:
            True if deleted, False if not found.
        """
        filepath = self._game_path(game_id)

        if not filepath.exists():
            return False

        filepath.unlink()
        logger.info("Deleted game %s", game_id)
        return True

    def _game_state_to_dict(self, state: GameState) -> Dict:
        """Convert GameState to JSON-serializable dict."""
        return {
            "gameId": state.game_id,
            "targetPoints": state.target_points,
            "amountPerPlayer": state.amount_per_player,
            "players": [
                {
                    "id": player.id,
                    "name": player.name,
                    "totalScore": player.total_score,
                    "status": player.status,
                    "currentShare": player.current_share,
                }
                for player in state.players
            ],
            "rounds": [
                {
                    "roundNumber": rnd.round_number,
                    "shufflerId": rnd.shuffler_id,
                    "scores": dict(rnd.scores),
                }
                for rnd in state.rounds
            ],
            "totalPool": state.total_pool,
            "createdAt": state.created_at,
            "isFinished": state.is_finished,
        }

    def _dict_to_game_state(self, data: Dict) -> GameState:
        """Reconstruct GameState from dict."""
        players = tuple(
            Player(
                id=pd["id"],
                name=pd["name"],
                total_score=pd["totalScore"],
                status=self._parse_status(pd["status"]),
                current_share=pd.get("currentShare", 0.0),
            )
            for pd in data["players"]
        )

        rounds = tuple(
            Round(
                round_number=rd["roundNumber"],
                shuffler_id=rd["shufflerId"],
                scores=rd["scores"],
            )
            for rd in data.get("rounds", [])
        )

        return GameState(
            game_id=data["gameId"],
            target_points=data["targetPoints"],
            amount_per_player=data["amountPerPlayer"],
            players=players,
            rounds=rounds,
            total_pool=data["totalPool"],
            created_at=data.get("createdAt", ""),
            is_finished=data.get("isFinished", False),
        )

    @staticmethod
    def _parse_status(status: str) -> str:
        if status not in PlayerStatus.ALL:
            raise ValueError(f"Unknown player status {status!r}")
        return status
