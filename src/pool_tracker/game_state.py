"""Game state records - immutable snapshots passed through the engine."""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple


class PlayerStatus:
    """Allowed values for ``Player.status``."""

    ACTIVE = "active"
    ELIMINATED = "eliminated"
    WITHDRAWN = "withdrawn"

    ALL = (ACTIVE, ELIMINATED, WITHDRAWN)


@dataclass(frozen=True)
class Player:
    """A single seat at the table."""

    id: str
    name: str
    total_score: int = 0
    status: str = PlayerStatus.ACTIVE
    current_share: float = 0.0

    @property
    def is_active(self) -> bool:
        return self.status == PlayerStatus.ACTIVE

    def copy_with(self, **changes) -> "Player":
        return replace(self, **changes)


@dataclass(frozen=True)
class Round:
    """One completed round of play. ``scores`` is a read-only mapping."""

    round_number: int
    shuffler_id: str
    scores: Mapping[str, int] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "scores", MappingProxyType(dict(self.scores)))

    def score_for(self, player_id: str) -> int:
        return self.scores.get(player_id, 0)


@dataclass(frozen=True)
class GameState:
    """Complete game snapshot.

    Players keep join order for the lifetime of the game; nobody is ever
    removed, elimination and withdrawal are status changes only.
    """

    game_id: str
    target_points: int
    amount_per_player: float
    players: Tuple[Player, ...]
    rounds: Tuple[Round, ...] = ()
    total_pool: float = 0.0
    created_at: str = ""
    is_finished: bool = False

    def copy_with(self, **changes) -> "GameState":
        """Create a new state with the given fields replaced."""
        if "players" in changes:
            changes["players"] = tuple(changes["players"])
        if "rounds" in changes:
            changes["rounds"] = tuple(changes["rounds"])
        return replace(self, **changes)

    def active_players(self) -> List[Player]:
        return [p for p in self.players if p.is_active]

    def get_player(self, player_id: str) -> Optional[Player]:
        """Look up a player by id, None if unknown."""
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    @property
    def last_round(self) -> Optional[Round]:
        return self.rounds[-1] if self.rounds else None
