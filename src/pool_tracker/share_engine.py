"""Pool-share computation.

Shares are inversely weighted by score: each active player gets the weight
``max_active_score - total_score + 1`` and the weights are normalized to sum
to one. The best-placed player holds the largest stake and the player
closest to elimination the smallest, recomputed after every transition.
"""

from typing import Dict, Iterable, List, Optional

from src.pool_tracker.config import WITHDRAWAL_PAYOUT_RATIO
from src.pool_tracker.game_state import Player


def max_active_score(players: Iterable[Player]) -> int:
    """Highest total score among active players, 0 if nobody is active."""
    scores = [p.total_score for p in players if p.is_active]
    return max(scores) if scores else 0


def compute_shares(players: Iterable[Player]) -> List[Player]:
    """Return *players* with ``current_share`` recomputed for everyone.

    Non-active players always get 0. When every active score is 0 the pool
    is split evenly.
    """
    players = list(players)
    active = [p for p in players if p.is_active]

    if not active:
        return [p.copy_with(current_share=0.0) for p in players]

    if all(p.total_score == 0 for p in active):
        equal_share = 1 / len(active)
        return [
            p.copy_with(current_share=equal_share if p.is_active else 0.0)
            for p in players
        ]

    max_score = max(p.total_score for p in active)
    total_weight = sum(max_score - p.total_score + 1 for p in active)

    return [
        p.copy_with(
            current_share=(max_score - p.total_score + 1) / total_weight
            if p.is_active
            else 0.0
        )
        for p in players
    ]


def withdrawal_payout(player: Player, total_pool: float) -> float:
    """Money paid to *player* on withdrawal (25% of the share is forfeited)."""
    return player.current_share * total_pool * WITHDRAWAL_PAYOUT_RATIO


def round_winners(scores: Dict[str, int]) -> List[str]:
    """Ids of every player with the lowest score in the round (ties included)."""
    if not scores:
        return []
    min_score = min(scores.values())
    return [pid for pid, score in scores.items() if score == min_score]


def next_shuffler(players: Iterable[Player], current_shuffler_id: str) -> Optional[str]:
    """Next active player after *current_shuffler_id* in join order.

    An unknown shuffler id behaves as if it sat before the first active
    player, so the first active player is returned. None when nobody is
    active.
    """
    active_ids = [p.id for p in players if p.is_active]
    if not active_ids:
        return None

    try:
        current_index = active_ids.index(current_shuffler_id)
    except ValueError:
        current_index = -1

    return active_ids[(current_index + 1) % len(active_ids)]
