"""Game state transitions.

Every function takes a ``GameState`` snapshot and returns a new one; the
input is never modified. Lookups of unknown players are no-ops.
"""

import uuid
from typing import Dict, Tuple

from src.pool_tracker.game_state import GameState, Player, PlayerStatus, Round
from src.pool_tracker.share_engine import (
    compute_shares,
    max_active_score,
    withdrawal_payout,
)


def apply_round(
    state: GameState, scores: Dict[str, int], shuffler_id: str
) -> GameState:
    """Add a round's scores to the active players and record the round.

    Players reaching ``target_points`` are eliminated. Scores for players
    that are not active are dropped from the recorded round. Deciding
    whether the game is over is left to the caller.
    """
    active_ids = {p.id for p in state.players if p.is_active}
    round_scores = {pid: score for pid, score in scores.items() if pid in active_ids}

    updated = []
    for player in state.players:
        if not player.is_active:
            updated.append(player)
            continue

        new_total = player.total_score + round_scores.get(player.id, 0)
        new_status = (
            PlayerStatus.ELIMINATED
            if new_total >= state.target_points
            else PlayerStatus.ACTIVE
        )
        updated.append(player.copy_with(total_score=new_total, status=new_status))

    new_round = Round(
        round_number=len(state.rounds) + 1,
        shuffler_id=shuffler_id,
        scores=round_scores,
    )

    return state.copy_with(
        players=compute_shares(updated),
        rounds=state.rounds + (new_round,),
    )


def undo_last_round(state: GameState) -> GameState:
    """Revert the most recent round. No-op when there is no history.

    Eliminated players dropping back under ``target_points`` become active
    again; withdrawn players stay withdrawn.
    """
    last_round = state.last_round
    if last_round is None:
        return state

    updated = []
    for player in state.players:
        # Totals never go negative, even after a rejoin reset
        new_total = max(0, player.total_score - last_round.score_for(player.id))
        new_status = player.status
        if (
            player.status == PlayerStatus.ELIMINATED
            and new_total < state.target_points
        ):
            new_status = PlayerStatus.ACTIVE
        updated.append(player.copy_with(total_score=new_total, status=new_status))

    return state.copy_with(
        players=compute_shares(updated),
        rounds=state.rounds[:-1],
    )


def add_player(state: GameState, name: str) -> GameState:
    """Seat a late joiner at the current highest active score."""
    new_player = Player(
        id=uuid.uuid4().hex,
        name=name,
        total_score=max_active_score(state.players),
        status=PlayerStatus.ACTIVE,
    )

    return state.copy_with(
        players=compute_shares(state.players + (new_player,)),
        total_pool=state.total_pool + state.amount_per_player,
    )


def withdraw(state: GameState, player_id: str) -> Tuple[GameState, float]:
    """Pay out 75% of a player's current share and mark them withdrawn.

    Returns:
        (new_state, payout) - the input state and 0.0 if the id is unknown.
    """
    player = state.get_player(player_id)
    if player is None:
        return state, 0.0

    payout = withdrawal_payout(player, state.total_pool)

    updated = [
        p.copy_with(status=PlayerStatus.WITHDRAWN, current_share=0.0)
        if p.id == player_id
        else p
        for p in state.players
    ]

    new_state = state.copy_with(
        players=compute_shares(updated),
        total_pool=state.total_pool - payout,
    )
    return new_state, payout


def rejoin(state: GameState, player_id: str) -> GameState:
    """Bring a player back at the current highest active score for a new fee."""
    if state.get_player(player_id) is None:
        return state

    max_score = max_active_score(state.players)
    updated = [
        p.copy_with(status=PlayerStatus.ACTIVE, total_score=max_score)
        if p.id == player_id
        else p
        for p in state.players
    ]

    return state.copy_with(
        players=compute_shares(updated),
        total_pool=state.total_pool + state.amount_per_player,
    )


def finish_game(state: GameState) -> GameState:
    """Mark the game finished; the state is read-only afterwards."""
    if state.is_finished:
        return state
    return state.copy_with(is_finished=True)
