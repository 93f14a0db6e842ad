"""Standings, round history and final payout tables.

All money is computed at full precision from ``current_share * total_pool``;
rounding happens only in the columns produced here.
"""

import pandas as pd

from src.pool_tracker.config import FINAL_DISPLAY_PLACES, SHARE_DISPLAY_PLACES
from src.pool_tracker.game_state import GameState

_STANDINGS_COLUMNS = [
    "player_id", "name", "status", "total_score", "share_pct", "share_amount",
]


def format_money(amount: float, places: int = SHARE_DISPLAY_PLACES) -> str:
    return f"{amount:.{places}f}"


def standings_table(state: GameState) -> pd.DataFrame:
    """One row per player in join order with their current stake."""
    rows = [
        {
            "player_id": p.id,
            "name": p.name,
            "status": p.status,
            "total_score": p.total_score,
            "share_pct": round(p.current_share * 100, 1),
            "share_amount": round(
                p.current_share * state.total_pool, SHARE_DISPLAY_PLACES
            ),
        }
        for p in state.players
    ]
    return pd.DataFrame(rows, columns=_STANDINGS_COLUMNS)


def final_distribution(state: GameState) -> pd.DataFrame:
    """Payout view: active players by score (winner first), then the rest.

    Non-active players are listed with a zero amount.
    """
    df = pd.DataFrame(
        [
            {
                "name": p.name,
                "status": p.status,
                "total_score": p.total_score,
                "amount": p.current_share * state.total_pool,
                "is_active": p.is_active,
            }
            for p in state.players
        ],
        columns=["name", "status", "total_score", "amount", "is_active"],
    )
    if df.empty:
        return df.drop(columns="is_active")

    active = df[df["is_active"]].sort_values("total_score", kind="stable")
    others = df[~df["is_active"]].assign(amount=0.0)

    out = pd.concat([active, others]).drop(columns="is_active")
    out["amount"] = out["amount"].round(FINAL_DISPLAY_PLACES)
    return out.reset_index(drop=True)


def round_history(state: GameState) -> pd.DataFrame:
    """Score grid: one row per round, one column per player name.

    Players absent from a round (not in play at the time) show as NaN.
    """
    names = {p.id: p.name for p in state.players}
    rows = []
    for rnd in state.rounds:
        row = {
            "round_number": rnd.round_number,
            "shuffler": names.get(rnd.shuffler_id, rnd.shuffler_id),
        }
        for player_id, score in rnd.scores.items():
            row[names.get(player_id, player_id)] = score
        rows.append(row)

    columns = ["round_number", "shuffler"] + list(
        dict.fromkeys(p.name for p in state.players)
    )
    return pd.DataFrame(rows, columns=columns)
