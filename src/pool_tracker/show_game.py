"""Print the standings of a saved game.

Usage:
    python -m src.pool_tracker.show_game <game_id> [storage_dir]

Examples:
    python -m src.pool_tracker.show_game 4821
    python -m src.pool_tracker.show_game 4821 /path/to/games
"""

import logging
import sys
from pathlib import Path

from src.logging_config import setup_logging
from src.pool_tracker.config import FINAL_DISPLAY_PLACES
from src.pool_tracker.state_persistence import StatePersistence, is_valid_game_id
from src.pool_tracker.standings import (
    final_distribution,
    format_money,
    round_history,
    standings_table,
)

logger = logging.getLogger(__name__)


def render_game(game_id: str, storage_dir: Path | None = None) -> str:
    """Render a saved game as text.

    Raises:
        ValueError: If *game_id* is not a 4-digit code.
        FileNotFoundError: If no game is saved under *game_id*.
    """
    if not is_valid_game_id(game_id):
        raise ValueError(f"Game ID must be 4 digits, got {game_id!r}")

    persistence = StatePersistence(storage_dir)
    state = persistence.load_game(game_id)
    if state is None:
        raise FileNotFoundError(f"Game {game_id} does not exist")

    lines = [
        f"Game {state.game_id} - target {state.target_points}, "
        f"pool {format_money(state.total_pool)}"
        + (" (finished)" if state.is_finished else ""),
        "",
    ]

    if state.is_finished:
        table = final_distribution(state)
        table["amount"] = table["amount"].map(
            lambda v: format_money(v, FINAL_DISPLAY_PLACES)
        )
    else:
        table = standings_table(state).drop(columns="player_id")
    lines.append(table.to_string(index=False))

    history = round_history(state)
    if not history.empty:
        lines += ["", history.to_string(index=False, na_rep="-")]

    return "\n".join(lines)


if __name__ == "__main__":
    setup_logging()

    if len(sys.argv) < 2:
        print(__doc__)
        sys.exit(2)

    game_id = sys.argv[1]
    storage_dir = Path(sys.argv[2]) if len(sys.argv) > 2 else None

    try:
        print(render_game(game_id, storage_dir))
    except (ValueError, FileNotFoundError) as e:
        logger.error("%s", e)
        sys.exit(1)
