from pathlib import Path

# Base project directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Saved games
GAMES_DIR = PROJECT_ROOT / "data" / "games"
GAME_KEY_PREFIX = "rummy_game_"

# Game codes are 4-digit join codes, not unique identifiers
GAME_ID_MIN = 1000
GAME_ID_MAX = 9999

# Fraction of the share paid out on withdrawal; the rest stays in the pool
WITHDRAWAL_PAYOUT_RATIO = 0.75

# Default game settings
DEFAULT_TARGET_POINTS = 101
DEFAULT_AMOUNT_PER_PLAYER = 100.0
MIN_PLAYERS = 2

# Display rounding (computation always uses full precision)
SHARE_DISPLAY_PLACES = 2
FINAL_DISPLAY_PLACES = 4
