# Board and cell constants
BOARD_SIZE = 10

EMPTY = "EMPTY"
SHIP = "SHIP"
HIT = "HIT"
MISS = "MISS"

HORIZONTAL = "horizontal"
VERTICAL = "vertical"

# Ship sizes a fleet definition may use.
MIN_SHIP_SIZE = 2
MAX_SHIP_SIZE = 5

# Random placement gives up on a ship after this many rejected picks.
MAX_PLACEMENT_ATTEMPTS = 10000

# Opponent targeting: random samples before the row-major fallback scan.
OPPONENT_MOVE_ATTEMPTS = 200

# Pacing delay before the opponent fires (milliseconds).
OPPONENT_DELAY_MS_MIN = 1000
OPPONENT_DELAY_MS_MAX = 2000

# Sides
PLAYER = "PLAYER"
OPPONENT = "OPPONENT"

# Game phases
PHASE_PLACEMENT = "PLACEMENT"
PHASE_PLAYING = "PLAYING"
PHASE_GAME_OVER = "GAME_OVER"

# Debug log (see fleetcommand.utils.debug)
DEBUG_ENV_VAR = "FLEETCOMMAND_DEBUG"
DEBUG_LOG_ENV_VAR = "FLEETCOMMAND_DEBUG_LOG"
DEFAULT_DEBUG_LOG_PATH = "fleetcommand_debug.log"
