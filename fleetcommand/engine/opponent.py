import random
from typing import Optional

from fleetcommand.domain.board import is_resolved
from fleetcommand.domain.config import OPPONENT_MOVE_ATTEMPTS
from fleetcommand.domain.types import Coordinate, Grid

from .errors import NoMovesLeftError


def select_opponent_move(
    grid: Grid,
    rng: Optional[random.Random] = None,
    max_attempts: int = OPPONENT_MOVE_ATTEMPTS,
) -> Coordinate:
    """Pick a cell the opponent has not fired at yet.

    Uniform random sampling first, then a row-major scan. No memory of
    earlier hits.
    """
    if rng is None:
        rng = random.Random()

    board_size = len(grid)
    for _ in range(max_attempts):
        x = rng.randrange(board_size)
        y = rng.randrange(board_size)
        if not is_resolved(grid[y][x]):
            return Coordinate(x, y)

    for y in range(board_size):
        for x in range(board_size):
            if not is_resolved(grid[y][x]):
                return Coordinate(x, y)

    raise NoMovesLeftError("every cell on the board has already been fired at")
