import random
from dataclasses import replace
from typing import Optional, Tuple

from fleetcommand.domain.board import create_empty_grid, replace_cells, ship_cells
from fleetcommand.domain.config import BOARD_SIZE, EMPTY, HORIZONTAL, MAX_PLACEMENT_ATTEMPTS, SHIP, VERTICAL
from fleetcommand.domain.types import Cell, Fleet, Grid, Ship

from .errors import PlacementError


def is_valid_placement(grid: Grid, size: int, anchor_x: int, anchor_y: int, orientation: str) -> bool:
    board_size = len(grid)
    if not (0 <= anchor_x < board_size and 0 <= anchor_y < board_size):
        return False

    if orientation == HORIZONTAL:
        if anchor_x + size > board_size:
            return False
    elif anchor_y + size > board_size:
        return False

    for pos in ship_cells(anchor_x, anchor_y, size, orientation):
        cell = grid[pos.y][pos.x]
        if cell.status != EMPTY or cell.ship_id is not None:
            return False
    return True


def place_ship_on_grid(
    grid: Grid,
    ship: Ship,
    anchor_x: int,
    anchor_y: int,
    orientation: str,
) -> Tuple[Grid, Ship]:
    """Write ``ship`` onto a copy of ``grid``.

    No validation happens here: callers must have checked
    ``is_valid_placement`` with the same arguments, otherwise existing cells
    are overwritten.
    """
    coords = ship_cells(anchor_x, anchor_y, ship.size, orientation)
    new_grid = replace_cells(grid, (Cell(c.x, c.y, SHIP, ship.id) for c in coords))
    placed = replace(ship, placed=True, orientation=orientation, coordinates=tuple(coords))
    return new_grid, placed


def place_ships_randomly(
    fleet: Fleet,
    rng: Optional[random.Random] = None,
    board_size: int = BOARD_SIZE,
    max_attempts: int = MAX_PLACEMENT_ATTEMPTS,
) -> Tuple[Grid, Fleet]:
    """Place every ship of ``fleet`` at a random valid spot on an empty grid.

    Ships are placed in fleet order without backtracking. Each ship gets at
    most ``max_attempts`` random picks; running out raises PlacementError.
    """
    if rng is None:
        rng = random.Random()

    grid = create_empty_grid(board_size)
    placed_ships = []
    for template in fleet:
        for _ in range(max_attempts):
            orientation = HORIZONTAL if rng.random() < 0.5 else VERTICAL
            x = rng.randrange(board_size)
            y = rng.randrange(board_size)
            if is_valid_placement(grid, template.size, x, y, orientation):
                grid, placed = place_ship_on_grid(grid, template, x, y, orientation)
                placed_ships.append(placed)
                break
        else:
            raise PlacementError(
                f"could not place {template.id} (size {template.size}) after {max_attempts} attempts"
            )

    return grid, tuple(placed_ships)
