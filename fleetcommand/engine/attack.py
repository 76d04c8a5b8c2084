from dataclasses import dataclass, replace
from typing import Optional, Tuple

from fleetcommand.domain.board import replace_cells
from fleetcommand.domain.config import HIT, MISS, SHIP
from fleetcommand.domain.fleet import find_ship, replace_ship
from fleetcommand.domain.types import Cell, Coordinate, Fleet, Grid

from .errors import BoardMismatchError


@dataclass(frozen=True)
class AttackOutcome:
    coordinate: Coordinate
    result: str  # HIT or MISS
    sunk: bool = False
    ship_id: Optional[str] = None
    ship_name: Optional[str] = None

    @property
    def hit(self) -> bool:
        return self.result == HIT


def resolve_attack(grid: Grid, fleet: Fleet, target_x: int, target_y: int) -> Tuple[Grid, Fleet, AttackOutcome]:
    """Fire at (target_x, target_y).

    The target must still be EMPTY or SHIP; callers reject HIT/MISS cells
    before getting here. This is the only place that changes a cell's attack
    status or a ship's damage, so grid and fleet stay consistent. A SHIP
    cell whose ship is missing from ``fleet`` raises BoardMismatchError.
    """
    cell = grid[target_y][target_x]
    coord = Coordinate(target_x, target_y)

    if cell.status == SHIP:
        ship = find_ship(fleet, cell.ship_id)
        if ship is None:
            raise BoardMismatchError(
                f"cell ({target_x}, {target_y}) holds ship {cell.ship_id!r} which is not in the fleet"
            )
        new_grid = replace_cells(grid, [Cell(target_x, target_y, HIT, cell.ship_id)])
        damaged = replace(ship, hits=min(ship.hits + 1, ship.size))
        outcome = AttackOutcome(coord, HIT, sunk=damaged.sunk, ship_id=ship.id, ship_name=ship.name)
        return new_grid, replace_ship(fleet, damaged), outcome

    new_grid = replace_cells(grid, [Cell(target_x, target_y, MISS)])
    return new_grid, fleet, AttackOutcome(coord, MISS)


def check_win_condition(fleet: Fleet) -> bool:
    """True once every ship in ``fleet`` is sunk."""
    return all(ship.hits >= ship.size for ship in fleet)
