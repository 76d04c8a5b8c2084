from typing import List, Optional, Sequence, Set

from fleetcommand.domain.config import MAX_SHIP_SIZE, MIN_SHIP_SIZE

from .definition import FleetDefinition, ShipSpec


def validate_fleet(fleet: FleetDefinition, expected_sizes: Optional[Sequence[int]] = None) -> List[str]:
    errors: List[str] = []

    if fleet.board_size <= 0:
        errors.append("board_size must be positive")

    if not fleet.ships:
        errors.append("fleet must define at least one ship")

    ids: Set[str] = set()
    for ship in fleet.ships:
        _validate_ship(ship, fleet.board_size, ids, errors)

    if fleet.board_size > 0 and fleet.total_cells() > fleet.board_size * fleet.board_size:
        errors.append(
            f"fleet needs {fleet.total_cells()} cells but the board only has "
            f"{fleet.board_size * fleet.board_size}"
        )

    if expected_sizes is not None:
        actual = sorted(int(s.size) for s in fleet.ships)
        if actual != sorted(int(s) for s in expected_sizes):
            errors.append(f"fleet ship sizes {actual} do not match required sizes {sorted(expected_sizes)}")

    return errors


def _validate_ship(ship: ShipSpec, board_size: int, ids: Set[str], errors: List[str]) -> None:
    if not ship.ship_id:
        errors.append("ship_id must be non-empty")
    elif ship.ship_id in ids:
        errors.append(f"duplicate ship_id: {ship.ship_id}")
    else:
        ids.add(ship.ship_id)

    if not ship.name:
        errors.append(f"ship {ship.ship_id} must have a name")

    size = int(ship.size)
    if size < MIN_SHIP_SIZE or size > MAX_SHIP_SIZE:
        errors.append(f"ship {ship.ship_id} size must be between {MIN_SHIP_SIZE} and {MAX_SHIP_SIZE}")
    elif board_size > 0 and size > board_size:
        errors.append(f"ship {ship.ship_id} does not fit on a {board_size}x{board_size} board")
