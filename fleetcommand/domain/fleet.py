from typing import Optional

from fleetcommand.fleets import CLASSIC_SHIP_SIZES, FleetDefinition, classic_fleet, validate_fleet

from .types import Fleet, Ship


def build_fleet(definition: Optional[FleetDefinition] = None) -> Fleet:
    """Fresh, unplaced and undamaged ships for one side, in definition order.

    Only the classic composition is accepted; both sides must field the
    same five ships.
    """
    if definition is None:
        definition = classic_fleet()
    errors = validate_fleet(definition, expected_sizes=CLASSIC_SHIP_SIZES)
    if errors:
        raise ValueError("invalid fleet definition: " + "; ".join(errors))
    return tuple(Ship(spec.ship_id, spec.name, int(spec.size)) for spec in definition.ships)


def find_ship(fleet: Fleet, ship_id: Optional[str]) -> Optional[Ship]:
    if ship_id is None:
        return None
    for ship in fleet:
        if ship.id == ship_id:
            return ship
    return None


def replace_ship(fleet: Fleet, ship: Ship) -> Fleet:
    return tuple(ship if s.id == ship.id else s for s in fleet)


def first_unplaced(fleet: Fleet) -> Optional[Ship]:
    return next((s for s in fleet if not s.placed), None)


def all_placed(fleet: Fleet) -> bool:
    return all(s.placed for s in fleet)
