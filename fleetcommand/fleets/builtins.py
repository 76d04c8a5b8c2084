from fleetcommand.domain.config import BOARD_SIZE

from .definition import FleetDefinition, ShipSpec

CLASSIC_SHIP_SIZES = (5, 4, 3, 3, 2)


def classic_fleet() -> FleetDefinition:
    ships = (
        ShipSpec(ship_id="carrier", name="Portaaviones", size=5),
        ShipSpec(ship_id="battleship", name="Acorazado", size=4),
        ShipSpec(ship_id="cruiser", name="Crucero", size=3),
        ShipSpec(ship_id="submarine", name="Submarino", size=3),
        ShipSpec(ship_id="destroyer", name="Destructor", size=2),
    )
    return FleetDefinition(
        fleet_id="classic",
        name="Flota clásica (10x10)",
        board_size=BOARD_SIZE,
        ships=ships,
    )
