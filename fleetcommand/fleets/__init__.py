from .builtins import CLASSIC_SHIP_SIZES, classic_fleet
from .definition import FleetDefinition, ShipSpec
from .validation import validate_fleet

__all__ = [
    "FleetDefinition",
    "ShipSpec",
    "CLASSIC_SHIP_SIZES",
    "classic_fleet",
    "validate_fleet",
]
