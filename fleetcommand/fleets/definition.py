import hashlib
import json
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ShipSpec:
    ship_id: str
    name: str
    size: int

    def normalized(self) -> dict:
        return {
            "ship_id": self.ship_id,
            "name": self.name,
            "size": int(self.size),
        }


@dataclass(frozen=True)
class FleetDefinition:
    fleet_id: str
    name: str
    board_size: int
    ships: Tuple[ShipSpec, ...]

    def normalized(self) -> dict:
        # Ship order is part of the definition: ships are placed in this order.
        return {
            "fleet_id": self.fleet_id,
            "name": self.name,
            "board_size": int(self.board_size),
            "ships": [s.normalized() for s in self.ships],
        }

    @property
    def fleet_hash(self) -> str:
        payload = json.dumps(self.normalized(), sort_keys=True, separators=(",", ":"))
        return hashlib.sha256(payload.encode("utf-8")).hexdigest()[:16]

    def total_cells(self) -> int:
        return sum(int(s.size) for s in self.ships)
