from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CellClick:
    x: int
    y: int
    # PLAYER or OPPONENT board; None lets the phase decide.
    board: Optional[str] = None


@dataclass(frozen=True)
class SelectShip:
    ship_id: str


@dataclass(frozen=True)
class ToggleOrientation:
    pass


@dataclass(frozen=True)
class AutoPlace:
    pass


@dataclass(frozen=True)
class OpponentTurn:
    pass


@dataclass(frozen=True)
class Reset:
    pass
