from dataclasses import dataclass
from typing import Optional, Tuple

from .config import EMPTY, HORIZONTAL


@dataclass(frozen=True)
class Coordinate:
    x: int  # column
    y: int  # row


@dataclass(frozen=True)
class Cell:
    x: int
    y: int
    status: str = EMPTY
    ship_id: Optional[str] = None


@dataclass(frozen=True)
class Ship:
    id: str
    name: str
    size: int
    hits: int = 0
    placed: bool = False
    orientation: str = HORIZONTAL
    coordinates: Tuple[Coordinate, ...] = ()

    @property
    def sunk(self) -> bool:
        return self.hits >= self.size


Grid = Tuple[Tuple[Cell, ...], ...]
Fleet = Tuple[Ship, ...]
