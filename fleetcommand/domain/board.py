from typing import Dict, Iterable, List, Tuple

from .config import BOARD_SIZE, HIT, HORIZONTAL, MISS
from .types import Cell, Coordinate, Grid


def create_empty_grid(board_size: int = BOARD_SIZE) -> Grid:
    return tuple(
        tuple(Cell(x, y) for x in range(board_size))
        for y in range(board_size)
    )


def in_bounds(x: int, y: int, board_size: int = BOARD_SIZE) -> bool:
    return 0 <= x < board_size and 0 <= y < board_size


def get_cell(grid: Grid, x: int, y: int) -> Cell:
    return grid[y][x]


def is_resolved(cell: Cell) -> bool:
    """A cell that has already been fired at (HIT or MISS)."""
    return cell.status in (HIT, MISS)


def ship_cells(x: int, y: int, size: int, orientation: str) -> List[Coordinate]:
    """Cells covered by a ship of ``size`` anchored at (x, y), in placement order."""
    if orientation == HORIZONTAL:
        return [Coordinate(x + i, y) for i in range(size)]
    return [Coordinate(x, y + i) for i in range(size)]


def replace_cells(grid: Grid, updates: Iterable[Cell]) -> Grid:
    """Return a copy of ``grid`` with the given cells swapped in by coordinate."""
    by_pos: Dict[Tuple[int, int], Cell] = {(c.x, c.y): c for c in updates}
    if not by_pos:
        return grid
    rows = []
    for y, row in enumerate(grid):
        if any(pos[1] == y for pos in by_pos):
            rows.append(tuple(by_pos.get((x, y), cell) for x, cell in enumerate(row)))
        else:
            rows.append(row)
    return tuple(rows)


def count_status(grid: Grid, status: str) -> int:
    return sum(1 for row in grid for cell in row if cell.status == status)


def coordinate_label(x: int, y: int) -> str:
    # Column letter then 1-based row, e.g. (0, 0) -> "A1"
    return f"{chr(ord('A') + x)}{y + 1}"
