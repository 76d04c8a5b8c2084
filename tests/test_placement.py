import random
import unittest

from fleetcommand.domain.board import create_empty_grid, replace_cells
from fleetcommand.domain.config import BOARD_SIZE, EMPTY, HORIZONTAL, MISS, SHIP, VERTICAL
from fleetcommand.domain.fleet import build_fleet, find_ship
from fleetcommand.domain.types import Cell, Coordinate
from fleetcommand.engine.errors import EngineError, PlacementError
from fleetcommand.engine.placement import is_valid_placement, place_ship_on_grid, place_ships_randomly


class IsValidPlacementTests(unittest.TestCase):
    def setUp(self):
        self.grid = create_empty_grid()

    def test_fits_on_empty_grid(self):
        self.assertTrue(is_valid_placement(self.grid, 2, 0, 0, HORIZONTAL))
        self.assertTrue(is_valid_placement(self.grid, 5, 5, 0, HORIZONTAL))
        self.assertTrue(is_valid_placement(self.grid, 5, 0, 5, VERTICAL))

    def test_out_of_bounds(self):
        self.assertFalse(is_valid_placement(self.grid, 2, 9, 0, HORIZONTAL))
        self.assertFalse(is_valid_placement(self.grid, 5, 6, 0, HORIZONTAL))
        self.assertFalse(is_valid_placement(self.grid, 5, 0, 6, VERTICAL))
        # Only the axis the ship extends along matters.
        self.assertTrue(is_valid_placement(self.grid, 5, 9, 0, VERTICAL))
        self.assertTrue(is_valid_placement(self.grid, 5, 0, 9, HORIZONTAL))

    def test_anchor_off_board(self):
        self.assertFalse(is_valid_placement(self.grid, 2, -1, 0, HORIZONTAL))
        self.assertFalse(is_valid_placement(self.grid, 2, 0, BOARD_SIZE, HORIZONTAL))

    def test_overlap_is_rejected(self):
        grid, _ = place_ship_on_grid(self.grid, find_ship(build_fleet(), "destroyer"), 0, 0, HORIZONTAL)
        self.assertFalse(is_valid_placement(grid, 3, 1, 0, VERTICAL))
        self.assertFalse(is_valid_placement(grid, 3, 0, 0, VERTICAL))
        self.assertTrue(is_valid_placement(grid, 3, 2, 0, VERTICAL))
        self.assertTrue(is_valid_placement(grid, 3, 0, 1, HORIZONTAL))

    def test_resolved_cells_are_not_free(self):
        grid = replace_cells(self.grid, [Cell(4, 4, MISS)])
        self.assertFalse(is_valid_placement(grid, 3, 2, 4, HORIZONTAL))
        self.assertTrue(is_valid_placement(grid, 3, 5, 4, HORIZONTAL))


class PlaceShipOnGridTests(unittest.TestCase):
    def test_destroyer_horizontal_at_origin(self):
        grid = create_empty_grid()
        destroyer = find_ship(build_fleet(), "destroyer")
        self.assertTrue(is_valid_placement(grid, 2, 0, 0, HORIZONTAL))

        new_grid, placed = place_ship_on_grid(grid, destroyer, 0, 0, HORIZONTAL)

        for x, y in ((0, 0), (1, 0)):
            self.assertEqual(new_grid[y][x].status, SHIP)
            self.assertEqual(new_grid[y][x].ship_id, "destroyer")
        self.assertEqual(new_grid[0][2].status, EMPTY)
        self.assertTrue(placed.placed)
        self.assertEqual(placed.orientation, HORIZONTAL)
        self.assertEqual(placed.coordinates, (Coordinate(0, 0), Coordinate(1, 0)))
        # Original grid and ship are untouched.
        self.assertEqual(grid[0][0].status, EMPTY)
        self.assertFalse(destroyer.placed)

    def test_vertical_coordinates_are_contiguous_from_anchor(self):
        carrier = find_ship(build_fleet(), "carrier")
        grid, placed = place_ship_on_grid(create_empty_grid(), carrier, 7, 3, VERTICAL)

        self.assertEqual(len(placed.coordinates), carrier.size)
        self.assertEqual(placed.coordinates[0], Coordinate(7, 3))
        for i, coord in enumerate(placed.coordinates):
            self.assertEqual(coord, Coordinate(7, 3 + i))
            self.assertEqual(grid[coord.y][coord.x].ship_id, "carrier")
        self.assertEqual(placed.orientation, VERTICAL)


class PlaceShipsRandomlyTests(unittest.TestCase):
    def test_random_fleet_is_consistent(self):
        for seed in range(20):
            grid, fleet = place_ships_randomly(build_fleet(), random.Random(seed))

            ship_cells = [c for row in grid for c in row if c.status == SHIP]
            self.assertEqual(len(ship_cells), 17)

            seen = set()
            for ship in fleet:
                self.assertTrue(ship.placed)
                self.assertEqual(ship.hits, 0)
                coords = set(ship.coordinates)
                self.assertEqual(len(coords), ship.size)
                self.assertFalse(coords & seen)
                seen |= coords
                on_grid = {Coordinate(c.x, c.y) for c in ship_cells if c.ship_id == ship.id}
                self.assertEqual(on_grid, coords)

    def test_same_seed_same_layout(self):
        first = place_ships_randomly(build_fleet(), random.Random(42))
        second = place_ships_randomly(build_fleet(), random.Random(42))
        self.assertEqual(first, second)

    def test_starvation_raises(self):
        with self.assertRaises(PlacementError) as ctx:
            place_ships_randomly(build_fleet(), random.Random(0), board_size=3, max_attempts=50)

        self.assertIsInstance(ctx.exception, EngineError)
        self.assertIn("carrier", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
