import random
import unittest

from fleetcommand.domain.board import create_empty_grid, replace_cells
from fleetcommand.domain.config import EMPTY, HIT, HORIZONTAL, MISS, SHIP
from fleetcommand.domain.fleet import build_fleet, find_ship, replace_ship
from fleetcommand.domain.types import Cell, Coordinate
from fleetcommand.engine.attack import check_win_condition, resolve_attack
from fleetcommand.engine.errors import BoardMismatchError, EngineError
from fleetcommand.engine.placement import place_ship_on_grid, place_ships_randomly


def _changed_cells(before, after):
    return [
        (x, y)
        for y, row in enumerate(before)
        for x, cell in enumerate(row)
        if after[y][x] != cell
    ]


class ResolveAttackTests(unittest.TestCase):
    def setUp(self):
        fleet = build_fleet()
        grid, destroyer = place_ship_on_grid(
            create_empty_grid(), find_ship(fleet, "destroyer"), 0, 0, HORIZONTAL
        )
        self.grid = grid
        self.fleet = replace_ship(fleet, destroyer)

    def test_destroyer_hit_then_sunk(self):
        grid, fleet, outcome = resolve_attack(self.grid, self.fleet, 0, 0)
        self.assertEqual(outcome.result, HIT)
        self.assertTrue(outcome.hit)
        self.assertFalse(outcome.sunk)
        self.assertEqual(outcome.coordinate, Coordinate(0, 0))
        self.assertEqual(find_ship(fleet, "destroyer").hits, 1)
        self.assertEqual(grid[0][0].status, HIT)
        self.assertEqual(grid[0][0].ship_id, "destroyer")

        grid, fleet, outcome = resolve_attack(grid, fleet, 1, 0)
        self.assertEqual(outcome.result, HIT)
        self.assertTrue(outcome.sunk)
        self.assertEqual(outcome.ship_name, "Destructor")
        self.assertEqual(find_ship(fleet, "destroyer").hits, 2)
        self.assertTrue(find_ship(fleet, "destroyer").sunk)

    def test_miss_leaves_fleet_alone(self):
        grid, fleet, outcome = resolve_attack(self.grid, self.fleet, 5, 5)
        self.assertEqual(outcome.result, MISS)
        self.assertFalse(outcome.sunk)
        self.assertIsNone(outcome.ship_name)
        self.assertEqual(grid[5][5].status, MISS)
        self.assertIsNone(grid[5][5].ship_id)
        self.assertEqual([s.hits for s in fleet], [s.hits for s in self.fleet])
        self.assertEqual(self.grid[5][5].status, EMPTY)

    def test_exactly_one_cell_changes(self):
        grid, _, _ = resolve_attack(self.grid, self.fleet, 1, 0)
        self.assertEqual(_changed_cells(self.grid, grid), [(1, 0)])
        self.assertEqual(self.grid[0][1].status, SHIP)

        grid, _, _ = resolve_attack(self.grid, self.fleet, 4, 7)
        self.assertEqual(_changed_cells(self.grid, grid), [(4, 7)])

    def test_only_the_owning_ship_is_damaged(self):
        _, fleet, _ = resolve_attack(self.grid, self.fleet, 0, 0)
        for before, after in zip(self.fleet, fleet):
            expected = before.hits + 1 if before.id == "destroyer" else before.hits
            self.assertEqual(after.hits, expected)

    def test_ship_cell_without_owner_raises(self):
        grid = replace_cells(self.grid, [Cell(3, 3, SHIP)])
        with self.assertRaises(BoardMismatchError):
            resolve_attack(grid, self.fleet, 3, 3)

    def test_ship_cell_with_unknown_ship_raises(self):
        grid = replace_cells(self.grid, [Cell(3, 3, SHIP, "rowboat")])
        with self.assertRaises(BoardMismatchError) as ctx:
            resolve_attack(grid, self.fleet, 3, 3)
        self.assertIsInstance(ctx.exception, EngineError)
        self.assertIn("rowboat", str(ctx.exception))


class WinConditionTests(unittest.TestCase):
    def test_fresh_fleet_is_not_beaten(self):
        _, fleet = place_ships_randomly(build_fleet(), random.Random(3))
        self.assertFalse(check_win_condition(fleet))

    def test_win_only_after_last_ship_cell(self):
        grid, fleet = place_ships_randomly(build_fleet(), random.Random(7))
        targets = [c for ship in fleet for c in ship.coordinates]
        self.assertEqual(len(targets), 17)

        for i, target in enumerate(targets):
            self.assertFalse(check_win_condition(fleet))
            grid, fleet, outcome = resolve_attack(grid, fleet, target.x, target.y)
            self.assertTrue(outcome.hit)
            self.assertEqual(check_win_condition(fleet), i == len(targets) - 1)

        self.assertTrue(all(s.hits == s.size for s in fleet))

    def test_misses_never_win(self):
        grid, fleet = place_ships_randomly(build_fleet(), random.Random(11))
        for y, row in enumerate(grid):
            for x, cell in enumerate(row):
                if cell.status == EMPTY:
                    grid, fleet, _ = resolve_attack(grid, fleet, x, y)
        self.assertFalse(check_win_condition(fleet))
        self.assertEqual(sum(s.hits for s in fleet), 0)


if __name__ == "__main__":
    unittest.main()
