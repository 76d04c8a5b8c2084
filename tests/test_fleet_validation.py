import unittest
from dataclasses import replace

from fleetcommand.domain.config import HORIZONTAL
from fleetcommand.domain.fleet import all_placed, build_fleet, find_ship, first_unplaced, replace_ship
from fleetcommand.fleets import CLASSIC_SHIP_SIZES, FleetDefinition, ShipSpec, classic_fleet, validate_fleet


class ClassicFleetTests(unittest.TestCase):
    def test_classic_fleet_is_valid(self):
        self.assertEqual(validate_fleet(classic_fleet(), expected_sizes=CLASSIC_SHIP_SIZES), [])

    def test_build_fleet_creates_fresh_ships_in_order(self):
        fleet = build_fleet()
        self.assertEqual(
            [s.id for s in fleet],
            ["carrier", "battleship", "cruiser", "submarine", "destroyer"],
        )
        self.assertEqual([s.size for s in fleet], [5, 4, 3, 3, 2])
        self.assertEqual(find_ship(fleet, "destroyer").name, "Destructor")
        for ship in fleet:
            self.assertEqual(ship.hits, 0)
            self.assertFalse(ship.placed)
            self.assertEqual(ship.orientation, HORIZONTAL)
            self.assertEqual(ship.coordinates, ())

    def test_fleet_helpers(self):
        fleet = build_fleet()
        self.assertEqual(first_unplaced(fleet).id, "carrier")
        self.assertFalse(all_placed(fleet))
        self.assertIsNone(find_ship(fleet, "rowboat"))
        self.assertIsNone(find_ship(fleet, None))

        placed = tuple(replace(s, placed=True) for s in fleet)
        self.assertTrue(all_placed(placed))
        self.assertIsNone(first_unplaced(placed))

        updated = replace_ship(fleet, replace(fleet[1], hits=2))
        self.assertEqual(updated[1].hits, 2)
        self.assertEqual(fleet[1].hits, 0)

    def test_fleet_hash_is_stable(self):
        self.assertEqual(classic_fleet().fleet_hash, classic_fleet().fleet_hash)
        self.assertEqual(len(classic_fleet().fleet_hash), 16)


class FleetValidationTests(unittest.TestCase):
    def test_empty_fleet_reports_errors(self):
        fleet = FleetDefinition("test", "Test", 0, tuple())
        errors = validate_fleet(fleet)
        self.assertIn("board_size must be positive", errors)
        self.assertIn("fleet must define at least one ship", errors)

    def test_invalid_ships_report_errors(self):
        fleet = FleetDefinition(
            "test",
            "Test",
            10,
            (
                ShipSpec("a", "Uno", 1),
                ShipSpec("a", "Dos", 3),
                ShipSpec("b", "", 6),
            ),
        )
        errors = validate_fleet(fleet)
        self.assertTrue(any("duplicate ship_id" in e for e in errors))
        self.assertTrue(any("size must be between" in e for e in errors))
        self.assertTrue(any("must have a name" in e for e in errors))

    def test_fleet_too_large_for_board(self):
        fleet = FleetDefinition(
            "tiny",
            "Tiny",
            2,
            (ShipSpec("a", "A", 2), ShipSpec("b", "B", 2), ShipSpec("c", "C", 2)),
        )
        errors = validate_fleet(fleet)
        self.assertTrue(any("the board only has 4" in e for e in errors))

    def test_ship_longer_than_board(self):
        fleet = FleetDefinition("small", "Small", 3, (ShipSpec("a", "A", 4),))
        errors = validate_fleet(fleet)
        self.assertTrue(any("does not fit" in e for e in errors))

    def test_wrong_composition(self):
        fleet = FleetDefinition(
            "odd",
            "Odd",
            10,
            (ShipSpec("a", "A", 5), ShipSpec("b", "B", 5)),
        )
        errors = validate_fleet(fleet, expected_sizes=CLASSIC_SHIP_SIZES)
        self.assertTrue(any("do not match required sizes" in e for e in errors))
        with self.assertRaises(ValueError):
            build_fleet(fleet)


if __name__ == "__main__":
    unittest.main()
