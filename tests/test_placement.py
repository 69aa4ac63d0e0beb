import unittest

from game import (
    Cell,
    CellOccupied,
    Grid,
    InvalidCoordinate,
    InvalidPlayerId,
    new_grid,
    other_player,
    place_piece,
    resolve,
)


class TestPlacePiece(unittest.TestCase):
    def test_given_empty_cell_when_placing_then_occupant_set_and_input_untouched(self):
        grid = new_grid(5)
        after = place_piece(grid, (2, 3), 'A')
        self.assertEqual(after.at(2, 3).occupant, 'A')
        self.assertIsNone(after.at(2, 3).territory)
        self.assertIsNone(grid.at(2, 3).occupant)

    def test_given_last_gap_in_ring_when_placing_then_enclosure_resolved(self):
        grid = Grid.parse("""
            . . . . .
            . A A A .
            . A . A .
            . A . A .
            . . . . .
        """)
        grid = resolve(grid)
        self.assertIsNone(grid.at(2, 2).territory)
        grid = place_piece(grid, (4, 2), 'A')
        # A on the edge cell (4, 2) seals the pocket.
        self.assertEqual(grid.at(2, 2).territory, 'A')
        self.assertEqual(grid.at(3, 2).territory, 'A')

    def test_given_owned_cell_when_opponent_places_there_then_territory_cleared(self):
        grid = resolve(Grid.parse("AAA\nA.A\nAAA"))
        self.assertEqual(grid.at(1, 1).territory, 'A')
        after = place_piece(grid, (1, 1), 'B')
        self.assertEqual(after.at(1, 1), Cell(occupant='B', territory=None))

    def test_given_alternating_moves_when_placing_then_each_step_resolved(self):
        grid = new_grid(3)
        player = 'A'
        for coord in [(0, 1), (2, 2), (1, 0), (2, 0), (1, 2), (0, 0), (2, 1)]:
            grid = place_piece(grid, coord, player)
            self.assertEqual(grid, resolve(grid))
            player = other_player(player)
        # A holds every orthogonal neighbour of the centre.
        self.assertEqual(grid.at(1, 1).territory, 'A')

    def test_given_occupied_cell_when_placing_then_cell_occupied_error(self):
        grid = place_piece(new_grid(3), (1, 1), 'A')
        with self.assertRaises(CellOccupied):
            place_piece(grid, (1, 1), 'B')

    def test_given_bad_arguments_when_placing_then_errors_raised(self):
        grid = new_grid(3)
        with self.assertRaises(InvalidCoordinate):
            place_piece(grid, (3, 0), 'A')
        with self.assertRaises(InvalidCoordinate):
            place_piece(grid, (0, -1), 'A')
        with self.assertRaises(InvalidPlayerId):
            place_piece(grid, (0, 0), 'C')


if __name__ == '__main__':
    unittest.main(verbosity=2)
