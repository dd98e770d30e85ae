import unittest

from crossword_helper.core.constants import EMPTY, Direction, ShiftDirection
from crossword_helper.core.exceptions import GridEditError, InvalidDimensionsError, PlacementError
from crossword_helper.core.models import Placement
from crossword_helper.engine.grid import CrosswordGrid


class GridConstructionTests(unittest.TestCase):
    def test_create_is_empty(self) -> None:
        grid = CrosswordGrid.create(4, 3)
        self.assertEqual((grid.width, grid.height), (4, 3))
        self.assertEqual(len(grid.rows), 3)
        self.assertTrue(all(len(row) == 4 for row in grid.rows))
        self.assertEqual(grid.filled_count(), 0)

    def test_create_rejects_bad_dimensions(self) -> None:
        for width, height in ((0, 5), (5, -1), ("5", 5), (True, 5), (5.0, 5)):
            with self.subTest(width=width, height=height):
                with self.assertRaises(InvalidDimensionsError):
                    CrosswordGrid.create(width, height)

    def test_from_rows_uppercases_and_checks_shape(self) -> None:
        grid = CrosswordGrid.from_rows([["a", None], [None, "b"]])
        self.assertEqual(grid.cell(0, 0), "A")
        self.assertEqual(grid.cell(1, 1), "B")
        with self.assertRaises(InvalidDimensionsError):
            CrosswordGrid.from_rows([["A", None], [None]])
        with self.assertRaises(GridEditError):
            CrosswordGrid.from_rows([["A", "7"]])

    def test_from_placements_replays_words(self) -> None:
        grid = CrosswordGrid.from_placements(
            5,
            5,
            [
                Placement("CAT", 1, 1, Direction.ACROSS),
                Placement("CAR", 1, 1, Direction.DOWN),
            ],
        )
        self.assertEqual(grid.cell(1, 3), "T")
        self.assertEqual(grid.cell(3, 1), "R")
        self.assertEqual(grid.filled_count(), 5)

    def test_from_placements_rejects_conflicts_and_overflow(self) -> None:
        with self.assertRaises(PlacementError):
            CrosswordGrid.from_placements(
                5,
                5,
                [
                    Placement("CAT", 0, 0, Direction.ACROSS),
                    Placement("DOG", 0, 0, Direction.DOWN),
                ],
            )
        with self.assertRaises(PlacementError):
            CrosswordGrid.from_placements(5, 5, [Placement("HORSES", 0, 0, Direction.ACROSS)])


class GridEditTests(unittest.TestCase):
    def test_with_word_returns_new_grid(self) -> None:
        grid = CrosswordGrid.create(5, 5)
        updated = grid.with_word("DOG", 0, 2, Direction.DOWN)
        self.assertEqual(grid.filled_count(), 0)
        self.assertEqual([updated.cell(r, 2) for r in range(3)], ["D", "O", "G"])

    def test_has_letter_is_false_outside_grid(self) -> None:
        grid = CrosswordGrid.create(3, 3).with_cells([(0, 0, "a")])
        self.assertTrue(grid.has_letter(0, 0))
        self.assertFalse(grid.has_letter(-1, 0))
        self.assertFalse(grid.has_letter(0, 3))

    def test_with_cells_sets_and_clears(self) -> None:
        grid = CrosswordGrid.create(3, 3).with_cells([(1, 1, "q"), (0, 2, "Z")])
        self.assertEqual(grid.cell(1, 1), "Q")
        cleared = grid.with_cells([(1, 1, None)])
        self.assertIs(cleared.cell(1, 1), EMPTY)
        self.assertEqual(cleared.cell(0, 2), "Z")

    def test_with_cells_rejects_bad_edits(self) -> None:
        grid = CrosswordGrid.create(3, 3)
        with self.assertRaises(GridEditError):
            grid.with_cells([(3, 0, "A")])
        with self.assertRaises(GridEditError):
            grid.with_cells([(0, 0, "AB")])
        with self.assertRaises(GridEditError):
            grid.with_cells([(0, 0, "1")])


class GridShiftTests(unittest.TestCase):
    def test_shift_moves_all_letters(self) -> None:
        grid = CrosswordGrid.create(4, 4).with_word("AB", 1, 1, Direction.ACROSS)
        moved = grid.shifted(ShiftDirection.UP)
        self.assertEqual(moved.cell(0, 1), "A")
        self.assertEqual(moved.cell(0, 2), "B")
        self.assertEqual(moved.filled_count(), 2)

    def test_shift_blocked_by_occupied_edge(self) -> None:
        grid = CrosswordGrid.create(4, 4).with_word("AB", 0, 1, Direction.ACROSS)
        self.assertFalse(grid.can_shift(ShiftDirection.UP))
        self.assertTrue(grid.can_shift(ShiftDirection.DOWN))
        self.assertEqual(grid.shifted(ShiftDirection.UP), grid)

    def test_shift_to_edge(self) -> None:
        grid = CrosswordGrid.create(5, 5).with_word("AB", 1, 1, Direction.DOWN)
        moved = grid.shifted(ShiftDirection.RIGHT, to_edge=True)
        self.assertEqual(moved.cell(1, 4), "A")
        self.assertEqual(moved.cell(2, 4), "B")
        moved = moved.shifted(ShiftDirection.DOWN, to_edge=True)
        self.assertEqual(moved.cell(3, 4), "A")
        self.assertEqual(moved.cell(4, 4), "B")

    def test_shift_empty_grid_to_edge_terminates(self) -> None:
        grid = CrosswordGrid.create(3, 3)
        self.assertEqual(grid.shifted(ShiftDirection.LEFT, to_edge=True), grid)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
