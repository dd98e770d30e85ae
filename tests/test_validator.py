import unittest

from crossword_helper.core.constants import Direction
from crossword_helper.core.models import LayoutResult, Placement
from crossword_helper.engine.grid import CrosswordGrid
from crossword_helper.engine.validator import LayoutValidator, is_valid_placement


class PlacementRuleTests(unittest.TestCase):
    def setUp(self) -> None:
        self.grid = CrosswordGrid.create(10, 10)

    def test_word_must_fit_inside_grid(self) -> None:
        self.assertTrue(is_valid_placement(self.grid, "HELLO", 0, 5, Direction.ACROSS))
        self.assertFalse(is_valid_placement(self.grid, "HELLO", 0, 6, Direction.ACROSS))
        self.assertFalse(is_valid_placement(self.grid, "HELLO", 6, 0, Direction.DOWN))
        self.assertFalse(is_valid_placement(self.grid, "HELLO", -1, 0, Direction.DOWN))

    def test_existing_matching_letter_is_reused(self) -> None:
        grid = self.grid.with_cells([(0, 0, "H")])
        self.assertTrue(is_valid_placement(grid, "HELLO", 0, 0, Direction.ACROSS))

    def test_letter_after_end_blocks_placement(self) -> None:
        grid = self.grid.with_cells([(0, 5, "X")])
        self.assertFalse(is_valid_placement(grid, "HELLO", 0, 0, Direction.ACROSS))

    def test_letter_before_start_blocks_placement(self) -> None:
        grid = self.grid.with_cells([(1, 3, "X")])
        self.assertFalse(is_valid_placement(grid, "DOG", 2, 3, Direction.DOWN))

    def test_conflicting_letter_blocks_placement(self) -> None:
        grid = self.grid.with_cells([(0, 0, "X")])
        self.assertFalse(is_valid_placement(grid, "HELLO", 0, 0, Direction.ACROSS))

    def test_parallel_neighbour_blocks_new_cell(self) -> None:
        grid = self.grid.with_cells([(1, 2, "X")])
        self.assertFalse(is_valid_placement(grid, "HELLO", 0, 0, Direction.ACROSS))

    def test_crossing_ignores_neighbours_of_shared_cell(self) -> None:
        grid = self.grid.with_word("ABC", 0, 2, Direction.DOWN)
        self.assertTrue(is_valid_placement(grid, "XBY", 1, 1, Direction.ACROSS))


class LayoutValidatorTests(unittest.TestCase):
    def _layout(self) -> LayoutResult:
        placements = [
            Placement("CAT", 5, 3, Direction.ACROSS),
            Placement("CAR", 4, 4, Direction.DOWN),
        ]
        grid = CrosswordGrid.from_placements(10, 10, placements)
        return LayoutResult(grid=grid, placements=placements, unplaced_words=["DOG"])

    def test_valid_layout_passes(self) -> None:
        result = LayoutValidator().validate(self._layout(), ["CAT", "CAR", "DOG"])
        self.assertTrue(result.ok)
        self.assertEqual(result.messages, [])

    def test_grid_must_match_placements(self) -> None:
        layout = self._layout()
        layout.grid = layout.grid.with_cells([(0, 0, "Z")])
        result = LayoutValidator().validate(layout)
        self.assertFalse(result.ok)
        self.assertIn("replayed", result.messages[0])

    def test_rule_breaking_sequence_fails(self) -> None:
        placements = [
            Placement("CAT", 0, 0, Direction.ACROSS),
            Placement("DOG", 1, 0, Direction.ACROSS),
        ]
        grid = CrosswordGrid.from_placements(5, 5, placements)
        result = LayoutValidator().validate(LayoutResult(grid=grid, placements=placements))
        self.assertFalse(result.ok)

    def test_words_must_partition_input(self) -> None:
        layout = self._layout()
        layout.unplaced_words = ["DOG", "CAT"]
        self.assertFalse(LayoutValidator().validate(layout).ok)

        layout = self._layout()
        self.assertFalse(LayoutValidator().validate(layout, ["CAT", "CAR"]).ok)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
