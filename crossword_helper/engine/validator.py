"""Placement legality rules and deterministic validation of finished layouts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Set

from ..core.constants import EMPTY, Direction
from ..core.exceptions import PlacementError, ValidationError
from ..core.models import LayoutResult
from .grid import CrosswordGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def is_valid_placement(
    grid: CrosswordGrid, word: str, row: int, col: int, direction: Direction
) -> bool:
    """Return True when ``word`` may be written at ``(row, col)`` in ``direction``.

    The span must fit the grid, must not touch another letter end-to-end,
    must agree with every letter it crosses, and every cell it newly fills
    must have empty neighbours on both sides across the word's axis.
    """

    length = len(word)
    dr, dc = direction.step
    end_row = row + dr * (length - 1)
    end_col = col + dc * (length - 1)
    bounds = grid.bounds
    if not (bounds.contains(row, col) and bounds.contains(end_row, end_col)):
        return False

    if grid.has_letter(row - dr, col - dc):
        return False
    if grid.has_letter(end_row + dr, end_col + dc):
        return False

    # Perpendicular offset: above/below for ACROSS, left/right for DOWN.
    pr, pc = dc, dr
    for index, letter in enumerate(word):
        r = row + dr * index
        c = col + dc * index
        existing = grid.cell(r, c)
        if existing is not EMPTY:
            if existing != letter:
                return False
            continue
        if grid.has_letter(r + pr, c + pc) or grid.has_letter(r - pr, c - pc):
            return False
    return True


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str] = field(default_factory=list)


class LayoutValidator:
    """Runs deterministic validation over a finished layout."""

    def validate(self, result: LayoutResult, words: Iterable[str] = ()) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_cells(result.grid)
            self._check_placement_sequence(result)
            self._check_word_partition(result, set(words))
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_cells(self, grid: CrosswordGrid) -> None:
        if len(grid.rows) != grid.height:
            raise ValidationError(f"Grid has {len(grid.rows)} rows, expected {grid.height}")
        for r, row in enumerate(grid.rows):
            if len(row) != grid.width:
                raise ValidationError(f"Row {r} has {len(row)} cells, expected {grid.width}")
            for c, value in enumerate(row):
                if value is EMPTY:
                    continue
                if not (isinstance(value, str) and len(value) == 1 and "A" <= value <= "Z"):
                    raise ValidationError(f"Invalid letter {value!r} at ({r},{c})")

    def _check_placement_sequence(self, result: LayoutResult) -> None:
        grid = result.grid
        replay = CrosswordGrid.create(grid.width, grid.height)
        for placement in result.placements:
            if not is_valid_placement(
                replay, placement.word, placement.row, placement.col, placement.direction
            ):
                raise ValidationError(
                    f"Placement of {placement.word!r} at ({placement.row},{placement.col}) "
                    f"{placement.direction.value} breaks the placement rules"
                )
            replay = replay.with_word(
                placement.word, placement.row, placement.col, placement.direction
            )
        try:
            rebuilt = CrosswordGrid.from_placements(grid.width, grid.height, result.placements)
        except PlacementError as exc:
            raise ValidationError(str(exc)) from exc
        if rebuilt != grid:
            raise ValidationError("Grid does not match the replayed placements")

    def _check_word_partition(self, result: LayoutResult, words: Set[str]) -> None:
        placed = result.placed_words
        if len(set(placed)) != len(placed):
            raise ValidationError("A word was placed more than once")
        if len(set(result.unplaced_words)) != len(result.unplaced_words):
            raise ValidationError("A word is listed as unplaced more than once")
        overlap = set(placed) & set(result.unplaced_words)
        if overlap:
            raise ValidationError(f"Words both placed and unplaced: {sorted(overlap)}")
        if words and set(placed) | set(result.unplaced_words) != words:
            raise ValidationError("Placed and unplaced words do not cover the input word set")
