"""Grid representation and helper utilities.

A :class:`CrosswordGrid` is an immutable value: every placement, edit or
shift returns a new grid, so layout attempts can be compared and discarded
without copying bookkeeping around.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, Tuple

from ..core.constants import EMPTY, Bounds, Direction, ShiftDirection
from ..core.exceptions import GridEditError, InvalidDimensionsError, PlacementError
from ..core.models import Placement
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

Cell = Optional[str]
Row = Tuple[Cell, ...]
CellChange = Tuple[int, int, Optional[str]]


def check_dimensions(width: int, height: int) -> None:
    """Raise :class:`InvalidDimensionsError` unless both sizes are positive integers."""

    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise InvalidDimensionsError(f"Grid {name} must be a positive integer, got {value!r}")


def _is_letter(value: object) -> bool:
    return isinstance(value, str) and len(value) == 1 and "A" <= value <= "Z"


@dataclass(frozen=True)
class CrosswordGrid:
    """A ``height`` x ``width`` matrix of empty cells and uppercase letters."""

    width: int
    height: int
    rows: Tuple[Row, ...]

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def create(cls, width: int, height: int) -> CrosswordGrid:
        check_dimensions(width, height)
        blank: Row = (EMPTY,) * width
        return cls(width=width, height=height, rows=tuple(blank for _ in range(height)))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Cell]]) -> CrosswordGrid:
        """Build a grid from nested sequences, e.g. the output of :meth:`to_rows`."""

        height = len(rows)
        width = len(rows[0]) if height else 0
        converted: List[Row] = []
        for r, row in enumerate(rows):
            if len(row) != width:
                raise InvalidDimensionsError(
                    f"Row {r} has {len(row)} cells, expected {width}"
                )
            cells: List[Cell] = []
            for c, value in enumerate(row):
                if value is not EMPTY:
                    value = str(value).upper()
                    if not _is_letter(value):
                        raise GridEditError(f"Invalid cell value {value!r} at ({r},{c})")
                cells.append(value)
            converted.append(tuple(cells))
        return cls(width=width, height=height, rows=tuple(converted))

    @classmethod
    def from_placements(
        cls, width: int, height: int, placements: Iterable[Placement]
    ) -> CrosswordGrid:
        """Replay placements onto a blank grid.

        Every span is checked against the bounds and the letters already
        written before anything is committed.
        """

        check_dimensions(width, height)
        bounds = Bounds(rows=height, cols=width)
        cells: List[List[Cell]] = [[EMPTY] * width for _ in range(height)]
        for placement in placements:
            coords = list(placement.cells())
            for row, col in coords:
                if not bounds.contains(row, col):
                    raise PlacementError(
                        f"Placement of {placement.word!r} at ({placement.row},{placement.col}) "
                        f"{placement.direction.value} leaves the {width}x{height} grid"
                    )
            for (row, col), letter in zip(coords, placement.word):
                existing = cells[row][col]
                if existing is not EMPTY and existing != letter:
                    raise PlacementError(
                        f"Letter conflict at ({row},{col}): existing {existing!r} vs {letter!r}"
                    )
                cells[row][col] = letter
        LOGGER.debug("Replayed placements onto a %sx%s grid", width, height)
        return cls(width=width, height=height, rows=tuple(tuple(row) for row in cells))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def bounds(self) -> Bounds:
        return Bounds(rows=self.height, cols=self.width)

    def cell(self, row: int, col: int) -> Cell:
        return self.rows[row][col]

    def has_letter(self, row: int, col: int) -> bool:
        """True when ``(row, col)`` is inside the grid and holds a letter."""
        return self.bounds.contains(row, col) and self.rows[row][col] is not EMPTY

    def filled_count(self) -> int:
        return sum(1 for row in self.rows for value in row if value is not EMPTY)

    def to_rows(self) -> List[List[Cell]]:
        return [list(row) for row in self.rows]

    # ------------------------------------------------------------------
    # Derived grids
    # ------------------------------------------------------------------
    def with_word(self, word: str, row: int, col: int, direction: Direction) -> CrosswordGrid:
        """Return a copy with ``word`` written from ``(row, col)``; callers validate first."""

        cells = self.to_rows()
        dr, dc = direction.step
        for index, letter in enumerate(word):
            cells[row + dr * index][col + dc * index] = letter
        return self._replace_cells(cells)

    def with_cells(self, changes: Iterable[CellChange]) -> CrosswordGrid:
        """Apply manual edits; a ``None`` letter clears the cell."""

        cells = self.to_rows()
        for row, col, letter in changes:
            if not self.bounds.contains(row, col):
                raise GridEditError(f"Cell ({row},{col}) is outside the grid")
            if letter is not EMPTY:
                letter = str(letter).upper()
                if not _is_letter(letter):
                    raise GridEditError(f"Invalid letter {letter!r} for cell ({row},{col})")
            cells[row][col] = letter
        return self._replace_cells(cells)

    def can_shift(self, direction: ShiftDirection) -> bool:
        """A shift is possible when the edge it moves towards is completely empty."""

        if direction == ShiftDirection.UP:
            edge = self.rows[0] if self.height else ()
        elif direction == ShiftDirection.DOWN:
            edge = self.rows[-1] if self.height else ()
        elif direction == ShiftDirection.LEFT:
            edge = tuple(row[0] for row in self.rows if row)
        else:
            edge = tuple(row[-1] for row in self.rows if row)
        return all(value is EMPTY for value in edge)

    def shifted(self, direction: ShiftDirection, to_edge: bool = False) -> CrosswordGrid:
        """Move every letter one cell (or as far as possible) towards ``direction``."""

        grid = self
        limit = (self.height if direction in (ShiftDirection.UP, ShiftDirection.DOWN) else self.width)
        for _ in range(limit if to_edge else 1):
            if not grid.can_shift(direction):
                break
            grid = grid._shift_once(direction)
        return grid

    def _shift_once(self, direction: ShiftDirection) -> CrosswordGrid:
        dr, dc = direction.step
        cells: List[List[Cell]] = [[EMPTY] * self.width for _ in range(self.height)]
        for r, row in enumerate(self.rows):
            for c, value in enumerate(row):
                if value is EMPTY:
                    continue
                cells[r + dr][c + dc] = value
        return self._replace_cells(cells)

    def _replace_cells(self, cells: List[List[Cell]]) -> CrosswordGrid:
        return CrosswordGrid(
            width=self.width,
            height=self.height,
            rows=tuple(tuple(row) for row in cells),
        )
