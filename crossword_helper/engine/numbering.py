"""Across/Down numbering derived from grid contents."""

from __future__ import annotations

from typing import List, Optional

from ..core.constants import Direction
from ..core.models import NumberedEntry, NumberingResult
from .grid import CrosswordGrid


def generate_numbering(grid: CrosswordGrid) -> NumberingResult:
    """Scan L→R, T→B and number every cell that starts an entry.

    Numbering depends on the letters alone, never on how they got there,
    so it is recomputed from scratch after every edit.
    """

    if not grid.height or not grid.width:
        return NumberingResult()

    cell_numbers: List[List[Optional[int]]] = [[None] * grid.width for _ in range(grid.height)]
    across: List[NumberedEntry] = []
    down: List[NumberedEntry] = []

    counter = 1
    for r in range(grid.height):
        for c in range(grid.width):
            starts_across = starts_entry(grid, r, c, Direction.ACROSS)
            starts_down = starts_entry(grid, r, c, Direction.DOWN)
            if not (starts_across or starts_down):
                continue
            cell_numbers[r][c] = counter
            if starts_across:
                across.append(NumberedEntry(counter, read_entry(grid, r, c, Direction.ACROSS), r, c))
            if starts_down:
                down.append(NumberedEntry(counter, read_entry(grid, r, c, Direction.DOWN), r, c))
            counter += 1

    return NumberingResult(cell_numbers=cell_numbers, across_words=across, down_words=down)


def starts_entry(grid: CrosswordGrid, row: int, col: int, direction: Direction) -> bool:
    """Letter here, nothing before it, and a letter after it (entries are 2+ long)."""
    dr, dc = direction.step
    return (
        grid.has_letter(row, col)
        and not grid.has_letter(row - dr, col - dc)
        and grid.has_letter(row + dr, col + dc)
    )


def read_entry(grid: CrosswordGrid, row: int, col: int, direction: Direction) -> str:
    dr, dc = direction.step
    letters: List[str] = []
    while grid.has_letter(row, col):
        letters.append(grid.cell(row, col))
        row += dr
        col += dc
    return "".join(letters)
