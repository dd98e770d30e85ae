"""Pretty-print helpers for crossword layouts."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING, List, Mapping, Optional

from ..core.constants import EMPTY, Direction

if TYPE_CHECKING:
    from ..core.models import ClueBook, LayoutResult, NumberingResult
    from ..engine.grid import CrosswordGrid


EMPTY_SYMBOL = "."


def format_grid(grid: CrosswordGrid) -> str:
    width = grid.width
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(grid.rows):
        symbols = [EMPTY_SYMBOL if value is EMPTY else value for value in row]
        row_render = " ".join(f"{symbol:>2}" for symbol in symbols)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_entries(
    numbering: NumberingResult,
    display_names: Optional[Mapping[str, str]] = None,
    clues: Optional[ClueBook] = None,
) -> str:
    """List the numbered entries per direction, with clues when present."""

    display_names = display_names or {}
    lines: List[str] = []
    for direction in (Direction.ACROSS, Direction.DOWN):
        lines.append(direction.value.title())
        for entry in numbering.entries(direction):
            label = display_names.get(entry.word, entry.word)
            clue = clues.get(direction, entry.word) if clues else None
            suffix = f" - {clue}" if clue else ""
            lines.append(f"  {entry.number:>3}. {label} ({entry.row},{entry.col}){suffix}")
    return "\n".join(lines)


def print_layout_report(
    result: LayoutResult,
    numbering: NumberingResult,
    *,
    display_names: Optional[Mapping[str, str]] = None,
    clues: Optional[ClueBook] = None,
    stream=None,
) -> None:
    """Print grid, entries and stats for a generated or loaded layout."""

    stream = stream or sys.stdout
    grid = result.grid
    print(format_grid(grid), file=stream)
    print(file=stream)
    print(format_entries(numbering, display_names, clues), file=stream)

    total_cells = grid.width * grid.height
    letter_cells = grid.filled_count()
    lengths = [len(word) for word in result.placed_words]
    length_dist = Counter(lengths)

    print(file=stream)
    print("--- Layout ---", file=stream)
    print(f"  Size:          {grid.height} x {grid.width} ({total_cells} cells)", file=stream)
    print(f"  Letters:       {letter_cells} ({letter_cells / total_cells * 100:.0f}%)", file=stream)
    print(f"  Placed words:  {len(result.placements)}", file=stream)
    if lengths:
        dist_parts = [f"{l}:{c}" for l, c in sorted(length_dist.items())]
        print(f"  Distribution:  {' '.join(dist_parts)}", file=stream)
    if result.strategy:
        print(f"  Strategy:      {result.strategy}", file=stream)
    if result.unplaced_words:
        print(file=stream)
        print(
            "Warning: the following words could not be placed: "
            + ", ".join(result.unplaced_words),
            file=stream,
        )
