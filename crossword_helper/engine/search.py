"""Intersection-driven search for legal word placements."""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from ..core.constants import INTERSECTION_WEIGHT, Direction
from ..core.models import CandidatePlacement, Placement
from .grid import CrosswordGrid
from .validator import is_valid_placement


def find_valid_placements(
    grid: CrosswordGrid,
    word: str,
    placements: Sequence[Placement],
    is_first_word: bool = False,
    first_direction: Direction = Direction.ACROSS,
) -> List[CandidatePlacement]:
    """Enumerate every legal placement of ``word`` against the current layout.

    The first word is only tried centered on the grid. Any later word must
    cross a placed word: each pair of equal letters between ``word`` and a
    placed word yields the one perpendicular position aligning them.
    Candidates come back in discovery order, one per distinct position.
    """

    if is_first_word:
        return _centered_candidate(grid, word, first_direction)

    found: Dict[Tuple[int, int, Direction], CandidatePlacement] = {}
    for placed in placements:
        direction = placed.direction.perpendicular
        for i, letter in enumerate(word):
            for j, placed_letter in enumerate(placed.word):
                if letter != placed_letter:
                    continue
                if direction == Direction.ACROSS:
                    row, col = placed.row + j, placed.col - i
                else:
                    row, col = placed.row - i, placed.col + j
                key = (row, col, direction)
                if key in found:
                    continue
                if not is_valid_placement(grid, word, row, col, direction):
                    continue
                found[key] = CandidatePlacement(
                    row=row,
                    col=col,
                    direction=direction,
                    intersections=count_intersections(grid, word, row, col, direction),
                    distance_from_center=distance_from_center(grid, word, row, col, direction),
                )
    return list(found.values())


def score_placement(candidate: CandidatePlacement) -> float:
    """Higher is better: crossings dominate, centrality breaks ties."""
    return candidate.intersections * INTERSECTION_WEIGHT - candidate.distance_from_center


def count_intersections(
    grid: CrosswordGrid, word: str, row: int, col: int, direction: Direction
) -> int:
    dr, dc = direction.step
    return sum(1 for i in range(len(word)) if grid.has_letter(row + dr * i, col + dc * i))


def distance_from_center(
    grid: CrosswordGrid, word: str, row: int, col: int, direction: Direction
) -> float:
    """L1 distance from the word's midpoint to the grid's geometric center."""

    half = len(word) / 2
    mid_row = row if direction.is_horizontal else row + half
    mid_col = col + half if direction.is_horizontal else col
    return abs(mid_row - grid.height / 2) + abs(mid_col - grid.width / 2)


def _centered_candidate(
    grid: CrosswordGrid, word: str, direction: Direction
) -> List[CandidatePlacement]:
    if direction.is_horizontal:
        row, col = grid.height // 2, (grid.width - len(word)) // 2
    else:
        row, col = (grid.height - len(word)) // 2, grid.width // 2
    if not is_valid_placement(grid, word, row, col, direction):
        return []
    return [CandidatePlacement(row, col, direction, intersections=0, distance_from_center=0.0)]
