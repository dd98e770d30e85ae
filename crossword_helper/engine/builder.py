"""Single layout attempt: greedy placement in a fixed order plus retry sweeps."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from ..core.constants import Direction
from ..core.models import LayoutResult, Placement
from .grid import CrosswordGrid
from .search import find_valid_placements, score_placement
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def attempt_placement(
    words: Sequence[str],
    width: int,
    height: int,
    first_direction: Direction = Direction.ACROSS,
) -> LayoutResult:
    """Place ``words`` in the given order, never undoing a committed placement.

    Words that cannot cross anything on the first pass are deferred and
    retried against the growing layout until a full sweep places nothing.
    """

    grid = CrosswordGrid.create(width, height)
    placements: List[Placement] = []
    deferred: List[str] = []

    for word in words:
        placed = _place_best(grid, word, placements, not placements, first_direction)
        if placed is None:
            deferred.append(word)
            continue
        grid, placement = placed
        placements.append(placement)

    sweep = 0
    made_progress = True
    while made_progress and deferred:
        sweep += 1
        made_progress = False
        still_deferred: List[str] = []
        for word in deferred:
            placed = _place_best(grid, word, placements, False, first_direction)
            if placed is None:
                still_deferred.append(word)
                continue
            grid, placement = placed
            placements.append(placement)
            made_progress = True
        LOGGER.debug(
            "Retry sweep %d placed %d of %d deferred words",
            sweep,
            len(deferred) - len(still_deferred),
            len(deferred),
        )
        deferred = still_deferred

    return LayoutResult(grid=grid, placements=placements, unplaced_words=deferred)


def _place_best(
    grid: CrosswordGrid,
    word: str,
    placements: Sequence[Placement],
    is_first_word: bool,
    first_direction: Direction,
) -> Optional[Tuple[CrosswordGrid, Placement]]:
    candidates = find_valid_placements(grid, word, placements, is_first_word, first_direction)
    if not candidates:
        return None
    # max() keeps the earliest candidate among equal scores.
    best = max(candidates, key=score_placement)
    placement = Placement(word=word, row=best.row, col=best.col, direction=best.direction)
    return grid.with_word(word, best.row, best.col, best.direction), placement
