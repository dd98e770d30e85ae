"""Data models supporting the crossword layout engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Tuple

from .constants import Direction

if TYPE_CHECKING:
    from ..engine.grid import CrosswordGrid


@dataclass(frozen=True)
class Placement:
    """A committed word position; ``row``/``col`` locate the first letter."""

    word: str
    row: int
    col: int
    direction: Direction

    @property
    def is_horizontal(self) -> bool:
        return self.direction.is_horizontal

    def cells(self) -> Iterator[Tuple[int, int]]:
        dr, dc = self.direction.step
        for index in range(len(self.word)):
            yield self.row + dr * index, self.col + dc * index


@dataclass(frozen=True)
class CandidatePlacement:
    """A legal but uncommitted placement, only used for ranking."""

    row: int
    col: int
    direction: Direction
    intersections: int
    distance_from_center: float


@dataclass
class LayoutResult:
    grid: CrosswordGrid
    placements: List[Placement] = field(default_factory=list)
    unplaced_words: List[str] = field(default_factory=list)
    strategy: Optional[str] = None

    @property
    def placed_words(self) -> List[str]:
        return [placement.word for placement in self.placements]

    @property
    def is_complete(self) -> bool:
        return not self.unplaced_words


@dataclass(frozen=True)
class NumberedEntry:
    number: int
    word: str
    row: int
    col: int


@dataclass
class NumberingResult:
    """Cell numbers plus the realized Across/Down entries of one grid."""

    cell_numbers: List[List[Optional[int]]] = field(default_factory=list)
    across_words: List[NumberedEntry] = field(default_factory=list)
    down_words: List[NumberedEntry] = field(default_factory=list)

    def entries(self, direction: Direction) -> List[NumberedEntry]:
        return self.across_words if direction == Direction.ACROSS else self.down_words


@dataclass
class ClueBook:
    """Clue texts keyed by direction, then by canonical word.

    Keying by word rather than number keeps a clue attached to its answer
    when the grid is edited and renumbered.
    """

    across: Dict[str, str] = field(default_factory=dict)
    down: Dict[str, str] = field(default_factory=dict)

    def _bucket(self, direction: Direction) -> Dict[str, str]:
        return self.across if direction == Direction.ACROSS else self.down

    def set(self, direction: Direction, word: str, text: str) -> None:
        self._bucket(direction)[word.upper()] = text

    def get(self, direction: Direction, word: str) -> Optional[str]:
        return self._bucket(direction).get(word.upper())

    def pruned(self, numbering: NumberingResult) -> ClueBook:
        """Return a copy holding only clues whose words are still in the grid."""
        across_words = {entry.word for entry in numbering.across_words}
        down_words = {entry.word for entry in numbering.down_words}
        return ClueBook(
            across={word: text for word, text in self.across.items() if word in across_words},
            down={word: text for word, text in self.down.items() if word in down_words},
        )
