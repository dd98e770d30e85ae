"""Layout document persistence.

A layout document is the exchange format shared with the editor front end.
It stores the grid size, the word list, display names, the committed
placements and the clues; the grid itself is rebuilt by replaying the
placements, so it is never stored.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..core.constants import Direction
from ..core.exceptions import InvalidDimensionsError, LayoutLoadError, PlacementError
from ..core.models import ClueBook, LayoutResult, Placement
from ..engine.grid import CrosswordGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

WORD_RE = re.compile(r"^[A-Z]+$")


@dataclass
class LayoutDocument:
    width: int
    height: int
    words: List[str] = field(default_factory=list)
    display_names: Dict[str, str] = field(default_factory=dict)
    placements: List[Placement] = field(default_factory=list)
    clues: ClueBook = field(default_factory=ClueBook)

    @classmethod
    def from_result(
        cls,
        result: LayoutResult,
        words: Optional[Sequence[str]] = None,
        display_names: Optional[Mapping[str, str]] = None,
        clues: Optional[ClueBook] = None,
    ) -> LayoutDocument:
        return cls(
            width=result.grid.width,
            height=result.grid.height,
            words=list(words) if words is not None else result.placed_words + result.unplaced_words,
            display_names=dict(display_names or {}),
            placements=list(result.placements),
            clues=clues or ClueBook(),
        )

    def build_grid(self) -> CrosswordGrid:
        return CrosswordGrid.from_placements(self.width, self.height, self.placements)

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            "gridWidth": self.width,
            "gridHeight": self.height,
            "words": list(self.words),
            "displayNames": dict(self.display_names),
            "placements": [
                {
                    "word": placement.word,
                    "row": placement.row,
                    "col": placement.col,
                    "isHorizontal": placement.is_horizontal,
                }
                for placement in self.placements
            ],
            "clues": {"across": dict(self.clues.across), "down": dict(self.clues.down)},
        }

    @classmethod
    def from_dict(cls, data: Any) -> LayoutDocument:
        """Validate a decoded document; raises :class:`LayoutLoadError` on any defect."""

        if not isinstance(data, dict):
            raise LayoutLoadError("Layout document must be a JSON object")

        width = _require_int(data, "gridWidth")
        height = _require_int(data, "gridHeight")
        words = data.get("words")
        if not isinstance(words, list) or not all(isinstance(w, str) for w in words):
            raise LayoutLoadError("Field 'words' must be a list of strings")

        raw_placements = data.get("placements")
        if not isinstance(raw_placements, list):
            raise LayoutLoadError("Field 'placements' must be a list")
        placements = [_parse_placement(index, item) for index, item in enumerate(raw_placements)]

        document = cls(
            width=width,
            height=height,
            words=list(words),
            display_names=_string_map(data.get("displayNames") or {}, "displayNames"),
            placements=placements,
            clues=_parse_clues(data.get("clues") or {}),
        )
        try:
            document.build_grid()
        except (InvalidDimensionsError, PlacementError) as exc:
            raise LayoutLoadError(str(exc)) from exc
        return document


def save_layout(document: LayoutDocument, path: Path | str) -> Path:
    """Write ``document`` as indented UTF-8 JSON and return the path."""

    target = Path(path)
    target.write_text(json.dumps(document.to_dict(), ensure_ascii=False, indent=2), encoding="utf-8")
    LOGGER.info("Layout saved: %s (%d placements)", target, len(document.placements))
    return target


def load_layout(path: Path | str) -> LayoutDocument:
    source = Path(path)
    try:
        data = json.loads(source.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as exc:
        raise LayoutLoadError(f"Failed to load {source}: {exc}") from exc
    document = LayoutDocument.from_dict(data)
    LOGGER.info("Layout loaded: %s (%d placements)", source, len(document.placements))
    return document


# ----------------------------------------------------------------------
# Field parsing
# ----------------------------------------------------------------------
def _require_int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise LayoutLoadError(f"Field {key!r} must be an integer, got {value!r}")
    if value <= 0:
        raise LayoutLoadError(f"Field {key!r} must be positive, got {value}")
    return value


def _parse_placement(index: int, item: Any) -> Placement:
    if not isinstance(item, dict):
        raise LayoutLoadError(f"Placement {index} must be an object")
    word = item.get("word")
    if not isinstance(word, str) or not WORD_RE.match(word):
        raise LayoutLoadError(f"Placement {index} has an invalid word: {word!r}")
    row, col = item.get("row"), item.get("col")
    for name, value in (("row", row), ("col", col)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise LayoutLoadError(f"Placement {index} has a non-integer {name}: {value!r}")
    is_horizontal = item.get("isHorizontal")
    if not isinstance(is_horizontal, bool):
        raise LayoutLoadError(f"Placement {index} is missing a boolean 'isHorizontal'")
    return Placement(word=word, row=row, col=col, direction=Direction.from_horizontal(is_horizontal))


def _string_map(value: Any, name: str) -> Dict[str, str]:
    if not isinstance(value, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    ):
        raise LayoutLoadError(f"Field {name!r} must map strings to strings")
    return dict(value)


def _parse_clues(value: Any) -> ClueBook:
    if not isinstance(value, dict):
        raise LayoutLoadError("Field 'clues' must be an object")
    return ClueBook(
        across=_string_map(value.get("across") or {}, "clues.across"),
        down=_string_map(value.get("down") or {}, "clues.down"),
    )
