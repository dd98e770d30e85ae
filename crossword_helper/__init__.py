"""Crossword layout helper.

This package exposes the public API surface via:

- ``crossword_helper.generate``: lay out a word list on a fixed-size grid.
- ``crossword_helper.number``: assign clue numbers to a finished grid.
- ``crossword_helper.engine.generator.CrosswordGenerator``: the configurable
  multi-strategy generator behind ``generate``.
- ``crossword_helper.io.layout_store``: save and load layout documents.
"""

from typing import Iterable, Optional

from .core.models import LayoutResult, NumberingResult
from .engine.generator import CrosswordGenerator, GeneratorConfig, generate_crossword
from .engine.grid import CrosswordGrid
from .engine.numbering import generate_numbering
from .io.layout_store import LayoutDocument, load_layout, save_layout


def generate(
    words: Iterable[str],
    width: int,
    height: int,
    seed: Optional[int] = None,
) -> LayoutResult:
    return generate_crossword(words, width, height, seed=seed)


def number(grid: CrosswordGrid) -> NumberingResult:
    return generate_numbering(grid)


__all__ = [
    "CrosswordGenerator",
    "CrosswordGrid",
    "GeneratorConfig",
    "LayoutDocument",
    "LayoutResult",
    "NumberingResult",
    "generate",
    "generate_numbering",
    "load_layout",
    "number",
    "save_layout",
]

__version__ = "0.1.0"
