"""Crossword layout orchestration.

The single-attempt builder is greedy and order sensitive, so the generator
runs it under a fixed sequence of word orderings and first-word
orientations and keeps the attempt that places the most words:

  1. longest-first, first word across
  2. longest-first, first word down
  3. shortest-first, across
  4. shortest-first, down
  5+. ``shuffle_rounds`` random orders, each tried across then down

Generation stops at the first attempt that places every word.
"""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence

from ..core.constants import Direction
from ..core.models import LayoutResult
from ..data.normalization import normalize_words
from .builder import attempt_placement
from .grid import check_dimensions
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class GeneratorConfig:
    width: int
    height: int
    seed: Optional[int] = None
    shuffle_rounds: int = 4


@dataclass(frozen=True)
class Strategy:
    name: str
    words: Sequence[str]
    first_direction: Direction


class CrosswordGenerator:
    """Runs layout attempts under several strategies and keeps the best one."""

    def __init__(self, config: GeneratorConfig, rng: Optional[random.Random] = None) -> None:
        check_dimensions(config.width, config.height)
        self.config = config
        self.rng = rng or random.Random(config.seed)

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, words: Iterable[str]) -> LayoutResult:
        cleaned = normalize_words(words)
        LOGGER.info(
            "Generating %sx%s layout for %d words",
            self.config.width,
            self.config.height,
            len(cleaned),
        )

        strategies = self._strategies(cleaned)
        best = self._attempt(next(strategies), len(cleaned))
        attempts = 1
        for strategy in strategies:
            if best.is_complete:
                break
            attempts += 1
            result = self._attempt(strategy, len(cleaned))
            if len(result.placements) > len(best.placements):
                best = result

        if best.unplaced_words:
            LOGGER.info(
                "Placed %d/%d words after %d attempts; unplaced: %s",
                len(best.placements),
                len(cleaned),
                attempts,
                ", ".join(best.unplaced_words),
            )
        else:
            LOGGER.info(
                "Placed all %d words with strategy %s after %d attempts",
                len(cleaned),
                best.strategy,
                attempts,
            )
        return best

    def _attempt(self, strategy: Strategy, total: int) -> LayoutResult:
        result = attempt_placement(
            strategy.words, self.config.width, self.config.height, strategy.first_direction
        )
        result.strategy = strategy.name
        LOGGER.debug("Strategy %s placed %d/%d words", strategy.name, len(result.placements), total)
        return result

    # ------------------------------------------------------------------
    # Strategies
    # ------------------------------------------------------------------
    def _strategies(self, words: List[str]) -> Iterator[Strategy]:
        """Yield strategies lazily so shuffles only consume randomness when reached."""

        longest_first = sorted(words, key=len, reverse=True)
        yield Strategy("longest-first-across", longest_first, Direction.ACROSS)
        yield Strategy("longest-first-down", longest_first, Direction.DOWN)

        shortest_first = sorted(words, key=len)
        yield Strategy("shortest-first-across", shortest_first, Direction.ACROSS)
        yield Strategy("shortest-first-down", shortest_first, Direction.DOWN)

        for round_index in range(1, self.config.shuffle_rounds + 1):
            shuffled = list(words)
            self.rng.shuffle(shuffled)
            yield Strategy(f"shuffle-{round_index}-across", shuffled, Direction.ACROSS)
            yield Strategy(f"shuffle-{round_index}-down", shuffled, Direction.DOWN)


def generate_crossword(
    words: Iterable[str],
    width: int,
    height: int,
    seed: Optional[int] = None,
) -> LayoutResult:
    """Convenience wrapper around :class:`CrosswordGenerator`."""
    return CrosswordGenerator(GeneratorConfig(width=width, height=height, seed=seed)).generate(words)
