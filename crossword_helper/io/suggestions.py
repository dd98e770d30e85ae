"""Word suggestion collaborator interface and request session.

The layout engine never depends on a suggestion backend; editors use a
:class:`SuggestionSession` to look up words that fit a selected pattern.
"""

from __future__ import annotations

import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Callable, Iterable, List, Optional, Protocol, Tuple

from ..core.constants import EMPTY, WILDCARD
from ..engine.grid import CrosswordGrid
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

SuggestionCallback = Callable[[str, List[str]], None]


class SuggestionProvider(Protocol):
    def lookup(self, pattern: str) -> List[str]:
        """Return same-length uppercase words matching ``pattern``."""


def selected_run(
    grid: CrosswordGrid, cells: Iterable[Tuple[int, int]]
) -> Optional[List[Tuple[int, int]]]:
    """Order a selection as one unbroken run, top-to-bottom or left-to-right.

    The selection must hold at least two in-bounds cells on a single row or
    column with no gaps; anything else yields ``None``.
    """

    selected = sorted(set(cells))
    if len(selected) < 2:
        return None
    if not all(grid.bounds.contains(row, col) for row, col in selected):
        return None

    rows = {row for row, _ in selected}
    cols = {col for _, col in selected}
    if len(rows) == 1:
        positions = [col for _, col in selected]
    elif len(cols) == 1:
        positions = [row for row, _ in selected]
    else:
        return None
    if positions != list(range(positions[0], positions[0] + len(positions))):
        return None
    return selected


def pattern_from_cells(grid: CrosswordGrid, cells: Iterable[Tuple[int, int]]) -> Optional[str]:
    """Build a lookup pattern from selected cells, ``?`` marking empty ones."""

    run = selected_run(grid, cells)
    if run is None:
        return None
    letters = []
    for row, col in run:
        value = grid.cell(row, col)
        letters.append(WILDCARD if value is EMPTY else value)
    return "".join(letters)


def fill_suggestion(
    grid: CrosswordGrid, cells: Iterable[Tuple[int, int]], word: str
) -> CrosswordGrid:
    """Write ``word`` into the selected run.

    The grid comes back unchanged when the selection is not a run or its
    length differs from the word. Numbering must be recomputed afterwards.
    """

    run = selected_run(grid, cells)
    if run is None or len(run) != len(word):
        return grid
    return grid.with_cells((row, col, letter) for (row, col), letter in zip(run, word))


def is_lookup_pattern(pattern: Optional[str]) -> bool:
    """Only patterns mixing known letters and wildcards are worth a lookup."""
    if not pattern:
        return False
    return WILDCARD in pattern and any(char != WILDCARD for char in pattern)


class SuggestionSession:
    """Debounced, cancellable suggestion requests with stale-response protection.

    Each :meth:`request` supersedes the previous one. A superseded request
    stops waiting out its debounce delay, and if its lookup already started
    the result is dropped instead of being delivered.
    """

    def __init__(
        self,
        provider: SuggestionProvider,
        debounce_seconds: float = 0.3,
        max_workers: int = 2,
    ) -> None:
        self.provider = provider
        self.debounce_seconds = debounce_seconds
        self.latest: Optional[Tuple[str, List[str]]] = None
        self._executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="suggest")
        self._lock = threading.RLock()
        self._generation = 0
        self._superseded = threading.Event()

    def request(self, pattern: str, callback: Optional[SuggestionCallback] = None) -> Future:
        """Schedule a lookup; the future yields the suggestions or ``None`` if superseded."""
        with self._lock:
            self._superseded.set()
            self._superseded = threading.Event()
            self._generation += 1
            token = self._generation
            superseded = self._superseded
        return self._executor.submit(self._run, pattern, token, superseded, callback)

    def cancel(self) -> None:
        with self._lock:
            self._superseded.set()
            self._generation += 1

    def close(self) -> None:
        self.cancel()
        self._executor.shutdown(wait=True)

    def __enter__(self) -> SuggestionSession:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _run(
        self,
        pattern: str,
        token: int,
        superseded: threading.Event,
        callback: Optional[SuggestionCallback],
    ) -> Optional[List[str]]:
        if superseded.wait(self.debounce_seconds):
            return None
        try:
            suggestions = list(self.provider.lookup(pattern))
        except Exception as exc:
            # Any provider failure empties this pattern only.
            LOGGER.warning("Suggestion lookup failed for %s: %s", pattern, exc)
            suggestions = []

        with self._lock:
            if token != self._generation:
                LOGGER.debug("Discarding stale suggestions for %s", pattern)
                return None
            self.latest = (pattern, suggestions)
            if callback is not None:
                callback(pattern, suggestions)
        return suggestions
