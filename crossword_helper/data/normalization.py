"""Word list parsing and normalization helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from ..core.constants import MIN_WORD_COUNT
from ..core.exceptions import InvalidWordError
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

SEPARATOR_RE = re.compile(r"[\s\-]+")
WORD_RE = re.compile(r"^[A-Z]+$")


@dataclass
class WordList:
    """Canonical words plus the display form of any word that was reshaped."""

    words: List[str] = field(default_factory=list)
    display_names: Dict[str, str] = field(default_factory=dict)

    def display_name(self, word: str) -> str:
        return self.display_names.get(word, word)


def normalize_words(words: Iterable[str]) -> List[str]:
    """Uppercase and trim ``words``, dropping blanks and repeats (first one wins)."""

    cleaned: List[str] = []
    seen = set()
    for raw in words:
        word = raw.strip().upper()
        if not word:
            continue
        if word in seen:
            LOGGER.warning("Ignoring repeated word %s", word)
            continue
        seen.add(word)
        cleaned.append(word)
    return cleaned


def canonical_word(text: str) -> str:
    """Return the grid form of ``text``: uppercase letters with spaces and hyphens removed."""

    word = SEPARATOR_RE.sub("", text.strip().upper())
    if not WORD_RE.match(word):
        raise InvalidWordError(f'Invalid word "{text.strip()}": only letters A-Z are allowed')
    return word


def parse_word_list(lines: Iterable[str], min_words: int = MIN_WORD_COUNT) -> WordList:
    """Validate user-entered lines, one word or phrase per line.

    Blank lines and ``#`` comments are skipped. Phrases such as ``ICE CREAM``
    are placed as ``ICECREAM`` and remember their display form.
    """

    result = WordList()
    for line in lines:
        text = line.strip()
        if not text or text.startswith("#"):
            continue
        word = canonical_word(text)
        if word in result.words:
            raise InvalidWordError(f"Duplicate word detected: {word}")
        result.words.append(word)
        display = " ".join(text.upper().split())
        if display != word:
            result.display_names[word] = display

    if len(result.words) < min_words:
        raise InvalidWordError(f"Please enter at least {min_words} words")
    return result


__all__ = ["WordList", "normalize_words", "canonical_word", "parse_word_list"]
