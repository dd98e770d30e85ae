"""Lightweight HTTP client for Datamuse spelling-pattern lookups."""

from __future__ import annotations

import os
import re
from typing import Any, List

import requests

from ..core.exceptions import SuggestionLookupError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

NON_LETTER_RE = re.compile(r"[^A-Z]")


class DatamuseClient:
    """Minimal client around the public Datamuse ``/words`` endpoint."""

    API_BASE = "https://api.datamuse.com"

    def __init__(
        self,
        api_base_env: str = "DATAMUSE_API_BASE",
        timeout_seconds: float = 10.0,
        max_results: int = 30,
        max_suggestions: int = 10,
        session: requests.Session | None = None,
    ) -> None:
        self.api_base = os.environ.get(api_base_env, self.API_BASE).rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.max_results = max_results
        self.max_suggestions = max_suggestions
        self._http = session or requests.Session()

    def lookup(self, pattern: str) -> List[str]:
        """Return uppercase words whose letters fit ``pattern`` (``?`` = any letter)."""
        url = f"{self.api_base}/words"
        params = {"sp": pattern.lower(), "max": self.max_results}
        try:
            response = self._http.get(url, params=params, timeout=self.timeout_seconds)
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as exc:
            raise SuggestionLookupError(f"Datamuse request failed for {pattern!r}: {exc}") from exc

        suggestions = self._extract_words(payload, len(pattern))
        LOGGER.debug("Datamuse returned %d suggestions for %s", len(suggestions), pattern)
        return suggestions[: self.max_suggestions]

    @staticmethod
    def _extract_words(payload: Any, length: int) -> List[str]:
        """Keep letters only and drop entries whose letter count differs from ``length``."""
        if not isinstance(payload, list):
            LOGGER.warning("Unexpected Datamuse payload: %r", payload)
            return []
        words: List[str] = []
        for item in payload:
            raw = item.get("word") if isinstance(item, dict) else None
            if not isinstance(raw, str):
                continue
            letters = NON_LETTER_RE.sub("", raw.upper())
            if len(letters) == length:
                words.append(letters)
        return words
