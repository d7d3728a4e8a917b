from __future__ import annotations

import re
from collections.abc import Set

from resume_ats.taxonomy import STOP_WORDS

_NON_WORD_RE = re.compile(r"[^\w\s]|_")
_MIN_TOKEN_CHARS = 3


class TextNormalizer:
    """Lower-cases text, blanks out punctuation and drops short tokens and stop words."""

    def __init__(self, stop_words: Set[str] = STOP_WORDS) -> None:
        self._stop_words = frozenset(stop_words)

    @property
    def stop_words(self) -> frozenset[str]:
        return self._stop_words

    def tokens(self, text: str) -> list[str]:
        cleaned = _NON_WORD_RE.sub(" ", (text or "").lower())
        return [
            token
            for token in cleaned.split()
            if len(token) >= _MIN_TOKEN_CHARS and token not in self._stop_words
        ]

    def normalize(self, text: str) -> str:
        return " ".join(self.tokens(text))
