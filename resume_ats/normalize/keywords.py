from __future__ import annotations

from collections import Counter
from collections.abc import Set

from resume_ats.taxonomy import TECH_TERMS

from .text import TextNormalizer

_MIN_FREQUENCY = 2
_LONG_TOKEN_CHARS = 5


class KeywordExtractor:
    """Derives significant terms from free text.

    A normalized token is a keyword when it repeats, when it is a known
    technical term, or when it is longer than five characters. Keywords are
    returned once each, in the order they first appear in the text.
    """

    def __init__(
        self,
        normalizer: TextNormalizer | None = None,
        tech_terms: Set[str] = TECH_TERMS,
    ) -> None:
        self._normalizer = normalizer or TextNormalizer()
        self._tech_terms = frozenset(tech_terms)

    @property
    def normalizer(self) -> TextNormalizer:
        return self._normalizer

    def extract(self, text: str) -> list[str]:
        tokens = self._normalizer.tokens(text)
        if not tokens:
            return []
        frequency = Counter(tokens)
        return [
            token
            for token, count in frequency.items()
            if count >= _MIN_FREQUENCY
            or token in self._tech_terms
            or len(token) > _LONG_TOKEN_CHARS
        ]
