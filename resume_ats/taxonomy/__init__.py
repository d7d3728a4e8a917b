from functools import lru_cache

from .lexicon import SECTION_TERMS, STOP_WORDS, TECH_TERMS, Lexicon


@lru_cache(maxsize=1)
def get_default_lexicon() -> Lexicon:
    return Lexicon()


__all__ = ["Lexicon", "STOP_WORDS", "TECH_TERMS", "SECTION_TERMS", "get_default_lexicon"]
