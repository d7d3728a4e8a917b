from .keywords import KeywordExtractor
from .text import TextNormalizer

__all__ = ["KeywordExtractor", "TextNormalizer"]
