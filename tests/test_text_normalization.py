import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.normalize.keywords import KeywordExtractor  # noqa: E402
from resume_ats.normalize.text import TextNormalizer  # noqa: E402
from resume_ats.taxonomy import STOP_WORDS, TECH_TERMS  # noqa: E402


class TextNormalizerTests(unittest.TestCase):
    def test_strips_punctuation_stop_words_and_short_tokens(self):
        normalizer = TextNormalizer()
        normalized = normalizer.normalize("I'm a Senior   Software-Engineer!!")
        self.assertEqual(normalized, "senior software engineer")
        self.assertNotIn("a", normalized.split())

    def test_drops_common_stop_words(self):
        normalizer = TextNormalizer()
        self.assertEqual(
            normalizer.normalize("The team will build scalable APIs"),
            "team build scalable apis",
        )

    def test_underscore_is_treated_as_punctuation(self):
        self.assertEqual(TextNormalizer().normalize("snake_case"), "snake case")

    def test_empty_input(self):
        normalizer = TextNormalizer()
        self.assertEqual(normalizer.normalize(""), "")
        self.assertEqual(normalizer.tokens(""), [])

    def test_stop_words_are_injectable(self):
        normalizer = TextNormalizer(stop_words={"python"})
        self.assertEqual(normalizer.normalize("Python and Go"), "and")

    def test_default_lexicon_sizes(self):
        self.assertGreaterEqual(len(STOP_WORDS), 170)
        self.assertIn("docker", TECH_TERMS)


class KeywordExtractorTests(unittest.TestCase):
    def test_empty_text_has_no_keywords(self):
        self.assertEqual(KeywordExtractor().extract(""), [])

    def test_repetition_does_not_duplicate_keywords(self):
        self.assertEqual(KeywordExtractor().extract("python python python"), ["python"])

    def test_frequency_tech_term_and_length_rules(self):
        extractor = KeywordExtractor()
        self.assertEqual(extractor.extract("Build build tools"), ["build"])
        self.assertEqual(
            extractor.extract("Kubernetes experience with Docker and git"),
            ["kubernetes", "experience", "docker", "git"],
        )
        self.assertEqual(extractor.extract("Led the team"), [])

    def test_tech_terms_are_injectable(self):
        extractor = KeywordExtractor(tech_terms={"rust"})
        self.assertEqual(extractor.extract("rust go sql"), ["rust"])


if __name__ == "__main__":
    unittest.main()
