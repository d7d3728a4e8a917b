import unittest
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.ai.pricing import calculate_cost, get_model_pricing  # noqa: E402
from resume_ats.core.config.scoring import get_scoring_config, get_scoring_value  # noqa: E402


class ScoringConfigTests(unittest.TestCase):
    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("ats.rule_based.weights.keyword_overlap"), 0.4)
        self.assertEqual(get_scoring_value("ats.rule_based.limits.keyword_improvements"), 10)

    def test_rule_based_weights_sum_to_one(self):
        weights = get_scoring_value("ats.rule_based.weights")
        self.assertAlmostEqual(sum(weights.values()), 1.0)

    def test_missing_path_returns_default(self):
        self.assertEqual(get_scoring_value("ats.nope.value", 7), 7)
        self.assertIsNone(get_scoring_value(""))


class PricingTests(unittest.TestCase):
    def test_known_model_cost(self):
        self.assertAlmostEqual(calculate_cost("gpt-4o", 1_000_000, 1_000_000), 12.5)

    def test_dated_snapshot_resolves_by_containment(self):
        self.assertEqual(
            get_model_pricing("gpt-4o-mini-2024-07-18"),
            get_model_pricing("gpt-4o-mini"),
        )

    def test_unknown_model_falls_back_with_warning(self):
        with self.assertLogs("resume_ats.ai.pricing", level="WARNING"):
            cost = calculate_cost("some-other-model", 1_000_000, 0)
        self.assertAlmostEqual(cost, 0.15)


if __name__ == "__main__":
    unittest.main()
