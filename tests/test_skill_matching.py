import sys
import unittest
from pathlib import Path
from unittest import mock

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.features.jd_features import (  # noqa: E402
    extract_required_skills,
    extract_skill_section,
    infer_job_title,
)
from resume_ats.features.skill_matcher import SkillMatcher  # noqa: E402
from resume_ats.normalize.keywords import KeywordExtractor  # noqa: E402


class SkillMatcherTests(unittest.TestCase):
    def test_substring_match_in_both_directions(self):
        matcher = SkillMatcher()
        self.assertEqual(matcher.match_percentage(["react"], ["react.js"]), 100.0)
        self.assertEqual(matcher.match_percentage(["React.js"], ["react"]), 100.0)

    def test_no_required_skills_means_no_signal(self):
        matcher = SkillMatcher()
        self.assertEqual(matcher.match_percentage(["python"], []), 0.0)
        self.assertEqual(matcher.missing_skills(["python"], []), [])

    def test_partial_match_reports_missing_in_required_order(self):
        matcher = SkillMatcher()
        required = ["python", "sql", "docker", "kubernetes"]
        self.assertEqual(matcher.match_percentage(["Python", "SQL"], required), 50.0)
        self.assertEqual(matcher.missing_skills(["Python", "SQL"], required), ["docker", "kubernetes"])

    def test_blank_candidate_skills_never_match(self):
        self.assertEqual(SkillMatcher().match_percentage(["", "   "], ["python"]), 0.0)


class JobDescriptionFeatureTests(unittest.TestCase):
    def test_title_from_explicit_phrase(self):
        self.assertEqual(infer_job_title("We are seeking: Backend Engineer."), "backend engineer")

    def test_title_from_leading_phrase_before_role_noun(self):
        self.assertEqual(
            infer_job_title("Senior Software Engineer\nJoin our platform team"),
            "senior software",
        )

    def test_title_inference_can_fail(self):
        self.assertEqual(infer_job_title("Competitive salary and benefits."), "")

    def test_inline_skill_section(self):
        self.assertEqual(
            extract_skill_section("Required Skills: Python, SQL, Docker, Kubernetes"),
            ["python", "sql", "docker", "kubernetes"],
        )

    def test_bulleted_skill_section_stops_at_blank_line(self):
        text = "About us\nWe build tools.\n\nRequirements:\n- Python\n- AWS\n\nBenefits: lots"
        self.assertEqual(extract_skill_section(text), ["python", "aws"])

    def test_narrative_mention_is_not_a_section(self):
        self.assertEqual(extract_skill_section("Our skills include teamwork"), [])

    def test_line_ending_in_skills_is_not_a_heading(self):
        self.assertEqual(extract_skill_section("We value soft skills\nYou will own the data platform."), [])

    def test_fragment_limit_is_read_from_scoring_config(self):
        with mock.patch("resume_ats.features.jd_features.get_scoring_value", return_value=6):
            self.assertEqual(extract_skill_section("Required Skills: Python, SQL, Kubernetes"), ["sql"])

    def test_explicit_fragment_limit_wins(self):
        self.assertEqual(
            extract_skill_section("Required Skills: Python, SQL, Kubernetes", max_fragment_chars=7),
            ["python", "sql"],
        )

    def test_required_skills_merge_section_and_keywords_without_headings(self):
        required = extract_required_skills(
            "Required Skills: Python, SQL, Docker, Kubernetes",
            KeywordExtractor(),
        )
        self.assertEqual(required, ["python", "sql", "docker", "kubernetes"])

    def test_required_skills_empty_without_section_or_keywords(self):
        self.assertEqual(extract_required_skills("Join us.", KeywordExtractor()), [])


if __name__ == "__main__":
    unittest.main()
