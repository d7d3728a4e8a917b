import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.normalize.resume_text import flatten_resume_text, render_resume_for_prompt  # noqa: E402
from resume_ats.normalize.utils import clamp_score, clean_strings, round_half_up  # noqa: E402
from resume_ats.schemas.ats import ScoreResult  # noqa: E402
from resume_ats.schemas.resume import ResumeData  # noqa: E402

RESUME = ResumeData.model_validate(
    {
        "contact": {"name": "Dana Lee", "email": "dana@example.com"},
        "summary": "Platform engineer",
        "skills": ["Python", "Go"],
        "experience": [
            {
                "title": "Engineer",
                "company": "Acme",
                "startDate": "2022-03",
                "current": True,
                "bullets": ["Shipped APIs"],
            },
            {"title": "Intern", "company": "Initech", "startDate": "2021-06", "endDate": "2021-09"},
        ],
        "education": [{"degree": "BSc", "institution": "State U", "graduationDate": "2021"}],
    }
)


class ResumeModelTests(unittest.TestCase):
    def test_is_empty(self):
        self.assertTrue(ResumeData().is_empty())
        self.assertTrue(ResumeData(summary="  ").is_empty())
        self.assertFalse(RESUME.is_empty())

    def test_flatten_includes_every_section(self):
        text = flatten_resume_text(RESUME)
        for fragment in ("Platform engineer", "Python, Go", "Engineer at Acme", "Shipped APIs", "BSc from State U"):
            self.assertIn(fragment, text)

    def test_prompt_rendering_skips_empty_sections(self):
        rendered = render_resume_for_prompt(RESUME)
        self.assertIn("CONTACT INFORMATION:", rendered)
        self.assertIn("Period: 2022-03 - Present", rendered)
        self.assertIn("Period: 2021-06 - 2021-09", rendered)
        self.assertIn("• Shipped APIs", rendered)
        self.assertNotIn("PROJECTS:", rendered)


class ScoreResultTests(unittest.TestCase):
    def test_scores_are_clamped_and_rounded(self):
        result = ScoreResult(score=100.7, skill_match=-3, experience_alignment=49.5)
        self.assertEqual((result.score, result.skill_match, result.experience_alignment), (100, 0, 50))

    def test_payload_uses_camel_case_and_omits_absent_parts(self):
        payload = ScoreResult(score=40, missing_skills=["Docker", "docker", ""]).to_payload()
        self.assertEqual(payload["missingSkills"], ["Docker"])
        self.assertIn("skillMatch", payload)
        self.assertIn("keywordImprovements", payload)
        self.assertIn("experienceAlignment", payload)
        self.assertNotIn("analysis", payload)
        self.assertNotIn("usage", payload)

    def test_returned_lists_cannot_be_mutated(self):
        result = ScoreResult(missing_skills=["docker", "kubernetes"])
        self.assertIsInstance(result.missing_skills, tuple)
        self.assertIsInstance(result.keyword_improvements, tuple)
        with self.assertRaises(AttributeError):
            result.missing_skills.append("")
        self.assertEqual(result.missing_skills, ("docker", "kubernetes"))

    def test_empty_result(self):
        empty = ScoreResult.empty()
        self.assertEqual(empty.score, 0)
        self.assertEqual(empty.missing_skills, ())
        self.assertEqual(empty.strategy, "empty")


class ScoreHelperTests(unittest.TestCase):
    def test_round_half_up(self):
        self.assertEqual(round_half_up(32.5), 33)
        self.assertEqual(round_half_up(33.49), 33)

    def test_clamp_nan(self):
        self.assertEqual(clamp_score(float("nan")), 0)

    def test_clean_strings_limit(self):
        self.assertEqual(clean_strings(["a", "B", "b", 3, "c"], limit=2), ["a", "B"])


if __name__ == "__main__":
    unittest.main()
