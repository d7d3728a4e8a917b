import sys
import unittest
from pathlib import Path
from unittest import mock

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.features.experience_alignment import ExperienceAligner  # noqa: E402
from resume_ats.schemas.resume import ResumeData  # noqa: E402
from resume_ats.services.ats_rule_based import RuleBasedScorer, candidate_skills  # noqa: E402

SCENARIO_JOB = "Required Skills: Python, SQL, Docker, Kubernetes"


def _resume(**overrides) -> ResumeData:
    payload = {"summary": "", "skills": ["Python", "SQL"]}
    payload.update(overrides)
    return ResumeData.model_validate(payload)


class ExperienceAlignmentTests(unittest.TestCase):
    def test_no_experience_scores_zero(self):
        aligner = ExperienceAligner()
        self.assertEqual(aligner.alignment_score(_resume(), "Senior Software Engineer"), 0.0)

    def test_blends_title_and_keyword_match(self):
        resume = _resume(
            experience=[
                {
                    "title": "Software Engineer",
                    "company": "Acme",
                    "startDate": "2020",
                    "current": True,
                    "bullets": ["Built python services"],
                }
            ]
        )
        breakdown = ExperienceAligner().breakdown(
            resume, "Senior Software Engineer\nWe need python and docker skills."
        )
        self.assertEqual(breakdown.inferred_title, "senior software")
        self.assertAlmostEqual(breakdown.title_match, 50.0)
        self.assertAlmostEqual(breakdown.keyword_match, 50.0)
        self.assertAlmostEqual(breakdown.score, 50.0)

    def test_missing_title_contributes_zero(self):
        resume = _resume(
            experience=[{"title": "Developer", "company": "Acme", "bullets": ["Wrote python daily"]}]
        )
        breakdown = ExperienceAligner().breakdown(resume, "Python and Docker.")
        self.assertEqual(breakdown.inferred_title, "")
        self.assertEqual(breakdown.title_match, 0.0)
        self.assertAlmostEqual(breakdown.score, 30.0)


class RuleBasedScorerTests(unittest.TestCase):
    def test_partial_skill_coverage_scenario(self):
        result = RuleBasedScorer().score(_resume(), SCENARIO_JOB)

        self.assertEqual(result.strategy, "rule_based")
        self.assertEqual(result.skill_match, 50)
        self.assertEqual(result.missing_skills, ("docker", "kubernetes"))
        self.assertEqual(result.experience_alignment, 0)
        # 0.4 * (2/6 keyword overlap) + 0.4 * 50 + 0.2 * 0
        self.assertEqual(result.score, 33)
        self.assertIn("docker", result.keyword_improvements)
        self.assertNotIn("python", result.keyword_improvements)

    def test_scoring_is_deterministic(self):
        scorer = RuleBasedScorer()
        first = scorer.score(_resume(), SCENARIO_JOB)
        second = scorer.score(_resume(), SCENARIO_JOB)
        self.assertEqual(first, second)
        self.assertEqual(first.model_dump_json(), second.model_dump_json())

    def test_empty_job_description_scores_zero_without_errors(self):
        result = RuleBasedScorer().score(_resume(), "")
        self.assertEqual(result.score, 0)
        self.assertEqual(result.skill_match, 0)
        self.assertEqual(result.missing_skills, ())
        self.assertEqual(result.keyword_improvements, ())

    def test_project_technologies_count_as_candidate_skills(self):
        resume = _resume(projects=[{"name": "Infra", "technologies": ["Docker", " "]}])
        self.assertEqual(candidate_skills(resume), ["python", "sql", "docker"])
        result = RuleBasedScorer().score(resume, SCENARIO_JOB)
        self.assertEqual(result.skill_match, 75)
        self.assertEqual(result.missing_skills, ("kubernetes",))

    def test_skill_fragment_limit_comes_from_scoring_config(self):
        job = "Required Skills: Distributed systems, SQL"
        self.assertIn("distributed systems", RuleBasedScorer().score(_resume(), job).missing_skills)

        def scoring_value(path, default=None):
            return 6 if path.endswith("skill_fragment_max_chars") else default

        with mock.patch("resume_ats.services.ats_rule_based.get_scoring_value", side_effect=scoring_value):
            scorer = RuleBasedScorer()
        self.assertNotIn("distributed systems", scorer.score(_resume(), job).missing_skills)

    def test_lists_are_capped(self):
        tools = ", ".join(f"toolkit{i}" for i in range(25))
        result = RuleBasedScorer().score(_resume(), f"Required Skills: {tools}")
        self.assertEqual(len(result.missing_skills), 15)
        self.assertEqual(len(result.keyword_improvements), 10)
        for value in (result.score, result.skill_match, result.experience_alignment):
            self.assertGreaterEqual(value, 0)
            self.assertLessEqual(value, 100)


if __name__ == "__main__":
    unittest.main()
