from .experience_alignment import AlignmentBreakdown, ExperienceAligner
from .jd_features import extract_required_skills, extract_skill_section, infer_job_title
from .resume_features import extract_resume_experience, extract_resume_skills
from .skill_matcher import SkillMatcher, SkillMatchResult

__all__ = [
    "AlignmentBreakdown",
    "ExperienceAligner",
    "extract_required_skills",
    "extract_skill_section",
    "infer_job_title",
    "extract_resume_experience",
    "extract_resume_skills",
    "SkillMatcher",
    "SkillMatchResult",
]
