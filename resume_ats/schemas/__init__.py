from .ats import AIUsage, ATSAnalysis, ScoreResult
from .parsed_resume import ParsedResume, coerce_parsed_resume
from .resume import ContactInfo, EducationEntry, ExperienceEntry, ProjectEntry, ResumeData

__all__ = [
    "AIUsage",
    "ATSAnalysis",
    "ScoreResult",
    "ParsedResume",
    "coerce_parsed_resume",
    "ContactInfo",
    "EducationEntry",
    "ExperienceEntry",
    "ProjectEntry",
    "ResumeData",
]
