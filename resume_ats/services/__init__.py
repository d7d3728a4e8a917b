from .ats_ai import AIScorer
from .ats_rule_based import RuleBasedScorer
from .ats_service import ATSScoringFacade, compute_score, get_default_facade
from .resume_parser import ResumeParser, get_default_resume_parser, parse_resume

__all__ = [
    "AIScorer",
    "RuleBasedScorer",
    "ATSScoringFacade",
    "compute_score",
    "get_default_facade",
    "ResumeParser",
    "get_default_resume_parser",
    "parse_resume",
]
