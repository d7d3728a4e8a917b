from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.core.errors import InputError  # noqa: E402
from resume_ats.core.logging import configure_logging  # noqa: E402
from resume_ats.services.ats_rule_based import RuleBasedScorer  # noqa: E402
from resume_ats.services.ats_service import ATSScoringFacade, get_default_facade  # noqa: E402
from resume_ats.services.resume_parser import ResumeParser, get_default_resume_parser  # noqa: E402


def _load_resume(args: argparse.Namespace) -> Any:
    if args.resume_text:
        text = Path(args.resume_text).read_text(encoding="utf-8")
        parser = ResumeParser(ai_enabled=False) if args.rule_based else get_default_resume_parser()
        return asyncio.run(parser.parse(text)).to_resume_data()
    return json.loads(Path(args.resume).read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Score a resume against a job description.")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--resume", help="Path to a structured resume JSON file")
    source.add_argument("--resume-text", help="Path to a plain-text resume, parsed before scoring")
    parser.add_argument("--job", required=True, help="Path to a plain-text job description")
    parser.add_argument(
        "--rule-based",
        action="store_true",
        help="Skip the AI parser and analyzer and use deterministic heuristics only.",
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    try:
        resume_data = _load_resume(args)
        job_description = Path(args.job).read_text(encoding="utf-8")
    except json.JSONDecodeError as exc:
        print(f"Invalid resume JSON: {exc}", file=sys.stderr)
        return 2
    except InputError as exc:
        print(f"Invalid resume input: {exc}", file=sys.stderr)
        return 2
    except OSError as exc:
        print(f"Cannot read input file: {exc}", file=sys.stderr)
        return 2

    facade = ATSScoringFacade(None, RuleBasedScorer()) if args.rule_based else get_default_facade()
    try:
        result = asyncio.run(facade.compute_score(resume_data, job_description))
    except InputError as exc:
        print(f"Invalid resume input: {exc}", file=sys.stderr)
        return 2

    print(json.dumps(result.to_payload(), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
