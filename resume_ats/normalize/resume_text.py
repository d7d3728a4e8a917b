from __future__ import annotations

from resume_ats.schemas.resume import ResumeData


def flatten_resume_text(resume: ResumeData) -> str:
    """Join every text field of the resume, in section order, for lexical analysis."""
    parts: list[str] = []
    if resume.summary:
        parts.append(resume.summary)
    if resume.skills:
        parts.append(", ".join(resume.skills))
    for exp in resume.experience:
        parts.append(f"{exp.title} at {exp.company}")
        parts.extend(exp.bullets)
    for proj in resume.projects:
        parts.append(proj.name)
        parts.append(proj.description)
        if proj.technologies:
            parts.append(", ".join(proj.technologies))
        parts.extend(proj.bullets)
    for edu in resume.education:
        parts.append(f"{edu.degree} from {edu.institution}")
        parts.extend(edu.highlights)
    return " ".join(parts)


def _experience_period(start: str, end: str | None, current: bool) -> str:
    return f"{start} - {end or ('Present' if current else 'N/A')}"


def render_resume_for_prompt(resume: ResumeData) -> str:
    """Human-readable resume used as model context. Empty sections are omitted."""
    lines: list[str] = []

    contact = resume.contact
    if contact is not None:
        lines.append("CONTACT INFORMATION:")
        for label, value in (
            ("Name", contact.name),
            ("Email", contact.email),
            ("Phone", contact.phone),
            ("Location", contact.location),
        ):
            if value:
                lines.append(f"{label}: {value}")
        lines.append("")

    if resume.summary:
        lines.extend(["PROFESSIONAL SUMMARY:", resume.summary, ""])

    if resume.skills:
        lines.extend(["SKILLS:", ", ".join(resume.skills), ""])

    if resume.experience:
        lines.append("WORK EXPERIENCE:")
        for exp in resume.experience:
            lines.append(f"{exp.title} at {exp.company}")
            if exp.location:
                lines.append(f"Location: {exp.location}")
            lines.append(f"Period: {_experience_period(exp.start_date, exp.end_date, exp.current)}")
            lines.extend(f"• {bullet}" for bullet in exp.bullets)
            lines.append("")

    if resume.projects:
        lines.append("PROJECTS:")
        for proj in resume.projects:
            lines.append(proj.name)
            if proj.description:
                lines.append(f"Description: {proj.description}")
            if proj.technologies:
                lines.append(f"Technologies: {', '.join(proj.technologies)}")
            lines.extend(f"• {bullet}" for bullet in proj.bullets)
            lines.append("")

    if resume.education:
        lines.append("EDUCATION:")
        for edu in resume.education:
            lines.append(f"{edu.degree} from {edu.institution}")
            if edu.location:
                lines.append(f"Location: {edu.location}")
            if edu.graduation_date:
                lines.append(f"Graduation: {edu.graduation_date}")
            if edu.gpa:
                lines.append(f"GPA: {edu.gpa}")
            lines.extend(f"• {highlight}" for highlight in edu.highlights)
            lines.append("")

    return "\n".join(lines)
