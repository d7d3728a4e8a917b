from __future__ import annotations

from resume_ats.ai.types import ChatMessage

RESUME_PARSE_SYSTEM_PROMPT = """You are an expert resume parser. Extract structured information from resume text and return it as JSON.

Rules:
1. Extract every piece of information accurately from the resume text.
2. Never add, invent or embellish information.
3. When a section is missing, use an empty array or an empty string.
4. Keep dates as written ("Jan 2020", "2020", "Present"). Set "current" to true for an ongoing role and leave "endDate" empty.
5. Give each item a simple incremental id: "exp-1", "proj-1", "edu-1".
6. Skills are an array of strings. The summary or objective is a single string.

Return only a JSON object of this shape:
{
  "summary": "",
  "skills": ["skill"],
  "experience": [
    {"id": "exp-1", "title": "", "company": "", "location": "", "startDate": "", "endDate": "", "current": false, "bullets": [""]}
  ],
  "projects": [
    {"id": "proj-1", "name": "", "description": "", "technologies": [""], "link": "", "bullets": [""]}
  ],
  "education": [
    {"id": "edu-1", "degree": "", "institution": "", "location": "", "graduationDate": "", "gpa": "", "highlights": [""]}
  ],
  "contact": {"name": "", "email": "", "phone": "", "linkedin": "", "github": "", "portfolio": "", "location": ""}
}"""


def build_resume_parse_messages(raw_text: str) -> list[ChatMessage]:
    user_prompt = (
        "Parse the following resume text into the JSON format described above:\n\n"
        f"{raw_text.strip()}\n\n"
        "Return only the JSON object, with no additional text."
    )
    return [
        ChatMessage(role="system", content=RESUME_PARSE_SYSTEM_PROMPT),
        ChatMessage(role="user", content=user_prompt),
    ]
