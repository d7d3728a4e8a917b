from resume_ats.ai.types import ChatMessage
from resume_ats.normalize.resume_text import render_resume_for_prompt
from resume_ats.schemas.resume import ResumeData

ATS_SYSTEM_PROMPT = """You are an expert ATS (Applicant Tracking System) analyst. Your task is to analyze a resume against a job description and provide a comprehensive compatibility score and detailed feedback.

CRITICAL REQUIREMENTS:
1. Analyze the resume's alignment with the job description across multiple dimensions
2. Identify missing skills, qualifications, and experience gaps
3. Provide specific, actionable improvement recommendations
4. Calculate accurate scores based on real ATS matching criteria
5. Be thorough but realistic in your assessment

Return your analysis as a JSON object with this exact structure:
{
  "score": <number 0-100>,
  "skillMatch": <number 0-100>,
  "missingSkills": ["skill1", "skill2"],
  "keywordImprovements": ["suggestion1", "suggestion2"],
  "experienceAlignment": <number 0-100>,
  "analysis": {
    "strengths": ["strength1"],
    "weaknesses": ["weakness1"],
    "missingQualifications": ["qualification1"],
    "experienceGaps": ["gap1"],
    "recommendations": ["recommendation1"]
  }
}

"score" is the overall ATS compatibility score, "skillMatch" the percentage of required skills found in the resume, and "experienceAlignment" how well the experience matches the job requirements."""

_USER_INSTRUCTIONS = """Analyze this resume against the job description and provide:
1. An overall ATS compatibility score (0-100)
2. Skill match percentage - how many required skills are present
3. Missing critical skills that should be added
4. Keyword improvements - specific terms/phrases to add for better ATS matching
5. Experience alignment score - how well the experience matches job requirements
6. Detailed analysis including strengths, weaknesses, missing qualifications, experience gaps, and specific recommendations

Focus on:
- Technical skills and tools mentioned in the job description
- Required qualifications (education, certifications, years of experience)
- Relevant experience and responsibilities
- Industry-specific keywords and terminology
- Soft skills and competencies mentioned

Return ONLY the JSON object, no additional text."""


def build_ats_user_prompt(resume: ResumeData, job_description: str) -> str:
    return (
        f"JOB DESCRIPTION:\n{job_description.strip()}\n\n"
        f"RESUME DATA:\n{render_resume_for_prompt(resume)}\n\n"
        f"{_USER_INSTRUCTIONS}"
    )


def build_ats_messages(resume: ResumeData, job_description: str) -> list[ChatMessage]:
    return [
        ChatMessage(role="system", content=ATS_SYSTEM_PROMPT),
        ChatMessage(role="user", content=build_ats_user_prompt(resume, job_description)),
    ]
