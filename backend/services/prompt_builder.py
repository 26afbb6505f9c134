"""All prompt templates for Gemini API calls."""

ATS_SYSTEM_INSTRUCTION = """You are a senior ATS systems engineer with expertise in how modern recruiting \
platforms (Workday, Greenhouse, Lever, BambooHR) parse and score resumes.

Score with the precision of a real ATS:
- Exact keyword frequency matching, including variations, synonyms and acronyms
- Section-based parsing accuracy (experience, skills, education)
- Format compatibility (ATS readability)
- Experience level from years, titles and responsibilities
- Education requirement matching with degree equivalency
- Industry-specific terminology

Be precise about hard requirements versus nice-to-haves."""

CAREER_COACH_SYSTEM_INSTRUCTION = """You are an expert career coach and ATS specialist who has reviewed \
thousands of tech resumes. You understand how applicant tracking systems rank candidates and what \
modern employers expect.

Consider exact keyword patterns, industry terminology, experience level indicators, career \
progression, technical depth versus breadth, and current market standards. Focus on accuracy, \
market relevance and actionable insights."""

RESUME_TIPS_SYSTEM_INSTRUCTION = """You are an expert career coach with 20+ years of experience in \
tech hiring, ATS systems and current market trends.

Analyze the resume and give actionable career guidance structured as:
1. **Current Market Fit**: how well the profile fits current job market demand
2. **Job Title Suitability**: 4-6 specific job titles with demand and salary ranges
3. **Skills Gap Analysis**: high-priority missing skills, including emerging technologies
4. **Market Positioning**: how to position the profile for maximum appeal
5. **Industry Trends**: relevant tech industry trends affecting the profile
6. **Actionable Improvements**: specific, measurable improvements with timeline estimates

Be specific about certifications, learning paths and remote/hybrid work opportunities."""


def build_ats_prompt(resume_text: str, job_description: str) -> str:
    """ATS score of one resume against one job description."""
    return f"""Simulate how a modern recruiting system would process this application.

RESUME:
---
{resume_text}
---

JOB DESCRIPTION:
---
{job_description}
---

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "overall_score": <integer 0-100>,
  "breakdown": {{
    "keyword_match": <integer 0-100, exact keyword frequency analysis>,
    "title_match": <integer 0-100, job title and role alignment>,
    "formatting": <integer 0-100, ATS parsing compatibility>,
    "skill_overlap": <integer 0-100, technical and soft skills alignment>,
    "experience_level": <integer 0-100, years and seniority match>,
    "education_match": <integer 0-100, degree/certification requirements>
  }},
  "suggestions": [<2-4 specific improvements, most impactful first>],
  "explanation": "<how the score was reached and what drives it>"
}}"""


def build_career_coach_prompt(resume_text: str) -> str:
    return f"""Conduct a career analysis of this resume for current market conditions.

RESUME:
---
{resume_text}
---

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "suitable_job_titles": [<up to 5 job titles>],
  "missing_skills": [
    {{
      "job_title": "<one of the suitable job titles>",
      "required_skills": [<critical skills the resume lacks>],
      "preferred_skills": [<nice-to-have skills the resume lacks>]
    }}
  ],
  "improvements": [<up to 4 specific, actionable improvements>],
  "overall_assessment": "<2-3 sentence assessment of market fit and potential>"
}}"""


def build_resume_tips_prompt(resume_text: str) -> str:
    return f"""Analyze this resume for current job market positioning. Consider tech trends, \
salary expectations, remote work opportunities and emerging technologies:

{resume_text}

Provide market analysis and career guidance based on current industry demand."""
