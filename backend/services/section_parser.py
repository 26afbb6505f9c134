"""Resume structure checks and experience/education requirement matching."""

import re

from models.schemas import FormatAnalysis, FormatRating, RequirementMatch

# Format signals
BULLET_RE = re.compile(r"[•\-*]")
EMAIL_SIGN_RE = re.compile(r"@")
PHONE_AREA_RE = re.compile(r"\(\d{3}\)")
QUANTIFIED_RE = re.compile(r"\d+%|\$\d+|\d+k|\d+\+")

STANDARD_SECTIONS: tuple[str, ...] = ("experience", "education", "skills", "work", "employment")

YEARS_EXPERIENCE_RE = re.compile(r"(\d+)\+?\s*years?\s*(?:of\s*)?experience", re.IGNORECASE)

DEGREE_KEYWORDS: tuple[str, ...] = ("bachelor", "master", "phd", "degree", "university")

DEFAULT_REQUIREMENT_SCORE = 80


def _rate_format(checks_passed: int) -> FormatRating:
    if checks_passed >= 3:
        return FormatRating.GOOD
    if checks_passed == 2:
        return FormatRating.FAIR
    return FormatRating.POOR


def analyze_format(resume_text: str) -> FormatAnalysis:
    """Binary ATS-friendliness checks on the raw resume text."""
    text_lower = resume_text.lower()
    has_bullet_points = bool(BULLET_RE.search(resume_text))
    has_contact_info = bool(EMAIL_SIGN_RE.search(resume_text) or PHONE_AREA_RE.search(resume_text))
    has_quantified_results = bool(QUANTIFIED_RE.search(resume_text))
    has_standard_sections = any(section in text_lower for section in STANDARD_SECTIONS)

    checks_passed = sum((has_bullet_points, has_contact_info, has_quantified_results, has_standard_sections))
    return FormatAnalysis(
        has_bullet_points=has_bullet_points,
        has_standard_sections=has_standard_sections,
        has_quantified_results=has_quantified_results,
        has_contact_info=has_contact_info,
        overall_format_score=_rate_format(checks_passed),
    )


def extract_years_of_experience(text: str) -> int:
    """First "N(+) years (of) experience" figure in ``text``, else 0."""
    found = YEARS_EXPERIENCE_RE.search(text)
    return int(found.group(1)) if found else 0


def analyze_experience(resume_text: str, job_text: str) -> RequirementMatch:
    required_years = extract_years_of_experience(job_text)
    candidate_years = extract_years_of_experience(resume_text)

    if required_years <= 0:
        return RequirementMatch(score=DEFAULT_REQUIREMENT_SCORE, feedback="Experience analysis completed")

    comparison = f"({candidate_years}+ vs {required_years}+ required)"
    if candidate_years >= required_years:
        return RequirementMatch(score=100, feedback=f"Meets experience requirement {comparison}")
    if candidate_years >= required_years * 0.8:
        return RequirementMatch(score=75, feedback=f"Close to requirement {comparison}")
    return RequirementMatch(score=50, feedback=f"Below requirement {comparison}")


def _mentions_degree(text: str) -> bool:
    text_lower = text.lower()
    return any(keyword in text_lower for keyword in DEGREE_KEYWORDS)


def analyze_education(resume_text: str, job_text: str) -> RequirementMatch:
    if not _mentions_degree(job_text):
        return RequirementMatch(score=DEFAULT_REQUIREMENT_SCORE, feedback="Education requirements analysis")
    if _mentions_degree(resume_text):
        return RequirementMatch(score=100, feedback="Education requirements met")
    return RequirementMatch(score=60, feedback="Consider highlighting relevant certifications")
