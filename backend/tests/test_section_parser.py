from models.schemas import FormatRating
from services.section_parser import (
    analyze_education,
    analyze_experience,
    analyze_format,
    extract_years_of_experience,
)


SAMPLE_RESUME = """John Doe
john.doe@email.com | (555) 123-4567

Summary
Software engineer with 5+ years of experience building web applications.

Experience
Senior Software Engineer | TechCorp | 2021 - Present
• Built REST APIs serving 1M requests/day
• Cut infrastructure cost by 40%

Education
B.S. Computer Science | State University | 2019

Skills
Python, JavaScript, React, Docker, AWS, PostgreSQL, Git
"""


class TestFormat:
    def test_well_formatted_resume(self):
        result = analyze_format(SAMPLE_RESUME)
        assert result.has_bullet_points
        assert result.has_contact_info
        assert result.has_quantified_results
        assert result.has_standard_sections
        assert result.overall_format_score == FormatRating.GOOD

    def test_fair(self):
        result = analyze_format("email me at jane@site.org about my skills")
        assert result.has_contact_info
        assert result.has_standard_sections
        assert not result.has_bullet_points
        assert result.overall_format_score == FormatRating.FAIR

    def test_poor(self):
        result = analyze_format("Just a name")
        assert result.overall_format_score == FormatRating.POOR

    def test_phone_counts_as_contact(self):
        assert analyze_format("call (555) 123 4567").has_contact_info


class TestExperience:
    def test_extract_years(self):
        assert extract_years_of_experience(SAMPLE_RESUME) == 5
        assert extract_years_of_experience("10 years experience in retail") == 10
        assert extract_years_of_experience("Several years in retail") == 0

    def test_meets_requirement(self):
        result = analyze_experience("5 years experience", "3+ years experience")
        assert result.score == 100
        assert result.feedback == "Meets experience requirement (5+ vs 3+ required)"

    def test_close_to_requirement(self):
        assert analyze_experience("4 years experience", "5 years of experience").score == 75

    def test_below_requirement(self):
        result = analyze_experience("2 years experience", "5 years experience")
        assert result.score == 50
        assert result.feedback.startswith("Below requirement")

    def test_no_requirement(self):
        result = analyze_experience("2 years experience", "Great team, great product")
        assert result.score == 80


class TestEducation:
    def test_requirement_met(self):
        result = analyze_education("graduated from state university", "bachelor degree required")
        assert result.score == 100
        assert result.feedback == "Education requirements met"

    def test_requirement_missing(self):
        assert analyze_education("self-taught developer", "master degree preferred").score == 60

    def test_no_requirement(self):
        assert analyze_education("phd in physics", "ship features fast").score == 80
