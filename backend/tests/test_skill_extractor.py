from services.skill_extractor import calculate_confidence, extract_skills


SCENARIO_RESUME = (
    "Experienced React developer with 5 years experience building JavaScript applications. "
    "Strong communication and leadership skills."
)


def _by_name(skills):
    return {s.name: s for s in skills.hard_skills + skills.soft_skills}


def test_scenario_resume_skills():
    skills = extract_skills(SCENARIO_RESUME)
    assert {s.name for s in skills.hard_skills} == {"React", "JavaScript"}
    assert {s.name for s in skills.soft_skills} == {"Communication", "Leadership"}
    found = _by_name(skills)
    assert found["React"].mentions == 1
    assert found["JavaScript"].mentions == 1
    assert found["Leadership"].mentions == 1
    assert found["React"].category == "Frontend Technologies"
    assert found["Leadership"].category == "Leadership"


def test_total_skills_is_sum_of_lists():
    skills = extract_skills(SCENARIO_RESUME)
    assert skills.total_skills == len(skills.hard_skills) + len(skills.soft_skills)


def test_java_does_not_match_inside_javascript():
    skills = extract_skills("Frontend work in JavaScript and TypeScript.")
    names = {s.name for s in skills.hard_skills}
    assert "JavaScript" in names
    assert "Java" not in names


def test_symbol_labels_are_extracted():
    skills = extract_skills("Systems programming in C++ and C# for ten years.")
    found = _by_name(skills)
    assert found["C++"].mentions == 1
    assert found["C#"].mentions == 1
    assert "C" not in found


def test_plain_c_counted_apart_from_cpp():
    found = _by_name(extract_skills("Embedded C, later C++ and C."))
    assert found["C"].mentions == 2
    assert found["C++"].mentions == 1


def test_mentions_are_case_insensitive():
    skills = extract_skills("Python python PYTHON")
    python = _by_name(skills)["Python"]
    assert python.mentions == 3
    # min(60, 100) * 1.2 boost * 1.2 short-text factor
    assert python.confidence == 86


def test_dotted_labels_match_whole_word():
    skills = extract_skills("APIs built with Node.js.")
    assert _by_name(skills)["Node.js"].mentions == 1


def test_shared_label_listed_once():
    skills = extract_skills("Project Management and Swift")
    names = [s.name for s in skills.hard_skills + skills.soft_skills]
    assert names.count("Project Management") == 1
    assert names.count("Swift") == 1
    assert _by_name(skills)["Swift"].category == "Programming Languages"


def test_sorted_by_confidence_then_mentions():
    text = "Docker Docker Docker. Kubernetes. Git Git."
    skills = extract_skills(text)
    names = [s.name for s in skills.hard_skills]
    assert names == ["Docker", "Git", "Kubernetes"]
    confidences = [s.confidence for s in skills.hard_skills]
    assert confidences == sorted(confidences, reverse=True)


def test_empty_text_yields_no_skills():
    skills = extract_skills("")
    assert skills.hard_skills == []
    assert skills.soft_skills == []
    assert skills.total_skills == 0


def test_text_without_catalog_skills():
    skills = extract_skills("I enjoy gardening on weekends.")
    assert skills.total_skills == 0


class TestConfidence:
    def test_single_mention_short_text(self):
        assert calculate_confidence(1, 100) == 24

    def test_long_text_is_discounted(self):
        assert calculate_confidence(1, 2000) == 16

    def test_reference_length(self):
        assert calculate_confidence(1, 1000) == 20

    def test_clamped_to_100(self):
        assert calculate_confidence(5, 50) == 100

    def test_boost_capped_before_length_factor(self):
        # min(min(100, 100) * 1.2, 100) * 0.8
        assert calculate_confidence(5, 5000) == 80

    def test_always_in_range(self):
        for mentions in range(1, 12):
            for length in (1, 10, 500, 1000, 100000):
                assert 0 <= calculate_confidence(mentions, length) <= 100
