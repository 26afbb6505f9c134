"""Matching and score-rounding primitives shared by every analyzer."""

import math
import re
from functools import lru_cache


@lru_cache(maxsize=1024)
def _mention_pattern(label: str) -> re.Pattern:
    # "+" and "#" extend a label, so "c" stops short of "c++" and "c#"
    return re.compile(rf"(?<![\w+#]){re.escape(label.lower())}(?![\w+#])", re.IGNORECASE)


def count_mentions(text: str, label: str) -> int:
    """Count case-insensitive whole-word occurrences of ``label`` in ``text``.

    Boundaries keep "java" from matching inside "javascript" and work for
    labels ending in symbols such as "C++".
    """
    if not text:
        return 0
    return len(_mention_pattern(label).findall(text))


def skills_match(a: str, b: str) -> bool:
    """Loose skill-name equality: either lower-cased name contains the other.

    Known limitation: "Java" matches "JavaScript". Scores depend on this.
    """
    a_lower = a.lower()
    b_lower = b.lower()
    return a_lower in b_lower or b_lower in a_lower


def has_skill(user_skills: list[str], skill: str) -> bool:
    return any(skills_match(user_skill, skill) for user_skill in user_skills)


def round_half_up(value: float) -> int:
    """Round x.5 upward so scores don't depend on banker's rounding."""
    return math.floor(value + 0.5)


def to_score(value: float) -> int:
    """Round a 0-100 real value and clamp it into [0, 100]."""
    return min(100, max(0, round_half_up(value)))


def percentage(part: float, whole: float) -> float:
    """``part / whole * 100`` with an empty denominator mapped to 0."""
    if whole <= 0:
        return 0.0
    return part / whole * 100
