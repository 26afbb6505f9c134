"""Catalog-driven skill extraction with mention-based confidence.

Every hard and soft skill label in the catalog is searched for as a whole
word. A label found at least once becomes a ``SkillMatch`` whose confidence
grows with repeated mentions and is discounted for very long texts.
"""

import logging
from typing import Mapping

from models.schemas import ExtractedSkills, SkillMatch
from services.skill_catalog import HARD_SKILLS, SOFT_SKILLS
from services.text_matching import count_mentions, to_score

logger = logging.getLogger(__name__)

MENTION_WEIGHT = 20
REPEAT_BOOST = 1.2
REFERENCE_LENGTH = 1000
MIN_LENGTH_FACTOR = 0.8
MAX_LENGTH_FACTOR = 1.2


def calculate_confidence(mentions: int, text_length: int) -> int:
    """Confidence 0-100 for a skill mentioned ``mentions`` times."""
    confidence = min(mentions * MENTION_WEIGHT, 100)
    if mentions > 1:
        confidence = min(confidence * REPEAT_BOOST, 100)

    length_factor = MAX_LENGTH_FACTOR
    if text_length > 0:
        length_factor = max(MIN_LENGTH_FACTOR, min(MAX_LENGTH_FACTOR, REFERENCE_LENGTH / text_length))
    return to_score(confidence * length_factor)


def _scan(text: str, catalog: Mapping[str, tuple[str, ...]]) -> list[SkillMatch]:
    matches: list[SkillMatch] = []
    for category, labels in catalog.items():
        for label in labels:
            mentions = count_mentions(text, label)
            if mentions > 0:
                matches.append(SkillMatch(
                    name=label,
                    category=category,
                    confidence=calculate_confidence(mentions, len(text)),
                    mentions=mentions,
                ))
    # Stable sort keeps catalog order among exact ties
    matches.sort(key=lambda m: (-m.confidence, -m.mentions))
    return matches


def extract_skills(text: str) -> ExtractedSkills:
    """Find catalog hard and soft skills mentioned in ``text``.

    Empty or skill-free text yields empty lists; this never raises.
    """
    if not text or not text.strip():
        return ExtractedSkills()

    hard_skills = _scan(text, HARD_SKILLS)
    soft_skills = _scan(text, SOFT_SKILLS)

    logger.debug(
        "Extracted %d hard and %d soft skills", len(hard_skills), len(soft_skills),
    )
    return ExtractedSkills(
        hard_skills=hard_skills,
        soft_skills=soft_skills,
        total_skills=len(hard_skills) + len(soft_skills),
    )
