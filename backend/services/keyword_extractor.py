"""Keyword extraction and matching for resume-JD analysis.

Two independent views of the job description vocabulary:

1. Frequency-weighted keyword match, where words near "required"-style
   phrases are worth more than words near "preferred"-style phrases.
2. Detailed categorization into technical nouns, action verbs and
   multi-word technical phrases, each split into matched and missing.

Both operate on lower-cased text.
"""

import logging
import re
from collections import Counter

from models.schemas import DetailedKeywords, KeywordGroup, KeywordMatches
from services.skill_catalog import ATS_TECHNICAL_SKILLS
from services.text_matching import percentage, to_score

logger = logging.getLogger(__name__)

# ASCII word characters only, so accented letters split words
_NON_WORD_RE = re.compile(r"[^\w\s]", re.ASCII)

MIN_WORD_LENGTH = 3
CONTEXT_WINDOW = 100
MAX_WORD_POINTS = 15
MAX_MISSING_KEYWORDS = 20

# ---------------------------------------------------------------------------
# Stop words
# ---------------------------------------------------------------------------
STOP_WORDS: frozenset[str] = frozenset({
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with",
    "by", "is", "are", "was", "were", "be", "been", "have", "has", "had", "will",
})

# Wider set used for the detailed categorization
DETAIL_STOP_WORDS: frozenset[str] = STOP_WORDS | frozenset({
    "would", "could", "should", "may", "might", "can", "must", "shall", "this", "that",
})

# ---------------------------------------------------------------------------
# Context priority: 3 = required, 2 = preferred, 1 = everything else
# ---------------------------------------------------------------------------
_HIGH_PRIORITY_RE = re.compile(
    r"(?:required|must have|essential|critical|mandatory|key requirement)", re.IGNORECASE,
)
_MEDIUM_PRIORITY_RE = re.compile(
    r"(?:preferred|nice to have|desired|plus|advantage)", re.IGNORECASE,
)

# ---------------------------------------------------------------------------
# Vocabularies for detailed categorization
# ---------------------------------------------------------------------------
HIGH_VALUE_TERMS: frozenset[str] = frozenset({
    "react", "python", "javascript", "typescript", "aws", "docker", "kubernetes",
    "node.js", "express", "mongodb", "postgresql", "graphql", "rest", "api",
    "microservices", "devops", "ci/cd", "terraform", "jenkins", "git", "agile",
    "scrum", "machine learning", "data science", "artificial intelligence",
})

TECHNICAL_NOUNS: frozenset[str] = frozenset({
    "application", "system", "database", "api", "framework", "library", "platform",
    "infrastructure", "architecture", "deployment", "testing", "performance",
    "security", "scalability", "algorithm", "data structure", "optimization",
    "integration", "automation", "monitoring", "analytics", "dashboard",
})

ACTION_VERBS: frozenset[str] = frozenset({
    "developed", "created", "built", "designed", "implemented", "managed", "led",
    "optimized", "improved", "increased", "reduced", "delivered", "architected",
    "collaborated", "mentored", "analyzed", "automated", "streamlined", "enhanced",
    "maintained", "deployed", "tested", "debugged", "integrated", "coordinated",
})

# Ordered: phrase results follow this order
TECH_PHRASES: tuple[str, ...] = (
    "machine learning", "data science", "web development", "mobile development",
    "cloud computing", "software engineering", "project management", "team leadership",
    "problem solving", "code review", "unit testing", "integration testing",
    "continuous integration", "continuous deployment", "agile development",
    "scrum methodology", "rest api", "graphql api", "database design",
    "system architecture", "user experience", "user interface",
    "artificial intelligence", "natural language processing", "computer vision",
    "deep learning", "neural networks", "distributed systems", "event driven",
    "microservices architecture", "serverless computing", "edge computing",
    "devops practices", "infrastructure as code", "gitops", "observability",
)

_TECHNICAL_SKILL_SET = frozenset(ATS_TECHNICAL_SKILLS)
_NOUN_SUFFIXES = ("ing", "tion", "ment")


def extract_words(text: str, stop_words: frozenset[str] = STOP_WORDS) -> list[str]:
    """Split lower-cased words longer than two characters, dropping stop words.

    Punctuation becomes a separator, so "node.js" yields "node".
    """
    words = _NON_WORD_RE.sub(" ", text).split()
    return [
        word.lower() for word in words
        if len(word) >= MIN_WORD_LENGTH and word not in stop_words
    ]


def _dedupe(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


def context_priority(word: str, text: str) -> int:
    """Priority of ``word`` from the 100 characters around its first occurrence."""
    index = text.lower().find(word)
    surrounding = text[max(0, index - CONTEXT_WINDOW):index + CONTEXT_WINDOW]
    if _HIGH_PRIORITY_RE.search(surrounding):
        return 3
    if _MEDIUM_PRIORITY_RE.search(surrounding):
        return 2
    return 1


def match_keywords(resume_text: str, job_text: str) -> KeywordMatches:
    """Frequency-weighted share of job keywords present in the resume.

    Each job word is worth ``min(freq * priority * 2, 15)`` points. A word
    found in the resume earns ``min(resume_freq, job_freq) * priority * 2``,
    so repeating a word more often than the job does earns nothing extra.
    """
    job_freq = Counter(extract_words(job_text))
    resume_freq = Counter(extract_words(resume_text))

    total_points = 0
    earned_points = 0
    matched: list[str] = []
    missing: list[str] = []

    for word, freq in job_freq.items():
        priority = context_priority(word, job_text)
        total_points += min(freq * priority * 2, MAX_WORD_POINTS)

        if resume_freq[word] > 0:
            earned_points += min(resume_freq[word], freq) * priority * 2
            matched.append(word)
        else:
            missing.append(word)

    return KeywordMatches(
        matched=matched,
        missing=missing[:MAX_MISSING_KEYWORDS],
        total=len(job_freq),
        match_percentage=to_score(percentage(earned_points, total_points)),
    )


def _is_technical_noun(word: str) -> bool:
    return (
        word in TECHNICAL_NOUNS
        or word in _TECHNICAL_SKILL_SET
        or word in HIGH_VALUE_TERMS
        or word.endswith(_NOUN_SUFFIXES)
    )


def extract_phrases(text: str) -> list[str]:
    """Known technical phrases occurring anywhere in ``text``."""
    text_lower = text.lower()
    return [phrase for phrase in TECH_PHRASES if phrase in text_lower]


def extract_detailed_keywords(resume_text: str, job_text: str) -> DetailedKeywords:
    """Matched and missing nouns, verbs and phrases from the job description."""
    job_words = extract_words(job_text, DETAIL_STOP_WORDS)
    resume_words = set(extract_words(resume_text, DETAIL_STOP_WORDS))

    job_nouns = [word for word in job_words if _is_technical_noun(word)]
    matched_nouns = [noun for noun in job_nouns if noun in resume_words]
    missing_nouns = [noun for noun in job_nouns if noun not in resume_words]

    # High-value terms lead each noun list
    weighted_matched = [noun for noun in matched_nouns if noun in HIGH_VALUE_TERMS]
    weighted_missing = [noun for noun in missing_nouns if noun in HIGH_VALUE_TERMS]

    job_verbs = [word for word in job_words if word in ACTION_VERBS]
    matched_verbs = [verb for verb in job_verbs if verb in resume_words]
    missing_verbs = [verb for verb in job_verbs if verb not in resume_words]

    resume_phrases = set(extract_phrases(resume_text))
    job_phrases = extract_phrases(job_text)
    matched_phrases = [phrase for phrase in job_phrases if phrase in resume_phrases]
    missing_phrases = [phrase for phrase in job_phrases if phrase not in resume_phrases]

    return DetailedKeywords(
        nouns=KeywordGroup(
            matched=_dedupe(weighted_matched + matched_nouns)[:12],
            missing=_dedupe(weighted_missing + missing_nouns)[:10],
        ),
        verbs=KeywordGroup(
            matched=_dedupe(matched_verbs),
            missing=_dedupe(missing_verbs)[:8],
        ),
        phrases=KeywordGroup(
            matched=matched_phrases,
            missing=missing_phrases[:8],
        ),
    )
