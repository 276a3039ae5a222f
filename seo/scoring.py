"""Rule-based quality scores for titles and content.

Each score starts from a base value, gains or loses points for length
bands and a few simple signals, and is clamped to [0, 100]. No NLP is
involved: sentences are split on terminal punctuation and power words are
matched as substrings.
"""

import math
import re

from seo.text import split_sentences
from seo.vocabulary import POWER_WORDS, find_power_words

SCORE_MIN = 0
SCORE_MAX = 100

# Title scoring
TITLE_BASE_SCORE = 70
TITLE_OPTIMAL_MIN = 30
TITLE_OPTIMAL_MAX = 60
TITLE_SHORT_LENGTH = 20
TITLE_OPTIMAL_BONUS = 20
TITLE_LONG_PENALTY = 10
TITLE_SHORT_PENALTY = 15
POWER_WORD_POINTS = 5
POWER_WORD_MAX_BONUS = 15
DIGIT_BONUS = 5

# Content scoring
CONTENT_BASE_SCORE = 60
CONTENT_OPTIMAL_MIN = 300
CONTENT_OPTIMAL_MAX = 2000
CONTENT_SHORT_LENGTH = 150
CONTENT_OPTIMAL_BONUS = 25
CONTENT_LONG_BONUS = 15
CONTENT_SHORT_PENALTY = 20
SENTENCE_LENGTH_MIN = 15
SENTENCE_LENGTH_MAX = 25
SENTENCE_LENGTH_BONUS = 10
VARIED_STARTS_RATIO = 0.6
VARIED_STARTS_BONUS = 5

_DIGIT = re.compile(r"\d")


def clamp_score(score: float) -> int:
    """Clamp a raw score to the [0, 100] range."""
    return int(max(SCORE_MIN, min(SCORE_MAX, score)))


def has_digit(text: str) -> bool:
    """Check whether text contains any digit."""
    return bool(_DIGIT.search(text))


def calculate_title_score(title: str, power_words: frozenset[str] = POWER_WORDS) -> int:
    """Score a title from its length, power words and digits."""
    score = TITLE_BASE_SCORE
    length = len(title)

    if TITLE_OPTIMAL_MIN <= length <= TITLE_OPTIMAL_MAX:
        score += TITLE_OPTIMAL_BONUS
    elif length > TITLE_OPTIMAL_MAX:
        score -= TITLE_LONG_PENALTY
    elif length < TITLE_SHORT_LENGTH:
        score -= TITLE_SHORT_PENALTY

    found = find_power_words(title, power_words)
    score += min(len(found) * POWER_WORD_POINTS, POWER_WORD_MAX_BONUS)

    if has_digit(title):
        score += DIGIT_BONUS

    return clamp_score(score)


def calculate_content_score(content: str) -> int:
    """Score content from its length, sentence length and sentence variety."""
    score = CONTENT_BASE_SCORE
    length = len(content)

    if CONTENT_OPTIMAL_MIN <= length <= CONTENT_OPTIMAL_MAX:
        score += CONTENT_OPTIMAL_BONUS
    elif length > CONTENT_OPTIMAL_MAX:
        score += CONTENT_LONG_BONUS
    elif length < CONTENT_SHORT_LENGTH:
        score -= CONTENT_SHORT_PENALTY

    sentences = split_sentences(content)
    if sentences:
        avg_sentence_length = length / len(sentences)
        if SENTENCE_LENGTH_MIN <= avg_sentence_length <= SENTENCE_LENGTH_MAX:
            score += SENTENCE_LENGTH_BONUS

        # Varied sentence openings read better than repetitive ones
        starts = {s.strip()[:1].lower() for s in sentences}
        if len(starts) / len(sentences) > VARIED_STARTS_RATIO:
            score += VARIED_STARTS_BONUS

    return clamp_score(score)


def calculate_overall_score(title_score: int, content_score: int) -> int:
    """Average two scores, rounding halves up."""
    return int(math.floor((title_score + content_score) / 2 + 0.5))
