"""
Heuristic sentiment scorer.

A record is scored by, in order:

1. its explicit sentiment hint, when one is present;
2. otherwise, weighted lexicon matches accumulated into a positive and a
   negative integer score, which ``classify_scores`` maps to a sentiment.

The thresholds in ``classify_scores`` are a fixed contract: the same
(positive, negative) pair always yields the same sentiment and score.
"""

from typing import Iterable, Optional, Tuple
import logging

from insights_engine.heuristics import lexicons
from insights_engine.models.schemas import FeedbackRecord, Sentiment


logger = logging.getLogger(__name__)

HINT_SCORE = 0.7
SHOUTING_MIN_LENGTH = 10


def _contains_any(text: str, markers: Iterable[str]) -> bool:
    return any(marker in text for marker in markers)


def match_sentiment_hint(hint: Optional[str]) -> Optional[Tuple[str, float]]:
    """
    Resolve an explicit sentiment hint.

    Args:
        hint: Raw hint value from the source data

    Returns:
        (sentiment, score), or None when the hint is absent or blank
    """
    if hint is None:
        return None
    value = str(hint).strip().lower()
    if not value:
        return None

    if _contains_any(value, lexicons.POSITIVE_HINT_WORDS) or value in lexicons.POSITIVE_HINT_CODES:
        return Sentiment.POSITIVE.value, HINT_SCORE
    if _contains_any(value, lexicons.NEGATIVE_HINT_WORDS) or value in lexicons.NEGATIVE_HINT_CODES:
        return Sentiment.NEGATIVE.value, -HINT_SCORE
    if _contains_any(value, lexicons.NEUTRAL_HINT_WORDS) or value in lexicons.NEUTRAL_HINT_CODES:
        return Sentiment.NEUTRAL.value, 0.0

    logger.info(f"Unrecognized sentiment hint: \"{value}\" - defaulting to neutral")
    return Sentiment.NEUTRAL.value, 0.0


def has_low_satisfaction(hint: Optional[str]) -> bool:
    value = (hint or "").lower()
    return _contains_any(value, lexicons.LOW_SATISFACTION)


def has_high_satisfaction(hint: Optional[str]) -> bool:
    value = (hint or "").lower()
    return _contains_any(value, lexicons.HIGH_SATISFACTION)


def has_meaningful_issue(hint: Optional[str]) -> bool:
    value = (hint or "").strip().lower()
    return bool(value) and value not in lexicons.TRIVIAL_ISSUE_HINTS


def negative_score(record: FeedbackRecord) -> int:
    """Accumulate the negative evidence of a record."""
    raw = record.text
    text = raw.lower()
    score = 0

    if _contains_any(text, lexicons.STRONG_NEGATIVE):
        score += 5
    if _contains_any(text, lexicons.FUNCTIONAL_DEFECT):
        score += 4
    if has_meaningful_issue(record.issue_hint):
        score += 3
    if record.rating is not None and record.rating <= 2:
        score += 3
    if has_low_satisfaction(record.satisfaction_hint):
        score += 3

    for table in (
        lexicons.NEGATIVE_WORDS,
        lexicons.QUALITY_ISSUE,
        lexicons.SERVICE_ISSUE,
        lexicons.DELIVERY_ISSUE,
        lexicons.PERFORMANCE_ISSUE,
        lexicons.NEGATION_PATTERNS,
    ):
        if _contains_any(text, table):
            score += 3

    for markers, points in lexicons.NEGATIVE_CUES:
        if _contains_any(text, markers):
            score += points

    if text.count("!") >= 3:
        score += 1
    # Shouting
    if len(raw) > SHOUTING_MIN_LENGTH and raw.upper() == raw and raw.lower() != raw:
        score += 1

    return score


def positive_score(record: FeedbackRecord) -> int:
    """Accumulate the positive evidence of a record."""
    text = record.text.lower()
    score = 0

    if _contains_any(text, lexicons.STRONG_POSITIVE):
        score += 6
    if _contains_any(text, lexicons.POSITIVE_EXPERIENCE):
        score += 5
    if record.rating is not None and record.rating >= 4:
        score += 4
    if has_high_satisfaction(record.satisfaction_hint):
        score += 4

    matched_words = sum(1 for word in lexicons.POSITIVE_WORDS if word in text)
    score += min(matched_words * lexicons.POSITIVE_WORD_POINTS, lexicons.POSITIVE_WORD_CAP)

    if _contains_any(text, lexicons.LOYALTY):
        score += 3
    if _contains_any(text, lexicons.GRATITUDE):
        score += 2
    if "recommend" in text and not _contains_any(text, lexicons.RECOMMEND_NEGATORS):
        score += 3

    for markers, points in lexicons.POSITIVE_CUES:
        if _contains_any(text, markers):
            score += points
    if any(first in text and second in text for first, second in lexicons.SURPRISE_PAIRS):
        score += lexicons.SURPRISE_POINTS

    return score


def classify_scores(positive: int, negative: int) -> Tuple[str, float]:
    """
    Map a (positive, negative) score pair to a sentiment and a signed score.

    Rules are evaluated top to bottom; the first match wins.
    """
    difference = positive - negative

    if negative >= 5 or (negative >= 3 and positive <= 2):
        return Sentiment.NEGATIVE.value, max(-0.9, -0.1 * negative)
    if negative >= 1 and difference <= -1:
        return Sentiment.NEGATIVE.value, max(-0.7, -0.15 * negative)
    if positive >= 8 or (positive >= 5 and negative == 0):
        return Sentiment.POSITIVE.value, min(0.9, 0.1 * positive)
    if positive >= 3 and difference >= 2:
        return Sentiment.POSITIVE.value, min(0.8, 0.12 * positive)
    if positive > negative and positive >= 2:
        return Sentiment.POSITIVE.value, min(0.6, 0.15 * difference)
    if negative > positive and negative >= 1:
        return Sentiment.NEGATIVE.value, max(-0.5, -0.2 * negative)
    return Sentiment.NEUTRAL.value, 0.05 * difference


def score(record: FeedbackRecord) -> Tuple[str, float]:
    """
    Score one feedback record.

    Args:
        record: Feedback record to score

    Returns:
        (sentiment, sentiment_score) with the score in [-1.0, 1.0]
    """
    hinted = match_sentiment_hint(record.sentiment_hint)
    if hinted is not None:
        return hinted

    sentiment, value = classify_scores(positive_score(record), negative_score(record))
    return sentiment, max(-1.0, min(1.0, value))
