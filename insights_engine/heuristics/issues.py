"""
Issue classification for negative or issue-bearing feedback.

Each issue-bearing record lands in exactly one category, chosen by the first
matching lexicon in ``lexicons.ISSUE_CATEGORIES``.
"""

from typing import Dict, Iterable, Optional

from insights_engine.heuristics import lexicons
from insights_engine.models.schemas import ClassifiedFeedback, FeedbackRecord, IssueCategory, Sentiment


def is_issue_bearing(record: FeedbackRecord, sentiment: Optional[str] = None) -> bool:
    """Whether a record carries a known or implied issue."""
    if sentiment == Sentiment.NEGATIVE.value:
        return True

    sentiment_hint = (record.sentiment_hint or "").lower()
    if any(marker in sentiment_hint for marker in lexicons.NEGATIVE_SENTIMENT_HINT_MARKERS):
        return True

    satisfaction = (record.satisfaction_hint or "").lower()
    if any(marker in satisfaction for marker in lexicons.DISSATISFIED_MARKERS):
        return True

    issue = (record.issue_hint or "").lower()
    if issue and (
        any(marker in issue for marker in lexicons.ISSUE_HINT_MARKERS)
        or len(issue) > lexicons.ISSUE_HINT_MIN_LENGTH
    ):
        return True

    text = record.text.lower()
    return any(trigger in text for trigger in lexicons.ISSUE_TRIGGERS)


def classify(record: FeedbackRecord, sentiment: Optional[str] = None) -> Optional[str]:
    """
    Assign an issue category to a record.

    Args:
        record: Feedback record
        sentiment: Final sentiment of the record, if already known

    Returns:
        Issue category name, or None when the record carries no issue
    """
    if not is_issue_bearing(record, sentiment):
        return None

    text = record.text.lower()
    for category, markers in lexicons.ISSUE_CATEGORIES:
        if any(marker in text for marker in markers):
            return category
    return lexicons.DEFAULT_ISSUE_CATEGORY


def empty_tally() -> Dict[str, int]:
    return {category.value: 0 for category in IssueCategory}


def tally(records: Iterable[ClassifiedFeedback]) -> Dict[str, int]:
    """Count records per issue category."""
    counts = empty_tally()
    for record in records:
        if record.issue_type:
            counts[record.issue_type] += 1
    return counts
