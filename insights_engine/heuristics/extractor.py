"""Topic and key-phrase extraction by lexicon containment."""

from typing import List, Optional, Tuple

from insights_engine.heuristics import lexicons


def extract_topics(text: str) -> List[str]:
    """Return topic tags in lexicon order, or the default tag when none match."""
    lowered = text.lower()
    topics = [
        topic for topic, markers in lexicons.TOPICS.items()
        if any(marker in lowered for marker in markers)
    ]
    return topics or [lexicons.DEFAULT_TOPIC]


def extract_key_phrases(text: str, limit: Optional[int] = None) -> List[str]:
    """Return canonical key phrases whose triggers occur in the text."""
    lowered = text.lower()
    phrases = [
        phrase for phrase, triggers in lexicons.KEY_PHRASES
        if any(trigger in lowered for trigger in triggers)
    ]
    return phrases if limit is None else phrases[:limit]


def extract(text: str, limit: Optional[int] = None) -> Tuple[List[str], List[str]]:
    """
    Extract topics and key phrases from feedback text.

    Args:
        text: Feedback text
        limit: Maximum number of key phrases (None = unbounded)

    Returns:
        (topics, key_phrases)
    """
    return extract_topics(text), extract_key_phrases(text, limit)
