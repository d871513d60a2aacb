"""Unit tests for topic and key-phrase extraction."""
from insights_engine.heuristics import extractor


class TestExtractTopics:
    """Test topic extraction."""

    def test_topics_in_lexicon_order(self):
        """Test matched topics come back in lexicon order."""
        assert extractor.extract_topics("Harga murah, rasa enak sekali") == ["taste", "price"]

    def test_default_topic(self):
        """Test text with no topic marker gets the default topic."""
        assert extractor.extract_topics("Nice day") == ["general"]

    def test_case_insensitive(self):
        """Test matching ignores case."""
        assert extractor.extract_topics("PACKAGING was torn") == ["packaging"]


class TestExtractKeyPhrases:
    """Test key-phrase extraction."""

    def test_canonical_phrases(self):
        """Test triggers map to their canonical phrase."""
        phrases = extractor.extract_key_phrases("Harga murah, rasa enak sekali")
        assert phrases == ["rasa enak", "harga terjangkau"]

    def test_limit(self):
        """Test the phrase limit keeps the first matches."""
        assert extractor.extract_key_phrases("Harga murah, rasa enak sekali", limit=1) == ["rasa enak"]

    def test_no_phrases(self):
        """Test text with no trigger yields no phrases."""
        assert extractor.extract_key_phrases("Nice day") == []


class TestExtract:
    """Test combined extraction."""

    def test_extract(self):
        """Test extract returns topics and phrases together."""
        topics, phrases = extractor.extract("Great quality, will buy again", limit=3)
        assert topics == ["quality"]
        assert phrases == ["akan beli lagi"]
