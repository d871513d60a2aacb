"""Unit tests for the AnalysisPipeline class and the command-line loader."""
import json
import logging
import pytest
from datetime import date
from unittest.mock import Mock, patch
from insights_engine.agents.llm_agent import AdapterFailure, FeedbackClassifier
from insights_engine.config.settings import Settings
from insights_engine.models.schemas import AIBatchResult, ClassifiedFeedback, FeedbackRecord
from insights_engine.pipelines.aggregate import Aggregator
from insights_engine.pipelines.analyze import (
    AnalysisPipeline,
    build_records,
    classify_heuristically,
    load_records,
    main,
)


@pytest.fixture
def config():
    """Create a configuration without an API key or random filler."""
    return Settings(_env_file=None, openai_api_key=None, filler_policy="none")


@pytest.fixture
def sample_records():
    """Create sample feedback records for testing."""
    return [
        FeedbackRecord(id="feedback_1", text="Produk ini rusak total, tidak berfungsi sama sekali"),
        FeedbackRecord(id="feedback_2", text="Saya sangat suka produk ini, kualitas luar biasa, recommended banget!"),
        FeedbackRecord(id="feedback_3", text="I received the product yesterday", rating=1),
    ]


@pytest.fixture
def mock_classifier():
    """Create a mock LLM classifier."""
    return Mock(spec=FeedbackClassifier)


def make_pipeline(config, classifier=None):
    return AnalysisPipeline(config, classifier=classifier, aggregator=Aggregator(config, today=date(2024, 1, 7)))


class TestClassifyHeuristically:
    """Test single-record heuristic classification."""

    def test_functional_defect(self, sample_records):
        """Test a defect report is negative, high priority, and a functional defect."""
        result = classify_heuristically(sample_records[0])
        assert result.sentiment == "negative"
        assert result.priority == "high"
        assert result.issue_type == "functional_defects"
        assert result.topics == ["general"]

    def test_praise(self, sample_records):
        """Test praise is positive, low priority, and carries no issue."""
        result = classify_heuristically(sample_records[1])
        assert result.sentiment == "positive"
        assert result.priority == "low"
        assert result.issue_type is None
        assert "quality" in result.topics
        assert result.key_phrases == ["sangat suka", "recommended"]

    def test_low_rating(self, sample_records):
        """Test a low rating with neutral text is negative."""
        result = classify_heuristically(sample_records[2])
        assert result.sentiment == "negative"
        assert result.sentiment_score == pytest.approx(-0.3)
        assert result.issue_type == "quality_issues"

    def test_key_phrase_limit(self):
        """Test the key phrase limit is applied."""
        record = FeedbackRecord(id="a", text="Harga murah, rasa enak sekali, akan beli lagi")
        assert classify_heuristically(record, key_phrase_limit=1).key_phrases == ["rasa enak"]

    def test_neutral_priority(self):
        """Test neutral records get medium priority."""
        result = classify_heuristically(FeedbackRecord(id="a", text="I received the product yesterday"))
        assert result.sentiment == "neutral"
        assert result.priority == "medium"
        assert result.issue_type is None


class TestAnalysisPipeline:
    """Test AnalysisPipeline class."""

    def test_no_api_key_uses_heuristics(self, config, sample_records, caplog):
        """Test the heuristic path runs when no API key is configured."""
        caplog.set_level(logging.INFO)
        pipeline = make_pipeline(config)

        result = pipeline.run(sample_records)

        assert pipeline.classifier is None
        assert result.analysis_source == "heuristic"
        assert result.sentiment_distribution.model_dump() == {"positive": 1, "neutral": 0, "negative": 2}
        assert "API key not configured" in caplog.text

    @patch('insights_engine.pipelines.analyze.FeedbackClassifier')
    def test_classifier_created_with_api_key(self, mock_classifier_class, config):
        """Test an LLM classifier is created when an API key is configured."""
        config.openai_api_key = "test-api-key"
        pipeline = AnalysisPipeline(config)
        mock_classifier_class.assert_called_once_with(config)
        assert pipeline.classifier == mock_classifier_class.return_value

    def test_fallback_on_adapter_failure(self, config, sample_records, mock_classifier, caplog):
        """Test an LLM failure switches the whole batch to the heuristic path."""
        caplog.set_level(logging.INFO)
        mock_classifier.classify_batch.side_effect = AdapterFailure("LLM analysis timed out after 30.0s")
        pipeline = make_pipeline(config, mock_classifier)

        result = pipeline.run(sample_records)

        mock_classifier.classify_batch.assert_called_once_with(sample_records)
        assert result.analysis_source == "heuristic"
        assert [r.sentiment for r in result.individual_feedback] == ["negative", "positive", "negative"]
        assert "falling back to heuristic analysis" in caplog.text
        assert "timed out" in caplog.text

    def test_llm_result_used(self, config, sample_records, mock_classifier):
        """Test a successful LLM batch provides the classifications."""
        classified = [
            ClassifiedFeedback(
                **record.model_dump(), sentiment="neutral", sentiment_score=0.0,
                topics=["general"], priority="medium",
            )
            for record in sample_records
        ]
        mock_classifier.classify_batch.return_value = AIBatchResult(
            individual_feedback=classified, summary="Model summary", key_findings=["Model finding"],
        )
        pipeline = make_pipeline(config, mock_classifier)

        result = pipeline.run(sample_records)

        assert result.analysis_source == "ai"
        assert result.sentiment_distribution.neutral == 3
        assert result.ai_summary == "Model summary"
        assert result.mitigation_strategies.is_empty()

    def test_order_and_ids_preserved(self, config, sample_records):
        """Test every input record appears once, in order, with its fields."""
        result = make_pipeline(config).run(sample_records)
        assert result.total_feedback == len(sample_records)
        assert [r.id for r in result.individual_feedback] == [r.id for r in sample_records]
        assert [r.text for r in result.individual_feedback] == [r.text for r in sample_records]
        assert result.individual_feedback[2].rating == 1

    def test_issue_analysis_matches_negatives(self, config, sample_records):
        """Test each negative record lands in exactly one issue category."""
        result = make_pipeline(config).run(sample_records)
        assert result.issue_analysis["functional_defects"] == 1
        assert result.issue_analysis["quality_issues"] == 1
        assert sum(result.issue_analysis.values()) == 2
        assert len(result.mitigation_strategies.immediate_response) == 2

    def test_empty_batch_skips_llm(self, config, mock_classifier):
        """Test an empty batch never reaches the LLM."""
        result = make_pipeline(config, mock_classifier).run([])
        mock_classifier.classify_batch.assert_not_called()
        assert result.total_feedback == 0
        assert result.individual_feedback == []

    def test_camel_case_output(self, config, sample_records):
        """Test the result serializes with camelCase keys."""
        data = json.loads(make_pipeline(config).run(sample_records).model_dump_json(by_alias=True))
        assert data["totalFeedback"] == 3
        assert data["individualFeedback"][0]["sentimentScore"] == pytest.approx(-0.9)
        assert data["individualFeedback"][0]["issueType"] == "functional_defects"
        assert len(data["timeSeriesData"]) == 7
        assert data["analysisSource"] == "heuristic"


class TestLoadRecords:
    """Test record loading for the command line."""

    def test_build_records(self):
        """Test rows become records with positional ids, blank rows dropped."""
        records = build_records([
            {"text": "Great taste", "rating": "5", "extra": "ignored"},
            {"text": "   "},
            {"text": "Broken", "product": float("nan")},
        ])
        assert [r.id for r in records] == ["feedback_1", "feedback_3"]
        assert records[0].rating == 5
        assert records[1].product is None

    def test_load_csv(self, tmp_path):
        """Test loading a CSV file."""
        path = tmp_path / "feedback.csv"
        path.write_text("text,product,rating\nGreat taste,Snack,5\n,Milk,1\nBroken,,\n", encoding="utf-8")

        records = load_records(path)

        assert [r.id for r in records] == ["feedback_1", "feedback_3"]
        assert records[0].product == "Snack"
        assert records[0].rating == 5
        assert records[1].product is None
        assert records[1].rating is None

    def test_load_json(self, tmp_path):
        """Test loading a JSON file."""
        path = tmp_path / "feedback.json"
        path.write_text(json.dumps([
            {"text": "Rasa enak", "region": "Jakarta", "rating": 5},
            {"text": ""},
        ]), encoding="utf-8")

        records = load_records(path)

        assert len(records) == 1
        assert records[0].region == "Jakarta"
        assert records[0].rating == 5


class TestMain:
    """Test the command-line entry point."""

    @patch('insights_engine.pipelines.analyze.Settings')
    def test_main_writes_output(self, mock_settings, config, tmp_path, monkeypatch, capsys):
        """Test main analyzes a file and writes the JSON result."""
        mock_settings.return_value = config
        input_path = tmp_path / "feedback.json"
        input_path.write_text(json.dumps([{"text": "Rasa enak, harga murah"}]), encoding="utf-8")
        output_path = tmp_path / "result.json"
        monkeypatch.setattr("sys.argv", ["analyze-feedback", str(input_path), "--output", str(output_path)])

        main()

        data = json.loads(output_path.read_text(encoding="utf-8"))
        assert data["totalFeedback"] == 1
        assert data["individualFeedback"][0]["id"] == "feedback_1"
        assert "FEEDBACK ANALYSIS RESULTS" in capsys.readouterr().out

    @patch('insights_engine.pipelines.analyze.Settings')
    def test_main_prints_json(self, mock_settings, config, tmp_path, monkeypatch, capsys):
        """Test main prints the JSON result without --output."""
        mock_settings.return_value = config
        input_path = tmp_path / "feedback.json"
        input_path.write_text(json.dumps([{"text": "Broken on arrival"}]), encoding="utf-8")
        monkeypatch.setattr("sys.argv", ["analyze-feedback", str(input_path)])

        main()

        data = json.loads(capsys.readouterr().out)
        assert data["sentimentDistribution"]["negative"] == 1

    @patch('insights_engine.pipelines.analyze.Settings')
    def test_main_missing_file(self, mock_settings, config, tmp_path, monkeypatch):
        """Test main exits with an error for a missing file."""
        mock_settings.return_value = config
        monkeypatch.setattr("sys.argv", ["analyze-feedback", str(tmp_path / "missing.csv")])

        with pytest.raises(SystemExit):
            main()
