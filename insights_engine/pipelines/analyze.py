"""
Feedback analysis pipeline.

Classifies a batch of feedback records with the LLM when it is available and
falls back to the lexicon heuristics for the whole batch when it is not, then
aggregates the classified records into one AnalysisResult.
"""

from typing import Any, Dict, List, Optional
from pathlib import Path
import argparse
import json
import logging
import time

import pandas as pd

from insights_engine.agents.llm_agent import AdapterFailure, FeedbackClassifier
from insights_engine.config.settings import Settings
from insights_engine.heuristics import extractor, issues, scorer
from insights_engine.models.schemas import (
    AIBatchResult,
    AnalysisResult,
    ClassifiedFeedback,
    FeedbackRecord,
    PRIORITY_BY_SENTIMENT,
    Sentiment,
)
from insights_engine.pipelines.aggregate import Aggregator


logger = logging.getLogger(__name__)


def classify_heuristically(record: FeedbackRecord, key_phrase_limit: Optional[int] = 3) -> ClassifiedFeedback:
    """
    Classify one record with the lexicon heuristics.

    Args:
        record: Feedback record
        key_phrase_limit: Maximum number of key phrases to keep

    Returns:
        Classified record
    """
    sentiment, score = scorer.score(record)
    topics, key_phrases = extractor.extract(record.text, limit=key_phrase_limit)
    return ClassifiedFeedback(
        **record.model_dump(),
        sentiment=sentiment,
        sentiment_score=score,
        topics=topics,
        key_phrases=key_phrases,
        priority=PRIORITY_BY_SENTIMENT[sentiment],
        issue_type=issues.classify(record, sentiment),
    )


class AnalysisPipeline:
    """Pipeline producing an AnalysisResult for one feedback batch."""

    def __init__(
        self,
        config: Settings,
        classifier: Optional[FeedbackClassifier] = None,
        aggregator: Optional[Aggregator] = None,
    ):
        """
        Initialize the analysis pipeline.

        Args:
            config: Application settings
            classifier: LLM batch classifier. Created from config when an API key is configured.
            aggregator: Aggregation step. Created from config when None.
        """
        self.config = config
        if classifier is None and config.openai_api_key:
            classifier = FeedbackClassifier(config)
        self.classifier = classifier
        self.aggregator = aggregator or Aggregator(config)

    def run(self, records: List[FeedbackRecord]) -> AnalysisResult:
        """
        Analyze a feedback batch.

        Never raises for classification problems: any LLM failure switches the
        whole batch to the heuristic path.

        Args:
            records: Feedback records, in input order

        Returns:
            Complete AnalysisResult
        """
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("httpcore").setLevel(logging.WARNING)

        logger.info(f"Starting analysis of {len(records)} feedback records")

        ai_result = self._classify_with_llm(records)
        if ai_result is not None:
            classified = ai_result.individual_feedback
        else:
            classified = self._classify_with_heuristics(records)

        result = self.aggregator.aggregate(classified, ai_result)
        self._log_distribution(result)
        return result

    def _classify_with_llm(self, records: List[FeedbackRecord]) -> Optional[AIBatchResult]:
        if self.classifier is None:
            logger.warning("OpenAI API key not configured - using heuristic analysis")
            return None
        if not records:
            return None

        try:
            result = self.classifier.classify_batch(records)
        except AdapterFailure as e:
            logger.warning(f"LLM analysis failed, falling back to heuristic analysis: {e}")
            return None

        logger.info("LLM analysis completed successfully")
        return result

    def _classify_with_heuristics(self, records: List[FeedbackRecord]) -> List[ClassifiedFeedback]:
        logger.info(f"Classifying {len(records)} records with heuristic analysis")
        return [classify_heuristically(record, self.config.key_phrase_limit) for record in records]

    @staticmethod
    def _log_distribution(result: AnalysisResult) -> None:
        distribution = result.sentiment_distribution
        total = result.total_feedback
        negative_share = (distribution.negative / total * 100) if total else 0.0
        logger.info(
            f"Sentiment distribution ({result.analysis_source}): "
            f"{distribution.positive} positive, {distribution.neutral} neutral, "
            f"{distribution.negative} negative ({negative_share:.1f}% negative)"
        )

        if logger.isEnabledFor(logging.DEBUG):
            for sentiment, limit in ((Sentiment.NEGATIVE, 5), (Sentiment.POSITIVE, 3), (Sentiment.NEUTRAL, 3)):
                examples = [r for r in result.individual_feedback if r.sentiment == sentiment.value][:limit]
                for record in examples:
                    logger.debug(f"[{sentiment.value}] \"{record.text[:100]}\" (score: {record.sentiment_score})")


def _clean(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, float) and pd.isna(value):
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return value


def build_records(rows: List[Dict[str, Any]]) -> List[FeedbackRecord]:
    """
    Build feedback records from rows keyed by record field names.

    Rows without text are dropped; ids follow the input position (feedback_1, ...).
    """
    fields = set(FeedbackRecord.model_fields)
    records = []
    for index, row in enumerate(rows, start=1):
        values = {key: _clean(value) for key, value in row.items() if key in fields and key != "id"}
        text = values.get("text")
        if text is None or not str(text).strip():
            continue
        values["text"] = str(text)
        records.append(FeedbackRecord(id=f"feedback_{index}", **values))
    return records


def load_records(path: Path) -> List[FeedbackRecord]:
    """Load feedback records from a CSV or JSON file."""
    if path.suffix.lower() == ".json":
        rows = json.loads(path.read_text(encoding="utf-8"))
    else:
        rows = pd.read_csv(path, dtype=str).to_dict(orient="records")
    return build_records(rows)


def main():
    """Main entry point for analyzing a feedback file from the command line."""
    # Parse command-line arguments
    parser = argparse.ArgumentParser(
        description='Analyze a customer feedback file and print the analysis as JSON.'
    )
    parser.add_argument(
        'input',
        type=Path,
        help='CSV or JSON file whose columns are feedback record fields (text, product, region, ...)'
    )
    parser.add_argument(
        '--output',
        type=Path,
        help='Write the JSON result to this file instead of stdout'
    )
    parser.add_argument(
        '--log-level',
        type=str,
        help='Logging level (default: LOG_LEVEL setting, INFO)'
    )

    args = parser.parse_args()

    # Load configuration
    config = Settings()

    # Configure logging
    logging.basicConfig(
        level=(args.log_level or config.log_level).upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if not args.input.exists():
        parser.error(f"Input file not found: {args.input}")

    records = load_records(args.input)
    if not records:
        parser.error("No valid feedback data found in the file")

    # Run analysis pipeline
    start = time.perf_counter()
    result = AnalysisPipeline(config).run(records)
    elapsed = time.perf_counter() - start
    logger.info(f"Analysis finished in {elapsed:.1f} seconds")

    payload = result.model_dump_json(by_alias=True, indent=2)
    if not args.output:
        print(payload)
        return

    args.output.write_text(payload, encoding="utf-8")

    # Print results
    distribution = result.sentiment_distribution
    print("\n" + "="*60)
    print("FEEDBACK ANALYSIS RESULTS")
    print("="*60)
    print(f"Total feedback analyzed: {result.total_feedback}")
    print(f"Analysis source: {result.analysis_source}")
    print(f"Positive: {distribution.positive}")
    print(f"Neutral: {distribution.neutral}")
    print(f"Negative: {distribution.negative}")
    print(f"Processing time: {elapsed:.1f}s")
    print(f"Result written to: {args.output}")
    print("="*60)


if __name__ == "__main__":
    main()
