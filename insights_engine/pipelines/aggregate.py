"""
Aggregation of classified feedback into the batch-level analysis result.

Aggregates supplied by the LLM are used when present, except the sentiment
distribution, which is always recounted from the classified records so that
it sums to the number of records.
"""

from typing import Dict, List, Optional
from datetime import date, timedelta
from collections import Counter
import logging
import random
import re

import pandas as pd

from insights_engine.config.settings import Settings
from insights_engine.heuristics import issues, lexicons
from insights_engine.models.schemas import (
    AIBatchResult,
    AnalysisResult,
    ClassifiedFeedback,
    IssueCategory,
    MitigationStrategies,
    Sentiment,
    SentimentDistribution,
    TimeSeriesPoint,
)
from insights_engine.pipelines import catalog


logger = logging.getLogger(__name__)

# Half-open ranges of the cosmetic time-series filler
FILLER_RANGES = {
    Sentiment.POSITIVE.value: (10, 30),
    Sentiment.NEUTRAL.value: (8, 23),
    Sentiment.NEGATIVE.value: (3, 13),
}

REGION_PATTERN = re.compile(
    r"\b(?i:" + "|".join(lexicons.REGION_PREPOSITIONS) + r")\s+([A-Z][a-zA-Z]*(?:\s+[A-Z][a-zA-Z]*)*)"
)
REGION_NOISE = re.compile(r"\b(" + "|".join(lexicons.REGION_NOISE_WORDS) + r")\b")
PRODUCT_PATTERNS = [
    (category, re.compile(r"\b(" + "|".join(re.escape(k) for k in keywords) + r")\b"))
    for category, keywords in lexicons.PRODUCT_CATEGORIES
]


def _display_name(name: str) -> str:
    return name[0].upper() + name[1:]


def normalize_region(region: str) -> Optional[str]:
    """Normalize a free-text region name for display, or None if nothing usable remains."""
    name = REGION_NOISE.sub("", region.lower())
    name = re.sub(r"\s+", " ", name).split(",")[0].split("-")[0].strip()
    if len(name) <= 1:
        return None
    return _display_name(name)


def extract_region(record: ClassifiedFeedback) -> Optional[str]:
    """Find the region of a record from its region field or its free text."""
    if record.region and record.region.strip():
        region = normalize_region(record.region)
        if region:
            return region

    for match in REGION_PATTERN.finditer(record.text):
        if match.group(1).split()[0].lower() in lexicons.REGION_STOP_WORDS:
            continue
        region = normalize_region(match.group(1))
        if region:
            return region

    combined = f"{record.text} {record.customer_info or ''}".lower()
    for city in lexicons.KNOWN_CITIES:
        if city in combined:
            return _display_name(city)
    return None


def categorize_product(record: ClassifiedFeedback) -> str:
    """Map a record onto a product category."""
    product = (record.product or record.category or "").lower()
    text = record.text.lower()

    for category, pattern in PRODUCT_PATTERNS:
        if pattern.search(product):
            return category
        if category == "electronics" and any(marker in text for marker in lexicons.ELECTRONICS_TEXT_MARKERS):
            return category
    return lexicons.DEFAULT_PRODUCT_CATEGORY


def parse_date(value: Optional[str]) -> Optional[date]:
    """Parse a free-form date string; None when it cannot be parsed."""
    if not value or not str(value).strip():
        return None
    try:
        parsed = pd.to_datetime(str(value).strip(), errors="coerce")
    except (ValueError, TypeError, OverflowError):
        parsed = pd.NaT
    if pd.isna(parsed):
        logger.debug(f"Could not parse date \"{value}\" - excluded from time series")
        return None
    return parsed.date()


class Aggregator:
    """Build the batch-level analysis from classified records."""

    def __init__(self, config: Settings, rng: Optional[random.Random] = None, today: Optional[date] = None):
        """
        Initialize the aggregator.

        Args:
            config: Application settings (filler policy, time-series window)
            rng: Random source for the filler policy. Seeded from config when None.
            today: Last day of the time series (default: the current date)
        """
        self.config = config
        self.rng = rng or random.Random(config.filler_seed)
        self.today = today

    def aggregate(
        self,
        records: List[ClassifiedFeedback],
        ai: Optional[AIBatchResult] = None,
    ) -> AnalysisResult:
        """
        Aggregate classified records into an AnalysisResult.

        Args:
            records: Final classified records, in input order
            ai: Batch aggregates from the LLM, when the primary path succeeded

        Returns:
            Complete AnalysisResult
        """
        total = len(records)
        sentiment = self.sentiment_distribution(records)

        if ai is not None and ai.mitigation_strategies is not None and not ai.mitigation_strategies.is_empty():
            mitigation = ai.mitigation_strategies
        elif sentiment.negative > 0:
            mitigation = catalog.default_mitigation_strategies()
        else:
            mitigation = MitigationStrategies()

        return AnalysisResult(
            total_feedback=total,
            sentiment_distribution=sentiment,
            topic_distribution=(ai.topic_distribution if ai and ai.topic_distribution else self.topic_distribution(records)),
            issue_analysis=self.issue_analysis(records, ai),
            regional_distribution=(
                ai.regional_distribution if ai and ai.regional_distribution else self.regional_distribution(records)
            ),
            product_distribution=(
                ai.product_distribution if ai and ai.product_distribution else self.product_distribution(records)
            ),
            negative_patterns=ai.negative_patterns if ai else [],
            mitigation_strategies=mitigation,
            time_series_data=self.time_series(records),
            key_findings=(ai.key_findings if ai and ai.key_findings else catalog.fallback_key_findings(total)),
            ai_summary=(ai.summary if ai and ai.summary else catalog.fallback_summary(total)),
            business_recommendations=catalog.business_recommendations(),
            individual_feedback=records,
            analysis_source="ai" if ai is not None else "heuristic",
        )

    @staticmethod
    def sentiment_distribution(records: List[ClassifiedFeedback]) -> SentimentDistribution:
        counts = Counter(record.sentiment for record in records)
        return SentimentDistribution(
            positive=counts[Sentiment.POSITIVE.value],
            neutral=counts[Sentiment.NEUTRAL.value],
            negative=counts[Sentiment.NEGATIVE.value],
        )

    @staticmethod
    def topic_distribution(records: List[ClassifiedFeedback]) -> Dict[str, int]:
        distribution = {topic: 0 for topic in lexicons.TOPICS}
        for record in records:
            for topic in record.topics:
                distribution[topic] = distribution.get(topic, 0) + 1
        return distribution

    @staticmethod
    def issue_analysis(records: List[ClassifiedFeedback], ai: Optional[AIBatchResult] = None) -> Dict[str, int]:
        if ai is not None and ai.issue_analysis:
            tally = issues.empty_tally()
            known = {category.value for category in IssueCategory}
            for category, count in ai.issue_analysis.items():
                if category in known:
                    tally[category] = count
            return tally
        return issues.tally(records)

    def regional_distribution(self, records: List[ClassifiedFeedback]) -> Dict[str, int]:
        distribution: Dict[str, int] = {}
        for record in records:
            region = extract_region(record)
            if region:
                distribution[region] = distribution.get(region, 0) + 1

        if distribution or not records:
            return distribution

        # Nothing found anywhere: placeholder so the regional view is never empty
        total = len(records)
        logger.info("No regions found in feedback - using placeholder regional distribution")
        if self.config.filler_policy == "random":
            return {
                region: self.rng.randrange(max(1, total // 5)) + 1
                for region in lexicons.PLACEHOLDER_REGIONS
            }
        return {lexicons.PLACEHOLDER_REGIONS[-1]: total}

    @staticmethod
    def product_distribution(records: List[ClassifiedFeedback]) -> Dict[str, int]:
        if not records:
            return {category: 0 for category in lexicons.EMPTY_PRODUCT_DISTRIBUTION}
        return dict(Counter(categorize_product(record) for record in records))

    def time_series(self, records: List[ClassifiedFeedback]) -> List[TimeSeriesPoint]:
        """
        Count records per sentiment for each trailing day.

        Empty slots are filled according to the filler policy: random values
        keep the trend chart populated, ``none`` leaves them at zero.
        """
        today = self.today or date.today()
        days = [today - timedelta(days=offset) for offset in range(self.config.time_series_days - 1, -1, -1)]

        counts: Dict[date, Counter] = {day: Counter() for day in days}
        for record in records:
            day = parse_date(record.date)
            if day in counts:
                counts[day][record.sentiment] += 1

        points = []
        for day in days:
            values = {}
            for sentiment, (low, high) in FILLER_RANGES.items():
                count = counts[day][sentiment]
                if count == 0 and self.config.filler_policy == "random":
                    count = self.rng.randrange(low, high)
                values[sentiment] = count
            points.append(TimeSeriesPoint(date=day.isoformat(), **values))
        return points
