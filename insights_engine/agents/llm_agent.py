# insights_engine/agents/llm_agent.py
from openai import OpenAI, OpenAIError
from pydantic import ValidationError
from typing import List, Dict, Optional, Any
from insights_engine.config.settings import Settings
from insights_engine.heuristics import lexicons
from insights_engine.models.schemas import (
    AIBatchResult,
    ClassifiedFeedback,
    FeedbackRecord,
    MitigationStrategies,
    NegativePattern,
    PRIORITY_BY_SENTIMENT,
    Priority,
    Sentiment,
)
from concurrent.futures import ThreadPoolExecutor, TimeoutError as FutureTimeoutError
import json
import math
import re
import logging

logger = logging.getLogger(__name__)


class AdapterFailure(Exception):
    """The primary classification path could not produce a usable result."""


ANALYSIS_PROMPT = """As an expert business analyst, analyze the following customer feedback data comprehensively.

IMPORTANT INSTRUCTIONS:
1. Detect the actual product categories from the data
2. Focus on identifying specific negative feedback patterns like:
   - Product malfunction/defects ("not function properly", "broken within a week", "stopped working")
   - Quality issues ("poor quality", "cheap material", "disappointing")
   - Service problems ("poor service", "late delivery", "rude staff")
   - Performance issues ("slow", "laggy", "overheating", "battery drain")
3. If there are sentiment, issue, or satisfaction values in the data, prioritize those
4. Look for specific timeframes in complaints ("within a week", "after 2 days", "immediately")

Respond with a single JSON object in exactly this format:
{{
  "sentimentAnalysis": {{"positive": number, "neutral": number, "negative": number}},
  "topicAnalysis": {{"quality": number, "price": number, "features": number, "design": number,
                    "performance": number, "service": number, "delivery": number, "durability": number}},
  "issueAnalysis": {{"functional_defects": number, "quality_issues": number, "service_problems": number,
                    "delivery_issues": number, "performance_problems": number, "design_flaws": number}},
  "regionalInsights": {{"<region or city found in the data>": number}},
  "productCategories": {{"electronics": number, "appliances": number, "automotive": number, "fashion": number,
                        "health_beauty": number, "food_beverages": number, "personal_care": number, "other": number}},
  "negativePatterns": [
    {{
      "pattern": "specific issue pattern",
      "count": number,
      "severity": "high|medium|low",
      "examples": ["example 1", "example 2"],
      "mitigation": {{
        "immediate_actions": ["action"],
        "long_term_solutions": ["solution"],
        "prevention_measures": ["measure"]
      }}
    }}
  ],
  "mitigationStrategies": {{
    "immediate_response": [
      {{"issue_type": "functional_defects", "strategy": "...", "timeline": "24-48 hours", "responsible_team": "..."}}
    ],
    "improvement_initiatives": [
      {{"focus_area": "...", "initiative": "...", "expected_impact": "...", "investment_required": "low|medium|high"}}
    ],
    "positive_reinforcement": [
      {{"strength": "...", "amplification_strategy": "...", "marketing_opportunity": "..."}}
    ]
  }},
  "businessSummary": "detailed 2-3 paragraph executive summary",
  "keyFindings": ["finding 1", "finding 2", "finding 3", "finding 4", "finding 5"],
  "individualAnalysis": [
    {{
      "feedbackId": "feedback_1",
      "sentiment": "positive|neutral|negative",
      "sentimentScore": -1.0 to 1.0,
      "topics": ["topic1", "topic2"],
      "keyPhrases": ["important phrase 1", "key phrase 2"],
      "priority": "high|medium|low",
      "issueType": "functional|quality|service|delivery|performance|design|none"
    }}
  ]
}}

Return one individualAnalysis entry for every feedback item, using the id shown in brackets.

Customer Feedback Data:
{feedback_list}

Additional Context:
- Products mentioned: {products}
- Regions mentioned: {regions}
- Categories: {categories}

For keyPhrases, extract meaningful phrases that indicate issues:
- "stopped working", "not functioning", "broke down"
- "poor quality", "cheap material", "disappointing"
- "slow performance", "battery issues", "overheating"
- "late delivery", "damaged packaging", "wrong item"
"""


class ChatAgent:
    """OpenAI chat client bounded by a hard timeout."""

    def __init__(self, config: Settings):
        self.config = config
        self.timeout = config.ai_timeout_seconds
        # Single attempt: a failure falls back to the heuristic path instead of retrying
        self.client = OpenAI(api_key=config.openai_api_key, timeout=self.timeout, max_retries=0)
        self.model = config.openai_llm_model

    def chat(self, messages: List[dict], json_mode: bool = False) -> str:
        """
        Send a list of messages to the OpenAI chat model and get the response.

        The request runs on a worker thread and is raced against the configured
        timeout; when the timeout wins, the request is abandoned.

        Args:
            messages: List of message dicts (e.g., [{"role": "user", "content": "Hello"}])
            json_mode: Ask the model for a JSON object response

        Returns:
            The assistant's reply as a string.

        Raises:
            concurrent.futures.TimeoutError: The model did not answer in time
            openai.OpenAIError: The request failed
            ValueError: The completion contains no choices
        """
        kwargs: Dict[str, Any] = {
            "model": self.model,
            "messages": messages,
            "max_tokens": self.config.ai_max_tokens,
        }
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        executor = ThreadPoolExecutor(max_workers=1)
        try:
            future = executor.submit(self.client.chat.completions.create, **kwargs)
            response = future.result(timeout=self.timeout)
        finally:
            executor.shutdown(wait=False, cancel_futures=True)
        if not response.choices:
            raise ValueError("Completion contains no choices")
        return response.choices[0].message.content or ""

    def chat_single(self, prompt: str, json_mode: bool = False) -> str:
        """
        Send a single prompt to the OpenAI chat model and get the response.

        Args:
            prompt: The user's prompt as a string.
            json_mode: Ask the model for a JSON object response

        Returns:
            The assistant's reply as a string.
        """
        messages = [{"role": "user", "content": prompt}]
        return self.chat(messages, json_mode=json_mode)


def parse_json_object(response: str) -> Dict[str, Any]:
    """Parse an LLM response as a JSON object, tolerating markdown code fences."""
    cleaned = re.sub(r'```json\s*|\s*```', '', response).strip()
    data = json.loads(cleaned)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return data


def _counts(value: Any) -> Optional[Dict[str, int]]:
    """Keep the numeric entries of a count mapping."""
    if not isinstance(value, dict):
        return None
    counts = {}
    for key, count in value.items():
        if isinstance(count, bool) or not isinstance(count, (int, float)) or not math.isfinite(count):
            continue
        counts[str(key)] = int(count)
    return counts or None


def _strings(value: Any) -> List[str]:
    if not isinstance(value, list):
        return []
    return [str(item) for item in value if isinstance(item, (str, int, float)) and str(item).strip()]


class FeedbackClassifier:
    """Classify a whole feedback batch with a single LLM call."""

    def __init__(self, config: Settings):
        """
        Initialize the feedback classifier.

        Args:
            config: Settings object with OpenAI configuration
        """
        self.config = config
        self.agent = ChatAgent(config)

    def build_prompt(self, records: List[FeedbackRecord]) -> str:
        feedback_list = "\n---\n".join(f"[{record.id}] {record.text}" for record in records)
        products = [record.product for record in records if record.product][:10]
        regions = [record.region for record in records if record.region][:10]
        categories = [record.category for record in records if record.category][:10]
        return ANALYSIS_PROMPT.format(
            feedback_list=feedback_list,
            products=", ".join(products),
            regions=", ".join(regions),
            categories=", ".join(categories),
        )

    def classify_batch(self, records: List[FeedbackRecord]) -> AIBatchResult:
        """
        Classify every record and collect the batch-level aggregates.

        Args:
            records: Feedback records of one analysis request

        Returns:
            AIBatchResult with one classified record per input record, in input order

        Raises:
            AdapterFailure: On timeout, API error, or an unusable response
        """
        logger.info(f"Requesting LLM analysis for {len(records)} records")
        try:
            response = self.agent.chat_single(self.build_prompt(records), json_mode=True)
        except FutureTimeoutError as e:
            raise AdapterFailure(f"LLM analysis timed out after {self.config.ai_timeout_seconds}s") from e
        except OpenAIError as e:
            raise AdapterFailure(f"LLM request failed: {e}") from e
        except (AttributeError, IndexError, ValueError) as e:
            raise AdapterFailure(f"Malformed LLM completion: {e}") from e

        try:
            data = parse_json_object(response)
            return self._to_batch_result(records, data)
        except (json.JSONDecodeError, ValueError, TypeError, OverflowError, ValidationError) as e:
            raise AdapterFailure(f"Unusable LLM response: {e}") from e

    def _to_batch_result(self, records: List[FeedbackRecord], data: Dict[str, Any]) -> AIBatchResult:
        items = data.get("individualAnalysis")
        if not isinstance(items, list):
            raise ValueError("Response is missing the individualAnalysis array")

        by_id = {}
        for position, item in enumerate(items):
            if not isinstance(item, dict):
                continue
            item_id = str(item.get("feedbackId") or "").strip()
            if item_id.isdigit():
                item_id = f"feedback_{item_id}"
            if item_id:
                by_id[item_id] = item
            elif position < len(records):
                by_id.setdefault(records[position].id, item)

        classified = [self._classify_record(record, by_id.get(record.id)) for record in records]
        missing = sum(1 for record in records if record.id not in by_id)
        if missing:
            logger.warning(f"LLM returned no analysis for {missing} records - using defaults")

        patterns = [
            NegativePattern.model_validate(pattern)
            for pattern in data.get("negativePatterns") or []
            if isinstance(pattern, dict) and pattern.get("pattern")
        ]
        strategies = data.get("mitigationStrategies")
        summary = data.get("businessSummary")

        return AIBatchResult(
            individual_feedback=classified,
            topic_distribution=_counts(data.get("topicAnalysis")),
            issue_analysis=_counts(data.get("issueAnalysis")),
            regional_distribution=_counts(data.get("regionalInsights")),
            product_distribution=_counts(data.get("productCategories")),
            negative_patterns=patterns,
            mitigation_strategies=(
                MitigationStrategies.model_validate(strategies) if isinstance(strategies, dict) else None
            ),
            key_findings=_strings(data.get("keyFindings")),
            summary=summary.strip() if isinstance(summary, str) and summary.strip() else None,
        )

    @staticmethod
    def _classify_record(record: FeedbackRecord, item: Optional[Dict[str, Any]]) -> ClassifiedFeedback:
        """Map one individualAnalysis entry onto a record."""
        fields = record.model_dump()
        if item is None:
            return ClassifiedFeedback(
                **fields,
                sentiment=Sentiment.NEUTRAL,
                sentiment_score=0.0,
                topics=[lexicons.DEFAULT_TOPIC],
                key_phrases=[],
                priority=PRIORITY_BY_SENTIMENT[Sentiment.NEUTRAL.value],
            )

        sentiment = str(item.get("sentiment") or "").lower()
        if sentiment not in {s.value for s in Sentiment}:
            sentiment = Sentiment.NEUTRAL.value

        try:
            score = float(item.get("sentimentScore") or 0.0)
        except (TypeError, ValueError):
            score = 0.0
        if not math.isfinite(score):
            score = 0.0
        score = max(-1.0, min(1.0, score))
        # Sign follows the label
        if sentiment == Sentiment.POSITIVE.value:
            score = abs(score)
        elif sentiment == Sentiment.NEGATIVE.value:
            score = -abs(score)

        priority = str(item.get("priority") or "").lower()
        if priority not in {p.value for p in Priority}:
            priority = PRIORITY_BY_SENTIMENT[sentiment]

        issue_type = lexicons.AI_ISSUE_TYPES.get(str(item.get("issueType") or "").lower())

        return ClassifiedFeedback(
            **fields,
            sentiment=sentiment,
            sentiment_score=score,
            topics=_strings(item.get("topics")) or [lexicons.DEFAULT_TOPIC],
            key_phrases=_strings(item.get("keyPhrases")),
            priority=priority,
            issue_type=issue_type,
        )
