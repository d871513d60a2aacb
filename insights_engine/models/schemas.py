from pydantic import BaseModel, Field, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from typing import Optional, List, Dict, Any
from enum import Enum


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


# Default priority of a classified record; the LLM may override it
PRIORITY_BY_SENTIMENT = {
    Sentiment.NEGATIVE.value: Priority.HIGH.value,
    Sentiment.NEUTRAL.value: Priority.MEDIUM.value,
    Sentiment.POSITIVE.value: Priority.LOW.value,
}


class IssueCategory(str, Enum):
    FUNCTIONAL_DEFECTS = "functional_defects"
    QUALITY_ISSUES = "quality_issues"
    SERVICE_PROBLEMS = "service_problems"
    DELIVERY_ISSUES = "delivery_issues"
    PERFORMANCE_PROBLEMS = "performance_problems"
    DESIGN_FLAWS = "design_flaws"


class WireModel(BaseModel):
    """Base for models serialized with camelCase keys."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )


class FeedbackRecord(WireModel):
    """Normalized customer feedback row."""
    model_config = ConfigDict(frozen=True)

    id: str
    text: str
    product: Optional[str] = None
    region: Optional[str] = None
    category: Optional[str] = None
    customer_info: Optional[str] = None
    channel: Optional[str] = None
    date: Optional[str] = None
    rating: Optional[int] = None
    sentiment_hint: Optional[str] = None
    issue_hint: Optional[str] = None
    satisfaction_hint: Optional[str] = None

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("feedback text must not be blank")
        return value

    @field_validator(
        "product", "region", "category", "customer_info", "channel", "date",
        "sentiment_hint", "issue_hint", "satisfaction_hint",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, value: Any) -> Optional[str]:
        # Spreadsheet cells arrive as numbers as often as strings ("1", 1, 1.0)
        if value is None:
            return None
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)

    @field_validator("rating", mode="before")
    @classmethod
    def coerce_rating(cls, value: Any) -> Optional[int]:
        if value is None or value == "":
            return None
        try:
            return int(float(str(value).strip()))
        except (ValueError, OverflowError):
            return None


class ClassifiedFeedback(FeedbackRecord):
    """Feedback record with its classification attached."""
    sentiment: Sentiment
    sentiment_score: float = Field(..., ge=-1.0, le=1.0)
    topics: List[str] = Field(..., min_length=1)
    key_phrases: List[str] = Field(default_factory=list)
    priority: Priority
    issue_type: Optional[IssueCategory] = None


class SentimentDistribution(WireModel):
    positive: int = 0
    neutral: int = 0
    negative: int = 0


class PatternMitigation(WireModel):
    immediate_actions: List[str] = Field(default_factory=list, alias="immediate_actions")
    long_term_solutions: List[str] = Field(default_factory=list, alias="long_term_solutions")
    prevention_measures: List[str] = Field(default_factory=list, alias="prevention_measures")


class NegativePattern(WireModel):
    pattern: str
    count: int = 0
    severity: str = "medium"
    examples: List[str] = Field(default_factory=list)
    mitigation: Optional[PatternMitigation] = None


class ImmediateResponse(WireModel):
    issue_type: str = Field("", alias="issue_type")
    strategy: str = ""
    timeline: str = ""
    responsible_team: str = Field("", alias="responsible_team")


class ImprovementInitiative(WireModel):
    focus_area: str = Field("", alias="focus_area")
    initiative: str = ""
    expected_impact: str = Field("", alias="expected_impact")
    investment_required: str = Field("", alias="investment_required")


class PositiveReinforcement(WireModel):
    strength: str = ""
    amplification_strategy: str = Field("", alias="amplification_strategy")
    marketing_opportunity: str = Field("", alias="marketing_opportunity")


class MitigationStrategies(WireModel):
    immediate_response: List[ImmediateResponse] = Field(default_factory=list, alias="immediate_response")
    improvement_initiatives: List[ImprovementInitiative] = Field(default_factory=list, alias="improvement_initiatives")
    positive_reinforcement: List[PositiveReinforcement] = Field(default_factory=list, alias="positive_reinforcement")

    def is_empty(self) -> bool:
        return not (self.immediate_response or self.improvement_initiatives or self.positive_reinforcement)


class TimeSeriesPoint(WireModel):
    date: str
    positive: int
    neutral: int
    negative: int


class BusinessRecommendation(WireModel):
    id: str
    category: str
    department: str
    recommendation: str
    priority: Priority
    impact: str
    implementation_cost: str
    timeframe: str
    kpis: List[str]
    action_items: List[str]


class AIBatchResult(WireModel):
    """Batch-level output of the primary classification path.

    Every aggregate is optional; ``None`` means the model did not supply it
    and the aggregator computes its own.
    """
    individual_feedback: List[ClassifiedFeedback]
    topic_distribution: Optional[Dict[str, int]] = None
    issue_analysis: Optional[Dict[str, int]] = None
    regional_distribution: Optional[Dict[str, int]] = None
    product_distribution: Optional[Dict[str, int]] = None
    negative_patterns: List[NegativePattern] = Field(default_factory=list)
    mitigation_strategies: Optional[MitigationStrategies] = None
    key_findings: List[str] = Field(default_factory=list)
    summary: Optional[str] = None


class AnalysisResult(WireModel):
    """Full analysis of one feedback batch."""
    total_feedback: int
    sentiment_distribution: SentimentDistribution
    topic_distribution: Dict[str, int]
    issue_analysis: Dict[str, int]
    regional_distribution: Dict[str, int]
    product_distribution: Dict[str, int]
    negative_patterns: List[NegativePattern] = Field(default_factory=list)
    mitigation_strategies: MitigationStrategies
    time_series_data: List[TimeSeriesPoint]
    key_findings: List[str] = Field(..., min_length=1)
    ai_summary: str = Field(..., min_length=1)
    business_recommendations: List[BusinessRecommendation]
    individual_feedback: List[ClassifiedFeedback]
    analysis_source: str = "heuristic"
