"""
Static content used by the aggregation step: the business recommendation
catalog, the default mitigation template, and fallback narrative text.
"""

from typing import List

from insights_engine.models.schemas import (
    BusinessRecommendation,
    ImmediateResponse,
    ImprovementInitiative,
    MitigationStrategies,
    PositiveReinforcement,
)


BUSINESS_RECOMMENDATIONS = (
    BusinessRecommendation(
        id="1",
        category="product_development",
        department="R&D Division",
        recommendation="Develop regional flavor variants based on local taste preferences identified in feedback analysis",
        priority="high",
        impact="Potential 25% increase in regional market penetration and consumer loyalty",
        implementation_cost="medium",
        timeframe="6-9 months",
        kpis=["Regional sales growth", "Consumer satisfaction scores", "Market share"],
        action_items=[
            "Conduct focused taste testing in target regions",
            "Develop 2-3 regional variants per product line",
            "Launch pilot programs in secondary cities",
        ],
    ),
    BusinessRecommendation(
        id="2",
        category="marketing",
        department="Brand Marketing",
        recommendation="Amplify taste and quality messaging in marketing campaigns to leverage consumer preferences",
        priority="high",
        impact="Expected 20% improvement in brand perception and purchase intent",
        implementation_cost="low",
        timeframe="2-3 months",
        kpis=["Brand awareness", "Purchase intent", "Marketing ROI"],
        action_items=[
            "Refresh creative assets focusing on taste superiority",
            "Increase investment in digital taste challenges",
            "Partner with culinary influencers for authenticity",
        ],
    ),
    BusinessRecommendation(
        id="3",
        category="operations",
        department="Supply Chain",
        recommendation="Optimize distribution network to address availability issues in secondary markets",
        priority="high",
        impact="Reduce stockouts by 40% and improve market coverage by 15%",
        implementation_cost="high",
        timeframe="9-12 months",
        kpis=["Product availability", "Distribution coverage", "Customer complaints"],
        action_items=[
            "Establish regional distribution hubs",
            "Implement real-time inventory tracking",
            "Partner with local distributors in tier-2 cities",
        ],
    ),
    BusinessRecommendation(
        id="4",
        category="marketing",
        department="Trade Marketing",
        recommendation="Implement tier-based pricing strategy to address regional price sensitivity variations",
        priority="medium",
        impact="Potential 12% volume increase in price-sensitive markets",
        implementation_cost="low",
        timeframe="3-4 months",
        kpis=["Volume growth", "Price elasticity", "Margin optimization"],
        action_items=[
            "Analyze regional price elasticity data",
            "Develop value-pack offerings for tier-2 cities",
            "Test promotional pricing strategies",
        ],
    ),
    BusinessRecommendation(
        id="5",
        category="rnd",
        department="Packaging Innovation",
        recommendation="Accelerate sustainable packaging initiatives based on strong consumer demand signals",
        priority="medium",
        impact="Strengthen brand differentiation and appeal to eco-conscious consumers",
        implementation_cost="medium",
        timeframe="6-8 months",
        kpis=["Sustainability metrics", "Consumer preference scores", "Cost efficiency"],
        action_items=[
            "Research biodegradable packaging alternatives",
            "Pilot eco-friendly packaging in select products",
            "Communicate sustainability efforts to consumers",
        ],
    ),
)


def business_recommendations() -> List[BusinessRecommendation]:
    return [recommendation.model_copy(deep=True) for recommendation in BUSINESS_RECOMMENDATIONS]


def default_mitigation_strategies() -> MitigationStrategies:
    """Mitigation template used when the LLM supplied none."""
    return MitigationStrategies(
        immediate_response=[
            ImmediateResponse(
                issue_type="negative_feedback",
                strategy="Contact affected customers with a personalized response and offer fixes, replacements, or refunds",
                timeline="24-48 hours",
                responsible_team="Customer Service",
            ),
            ImmediateResponse(
                issue_type="functional_defects",
                strategy="Escalate critical product defects to the engineering team with detailed issue documentation",
                timeline="48 hours",
                responsible_team="Quality Assurance",
            ),
        ],
        improvement_initiatives=[
            ImprovementInitiative(
                focus_area="quality_control",
                initiative="Enhanced multi-stage quality testing and supplier quality audits",
                expected_impact="Reduce quality-related complaints by 70% within 3 months",
                investment_required="high",
            ),
            ImprovementInitiative(
                focus_area="customer_service",
                initiative="Customer service training program with escalation procedures",
                expected_impact="Reduce service complaints by 75%",
                investment_required="medium",
            ),
        ],
        positive_reinforcement=[
            PositiveReinforcement(
                strength="Positive customer experiences",
                amplification_strategy="Turn top-rated experiences into success stories and testimonials",
                marketing_opportunity="Referral and loyalty reward programs, positive reviews on social media",
            ),
        ],
    )


def fallback_key_findings(total: int) -> List[str]:
    return [
        f"Analysis of {total} feedback entries from multiple touchpoints",
        "Consumer feedback shows varied sentiment patterns across product lines",
        "Regional preferences indicate localized market opportunities",
        "Quality and taste emerge as key discussion topics",
        "Price sensitivity varies by product category and region",
    ]


def fallback_summary(total: int) -> str:
    return (
        f"Comprehensive analysis of {total} consumer feedback entries reveals diverse insights "
        "across sentiment, topics, and regional patterns. The data provides actionable intelligence "
        "for product development, marketing strategies, and operational improvements."
    )
