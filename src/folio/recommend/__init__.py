"""Recommendation engines — related posts and service content strategy."""

from folio.recommend.related import (
    RELATEDNESS_WEIGHTS,
    reading_progress,
    related_to,
    relatedness_score,
    score_components,
)
from folio.recommend.strategist import (
    StrategyAnalysis,
    analyze,
    content_analytics,
    content_gaps,
    recommended_topics,
    service_recommendations_for_item,
)

__all__ = [
    "RELATEDNESS_WEIGHTS",
    "StrategyAnalysis",
    "analyze",
    "content_analytics",
    "content_gaps",
    "reading_progress",
    "recommended_topics",
    "related_to",
    "relatedness_score",
    "score_components",
    "service_recommendations_for_item",
]
