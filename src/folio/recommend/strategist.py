"""Service-content strategy analysis.

Cross-references a service's content strategy (target keywords and
desired content types) against the posts already written for it, to
suggest topics and list coverage gaps.  Also provides the catalog-wide
analytics overview and per-post service call-to-action suggestions.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict

from folio.catalog.models import CTAStrategy, Service, ServiceContentStrategy
from folio.catalog.registry import ServiceCatalog
from folio.content.models import ContentItem, ContentType, Difficulty
from folio.errors import NotFound
from folio.query.engine import items_for_service

logger = logging.getLogger(__name__)

MAX_RECOMMENDED_TOPICS = 10
MAX_CONTENT_RECOMMENDATIONS = 10
MAX_SERVICE_RECOMMENDATIONS = 3
CONVERSION_RATE_ESTIMATE = 0.02

BASE_TOPIC_TEMPLATES: tuple[str, ...] = (
    "Advanced {keyword} Techniques",
    "{keyword} Best Practices",
    "Common {keyword} Mistakes to Avoid",
    "{keyword} Case Study",
    "How to Get Started with {keyword}",
)

TYPE_TOPIC_TEMPLATES: dict[ContentType, str] = {
    ContentType.TUTORIAL: "Step-by-step {keyword} Tutorial",
    ContentType.CASE_STUDY: "Real-world {keyword} Implementation",
    ContentType.OPINION: "The Future of {keyword}",
    ContentType.NEWS: "Latest {keyword} Developments",
}

# Suggested titles when a service lacks a content type entirely.
SERVICE_TITLE_TEMPLATES: dict[ContentType, str] = {
    ContentType.TUTORIAL: "Complete {name} Tutorial: Step-by-Step Guide",
    ContentType.CASE_STUDY: "{name} Success Story: Real Project Implementation",
    ContentType.OPINION: "The Future of {name}: Industry Perspective",
    ContentType.BLOG: "Understanding {name}: A Comprehensive Guide",
    ContentType.NEWS: "Latest Developments in {name}",
}

CTA_TEMPLATES: dict[CTAStrategy, str] = {
    CTAStrategy.CONSULTATION_BOOKING: "Book {name} Consultation",
    CTAStrategy.SERVICE_INQUIRY: "Learn About {name}",
    CTAStrategy.PROJECT_INQUIRY: "Start {name} Project",
}

_PRIORITY_ORDER = {"high": 0, "medium": 1, "low": 2}


class StrategyAnalysis(BaseModel):
    """Topic recommendations and coverage gaps for one service."""

    model_config = ConfigDict(frozen=True)

    strategy: ServiceContentStrategy
    recommended_topics: tuple[str, ...]
    content_gaps: tuple[str, ...]
    related_items: tuple[ContentItem, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "strategy": self.strategy.to_dict(),
            "recommendedTopics": list(self.recommended_topics),
            "contentGaps": list(self.content_gaps),
            "performanceMetrics": {"totalPosts": len(self.related_items)},
        }


def covers_keyword(item: ContentItem, keyword: str, *, include_tags: bool = True) -> bool:
    """Whether *item* mentions *keyword* in its title, description, or tags."""
    needle = keyword.lower()
    if needle in item.title.lower() or needle in item.description.lower():
        return True
    return include_tags and any(needle in tag.lower() for tag in item.tags)


def recommended_topics(strategy: ServiceContentStrategy) -> list[str]:
    """Keyword-major base topics, then type-major topics, truncated to ten."""
    topics = [
        template.format(keyword=keyword)
        for keyword in strategy.keywords
        for template in BASE_TOPIC_TEMPLATES
    ]
    for content_type in strategy.content_types:
        template = TYPE_TOPIC_TEMPLATES.get(content_type)
        if template is None:
            continue
        topics.extend(template.format(keyword=keyword) for keyword in strategy.keywords)
    return topics[:MAX_RECOMMENDED_TOPICS]


def content_gaps(strategy: ServiceContentStrategy, items: Sequence[ContentItem]) -> list[str]:
    """Describe what the service's existing posts fail to cover.

    Type gaps first, then keyword gaps, then difficulty gaps, each in the
    order of its source list.
    """
    gaps: list[str] = []
    present_types = {item.content_type for item in items}
    for content_type in strategy.content_types:
        if content_type not in present_types:
            gaps.append(f"Missing {content_type.value} content")

    for keyword in strategy.keywords:
        if not any(covers_keyword(item, keyword) for item in items):
            gaps.append(f'No content covering "{keyword}"')

    present_levels = {item.difficulty for item in items}
    for level in Difficulty:
        if level not in present_levels:
            gaps.append(f"Missing {level.value} level content")
    return gaps


def analyze(
    service_id: str,
    corpus: Sequence[ContentItem],
    strategies: Mapping[str, ServiceContentStrategy],
) -> StrategyAnalysis | NotFound:
    """Analyze content coverage for *service_id* against its strategy.

    Returns ``NotFound`` when no strategy is registered for the service.
    """
    strategy = strategies.get(service_id)
    if strategy is None:
        logger.debug("No content strategy registered for %s", service_id)
        return NotFound(kind="strategy", key=service_id)

    related = items_for_service(corpus, service_id)
    return StrategyAnalysis(
        strategy=strategy,
        recommended_topics=tuple(recommended_topics(strategy)),
        content_gaps=tuple(content_gaps(strategy, related)),
        related_items=tuple(related),
    )


# ── Catalog-wide analytics ───────────────────────────────────────


def _service_engagement(
    service: Service,
    strategy: ServiceContentStrategy | None,
    related: Sequence[ContentItem],
) -> dict[str, Any]:
    keyword_coverage = 0.0
    if strategy is not None and strategy.keywords:
        covered = [k for k in strategy.keywords if any(covers_keyword(i, k) for i in related)]
        keyword_coverage = len(covered) / len(strategy.keywords) * 100

    content_types: list[str] = []
    for item in related:
        if item.content_type.value not in content_types:
            content_types.append(item.content_type.value)

    total_minutes = sum(i.estimated_reading_minutes for i in related)
    return {
        "serviceId": service.service_id,
        "serviceName": service.name.en,
        "relatedPostsCount": len(related),
        "averageReadingTime": round(total_minutes / len(related), 2) if related else 0,
        "estimatedConversionValue": len(related)
        * service.price_range.min
        * CONVERSION_RATE_ESTIMATE,
        "contentTypes": content_types,
        "keywordCoverage": round(keyword_coverage, 2),
    }


def _service_gaps(
    service: Service,
    strategy: ServiceContentStrategy,
    related: Sequence[ContentItem],
) -> list[dict[str, str]]:
    name = service.name.en
    gaps: list[dict[str, str]] = []

    present_types = {i.content_type for i in related}
    for content_type in strategy.content_types:
        if content_type not in present_types:
            gaps.append(
                {
                    "serviceId": service.service_id,
                    "gapType": "content_type",
                    "description": f"Missing {content_type.value} content for {name}",
                    "priority": "high",
                    "suggestedAction": f"Create {content_type.value} content targeting {name}",
                }
            )

    if related:
        present_levels = {i.difficulty for i in related}
        for level in Difficulty:
            if level not in present_levels:
                gaps.append(
                    {
                        "serviceId": service.service_id,
                        "gapType": "difficulty",
                        "description": f"Missing {level.value} level content for {name}",
                        "priority": "medium",
                        "suggestedAction": f"Create {level.value} level content for {name}",
                    }
                )

    uncovered = [k for k in strategy.keywords if not any(covers_keyword(i, k) for i in related)]
    if len(uncovered) > len(strategy.keywords) * 0.5:
        gaps.append(
            {
                "serviceId": service.service_id,
                "gapType": "keyword",
                "description": (
                    f"Low keyword coverage for {name} "
                    f"({len(uncovered)}/{len(strategy.keywords)} keywords missing)"
                ),
                "priority": "high",
                "suggestedAction": f"Create content targeting: {', '.join(uncovered[:3])}",
            }
        )

    if not related:
        gaps.append(
            {
                "serviceId": service.service_id,
                "gapType": "frequency",
                "description": f"No content exists for {name}",
                "priority": "high",
                "suggestedAction": f"Create foundational content series for {name}",
            }
        )
    return gaps


def _service_recommendations(
    service: Service,
    strategy: ServiceContentStrategy,
    related: Sequence[ContentItem],
) -> list[dict[str, Any]]:
    name = service.name.en
    recommendations: list[dict[str, Any]] = []

    present_types = {i.content_type for i in related}
    for content_type in strategy.content_types:
        template = SERVICE_TITLE_TEMPLATES.get(content_type)
        if content_type in present_types or template is None:
            continue
        recommendations.append(
            {
                "serviceId": service.service_id,
                "contentType": content_type.value,
                "suggestedTitle": template.format(name=name),
                "targetKeywords": list(strategy.keywords[:3]),
                "difficulty": Difficulty.INTERMEDIATE.value,
                "estimatedImpact": "high",
                "reasoning": f"Missing {content_type.value} content for {name} service",
            }
        )

    uncovered = [
        k
        for k in strategy.keywords
        if not any(covers_keyword(i, k, include_tags=False) for i in related)
    ]
    if uncovered:
        keyword = uncovered[0]
        recommendations.append(
            {
                "serviceId": service.service_id,
                "contentType": ContentType.BLOG.value,
                "suggestedTitle": f"Mastering {keyword[:1].upper()}{keyword[1:]}: A Comprehensive Guide",
                "targetKeywords": [keyword, *strategy.keywords[:2]],
                "difficulty": Difficulty.INTERMEDIATE.value,
                "estimatedImpact": "medium",
                "reasoning": f'High-value keyword "{keyword}" not covered in existing content',
            }
        )
    return recommendations


def content_analytics(corpus: Sequence[ContentItem], catalog: ServiceCatalog) -> dict[str, Any]:
    """Corpus distributions, per-service engagement, gaps, and recommendations."""
    posts_per_service: dict[str, int] = {}
    type_distribution: dict[str, int] = {}
    difficulty_distribution: dict[str, int] = {}
    for item in corpus:
        type_distribution[item.content_type.value] = type_distribution.get(item.content_type.value, 0) + 1
        difficulty_distribution[item.difficulty.value] = (
            difficulty_distribution.get(item.difficulty.value, 0) + 1
        )
        for sid in item.service_ids:
            posts_per_service[sid] = posts_per_service.get(sid, 0) + 1

    engagement: list[dict[str, Any]] = []
    gaps: list[dict[str, str]] = []
    recommendations: list[dict[str, Any]] = []
    for category in catalog.get_service_categories():
        for service in category.services:
            strategy = catalog.get_strategy(service.service_id)
            related = items_for_service(corpus, service.service_id)
            engagement.append(_service_engagement(service, strategy, related))
            if strategy is None:
                continue
            gaps.extend(_service_gaps(service, strategy, related))
            recommendations.extend(_service_recommendations(service, strategy, related))

    gaps.sort(key=lambda g: _PRIORITY_ORDER[g["priority"]])
    return {
        "totalPosts": len(corpus),
        "postsPerService": posts_per_service,
        "contentTypeDistribution": type_distribution,
        "difficultyDistribution": difficulty_distribution,
        "serviceEngagement": engagement,
        "contentGaps": gaps,
        "recommendedContent": recommendations[:MAX_CONTENT_RECOMMENDATIONS],
    }


# ── Per-post service suggestions ─────────────────────────────────


def service_relevance(item: ContentItem, strategy: ServiceContentStrategy) -> int:
    """How strongly a post's subject matter points at a service."""
    score = 0
    if item.content_type in strategy.content_types:
        score += 3
    text = f"{item.title} {item.description} {' '.join(item.tags)}".lower()
    score += 2 * sum(1 for keyword in strategy.keywords if keyword.lower() in text)
    if item.references_service(strategy.service_id):
        score += 5
    return score


def service_recommendations_for_item(
    item: ContentItem,
    catalog: ServiceCatalog,
    locale: str = "en",
) -> list[dict[str, Any]]:
    """Suggest up to three services to promote alongside *item*."""
    recommendations: list[dict[str, Any]] = []
    for category in catalog.get_service_categories():
        for service in category.services:
            strategy = catalog.get_strategy(service.service_id)
            if strategy is None:
                continue
            relevance = service_relevance(item, strategy)
            if relevance <= 2:
                continue
            cta = strategy.cta_strategies[0] if strategy.cta_strategies else CTAStrategy.SERVICE_INQUIRY
            recommendations.append(
                {
                    "id": f"rec-{item.slug}-{service.service_id}",
                    "serviceId": service.service_id,
                    "serviceName": service.name.get(locale),
                    "ctaText": CTA_TEMPLATES[cta].format(name=service.name.get(locale)),
                    "ctaUrl": f"/services#{service.service_id}",
                    "priority": 1 if relevance > 5 else 2,
                    "placement": "sidebar" if relevance > 5 else "footer",
                    "relevance": relevance,
                    "trackingId": f"post_{item.slug}_service_{service.service_id}",
                }
            )
    recommendations.sort(key=lambda r: r["priority"])
    return recommendations[:MAX_SERVICE_RECOMMENDATIONS]
