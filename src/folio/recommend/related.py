"""Related-content scoring.

Scores every other item in the corpus against a focus item with a fixed,
additive weight table and returns the top results.  The combined score is::

    category + tag * |shared tags| + service * |shared services|
        + content_type + difficulty

where the category, content-type, and difficulty terms apply only on an
exact match.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from folio.content.models import ContentItem

RELATEDNESS_WEIGHTS: dict[str, int] = {
    "category": 10,
    "tag": 5,
    "service": 8,
    "content_type": 3,
    "difficulty": 2,
}


def score_components(item: ContentItem, candidate: ContentItem) -> dict[str, int]:
    """Per-factor contributions of *candidate* relative to *item*."""
    w = RELATEDNESS_WEIGHTS
    shared_tags = set(candidate.tags) & set(item.tags)
    shared_services = set(candidate.service_ids) & set(item.service_ids)
    return {
        "category": w["category"] if candidate.category == item.category else 0,
        "tag": w["tag"] * len(shared_tags),
        "service": w["service"] * len(shared_services),
        "content_type": w["content_type"] if candidate.content_type == item.content_type else 0,
        "difficulty": w["difficulty"] if candidate.difficulty == item.difficulty else 0,
    }


def relatedness_score(item: ContentItem, candidate: ContentItem) -> int:
    """Total relatedness of *candidate* to *item*."""
    return sum(score_components(item, candidate).values())


def related_to(
    item: ContentItem,
    corpus: Sequence[ContentItem],
    limit: int = 3,
) -> list[ContentItem]:
    """Return up to *limit* other items, most related first.

    Equal scores keep corpus order.  Zero-score candidates still fill the
    remaining slots; only the item itself is excluded.
    """
    if limit <= 0:
        return []
    scored = [
        (relatedness_score(item, candidate), candidate)
        for candidate in corpus
        if candidate.slug != item.slug
    ]
    # sorted() is stable, so ties stay in corpus order.
    scored = sorted(scored, key=lambda pair: pair[0], reverse=True)
    return [candidate for _, candidate in scored[:limit]]


def reading_progress(item: ContentItem) -> dict[str, Any]:
    """Reading statistics shown alongside a post."""
    return {
        "estimatedReadingTime": item.estimated_reading_minutes,
        "wordCount": item.word_count,
        "headingCount": item.heading_count,
    }
