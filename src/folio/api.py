"""Boundary payloads — the JSON-shaped responses of the site's content endpoints.

Each function takes the loaded ``SiteContext`` and request values and
returns a JSON-serializable dict, or ``NotFound`` for the caller to
translate into a 404-equivalent.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from folio.context import SiteContext
from folio.errors import NotFound
from folio.query.engine import QueryParams, query
from folio.recommend.related import reading_progress, related_to
from folio.recommend.strategist import analyze, service_recommendations_for_item


def list_posts(context: SiteContext, raw_params: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Filtered, paginated post listing with facets."""
    params = QueryParams.from_mapping(raw_params or {}, default_page_size=context.default_page_size)
    return query(context, params)


def get_post(context: SiteContext, slug: str, related_limit: int | None = None) -> dict[str, Any] | NotFound:
    """A single post with related posts, reading stats, and service suggestions."""
    item = context.get_item(slug)
    if item is None:
        return NotFound(kind="post", key=slug)

    limit = context.related_limit if related_limit is None else related_limit
    return {
        "post": item.to_dict(),
        "relatedPosts": [r.to_metadata() for r in related_to(item, context.corpus, limit)],
        "readingProgress": reading_progress(item),
        "serviceRecommendations": service_recommendations_for_item(
            item, context.catalog, context.locale
        ),
    }


def get_service_content(context: SiteContext, service_id: str) -> dict[str, Any] | NotFound:
    """A service with its related posts and content strategy analysis."""
    service = context.catalog.get_service_by_id(service_id)
    if service is None:
        return NotFound(kind="service", key=service_id)

    analysis = analyze(service_id, context.corpus, context.catalog.strategies)
    if isinstance(analysis, NotFound):
        return analysis

    return {
        "service": service.summary(context.locale),
        "relatedPosts": [i.to_metadata() for i in analysis.related_items],
        "contentStrategy": analysis.to_dict(),
    }
