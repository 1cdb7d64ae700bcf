"""Query engine — filter, search, order, and paginate the content corpus.

Exactly one primary filter applies per query, chosen first-match-wins:
search > serviceId > category > contentType > difficulty > none.
``featuredOnly`` is then ANDed on top.  Facets always describe the full
corpus so a caller can offer every filter value regardless of the
current selection.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, field_validator

from folio.catalog.registry import ServiceCatalog
from folio.content.models import ContentItem, ContentType, Difficulty
from folio.context import SiteContext

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10

_TRUTHY = {"true", "1", "yes", "on"}


def _clean_str(value: object) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _positive_int(value: object, default: int) -> int:
    """Parse a positive integer, clamping anything else to *default*."""
    if isinstance(value, bool):
        return default
    try:
        number = int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
    return number if number >= 1 else default


def _as_bool(value: object) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUTHY


class QueryParams(BaseModel):
    """Parsed query parameters.  Every field is optional."""

    search: str | None = None
    service_id: str | None = None
    category: str | None = None
    content_type: str | None = None
    difficulty: str | None = None
    featured_only: bool = False
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    @field_validator("page", mode="before")
    @classmethod
    def _clamp_page(cls, value: object) -> int:
        return _positive_int(value, DEFAULT_PAGE)

    @field_validator("page_size", mode="before")
    @classmethod
    def _clamp_page_size(cls, value: object) -> int:
        return _positive_int(value, DEFAULT_PAGE_SIZE)

    @classmethod
    def from_mapping(
        cls,
        raw: Mapping[str, Any],
        *,
        default_page_size: int = DEFAULT_PAGE_SIZE,
    ) -> QueryParams:
        """Build params from a flat key-value mapping such as a URL query string.

        Accepts both the list-endpoint names (``type``, ``featured``,
        ``limit``) and the long names (``contentType``, ``featuredOnly``,
        ``pageSize``).  Malformed pagination values fall back to defaults.
        """

        def pick(*keys: str) -> object:
            for key in keys:
                if key in raw and raw[key] is not None:
                    return raw[key]
            return None

        return cls(
            search=_clean_str(pick("search")),
            service_id=_clean_str(pick("serviceId", "service_id")),
            category=_clean_str(pick("category")),
            content_type=_clean_str(pick("contentType", "content_type", "type")),
            difficulty=_clean_str(pick("difficulty")),
            featured_only=_as_bool(pick("featuredOnly", "featured_only", "featured")),
            page=_positive_int(pick("page"), DEFAULT_PAGE),
            page_size=_positive_int(pick("pageSize", "page_size", "limit"), default_page_size),
        )


# ── Filters ──────────────────────────────────────────────────────


def search_items(
    corpus: Sequence[ContentItem],
    text: str,
    catalog: ServiceCatalog | None = None,
    locale: str = "en",
) -> list[ContentItem]:
    """Case-insensitive match on title, description, or tags.

    Items referencing a service the catalog's own search matches are
    included as well.
    """
    needle = text.lower()
    matched_services: set[str] = set()
    if catalog is not None:
        matched_services = {s.service_id for s in catalog.search_services(text, locale)}

    results: list[ContentItem] = []
    for item in corpus:
        if (
            needle in item.title.lower()
            or needle in item.description.lower()
            or any(needle in tag.lower() for tag in item.tags)
            or any(sid in matched_services for sid in item.service_ids)
        ):
            results.append(item)
    return results


def items_for_service(corpus: Sequence[ContentItem], service_id: str) -> list[ContentItem]:
    """Items whose primary or targeted services include *service_id*."""
    return [item for item in corpus if item.references_service(service_id)]


def _primary_filter(context: SiteContext, params: QueryParams) -> list[ContentItem]:
    corpus = context.corpus
    if params.search:
        logger.debug("Filtering by search %r", params.search)
        return search_items(corpus, params.search, context.catalog, context.locale)
    if params.service_id:
        return items_for_service(corpus, params.service_id)
    if params.category:
        return [i for i in corpus if i.category == params.category]
    if params.content_type:
        return [i for i in corpus if i.content_type.value == params.content_type]
    if params.difficulty:
        return [i for i in corpus if i.difficulty.value == params.difficulty]
    return list(corpus)


def order_items(items: Sequence[ContentItem]) -> list[ContentItem]:
    """Newest first; equal timestamps ordered by slug ascending."""
    ordered = sorted(items, key=lambda i: i.slug)
    ordered.sort(key=lambda i: i.published_at, reverse=True)
    return ordered


# ── Pagination & facets ──────────────────────────────────────────


def paginate(
    items: Sequence[ContentItem], page: int, page_size: int
) -> tuple[list[ContentItem], dict[str, Any]]:
    """Slice one page out of *items* and describe the pagination state.

    Out-of-range pages produce an empty slice with valid metadata.
    """
    total = len(items)
    total_pages = math.ceil(total / page_size)
    start = (page - 1) * page_size
    page_items = list(items[start : start + page_size])
    return page_items, {
        "currentPage": page,
        "totalPages": total_pages,
        "totalPosts": total,
        "hasNextPage": page < total_pages,
        "hasPrevPage": page > 1,
    }


def build_facets(corpus: Sequence[ContentItem], catalog: ServiceCatalog, locale: str = "en") -> dict[str, Any]:
    """Every filter value available across the full corpus."""
    categories: list[str] = []
    service_ids: list[str] = []
    for item in corpus:
        if item.category not in categories:
            categories.append(item.category)
        for sid in item.service_ids:
            if sid not in service_ids:
                service_ids.append(sid)

    services: list[dict[str, str]] = []
    for sid in service_ids:
        service = catalog.get_service_by_id(sid)
        services.append({"id": sid, "name": service.name.get(locale) if service else sid})

    return {
        "categories": categories,
        "services": services,
        "contentTypes": [t.value for t in ContentType],
        "difficultyLevels": [d.value for d in Difficulty],
    }


def service_stats(items: Sequence[ContentItem]) -> list[dict[str, Any]]:
    """Per-service post counts and mean reading time over *items*."""
    counts: dict[str, int] = {}
    minutes: dict[str, int] = {}
    for item in items:
        for sid in item.service_ids:
            counts[sid] = counts.get(sid, 0) + 1
            minutes[sid] = minutes.get(sid, 0) + item.estimated_reading_minutes
    return [
        {
            "serviceId": sid,
            "relatedPostsCount": count,
            "averageReadingTime": round(minutes[sid] / count, 2),
        }
        for sid, count in counts.items()
    ]


# ── Public API ───────────────────────────────────────────────────


def query(context: SiteContext, params: QueryParams | Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Run a content query and return ``{items, pagination, facets, serviceStats}``."""
    if params is None:
        params = QueryParams(page_size=context.default_page_size)
    elif not isinstance(params, QueryParams):
        params = QueryParams.from_mapping(params, default_page_size=context.default_page_size)

    matches = _primary_filter(context, params)
    if params.featured_only:
        matches = [i for i in matches if i.featured]
    matches = order_items(matches)

    page_items, pagination = paginate(matches, params.page, params.page_size)
    logger.debug(
        "Query matched %d items, returning page %d/%d",
        pagination["totalPosts"],
        pagination["currentPage"],
        pagination["totalPages"],
    )
    return {
        "items": [i.to_metadata() for i in page_items],
        "pagination": pagination,
        "facets": build_facets(context.corpus, context.catalog, context.locale),
        "serviceStats": service_stats(matches),
    }
