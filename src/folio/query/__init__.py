"""Content query engine — filtering, search, pagination, and facets."""

from folio.query.engine import (
    QueryParams,
    build_facets,
    items_for_service,
    order_items,
    paginate,
    query,
    search_items,
    service_stats,
)

__all__ = [
    "QueryParams",
    "build_facets",
    "items_for_service",
    "order_items",
    "paginate",
    "query",
    "search_items",
    "service_stats",
]
