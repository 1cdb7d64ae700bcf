"""Service catalog — services, categories, and per-service content strategies."""

from folio.catalog.models import (
    Complexity,
    CTAStrategy,
    LocalizedText,
    PriceRange,
    Service,
    ServiceCategory,
    ServiceContentStrategy,
    ServiceFilter,
)
from folio.catalog.registry import ServiceCatalog, format_price_range

__all__ = [
    "CTAStrategy",
    "Complexity",
    "LocalizedText",
    "PriceRange",
    "Service",
    "ServiceCatalog",
    "ServiceCategory",
    "ServiceContentStrategy",
    "ServiceFilter",
    "format_price_range",
]
