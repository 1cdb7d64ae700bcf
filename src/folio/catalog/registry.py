"""Service catalog — services grouped into categories, plus content strategies.

The catalog is built once from plain dict data (the built-in defaults or
a TOML catalog file) and is read-only afterwards.  Construction validates
that every category and strategy reference points at a known entry.
"""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from folio.catalog.defaults import DEFAULT_CATEGORIES, DEFAULT_SERVICES, DEFAULT_STRATEGIES
from folio.catalog.models import (
    Complexity,
    PriceRange,
    Service,
    ServiceCategory,
    ServiceContentStrategy,
    ServiceFilter,
)
from folio.errors import CatalogError

logger = logging.getLogger(__name__)

_CURRENCY_SYMBOLS: dict[str, str] = {"USD": "$", "EUR": "€", "GBP": "£", "RUB": "₽"}


class ServiceCatalog:
    """Read-only registry of services, categories, and content strategies."""

    def __init__(
        self,
        categories: Iterable[ServiceCategory],
        services: Iterable[Service],
        strategies: Iterable[ServiceContentStrategy] = (),
    ) -> None:
        self._services: dict[str, Service] = {}
        for service in services:
            if service.service_id in self._services:
                raise CatalogError(f"Duplicate service id: {service.service_id}")
            self._services[service.service_id] = service

        category_list = list(categories)
        known_categories = {c.category_id for c in category_list}
        for service in self._services.values():
            if service.category_id not in known_categories:
                raise CatalogError(
                    f"Service {service.service_id} references unknown category {service.category_id}"
                )

        # Attach services to their categories.
        self._categories: tuple[ServiceCategory, ...] = tuple(
            category.model_copy(
                update={
                    "services": tuple(
                        s for s in self._services.values() if s.category_id == category.category_id
                    )
                }
            )
            for category in sorted(category_list, key=lambda c: c.display_order)
        )

        self._strategies: dict[str, ServiceContentStrategy] = {}
        for strategy in strategies:
            if strategy.service_id not in self._services:
                raise CatalogError(
                    f"Content strategy references unknown service {strategy.service_id}"
                )
            if strategy.service_id in self._strategies:
                raise CatalogError(f"Duplicate content strategy for {strategy.service_id}")
            self._strategies[strategy.service_id] = strategy

    # ── Construction ─────────────────────────────────────────────

    @classmethod
    def from_data(cls, data: Mapping[str, Any]) -> ServiceCatalog:
        """Build a catalog from ``categories`` / ``services`` / ``strategies`` lists."""
        try:
            categories = [ServiceCategory.model_validate(c) for c in data.get("categories", [])]
            services = [Service.model_validate(s) for s in data.get("services", [])]
            strategies = [
                ServiceContentStrategy.model_validate(s) for s in data.get("strategies", [])
            ]
        except ValidationError as exc:
            raise CatalogError(f"Invalid catalog data: {exc}") from exc
        return cls(categories, services, strategies)

    @classmethod
    def default(cls) -> ServiceCatalog:
        """Return the built-in catalog."""
        return cls.from_data(
            {
                "categories": DEFAULT_CATEGORIES,
                "services": DEFAULT_SERVICES,
                "strategies": DEFAULT_STRATEGIES,
            }
        )

    @classmethod
    def from_toml(cls, path: Path) -> ServiceCatalog:
        """Load a catalog from a TOML file with ``[[categories]]``, ``[[services]]``, ``[[strategies]]``."""
        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (tomllib.TOMLDecodeError, OSError) as exc:
            raise CatalogError(f"Failed to read catalog {path}: {exc}") from exc
        catalog = cls.from_data(data)
        logger.info(
            "Loaded catalog from %s (%d services, %d strategies)",
            path,
            len(catalog._services),
            len(catalog._strategies),
        )
        return catalog

    # ── Lookups ──────────────────────────────────────────────────

    def get_service_by_id(self, service_id: str) -> Service | None:
        """Return a service by id, or None if not found."""
        return self._services.get(service_id)

    def get_service_categories(self) -> list[ServiceCategory]:
        """Return active categories in display order, with their services attached."""
        return [c for c in self._categories if c.is_active]

    def get_services_by_category(self, category_id: str) -> list[Service]:
        return [
            s for s in self._services.values() if s.category_id == category_id and s.is_active
        ]

    def get_popular_services(self) -> list[Service]:
        return [s for s in self._services.values() if s.is_popular and s.is_active]

    def get_services_by_complexity(self, complexity: Complexity) -> list[Service]:
        return [s for s in self._services.values() if s.complexity == complexity and s.is_active]

    def all_services(self) -> list[Service]:
        return list(self._services.values())

    def search_services(self, text: str, locale: str = "en") -> list[Service]:
        """Case-insensitive substring search over name, short description, and tags."""
        needle = text.lower()
        if not needle:
            return []
        results: list[Service] = []
        for service in self._services.values():
            if not service.is_active:
                continue
            haystacks = (
                service.name.get(locale).lower(),
                service.short_description.get(locale).lower(),
                " ".join(service.tags).lower(),
            )
            if any(needle in h for h in haystacks):
                results.append(service)
        return results

    def filter_services(self, criteria: ServiceFilter) -> list[Service]:
        """Return active services matching every non-empty criterion.

        Price bounds test for overlap: a service is excluded only when its
        whole range lies below ``min_price`` or above ``max_price``.
        """
        results: list[Service] = []
        for service in self._services.values():
            if not service.is_active:
                continue
            if criteria.categories and service.category_id not in criteria.categories:
                continue
            if criteria.complexity and service.complexity not in criteria.complexity:
                continue
            if criteria.min_price > 0 and service.price_range.max < criteria.min_price:
                continue
            if criteria.max_price > 0 and service.price_range.min > criteria.max_price:
                continue
            if criteria.tags and not any(tag in service.tags for tag in criteria.tags):
                continue
            results.append(service)
        return results

    def calculate_total_price(self, service_ids: Iterable[str]) -> PriceRange:
        """Sum the price ranges of the given services; unknown ids are ignored."""
        total_min = 0.0
        total_max = 0.0
        for service_id in service_ids:
            service = self._services.get(service_id)
            if service is None:
                logger.debug("Ignoring unknown service %s in price total", service_id)
                continue
            total_min += service.price_range.min
            total_max += service.price_range.max
        return PriceRange(min=total_min, max=total_max)

    # ── Strategies ───────────────────────────────────────────────

    def get_strategy(self, service_id: str) -> ServiceContentStrategy | None:
        """Return the content strategy for a service, or None if none is registered."""
        return self._strategies.get(service_id)

    @property
    def strategies(self) -> dict[str, ServiceContentStrategy]:
        return dict(self._strategies)


def format_price_range(price_range: PriceRange, locale: str = "en") -> str:
    """Render a price range for display, e.g. ``$800 - $1,200``."""

    def _fmt(amount: float) -> str:
        grouped = f"{amount:,.0f}"
        symbol = _CURRENCY_SYMBOLS.get(price_range.currency)
        if locale == "ru":
            grouped = grouped.replace(",", "\u00a0")
            return f"{grouped}\u00a0{symbol or price_range.currency}"
        if symbol is None:
            return f"{price_range.currency} {grouped}"
        return f"{symbol}{grouped}"

    if price_range.min == price_range.max:
        return _fmt(price_range.min)
    return f"{_fmt(price_range.min)} - {_fmt(price_range.max)}"
