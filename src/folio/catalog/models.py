"""Service catalog models — sellable offerings and their content plans."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from folio.content.models import ContentType


class Complexity(StrEnum):
    """Delivery complexity tier of a service."""

    BASIC = "Basic"
    ADVANCED = "Advanced"
    ENTERPRISE = "Enterprise"


class CTAStrategy(StrEnum):
    """Call-to-action kind a service prefers on related posts."""

    CONSULTATION_BOOKING = "consultation_booking"
    SERVICE_INQUIRY = "service_inquiry"
    PROJECT_INQUIRY = "project_inquiry"


class LocalizedText(BaseModel):
    """A display string in the supported site locales."""

    model_config = ConfigDict(frozen=True)

    en: str
    ru: str = ""

    def get(self, locale: str = "en") -> str:
        """Return the text for *locale*, falling back to English."""
        value = getattr(self, locale, "") if locale in ("en", "ru") else ""
        return value or self.en


class PriceRange(BaseModel):
    """Inclusive price bounds for a service."""

    model_config = ConfigDict(frozen=True)

    min: float
    max: float
    currency: str = "USD"


class Service(BaseModel):
    """A sellable consulting or education offering."""

    model_config = ConfigDict(frozen=True)

    service_id: str
    category_id: str
    name: LocalizedText
    short_description: LocalizedText
    price_range: PriceRange
    complexity: Complexity = Complexity.ADVANCED
    tags: tuple[str, ...] = ()
    timeline: str = ""
    is_popular: bool = False
    is_active: bool = True

    def summary(self, locale: str = "en") -> dict[str, object]:
        return {
            "serviceId": self.service_id,
            "categoryId": self.category_id,
            "name": self.name.get(locale),
            "shortDescription": self.short_description.get(locale),
            "priceRange": self.price_range.model_dump(),
            "complexity": self.complexity.value,
            "tags": list(self.tags),
            "timeline": self.timeline,
            "isPopular": self.is_popular,
        }


class ServiceCategory(BaseModel):
    """Display grouping of services."""

    model_config = ConfigDict(frozen=True)

    category_id: str
    name: LocalizedText
    description: LocalizedText = LocalizedText(en="")
    display_order: int = 0
    is_active: bool = True
    services: tuple[Service, ...] = ()


class ServiceContentStrategy(BaseModel):
    """Content plan for one service: topics to cover and formats wanted."""

    model_config = ConfigDict(frozen=True)

    service_id: str
    keywords: tuple[str, ...] = ()
    content_types: tuple[ContentType, ...] = ()
    cta_strategies: tuple[CTAStrategy, ...] = (CTAStrategy.SERVICE_INQUIRY,)

    def to_dict(self) -> dict[str, object]:
        return {
            "serviceId": self.service_id,
            "keywords": list(self.keywords),
            "contentTypes": [t.value for t in self.content_types],
            "ctaStrategies": [c.value for c in self.cta_strategies],
        }


class ServiceFilter(BaseModel):
    """Criteria for narrowing the catalog; empty fields match everything."""

    categories: list[str] = Field(default_factory=list)
    complexity: list[Complexity] = Field(default_factory=list)
    min_price: float = 0
    max_price: float = 0
    tags: list[str] = Field(default_factory=list)
