"""Tests for the boundary payload functions."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from folio.api import get_post, get_service_content, list_posts
from folio.catalog.models import LocalizedText, PriceRange, Service, ServiceCategory
from folio.catalog.registry import ServiceCatalog
from folio.content.models import ContentItem, ContentType, Difficulty
from folio.context import SiteContext
from folio.errors import NotFound


def _make_item(slug: str, days: int = 0, **kwargs: object) -> ContentItem:
    return ContentItem(
        slug=slug,
        published_at=datetime(2025, 1, 1, tzinfo=UTC) + timedelta(days=days),
        **kwargs,  # type: ignore[arg-type]
    )


@pytest.fixture()
def site() -> SiteContext:
    corpus = (
        _make_item(
            "audit-checklist",
            days=3,
            title="Smart contract security checklist",
            category="Security",
            tags=("security",),
            primary_service="smart-contract-audit",
            content_type=ContentType.TUTORIAL,
            body="# Checklist\n\n" + "word " * 250,
        ),
        _make_item(
            "reentrancy",
            days=2,
            title="Reentrancy attacks explained",
            category="Security",
            tags=("security", "solidity"),
            targeted_services=("smart-contract-audit",),
            difficulty=Difficulty.ADVANCED,
        ),
        _make_item("rust-news", days=1, category="Rust", content_type=ContentType.NEWS),
    )
    return SiteContext(corpus=corpus, catalog=ServiceCatalog.default())


class TestListPosts:
    def test_default_listing(self, site: SiteContext):
        result = list_posts(site)
        assert [p["slug"] for p in result["items"]] == ["audit-checklist", "reentrancy", "rust-news"]
        assert set(result) == {"items", "pagination", "facets", "serviceStats"}

    def test_items_omit_body(self, site: SiteContext):
        result = list_posts(site, {"category": "Security"})
        assert all("content" not in p for p in result["items"])

    def test_uses_context_page_size(self, site: SiteContext):
        small = SiteContext(corpus=site.corpus, catalog=site.catalog, default_page_size=2)
        result = list_posts(small, {"page": "2"})
        assert [p["slug"] for p in result["items"]] == ["rust-news"]
        assert result["pagination"]["totalPages"] == 2


class TestGetPost:
    def test_unknown_slug(self, site: SiteContext):
        result = get_post(site, "missing")
        assert isinstance(result, NotFound)
        assert result.kind == "post"
        assert result.message == "Post not found: missing"

    def test_full_payload(self, site: SiteContext):
        result = get_post(site, "audit-checklist")
        assert not isinstance(result, NotFound)
        assert result["post"]["slug"] == "audit-checklist"
        assert result["post"]["content"].startswith("# Checklist")
        assert [p["slug"] for p in result["relatedPosts"]] == ["reentrancy", "rust-news"]
        assert result["readingProgress"] == {
            "estimatedReadingTime": 2,
            "wordCount": 252,
            "headingCount": 1,
        }
        assert result["serviceRecommendations"][0]["serviceId"] == "smart-contract-audit"

    def test_related_limit_override(self, site: SiteContext):
        result = get_post(site, "audit-checklist", related_limit=1)
        assert not isinstance(result, NotFound)
        assert [p["slug"] for p in result["relatedPosts"]] == ["reentrancy"]


class TestGetServiceContent:
    def test_unknown_service(self, site: SiteContext):
        result = get_service_content(site, "nonexistent-service")
        assert isinstance(result, NotFound)
        assert result.kind == "service"

    def test_service_without_strategy(self, site: SiteContext):
        catalog = ServiceCatalog(
            [ServiceCategory(category_id="misc", name=LocalizedText(en="Misc"))],
            [
                Service(
                    service_id="bare",
                    category_id="misc",
                    name=LocalizedText(en="Bare"),
                    short_description=LocalizedText(en="No strategy"),
                    price_range=PriceRange(min=1, max=2),
                )
            ],
        )
        result = get_service_content(SiteContext(corpus=site.corpus, catalog=catalog), "bare")
        assert isinstance(result, NotFound)
        assert result.kind == "strategy"

    def test_payload(self, site: SiteContext):
        result = get_service_content(site, "smart-contract-audit")
        assert not isinstance(result, NotFound)
        assert result["service"]["serviceId"] == "smart-contract-audit"
        assert [p["slug"] for p in result["relatedPosts"]] == ["audit-checklist", "reentrancy"]
        strategy = result["contentStrategy"]
        assert strategy["performanceMetrics"] == {"totalPosts": 2}
        assert "Missing case-study content" in strategy["contentGaps"]
        assert "Missing Beginner level content" in strategy["contentGaps"]
        assert strategy["recommendedTopics"][0] == "Advanced smart contract security Techniques"
