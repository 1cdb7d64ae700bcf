"""Tests for the content query engine."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from folio.catalog.registry import ServiceCatalog
from folio.content.models import ContentItem, ContentType, Difficulty
from folio.context import SiteContext
from folio.query.engine import QueryParams, build_facets, order_items, paginate, query, search_items

BASE_TIME = datetime(2025, 1, 1, tzinfo=UTC)


def _make_item(slug: str, days: int = 0, **kwargs: object) -> ContentItem:
    """Helper to build an item published *days* after BASE_TIME."""
    return ContentItem(
        slug=slug,
        title=kwargs.pop("title", slug.replace("-", " ").title()),  # type: ignore[arg-type]
        published_at=BASE_TIME + timedelta(days=days),
        **kwargs,  # type: ignore[arg-type]
    )


def _context(items: list[ContentItem], **kwargs: object) -> SiteContext:
    return SiteContext(corpus=tuple(items), catalog=ServiceCatalog.default(), **kwargs)  # type: ignore[arg-type]


@pytest.fixture()
def corpus() -> list[ContentItem]:
    return [
        _make_item(
            "bitcoin-basics",
            days=1,
            title="Bitcoin Basics",
            category="Crypto",
            difficulty=Difficulty.BEGINNER,
        ),
        _make_item(
            "solidity-security",
            days=5,
            category="DeFi",
            tags=("solidity", "security"),
            primary_service="smart-contract-audit",
            content_type=ContentType.TUTORIAL,
            featured=True,
        ),
        _make_item(
            "rust-intro",
            days=3,
            category="Rust",
            tags=("rust",),
            targeted_services=("rust-blockchain-course",),
            content_type=ContentType.TUTORIAL,
            difficulty=Difficulty.ADVANCED,
        ),
        _make_item(
            "defi-news",
            days=4,
            category="DeFi",
            description="Weekly BITCOIN and DeFi roundup",
            content_type=ContentType.NEWS,
            featured=True,
        ),
        _make_item("untagged", days=2),
    ]


def _slugs(result: dict) -> list[str]:
    return [item["slug"] for item in result["items"]]


class TestQueryParams:
    def test_defaults(self):
        params = QueryParams.from_mapping({})
        assert params.page == 1
        assert params.page_size == 10
        assert params.featured_only is False
        assert params.search is None

    def test_parses_strings(self):
        params = QueryParams.from_mapping(
            {"page": "2", "limit": "5", "featured": "true", "type": "tutorial", "serviceId": "x"}
        )
        assert params.page == 2
        assert params.page_size == 5
        assert params.featured_only is True
        assert params.content_type == "tutorial"
        assert params.service_id == "x"

    @pytest.mark.parametrize("page", [0, -3, "abc", None, True])
    def test_invalid_page_clamped(self, page: object):
        assert QueryParams.from_mapping({"page": page}).page == 1

    @pytest.mark.parametrize("size", [0, -1, "many"])
    def test_invalid_page_size_clamped(self, size: object):
        assert QueryParams.from_mapping({"pageSize": size}).page_size == 10

    def test_invalid_page_size_uses_configured_default(self):
        assert QueryParams.from_mapping({"pageSize": 0}, default_page_size=4).page_size == 4

    def test_direct_construction_clamps(self):
        params = QueryParams(page=0, page_size=-5)
        assert params.page == 1
        assert params.page_size == 10

    def test_blank_strings_are_absent(self):
        assert QueryParams.from_mapping({"search": "  ", "category": ""}).search is None


class TestPrimaryFilter:
    def test_no_filter_returns_all_newest_first(self, corpus):
        result = query(_context(corpus), {})
        assert _slugs(result) == [
            "solidity-security",
            "defi-news",
            "rust-intro",
            "untagged",
            "bitcoin-basics",
        ]

    def test_search_case_insensitive(self, corpus):
        result = query(_context(corpus), {"search": "BITCOIN"})
        assert _slugs(result) == ["defi-news", "bitcoin-basics"]

    def test_search_matches_tags(self, corpus):
        result = query(_context(corpus), {"search": "secur"})
        assert "solidity-security" in _slugs(result)

    def test_search_resolves_services(self, corpus):
        # "Rust for Blockchain Course" matches the catalog search, so the
        # post targeting it is found even without the word in its text.
        result = query(_context(corpus), {"search": "Blockchain Course"})
        assert _slugs(result) == ["rust-intro"]

    def test_service_filter_primary_and_targeted(self, corpus):
        ctx = _context(corpus)
        assert _slugs(query(ctx, {"serviceId": "smart-contract-audit"})) == ["solidity-security"]
        assert _slugs(query(ctx, {"serviceId": "rust-blockchain-course"})) == ["rust-intro"]

    def test_category_exact(self, corpus):
        assert _slugs(query(_context(corpus), {"category": "DeFi"})) == [
            "solidity-security",
            "defi-news",
        ]
        assert _slugs(query(_context(corpus), {"category": "defi"})) == []

    def test_content_type(self, corpus):
        assert _slugs(query(_context(corpus), {"contentType": "tutorial"})) == [
            "solidity-security",
            "rust-intro",
        ]

    def test_unknown_content_type_matches_nothing(self, corpus):
        assert _slugs(query(_context(corpus), {"contentType": "podcast"})) == []

    def test_difficulty(self, corpus):
        assert _slugs(query(_context(corpus), {"difficulty": "Advanced"})) == ["rust-intro"]

    def test_search_wins_over_category(self, corpus):
        result = query(_context(corpus), {"search": "rust", "category": "DeFi"})
        assert _slugs(result) == ["rust-intro"]

    def test_service_wins_over_type(self, corpus):
        result = query(_context(corpus), {"serviceId": "smart-contract-audit", "type": "news"})
        assert _slugs(result) == ["solidity-security"]

    def test_featured_is_anded(self, corpus):
        result = query(_context(corpus), {"category": "DeFi", "featured": True})
        assert _slugs(result) == ["solidity-security", "defi-news"]
        result = query(_context(corpus), {"contentType": "tutorial", "featuredOnly": "true"})
        assert _slugs(result) == ["solidity-security"]

    def test_empty_corpus(self):
        result = query(_context([]), {"search": "anything"})
        assert result["items"] == []
        assert result["pagination"]["totalPages"] == 0
        assert result["pagination"]["hasNextPage"] is False


class TestOrdering:
    def test_ties_broken_by_slug(self):
        items = [_make_item("c", days=1), _make_item("a", days=1), _make_item("b", days=2)]
        assert [i.slug for i in order_items(items)] == ["b", "a", "c"]


class TestPagination:
    @pytest.fixture()
    def big_context(self) -> SiteContext:
        return _context([_make_item(f"post-{n:02d}", days=n) for n in range(25)])

    def test_three_pages_of_25(self, big_context: SiteContext):
        pages = [query(big_context, {"page": p, "pageSize": 10}) for p in (1, 2, 3)]
        assert [len(p["items"]) for p in pages] == [10, 10, 5]
        assert all(p["pagination"]["totalPages"] == 3 for p in pages)
        assert [p["pagination"]["hasNextPage"] for p in pages] == [True, True, False]
        assert [p["pagination"]["hasPrevPage"] for p in pages] == [False, True, True]

    def test_pages_partition_results(self, big_context: SiteContext):
        seen: list[str] = []
        for page in range(1, 5):
            result = query(big_context, {"page": page, "pageSize": 7})
            assert len(result["items"]) <= 7
            seen.extend(_slugs(result))
        assert len(seen) == 25
        assert len(set(seen)) == 25

    def test_out_of_range_page(self, big_context: SiteContext):
        result = query(big_context, {"page": 9, "pageSize": 10})
        assert result["items"] == []
        assert result["pagination"] == {
            "currentPage": 9,
            "totalPages": 3,
            "totalPosts": 25,
            "hasNextPage": False,
            "hasPrevPage": True,
        }

    def test_context_default_page_size(self):
        ctx = _context([_make_item(f"p{n}", days=n) for n in range(6)], default_page_size=4)
        assert len(query(ctx)["items"]) == 4
        assert len(query(ctx, {})["items"]) == 4

    def test_paginate_helper(self):
        items = [_make_item(f"p{n}") for n in range(3)]
        page, meta = paginate(items, 2, 2)
        assert [i.slug for i in page] == ["p2"]
        assert meta["totalPages"] == 2


class TestFacets:
    def test_facets_cover_full_corpus(self, corpus):
        result = query(_context(corpus), {"category": "Rust"})
        facets = result["facets"]
        assert facets["categories"] == ["Crypto", "DeFi", "Rust", "Technology"]
        assert facets["contentTypes"] == ["blog", "news", "tutorial", "case-study", "opinion"]
        assert facets["difficultyLevels"] == ["Beginner", "Intermediate", "Advanced"]

    def test_service_facets_resolved_to_names(self, corpus):
        facets = build_facets(corpus, ServiceCatalog.default())
        assert facets["services"] == [
            {"id": "smart-contract-audit", "name": "Smart Contract Audit"},
            {"id": "rust-blockchain-course", "name": "Rust for Blockchain Course"},
        ]

    def test_unknown_service_keeps_id(self):
        facets = build_facets([_make_item("x", primary_service="mystery")], ServiceCatalog.default())
        assert facets["services"] == [{"id": "mystery", "name": "mystery"}]


class TestServiceStats:
    def test_counts_filtered_set(self, corpus):
        result = query(_context(corpus), {"contentType": "tutorial"})
        stats = {s["serviceId"]: s for s in result["serviceStats"]}
        assert set(stats) == {"smart-contract-audit", "rust-blockchain-course"}
        assert stats["smart-contract-audit"]["relatedPostsCount"] == 1


class TestSearchItems:
    def test_without_catalog(self, corpus):
        assert [i.slug for i in search_items(corpus, "rust")] == ["rust-intro"]
