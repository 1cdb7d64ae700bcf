"""Tests for related-content scoring."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from folio.content.models import ContentItem, ContentType, Difficulty
from folio.recommend.related import (
    RELATEDNESS_WEIGHTS,
    reading_progress,
    related_to,
    relatedness_score,
    score_components,
)


def _make_item(slug: str, days: int = 0, **kwargs: object) -> ContentItem:
    return ContentItem(
        slug=slug,
        published_at=datetime(2025, 1, 1, tzinfo=UTC) + timedelta(days=days),
        **kwargs,  # type: ignore[arg-type]
    )


@pytest.fixture()
def focus() -> ContentItem:
    return _make_item(
        "x",
        category="DeFi",
        tags=("solidity", "security"),
        targeted_services=("audit",),
        content_type=ContentType.TUTORIAL,
        difficulty=Difficulty.ADVANCED,
    )


class TestWeights:
    def test_weight_table(self):
        assert RELATEDNESS_WEIGHTS == {
            "category": 10,
            "tag": 5,
            "service": 8,
            "content_type": 3,
            "difficulty": 2,
        }


class TestScore:
    def test_category_tag_service(self, focus: ContentItem):
        candidate = _make_item(
            "y",
            category="DeFi",
            tags=("solidity", "rust"),
            targeted_services=("audit",),
            content_type=ContentType.NEWS,
            difficulty=Difficulty.BEGINNER,
        )
        assert relatedness_score(focus, candidate) == 10 + 5 + 8

    def test_all_factors(self, focus: ContentItem):
        twin = focus.model_copy(update={"slug": "twin"})
        assert relatedness_score(focus, twin) == 10 + 5 * 2 + 8 + 3 + 2

    def test_primary_service_counts_on_both_sides(self):
        a = _make_item("a", primary_service="audit", category="A", difficulty=Difficulty.BEGINNER)
        b = _make_item("b", targeted_services=("audit",), category="B", content_type=ContentType.NEWS)
        assert score_components(a, b)["service"] == 8
        assert score_components(b, a)["service"] == 8

    def test_shared_service_counted_once(self):
        a = _make_item("a", primary_service="audit", targeted_services=("audit",))
        b = _make_item("b", primary_service="audit")
        assert score_components(a, b)["service"] == 8

    def test_empty_tags_and_services_contribute_zero(self):
        a = _make_item("a", category="A", content_type=ContentType.NEWS)
        b = _make_item("b", category="B", difficulty=Difficulty.ADVANCED)
        assert relatedness_score(a, b) == 0

    def test_identical_attributes_score_equally(self, focus: ContentItem):
        b = focus.model_copy(update={"slug": "b", "title": "B"})
        c = focus.model_copy(update={"slug": "c", "body": "different"})
        assert relatedness_score(focus, b) == relatedness_score(focus, c)


class TestRelatedTo:
    def test_excludes_self_and_ranks(self, focus: ContentItem):
        weak = _make_item("weak", category="DeFi")
        strong = _make_item("strong", category="DeFi", tags=("security",), targeted_services=("audit",))
        unrelated = _make_item("unrelated", category="Other")
        corpus = [focus, weak, unrelated, strong]

        result = related_to(focus, corpus, limit=3)
        assert [i.slug for i in result] == ["strong", "weak", "unrelated"]

    def test_zero_scores_fill_remaining_slots(self, focus: ContentItem):
        others = [_make_item(f"z{n}", category="Other", difficulty=Difficulty.BEGINNER) for n in range(3)]
        result = related_to(focus, [focus, *others], limit=5)
        assert [i.slug for i in result] == ["z0", "z1", "z2"]

    def test_ties_keep_corpus_order(self, focus: ContentItem):
        a = _make_item("a", category="DeFi")
        b = _make_item("b", category="DeFi")
        c = _make_item("c", category="DeFi")
        assert [i.slug for i in related_to(focus, [c, a, focus, b], limit=3)] == ["c", "a", "b"]

    @pytest.mark.parametrize("limit", [0, 1, 2, 10])
    def test_length_bound(self, focus: ContentItem, limit: int):
        corpus = [focus] + [_make_item(f"p{n}") for n in range(4)]
        result = related_to(focus, corpus, limit=limit)
        assert len(result) == min(limit, len(corpus) - 1)
        assert focus not in result

    def test_empty_corpus(self, focus: ContentItem):
        assert related_to(focus, [], limit=3) == []

    def test_item_not_in_corpus(self, focus: ContentItem):
        other = _make_item("other")
        assert related_to(focus, [other], limit=3) == [other]


class TestReadingProgress:
    def test_stats(self):
        body = "# Title\n\n" + "word " * 399 + "\n\n## Section\n"
        item = _make_item("p", body=body)
        assert reading_progress(item) == {
            "estimatedReadingTime": 3,
            "wordCount": 403,
            "headingCount": 2,
        }
