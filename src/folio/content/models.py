"""Content domain models — pure Pydantic v2 data types.

A ContentItem is one published post loaded from the content directory.
Items are frozen: the corpus is loaded once per process and shared
read-only between requests.
"""

from __future__ import annotations

import math
import re
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

WORDS_PER_MINUTE = 200

_HEADING_RE = re.compile(r"^#{1,6}\s", re.MULTILINE)


class ContentType(StrEnum):
    """Kind of published content."""

    BLOG = "blog"
    NEWS = "news"
    TUTORIAL = "tutorial"
    CASE_STUDY = "case-study"
    OPINION = "opinion"


class Difficulty(StrEnum):
    """Reader level a post is written for."""

    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


class ContentItem(BaseModel):
    """A single published post with its front-matter metadata and body."""

    model_config = ConfigDict(frozen=True)

    slug: str
    title: str = "Untitled"
    description: str = ""
    category: str = "Technology"
    tags: tuple[str, ...] = ()
    content_type: ContentType = ContentType.BLOG
    difficulty: Difficulty = Difficulty.INTERMEDIATE
    primary_service: str | None = None
    targeted_services: tuple[str, ...] = ()
    published_at: datetime
    featured: bool = False
    author: str = ""
    cover_image: str | None = None
    body: str = Field(default="", repr=False)

    @field_validator("published_at")
    @classmethod
    def _ensure_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    # ── Derived attributes ───────────────────────────────────────

    @property
    def word_count(self) -> int:
        return len(self.body.split())

    @property
    def estimated_reading_minutes(self) -> int:
        return math.ceil(self.word_count / WORDS_PER_MINUTE)

    @property
    def reading_time(self) -> str:
        return f"{max(self.estimated_reading_minutes, 1)} min read"

    @property
    def heading_count(self) -> int:
        return len(_HEADING_RE.findall(self.body))

    @property
    def service_ids(self) -> tuple[str, ...]:
        """Primary service followed by targeted services, without duplicates."""
        ids: list[str] = []
        if self.primary_service:
            ids.append(self.primary_service)
        for service_id in self.targeted_services:
            if service_id not in ids:
                ids.append(service_id)
        return tuple(ids)

    def references_service(self, service_id: str) -> bool:
        return self.primary_service == service_id or service_id in self.targeted_services

    def to_metadata(self) -> dict[str, Any]:
        """Return the JSON-shaped post metadata (everything but the body)."""
        return {
            "slug": self.slug,
            "title": self.title,
            "description": self.description,
            "publishedAt": self.published_at.isoformat(),
            "author": self.author,
            "category": self.category,
            "tags": list(self.tags),
            "readingTime": self.reading_time,
            "featured": self.featured,
            "coverImage": self.cover_image,
            "type": self.content_type.value,
            "difficulty": self.difficulty.value,
            "targetedServices": list(self.targeted_services),
            "primaryService": self.primary_service,
        }

    def to_dict(self) -> dict[str, Any]:
        """Return the full JSON-shaped post including its body."""
        data = self.to_metadata()
        data["content"] = self.body
        return data
