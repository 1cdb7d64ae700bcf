"""Front-matter content loader.

Reads every ``*.mdx`` / ``*.md`` file in the content directory, splits
the YAML front matter from the body, and builds a ContentItem per file.
The slug is the file name without its extension.  Results are cached on
the loader instance, so the directory is read at most once.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from datetime import UTC, date, datetime
from pathlib import Path
from typing import Any

import yaml

from folio.content.models import ContentItem, ContentType, Difficulty
from folio.errors import ContentLoadError

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = (".mdx", ".md")
DEFAULT_AUTHOR = "Nikita Volkov"

_FRONT_MATTER_RE = re.compile(r"\A---[ \t]*\r?\n(?:(.*?)\r?\n)?---[ \t]*(?:\r?\n|\Z)", re.DOTALL)


def split_front_matter(text: str) -> tuple[dict[str, Any], str]:
    """Split a markdown document into (front matter dict, body).

    The front matter runs from an opening ``---`` line to the next line
    that is exactly ``---``.  Documents without such a block have empty
    front matter.  Malformed YAML raises ``yaml.YAMLError``.
    """
    match = _FRONT_MATTER_RE.match(text)
    if match is None:
        return {}, text

    data = yaml.safe_load(match.group(1) or "") or {}
    if not isinstance(data, dict):
        raise yaml.YAMLError("front matter is not a mapping")
    return data, text[match.end() :].lstrip("\n")


def _as_list(value: object) -> list[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value] if value else []
    if isinstance(value, Iterable):
        return [str(v) for v in value if v is not None and str(v)]
    return [str(value)]


def _as_datetime(value: object) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


def _as_enum(enum_cls: type, value: object, default: Any, slug: str) -> Any:
    if value is None or value == "":
        return default
    try:
        return enum_cls(str(value))
    except ValueError:
        logger.warning("Unknown %s %r in %s, using %s", enum_cls.__name__, value, slug, default)
        return default


def build_item(
    slug: str,
    front_matter: Mapping[str, Any],
    body: str,
    *,
    fallback_published_at: datetime,
    default_author: str = DEFAULT_AUTHOR,
) -> ContentItem:
    """Build a ContentItem from parsed front matter, applying defaults."""
    fm = front_matter
    published_at = _as_datetime(fm.get("publishedAt"))
    if published_at is None:
        if fm.get("publishedAt") is not None:
            logger.warning("Unparseable publishedAt %r in %s", fm.get("publishedAt"), slug)
        published_at = fallback_published_at

    primary = fm.get("primaryService")
    return ContentItem(
        slug=slug,
        title=str(fm.get("title") or "Untitled"),
        description=str(fm.get("description") or ""),
        category=str(fm.get("category") or "Technology"),
        tags=tuple(_as_list(fm.get("tags"))),
        content_type=_as_enum(ContentType, fm.get("type"), ContentType.BLOG, slug),
        difficulty=_as_enum(Difficulty, fm.get("difficulty"), Difficulty.INTERMEDIATE, slug),
        primary_service=str(primary) if primary else None,
        targeted_services=tuple(_as_list(fm.get("targetedServices"))),
        published_at=published_at,
        featured=bool(fm.get("featured", False)),
        author=str(fm.get("author") or default_author),
        cover_image=str(fm["coverImage"]) if fm.get("coverImage") else None,
        body=body,
    )


class ContentLoader:
    """Loads the content corpus from a directory of markdown files."""

    def __init__(
        self,
        directory: Path,
        *,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        default_author: str = DEFAULT_AUTHOR,
    ) -> None:
        self._directory = directory
        self._extensions = tuple(extensions)
        self._default_author = default_author
        self._items: tuple[ContentItem, ...] | None = None

    @property
    def directory(self) -> Path:
        return self._directory

    def _read_file(self, path: Path) -> ContentItem | None:
        try:
            text = path.read_text(encoding="utf-8")
            front_matter, body = split_front_matter(text)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
            logger.warning("Skipping unreadable content file %s: %s", path, exc)
            return None

        mtime = datetime.fromtimestamp(path.stat().st_mtime, tz=UTC)
        return build_item(
            path.stem,
            front_matter,
            body,
            fallback_published_at=mtime,
            default_author=self._default_author,
        )

    def load_all(self) -> tuple[ContentItem, ...]:
        """Return every item, newest first.  Reads the directory once."""
        if self._items is not None:
            return self._items

        if not self._directory.exists():
            logger.info("Content directory %s does not exist, corpus is empty", self._directory)
            self._items = ()
            return self._items
        if not self._directory.is_dir():
            raise ContentLoadError(f"Content path is not a directory: {self._directory}")

        items: list[ContentItem] = []
        seen: set[str] = set()
        for path in sorted(self._directory.iterdir()):
            if not path.is_file() or path.suffix not in self._extensions:
                continue
            if path.stem in seen:
                logger.warning("Duplicate slug %s, keeping first file", path.stem)
                continue
            item = self._read_file(path)
            if item is None:
                continue
            seen.add(item.slug)
            items.append(item)

        items.sort(key=lambda i: i.slug)
        items.sort(key=lambda i: i.published_at, reverse=True)
        self._items = tuple(items)
        logger.info("Loaded %d content items from %s", len(items), self._directory)
        return self._items

    def get(self, slug: str) -> ContentItem | None:
        """Return an item by slug, or None if not found."""
        for item in self.load_all():
            if item.slug == slug:
                return item
        return None
