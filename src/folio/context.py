"""Site context — the loaded corpus and catalog passed into every engine call."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from folio.catalog.registry import ServiceCatalog
from folio.config import FolioConfig
from folio.content.loader import ContentLoader
from folio.content.models import ContentItem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SiteContext:
    """Immutable snapshot of everything the engines read.

    Built once per process and shared across requests.
    """

    corpus: tuple[ContentItem, ...]
    catalog: ServiceCatalog
    locale: str = "en"
    default_page_size: int = 10
    related_limit: int = 3

    @classmethod
    def from_config(cls, config: FolioConfig) -> SiteContext:
        loader = ContentLoader(
            Path(config.content.directory),
            extensions=config.content.extensions,
            default_author=config.content.default_author,
        )
        if config.catalog.path:
            catalog = ServiceCatalog.from_toml(Path(config.catalog.path))
        else:
            catalog = ServiceCatalog.default()
        corpus = loader.load_all()
        logger.debug("Site context ready: %d items", len(corpus))
        return cls(
            corpus=corpus,
            catalog=catalog,
            locale=config.catalog.locale,
            default_page_size=config.query.default_page_size,
            related_limit=config.related.limit,
        )

    def get_item(self, slug: str) -> ContentItem | None:
        """Return a corpus item by slug, or None if not found."""
        for item in self.corpus:
            if item.slug == slug:
                return item
        return None
