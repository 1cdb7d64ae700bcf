"""Content domain — published posts and the loader that reads them."""

from folio.content.loader import ContentLoader, build_item, split_front_matter
from folio.content.models import ContentItem, ContentType, Difficulty

__all__ = [
    "ContentItem",
    "ContentLoader",
    "ContentType",
    "Difficulty",
    "build_item",
    "split_front_matter",
]
