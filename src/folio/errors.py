"""Error types shared across folio.

Expected absence (an unknown slug, a service without a content strategy)
is modelled as a ``NotFound`` value rather than an exception, so callers
at the boundary decide how to surface it.  Exceptions are reserved for
configuration faults.
"""

from __future__ import annotations

from pydantic import BaseModel


class FolioError(Exception):
    """Base class for folio configuration and loading faults."""


class CatalogError(FolioError):
    """Raised when the service catalog or its strategies are inconsistent."""


class ContentLoadError(FolioError):
    """Raised when the content source itself cannot be read."""


class NotFound(BaseModel):
    """Typed absence returned instead of a result."""

    kind: str  # "post", "service", "strategy"
    key: str

    @property
    def message(self) -> str:
        return f"{self.kind.capitalize()} not found: {self.key}"

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message, "kind": self.kind, "key": self.key}
