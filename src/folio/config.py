"""Unified configuration loaded from .folio.toml, env vars, and CLI flags.

Loading order: defaults → TOML file → env vars → CLI flags.
"""

from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".folio.toml"
CONFIG_SEARCH_PATHS = [
    Path("."),
    Path.home() / ".config" / "folio",
]


class ContentSectionConfig(BaseModel):
    """[content] section."""

    directory: str = "./content/blog"
    extensions: list[str] = Field(default_factory=lambda: [".mdx", ".md"])
    default_author: str = "Nikita Volkov"


class CatalogSectionConfig(BaseModel):
    """[catalog] section.

    An empty ``path`` selects the built-in catalog.
    """

    path: str = ""
    locale: str = "en"


class QuerySectionConfig(BaseModel):
    """[query] section."""

    default_page_size: int = 10

    @field_validator("default_page_size")
    @classmethod
    def _positive(cls, value: int) -> int:
        return value if value >= 1 else 10


class RelatedSectionConfig(BaseModel):
    """[related] section."""

    limit: int = 3


class FolioConfig(BaseModel):
    """Top-level configuration model."""

    content: ContentSectionConfig = Field(default_factory=ContentSectionConfig)
    catalog: CatalogSectionConfig = Field(default_factory=CatalogSectionConfig)
    query: QuerySectionConfig = Field(default_factory=QuerySectionConfig)
    related: RelatedSectionConfig = Field(default_factory=RelatedSectionConfig)


def load_config(path: str | Path | None = None) -> FolioConfig:
    """Load configuration from a TOML file.

    Search order:
    1. Explicit path (if provided)
    2. .folio.toml in CWD
    3. ~/.config/folio/config.toml

    Then overlay environment variables.
    """
    data: dict[str, object] = {}

    if path is not None:
        toml_path = Path(path)
        if toml_path.exists():
            data = _load_toml(toml_path)
        else:
            logger.warning("Config file not found: %s", toml_path)
    else:
        for search_dir in CONFIG_SEARCH_PATHS:
            candidate = search_dir / CONFIG_FILENAME
            if candidate.exists():
                data = _load_toml(candidate)
                logger.info("Loaded config from %s", candidate)
                break
        global_config = Path.home() / ".config" / "folio" / "config.toml"
        if not data and global_config.exists():
            data = _load_toml(global_config)
            logger.info("Loaded config from %s", global_config)

    config = FolioConfig.model_validate(data) if data else FolioConfig()
    return _apply_env_vars(config)


def merge_cli_overrides(config: FolioConfig, **cli_kwargs: object) -> FolioConfig:
    """Overlay explicitly-set CLI flags onto the config.

    Only overrides values where the CLI flag was provided (not None).
    """
    data = config.model_dump()

    mapping: dict[str, tuple[str, str]] = {
        "content_dir": ("content", "directory"),
        "catalog_path": ("catalog", "path"),
        "locale": ("catalog", "locale"),
        "page_size": ("query", "default_page_size"),
        "related_limit": ("related", "limit"),
    }

    for key, value in cli_kwargs.items():
        if value is None:
            continue
        if key in mapping:
            section, field = mapping[key]
            data[section][field] = str(value) if isinstance(value, Path) else value

    return FolioConfig.model_validate(data)


def _load_toml(path: Path) -> dict[str, object]:
    """Load a TOML file and return the data dict."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, OSError) as exc:
        logger.warning("Failed to parse %s: %s", path, exc)
        return {}


def _apply_env_vars(config: FolioConfig) -> FolioConfig:
    """Apply environment variable overrides to config."""
    data = config.model_dump()

    env_mapping: dict[str, tuple[str, str]] = {
        "FOLIO_CONTENT_DIR": ("content", "directory"),
        "FOLIO_DEFAULT_AUTHOR": ("content", "default_author"),
        "FOLIO_CATALOG_PATH": ("catalog", "path"),
        "FOLIO_LOCALE": ("catalog", "locale"),
    }
    for env_var, (section, field) in env_mapping.items():
        value = os.environ.get(env_var)
        if value is not None:
            data[section][field] = value

    for env_var, (section, field) in [
        ("FOLIO_PAGE_SIZE", ("query", "default_page_size")),
        ("FOLIO_RELATED_LIMIT", ("related", "limit")),
    ]:
        raw = os.environ.get(env_var)
        if raw is None:
            continue
        try:
            data[section][field] = int(raw)
        except ValueError:
            logger.warning("Ignoring non-integer %s=%r", env_var, raw)

    return FolioConfig.model_validate(data)
