"""CLI interface for folio."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Optional

import typer
from rich.console import Console
from rich.table import Table

from folio.api import get_post, get_service_content, list_posts
from folio.catalog.registry import format_price_range
from folio.config import load_config, merge_cli_overrides
from folio.context import SiteContext
from folio.errors import FolioError, NotFound
from folio.recommend.strategist import content_analytics

app = typer.Typer(
    name="folio",
    help="Query, relate, and plan site content against the service catalog.",
)

console = Console()
err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from folio import __version__

        console.print(f"folio {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", "-c", help="Path to a .folio.toml file."),
    ] = None,
    content_dir: Annotated[
        Optional[Path],
        typer.Option("--content-dir", help="Directory of .mdx/.md posts."),
    ] = None,
    catalog_path: Annotated[
        Optional[Path],
        typer.Option("--catalog", help="Service catalog TOML file (default: built-in)."),
    ] = None,
    locale: Annotated[
        Optional[str],
        typer.Option("--locale", help="Locale for service names (en, ru)."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Folio - content retrieval and recommendation for the site."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = merge_cli_overrides(
        load_config(config_path),
        content_dir=content_dir,
        catalog_path=catalog_path,
        locale=locale,
    )
    ctx.obj = config


def _site(ctx: typer.Context) -> SiteContext:
    try:
        return SiteContext.from_config(ctx.obj)
    except FolioError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(2) from exc


def _emit(payload: dict[str, Any] | NotFound) -> None:
    if isinstance(payload, NotFound):
        err_console.print(f"[red]Error:[/red] {payload.message}")
        raise typer.Exit(1)
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command()
def posts(
    ctx: typer.Context,
    search: Annotated[Optional[str], typer.Option("--search", "-s", help="Free-text search.")] = None,
    service: Annotated[Optional[str], typer.Option("--service", help="Filter by service id.")] = None,
    category: Annotated[Optional[str], typer.Option("--category", help="Filter by category.")] = None,
    content_type: Annotated[Optional[str], typer.Option("--type", "-t", help="Filter by content type.")] = None,
    difficulty: Annotated[Optional[str], typer.Option("--difficulty", "-d", help="Filter by difficulty.")] = None,
    featured: Annotated[bool, typer.Option("--featured", help="Only featured posts.")] = False,
    page: Annotated[int, typer.Option("--page", "-p", help="Page number (1-based).")] = 1,
    page_size: Annotated[Optional[int], typer.Option("--page-size", help="Posts per page.")] = None,
) -> None:
    """List posts with filters, pagination, and facets as JSON."""
    site = _site(ctx)
    raw: dict[str, Any] = {
        "search": search,
        "serviceId": service,
        "category": category,
        "type": content_type,
        "difficulty": difficulty,
        "featured": featured,
        "page": page,
        "pageSize": page_size,
    }
    _emit(list_posts(site, raw))


@app.command()
def post(
    ctx: typer.Context,
    slug: Annotated[str, typer.Argument(help="Post slug.")],
    related: Annotated[Optional[int], typer.Option("--related", "-r", help="Number of related posts.")] = None,
) -> None:
    """Show one post with related posts and service suggestions as JSON."""
    _emit(get_post(_site(ctx), slug, related_limit=related))


@app.command("service-content")
def service_content(
    ctx: typer.Context,
    service_id: Annotated[str, typer.Argument(help="Service id.")],
) -> None:
    """Show a service's related posts, topic ideas, and content gaps as JSON."""
    _emit(get_service_content(_site(ctx), service_id))


@app.command()
def analytics(ctx: typer.Context) -> None:
    """Show corpus-wide content analytics as JSON."""
    site = _site(ctx)
    _emit(content_analytics(site.corpus, site.catalog))


@app.command()
def services(
    ctx: typer.Context,
    search: Annotated[Optional[str], typer.Option("--search", "-s", help="Filter services by text.")] = None,
) -> None:
    """List the service catalog."""
    site = _site(ctx)
    catalog = site.catalog
    if search:
        rows = catalog.search_services(search, site.locale)
    else:
        rows = [s for c in catalog.get_service_categories() for s in c.services]

    if not rows:
        console.print("[yellow]No services found.[/yellow]")
        raise typer.Exit(0)

    table = Table(title="Services")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("Category")
    table.add_column("Price")
    table.add_column("Strategy")
    for service in rows:
        table.add_row(
            service.service_id,
            service.name.get(site.locale),
            service.category_id,
            format_price_range(service.price_range, site.locale),
            "yes" if catalog.get_strategy(service.service_id) else "-",
        )
    console.print(table)


if __name__ == "__main__":
    app()
