"""Orchestration: catalog -> pages -> sitemap/robots -> output directory."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Callable

from .catalog import BusinessCatalog
from .config import Settings
from .pages import render_blog, render_business, render_faq, render_home, render_services
from .seo import build_sitemap, render_robots_txt, render_sitemap_xml

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIR = Path("site")


def static_paths(catalog: BusinessCatalog) -> list[str]:
    """Every routable page path: the four static pages, then one per slug."""
    return ["/", "/services", "/faq", "/blog"] + [
        f"/business/{slug}" for slug in catalog.list_slugs()
    ]


def _output_file(output_dir: Path, path: str) -> Path:
    return output_dir / path.strip("/") / "index.html"


def _write_text(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    logger.debug("Wrote %s", path)


def build_site(
    catalog: BusinessCatalog,
    settings: Settings,
    output_dir: Path | str = DEFAULT_OUTPUT_DIR,
    on_progress: Callable[[str], None] | None = None,
    now: datetime | None = None,
) -> Path:
    """
    Export the whole site as static files.

    Steps:
        1. Render home, services, FAQ and blog
        2. Render one profile page per business slug
        3. Write sitemap.xml and robots.txt

    Args:
        catalog: Loaded business catalog
        settings: Base URL and site name used in metadata
        output_dir: Destination directory (created if missing)
        on_progress: Optional callback(step: str) for progress updates
        now: Last-modified time for sitemap entries (default: current UTC time)

    Returns:
        Path to the output directory
    """
    def _progress(msg: str):
        if on_progress:
            on_progress(msg)

    output_dir = Path(output_dir)

    # Step 1: Static pages
    _progress("Rendering static pages...")
    renderers = {
        "/": render_home,
        "/services": render_services,
        "/faq": render_faq,
        "/blog": render_blog,
    }
    for path, render in renderers.items():
        _write_text(_output_file(output_dir, path), render(catalog, settings))

    # Step 2: Business profiles
    slugs = catalog.list_slugs()
    _progress(f"Rendering {len(slugs)} business page(s)...")
    for slug in slugs:
        _write_text(
            _output_file(output_dir, f"/business/{slug}"),
            render_business(catalog, slug, settings),
        )

    # Step 3: Crawler files
    _progress("Writing sitemap.xml and robots.txt...")
    entries = build_sitemap(catalog, settings.base_url, now=now)
    _write_text(output_dir / "sitemap.xml", render_sitemap_xml(entries))
    _write_text(output_dir / "robots.txt", render_robots_txt(settings.base_url))

    logger.info("Built %d page(s) into %s", len(renderers) + len(slugs), output_dir)
    return output_dir
