"""CLI entry point: build, serve or check the site."""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

import uvicorn
from rich.console import Console
from rich.logging import RichHandler
from rich.status import Status
from rich.table import Table

from .catalog import CatalogError, load_catalog
from .config import get_settings
from .main import DEFAULT_OUTPUT_DIR, build_site, static_paths
from .web import create_app


def _parser() -> argparse.ArgumentParser:
    # catalog and URL options are accepted after any subcommand
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--catalog",
        type=Path,
        default=None,
        help="Path to businesses.json (default: $CATALOG_PATH or the bundled file)",
    )
    common.add_argument(
        "--base-url",
        default=None,
        help="Public site URL used in canonical links and the sitemap (default: $SITE_BASE_URL)",
    )

    parser = argparse.ArgumentParser(
        prog="swingpoint-site",
        description="Render the SwingPointMedia marketing site from businesses.json.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    build = commands.add_parser(
        "build", parents=[common], help="Write the static site to a directory"
    )
    build.add_argument(
        "--output",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help="Output directory (default: ./site)",
    )

    serve = commands.add_parser("serve", parents=[common], help="Serve the site with uvicorn")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    commands.add_parser("check", parents=[common], help="Validate the catalog and list its routes")
    return parser


def main(argv: list[str] | None = None):
    args = _parser().parse_args(argv)

    settings = get_settings()
    if args.catalog is not None:
        settings = replace(settings, catalog_path=args.catalog)
    if args.base_url is not None:
        settings = replace(settings, base_url=args.base_url.rstrip("/"))

    console = Console()
    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )

    try:
        catalog = load_catalog(settings.catalog_path)

        if args.command == "check":
            table = Table(title=f"{len(catalog)} business(es)")
            table.add_column("Slug", style="cyan")
            table.add_column("Name")
            table.add_column("Phone")
            for record in catalog:
                table.add_row(record.slug, record.name, record.phone)
            console.print(table)
            console.print("Routes: " + ", ".join(static_paths(catalog)))
            return

        if args.command == "serve":
            uvicorn.run(create_app(catalog, settings), host=args.host, port=args.port)
            return

        status = Status("", console=console)
        status.start()

        def on_progress(msg: str):
            status.update(f"[bold cyan]{msg}[/]")

        try:
            output = build_site(catalog, settings, args.output, on_progress=on_progress)
        finally:
            status.stop()
        console.print(f"\n[bold green]Done![/] Site written to [bold]{output}[/]\n")
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled.[/]")
        sys.exit(1)
    except CatalogError as e:
        console.print(f"\n[bold red]Catalog error:[/] {e}\n")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n[bold red]Error:[/] {e}\n")
        sys.exit(1)


if __name__ == "__main__":
    main()
