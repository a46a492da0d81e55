"""FastAPI app serving the marketing pages, sitemap and robots policy."""

import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import HTMLResponse, PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .catalog import BusinessCatalog, BusinessNotFound, load_catalog, load_default_catalog
from .config import DEFAULT_CATALOG_PATH, Settings, get_settings
from .pages import (
    render_blog,
    render_business,
    render_faq,
    render_home,
    render_not_found,
    render_services,
)
from .seo import build_sitemap, render_robots_txt, render_sitemap_xml

logger = logging.getLogger(__name__)


def create_app(catalog: BusinessCatalog | None = None, settings: Settings | None = None) -> FastAPI:
    """
    Build the app around a catalog loaded once, before any request is served.

    A missing or malformed catalog raises CatalogLoadError here, so the
    server never starts without data.
    """
    settings = settings or get_settings()
    if catalog is None and settings.catalog_path == DEFAULT_CATALOG_PATH:
        catalog = load_default_catalog()
    elif catalog is None:
        catalog = load_catalog(settings.catalog_path)

    app = FastAPI(title=f"{settings.site_name} Website")
    app.state.catalog = catalog
    app.state.settings = settings

    @app.exception_handler(BusinessNotFound)
    async def business_not_found(request: Request, exc: BusinessNotFound):
        logger.info("Business not found: %s", exc.slug)
        return HTMLResponse(render_not_found(catalog, exc.slug, settings), status_code=404)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException):
        # unmatched paths such as /business/ or /business/a/b get the same page
        if exc.status_code != 404:
            return await http_exception_handler(request, exc)
        slug = request.url.path.removeprefix("/business/").strip("/")
        logger.info("No route for %s", request.url.path)
        return HTMLResponse(render_not_found(catalog, slug, settings), status_code=404)

    @app.get("/", response_class=HTMLResponse)
    def home():
        return render_home(catalog, settings)

    @app.get("/services", response_class=HTMLResponse)
    def services():
        return render_services(catalog, settings)

    @app.get("/faq", response_class=HTMLResponse)
    def faq():
        return render_faq(catalog, settings)

    @app.get("/blog", response_class=HTMLResponse)
    def blog():
        return render_blog(catalog, settings)

    @app.get("/business/{slug}", response_class=HTMLResponse)
    def business(slug: str):
        return render_business(catalog, slug, settings)

    @app.get("/sitemap.xml")
    def sitemap():
        xml = render_sitemap_xml(build_sitemap(catalog, settings.base_url))
        return Response(content=xml, media_type="application/xml")

    @app.get("/robots.txt", response_class=PlainTextResponse)
    def robots():
        return render_robots_txt(settings.base_url)

    return app

