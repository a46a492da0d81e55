"""sitemap.xml, robots.txt and per-page <head> metadata."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from html import escape

from .catalog import BusinessCatalog
from .config import DEFAULT_BASE_URL
from .models import BusinessRecord


@dataclass(frozen=True)
class SitemapEntry:
    url: str
    last_modified: datetime
    change_frequency: str  # "always" | "hourly" | "daily" | "weekly" | "monthly" | ...
    priority: float


# (path, change_frequency, priority), in sitemap order
STATIC_PAGES = (
    ("", "monthly", 1.0),
    ("/faq", "monthly", 0.8),
    ("/services", "monthly", 0.9),
    ("/blog", "weekly", 0.7),
)

BUSINESS_CHANGE_FREQUENCY = "monthly"
BUSINESS_PRIORITY = 0.9


def build_sitemap(
    catalog: BusinessCatalog,
    base_url: str = DEFAULT_BASE_URL,
    now: datetime | None = None,
) -> list[SitemapEntry]:
    """One entry per static page, then one per business slug in catalog order."""
    base_url = base_url.rstrip("/")
    now = now or datetime.now(timezone.utc)

    entries = [
        SitemapEntry(f"{base_url}{path}", now, frequency, priority)
        for path, frequency, priority in STATIC_PAGES
    ]
    entries.extend(
        SitemapEntry(f"{base_url}/business/{slug}", now, BUSINESS_CHANGE_FREQUENCY, BUSINESS_PRIORITY)
        for slug in catalog.list_slugs()
    )
    return entries


def render_sitemap_xml(entries: list[SitemapEntry]) -> str:
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
    ]
    for entry in entries:
        lines.extend(
            [
                "  <url>",
                f"    <loc>{escape(entry.url)}</loc>",
                f"    <lastmod>{entry.last_modified.isoformat()}</lastmod>",
                f"    <changefreq>{entry.change_frequency}</changefreq>",
                f"    <priority>{entry.priority:.1f}</priority>",
                "  </url>",
            ]
        )
    lines.append("</urlset>")
    return "\n".join(lines) + "\n"


@dataclass(frozen=True)
class RobotsRule:
    user_agent: str
    allow: str | None = None
    disallow: str | None = None


# Search and answer-engine crawlers may index; training crawlers may not.
ROBOTS_RULES = (
    RobotsRule("Googlebot", allow="/"),
    RobotsRule("Google-Extended", disallow="/"),
    RobotsRule("OAI-SearchBot", allow="/"),
    RobotsRule("ChatGPT-User", allow="/"),
    RobotsRule("GPTBot", disallow="/"),
    RobotsRule("ClaudeBot", disallow="/"),
    RobotsRule("anthropic-ai", disallow="/"),
    RobotsRule("PerplexityBot", allow="/"),
    RobotsRule("Meta-ExternalAgent", allow="/"),
    RobotsRule("*", allow="/"),
)


def render_robots_txt(base_url: str = DEFAULT_BASE_URL, rules=ROBOTS_RULES) -> str:
    blocks = []
    for rule in rules:
        lines = [f"User-agent: {rule.user_agent}"]
        if rule.allow is not None:
            lines.append(f"Allow: {rule.allow}")
        if rule.disallow is not None:
            lines.append(f"Disallow: {rule.disallow}")
        blocks.append("\n".join(lines))
    blocks.append(f"Sitemap: {base_url.rstrip('/')}/sitemap.xml")
    return "\n\n".join(blocks) + "\n"


# ---------------------------------------------------------------------------
# Page metadata
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PageMeta:
    title: str
    description: str
    path: str
    keywords: list[str] = field(default_factory=list)
    og_title: str | None = None
    og_description: str | None = None
    og_type: str = "website"
    locale: str = "en_US"
    twitter_card: str = "summary_large_image"

    def head_tags(self, base_url: str, site_name: str) -> str:
        """<title> and <meta> tags for the page <head>."""
        og_title = self.og_title or self.title
        og_description = self.og_description or self.description
        tags = [
            f"<title>{escape(self.title)}</title>",
            f'<meta name="description" content="{escape(self.description)}">',
        ]
        if self.keywords:
            tags.append(f'<meta name="keywords" content="{escape(", ".join(self.keywords))}">')
        tags.extend(
            [
                f'<link rel="canonical" href="{escape(base_url + self.path)}">',
                f'<meta property="og:title" content="{escape(og_title)}">',
                f'<meta property="og:description" content="{escape(og_description)}">',
                f'<meta property="og:type" content="{escape(self.og_type)}">',
                f'<meta property="og:locale" content="{escape(self.locale)}">',
                f'<meta property="og:url" content="{escape(base_url + self.path)}">',
                f'<meta property="og:site_name" content="{escape(site_name)}">',
                f'<meta name="twitter:card" content="{escape(self.twitter_card)}">',
                f'<meta name="twitter:title" content="{escape(og_title)}">',
                f'<meta name="twitter:description" content="{escape(og_description)}">',
            ]
        )
        return "\n".join(tags)


def home_meta(site_name: str) -> PageMeta:
    return PageMeta(
        title=f"{site_name} - AI Automation and Consulting Agency | Coachella Valley",
        description=(
            "Stop losing calls and customers. Our AI voice agents and content automation help "
            "service-based businesses save $10,000+ annually while attracting ideal customers "
            "automatically. Serving the Coachella Valley."
        ),
        path="/",
        keywords=[
            "AI automation",
            "voice agents",
            "content marketing",
            "Coachella Valley",
            "business automation",
            "lead generation",
        ],
        og_title=f"{site_name} - AI Automation and Consulting Agency",
    )


def services_meta(site_name: str) -> PageMeta:
    return PageMeta(
        title=f"AI Automation Services - {site_name}",
        description=(
            "Comprehensive AI automation services including voice agents, content automation, "
            "AI integration consulting, and lead generation systems for service-based businesses."
        ),
        path="/services",
    )


def faq_meta(site_name: str) -> PageMeta:
    return PageMeta(
        title=f"Frequently Asked Questions - {site_name} | AI Automation & Digital Marketing",
        description=(
            "Get answers to common questions about digital marketing, AI automation, content "
            "marketing, and business growth strategies. Expert insights from "
            f"{site_name} serving the Coachella Valley."
        ),
        path="/faq",
        og_title=f"Frequently Asked Questions - {site_name}",
    )


def blog_meta(site_name: str) -> PageMeta:
    return PageMeta(
        title=f"AI Automation Blog - {site_name} | Coachella Valley Digital Marketing Insights",
        description=(
            "Latest insights on AI automation, content marketing, and digital transformation "
            "for service-based businesses."
        ),
        path="/blog",
        og_title=f"AI Automation Blog - {site_name}",
    )


def business_meta(record: BusinessRecord) -> PageMeta:
    return PageMeta(
        title=f"{record.name} - {record.category} | {record.city}, {record.state}",
        description=record.description,
        path=f"/business/{record.slug}",
        og_title=f"{record.name} - {record.category}",
    )


def not_found_meta(slug: str) -> PageMeta:
    return PageMeta(
        title="Business Not Found",
        description="The requested business could not be found.",
        path=f"/business/{slug}",
    )
