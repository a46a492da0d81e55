"""Server-rendered HTML for the marketing pages.

Pages read from a BusinessCatalog passed in by the caller. Home, services,
FAQ and blog render the primary business (the agency itself); the profile
page renders whichever business the slug names.
"""

from html import escape

from .catalog import BusinessCatalog
from .config import Settings
from .models import BusinessRecord
from .seo import (
    PageMeta,
    blog_meta,
    business_meta,
    faq_meta,
    home_meta,
    not_found_meta,
    services_meta,
)
from .structured_data import StructuredDataKind, project_structured_data, to_json_ld

HOME_INDUSTRY_LIMIT = 6

NAV_LINKS = (
    ("/services", "Services"),
    ("/blog", "Blog"),
    ("/faq", "FAQ"),
)

STYLE_CSS = """
    *, *::before, *::after { margin: 0; padding: 0; box-sizing: border-box; }

    body {
        font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, 'Helvetica Neue', Arial, sans-serif;
        background: linear-gradient(135deg, #f8fafc, #eff6ff 50%, #faf5ff);
        color: #1e293b;
        line-height: 1.6;
    }

    nav, main, footer { max-width: 1100px; margin: 0 auto; padding: 24px; }
    nav { display: flex; justify-content: space-between; align-items: center; }
    nav a { color: #475569; text-decoration: none; margin-left: 24px; }
    nav .brand { font-size: 24px; font-weight: 700; margin-left: 0; color: #2563eb; }

    section { margin: 48px 0; }
    h1 { font-size: 48px; font-weight: 900; margin-bottom: 16px; }
    h2 { font-size: 32px; font-weight: 700; margin-bottom: 16px; }
    h3 { font-size: 20px; font-weight: 700; margin-bottom: 8px; }
    .lead { font-size: 20px; color: #475569; }

    .grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(240px, 1fr)); gap: 24px; }
    .card {
        background: rgba(255,255,255,0.7);
        border: 1px solid rgba(255,255,255,0.4);
        border-radius: 24px;
        padding: 28px;
        box-shadow: 0 8px 24px rgba(15,23,42,0.06);
    }
    .stat { font-size: 40px; font-weight: 700; color: #059669; }
    .stat-label { color: #475569; }

    .cta {
        display: inline-block;
        padding: 14px 32px;
        border-radius: 16px;
        background: linear-gradient(90deg, #2563eb, #9333ea);
        color: white;
        font-weight: 700;
        text-decoration: none;
        margin: 8px;
    }
    .cta.secondary { background: white; color: #334155; }

    .nap dt { font-weight: 600; margin-top: 16px; }
    .nap dd { color: #475569; }

    footer { font-size: 13px; color: #94a3b8; text-align: center; }
"""


def _json_ld_scripts(documents: list[dict]) -> str:
    return "\n".join(
        f'<script type="application/ld+json">\n{to_json_ld(document)}\n</script>'
        for document in documents
    )


def _nav(settings: Settings, primary: BusinessRecord) -> str:
    links = [f'<a href="{href}">{label}</a>' for href, label in NAV_LINKS]
    links.append(f'<a href="/business/{escape(primary.slug)}">About</a>')
    return (
        "<nav>"
        f'<a class="brand" href="/">{escape(settings.site_name)}</a>'
        f"<div>{''.join(links)}</div>"
        "</nav>"
    )


def _layout(
    meta: PageMeta,
    body: str,
    settings: Settings,
    primary: BusinessRecord,
    structured_data: list[dict] | None = None,
) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
{meta.head_tags(settings.base_url, settings.site_name)}
<style>{STYLE_CSS}</style>
{_json_ld_scripts(structured_data or [])}
</head>
<body>
{_nav(settings, primary)}
<main>
{body}
</main>
<footer>&copy; {escape(primary.name)} &middot; {escape(primary.full_address)} &middot; {escape(primary.phone)}</footer>
</body>
</html>
"""


def _cta(record: BusinessRecord, primary_href: str = "/faq", primary_label: str = "View All FAQs") -> str:
    return f"""
<section class="card" style="text-align:center">
    <h2>Ready to Transform Your Business?</h2>
    <p class="lead">Let's discuss how AI automation can help your business grow</p>
    <a class="cta" href="{primary_href}">{primary_label}</a>
    <a class="cta secondary" href="tel:{escape(record.phone)}">Call Now: {escape(record.phone)}</a>
</section>
"""


def render_nap_block(record: BusinessRecord) -> str:
    """Name / address / phone block. Email, hours and map rows only when present."""
    rows = [
        f"<dt>{escape(record.name)}</dt><dd>{escape(record.category)}</dd>",
        f"<dt>Address</dt><dd>{escape(record.full_address)}</dd>",
        f'<dt>Phone</dt><dd><a href="tel:{escape(record.phone)}">{escape(record.phone)}</a></dd>',
    ]
    if record.email:
        rows.append(
            f'<dt>Email</dt><dd><a href="mailto:{escape(record.email)}">{escape(record.email)}</a></dd>'
        )
    if record.hours:
        rows.append(f"<dt>Hours</dt><dd>{escape(record.hours.display())}</dd>")

    map_link = ""
    if record.map_link:
        map_link = (
            f'<p><a class="cta" href="{escape(record.map_link)}" target="_blank" '
            'rel="noopener noreferrer">View on Google Maps</a></p>'
        )

    return f"""
<div class="card nap">
    <h2>Contact Information</h2>
    <dl>{"".join(rows)}</dl>
    {map_link}
</div>
"""


def _faq_list(record: BusinessRecord) -> str:
    return "".join(
        f"""
    <div class="card">
        <h3>{escape(faq.question)}</h3>
        <p>{escape(faq.answer)}</p>
    </div>"""
        for faq in record.faqs
    )


def _services_grid(record: BusinessRecord, with_benefits: bool = False) -> str:
    cards = ""
    for service in record.services:
        benefits = ""
        if with_benefits and service.benefits:
            items = "".join(f"<li>{escape(b)}</li>" for b in service.benefits)
            benefits = f"<h4>Key Benefits:</h4><ul>{items}</ul>"
        cards += f"""
    <div class="card">
        <h3>{escape(service.name)}</h3>
        <p>{escape(service.description)}</p>
        {benefits}
    </div>"""
    return f'<div class="grid">{cards}</div>'


def _industries(record: BusinessRecord, limit: int | None = None) -> str:
    industries = record.industries if limit is None else record.industries[:limit]
    cards = ""
    for industry in industries:
        results = "".join(f"<li>{escape(r)}</li>" for r in industry.results)
        cards += f"""
    <div class="card">
        <h3>{escape(industry.name)}</h3>
        <p>{escape(industry.description)}</p>
        <h4>Challenge</h4><p>{escape(industry.challenge)}</p>
        <h4>AI Solution</h4><p>{escape(industry.solution)}</p>
        <h4>Results</h4><ul>{results}</ul>
    </div>"""
    return f'<div class="grid">{cards}</div>'


def _process(record: BusinessRecord) -> str:
    steps = "".join(
        f"""
    <div class="card">
        <div class="stat">{escape(step.icon)}</div>
        <h3>{escape(step.title)}</h3>
        <p>{escape(step.description)}</p>
    </div>"""
        for step in record.process
    )
    return f'<div class="grid">{steps}</div>'


def _statistics(record: BusinessRecord) -> str:
    if record.statistics is None:
        return ""
    stats = record.statistics
    cells = [
        (stats.average_savings, "Average Annual Savings"),
        (stats.call_capture_rate, "Call Capture Rate"),
        (stats.availability, "AI Customer Support"),
        (stats.lead_conversion, "Lead Conversion"),
    ]
    return '<div class="grid">' + "".join(
        f'<div class="card"><div class="stat">{escape(value)}</div>'
        f'<div class="stat-label">{label}</div></div>'
        for value, label in cells
        if value
    ) + "</div>"


def _founder(record: BusinessRecord) -> str:
    founder = record.founder
    if founder is None:
        return ""
    return f"""
<section class="card">
    <h2>Hi I'm {escape(founder.name)} - {escape(founder.title)}</h2>
    <p>{escape(founder.bio)}</p>
    <p><strong>Experience:</strong> {escape(founder.experience)}</p>
    <p><strong>Specialty:</strong> {escape(founder.specialty)}</p>
</section>
"""


def _testimonial_summary(record: BusinessRecord) -> str:
    if not record.testimonials:
        return ""
    first = record.testimonials[0]
    return (
        f'<p class="lead">&#11088; {escape(first.rating)} rating from {escape(first.clients)}'
        " &middot; No long-term contracts</p>"
    )


# ---------------------------------------------------------------------------
# Pages
# ---------------------------------------------------------------------------


def render_home(catalog: BusinessCatalog, settings: Settings) -> str:
    business = catalog.primary
    body = f"""
<header>
    <h1>AI Automation and Consulting Agency</h1>
    <p class="lead">for Businesses</p>
    <p>{escape(business.description)}</p>
    <p><a class="cta" href="/services">Explore Services</a>
    <a class="cta secondary" href="tel:{escape(business.phone)}">Call {escape(business.phone)}</a></p>
</header>
<section>{_statistics(business)}</section>
<section>
    <h2>AI Solutions That Actually Save Money</h2>
    {_services_grid(business)}
</section>
<section>
    <h2>Industries We Serve</h2>
    {_industries(business, limit=HOME_INDUSTRY_LIMIT)}
</section>
<section>
    <h2>Our Process</h2>
    {_process(business)}
</section>
{_founder(business)}
<section>{_testimonial_summary(business)}</section>
{_cta(business)}
"""
    structured_data = [
        project_structured_data(business, StructuredDataKind.PROFESSIONAL_SERVICE, base_url=settings.base_url),
        project_structured_data(business, StructuredDataKind.FAQ_PAGE, base_url=settings.base_url),
        project_structured_data(
            business, StructuredDataKind.WEBSITE, base_url=settings.base_url, site_name=settings.site_name
        ),
    ]
    return _layout(home_meta(settings.site_name), body, settings, business, structured_data)


def render_services(catalog: BusinessCatalog, settings: Settings) -> str:
    business = catalog.primary
    body = f"""
<header>
    <h1>AI Automation Services</h1>
    <p class="lead">Solutions built for service-based businesses</p>
</header>
<section>{_services_grid(business, with_benefits=True)}</section>
<section>
    <h2>Industries We Transform</h2>
    {_industries(business)}
</section>
<section>
    <h2>How We Work</h2>
    {_process(business)}
</section>
{_cta(business, primary_href="/faq", primary_label="Read the FAQ")}
"""
    structured_data = [
        project_structured_data(business, StructuredDataKind.ORGANIZATION, base_url=settings.base_url),
        project_structured_data(
            business,
            StructuredDataKind.BREADCRUMB_LIST,
            base_url=settings.base_url,
            breadcrumbs=[("Home", "/"), ("Services", "/services")],
        ),
    ]
    return _layout(services_meta(settings.site_name), body, settings, business, structured_data)


def render_faq(catalog: BusinessCatalog, settings: Settings) -> str:
    business = catalog.primary
    body = f"""
<header>
    <h1>Frequently Asked Questions</h1>
    <p class="lead">Everything you need to know about AI automation</p>
</header>
<section>{_faq_list(business)}</section>
<section>{render_nap_block(business)}</section>
"""
    structured_data = [
        project_structured_data(business, StructuredDataKind.FAQ_PAGE, base_url=settings.base_url),
    ]
    return _layout(faq_meta(settings.site_name), body, settings, business, structured_data)


def render_blog(catalog: BusinessCatalog, settings: Settings) -> str:
    business = catalog.primary
    posts = "".join(
        f"""
    <article class="card">
        <h2>{escape(post.title)}</h2>
        <p>{escape(post.excerpt)}</p>
        <a href="{escape(post.url)}" target="_blank" rel="noopener noreferrer">Read Full Article</a>
    </article>"""
        for post in business.blog_posts
    )
    body = f"""
<header>
    <h1>AI Automation Blog</h1>
    <p class="lead">Insights for service-based businesses</p>
</header>
<section class="grid">{posts}</section>
{_cta(business, primary_href="/services", primary_label="Get Your Free Assessment")}
"""
    structured_data = [
        project_structured_data(
            business,
            StructuredDataKind.BREADCRUMB_LIST,
            base_url=settings.base_url,
            breadcrumbs=[("Home", "/"), ("Blog", "/blog")],
        ),
    ]
    return _layout(blog_meta(settings.site_name), body, settings, business, structured_data)


def render_business(catalog: BusinessCatalog, slug: str, settings: Settings) -> str:
    """Profile page for one business. Raises BusinessNotFound for unknown slugs."""
    business = catalog.find_by_slug(slug)
    body = f"""
<nav><a href="/">&larr; Back to Home</a></nav>
<header style="text-align:center">
    <h1>{escape(business.name)}</h1>
    <p class="lead">{escape(business.category)}</p>
    <p>{escape(business.city)}, {escape(business.state)}</p>
</header>
<section class="grid">
    <div class="card">
        <h2>About Us</h2>
        <p>{escape(business.description)}</p>
        <h3>Brand Voice</h3><p>{escape(business.brand_voice)}</p>
        <h3>Our Approach</h3><p>{escape(business.brand_vibe)}</p>
    </div>
    {render_nap_block(business)}
</section>
<section>
    <h2>Frequently Asked Questions</h2>
    {_faq_list(business)}
</section>
{_cta(business)}
"""
    structured_data = [
        project_structured_data(business, StructuredDataKind.PROFESSIONAL_SERVICE, base_url=settings.base_url),
        project_structured_data(business, StructuredDataKind.BREADCRUMB_LIST, base_url=settings.base_url),
    ]
    return _layout(business_meta(business), body, settings, catalog.primary, structured_data)


def render_not_found(catalog: BusinessCatalog, slug: str, settings: Settings) -> str:
    body = f"""
<header style="text-align:center">
    <h1>Business Not Found</h1>
    <p class="lead">We couldn't find a business at <code>{escape(slug)}</code>.</p>
    <p><a class="cta" href="/">Back to Home</a></p>
</header>
"""
    return _layout(not_found_meta(slug), body, settings, catalog.primary)
