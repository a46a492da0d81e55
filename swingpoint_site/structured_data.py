"""schema.org JSON-LD documents projected from a BusinessRecord.

Every document is built here and nowhere else. Projections are pure: the
same record and arguments always give the same dict, and no field is
sourced from the clock.

Optional record fields (email, hours, map link, geo, area served, each
social link) are left out of the document when the record has no value
for them. A key is never emitted with None or "".
"""

import json
from enum import Enum
from typing import Any, Iterable

from .config import DEFAULT_BASE_URL
from .models import BusinessRecord

SCHEMA_CONTEXT = "https://schema.org"
ADDRESS_COUNTRY = "US"


class StructuredDataKind(str, Enum):
    PROFESSIONAL_SERVICE = "ProfessionalService"
    ORGANIZATION = "Organization"
    WEBSITE = "WebSite"
    FAQ_PAGE = "FAQPage"
    LOCAL_BUSINESS = "LocalBusiness"
    BREADCRUMB_LIST = "BreadcrumbList"


def _compact(**fields: Any) -> dict[str, Any]:
    """Keep fields whose value is present; drops None, "" and empty lists."""
    return {key: value for key, value in fields.items() if value not in (None, "", [], {})}


def _postal_address(record: BusinessRecord) -> dict:
    return {
        "@type": "PostalAddress",
        "streetAddress": record.address,
        "addressLocality": record.city,
        "addressRegion": record.state,
        "postalCode": record.zip,
        "addressCountry": ADDRESS_COUNTRY,
    }


def _geo(record: BusinessRecord) -> dict | None:
    if record.geo is None:
        return None
    return {
        "@type": "GeoCoordinates",
        "latitude": record.geo.latitude,
        "longitude": record.geo.longitude,
    }


def _service_area(record: BusinessRecord) -> dict | None:
    if record.geo is None or record.service_radius_meters is None:
        return None
    return {
        "@type": "GeoCircle",
        "geoMidpoint": _geo(record),
        "geoRadius": str(record.service_radius_meters),
    }


def _offer_catalog(record: BusinessRecord) -> dict | None:
    if not record.services:
        return None
    return {
        "@type": "OfferCatalog",
        "name": f"{record.name} Services",
        "itemListElement": [
            {
                "@type": "Offer",
                "itemOffered": _compact(
                    **{"@type": "Service", "name": service.name, "description": service.description}
                ),
            }
            for service in record.services
        ],
    }


def _business(record: BusinessRecord, schema_type: str) -> dict:
    return _compact(
        **{
            "@context": SCHEMA_CONTEXT,
            "@type": schema_type,
            "name": record.name,
            "description": record.description,
            "url": record.website,
            "telephone": record.phone,
            "email": record.email,
            "address": _postal_address(record),
            "geo": _geo(record),
            "openingHours": record.opening_hours,
            "hasMap": record.map_link,
            "areaServed": record.area_served,
            "serviceArea": _service_area(record),
            "sameAs": record.social_links,
            "hasOfferCatalog": _offer_catalog(record),
        }
    )


def _organization(record: BusinessRecord) -> dict:
    founder = None
    if record.founder is not None:
        founder = _compact(
            **{"@type": "Person", "name": record.founder.name, "jobTitle": record.founder.title}
        )
    return _compact(
        **{
            "@context": SCHEMA_CONTEXT,
            "@type": "Organization",
            "name": record.name,
            "url": record.website,
            "description": record.description,
            "telephone": record.phone,
            "email": record.email,
            "address": _postal_address(record),
            "sameAs": record.social_links,
            "founder": founder,
            "contactPoint": _compact(
                **{
                    "@type": "ContactPoint",
                    "telephone": record.phone,
                    "contactType": "customer service",
                    "email": record.email,
                    "areaServed": record.area_served,
                }
            ),
        }
    )


def _website(record: BusinessRecord, base_url: str, site_name: str | None) -> dict:
    return _compact(
        **{
            "@context": SCHEMA_CONTEXT,
            "@type": "WebSite",
            "name": site_name or record.name,
            "url": base_url,
            "description": record.description,
            "publisher": {"@type": "Organization", "name": record.name},
        }
    )


def _faq_page(record: BusinessRecord) -> dict:
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "FAQPage",
        "mainEntity": [
            {
                "@type": "Question",
                "name": faq.question,
                "acceptedAnswer": {"@type": "Answer", "text": faq.answer},
            }
            for faq in record.faqs
        ],
    }


def _default_breadcrumbs(record: BusinessRecord) -> list[tuple[str, str]]:
    return [("Home", "/"), (record.name, f"/business/{record.slug}")]


def _breadcrumb_list(
    record: BusinessRecord,
    base_url: str,
    breadcrumbs: Iterable[tuple[str, str]] | None,
) -> dict:
    trail = list(breadcrumbs) if breadcrumbs is not None else _default_breadcrumbs(record)
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "BreadcrumbList",
        "itemListElement": [
            {
                "@type": "ListItem",
                "position": position,
                "name": name,
                "item": f"{base_url}{path}",
            }
            for position, (name, path) in enumerate(trail, start=1)
        ],
    }


def project_structured_data(
    record: BusinessRecord,
    kind: StructuredDataKind | str,
    *,
    base_url: str = DEFAULT_BASE_URL,
    site_name: str | None = None,
    breadcrumbs: Iterable[tuple[str, str]] | None = None,
) -> dict:
    """
    Project a record into one schema.org document.

    Args:
        record: Source business
        kind: One of StructuredDataKind (or its string value)
        base_url: Site root, used by WebSite and BreadcrumbList
        site_name: WebSite name (defaults to the business name)
        breadcrumbs: (name, path) pairs for BreadcrumbList, root first

    Returns:
        JSON-serializable dict

    Raises:
        ValueError: unknown kind
    """
    kind = StructuredDataKind(kind)
    base_url = base_url.rstrip("/")

    if kind in (StructuredDataKind.PROFESSIONAL_SERVICE, StructuredDataKind.LOCAL_BUSINESS):
        return _business(record, kind.value)
    if kind is StructuredDataKind.ORGANIZATION:
        return _organization(record)
    if kind is StructuredDataKind.WEBSITE:
        return _website(record, base_url, site_name)
    if kind is StructuredDataKind.FAQ_PAGE:
        return _faq_page(record)
    return _breadcrumb_list(record, base_url, breadcrumbs)


def to_json_ld(document: dict) -> str:
    """Serialize for a <script type="application/ld+json"> element."""
    return json.dumps(document, ensure_ascii=False, indent=2).replace("</", "<\\/")
