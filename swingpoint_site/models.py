"""BusinessRecord dataclasses: the shape of one entry in businesses.json."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


SOCIAL_PLATFORMS = (
    "facebook",
    "instagram",
    "linkedin",
    "twitter",
    "youtube",
)

REQUIRED_FIELDS = ("slug", "name", "address", "phone")


def _text(data: dict, key: str, default: str = "") -> str:
    value = data.get(key)
    return default if value is None else str(value)


def _optional(data: dict, key: str) -> str | None:
    """Return the value for key, or None when missing or blank."""
    value = data.get(key)
    if value is None:
        return None
    value = str(value)
    return value if value.strip() else None


def _strings(data: dict, key: str) -> tuple[str, ...]:
    return tuple(str(item) for item in _list(data, key))


def _object(data: dict, key: str) -> dict | None:
    """The nested object under key, or None when missing or empty."""
    value = data.get(key)
    if not value:
        return None
    if not isinstance(value, dict):
        raise ValueError(f"{key} must be an object, got {type(value).__name__}")
    return value


def _list(data: dict, key: str) -> list:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"{key} must be an array, got {type(value).__name__}")
    return value


def _objects(data: dict, key: str) -> list[dict]:
    items = _list(data, key)
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            raise ValueError(f"{key}[{i}] must be an object, got {type(item).__name__}")
    return items


@dataclass(frozen=True)
class Hours:
    weekdays: str
    weekends: str

    def display(self) -> str:
        return f"{self.weekdays}, Weekends: {self.weekends}"


@dataclass(frozen=True)
class GeoCoordinates:
    latitude: str  # kept as text so structured data repeats it verbatim
    longitude: str


@dataclass(frozen=True)
class Service:
    name: str
    description: str = ""
    benefits: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "Service":
        return cls(
            name=_text(data, "name"),
            description=_text(data, "description"),
            benefits=_strings(data, "benefits"),
        )


@dataclass(frozen=True)
class Industry:
    name: str
    description: str = ""
    challenge: str = ""
    solution: str = ""
    results: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict) -> "Industry":
        return cls(
            name=_text(data, "name"),
            description=_text(data, "description"),
            challenge=_text(data, "challenge"),
            solution=_text(data, "solution"),
            results=_strings(data, "results"),
        )


@dataclass(frozen=True)
class ProcessStep:
    icon: str
    title: str
    description: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "ProcessStep":
        return cls(
            icon=_text(data, "icon"),
            title=_text(data, "title"),
            description=_text(data, "description"),
        )


@dataclass(frozen=True)
class Faq:
    question: str
    answer: str


@dataclass(frozen=True)
class BlogPost:
    title: str
    excerpt: str
    url: str


@dataclass(frozen=True)
class Testimonial:
    rating: str  # e.g. "5.0"
    clients: str  # e.g. "50+ clients"


@dataclass(frozen=True)
class Statistics:
    average_savings: str
    call_capture_rate: str
    availability: str
    lead_conversion: str


@dataclass(frozen=True)
class Founder:
    name: str
    title: str
    bio: str = ""
    experience: str = ""
    specialty: str = ""


@dataclass(frozen=True)
class BusinessRecord:
    slug: str
    name: str
    category: str
    address: str
    city: str
    state: str
    zip: str
    phone: str
    website: str
    description: str = ""
    brand_voice: str = ""
    brand_vibe: str = ""
    email: str | None = None
    map_link: str | None = None
    hours: Hours | None = None
    opening_hours: str | None = None  # schema.org openingHours format, e.g. "Mo-Fr 09:00-16:00"
    area_served: str | None = None
    geo: GeoCoordinates | None = None
    service_radius_meters: int | None = None
    social: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    services: tuple[Service, ...] = ()
    industries: tuple[Industry, ...] = ()
    process: tuple[ProcessStep, ...] = ()
    faqs: tuple[Faq, ...] = ()
    blog_posts: tuple[BlogPost, ...] = ()
    testimonials: tuple[Testimonial, ...] = ()
    statistics: Statistics | None = None
    founder: Founder | None = None

    @property
    def full_address(self) -> str:
        return f"{self.address}, {self.city}, {self.state} {self.zip}"

    @property
    def social_links(self) -> list[str]:
        """Profile URLs in platform order, skipping platforms with no link."""
        return [self.social[p] for p in SOCIAL_PLATFORMS if self.social.get(p)]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BusinessRecord":
        """Build a record from one entry of the ``businesses`` array.

        Raises ValueError when a required field is missing or blank, or
        when a nested value has the wrong shape (e.g. a string for hours).
        Blank optional strings are treated as absent.
        """
        missing = [key for key in REQUIRED_FIELDS if not _optional(data, key)]
        if missing:
            raise ValueError(f"missing required field(s): {', '.join(missing)}")

        hours = None
        h = _object(data, "hours")
        if h:
            hours = Hours(weekdays=_text(h, "weekdays"), weekends=_text(h, "weekends"))

        # both coordinates or no geo at all
        geo = None
        g = _object(data, "geo")
        if g:
            latitude, longitude = _optional(g, "latitude"), _optional(g, "longitude")
            if latitude and longitude:
                geo = GeoCoordinates(latitude=latitude, longitude=longitude)

        statistics = None
        stats = _object(data, "statistics")
        if stats:
            statistics = Statistics(
                average_savings=_text(stats, "averageSavings"),
                call_capture_rate=_text(stats, "callCaptureRate"),
                availability=_text(stats, "availability"),
                lead_conversion=_text(stats, "leadConversion"),
            )

        founder = None
        f = _object(data, "founder")
        if f:
            founder = Founder(
                name=_text(f, "name"),
                title=_text(f, "title"),
                bio=_text(f, "bio"),
                experience=_text(f, "experience"),
                specialty=_text(f, "specialty"),
            )

        social = {}
        for platform, url in (_object(data, "social") or {}).items():
            if url is None:
                continue
            if not isinstance(url, str):
                raise ValueError(f"social.{platform} must be a string, got {type(url).__name__}")
            if url.strip():
                social[platform] = url

        radius = data.get("serviceRadiusMeters")

        return cls(
            slug=str(data["slug"]),
            name=str(data["name"]),
            category=_text(data, "category"),
            address=str(data["address"]),
            city=_text(data, "city"),
            state=_text(data, "state"),
            zip=_text(data, "zip"),
            phone=str(data["phone"]),
            website=_text(data, "website"),
            description=_text(data, "description"),
            brand_voice=_text(data, "brandVoice"),
            brand_vibe=_text(data, "brandVibe"),
            email=_optional(data, "email"),
            map_link=_optional(data, "mapLink"),
            hours=hours,
            opening_hours=_optional(data, "openingHours"),
            area_served=_optional(data, "areaServed"),
            geo=geo,
            service_radius_meters=int(radius) if radius is not None else None,
            social=MappingProxyType(social),
            services=tuple(Service.from_dict(s) for s in _objects(data, "services")),
            industries=tuple(Industry.from_dict(i) for i in _objects(data, "industries")),
            process=tuple(ProcessStep.from_dict(p) for p in _objects(data, "process")),
            faqs=tuple(
                Faq(question=_text(f, "question"), answer=_text(f, "answer"))
                for f in _objects(data, "faqs")
            ),
            blog_posts=tuple(
                BlogPost(title=_text(p, "title"), excerpt=_text(p, "excerpt"), url=_text(p, "url"))
                for p in _objects(data, "blogPosts")
            ),
            testimonials=tuple(
                Testimonial(rating=_text(t, "rating"), clients=_text(t, "clients"))
                for t in _objects(data, "testimonials")
            ),
            statistics=statistics,
            founder=founder,
        )
