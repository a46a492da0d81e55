"""Business catalog: loaded once from businesses.json, read-only afterwards.

The catalog is the single source for every page, structured-data document
and sitemap entry. Pages hold slugs, never copies of records.
"""

import json
import logging
from pathlib import Path

from .config import DEFAULT_CATALOG_PATH
from .models import BusinessRecord

logger = logging.getLogger(__name__)


class CatalogError(Exception):
    """Base class for catalog failures."""


class CatalogLoadError(CatalogError):
    """The data file is missing, unreadable or malformed."""


class BusinessNotFound(CatalogError, KeyError):
    """No record has the requested slug."""

    def __init__(self, slug: str):
        super().__init__(slug)
        self.slug = slug

    def __str__(self) -> str:
        return f"No business with slug {self.slug!r}"


class BusinessCatalog:
    """Immutable, ordered collection of BusinessRecords keyed by slug."""

    def __init__(self, records: list[BusinessRecord] | tuple[BusinessRecord, ...]):
        by_slug: dict[str, BusinessRecord] = {}
        for record in records:
            if record.slug in by_slug:
                raise CatalogLoadError(f"Duplicate slug in catalog: {record.slug!r}")
            by_slug[record.slug] = record
        self._records = tuple(records)
        self._by_slug = by_slug

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(self._records)

    @property
    def records(self) -> tuple[BusinessRecord, ...]:
        return self._records

    @property
    def primary(self) -> BusinessRecord:
        """The first record; the agency itself in the shipped data."""
        return self._records[0]

    def find_by_slug(self, slug: str) -> BusinessRecord:
        """Exact, case-sensitive lookup. Raises BusinessNotFound."""
        try:
            return self._by_slug[slug]
        except KeyError:
            raise BusinessNotFound(slug) from None

    def list_slugs(self) -> tuple[str, ...]:
        return tuple(record.slug for record in self._records)

    @classmethod
    def from_data(cls, data: dict) -> "BusinessCatalog":
        """Build a catalog from the parsed ``{"businesses": [...]}`` document."""
        if not isinstance(data, dict) or not isinstance(data.get("businesses"), list):
            raise CatalogLoadError('Catalog must be an object with a "businesses" array')

        records = []
        for i, entry in enumerate(data["businesses"]):
            if not isinstance(entry, dict):
                raise CatalogLoadError(f"businesses[{i}] is not an object")
            try:
                records.append(BusinessRecord.from_dict(entry))
            except (ValueError, TypeError, KeyError, AttributeError) as e:
                raise CatalogLoadError(f"businesses[{i}]: {e}") from e

        if not records:
            raise CatalogLoadError("Catalog contains no businesses")
        return cls(records)


def load_catalog(path: Path | str) -> BusinessCatalog:
    """
    Read and validate a catalog file.

    Args:
        path: JSON file shaped as {"businesses": [BusinessRecord, ...]}

    Returns:
        BusinessCatalog in file order

    Raises:
        CatalogLoadError: file missing, not JSON, or any record invalid
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise CatalogLoadError(f"Catalog file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise CatalogLoadError(f"Catalog file is not valid JSON: {path}: {e}") from e

    catalog = BusinessCatalog.from_data(data)
    logger.info("Loaded %d business(es) from %s", len(catalog), path)
    return catalog


def load_default_catalog() -> BusinessCatalog:
    """Load the businesses.json that ships inside the package."""
    return load_catalog(DEFAULT_CATALOG_PATH)
