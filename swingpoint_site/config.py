"""Environment-driven settings."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "data" / "businesses.json"
DEFAULT_BASE_URL = "https://swingpointmedia.com"
DEFAULT_SITE_NAME = "SwingPointMedia"


@dataclass(frozen=True)
class Settings:
    base_url: str = DEFAULT_BASE_URL
    site_name: str = DEFAULT_SITE_NAME
    catalog_path: Path = DEFAULT_CATALOG_PATH
    log_level: str = "INFO"


def get_settings() -> Settings:
    """Read settings from the environment (and .env, if present)."""
    load_dotenv()

    catalog_path = os.getenv("CATALOG_PATH")
    return Settings(
        base_url=os.getenv("SITE_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        site_name=os.getenv("SITE_NAME", DEFAULT_SITE_NAME),
        catalog_path=Path(catalog_path) if catalog_path else DEFAULT_CATALOG_PATH,
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
