from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent / ".env")

_DEFAULT_CATALOG_PATH = Path(__file__).resolve().parent / "recipes" / "data" / "recipes.json"


def _optional_path(value: str | None) -> Path | None:
    return Path(value) if value else None


def _split_origins(value: str) -> tuple[str, ...]:
    return tuple(o.strip() for o in value.split(",") if o.strip())


@dataclass(frozen=True)
class AppConfig:
    title: str = "Recipe Finder API"
    version: str = "1.0.0"
    catalog_path: Path = Path(os.getenv("RECIPE_CATALOG_PATH", str(_DEFAULT_CATALOG_PATH)))
    request_log_path: Path | None = _optional_path(os.getenv("RECIPE_REQUEST_LOG"))
    cors_origins: tuple[str, ...] = _split_origins(os.getenv("CORS_ORIGINS", "*"))


DEFAULT_APP_CONFIG = AppConfig()
