"""
Service configuration, read from the environment (and a local .env file).
"""

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from dotenv import load_dotenv

from .logic.constants import MAX_RESULTS_PER_TIER

load_dotenv()


@dataclass(frozen=True)
class Settings:
    catalog_path: Optional[str]
    log_level: str
    max_per_tier: int
    cors_origins: Tuple[str, ...]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    cors = os.getenv("ADMISSIONS_CORS_ORIGINS", "*")
    return Settings(
        catalog_path=os.getenv("ADMISSIONS_CATALOG_PATH") or None,
        log_level=os.getenv("ADMISSIONS_LOG_LEVEL", "INFO").upper(),
        max_per_tier=int(os.getenv("ADMISSIONS_MAX_PER_TIER", str(MAX_RESULTS_PER_TIER))),
        cors_origins=tuple(o.strip() for o in cors.split(",") if o.strip()),
    )
