from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class ScoringConfig:
    mismatch_penalty: float = 0.7
    name_bonus: float = 25.0
    city_bonus: float = 15.0
    feature_bonus: float = 10.0


@dataclass(frozen=True)
class SearchConfig:
    cache_ttl: int = int(os.getenv("SEARCH_CACHE_TTL") or 300)
    cache_enabled: bool = os.getenv("SEARCH_CACHE_ENABLED", "true").lower() not in ("0", "false", "no")
    max_entries: int = int(os.getenv("SEARCH_CACHE_MAX_ENTRIES") or 512)


DEFAULT_SCORING_CONFIG = ScoringConfig()
DEFAULT_SEARCH_CONFIG = SearchConfig()
