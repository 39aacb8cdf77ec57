from __future__ import annotations

import hashlib
import time

from .config import DEFAULT_SEARCH_CONFIG, SearchConfig
from .models import QueryState, SearchResponse

# key -> (stored_at, response)
_entries: dict[str, tuple[float, SearchResponse]] = {}
_stats: dict[str, int] = {"hits": 0, "misses": 0, "expired": 0, "evicted": 0}


def query_key(state: QueryState, catalog_token: str = "") -> str:
    """Stable key for a query state against one loaded catalog."""
    payload = catalog_token + "|" + state.model_dump_json()
    return hashlib.sha256(payload.encode()).hexdigest()[:16]


def cache_get(
    key: str, config: SearchConfig = DEFAULT_SEARCH_CONFIG
) -> SearchResponse | None:
    if not config.cache_enabled:
        return None

    entry = _entries.get(key)
    if entry is None:
        _stats["misses"] += 1
        return None

    stored_at, response = entry
    if time.time() - stored_at >= config.cache_ttl:
        del _entries[key]
        _stats["expired"] += 1
        _stats["misses"] += 1
        return None

    _stats["hits"] += 1
    return response


def cache_set(
    key: str, response: SearchResponse, config: SearchConfig = DEFAULT_SEARCH_CONFIG
) -> None:
    if not config.cache_enabled:
        return

    # re-inserting moves the key to the newest end
    _entries.pop(key, None)
    _entries[key] = (time.time(), response)
    while len(_entries) > config.max_entries:
        del _entries[next(iter(_entries))]
        _stats["evicted"] += 1


def get_cache_stats() -> dict:
    lookups = _stats["hits"] + _stats["misses"]
    return {
        "size": len(_entries),
        **_stats,
        "hit_rate": round(_stats["hits"] / lookups * 100, 1) if lookups else 0.0,
    }


def clear_cache() -> None:
    _entries.clear()
    for name in _stats:
        _stats[name] = 0
