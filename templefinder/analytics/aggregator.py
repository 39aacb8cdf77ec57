from __future__ import annotations

from collections import Counter
from typing import Any

from ..catalog.models import ALL_OPTION

FACETS = ("region", "tradition", "environment", "feature")


def _percent(part: int, whole: int) -> float:
    return round(part / whole * 100, 1) if whole else 0.0


def _top(counter: Counter[str], n: int = 10) -> list[dict[str, Any]]:
    return [{"name": name, "count": count} for name, count in counter.most_common(n)]


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    searches = [e for e in events if e["type"] == "search"]
    total = len(searches)

    times = [s["response_time_ms"] for s in searches if "response_time_ms" in s]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    term_counter: Counter[str] = Counter(
        s["search_term"] for s in searches if s.get("search_term")
    )

    # Selected values per facet, "All" excluded
    facet_counters: dict[str, Counter[str]] = {f: Counter() for f in FACETS}
    for s in searches:
        for facet in FACETS:
            value = s.get(facet, ALL_OPTION)
            if value != ALL_OPTION:
                facet_counters[facet][value] += 1

    sort_usage = dict(Counter(s.get("sort_order", "relevance") for s in searches))

    filter_usage = {
        facet: _percent(sum(facet_counters[facet].values()), total) for facet in FACETS
    }
    filter_usage["free_text"] = _percent(sum(term_counter.values()), total)

    zero_results = sum(1 for s in searches if s.get("results_count", 0) == 0)
    cache_hits = sum(1 for s in searches if s.get("cache_hit"))

    return {
        "total_searches": total,
        "avg_response_time_ms": avg_time,
        "top_search_terms": _top(term_counter),
        "top_selections": {facet: _top(facet_counters[facet]) for facet in FACETS},
        "sort_usage": sort_usage,
        "filter_usage": filter_usage,
        "zero_result_rate": _percent(zero_results, total),
        "cache_stats": {
            "hits": cache_hits,
            "misses": total - cache_hits,
            "hit_rate": _percent(cache_hits, total),
        },
    }
