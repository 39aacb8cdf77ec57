from __future__ import annotations

import logging
import time

from ..analytics.store import record_event
from ..catalog.data_store import get_catalog
from ..catalog.models import Catalog
from .cache import cache_get, cache_set, query_key
from .engine import run_query
from .filters import active_filters
from .insights import aggregate
from .models import QueryState, SearchResponse
from .scoring import normalize_query

logger = logging.getLogger(__name__)


def _summary(count: int) -> str:
    if count == 1:
        return "1 temple matches your journey"
    return f"{count} temples match your journey"


def _record_search(state: QueryState, response: SearchResponse, start_time: float, cache_hit: bool) -> None:
    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    record_event("search", {
        "search_term": normalize_query(state.search_term),
        "region": state.region,
        "tradition": state.tradition,
        "environment": state.environment,
        "feature": state.feature,
        "sort_order": state.sort_order.value,
        "results_count": response.total,
        "response_time_ms": elapsed_ms,
        "cache_hit": cache_hit,
    })


def search_temples(state: QueryState, catalog: Catalog | None = None) -> SearchResponse:
    """
    Serve one search: ranked results plus insights for the query state.

    Responses are memoized per query state and catalog, and every call is
    recorded as a ``search`` analytics event.
    """
    start_time = time.time()
    catalog = catalog if catalog is not None else get_catalog()

    key = query_key(state, catalog_token=catalog.fingerprint())
    cached = cache_get(key)
    if cached is not None:
        logger.debug("Query cache hit for %s", key)
        _record_search(state, cached, start_time, cache_hit=True)
        # callers get their own copy so the cached entry stays intact
        return cached.model_copy(deep=True)

    results = run_query(catalog, state)
    if not results:
        logger.info("No temples matched query state %s", state.model_dump(mode="json"))

    response = SearchResponse(
        results=results,
        total=len(results),
        insights=aggregate(results),
        active_filters=active_filters(state),
        summary=_summary(len(results)),
    )

    cache_set(key, response.model_copy(deep=True))
    _record_search(state, response, start_time, cache_hit=False)
    return response
