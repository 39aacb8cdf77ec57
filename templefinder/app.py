from __future__ import annotations

from fastapi import FastAPI, HTTPException

from .analytics.aggregator import compute_analytics
from .analytics.store import get_events
from .catalog.data_store import get_catalog
from .catalog.models import Temple
from .search.cache import get_cache_stats
from .search.filters import reset_filters
from .search.models import (
    SORT_LABELS,
    MetadataResponse,
    QueryState,
    SearchResponse,
    SortOption,
)
from .search.service import search_temples

app = FastAPI(title="Temple Discovery API", version="1.0.0")


# ── Public endpoints ─────────────────────────────────────────────────────


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metadata", response_model=MetadataResponse)
def metadata() -> MetadataResponse:
    catalog = get_catalog()
    return MetadataResponse(
        facets=catalog.facets,
        sort_options=[SortOption(value=v, label=label) for v, label in SORT_LABELS.items()],
        total_temples=len(catalog),
    )


# ── Search endpoints ─────────────────────────────────────────────────────


@app.post("/search", response_model=SearchResponse)
def search(body: QueryState) -> SearchResponse:
    return search_temples(body)


@app.post("/search/reset", response_model=QueryState)
def search_reset(body: QueryState) -> QueryState:
    return reset_filters(body)


@app.get("/temples", response_model=list[Temple])
def list_temples() -> list[Temple]:
    return list(get_catalog().temples)


@app.get("/temples/{temple_id}", response_model=Temple)
def get_temple(temple_id: str) -> Temple:
    temple = get_catalog().get(temple_id)
    if temple is None:
        raise HTTPException(status_code=404, detail=f"Unknown temple: {temple_id}")
    return temple


# ── Diagnostics ──────────────────────────────────────────────────────────


@app.get("/analytics")
def analytics() -> dict:
    return compute_analytics(get_events())


@app.get("/cache/stats")
def cache_stats() -> dict:
    return get_cache_stats()
