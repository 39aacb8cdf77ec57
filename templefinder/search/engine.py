from __future__ import annotations

from collections.abc import Iterable

from ..catalog.models import Catalog, Temple
from .filters import matches_filters
from .models import QueryState, ScoredTemple, SortOrder
from .scoring import normalize_query, score_temple


def _sort(results: list[ScoredTemple], order: SortOrder) -> list[ScoredTemple]:
    # sorted() is stable, so equal keys keep catalog order
    if order == SortOrder.oldest:
        return sorted(results, key=lambda r: r.temple.founded)
    if order == SortOrder.newest:
        return sorted(results, key=lambda r: -r.temple.founded)
    if order == SortOrder.significance:
        return sorted(results, key=lambda r: -r.temple.significance_score)
    return sorted(results, key=lambda r: -r.score)


def run_query(
    catalog: Catalog | Iterable[Temple], state: QueryState
) -> list[ScoredTemple]:
    """
    Score, filter and order the catalog for one query state.

    Every temple is scored against the normalized search term, temples
    failing a facet selection are dropped, and the rest are sorted by the
    requested order. The full result set is returned.
    """
    temples = catalog.temples if isinstance(catalog, Catalog) else catalog
    normalized = normalize_query(state.search_term)

    scored = [
        ScoredTemple(temple=temple, score=score_temple(temple, normalized))
        for temple in temples
    ]
    retained = [r for r in scored if matches_filters(r.temple, state)]

    return _sort(retained, state.sort_order)
