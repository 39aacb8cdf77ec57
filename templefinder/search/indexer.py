from __future__ import annotations

from collections.abc import Iterable

from ..catalog.models import ALL_OPTION, FacetOptions, Temple


def _distinct(values: Iterable[str]) -> tuple[str, ...]:
    # dict keys keep first-seen order
    return tuple(dict.fromkeys(values))


def build_facet_options(temples: Iterable[Temple]) -> FacetOptions:
    """
    Derive the filter options for every facet from the full catalog.

    Region, tradition and environment keep first-seen catalog order; features
    are flattened across all temples and sorted alphabetically. Every list is
    led by the "All" sentinel, so an empty catalog yields ``("All",)`` each.
    """
    temples = list(temples)
    features = sorted({f for t in temples for f in t.features})
    return FacetOptions(
        regions=(ALL_OPTION, *_distinct(t.region for t in temples)),
        traditions=(ALL_OPTION, *_distinct(t.tradition for t in temples)),
        environments=(ALL_OPTION, *_distinct(t.environment for t in temples)),
        features=(ALL_OPTION, *features),
    )
