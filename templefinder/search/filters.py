from __future__ import annotations

from ..catalog.models import ALL_OPTION, Temple
from .models import ActiveFilter, QueryState

_FILTER_LABELS: list[tuple[str, str]] = [
    ("region", "Region"),
    ("tradition", "Tradition"),
    ("environment", "Environment"),
    ("feature", "Highlight"),
]


def matches_filters(temple: Temple, state: QueryState) -> bool:
    """True when the temple satisfies every facet selection that isn't "All"."""
    region_match = state.region == ALL_OPTION or temple.region == state.region
    tradition_match = state.tradition == ALL_OPTION or temple.tradition == state.tradition
    environment_match = (
        state.environment == ALL_OPTION or temple.environment == state.environment
    )
    feature_match = state.feature == ALL_OPTION or state.feature in temple.features

    return region_match and tradition_match and environment_match and feature_match


def active_filters(state: QueryState) -> list[ActiveFilter]:
    filters: list[ActiveFilter] = []
    for field, label in _FILTER_LABELS:
        value = getattr(state, field)
        if value != ALL_OPTION:
            filters.append(ActiveFilter(label=label, value=value))
    return filters


def reset_filters(state: QueryState) -> QueryState:
    """Clear every facet selection. Search term and sort order are kept."""
    return state.model_copy(update={field: ALL_OPTION for field, _ in _FILTER_LABELS})
