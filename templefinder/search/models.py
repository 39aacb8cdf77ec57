from __future__ import annotations

import math
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, computed_field

from ..catalog.models import ALL_OPTION, FacetOptions, Temple


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


class SortOrder(str, Enum):
    relevance = "relevance"
    oldest = "oldest"
    newest = "newest"
    significance = "significance"


SORT_LABELS: dict[SortOrder, str] = {
    SortOrder.relevance: "Relevance",
    SortOrder.significance: "Significance",
    SortOrder.oldest: "Oldest first",
    SortOrder.newest: "Newest first",
}


class QueryState(BaseModel):
    search_term: str = Field(default="", max_length=200)
    region: str = ALL_OPTION
    tradition: str = ALL_OPTION
    environment: str = ALL_OPTION
    feature: str = ALL_OPTION
    sort_order: SortOrder = SortOrder.relevance


class ScoredTemple(BaseModel):
    model_config = ConfigDict(frozen=True)

    temple: Temple
    score: float

    @computed_field
    @property
    def display_score(self) -> int:
        return round_half_up(self.score)


class Insights(BaseModel):
    """Aggregates over the current results. ``None`` means unavailable."""

    unique_countries: int = 0
    most_common_tradition: str | None = None
    average_founded_year: int | None = None
    standout_feature: str | None = None


class ActiveFilter(BaseModel):
    label: str
    value: str


class SearchResponse(BaseModel):
    results: list[ScoredTemple]
    total: int
    insights: Insights
    active_filters: list[ActiveFilter] = Field(default_factory=list)
    summary: str


class SortOption(BaseModel):
    value: SortOrder
    label: str


class MetadataResponse(BaseModel):
    facets: FacetOptions
    sort_options: list[SortOption]
    total_temples: int
