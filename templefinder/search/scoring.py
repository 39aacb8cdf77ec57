from __future__ import annotations

from ..catalog.models import Temple
from .config import DEFAULT_SCORING_CONFIG, ScoringConfig


def normalize_query(search_term: str | None) -> str:
    return (search_term or "").strip().lower()


def build_search_text(temple: Temple) -> str:
    """Case-folded text the free-text query is matched against."""
    parts = [
        temple.name,
        temple.city,
        temple.country,
        temple.description,
        " ".join(temple.highlights),
        " ".join(temple.features),
    ]
    return " ".join(parts).lower()


def score_temple(
    temple: Temple,
    normalized_query: str,
    config: ScoringConfig = DEFAULT_SCORING_CONFIG,
) -> float:
    """
    Compute the relevance score of a temple for an already-normalized query.

    An empty query returns the curated significance score. A query missing
    from the searchable text is penalised but the temple stays in the
    results. A match adds independent bonuses for the name, the city and
    any single feature.
    """
    base = temple.significance_score
    if not normalized_query:
        return base

    if normalized_query not in build_search_text(temple):
        return base * config.mismatch_penalty

    score = base
    if normalized_query in temple.name.lower():
        score += config.name_bonus
    if normalized_query in temple.city.lower():
        score += config.city_bonus
    if any(normalized_query in f.lower() for f in temple.features):
        score += config.feature_bonus
    return score
