from __future__ import annotations

from collections import Counter
from collections.abc import Sequence

from .models import Insights, ScoredTemple, round_half_up


def _most_common(counter: Counter[str]) -> str | None:
    # most_common() lists equal counts in first-encountered order
    top = counter.most_common(1)
    return top[0][0] if top else None


def aggregate(results: Sequence[ScoredTemple]) -> Insights:
    """
    Summarise the current result list.

    Ties for the dominant tradition and the standout feature go to the
    value met first while walking ``results`` in their given order.
    """
    temples = [r.temple for r in results]

    tradition_counter: Counter[str] = Counter(t.tradition for t in temples)
    feature_counter: Counter[str] = Counter(f for t in temples for f in t.features)

    average_founded = None
    if temples:
        average_founded = round_half_up(sum(t.founded for t in temples) / len(temples))

    return Insights(
        unique_countries=len({t.country for t in temples}),
        most_common_tradition=_most_common(tradition_counter),
        average_founded_year=average_founded,
        standout_feature=_most_common(feature_counter),
    )
