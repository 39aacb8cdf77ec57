from __future__ import annotations

import pytest

from templefinder.catalog.models import Temple


def make_temple(**overrides) -> Temple:
    fields = {
        "id": "sample",
        "name": "Sample Temple",
        "city": "Sample City",
        "country": "Nowhere",
        "description": "",
        "region": "Somewhere",
        "tradition": "Buddhist",
        "environment": "Urban",
        "founded": 1000,
        "significance_score": 50,
        "highlights": (),
        "features": (),
    }
    fields.update(overrides)
    return Temple(**fields)


@pytest.fixture
def angkor() -> Temple:
    return make_temple(
        id="angkor-wat",
        name="Angkor Wat",
        city="Siem Reap",
        country="Cambodia",
        tradition="Hindu-Buddhist",
        region="Southeast Asia",
        environment="Jungle",
        founded=1113,
        significance_score=95,
        features=("UNESCO Site", "Sunrise Views"),
        highlights=("Bas-reliefs",),
    )


@pytest.fixture
def borobudur() -> Temple:
    return make_temple(
        id="borobudur",
        name="Borobudur",
        city="Magelang",
        country="Indonesia",
        tradition="Buddhist",
        region="Southeast Asia",
        environment="Volcanic",
        founded=800,
        significance_score=90,
        features=("UNESCO Site",),
        highlights=("Stupas",),
    )


@pytest.fixture
def sample_catalog(angkor, borobudur) -> list[Temple]:
    return [angkor, borobudur]
