from conftest import make_temple

from templefinder.catalog.models import ALL_OPTION
from templefinder.search.indexer import build_facet_options


def test_empty_catalog_yields_only_all():
    facets = build_facet_options([])
    assert facets.regions == (ALL_OPTION,)
    assert facets.traditions == (ALL_OPTION,)
    assert facets.environments == (ALL_OPTION,)
    assert facets.features == (ALL_OPTION,)


def test_categorical_facets_keep_first_seen_order():
    temples = [
        make_temple(id="1", region="South Asia", tradition="Hindu", environment="Urban"),
        make_temple(id="2", region="East Asia", tradition="Buddhist", environment="Garden"),
        make_temple(id="3", region="South Asia", tradition="Sikh", environment="Urban"),
    ]
    facets = build_facet_options(temples)
    assert facets.regions == ("All", "South Asia", "East Asia")
    assert facets.traditions == ("All", "Hindu", "Buddhist", "Sikh")
    assert facets.environments == ("All", "Urban", "Garden")


def test_features_flattened_deduped_and_sorted():
    temples = [
        make_temple(id="1", features=("Sunrise Views", "UNESCO Site")),
        make_temple(id="2", features=("Gardens", "UNESCO Site")),
        make_temple(id="3", features=()),
    ]
    facets = build_facet_options(temples)
    assert facets.features == ("All", "Gardens", "Sunrise Views", "UNESCO Site")


def test_all_sentinel_leads_every_list(sample_catalog):
    facets = build_facet_options(sample_catalog)
    for options in (facets.regions, facets.traditions, facets.environments, facets.features):
        assert options[0] == ALL_OPTION
        assert options.count(ALL_OPTION) == 1
