from fastapi.testclient import TestClient

from templefinder.app import app

client = TestClient(app)


def test_health():
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_metadata_lists_facets_and_sort_options():
    resp = client.get("/metadata")
    assert resp.status_code == 200
    body = resp.json()
    assert body["total_temples"] > 0
    for key in ("regions", "traditions", "environments", "features"):
        assert body["facets"][key][0] == "All"
    assert body["facets"]["features"][1:] == sorted(body["facets"]["features"][1:])
    assert [o["value"] for o in body["sort_options"]] == [
        "relevance",
        "significance",
        "oldest",
        "newest",
    ]


def test_search_defaults_return_whole_catalog():
    total = client.get("/metadata").json()["total_temples"]
    resp = client.post("/search", json={})
    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == total
    assert len(body["results"]) == total
    assert body["active_filters"] == []
    scores = [r["score"] for r in body["results"]]
    assert scores == sorted(scores, reverse=True)


def test_search_ranks_name_match_first():
    resp = client.post("/search", json={"search_term": "angkor"})
    body = resp.json()
    top = body["results"][0]
    assert top["temple"]["id"] == "angkor-wat"
    assert top["score"] == top["temple"]["significance_score"] + 25
    assert top["display_score"] == round(top["score"])


def test_search_filters_by_region():
    resp = client.post("/search", json={"region": "East Asia"})
    body = resp.json()
    assert body["total"] > 0
    for item in body["results"]:
        assert item["temple"]["region"] == "East Asia"
    assert body["active_filters"] == [{"label": "Region", "value": "East Asia"}]


def test_search_filters_by_feature():
    resp = client.post("/search", json={"feature": "UNESCO Site"})
    for item in resp.json()["results"]:
        assert "UNESCO Site" in item["temple"]["features"]


def test_search_sort_oldest():
    resp = client.post("/search", json={"sort_order": "oldest"})
    years = [r["temple"]["founded"] for r in resp.json()["results"]]
    assert years == sorted(years)


def test_search_no_matches_degrades_to_sentinels():
    resp = client.post("/search", json={"region": "Atlantis"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["results"] == []
    assert body["summary"] == "0 temples match your journey"
    assert body["insights"] == {
        "unique_countries": 0,
        "most_common_tradition": None,
        "average_founded_year": None,
        "standout_feature": None,
    }


def test_search_summary_singular():
    resp = client.post("/search", json={"tradition": "Sikh"})
    body = resp.json()
    assert body["total"] == 1
    assert body["summary"] == "1 temple matches your journey"


def test_search_rejects_unknown_sort_order():
    resp = client.post("/search", json={"sort_order": "alphabetical"})
    assert resp.status_code == 422


def test_search_rejects_overlong_search_term():
    resp = client.post("/search", json={"search_term": "a" * 201})
    assert resp.status_code == 422


def test_search_accepts_search_term_at_limit():
    resp = client.post("/search", json={"search_term": "a" * 200})
    assert resp.status_code == 200


def test_search_reset_clears_filters_only():
    resp = client.post("/search/reset", json={
        "search_term": "kyoto",
        "region": "East Asia",
        "feature": "Gardens",
        "sort_order": "newest",
    })
    assert resp.status_code == 200
    assert resp.json() == {
        "search_term": "kyoto",
        "region": "All",
        "tradition": "All",
        "environment": "All",
        "feature": "All",
        "sort_order": "newest",
    }


def test_list_temples_in_catalog_order():
    resp = client.get("/temples")
    assert resp.status_code == 200
    assert resp.json()[0]["id"] == "angkor-wat"


def test_get_temple():
    resp = client.get("/temples/borobudur")
    assert resp.status_code == 200
    assert resp.json()["city"] == "Magelang"


def test_get_unknown_temple_returns_404():
    resp = client.get("/temples/nonexistent")
    assert resp.status_code == 404
