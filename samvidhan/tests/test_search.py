"""
Search endpoint.
"""
import pytest

from samvidhan.errors import ErrorCode


@pytest.mark.parametrize("search_type", ["all", "articles", "amendments", "emergency", "bogus"])
@pytest.mark.parametrize("q", ["", "   "])
async def test_blank_query_is_rejected_for_every_type(client, q, search_type):
    response = await client.get("/api/search", params={"q": q, "type": search_type})
    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Search query is required"
    assert body["code"] == ErrorCode.MISSING_FIELD


async def test_missing_query_is_rejected(client):
    response = await client.get("/api/search")
    assert response.status_code == 400


async def test_articles_come_first_by_importance(client):
    data = (await client.get("/api/search", params={"q": "right"})).json()["data"]
    assert data["query"] == "right"
    assert data["count"] == len(data["results"])

    types = [r["type"] for r in data["results"]]
    assert types[0] == "article"
    first_other = next((i for i, t in enumerate(types) if t != "article"), len(types))
    assert all(t != "article" for t in types[first_other:])

    importance = [r["importance"] for r in data["results"] if r["type"] == "article"]
    assert importance == sorted(importance, reverse=True)


async def test_match_is_case_insensitive(client):
    lower = (await client.get("/api/search", params={"q": "equality", "type": "articles"})).json()["data"]
    upper = (await client.get("/api/search", params={"q": "EQUALITY", "type": "articles"})).json()["data"]
    assert lower["count"] == upper["count"] > 0


async def test_amendment_search_by_act_name(client):
    data = (await client.get("/api/search", params={"q": "Forty-second", "type": "amendments"})).json()["data"]
    assert [r["number"] for r in data["results"]] == [42]
    assert all(r["type"] == "amendment" for r in data["results"])


async def test_emergency_search_matches_category(client):
    data = (await client.get("/api/search", params={"q": "detention", "type": "emergency"})).json()["data"]
    assert data["count"] >= 1
    assert data["results"][0]["category"] == "detention"


async def test_search_matches_hindi_content(client):
    data = (await client.get("/api/search", params={"q": "समानता", "type": "articles", "lang": "hi"})).json()["data"]
    assert "14" in {r["number"] for r in data["results"]}


async def test_unknown_type_returns_nothing(client):
    data = (await client.get("/api/search", params={"q": "right", "type": "cases"})).json()["data"]
    assert data == {"query": "right", "count": 0, "results": []}
