"""
Amendment list, timeline and stats.
"""
from datetime import datetime

from samvidhan.errors import ErrorCode
from samvidhan.services.amendment_service import build_stats, build_timeline, decade_of


def test_decade_of():
    assert decade_of(1951) == 1950
    assert decade_of(1960) == 1960
    assert decade_of(2019) == 2010


def test_stats_relative_to_today():
    items = [{"year": 2019}, {"year": 2021}, {"year": 2023}, {"year": 1976}]
    stats = build_stats(items, today=datetime(2026, 10, 17))
    assert stats["total"] == 4
    assert stats["byDecade"] == 3
    assert stats["thisDecade"] == 2
    assert stats["lastDecade"] == 1
    assert stats["latestYear"] == 2023
    assert stats["earliestYear"] == 1976


def test_stats_for_empty_list():
    stats = build_stats([])
    assert stats["total"] == 0
    assert stats["byDecade"] == 0
    assert stats["latestYear"] is None
    assert stats["earliestYear"] is None


def test_timeline_groups_by_decade():
    items = [{"year": 1978, "number": 44}, {"year": 1951, "number": 1}, {"year": 1976, "number": 42}]
    timeline = build_timeline(items)
    assert [entry["decade"] for entry in timeline] == [1950, 1970]
    assert timeline[1]["count"] == 2


class TestAmendmentsEndpoint:
    async def test_sorted_with_linked_articles(self, client):
        response = await client.get("/api/amendments")
        assert response.status_code == 200
        data = response.json()["data"]

        years = [a["year"] for a in data["amendments"]]
        assert years == sorted(years)

        first = data["amendments"][0]
        assert first["number"] == 1
        assert {a["number"] for a in first["articles"]} == {"15", "19"}

    async def test_stats_match_amendments(self, client):
        data = (await client.get("/api/amendments")).json()["data"]
        assert data["stats"]["total"] == len(data["amendments"])
        decades = {(a["year"] // 10) * 10 for a in data["amendments"]}
        assert data["stats"]["byDecade"] == len(decades)
        assert [t["decade"] for t in data["timeline"]] == sorted(decades)

    async def test_year_filter(self, client):
        data = (await client.get("/api/amendments", params={"year": "1976"})).json()["data"]
        assert [a["number"] for a in data["amendments"]] == [42]

    async def test_number_filter_without_match(self, client):
        data = (await client.get("/api/amendments", params={"number": "7"})).json()["data"]
        assert data["amendments"] == []
        assert data["stats"]["latestYear"] is None

    async def test_localized_titles(self, client):
        data = (await client.get("/api/amendments", params={"lang": "hi", "number": "1"})).json()["data"]
        assert data["amendments"][0]["title"] == "प्रथम संविधान संशोधन अधिनियम"

    async def test_non_integer_year_is_400(self, client):
        response = await client.get("/api/amendments", params={"year": "nineteen"})
        assert response.status_code == 400
        assert response.json()["success"] is False

    async def test_year_beyond_integer_column_is_400(self, client):
        response = await client.get("/api/amendments", params={"year": "99999999999999999999"})
        assert response.status_code == 400
        assert response.json()["code"] == ErrorCode.INVALID_FORMAT
