"""
Rights dashboard grouping in both comparison modes.
"""
import pytest
from sqlalchemy import select

from samvidhan.config.settings import ArticleRangeMode
from samvidhan.orm.article import Article, ArticleCategory
from samvidhan.orm.part import Part
from samvidhan.services.rights_service import groups_for_number, leading_number

LEX = ArticleRangeMode.LEXICOGRAPHIC
NUM = ArticleRangeMode.NUMERIC


@pytest.mark.parametrize("mode", [LEX, NUM])
def test_article_14_is_always_equality(mode):
    assert groups_for_number("14", mode) == ["right_to_equality"]


def test_article_2_lexicographic_lands_in_freedom():
    # "19" <= "2" <= "22" as strings
    assert groups_for_number("2", LEX) == ["right_to_freedom"]


def test_article_2_numeric_is_ungrouped():
    assert groups_for_number("2", NUM) == []


def test_suffixed_numbers():
    assert groups_for_number("21A", LEX) == ["right_to_freedom"]
    assert groups_for_number("21A", NUM) == ["right_to_freedom"]
    assert groups_for_number("35A", LEX) == []
    assert groups_for_number("35A", NUM) == ["constitutional_remedies"]


def test_cultural_rights_match_exact_numbers_lexicographically():
    assert groups_for_number("29", LEX) == ["cultural_educational_rights"]
    assert groups_for_number("300", LEX) == []


def test_leading_number():
    assert leading_number("21A") == 21
    assert leading_number("A1") is None


class TestRightsEndpoint:
    async def test_dashboard_groups(self, client):
        response = await client.get("/api/rights")
        assert response.status_code == 200
        data = response.json()["data"]

        rights = data["rights"]
        assert {a["number"] for a in rights["right_to_equality"]} == {"14", "15", "17"}
        assert {a["number"] for a in rights["right_against_exploitation"]} == {"23"}
        assert {a["number"] for a in rights["constitutional_remedies"]} == {"32"}
        assert {a["number"] for a in rights["directive_principles"]} == {"39A", "45"}
        assert rights["fundamental_duties"] == []

    async def test_groups_are_ordered_by_importance(self, client):
        freedom = (await client.get("/api/rights")).json()["data"]["rights"]["right_to_freedom"]
        importance = [a["importance"] for a in freedom]
        assert importance == sorted(importance, reverse=True)

    async def test_stats(self, client):
        stats = (await client.get("/api/rights")).json()["data"]["stats"]
        assert stats["totalRights"] == 10
        assert stats["totalPrinciples"] == 2
        assert stats["totalDuties"] == 0
        assert stats["importantRights"] == 8

    async def test_emergency_guides_limited_to_core_categories(self, client):
        guides = (await client.get("/api/rights")).json()["data"]["emergencyGuides"]
        assert {g["category"] for g in guides} == {"arrest", "search", "detention"}

    async def test_category_filter(self, client):
        data = (await client.get("/api/rights", params={"category": "directive_principle"})).json()["data"]
        assert data["stats"]["totalRights"] == 0
        assert data["stats"]["totalPrinciples"] == 2
        assert data["rights"]["right_to_equality"] == []

    async def test_explanations_follow_language(self, client):
        rights = (await client.get("/api/rights", params={"lang": "hi"})).json()["data"]["rights"]
        article_21 = next(a for a in rights["right_to_freedom"] if a["number"] == "21")
        assert article_21["simplifiedExplanation"]["title"] == "आपका जीवन और स्वतंत्रता का अधिकार"


class TestFundamentalDuties:
    async def _add_duty(self, db_session):
        part = (await db_session.execute(select(Part).where(Part.number == 4))).scalar_one()
        db_session.add(Article(
            number="51A",
            part_id=part.id,
            title_en="Fundamental duties",
            content_en="It shall be the duty of every citizen of India to abide by the Constitution",
            category=ArticleCategory.FUNDAMENTAL_DUTY.value,
            importance=3,
        ))
        await db_session.commit()

    async def test_duty_lands_only_in_duties_bucket(self, client, db_session):
        await self._add_duty(db_session)
        data = (await client.get("/api/rights")).json()["data"]

        rights = data["rights"]
        assert [a["number"] for a in rights["fundamental_duties"]] == ["51A"]
        for key, articles in rights.items():
            if key != "fundamental_duties":
                assert "51A" not in {a["number"] for a in articles}

        stats = data["stats"]
        assert stats["totalDuties"] == 1
        assert stats["totalRights"] == 10
        assert stats["totalPrinciples"] == 2

    async def test_duty_category_filter(self, client, db_session):
        await self._add_duty(db_session)
        data = (await client.get("/api/rights", params={"category": "fundamental_duty"})).json()["data"]
        assert data["stats"]["totalDuties"] == 1
        assert data["stats"]["totalRights"] == 0
        assert data["rights"]["directive_principles"] == []
