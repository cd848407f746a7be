"""
Constitution tree and article detail endpoints.
"""
import pytest

from samvidhan.errors import ErrorCode


class TestConstitutionTree:
    async def test_parts_are_ordered_with_sorted_articles(self, client):
        response = await client.get("/api/constitution")
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True

        parts = body["data"]
        assert [p["number"] for p in parts] == [1, 3, 4]

        fundamental = parts[1]
        numbers = [a["number"] for a in fundamental["articles"]]
        assert numbers == sorted(numbers)
        assert "21A" in numbers

    async def test_articles_carry_localized_part(self, client):
        response = await client.get("/api/constitution", params={"lang": "hi"})
        article = response.json()["data"][1]["articles"][0]
        assert article["part"] == {"number": 3, "title": "मौलिक अधिकार"}
        assert {"id", "number", "title", "category", "importance"} <= set(article)

    async def test_part_filter(self, client):
        response = await client.get("/api/constitution", params={"part": "4"})
        parts = response.json()["data"]
        assert len(parts) == 1
        assert parts[0]["number"] == 4

    async def test_part_beyond_integer_column_is_rejected(self, client):
        response = await client.get("/api/constitution", params={"part": str(2 ** 63)})
        assert response.status_code == 400
        assert response.json()["code"] == ErrorCode.INVALID_FORMAT

    async def test_non_integer_part_is_rejected(self, client):
        response = await client.get("/api/constitution", params={"part": "III"})
        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["code"] == ErrorCode.INVALID_FORMAT


class TestArticleDetail:
    async def _article_id(self, client, number: str) -> int:
        parts = (await client.get("/api/constitution")).json()["data"]
        for part in parts:
            for article in part["articles"]:
                if article["number"] == number:
                    return article["id"]
        raise AssertionError(f"article {number} not seeded")

    async def test_detail_includes_explanation_cases_and_amendments(self, client):
        article_id = await self._article_id(client, "21")
        response = await client.get(f"/api/articles/{article_id}")
        assert response.status_code == 200

        article = response.json()["data"]
        assert article["number"] == "21"
        assert article["part"]["number"] == 3
        assert article["simplifiedExplanation"]["title"] == "Your Right to Life and Liberty"
        case_titles = {c["title"] for c in article["relatedCases"]}
        assert "Maneka Gandhi v. Union of India" in case_titles
        assert {a["number"] for a in article["amendments"]} == {44}

    async def test_explanation_in_requested_language(self, client):
        article_id = await self._article_id(client, "21")
        article = (await client.get(f"/api/articles/{article_id}", params={"lang": "hi"})).json()["data"]
        assert article["simplifiedExplanation"]["title"] == "आपका जीवन और स्वतंत्रता का अधिकार"
        assert article["title"] == "जीवन और व्यक्तिगत स्वतंत्रता का संरक्षण"

    async def test_missing_explanation_is_null(self, client):
        article_id = await self._article_id(client, "19")
        article = (await client.get(f"/api/articles/{article_id}", params={"lang": "ta"})).json()["data"]
        assert article["simplifiedExplanation"] is None
        # content_ta is not seeded
        assert article["content"].startswith("All citizens shall have")

    async def test_unknown_article_is_404(self, client):
        response = await client.get("/api/articles/99999")
        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["code"] == ErrorCode.ARTICLE_NOT_FOUND

    async def test_non_numeric_id_is_404(self, client):
        response = await client.get("/api/articles/abc")
        assert response.status_code == 404

    @pytest.mark.parametrize(
        "article_id", ["99999999999999999999", "9" * 5000, "\u00b2", "\u0663"],
        ids=["too-large", "too-long", "superscript", "arabic-indic"],
    )
    async def test_unstorable_ids_are_404(self, client, article_id):
        response = await client.get(f"/api/articles/{article_id}")
        assert response.status_code == 404
        assert response.json()["code"] == ErrorCode.ARTICLE_NOT_FOUND
