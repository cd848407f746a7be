"""
AI assistant: provider fallback, article extraction, history.
"""
import pytest
from sqlalchemy import select

from samvidhan.orm.ai_query import AIQuery
from samvidhan.main import app
from samvidhan.services.ai_assistant_service import FALLBACK_ANSWER, extract_article_numbers
from samvidhan.services.llm_client import get_completion_client

from samvidhan.tests.fakes import FakeCompletionClient


class TestExtractArticleNumbers:
    def test_distinct_in_mention_order(self):
        text = "Article 21 and Article 14A apply. See also article 21 again."
        assert extract_article_numbers(text) == ["21", "14A"]

    def test_suffix_is_uppercased(self):
        assert extract_article_numbers("ARTICLE 51a lists duties") == ["51A"]

    def test_hindi_keyword_and_digits(self):
        assert extract_article_numbers("अनुच्छेद २१ जीवन का अधिकार देता है") == ["21"]

    def test_tamil_keyword(self):
        assert extract_article_numbers("பிரிவு 19 பேச்சு சுதந்திரம்") == ["19"]

    def test_no_mentions(self):
        assert extract_article_numbers("The Preamble declares India a republic.") == []
        assert extract_article_numbers("") == []


class TestAskQuestion:
    async def test_answer_with_mentioned_articles(self, client, completion_client):
        completion_client.answer = "Under Article 21 and Article 21A you are protected. Article 21 again."
        response = await client.post("/api/ai-assistant", json={"question": "What is my right to life?"})
        assert response.status_code == 200

        data = response.json()["data"]
        assert data["fallback"] is False
        assert data["answer"] == completion_client.answer
        assert [a["number"] for a in data["mentionedArticles"]] == ["21", "21A"]
        assert data["mentionedArticles"][0]["part"]["number"] == 3
        assert data["timestamp"].endswith("Z")

    async def test_mentioned_articles_localized(self, client, completion_client):
        completion_client.answer = "Article 14 guarantees equality."
        data = (await client.post(
            "/api/ai-assistant",
            json={"question": "समानता?", "language": "hi"},
        )).json()["data"]
        assert data["mentionedArticles"][0]["title"] == "कानून के समक्ष समानता"

    async def test_unknown_mentions_are_skipped(self, client, completion_client):
        completion_client.answer = "Article 370 was discussed."
        data = (await client.post("/api/ai-assistant", json={"question": "370?"})).json()["data"]
        assert data["mentionedArticles"] == []

    async def test_provider_failure_falls_back(self, client):
        app.dependency_overrides[get_completion_client] = lambda: FakeCompletionClient(
            error=RuntimeError("quota exceeded")
        )
        response = await client.post("/api/ai-assistant", json={"question": "What is Article 32?"})
        assert response.status_code == 200

        data = response.json()["data"]
        assert data["fallback"] is True
        assert data["answer"] == FALLBACK_ANSWER
        assert "1800-11-1320" in data["answer"]
        assert data["mentionedArticles"] == []

    async def test_empty_provider_reply_falls_back(self, client, completion_client):
        completion_client.answer = "   "
        data = (await client.post("/api/ai-assistant", json={"question": "Hello?"})).json()["data"]
        assert data["fallback"] is True

    @pytest.mark.parametrize("body", [{}, {"question": ""}, {"question": "   "}])
    async def test_blank_question_is_400(self, client, completion_client, body):
        response = await client.post("/api/ai-assistant", json=body)
        assert response.status_code == 400
        assert response.json()["error"] == "Question is required"
        assert completion_client.questions == []

    async def test_query_saved_for_user(self, client, db_session):
        await client.post("/api/ai-assistant", json={"question": "Right to life?", "userId": "u-7"})
        saved = (await db_session.execute(select(AIQuery))).scalars().all()
        assert len(saved) == 1
        assert saved[0].user_id == "u-7"
        assert saved[0].context == "Constitution AI Assistant"

    async def test_fallback_is_not_saved(self, client, db_session):
        app.dependency_overrides[get_completion_client] = lambda: FakeCompletionClient(error=RuntimeError("down"))
        await client.post("/api/ai-assistant", json={"question": "Right to life?", "userId": "u-7"})
        saved = (await db_session.execute(select(AIQuery))).scalars().all()
        assert saved == []


class TestHistory:
    async def test_history_newest_first(self, client):
        for question in ("first question", "second question"):
            await client.post("/api/ai-assistant", json={"question": question, "userId": "u-1"})
        await client.post("/api/ai-assistant", json={"question": "other user", "userId": "u-2"})

        response = await client.get("/api/ai-assistant", params={"userId": "u-1"})
        assert response.status_code == 200
        history = response.json()["data"]
        assert [h["question"] for h in history] == ["second question", "first question"]
        assert {"id", "question", "answer", "rating", "createdAt"} <= set(history[0])

    async def test_history_requires_user(self, client):
        response = await client.get("/api/ai-assistant")
        assert response.status_code == 400
        assert response.json()["error"] == "User ID is required"
