"""
Quiz fetch, grading and attempt history.
"""
import pytest
from sqlalchemy import select

from samvidhan.orm.mcq import MCQ
from samvidhan.orm.quiz_attempt import QuizAttempt
from samvidhan.services.quiz_service import percentage_of, performance_label, round_half_up


@pytest.mark.parametrize("score,total,expected", [
    (1, 3, 33),
    (2, 3, 67),
    (1, 8, 13),  # 12.5 rounds up
    (5, 5, 100),
    (0, 4, 0),
])
def test_percentage(score, total, expected):
    assert percentage_of(score, total) == expected


def test_round_half_up():
    assert round_half_up(62.5) == 63
    assert round_half_up(62.4) == 62


@pytest.mark.parametrize("percentage,label", [
    (100, "Excellent"),
    (80, "Excellent"),
    (79, "Good"),
    (60, "Good"),
    (59, "Average"),
    (40, "Average"),
    (39, "Need Improvement"),
    (0, "Need Improvement"),
])
def test_performance_thresholds(percentage, label):
    assert performance_label(percentage) == label


class TestQuizFetch:
    async def test_default_fetch(self, client):
        response = await client.get("/api/quiz")
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["stats"]["total"] == len(data["questions"]) == 6
        assert data["stats"]["byDifficulty"] == {"easy": 3, "medium": 2, "hard": 1}
        assert data["stats"]["byCategory"]["UPSC"] == 3

        question = data["questions"][0]
        assert len(question["options"]) == 4
        assert question["correctAnswer"] in {"A", "B", "C", "D"}
        assert question["article"]["number"]

    async def test_ordered_by_difficulty_then_category(self, client):
        questions = (await client.get("/api/quiz")).json()["data"]["questions"]
        keys = [(q["difficulty"], q["category"]) for q in questions]
        assert keys == sorted(keys)

    async def test_filters_and_limit(self, client):
        data = (await client.get("/api/quiz", params={"difficulty": "easy", "limit": "2"})).json()["data"]
        assert len(data["questions"]) == 2
        assert all(q["difficulty"] == "easy" for q in data["questions"])

        upsc = (await client.get("/api/quiz", params={"category": "UPSC"})).json()["data"]
        assert {q["category"] for q in upsc["questions"]} == {"UPSC"}

    async def test_article_title_is_localized(self, client):
        questions = (await client.get("/api/quiz", params={"lang": "hi"})).json()["data"]["questions"]
        titles = {q["article"]["number"]: q["article"]["title"] for q in questions}
        assert titles["14"] == "कानून के समक्ष समानता"

    @pytest.mark.parametrize("limit", ["0", "-1", "101", "ten"])
    async def test_invalid_limit(self, client, limit):
        response = await client.get("/api/quiz", params={"limit": limit})
        assert response.status_code == 400
        assert response.json()["success"] is False

    async def test_limit_bounds_accepted(self, client):
        assert (await client.get("/api/quiz", params={"limit": "1"})).status_code == 200
        assert (await client.get("/api/quiz", params={"limit": "100"})).status_code == 200


class TestQuizSubmit:
    async def _answer_key(self, db_session) -> dict:
        result = await db_session.execute(select(MCQ).order_by(MCQ.id))
        return {q.id: q.correct_answer for q in result.scalars().all()}

    async def test_scoring(self, client, db_session):
        key = await self._answer_key(db_session)
        ids = list(key)
        answers = [
            {"questionId": ids[0], "selectedAnswer": key[ids[0]]},
            {"questionId": ids[1], "selectedAnswer": key[ids[1]]},
            {"questionId": ids[2], "selectedAnswer": "Z"},
        ]
        response = await client.post("/api/quiz", json={"answers": answers})
        assert response.status_code == 200

        data = response.json()["data"]
        assert data["score"] == 2
        assert data["total"] == 3
        assert data["percentage"] == 67
        assert data["performance"] == "Good"
        assert [r["isCorrect"] for r in data["results"]] == [True, True, False]

    async def test_unknown_questions_count_towards_total(self, client, db_session):
        key = await self._answer_key(db_session)
        first = next(iter(key))
        answers = [
            {"questionId": first, "selectedAnswer": key[first]},
            {"questionId": 99999, "selectedAnswer": "A"},
        ]
        data = (await client.post("/api/quiz", json={"answers": answers})).json()["data"]
        assert data["total"] == 2
        assert data["percentage"] == 50
        assert len(data["results"]) == 1

    async def test_question_id_beyond_integer_column_is_unknown(self, client):
        answers = [{"questionId": 10 ** 20, "selectedAnswer": "A"}]
        response = await client.post("/api/quiz", json={"answers": answers})
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["total"] == 1
        assert data["score"] == 0
        assert data["results"] == []

    @pytest.mark.parametrize("body", [{}, {"answers": []}, {"answers": None}])
    async def test_missing_answers(self, client, body):
        response = await client.post("/api/quiz", json=body)
        assert response.status_code == 400
        assert response.json()["error"] == "Answers array is required"

    async def test_attempt_recorded_for_user(self, client, db_session):
        key = await self._answer_key(db_session)
        first = next(iter(key))
        payload = {
            "answers": [{"questionId": first, "selectedAnswer": key[first]}],
            "userId": "user-1",
            "timeSpent": 42,
        }
        assert (await client.post("/api/quiz", json=payload)).status_code == 200

        attempts = (await db_session.execute(select(QuizAttempt))).scalars().all()
        assert len(attempts) == 1
        assert attempts[0].user_id == "user-1"
        assert attempts[0].score == 1
        assert attempts[0].time_spent == 42
        assert attempts[0].category == "general"

    async def test_no_attempt_without_user(self, client, db_session):
        key = await self._answer_key(db_session)
        first = next(iter(key))
        await client.post("/api/quiz", json={"answers": [{"questionId": first, "selectedAnswer": "A"}]})
        attempts = (await db_session.execute(select(QuizAttempt))).scalars().all()
        assert attempts == []
