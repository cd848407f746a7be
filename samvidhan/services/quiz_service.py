"""
samvidhan/services/quiz_service.py
Quiz question selection and grading
"""
import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from samvidhan.errors import fits_int64
from samvidhan.orm.mcq import MCQ, Difficulty
from samvidhan.services.history_logger import record_quiz_attempt
from samvidhan.services.localization import resolve

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
MAX_LIMIT = 100

PERFORMANCE_BANDS = (
    (80, "Excellent"),
    (60, "Good"),
    (40, "Average"),
)
LOWEST_BAND = "Need Improvement"


@dataclass
class QuizFilters:
    category: Optional[str] = None
    difficulty: Optional[str] = None
    limit: int = DEFAULT_LIMIT


def round_half_up(value) -> int:
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def percentage_of(score: int, total: int) -> int:
    """round(100 * score / total), halves rounded up; 0 when total is 0."""
    if total <= 0:
        return 0
    return round_half_up(Decimal(score) * 100 / Decimal(total))


def performance_label(percentage: int) -> str:
    for threshold, label in PERFORMANCE_BANDS:
        if percentage >= threshold:
            return label
    return LOWEST_BAND


def serialize_question(question: MCQ, lang: str) -> dict:
    article = question.article
    return {
        "id": question.id,
        "question": question.question,
        "options": question.options,
        "correctAnswer": question.correct_answer,
        "explanation": question.explanation,
        "difficulty": question.difficulty,
        "category": question.category,
        "article": {
            "id": article.id,
            "number": article.number,
            "title": resolve(article, "title", lang),
        } if article is not None else None,
    }


def build_quiz_stats(questions: List[MCQ]) -> dict:
    by_category = {}
    for q in questions:
        by_category[q.category] = by_category.get(q.category, 0) + 1
    return {
        "total": len(questions),
        "byDifficulty": {
            level.value: sum(1 for q in questions if q.difficulty == level.value)
            for level in Difficulty
        },
        "byCategory": by_category,
    }


async def get_quiz(db: AsyncSession, lang: str, filters: QuizFilters) -> dict:
    stmt = (
        select(MCQ)
        .options(selectinload(MCQ.article))
        .order_by(MCQ.difficulty.asc(), MCQ.category.asc(), MCQ.id.asc())
        .limit(filters.limit)
    )
    if filters.category:
        stmt = stmt.where(MCQ.category == filters.category)
    if filters.difficulty:
        stmt = stmt.where(MCQ.difficulty == filters.difficulty)

    result = await db.execute(stmt)
    questions = list(result.scalars().all())

    logger.info(f"Quiz: {len(questions)} questions for {filters}")

    return {
        "questions": [serialize_question(q, lang) for q in questions],
        "stats": build_quiz_stats(questions),
    }


async def grade_quiz(
    db: AsyncSession,
    answers: List[dict],
    user_id: Optional[str] = None,
    time_spent: Optional[int] = None,
    category: Optional[str] = None,
) -> dict:
    """
    Grade submitted answers against the stored correct options.

    `total` counts every submitted answer, including ones whose question id
    is unknown; only known questions appear in `results`.
    """
    # ids outside the INTEGER range cannot be stored, so they are simply unknown
    question_ids = {
        a["questionId"] for a in answers
        if a.get("questionId") is not None and fits_int64(a["questionId"])
    }
    known = {}
    if question_ids:
        result = await db.execute(select(MCQ).where(MCQ.id.in_(question_ids)))
        known = {q.id: q for q in result.scalars().all()}

    score = 0
    results = []
    for answer in answers:
        question = known.get(answer.get("questionId"))
        if question is None:
            continue
        is_correct = question.correct_answer == answer.get("selectedAnswer")
        if is_correct:
            score += 1
        results.append({
            "questionId": question.id,
            "selectedAnswer": answer.get("selectedAnswer"),
            "correctAnswer": question.correct_answer,
            "isCorrect": is_correct,
            "explanation": question.explanation,
        })

    total = len(answers)
    percentage = percentage_of(score, total)

    if user_id:
        await record_quiz_attempt(db, user_id, score, total, time_spent, category)

    logger.info(f"Quiz graded: {score}/{total} ({percentage}%)")

    return {
        "score": score,
        "total": total,
        "percentage": percentage,
        "performance": performance_label(percentage),
        "results": results,
        "timeSpent": time_spent,
    }
