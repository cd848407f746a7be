"""
samvidhan/routes/quiz.py
Quiz questions and grading
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from samvidhan.database import get_db
from samvidhan.errors import BadRequestError, ErrorCode, parse_int_param
from samvidhan.schemas.quiz import QuizSubmission
from samvidhan.services.quiz_service import (
    DEFAULT_LIMIT,
    MAX_LIMIT,
    QuizFilters,
    get_quiz,
    grade_quiz,
)

router = APIRouter(prefix="/api/quiz", tags=["Quiz"])
logger = logging.getLogger(__name__)


def _parse_limit(value: Optional[str]) -> int:
    limit = parse_int_param(value, "limit")
    if limit is None:
        return DEFAULT_LIMIT
    if limit < 1 or limit > MAX_LIMIT:
        raise BadRequestError(
            f"limit must be between 1 and {MAX_LIMIT}",
            code=ErrorCode.INVALID_INPUT,
            details={"field": "limit", "value": value},
        )
    return limit


# ============================================================================
# FETCH
# ============================================================================

@router.get("")
async def get_questions(
    lang: str = Query("en"),
    category: Optional[str] = Query(None),
    difficulty: Optional[str] = Query(None, description="easy | medium | hard"),
    limit: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    filters = QuizFilters(
        category=category or None,
        difficulty=difficulty or None,
        limit=_parse_limit(limit),
    )
    data = await get_quiz(db, lang, filters)
    return {"success": True, "data": data}


# ============================================================================
# SUBMIT
# ============================================================================

@router.post("")
async def submit_quiz(
    submission: QuizSubmission,
    db: AsyncSession = Depends(get_db),
):
    """Score the answers; attempts are stored when userId is given."""
    if not submission.answers:
        logger.warning("Quiz submission without answers")
        raise BadRequestError("Answers array is required", code=ErrorCode.MISSING_FIELD)

    data = await grade_quiz(
        db,
        [answer.as_payload() for answer in submission.answers],
        user_id=submission.user_id,
        time_spent=submission.time_spent,
        category=submission.category,
    )
    return {"success": True, "data": data}
