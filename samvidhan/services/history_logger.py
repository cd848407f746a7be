"""
samvidhan/services/history_logger.py
Append-only history writes (AI questions, quiz attempts)

These writes are best-effort: the caller's response never depends on them.
A failed write is rolled back and logged, and the helper returns None.
"""
import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from samvidhan.orm.ai_query import AIQuery
from samvidhan.orm.quiz_attempt import QuizAttempt

logger = logging.getLogger(__name__)

AI_QUERY_CONTEXT = "Constitution AI Assistant"


async def _append(db: AsyncSession, entry, label: str):
    try:
        db.add(entry)
        await db.commit()
        await db.refresh(entry)
        logger.debug(f"{label} saved: {entry!r}")
        return entry
    except Exception as e:
        await db.rollback()
        logger.error(f"Failed to save {label}: {e}")
        return None


async def record_ai_query(
    db: AsyncSession,
    user_id: str,
    question: str,
    answer: str,
) -> Optional[AIQuery]:
    entry = AIQuery(
        user_id=user_id,
        question=question,
        answer=answer,
        context=AI_QUERY_CONTEXT,
    )
    return await _append(db, entry, "AI query")


async def record_quiz_attempt(
    db: AsyncSession,
    user_id: str,
    score: int,
    total: int,
    time_spent: Optional[int] = None,
    category: Optional[str] = None,
) -> Optional[QuizAttempt]:
    entry = QuizAttempt(
        user_id=user_id,
        score=score,
        total=total,
        time_spent=time_spent or 0,
        category=category or "general",
    )
    return await _append(db, entry, "quiz attempt")
