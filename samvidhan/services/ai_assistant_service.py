"""
samvidhan/services/ai_assistant_service.py
Constitution AI Assistant: answer, history, article mention extraction

Provider failures never surface as errors: the caller gets the fallback
answer (with the NALSA helpline) and `fallback: True`.
"""
import logging
import re
from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from samvidhan.orm.ai_query import AIQuery
from samvidhan.services.article_service import find_articles_by_numbers
from samvidhan.services.history_logger import record_ai_query

logger = logging.getLogger(__name__)

FALLBACK_ANSWER = (
    "I'm sorry, I'm having trouble processing your question right now. "
    "Please try again or consult with a legal professional for specific legal advice. "
    "For immediate help with constitutional rights, you can contact the National Legal "
    "Services Authority (NALSA) at 1800-11-1320."
)

HISTORY_LIMIT = 20

# "Article 21", "article 14a", "अनुच्छेद २१", "பிரிவு 19"
ARTICLE_MENTION = re.compile(
    r"(?:Article|अनुच्छेद|பிரிவு)\s+(\d+)(?:([A-Z])(?![A-Z]))?",
    re.IGNORECASE,
)


def extract_article_numbers(text: str) -> List[str]:
    """
    Distinct article numbers mentioned in `text`, in order of first mention.

    Devanagari and Tamil digits are normalized to ASCII and letter suffixes
    are upper-cased, so "अनुच्छेद २१" and "Article 21" both give "21".
    """
    numbers = []
    for match in ARTICLE_MENTION.finditer(text or ""):
        number = str(int(match.group(1)))
        if match.group(2):
            number += match.group(2).upper()
        if number not in numbers:
            numbers.append(number)
    return numbers


def _timestamp() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def fallback_response(question: str) -> dict:
    return {
        "question": question or "",
        "answer": FALLBACK_ANSWER,
        "mentionedArticles": [],
        "timestamp": _timestamp(),
        "fallback": True,
    }


async def _mentioned_articles(db: AsyncSession, answer: str, language: str) -> list:
    numbers = extract_article_numbers(answer)
    if not numbers:
        return []
    try:
        return await find_articles_by_numbers(db, numbers, language)
    except Exception as e:
        logger.error(f"Failed to fetch article details: {e}")
        return []


async def answer_question(
    db: AsyncSession,
    client,
    question: str,
    user_id: Optional[str] = None,
    language: str = "en",
) -> dict:
    """
    Ask the completion provider and decorate the reply.

    `question` must already be validated as non-blank.
    """
    try:
        answer = await client.complete(question)
    except Exception as e:
        logger.error(f"Error in AI assistant: {type(e).__name__}: {e}")
        return fallback_response(question)

    if not answer or not answer.strip():
        logger.error("Error in AI assistant: empty response from provider")
        return fallback_response(question)

    if user_id:
        await record_ai_query(db, user_id, question, answer)

    return {
        "question": question,
        "answer": answer,
        "mentionedArticles": await _mentioned_articles(db, answer, language),
        "timestamp": _timestamp(),
        "fallback": False,
    }


async def get_query_history(db: AsyncSession, user_id: str) -> List[dict]:
    """Latest AI questions for `user_id`, newest first."""
    result = await db.execute(
        select(AIQuery)
        .where(AIQuery.user_id == user_id)
        .order_by(AIQuery.created_at.desc(), AIQuery.id.desc())
        .limit(HISTORY_LIMIT)
    )
    return [
        {
            "id": query.id,
            "question": query.question,
            "answer": query.answer,
            "rating": query.rating,
            "createdAt": query.created_at.isoformat() if query.created_at else None,
        }
        for query in result.scalars().all()
    ]
