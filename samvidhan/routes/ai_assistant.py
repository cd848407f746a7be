"""
samvidhan/routes/ai_assistant.py
Constitution AI Assistant: question answering and per-user history
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from samvidhan.config.settings import settings
from samvidhan.database import get_db
from samvidhan.errors import validate_not_empty
from samvidhan.rate_limit import limiter
from samvidhan.schemas.ai_assistant import AIQuestionRequest
from samvidhan.services.ai_assistant_service import answer_question, get_query_history
from samvidhan.services.llm_client import GeminiCompletionClient, get_completion_client
from samvidhan.services.localization import normalize_language

router = APIRouter(prefix="/api/ai-assistant", tags=["AI Assistant"])


@router.post("")
@limiter.limit(settings.AI_RATE_LIMIT)
async def ask_question(
    request: Request,
    payload: AIQuestionRequest,
    db: AsyncSession = Depends(get_db),
    client: GeminiCompletionClient = Depends(get_completion_client),
):
    """
    Answer a constitutional question.

    Provider failures never surface as errors: the caller receives a
    canned answer with `fallback: true`.
    """
    question = validate_not_empty(payload.question, "Question is required")

    data = await answer_question(
        db,
        client,
        question,
        user_id=payload.user_id,
        language=normalize_language(payload.language),
    )
    return {"success": True, "data": data}


@router.get("")
async def query_history(
    userId: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    user_id = validate_not_empty(userId, "User ID is required")
    history = await get_query_history(db, user_id)
    return {"success": True, "data": history}
