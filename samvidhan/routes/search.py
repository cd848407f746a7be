"""
samvidhan/routes/search.py
Full-text search across articles, amendments and emergency guides
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from samvidhan.database import get_db
from samvidhan.errors import validate_not_empty
from samvidhan.services.search_service import SEARCH_TYPES, search_content

router = APIRouter(prefix="/api/search", tags=["Search"])
logger = logging.getLogger(__name__)


@router.get("")
async def search(
    q: Optional[str] = Query(None),
    lang: str = Query("en"),
    type: str = Query("all", description="all | articles | amendments | emergency"),
    db: AsyncSession = Depends(get_db),
):
    query = validate_not_empty(q, "Search query is required")
    if type not in SEARCH_TYPES:
        logger.warning(f"Unknown search type '{type}', no results")
    data = await search_content(db, query, lang, type)
    return {"success": True, "data": data}
