"""
samvidhan/routes/articles.py
Single article detail
"""
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from samvidhan.database import get_db
from samvidhan.errors import NotFoundError, ErrorCode, fits_int64
from samvidhan.services.article_service import get_article_detail

router = APIRouter(prefix="/api/articles", tags=["Articles"])


def _is_stored_id(value: str) -> bool:
    # ASCII digits that fit an INTEGER column (at most 19 of them)
    if not (value.isascii() and value.isdigit()) or len(value) > 19:
        return False
    return fits_int64(int(value))


@router.get("/{article_id}")
async def get_article(
    article_id: str,
    lang: str = Query("en"),
    db: AsyncSession = Depends(get_db),
):
    """
    Article with its explanation in `lang`, related cases and amendments.
    Ids that are not stored integers cannot exist and get the same 404.
    """
    if not _is_stored_id(article_id):
        raise NotFoundError("Article", code=ErrorCode.ARTICLE_NOT_FOUND)

    article = await get_article_detail(db, int(article_id), lang)
    return {"success": True, "data": article}
