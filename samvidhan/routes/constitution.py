"""
samvidhan/routes/constitution.py
Constitution tree: Parts with their Articles
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from samvidhan.database import get_db
from samvidhan.errors import parse_int_param
from samvidhan.services.constitution_service import get_constitution_tree

router = APIRouter(prefix="/api/constitution", tags=["Constitution"])


@router.get("")
async def get_constitution(
    lang: str = Query("en"),
    part: Optional[str] = Query(None, description="Restrict to one Part number"),
    db: AsyncSession = Depends(get_db),
):
    """All Parts ordered by position, each with its Articles."""
    part_number = parse_int_param(part, "part")
    parts = await get_constitution_tree(db, lang, part_number)
    return {"success": True, "data": parts}
