"""
samvidhan/routes/amendments.py
Amendment list, decade timeline and stats
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from samvidhan.database import get_db
from samvidhan.errors import parse_int_param
from samvidhan.services.amendment_service import AmendmentFilters, list_amendments

router = APIRouter(prefix="/api/amendments", tags=["Amendments"])


@router.get("")
async def get_amendments(
    lang: str = Query("en"),
    year: Optional[str] = Query(None),
    number: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    filters = AmendmentFilters(
        year=parse_int_param(year, "year"),
        number=parse_int_param(number, "number"),
    )
    data = await list_amendments(db, lang, filters)
    return {"success": True, "data": data}
