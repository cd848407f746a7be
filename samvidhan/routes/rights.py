"""
samvidhan/routes/rights.py
Rights dashboard: fundamental rights, directive principles, duties
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from samvidhan.database import get_db
from samvidhan.services.rights_service import RightsFilters, get_rights_dashboard

router = APIRouter(prefix="/api/rights", tags=["Rights"])


@router.get("")
async def get_rights(
    lang: str = Query("en"),
    category: Optional[str] = Query(None, description="fundamental_right | directive_principle | fundamental_duty"),
    db: AsyncSession = Depends(get_db),
):
    """
    Rights grouped for the dashboard, with emergency guides for
    arrest, search and detention.
    """
    data = await get_rights_dashboard(db, lang, RightsFilters(category=category or None))
    return {"success": True, "data": data}
