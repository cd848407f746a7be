"""
samvidhan/routes/rti.py
Right to Information: application drafting and department directory
"""
import logging
from typing import Optional

from fastapi import APIRouter, Query

from samvidhan.assistants import rti
from samvidhan.schemas.assistants import RTIRequest

router = APIRouter(prefix="/api/rti", tags=["RTI"])
logger = logging.getLogger(__name__)


@router.post("")
async def draft_rti(payload: RTIRequest):
    data = rti.draft_application(payload)
    logger.info(f"RTI application drafted: {data['rtiApplication']['applicationNumber']}")
    return {"success": True, "data": data}


@router.get("")
async def rti_directory(
    department: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
):
    """Department directory plus success stories and statistics."""
    return {"success": True, "data": rti.directory(category, department)}
