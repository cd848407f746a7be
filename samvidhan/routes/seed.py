"""
samvidhan/routes/seed.py
Populate the database with sample constitution content
"""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from samvidhan.database import get_db
from samvidhan.errors import ErrorCode, InternalError, new_log_id
from samvidhan.seed.seed_data import seed_database

router = APIRouter(prefix="/api/seed", tags=["Seed"])
logger = logging.getLogger(__name__)


@router.post("")
async def seed(db: AsyncSession = Depends(get_db)):
    try:
        counts = await seed_database(db)
    except Exception as e:
        await db.rollback()
        log_id = new_log_id()
        logger.error(f"[{log_id}] Seeding failed: {type(e).__name__}: {e}")
        raise InternalError(message=f"Seeding failed: {e}", code=ErrorCode.SEED_FAILED, log_id=log_id)

    message = "Sample data already present" if counts.get("skipped") else "Sample data seeded successfully!"
    return {"success": True, "message": message, "data": counts}
