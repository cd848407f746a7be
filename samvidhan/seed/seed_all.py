"""
samvidhan/seed/seed_all.py
Create tables and load the sample content (idempotent)

Run: python -m samvidhan.seed.seed_all
"""
import asyncio
import logging

from samvidhan.database import init_db, close_db, AsyncSessionLocal
from samvidhan.seed.seed_data import seed_database

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


async def main():
    try:
        logger.info("[1/2] Initializing database...")
        await init_db()

        logger.info("[2/2] Seeding sample content...")
        async with AsyncSessionLocal() as session:
            counts = await seed_database(session)

        if counts.get("skipped"):
            logger.info("Nothing to do, content already present")
        else:
            logger.info("=" * 60)
            logger.info("✅ DATABASE SEEDING COMPLETE!")
            logger.info("=" * 60)
            logger.info("Start the API: uvicorn samvidhan.main:app --reload")
    except Exception as e:
        logger.error(f"❌ Seeding failed: {e}")
        raise
    finally:
        await close_db()


if __name__ == "__main__":
    asyncio.run(main())
