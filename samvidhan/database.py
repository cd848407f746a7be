"""
samvidhan/database.py
Database configuration: async engine, session factory and lifecycle hooks
"""
import logging
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from samvidhan.config.settings import settings
from samvidhan.orm.base import Base
import samvidhan.orm  # registers every model on Base.metadata

logger = logging.getLogger(__name__)

DATABASE_URL = settings.DATABASE_URL

if not DATABASE_URL:
    raise ValueError("DATABASE_URL environment variable is not set")

if "sqlite" in DATABASE_URL.lower():
    engine = create_async_engine(
        DATABASE_URL,
        echo=False,
        pool_pre_ping=True,
        connect_args={
            "timeout": 30.0,   # SQLite busy timeout in seconds
        }
    )
else:
    # PostgreSQL/MySQL
    engine = create_async_engine(
        DATABASE_URL,
        echo=False,
        pool_pre_ping=True,
        pool_size=20,
        max_overflow=30,
        pool_timeout=30,
        pool_recycle=3600,
    )

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db():
    """Dependency for getting async database session"""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_db():
    """Create all tables that do not exist yet."""
    logger.info("Initializing database...")

    try:
        logger.info(f"Database dialect: {engine.url.get_backend_name()}")

        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

        logger.info("✓ Database initialization complete")

    except Exception as e:
        logger.error(f"Database initialization failed: {str(e)}")
        raise


async def close_db():
    """Close database connection"""
    await engine.dispose()
    logger.info("Database connection closed")


async def seed_if_empty(db: AsyncSession):
    """
    Seed the sample constitution content if no Part exists.
    Called during startup when SEED_ON_STARTUP is enabled.
    """
    from samvidhan.orm.part import Part
    from samvidhan.seed.seed_data import seed_database

    result = await db.execute(select(func.count()).select_from(Part))
    count = result.scalar()

    if count == 0:
        logger.info("No constitution content found - seeding sample data")
        await seed_database(db)
    else:
        logger.info("✓ Constitution content already present (%d parts) - skipping seed", count)
