"""
Database session configuration.

This module handles database engine creation and session management
using SQLAlchemy with async support. SQLite (aiosqlite) is the default
backend; PostgreSQL (asyncpg) works through ``DATABASE_URL``.
"""

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from parcel_tracker.app.core.config import settings

# Create declarative base for models
Base = declarative_base()


def build_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Create an async engine for ``database_url``.
    
    Pool sizing only applies to server databases; SQLite picks its own pool.
    """
    options = {"echo": echo}
    if make_url(database_url).get_backend_name() != "sqlite":
        options["pool_size"] = settings.db_pool_size
        options["max_overflow"] = settings.db_max_overflow
    return create_async_engine(database_url, **options)


# Create async engine
engine = build_engine(settings.database_url, echo=settings.db_echo)

# Create async session factory
AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db():
    """
    Yield an async database session and ensure it's properly closed.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def init_db(bind: AsyncEngine = None) -> None:
    """
    Create the tables registered on ``Base`` if they don't exist yet.
    
    This is bootstrap only, existing tables are left untouched.
    """
    # Import models to ensure they are registered with Base
    from parcel_tracker.app.models.parcel import Parcel  # noqa: F401
    
    async with (bind or engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
