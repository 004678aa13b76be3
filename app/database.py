"""
Database engine, session factory and declarative base.
"""
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from app.config import get_settings

settings = get_settings()

Base = declarative_base()


def build_engine(database_url: str) -> AsyncEngine:
    """Create an async engine for the given URL."""
    if database_url.startswith("sqlite"):
        return create_async_engine(database_url, echo=settings.debug)
    return create_async_engine(database_url, echo=settings.debug, pool_pre_ping=True)


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(bind=bind, expire_on_commit=False, autoflush=False)


engine = build_engine(settings.database_url)
AsyncSessionLocal = build_session_factory(engine)


def get_session_factory() -> async_sessionmaker:
    """Dependency returning the application's session factory."""
    return AsyncSessionLocal


async def init_db(bind: AsyncEngine = engine) -> None:
    """Create all tables that do not exist yet."""
    # Register every mapped class on Base.metadata
    import app.models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
