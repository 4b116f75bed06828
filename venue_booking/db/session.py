"""
Async engine and request-scoped session management.

One request runs in one transaction: ``get_db`` commits when the route
returns and rolls back on any exception, so a booking's multi-row insert
or delete is never visible half-done.
"""

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from venue_booking.core.config import get_settings
from venue_booking.core.metrics import record_db_operation

settings = get_settings()


def build_engine(url: str, echo: bool = False):
    if url.startswith("sqlite"):
        # SQLite connections are tied to the thread/loop that opened them
        return create_async_engine(
            url,
            echo=echo,
            poolclass=NullPool,
            connect_args={"check_same_thread": False},
        )
    return create_async_engine(
        url,
        echo=echo,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,
        pool_pre_ping=True,
    )


engine = build_engine(settings.DATABASE_URL, echo=settings.DB_ECHO)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            record_db_operation("rollback")
            raise


async def close_db() -> None:
    await engine.dispose()
