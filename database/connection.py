import logging
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from database.tables import Base

logger = logging.getLogger(__name__)


class Database:
    """Owns the pooled engine and the session factory for one application."""

    def __init__(self, database_url: str):
        engine_kwargs = {"pool_pre_ping": True}
        if database_url.startswith("postgresql"):
            engine_kwargs.update({"pool_size": 5, "max_overflow": 10, "pool_recycle": 1800})
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self.sessionmaker = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )

    async def create_all(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    def session(self) -> AsyncSession:
        return self.sessionmaker()

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncIterator[AsyncSession]:
    async with request.app.state.database.session() as session:
        yield session
