"""Post store providers."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from foro.config import Settings
from foro.domain.repository import PostRepository
from foro.persistence.database import create_engine, create_session_factory
from foro.persistence.repository import PostgresPostRepository
from foro.util.di.base import ProviderBase
from foro.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Where posts are kept."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Posts in PostgreSQL: one engine per app, one session per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings.database, echo=settings.debug)
        if settings.observability.instrument:
            instrument_sqlalchemy(engine)
        yield engine
        # Runs when the container closes
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One unit of work per request.

        Everything the request wrote is committed together when it finishes,
        or rolled back if it raised.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn(
                    "Rolling back request transaction",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                await session.rollback()
                raise
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        return PostgresPostRepository(session)
