"""Persistence providers: engine, per-request session, repositories."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from hive.config import Settings
from hive.domain.repository import (
    CommentRepository,
    PaymentRepository,
    PostRepository,
    ReportRepository,
    UserRepository,
)
from hive.persistence.database import create_engine, create_session_factory
from hive.persistence.repository import (
    PostgresCommentRepository,
    PostgresPaymentRepository,
    PostgresPostRepository,
    PostgresReportRepository,
    PostgresUserRepository,
)
from hive.util.di.base import ProviderBase
from hive.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL persistence.

    All repositories of a request share one session, which is one
    transaction: a multi-step operation such as create post plus counter
    update is committed whole or not at all.
    """

    __is_mock__ = False

    users = provide(PostgresUserRepository, provides=UserRepository, scope=Scope.REQUEST)
    posts = provide(PostgresPostRepository, provides=PostRepository, scope=Scope.REQUEST)
    comments = provide(
        PostgresCommentRepository, provides=CommentRepository, scope=Scope.REQUEST
    )
    reports = provide(
        PostgresReportRepository, provides=ReportRepository, scope=Scope.REQUEST
    )
    payments = provide(
        PostgresPaymentRepository, provides=PaymentRepository, scope=Scope.REQUEST
    )

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
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
        """Commit when the request scope closes cleanly, roll back otherwise."""
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logfire.warn("Transaction rolled back", error=str(e))
                raise
            await session.commit()
