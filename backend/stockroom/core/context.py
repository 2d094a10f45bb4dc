"""Per-application dependencies: settings, database engine and token signer."""
from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from stockroom.core.config import Settings
from stockroom.core.security import TokenSigner
from stockroom.db.session import build_engine, build_session_factory


@dataclass
class AppContext:
    """Everything a request handler needs that outlives a single request.

    One instance is built per application and stored on ``app.state.context``
    so tests can run isolated apps against their own database and secret.
    """

    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    signer: TokenSigner

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        engine = build_engine(settings.sqlalchemy_url)
        return cls(
            settings=settings,
            engine=engine,
            session_factory=build_session_factory(engine),
            signer=TokenSigner(settings.secret_key, max_age=settings.access_token_max_age),
        )

    async def dispose(self) -> None:
        await self.engine.dispose()
