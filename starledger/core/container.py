"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from starledger.core.config import Settings
from starledger.core.security import AdminCredentialChecker
from starledger.infrastructure.database.session import build_engine, build_session_factory


@dataclass(slots=True)
class ApplicationContainer:
    """Everything built from ``Settings`` once at startup and shared by requests."""

    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    credentials: AdminCredentialChecker

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApplicationContainer":
        engine = build_engine(settings)
        return cls(
            settings=settings,
            engine=engine,
            session_factory=build_session_factory(engine),
            credentials=AdminCredentialChecker.from_settings(settings.admin),
        )

    async def dispose(self) -> None:
        await self.engine.dispose()


__all__ = ["ApplicationContainer"]
