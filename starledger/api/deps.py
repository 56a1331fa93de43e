"""Reusable FastAPI dependencies."""

from __future__ import annotations

from collections.abc import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from starledger.core.container import ApplicationContainer
from starledger.core.security import AdminCredentialChecker
from starledger.infrastructure.database.session import session_scope
from starledger.modules.handles import HandleService
from starledger.modules.stars import StarLedgerService


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


async def get_db_session(
    container: ApplicationContainer = Depends(get_container),
) -> AsyncGenerator[AsyncSession, None]:
    async with session_scope(container.session_factory) as session:
        yield session


def get_handle_service(
    db: AsyncSession = Depends(get_db_session),
    container: ApplicationContainer = Depends(get_container),
) -> HandleService:
    return HandleService.with_session(db, max_attempts=container.settings.handles.max_attempts)


def get_star_service(db: AsyncSession = Depends(get_db_session)) -> StarLedgerService:
    return StarLedgerService.with_session(db)


def get_credentials(container: ApplicationContainer = Depends(get_container)) -> AdminCredentialChecker:
    return container.credentials


__all__ = [
    "get_container",
    "get_db_session",
    "get_handle_service",
    "get_star_service",
    "get_credentials",
]
