"""Alembic migration environment for the starledger schema."""

from __future__ import annotations

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy.engine import Connection, make_url

from starledger.core.config import get_settings
from starledger.db import models  # noqa: F401
from starledger.infrastructure.database.base import Base
from starledger.infrastructure.database.session import build_engine

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def offline_url(database_url: str) -> str:
    """Drop the async driver so offline SQL is rendered with the plain dialect.

    ``sqlite+aiosqlite:///x.db`` becomes ``sqlite:///x.db`` and
    ``postgresql+asyncpg://...`` becomes ``postgresql://...``.
    """
    url = make_url(database_url)
    return url.set(drivername=url.get_backend_name()).render_as_string(hide_password=False)


def run_offline() -> None:
    context.configure(
        url=offline_url(get_settings().database_url),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _migrate(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def run_online() -> None:
    engine = build_engine(get_settings())
    try:
        async with engine.connect() as connection:
            await connection.run_sync(_migrate)
    finally:
        await engine.dispose()


if context.is_offline_mode():
    run_offline()
else:
    asyncio.run(run_online())
