"""
Create the starledger tables for local development.
Production databases are managed with alembic (``alembic upgrade head``).
"""
import asyncio

from starledger.core.config import get_settings
from starledger.infrastructure.database import build_engine, init_db


async def create_schema():
    settings = get_settings()
    engine = build_engine(settings)
    try:
        await init_db(engine)
    finally:
        await engine.dispose()

    print(f"Schema ready: {settings.database_url}")


if __name__ == "__main__":
    asyncio.run(create_schema())
