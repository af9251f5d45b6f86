"""Fail if Alembic migrations are out of sync with the DevConnect models."""

from __future__ import annotations

import asyncio

from alembic.autogenerate import compare_metadata
from alembic.migration import MigrationContext
from sqlalchemy import text
from sqlalchemy.ext.asyncio import create_async_engine

from devconnect.config import settings
from devconnect.database import Base
from devconnect.logging import get_logger
from devconnect import models  # noqa: F401  # Ensure models are registered

logger = get_logger("check_migrations")


def _compare(connection) -> list[object]:
    context = MigrationContext.configure(connection, opts={"compare_type": True})
    return compare_metadata(context, Base.metadata)


async def main() -> int:
    engine = create_async_engine(settings.database_url)
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
        diffs = await conn.run_sync(_compare)
    await engine.dispose()

    if diffs:
        for diff in diffs:
            logger.error("schema_difference", diff=str(diff))
        return 1

    logger.info("schema_in_sync")
    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
