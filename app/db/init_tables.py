import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from app.db.session import Base
import app.models  # noqa: F401  registers every table on Base.metadata

logger = logging.getLogger(__name__)

# Created only when names are unique regardless of case; the plain
# UNIQUE(name) constraints stay in place either way.
CASE_INSENSITIVE_NAME_INDEXES = (
    "CREATE UNIQUE INDEX IF NOT EXISTS uq_categories_name_ci ON categories (lower(name))",
    "CREATE UNIQUE INDEX IF NOT EXISTS uq_suppliers_name_ci ON suppliers (lower(name))",
)


async def init_tables(engine: AsyncEngine, case_insensitive_names: bool = False):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        if case_insensitive_names:
            for statement in CASE_INSENSITIVE_NAME_INDEXES:
                await conn.execute(text(statement))

    logger.info(
        "tables_initialized",
        extra={"tables": sorted(Base.metadata.tables), "case_insensitive_names": case_insensitive_names},
    )
