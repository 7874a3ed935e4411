# quiz_admin/utils/db.py
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import NullPool
from quiz_admin.utils.config import settings

engine_options = {}
if settings.database_url.startswith("sqlite"):
    # SQLite file connections are opened per session; nothing is shared across event loops.
    engine_options["poolclass"] = NullPool

# Create an async engine
engine = create_async_engine(
    settings.database_url,
    echo=False,  # Set to True to see SQL queries
    **engine_options,
)

# Create a session factory
AsyncSessionLocal = sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

async def create_tables():
    """Creates the tables for every mapped model if they don't exist."""
    # Imported here so every table is registered on the metadata.
    from quiz_admin.models.user import Base
    from quiz_admin.models import quiz_question  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

async def drop_tables():
    """Drops every mapped table. This deletes all data."""
    from quiz_admin.models.user import Base
    from quiz_admin.models import quiz_question  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
