from typing import AsyncGenerator

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from libs.common.errors import StorageError
from libs.common.logging import get_logger
from libs.db.config import AsyncSessionLocal

logger = get_logger(__name__)


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that yields an async database session.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def commit_or_raise(db: AsyncSession, action: str) -> None:
    """
    Commit the session, converting driver errors into StorageError.

    The driver message is logged, never returned to the client.
    """
    try:
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error("Database error while %s: %s", action, e)
        raise StorageError() from e
