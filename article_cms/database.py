from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import declarative_base
from article_cms.config import settings
import logging

logger = logging.getLogger(__name__)

DATABASE_URL = settings.database_url


def build_engine(database_url: str, environment: str = "development"):
    # SQLite drivers reject pool sizing arguments
    if database_url.startswith("sqlite"):
        return create_async_engine(database_url, echo=settings.debug)

    if environment == "production":
        return create_async_engine(
            database_url,
            pool_size=20,
            max_overflow=50,
            pool_timeout=60,
            pool_recycle=1800,
        )
    return create_async_engine(
        database_url,
        echo=settings.debug,
        pool_size=10,
        max_overflow=20,
        pool_timeout=30,
    )


engine = build_engine(DATABASE_URL, settings.environment)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    autoflush=False,
    expire_on_commit=False,
)

Base = declarative_base()


async def get_db():
    logger.debug("Opening database session...")
    async with AsyncSessionLocal() as db:
        try:
            yield db
        except Exception as e:
            logger.error(f"Database session error: {e}")
            raise
        finally:
            await db.close()
            logger.debug("Database session closed.")


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Session factory for operations that issue independent queries concurrently."""
    return AsyncSessionLocal


async def init_models() -> None:
    # Register the mapped tables on Base.metadata before creating them
    import article_cms.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
