from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.orm import DeclarativeBase
from statsapi.core.config import settings

engine = create_async_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)

# Statistics queries run against the data source, which may be another database
query_engine = (
    engine
    if settings.query_database_url == settings.DATABASE_URL
    else create_async_engine(settings.query_database_url, echo=settings.SQL_ECHO)
)

# Talk to the DB through async sessions without refreshes after closed conn to avoid errors in async programming
AsyncSessionLocal = async_sessionmaker(
    bind=engine, class_=AsyncSession, expire_on_commit=False
)

QuerySessionLocal = async_sessionmaker(
    bind=query_engine, class_=AsyncSession, expire_on_commit=False
)


# This is the "Bridge" that gives my routes access to the statistics store
async def get_db():
    async with AsyncSessionLocal() as session:
        yield session


# Session used only to run statistics queries
async def get_query_db():
    async with QuerySessionLocal() as session:
        yield session


async def dispose_engines():
    await engine.dispose()
    if query_engine is not engine:
        await query_engine.dispose()


# All the models are "stored" in the Base class will be processed by the Engine
class Base(DeclarativeBase):
    pass
