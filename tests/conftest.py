import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy import delete
from sqlalchemy.pool import NullPool
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from statsapi.api.dependencies import get_query_executor
from statsapi.core import models, schemas
from statsapi.core.database import Base, get_db
from statsapi.core.exceptions import QueryExecutionError
from statsapi.core.security import create_access_token
from statsapi.main import app

# Force to use a test db for tests
TEST_DATABASE_URL = "sqlite+aiosqlite:///./statistics_test.db"

# Create an engine and session (workers) factory
test_engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=NullPool)
TestingSessionLocal = async_sessionmaker(
    test_engine, class_=AsyncSession, expire_on_commit=False
)


class FakeQueryExecutor:
    """In-memory data source: maps SQL text to a canned result."""

    def __init__(self, results=None):
        self.results = dict(results or {})
        self.executed = []

    async def execute(self, sql_query: str) -> schemas.RawResult:
        self.executed.append(sql_query)
        if sql_query not in self.results:
            raise QueryExecutionError(f"Unknown query: {sql_query}", sql_query)
        return self.results[sql_query]


# Create a db every time test file runs and drop the db after tests are done
@pytest_asyncio.fixture(scope="session", autouse=True)
async def set_up_db():
    async with test_engine.begin() as conn:
        # Create all tables
        await conn.run_sync(Base.metadata.create_all)
    yield  # Tests happens here
    async with test_engine.begin() as conn:
        # Drop tests db once we are done
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


# Session for one test, stored statistics are wiped afterwards
@pytest_asyncio.fixture(scope="function")
async def db_session():
    async with TestingSessionLocal() as session:
        yield session
        await session.rollback()
        await session.execute(delete(models.Statistics))
        await session.commit()


@pytest.fixture
def executor():
    return FakeQueryExecutor()


# Client
@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession, executor: FakeQueryExecutor):
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_query_executor] = lambda: executor

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


# Token for user
@pytest.fixture
def auth_headers_user():
    token = create_access_token({"user_id": 1, "role": "user"})
    return {"Authorization": f"Bearer {token}"}


# Token for admin
@pytest.fixture
def auth_headers_admin():
    token = create_access_token({"user_id": 2, "role": "admin"})
    return {"Authorization": f"Bearer {token}"}
