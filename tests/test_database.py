import pytest
from httpx import AsyncClient

from statsapi.core import schemas
from statsapi.core.exceptions import QueryExecutionError
from statsapi.core.stats.executor import SqlQueryExecutor


@pytest.mark.asyncio
async def test_sql_executor_returns_strings(db_session):
    """Every cell comes back as text, nulls stay null"""
    executor = SqlQueryExecutor(db_session)

    result = await executor.execute("select 1 as one, 'a' as letter, null as missing")

    assert result.headers == ["one", "letter", "missing"]
    assert result.content == [["1", "a", None]]


@pytest.mark.asyncio
async def test_sql_executor_wraps_database_errors(db_session):
    executor = SqlQueryExecutor(db_session)

    with pytest.raises(QueryExecutionError) as error:
        await executor.execute("select * from table_that_does_not_exist")

    assert error.value.sql_query == "select * from table_that_does_not_exist"


@pytest.mark.asyncio
async def test_query_endpoint(client: AsyncClient, executor, auth_headers_admin):
    executor.results["select 1"] = schemas.RawResult(headers=["one"], content=[["1"]])

    response = await client.post(
        "/database/query", json={"sqlQuery": "select 1"}, headers=auth_headers_admin
    )

    assert response.status_code == 200
    assert response.json() == {"headers": ["one"], "content": [["1"]]}


@pytest.mark.asyncio
async def test_query_endpoint_requires_admin(client: AsyncClient, auth_headers_user):
    response = await client.post(
        "/database/query", json={"sqlQuery": "select 1"}, headers=auth_headers_user
    )

    assert response.status_code == 403
