import logging
from typing import Protocol

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from statsapi.core import schemas
from statsapi.core.exceptions import QueryExecutionError

logger = logging.getLogger(__name__)


class QueryExecutor(Protocol):
    """Runs one SQL text against the data source."""

    async def execute(self, sql_query: str) -> schemas.RawResult: ...


def cell_to_string(value):
    if value is None:
        return None
    return str(value)


class SqlQueryExecutor:
    """
    QueryExecutor backed by an SQLAlchemy async session.

    The SQL is sent to the driver as is (no bind parameter parsing), and
    every cell comes back as a string, nulls kept as None.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def execute(self, sql_query: str) -> schemas.RawResult:
        logger.info(f"Executing query: {sql_query}")

        try:
            conn = await self.db.connection()
            result = await conn.exec_driver_sql(sql_query)
            headers = list(result.keys())
            content = [[cell_to_string(cell) for cell in row] for row in result.all()]
        except SQLAlchemyError as error:
            logger.error(f"Query failed: {error}")
            raise QueryExecutionError(
                f"Query could not be executed: {error}", sql_query
            ) from error

        logger.info(f"Query returned {len(content)} rows")
        return schemas.RawResult(headers=headers, content=content)
