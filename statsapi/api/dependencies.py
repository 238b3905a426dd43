from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from statsapi.core.database import get_db, get_query_db
from statsapi.core.stats.executor import QueryExecutor, SqlQueryExecutor
from statsapi.core.stats.service import StatisticsService
from statsapi.core.stats.store import StatisticsStore

db_dep = Annotated[AsyncSession, Depends(get_db)]
query_db_dep = Annotated[AsyncSession, Depends(get_query_db)]


def get_query_executor(query_db: query_db_dep) -> QueryExecutor:
    return SqlQueryExecutor(query_db)


def get_statistics_service(
    db: db_dep,
    executor: Annotated[QueryExecutor, Depends(get_query_executor)],
) -> StatisticsService:
    return StatisticsService(executor=executor, store=StatisticsStore(db))


executor_dep = Annotated[QueryExecutor, Depends(get_query_executor)]
service_dep = Annotated[StatisticsService, Depends(get_statistics_service)]
