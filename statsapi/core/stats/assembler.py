import logging

from statsapi.core import schemas
from statsapi.core.stats import shaper
from statsapi.core.stats.executor import QueryExecutor
from statsapi.core.stats.paths import effective_display_mode

logger = logging.getLogger(__name__)


async def assemble(
    request: schemas.StatisticsRequest, executor: QueryExecutor
) -> schemas.StatisticsDocument:
    """
    Run every query of a request, one after the other, and collect the groups.

    Groups keep the order of the queries and, inside a query, the order
    produced by the shaper. Path and timestamp are not set here.

    Args:
        request: Title, explanation, display mode, group name and queries.
        executor: Where the queries are executed.

    Returns:
        The assembled document.

    Raises:
        QueryExecutionError, MalformedDirectiveError: propagated as is, nothing
        is returned for the queries that already succeeded.
    """
    statistics = []

    for position, directive in enumerate(request.queries):
        logger.info(f"Query {position + 1}/{len(request.queries)} of '{request.title}'")
        raw_result = await executor.execute(directive.sql_query)
        statistics.extend(shaper.shape(directive, raw_result))

    return schemas.StatisticsDocument(
        title=request.title,
        explanation=request.explanation,
        display_mode=effective_display_mode(request.display_mode),
        group_name=request.group_name,
        statistics=statistics,
    )
