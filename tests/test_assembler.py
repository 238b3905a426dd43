import pytest

from statsapi.core import schemas
from statsapi.core.exceptions import MalformedDirectiveError, QueryExecutionError
from statsapi.core.stats.assembler import assemble


BY_EVENT = schemas.RawResult(
    headers=["Event", "Name"],
    content=[["333", "Alice"], ["222", "Bob"], ["333", "Carol"]],
)
COUNTS = schemas.RawResult(headers=["Country", "Count"], content=[["BR", "10"]])


@pytest.fixture
def fake_executor(executor):
    executor.results.update({"by event": BY_EVENT, "counts": COUNTS})
    return executor


@pytest.mark.asyncio
async def test_assemble_keeps_query_and_partition_order(fake_executor):
    request = schemas.StatisticsRequest(
        title="Mixed",
        explanation="Two queries",
        group_name="Results",
        display_mode=schemas.DisplayMode.SELECTOR,
        queries=[
            schemas.StatisticsGroupRequest(sql_query="counts", keys=["Countries"]),
            schemas.StatisticsGroupRequest(sql_query="by event", key_column_index=0),
        ],
    )

    document = await assemble(request, fake_executor)

    assert fake_executor.executed == ["counts", "by event"]
    assert [g.keys for g in document.statistics] == [["Countries"], ["333"], ["222"]]
    assert document.title == "Mixed"
    assert document.explanation == "Two queries"
    assert document.group_name == "Results"
    assert document.display_mode == schemas.DisplayMode.SELECTOR


@pytest.mark.asyncio
async def test_assemble_defaults_display_mode(fake_executor):
    request = schemas.StatisticsRequest(
        title="Counts", queries=[schemas.StatisticsGroupRequest(sql_query="counts")]
    )

    document = await assemble(request, fake_executor)

    assert document.display_mode == schemas.DisplayMode.DEFAULT


@pytest.mark.asyncio
async def test_assemble_stops_at_first_failing_query(fake_executor):
    request = schemas.StatisticsRequest(
        title="Broken",
        queries=[
            schemas.StatisticsGroupRequest(sql_query="counts"),
            schemas.StatisticsGroupRequest(sql_query="missing table"),
            schemas.StatisticsGroupRequest(sql_query="by event"),
        ],
    )

    with pytest.raises(QueryExecutionError):
        await assemble(request, fake_executor)

    assert fake_executor.executed == ["counts", "missing table"]


@pytest.mark.asyncio
async def test_assemble_propagates_malformed_directive(fake_executor):
    request = schemas.StatisticsRequest(
        title="Bad key",
        queries=[schemas.StatisticsGroupRequest(sql_query="counts", key_column_index=5)],
    )

    with pytest.raises(MalformedDirectiveError):
        await assemble(request, fake_executor)
