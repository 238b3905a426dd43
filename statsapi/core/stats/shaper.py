"""
SHAPER MODULE - Turn one raw query result into statistic groups

Data Flow:
    directive + raw result (headers, rows)
        ↓
    no key column  → one group, rows untouched
    key column i   → one group per distinct value of column i (first-seen order),
                     column i removed from every row
        ↓
    list of StatisticGroup

Headers are never narrowed, even when the key column is removed from the rows.
"""

from typing import Dict, List, Optional

from statsapi.core import schemas
from statsapi.core.exceptions import MalformedDirectiveError
from statsapi.core.stats.text import split_dropping_trailing


def select_headers(
    directive: schemas.StatisticsGroupRequest, raw_headers: List[str]
) -> List[str]:
    # First option is the headers provided in the directive, then the query ones
    if directive.headers is not None:
        return list(directive.headers)
    return list(raw_headers)


def build_group(
    directive: schemas.StatisticsGroupRequest,
    keys: List[str],
    content: List[List[Optional[str]]],
    raw_headers: List[str],
) -> schemas.StatisticGroup:
    return schemas.StatisticGroup(
        keys=keys,
        headers=select_headers(directive, raw_headers),
        content=content,
        explanation=directive.explanation,
        show_positions=directive.show_positions,
        position_tie_breaker_index=directive.position_tie_breaker_index,
        sql_query_custom=directive.sql_query_custom,
    )


def split_keys(key: str) -> List[str]:
    """
    Split a key cell on commas into label parts.

    Trailing empty parts are dropped ("a,b," → ["a", "b"]) while a value
    without any comma is kept whole, even when empty.
    """
    return split_dropping_trailing(key, ",")


def partition_by_key_column(
    rows: List[List[Optional[str]]], key_column_index: int
) -> Dict[str, List[List[Optional[str]]]]:
    """
    Bucket rows by the value of one column, dropping that column from each row.

    Dicts keep insertion order, so buckets come out in first-seen order.

    Raises:
        MalformedDirectiveError: a row has no such column or its value is null.
    """
    partitions: Dict[str, List[List[Optional[str]]]] = {}

    for position, row in enumerate(rows):
        if key_column_index >= len(row):
            raise MalformedDirectiveError(
                f"Key column {key_column_index} does not exist in row {position} "
                f"({len(row)} columns)"
            )

        key = row[key_column_index]
        if key is None:
            raise MalformedDirectiveError(
                f"Key column {key_column_index} is null in row {position}"
            )

        remaining = row[:key_column_index] + row[key_column_index + 1 :]
        partitions.setdefault(key, []).append(remaining)

    return partitions


def shape(
    directive: schemas.StatisticsGroupRequest, raw_result: schemas.RawResult
) -> List[schemas.StatisticGroup]:
    """
    Shape the result of one directive into statistic groups.

    Args:
        directive: The query directive that produced the result.
        raw_result: Headers and rows returned by the data source.

    Returns:
        One group when the directive has no key column, otherwise one group
        per distinct key value. Multi-part keys are written comma separated
        in the key column ("3x3x3,Single" → ["3x3x3", "Single"]).

    Example:
        groups = shape(directive, executor_result)
    """
    if directive.key_column_index is None:
        keys = list(directive.keys) if directive.keys else []
        return [
            build_group(
                directive,
                keys,
                [list(row) for row in raw_result.content],
                raw_result.headers,
            )
        ]

    partitions = partition_by_key_column(
        raw_result.content, directive.key_column_index
    )

    return [
        build_group(directive, split_keys(key), rows, raw_result.headers)
        for key, rows in partitions.items()
    ]
