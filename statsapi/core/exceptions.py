"""
Domain errors raised by the statistics service.

StatisticsError (base)
├── NotFoundError            stored document or batch file does not exist
├── MalformedDirectiveError  key column missing from a result row
├── InvalidTitleError        title yields an empty path
├── QueryExecutionError      the data source rejected or failed a query
└── InvalidRequestFileError  batch YAML file is not a valid request

The HTTP layer maps these in statsapi/main.py.
"""


class StatisticsError(Exception):
    """Base class for every error of the statistics service."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(StatisticsError):
    pass


class MalformedDirectiveError(StatisticsError):
    pass


class InvalidTitleError(StatisticsError):
    pass


class QueryExecutionError(StatisticsError):
    def __init__(self, message: str, sql_query: str):
        super().__init__(message)
        self.sql_query = sql_query


class InvalidRequestFileError(StatisticsError):
    pass
