from datetime import datetime
from typing import Optional, List
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# Payloads are exchanged in camelCase (sqlQuery, keyColumnIndex, ...)
# but snake_case is accepted as well
class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =========================
# Enums
# =========================
class DisplayMode(str, Enum):
    DEFAULT = "DEFAULT"
    SELECTOR = "SELECTOR"


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"


# =========================
# AUTH
# =========================
class TokenData(BaseModel):
    user_id: str
    role: UserRole = UserRole.USER


# =========================
# DATABASE QUERY
# =========================
class DatabaseQueryRequest(CamelModel):
    sql_query: str = Field(min_length=1)


class RawResult(CamelModel):
    """Headers and rows exactly as returned by the data source."""

    headers: List[str] = []
    content: List[List[Optional[str]]] = []


# =========================
# STATISTICS REQUEST
# =========================
class StatisticsGroupRequest(CamelModel):
    """One SQL query of a request plus how its result should be presented."""

    sql_query: str = Field(min_length=1)
    keys: Optional[List[str]] = None
    key_column_index: Optional[int] = Field(default=None, ge=0)
    headers: Optional[List[str]] = None
    explanation: Optional[str] = None
    show_positions: Optional[bool] = None
    position_tie_breaker_index: Optional[int] = None
    sql_query_custom: Optional[str] = None


class StatisticsRequest(CamelModel):
    title: str
    explanation: Optional[str] = None
    display_mode: Optional[DisplayMode] = None
    group_name: Optional[str] = None
    queries: List[StatisticsGroupRequest] = []


# =========================
# STATISTICS DOCUMENT
# =========================
class StatisticGroup(CamelModel):
    keys: List[str] = []
    headers: List[str] = []
    content: List[List[Optional[str]]] = []
    explanation: Optional[str] = None
    show_positions: Optional[bool] = None
    position_tie_breaker_index: Optional[int] = None
    sql_query_custom: Optional[str] = None


class StatisticsDocument(CamelModel):
    title: str
    explanation: Optional[str] = None
    display_mode: Optional[DisplayMode] = None
    group_name: Optional[str] = None
    statistics: List[StatisticGroup] = []


class StatisticsResponse(StatisticsDocument):
    path: str
    last_modified: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


# =========================
# LISTING
# =========================
class ControlItem(CamelModel):
    """Catalog projection of a stored document."""

    title: str
    path: str
    group_name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class StatisticsListGroup(CamelModel):
    group: str
    statistics: List[ControlItem] = []


class StatisticsList(CamelModel):
    list: List[StatisticsListGroup] = []
