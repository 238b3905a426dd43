"""
PATHS MODULE - Prepare a statistics document for storage

Purpose:
    1. Default the display mode
    2. Derive the URL-safe path from the title ("Top 10 Averages!" → "top-10-averages")
    3. Percent-encode the custom SQL carried by each group
"""

import re
import unicodedata
from typing import Optional
from urllib.parse import quote_plus

from statsapi.core import schemas
from statsapi.core.config import settings
from statsapi.core.exceptions import InvalidTitleError
from statsapi.core.stats.text import split_dropping_trailing

DISALLOWED_CHARACTERS = re.compile(r"[^a-zA-Z0-9 ]")


def effective_display_mode(
    requested: Optional[schemas.DisplayMode],
) -> schemas.DisplayMode:
    if requested is not None:
        return requested
    return settings.DEFAULT_DISPLAY_MODE


def strip_accents(value: str) -> str:
    decomposed = unicodedata.normalize("NFD", value)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def derive_path(title: str) -> str:
    """
    Build the storage path of a document from its title.

    Steps, in this order:
        remove everything but ASCII letters, digits and spaces
        → strip accents → split on " " → join with "-" → lower case

    Empty parts are kept, so a title starting with a space gives a leading
    hyphen (" Foo" → "-foo"). Trailing empty parts are dropped.
    """
    cleaned = strip_accents(DISALLOWED_CHARACTERS.sub("", title))
    return "-".join(split_dropping_trailing(cleaned, " ")).lower()


def encode_custom_sql(sql_query_custom: str) -> str:
    """
    Form-encode custom SQL (UTF-8, space → "+").

    Letters, digits and ". - * _" are left as they are; everything else,
    "~" included, is percent-encoded.
    """
    return quote_plus(sql_query_custom, safe="*", encoding="utf-8").replace(
        "~", "%7E"
    )


def finalize(document: schemas.StatisticsDocument) -> schemas.StatisticsResponse:
    """
    Turn an assembled document into the form that gets stored.

    Raises:
        InvalidTitleError: the title has no letter or digit to build a path from.

    Example:
        response = finalize(await assemble(request, executor))
    """
    path = derive_path(document.title)
    if not any(c.isalnum() for c in path):
        raise InvalidTitleError(
            f"Title {document.title!r} does not produce a valid path"
        )

    statistics = []
    for group in document.statistics:
        group = group.model_copy(deep=True)
        if group.sql_query_custom is not None:
            group.sql_query_custom = encode_custom_sql(group.sql_query_custom)
        statistics.append(group)

    return schemas.StatisticsResponse(
        title=document.title,
        explanation=document.explanation,
        display_mode=effective_display_mode(document.display_mode),
        group_name=document.group_name,
        statistics=statistics,
        path=path,
    )
