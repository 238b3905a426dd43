"""
BATCH MODULE - Statistics requests declared as YAML files

Every file in the request directory holds one StatisticsRequest:

    title: Best podiums
    groupName: Results
    displayMode: SELECTOR
    queries:
      - sqlQuery: select ...
        keyColumnIndex: 0
"""

import logging
from pathlib import Path
from typing import List

import yaml
from pydantic import ValidationError

from statsapi.core import schemas
from statsapi.core.exceptions import InvalidRequestFileError, NotFoundError

logger = logging.getLogger(__name__)

REQUEST_FILE_SUFFIX = ".yml"


def list_request_files(request_dir: Path) -> List[Path]:
    """All request files of the directory, sorted by name."""
    if not request_dir.is_dir():
        logger.warning(f"Statistics request directory {request_dir} does not exist")
        return []
    return sorted(request_dir.glob(f"*{REQUEST_FILE_SUFFIX}"))


def find_request_file(request_dir: Path, filename: str) -> Path:
    """
    Resolve `<filename>.yml` inside the request directory.

    Raises:
        NotFoundError: no such file, or the name points outside the directory.
    """
    path = request_dir / f"{filename}{REQUEST_FILE_SUFFIX}"
    if path.parent.resolve() != request_dir.resolve() or not path.is_file():
        raise NotFoundError(f"Resource {filename} not found")
    return path


def load_request(path: Path) -> schemas.StatisticsRequest:
    """
    Read one YAML file into a StatisticsRequest.

    Raises:
        InvalidRequestFileError: not valid YAML or not a valid request.
    """
    try:
        with path.open(encoding="utf-8") as stream:
            content = yaml.safe_load(stream)
        return schemas.StatisticsRequest.model_validate(content or {})
    except (yaml.YAMLError, ValidationError) as error:
        raise InvalidRequestFileError(
            f"File {path.name} is not a valid statistics request: {error}"
        ) from error
