from typing import Annotated

from fastapi import APIRouter, Depends

from statsapi.api.dependencies import executor_dep
from statsapi.core import schemas
from statsapi.core.security import validate_admin_role

router = APIRouter(prefix="/database", tags=["Database"])

admin_dep = Annotated[schemas.TokenData, Depends(validate_admin_role)]


@router.post("/query", response_model=schemas.RawResult)
async def run_query(
    payload: schemas.DatabaseQueryRequest,
    executor: executor_dep,
    current_user: admin_dep,
):
    """Admin-only: run one SQL query and return its raw headers and rows."""
    return await executor.execute(payload.sql_query)
