from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends, status

from statsapi.api.dependencies import service_dep
from statsapi.core import schemas
from statsapi.core.security import validate_admin_role

router = APIRouter(prefix="/statistics", tags=["Statistics"])

admin_dep = Annotated[schemas.TokenData, Depends(validate_admin_role)]


@router.get("/list", response_model=schemas.StatisticsList)
async def list_statistics(service: service_dep, term: Optional[str] = None):
    """
    Catalog of stored statistics grouped by group name.
    Optional term filters on title or group name.
    """
    return await service.list(term)


@router.get("/list/{path}", response_model=schemas.StatisticsResponse)
async def get_statistic(path: str, service: service_dep):
    return await service.get_statistic(path)


@router.post(
    "/create",
    response_model=schemas.StatisticsResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_statistics(
    document: schemas.StatisticsDocument,
    service: service_dep,
    current_user: admin_dep,
):
    """Save an already shaped document."""
    return await service.create(document)


@router.post(
    "/from-sql",
    response_model=schemas.StatisticsResponse,
    status_code=status.HTTP_201_CREATED,
)
async def sql_to_statistics(
    request: schemas.StatisticsRequest,
    service: service_dep,
    current_user: admin_dep,
):
    """Run the queries of the request and save the shaped result."""
    return await service.sql_to_statistics(request)


@router.post(
    "/generate-from-sql",
    response_model=List[schemas.ControlItem],
)
async def generate_all_from_sql(service: service_dep, current_user: admin_dep):
    """Generate every statistic declared in the request directory."""
    generated = await service.generate_all_from_sql()
    return [
        schemas.ControlItem(
            title=item.title, path=item.path, group_name=item.group_name
        )
        for item in generated
    ]


@router.post(
    "/generate-from-sql/{filename}",
    response_model=schemas.StatisticsResponse,
)
async def generate_from_sql(
    filename: str, service: service_dep, current_user: admin_dep
):
    return await service.generate_from_sql(filename)


@router.delete("", status_code=status.HTTP_200_OK)
async def delete_all_statistics(service: service_dep, current_user: admin_dep):
    deleted = await service.delete_all()
    return {"deleted": deleted}
