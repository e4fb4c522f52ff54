from typing import Annotated

from fastapi import APIRouter, Depends, Path as FastAPIPath

from homegate import schemas
from homegate.api_v1.deps import get_dashboard_service
from homegate.processing.dashboard import DashboardService

router = APIRouter()

ServiceDep = Annotated[DashboardService, Depends(get_dashboard_service)]

DATE_PATTERN = r"^\d{4}-\d{2}-\d{2}$"


@router.get(
    "/{date_string}",
    response_model=schemas.DashboardView,
    responses={400: {"model": schemas.HTTPError}, 500: {"model": schemas.HTTPError}},
)
def read_day_data(
    service: ServiceDep,
    date_string: str = FastAPIPath(
        ...,
        description="Date in YYYY-MM-DD format.",
        pattern=DATE_PATTERN
    )
):
    """
    Get the activity timeline and quota usage for a specific day.
    The date string must be in YYYY-MM-DD format.
    """
    return service.build_view(date_string)
