from typing import Annotated

from fastapi import APIRouter, Depends, Query, Path as FastAPIPath

from homegate import schemas
from homegate.api_v1.deps import get_dashboard_state
from homegate.api_v1.endpoints.day import DATE_PATTERN
from homegate.processing.dashboard import DashboardState

router = APIRouter()

StateDep = Annotated[DashboardState, Depends(get_dashboard_state)]

ERROR_RESPONSES = {400: {"model": schemas.HTTPError}, 500: {"model": schemas.HTTPError}}


@router.get("", response_model=schemas.DashboardView)
def read_current_dashboard(state: StateDep):
    """Get the dashboard for the currently displayed day."""
    return state.current()


@router.post("/navigate", response_model=schemas.DashboardView, responses=ERROR_RESPONSES)
def navigate_dashboard(
    state: StateDep,
    days: int = Query(1, description="Days to move; negative moves back.", ge=-3650, le=3650)
):
    """Move the displayed day and return the regenerated dashboard."""
    return state.navigate(days)


@router.put("/{date_string}", response_model=schemas.DashboardView, responses=ERROR_RESPONSES)
def show_dashboard_day(
    state: StateDep,
    date_string: str = FastAPIPath(..., description="Date in YYYY-MM-DD format.", pattern=DATE_PATTERN)
):
    """Jump the displayed day to a specific date."""
    return state.show(date_string)


@router.get("/status", response_model=schemas.DashboardStatus)
def read_status(state: StateDep):
    """Compact quota status of the displayed day."""
    return state.status()
