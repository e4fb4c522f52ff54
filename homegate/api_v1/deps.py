import logging
import threading
from datetime import date
from typing import Optional

from homegate.core.settings import settings
from homegate.processing.dashboard import DashboardService, DashboardState

log = logging.getLogger(__name__)

_state: Optional[DashboardState] = None
_state_lock = threading.Lock()


def get_dashboard_service() -> DashboardService:
    """Dependency returning a service bound to the app settings."""
    return DashboardService(settings)


def get_dashboard_state() -> DashboardState:
    """
    Dependency returning the process-wide displayed day.
    Created on first use from REFERENCE_DATE, or today's date when unset.
    """
    global _state
    with _state_lock:
        if _state is None:
            initial_day = settings.REFERENCE_DATE or date.today()
            log.info(f"Initialising dashboard state for {initial_day}")
            _state = DashboardState(DashboardService(settings), initial_day)
        return _state