from pydantic import BaseModel, Field
from typing import Any, List, Literal
from datetime import date, datetime

# --- Base Models & Common ---
class HTTPError(BaseModel):
    detail: Any # Human readable message
    error: str  # Error kind, e.g. 'invalid_date'

# --- Intervals ---
class IntervalView(BaseModel):
    id: int = Field(..., ge=0, le=95)
    hour: int = Field(..., ge=0, le=23)
    quarter: int = Field(..., ge=0, le=3)
    is_active: bool
    timestamp: str = Field(..., json_schema_extra={'example': "08:00"})
    end_time: str = Field(..., json_schema_extra={'example': "08:15"})
    state: Literal["active", "idle"] # Colour state for the timeline cell
    tooltip: str = Field(..., json_schema_extra={'example': "08:00 - 08:15"})
    activity_label: Literal["Active", "Idle"]

class HourRow(BaseModel):
    hour_label: int = Field(..., ge=0, le=23)
    intervals: List[IntervalView]

# --- Quota ---
class QuotaCard(BaseModel):
    used_minutes: int
    quota_limit_minutes: int
    idle_minutes: int
    usage_percentage: int # Unclamped, may exceed 100
    progress_percent: int = Field(..., ge=0, le=100) # Clamped for the progress bar width
    is_over_quota: bool
    status_label: str = Field(..., json_schema_extra={'example': "WITHIN LIMITS"})
    used_display: str = Field(..., json_schema_extra={'example': "8h 0m"})
    limit_display: str = Field(..., json_schema_extra={'example': "12h 0m"})
    idle_display: str = Field(..., json_schema_extra={'example': "16h 0m"})
    reset_label: str

# --- Dashboard ---
class DashboardView(BaseModel):
    date: date
    date_label: str = Field(..., json_schema_extra={'example': "Mon, Jan 6"})
    device_name: str
    quota: QuotaCard
    hours: List[HourRow]
    active_interval_count: int

class DashboardStatus(BaseModel):
    date: date
    used_minutes: int
    quota_limit_minutes: int
    is_over_quota: bool
    generated_at: datetime
