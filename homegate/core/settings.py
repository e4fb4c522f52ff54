# homegate/core/settings.py

from datetime import date
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Define project root to build paths consistently
PROJECT_ROOT = Path(__file__).parent.parent.parent


class ActivityBand(BaseModel):
    """Activation probability for an inclusive range of hours."""
    start_hour: int = Field(..., ge=0, le=23)
    end_hour: int = Field(..., ge=0, le=23)
    probability: float = Field(..., ge=0.0, le=1.0)

    @model_validator(mode='after')
    def check_hour_order(self):
        if self.start_hour > self.end_hour:
            raise ValueError(f"start_hour {self.start_hour} is after end_hour {self.end_hour}")
        return self

    def covers(self, hour: int) -> bool:
        return self.start_hour <= hour <= self.end_hour


def check_bands_disjoint(bands: Sequence[ActivityBand]) -> None:
    """Raise ValueError if any hour is covered by more than one band."""
    ordered = sorted(bands, key=lambda band: band.start_hour)
    for previous, band in zip(ordered, ordered[1:]):
        if band.start_hour <= previous.end_hour:
            raise ValueError(
                f"Activity bands {previous.start_hour}-{previous.end_hour} and "
                f"{band.start_hour}-{band.end_hour} overlap"
            )


DEFAULT_ACTIVITY_BANDS: List[ActivityBand] = [
    ActivityBand(start_hour=0, end_hour=7, probability=0.0),    # night, always idle
    ActivityBand(start_hour=8, end_hour=18, probability=0.7),   # daytime
    ActivityBand(start_hour=19, end_hour=23, probability=0.4),  # evening
]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix='HOMEGATE_',
        env_file=PROJECT_ROOT / '.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    # --- API ---
    API_V1_STR: str = "/api/v1"
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]  # Frontend dev server

    # --- Device ---
    DEVICE_NAME: str = "Sensor-X14"

    # --- Quota ---
    QUOTA_LIMIT_MINUTES: int = Field(default=12 * 60, gt=0)
    QUOTA_POLICY: Optional[str] = None  # e.g. "MO-TH90FR120SA-SU180"
    QUOTA_RESET_LABEL: str = "Resets at 00:00 UTC"

    # --- Interval generation ---
    ACTIVITY_BANDS: List[ActivityBand] = DEFAULT_ACTIVITY_BANDS
    SEED_SALT: str = "homegate"

    # --- Navigation ---
    REFERENCE_DATE: Optional[date] = None  # Falls back to today's date at startup

    # --- Logging ---
    LOG_LEVEL: str = "INFO"

    @field_validator('ACTIVITY_BANDS')
    @classmethod
    def bands_must_not_overlap(cls, v):
        check_bands_disjoint(v)
        return v

    @field_validator('QUOTA_POLICY', mode='before')
    @classmethod
    def blank_policy_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


# Instantiate a single settings object for the whole app
settings = Settings()
