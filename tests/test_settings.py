import pytest
from pydantic import ValidationError

from homegate.core.settings import ActivityBand, Settings


def test_defaults():
    settings = Settings()
    assert settings.QUOTA_LIMIT_MINUTES == 720
    assert settings.QUOTA_POLICY is None
    assert [(b.start_hour, b.end_hour, b.probability) for b in settings.ACTIVITY_BANDS] == [
        (0, 7, 0.0), (8, 18, 0.7), (19, 23, 0.4),
    ]


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("HOMEGATE_QUOTA_LIMIT_MINUTES", "600")
    monkeypatch.setenv("HOMEGATE_REFERENCE_DATE", "2025-01-06")
    monkeypatch.setenv("HOMEGATE_ACTIVITY_BANDS", '[{"start_hour": 0, "end_hour": 23, "probability": 0.5}]')
    monkeypatch.setenv("HOMEGATE_QUOTA_POLICY", "  ")

    settings = Settings()
    assert settings.QUOTA_LIMIT_MINUTES == 600
    assert settings.REFERENCE_DATE.isoformat() == "2025-01-06"
    assert settings.ACTIVITY_BANDS == [ActivityBand(start_hour=0, end_hour=23, probability=0.5)]
    assert settings.QUOTA_POLICY is None


def test_quota_must_be_positive(monkeypatch):
    monkeypatch.setenv("HOMEGATE_QUOTA_LIMIT_MINUTES", "0")
    with pytest.raises(ValidationError):
        Settings()


@pytest.mark.parametrize("kwargs", [
    {"start_hour": 9, "end_hour": 8, "probability": 0.5},
    {"start_hour": 0, "end_hour": 24, "probability": 0.5},
    {"start_hour": 0, "end_hour": 5, "probability": 1.5},
])
def test_invalid_activity_bands(kwargs):
    with pytest.raises(ValidationError):
        ActivityBand(**kwargs)


@pytest.mark.parametrize("bands", [
    [{"start_hour": 8, "end_hour": 18, "probability": 0.7}, {"start_hour": 18, "end_hour": 23, "probability": 0.4}],
    [{"start_hour": 0, "end_hour": 23, "probability": 0.1}, {"start_hour": 12, "end_hour": 12, "probability": 1.0}],
])
def test_overlapping_activity_bands_are_rejected(bands):
    with pytest.raises(ValidationError):
        Settings(ACTIVITY_BANDS=bands)


def test_adjacent_activity_bands_are_accepted():
    settings = Settings(ACTIVITY_BANDS=[
        {"start_hour": 19, "end_hour": 23, "probability": 0.4},
        {"start_hour": 8, "end_hour": 18, "probability": 0.7},
    ])
    assert len(settings.ACTIVITY_BANDS) == 2
