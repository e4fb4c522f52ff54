import json

import pytest

from homegate.cli import main


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    for name in ("HOMEGATE_QUOTA_POLICY", "HOMEGATE_REFERENCE_DATE", "HOMEGATE_QUOTA_LIMIT_MINUTES"):
        monkeypatch.delenv(name, raising=False)


def test_show_prints_timeline(capsys):
    assert main(["show", "--day", "2025-01-06"]) == 0
    out = capsys.readouterr().out
    lines = out.splitlines()
    assert "(2025-01-06)" in lines[0]
    assert "12h 0m" in lines[1]
    timeline = [line for line in lines if line[:2].isdigit() and line[2] == ":"]
    assert len(timeline) == 24
    assert timeline[0] == "00:00 ...."
    assert timeline[23].startswith("23:00 ")
    assert all(set(line[6:]) <= {"*", "."} and len(line[6:]) == 4 for line in timeline)


def test_show_json(capsys):
    assert main(["show", "--day", "2025-01-06", "--quota", "60", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["date"] == "2025-01-06"
    assert data["quota"]["quota_limit_minutes"] == 60
    assert len(data["hours"]) == 24


@pytest.mark.parametrize("day", ["2025-02-30", "20250106", "2025-W02-1"])
def test_show_invalid_day_reports_error(capsys, day):
    assert main(["show", "--day", day]) == 1
    assert capsys.readouterr().out == ""


def test_show_invalid_policy_reports_error(monkeypatch, capsys):
    monkeypatch.setenv("HOMEGATE_QUOTA_POLICY", "sometimes")
    assert main(["show", "--day", "2025-01-06"]) == 1
    assert capsys.readouterr().out == ""


def test_quota_must_be_positive():
    with pytest.raises(SystemExit):
        main(["show", "--quota", "0"])
