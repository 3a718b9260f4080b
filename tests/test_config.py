from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from invest_pipeline.config import get_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in (
        "INVEST_DATA_CSV", "STATE_INVESTMENT_CSV", "STATE_JOBS_CSV", "REPORT_DIR",
        "LOG_PATH", "LOG_LEVEL", "PERIOD_BOUNDARIES", "TOP_N",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    s = get_settings()
    assert s.announcements_csv == Path("data/announcements.csv")
    assert s.log_level == "INFO"
    assert s.top_n == 10
    assert [p.label for p in s.periods] == ["early", "mid", "late"]
    assert s.periods[0].start == date(2021, 1, 1)


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("INVEST_DATA_CSV", "/tmp/x.csv")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("TOP_N", "3")
    monkeypatch.setenv("PERIOD_BOUNDARIES", "2020-01-01,2021-01-01,2022-01-01,2023-01-01")
    s = get_settings()
    assert s.announcements_csv == Path("/tmp/x.csv")
    assert s.log_level == "DEBUG"
    assert s.top_n == 3
    assert s.periods[-1].end == date(2023, 1, 1)


@pytest.mark.parametrize("name, value", [
    ("PERIOD_BOUNDARIES", "2022-01-01,2021-01-01,2023-01-01,2025-01-01"),
    ("TOP_N", "0"),
    ("TOP_N", "ten"),
    ("LOG_LEVEL", "LOUD"),
])
def test_invalid_settings_raise(monkeypatch, name, value) -> None:
    monkeypatch.setenv(name, value)
    with pytest.raises(RuntimeError):
        get_settings()
