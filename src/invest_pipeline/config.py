"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads the input paths, output locations and period boundaries from the
environment (a `.env` file at the project root is loaded first).
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os

from dotenv import load_dotenv

from invest_pipeline.aggregate.periods import DEFAULT_BOUNDARIES, Period, parse_boundaries

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    """Container for pipeline configuration read from the environment.

    Attributes:
        announcements_csv: Primary announcements table.
        state_investment_csv: Auxiliary state → total investment table.
        state_jobs_csv: Auxiliary state → total jobs table.
        report_dir: Directory receiving rendered charts and maps.
        log_path: Log file written alongside stdout.
        log_level: Name of the root logging level.
        periods: Closed-open date ranges used for period bucketing.
        top_n: Number of industries kept in the top-industries table.
    """
    announcements_csv: Path
    state_investment_csv: Path
    state_jobs_csv: Path
    report_dir: Path
    log_path: Path
    log_level: str
    periods: tuple[Period, ...]
    top_n: int


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if `LOG_LEVEL`, `TOP_N` or `PERIOD_BOUNDARIES` hold
            values that cannot be used.
    """
    log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
    if log_level not in VALID_LOG_LEVELS:
        raise RuntimeError(
            f"LOG_LEVEL must be one of {', '.join(VALID_LOG_LEVELS)} (got {log_level!r})."
        )

    top_n_raw = os.getenv("TOP_N", "10").strip()
    if not top_n_raw.isdigit() or int(top_n_raw) == 0:
        raise RuntimeError(f"TOP_N must be a positive integer (got {top_n_raw!r}).")

    boundaries = os.getenv("PERIOD_BOUNDARIES", DEFAULT_BOUNDARIES)
    try:
        periods = parse_boundaries(boundaries)
    except ValueError as exc:
        raise RuntimeError(
            f"PERIOD_BOUNDARIES is invalid: {exc} "
            "(example: '2021-01-01,2022-01-01,2023-01-01,2025-01-01')."
        ) from exc

    return Settings(
        announcements_csv=Path(os.getenv("INVEST_DATA_CSV", "data/announcements.csv")),
        state_investment_csv=Path(os.getenv("STATE_INVESTMENT_CSV", "data/state_investment.csv")),
        state_jobs_csv=Path(os.getenv("STATE_JOBS_CSV", "data/state_jobs.csv")),
        report_dir=Path(os.getenv("REPORT_DIR", "reports")),
        log_path=Path(os.getenv("LOG_PATH", "logs/pipeline.log")),
        log_level=log_level,
        periods=periods,
        top_n=int(top_n_raw),
    )
