"""Pydantic models used for Clean-layer validation.

These models define the expected schema for a cleaned announcement and for
rows of the auxiliary per-state summary tables.
"""

from __future__ import annotations

from datetime import date
from pydantic import BaseModel, Field, ConfigDict


class InvestmentRecord(BaseModel):
    """Schema for a cleaned investment announcement.

    Every analytical field may be missing (None); a missing value is
    excluded from aggregation rather than rejected here.

    Attributes:
        industry: Sector label used as a grouping key.
        investment_amount: Announced investment, in millions.
        jobs_created: Announced job count.
        announcement_date: Calendar date of the announcement.
        month: ``YYYY/MM`` projection of the announcement date.
        period: Period bucket label of the announcement date.
        state: Two-letter state code or a multi-state sentinel.
        latitude: Optional latitude in degrees.
        longitude: Optional longitude in degrees.
    """
    model_config = ConfigDict(extra="ignore")
    industry: str | None = None
    investment_amount: float | None = Field(default=None, ge=0)
    jobs_created: float | None = Field(default=None, ge=0)
    announcement_date: date | None = None
    month: str | None = Field(default=None, pattern=r"^\d{4}/\d{2}$")
    period: str | None = None
    state: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)


class StateTotal(BaseModel):
    """One row of an auxiliary state → total table."""
    model_config = ConfigDict(extra="forbid")
    state: str = Field(..., min_length=1)
    total: float | None
