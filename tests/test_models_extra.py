from __future__ import annotations

from datetime import date

import pandas as pd
import pytest
from pydantic import ValidationError

from invest_pipeline.clean.validate import validate_partition
from invest_pipeline.models import InvestmentRecord, StateTotal


def test_investment_record_validates() -> None:
    rec = {
        "industry": "EV",
        "investment_amount": 100.0,
        "jobs_created": 400.0,
        "announcement_date": date(2021, 11, 6),
        "month": "2021/11",
        "period": "early",
        "state": "GA",
        "latitude": 33.7,
        "longitude": -84.4,
        "address": "ignored",
    }
    m = InvestmentRecord.model_validate(rec)
    assert m.month == "2021/11"


def test_investment_record_allows_missing_fields() -> None:
    m = InvestmentRecord.model_validate({"industry": "EV"})
    assert m.investment_amount is None
    assert m.announcement_date is None


def test_investment_record_rejects_out_of_range_latitude() -> None:
    with pytest.raises(ValidationError):
        InvestmentRecord.model_validate({"industry": "EV", "latitude": 120.0})


def test_state_total_requires_state() -> None:
    with pytest.raises(ValidationError):
        StateTotal.model_validate({"state": "", "total": 1.0})


def test_validate_partition_counts_rejected_rows(announcements) -> None:
    good, bad = validate_partition(announcements.compute())
    assert (len(good), bad) == (4, 0)
    assert good[0]["announcement_date"] == date(2021, 11, 6)
    assert good[1]["investment_amount"] is None


def test_validate_partition_rejects_negative_amount() -> None:
    pdf = pd.DataFrame([
        {"industry": "EV", "investment_amount": -5.0, "latitude": float("nan")},
        {"industry": "EV", "investment_amount": 5.0, "latitude": float("nan")},
    ])
    good, bad = validate_partition(pdf)
    assert (len(good), bad) == (1, 1)
