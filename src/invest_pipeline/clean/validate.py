"""Validation utilities for the Clean layer.

This module validates partition data against the Pydantic `InvestmentRecord`
model after converting pandas missing markers and timestamps into native
Python values.
"""
from __future__ import annotations

import logging
from typing import Any
import pandas as pd
from pydantic import ValidationError

from invest_pipeline.aggregate.grouping import is_missing
from invest_pipeline.models import InvestmentRecord

log = logging.getLogger(__name__)


def validate_partition(pdf: pd.DataFrame) -> tuple[list[dict[str, Any]], int]:
    """Validate a pandas partition of cleaned records using Pydantic.

    NaN / NaT / NA become None and timestamps become dates before
    `InvestmentRecord.model_validate` is applied to each record.

    Args:
        pdf: Pandas DataFrame for the partition.

    Returns:
        A tuple of (list_of_validated_records, bad_count).
    """
    good: list[dict[str, Any]] = []
    bad = 0

    for rec in pdf.to_dict(orient="records"):
        rec = {k: (None if is_missing(v) else v) for k, v in rec.items()}
        if isinstance(rec.get("announcement_date"), pd.Timestamp):
            rec["announcement_date"] = rec["announcement_date"].date()

        try:
            m = InvestmentRecord.model_validate(rec)
            good.append(m.model_dump(mode="python"))
        except ValidationError as exc:
            log.debug("Rejected record %s: %s", rec, exc)
            bad += 1

    return good, bad
