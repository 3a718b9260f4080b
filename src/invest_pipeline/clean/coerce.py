"""Scalar coercion helpers for raw announcement fields.

Every function here is total: unusable input is mapped to ``None`` (the
missing-value marker) instead of raising, so downstream aggregation can
skip it uniformly.
"""

from __future__ import annotations

import math
from typing import Any

import pandas as pd

DATE_FORMAT = "%m/%d/%Y"
MONTH_FORMAT = "%Y/%m"


def coerce_numeric(raw: Any) -> float | None:
    """Parse a raw field as a number.

    Strings are stripped before parsing. Blank text, non-numeric text,
    NaN/NA, infinities and values too large for a float all return None.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError, OverflowError):
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def parse_date(raw: Any) -> pd.Timestamp | None:
    """Parse a month/day/year string into a timestamp, or None if malformed."""
    if not isinstance(raw, str) or not raw.strip():
        return None
    ts = pd.to_datetime(raw.strip(), format=DATE_FORMAT, errors="coerce")
    if pd.isna(ts):
        return None
    return ts


def parse_month(raw: Any) -> str | None:
    """Project a month/day/year string onto a zero-padded ``YYYY/MM`` key.

    ``"11/06/2021"`` becomes ``"2021/11"``; malformed or blank input is None.
    """
    ts = parse_date(raw)
    if ts is None:
        return None
    return ts.strftime(MONTH_FORMAT)
