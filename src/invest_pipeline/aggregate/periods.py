"""Coarse period buckets over the announcement window.

A `Period` is a closed-open date range. The analysis window is split into
contiguous periods (by default "early", "mid" and "late") and each
announcement date is assigned to the first period that contains it.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Iterable, Sequence

import pandas as pd

DEFAULT_LABELS = ("early", "mid", "late")
DEFAULT_BOUNDARIES = "2021-01-01,2022-01-01,2023-01-01,2025-01-01"


@dataclass(frozen=True)
class Period:
    """Closed-open date range `[start, end)` with a display label.

    Attributes:
        label: Bucket name used as the grouping key.
        start: First day included in the period.
        end: First day after the period.
    """
    label: str
    start: date
    end: date

    def contains(self, day: date) -> bool:
        return self.start <= day < self.end


def parse_boundaries(text: str, labels: Sequence[str] = DEFAULT_LABELS) -> tuple[Period, ...]:
    """Build contiguous periods from a comma-separated list of ISO dates.

    Args:
        text: ``len(labels) + 1`` dates, e.g. ``"2021-01-01,2022-01-01,..."``.
        labels: Period labels in chronological order.

    Returns:
        Tuple of `Period` objects, one per label.

    Raises:
        ValueError: on unparseable dates, a wrong number of dates, or dates
            that are not strictly increasing.
    """
    parts = [p.strip() for p in text.split(",") if p.strip()]
    if len(parts) != len(labels) + 1:
        raise ValueError(f"expected {len(labels) + 1} boundary dates, got {len(parts)}")

    bounds = [date.fromisoformat(p) for p in parts]
    for lo, hi in zip(bounds, bounds[1:]):
        if not lo < hi:
            raise ValueError(f"boundaries must be strictly increasing ({lo} >= {hi})")

    return tuple(
        Period(label=label, start=lo, end=hi)
        for label, lo, hi in zip(labels, bounds, bounds[1:])
    )


def classify_period(day: Any, periods: Iterable[Period]) -> str | None:
    """Return the label of the first period containing `day`.

    Missing dates (None, NaT) and dates outside every period map to None.
    """
    if day is None or pd.isna(day):
        return None
    if isinstance(day, datetime):
        day = day.date()
    for period in periods:
        if period.contains(day):
            return period.label
    return None
