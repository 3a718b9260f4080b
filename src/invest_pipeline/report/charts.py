"""Altair chart builders for the Gold tables.

Every builder takes a plain ``key -> value`` mapping or a small pandas Gold
frame and returns an `alt.Chart`; `write_chart` saves any chart as a
standalone HTML file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Hashable, Mapping

import altair as alt
import pandas as pd

log = logging.getLogger(__name__)


def mapping_frame(mapping: Mapping[Hashable, float | None], key: str, value: str) -> pd.DataFrame:
    """Turn a ``key -> value`` mapping into a two-column frame, dropping undefined values."""
    pdf = pd.DataFrame(list(mapping.items()), columns=[key, value])
    return pdf.dropna(subset=[value])


def bar_chart(
    mapping: Mapping[Hashable, float | None],
    key: str,
    value: str,
    title: str,
    value_title: str | None = None,
) -> alt.Chart:
    """Return a bar chart of `mapping`, sorted descending by value.

    Args:
        mapping: Aggregate produced by the Gold layer.
        key: Field name for the category axis.
        value: Field name for the value axis.
        title: Chart title.
        value_title: Optional value axis title (defaults to `value`).
    """
    pdf = mapping_frame(mapping, key, value)
    return (
        alt.Chart(pdf, title=title)
        .mark_bar()
        .encode(
            x=alt.X(f"{key}:N", sort=alt.SortField(value, order="descending"), title=None),
            y=alt.Y(f"{value}:Q", title=value_title or value),
            tooltip=[f"{key}:N", alt.Tooltip(f"{value}:Q", format=",.1f")],
        )
        .properties(height=320)
    )


def monthly_line_chart(monthly: pd.DataFrame, title: str = "Announced investment by month") -> alt.Chart:
    """Return a line chart of the monthly Gold table.

    Args:
        monthly: Frame with `month` (``YYYY/MM``), `total_investment` and
            `announcements` columns, as built by `gold_investment_by_month`.
        title: Chart title.
    """
    pdf = monthly.copy()
    pdf["month_start"] = pd.to_datetime(pdf["month"], format="%Y/%m")
    return (
        alt.Chart(pdf, title=title)
        .mark_line(point=True)
        .encode(
            x=alt.X("month_start:T", title="Month"),
            y=alt.Y("total_investment:Q", title="Investment ($M)"),
            tooltip=["month:N", "total_investment:Q", "announcements:Q"],
        )
        .properties(height=320)
    )


def period_bar_chart(periods: pd.DataFrame, title: str = "Announcements by period") -> alt.Chart:
    """Return a bar chart of the period Gold table, kept in period order."""
    order = list(periods["period"])
    return (
        alt.Chart(periods, title=title)
        .mark_bar()
        .encode(
            x=alt.X("period:N", sort=order, title=None),
            y=alt.Y("announcements:Q", title="Announcements"),
            tooltip=["period:N", "start:N", "end:N", "announcements:Q", "total_investment:Q"],
        )
        .properties(height=320)
    )


def write_chart(chart: alt.TopLevelMixin, path: Path) -> Path:
    """Save `chart` as a standalone HTML file and return its path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    chart.save(str(path), format="html")
    log.info("Saved chart: %s", path)
    return path
