"""Cleaning and normalization utilities.

This module contains transformations that are applied partition-wise using
Dask. The output is a Dask DataFrame whose schema is stable and suitable for
Pydantic validation and for the Gold aggregations.
"""
from __future__ import annotations

import pandas as pd
import dask.dataframe as dd
import logging
from typing import Any, Sequence

from invest_pipeline.aggregate.periods import Period, classify_period
from invest_pipeline.clean.coerce import DATE_FORMAT, MONTH_FORMAT, coerce_numeric

log = logging.getLogger(__name__)

REQUIRED_COLUMNS = ("industry", "investment_amount", "jobs_created", "announcement_date", "state")
OPTIONAL_NUMERIC = ("latitude", "longitude")
NUMERIC_COLUMNS = ("investment_amount", "jobs_created") + OPTIONAL_NUMERIC
LABEL_COLUMNS = ("industry", "state")


def _blank_to_missing(series: pd.Series) -> pd.Series:
    """Replace empty / whitespace-only labels with a missing value."""
    text = series.astype("string").str.strip()
    blank = text.fillna("").eq("")
    return series.astype(object).mask(blank, None)


def clean_raw_ddf(ddf: Any, periods: Sequence[Period] = ()) -> Any:
    """Clean the raw announcements table.

    Coerces numeric fields, parses month/day/year dates, derives the
    ``month`` and ``period`` grouping keys and marks blank labels as missing.
    Unusable values become missing; no row is dropped here.

    Args:
        ddf: Dask DataFrame from `read_announcements` (canonical columns).
        periods: Closed-open date ranges used to derive ``period``.

    Returns:
        Transformed Dask DataFrame with a stable schema for downstream steps.

    Raises:
        ValueError: if a required column is absent.
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in ddf.columns]
    if missing:
        raise ValueError(f"Announcements table is missing required columns: {missing}. Found: {list(ddf.columns)}")

    log.info("Starting clean_raw_ddf transformation")
    periods = tuple(periods)

    def _clean_partition(pdf: pd.DataFrame) -> pd.DataFrame:
        """Partition-level cleaning function applied via map_partitions.

        Args:
            pdf: Pandas DataFrame for the partition.

        Returns:
            Cleaned Pandas DataFrame.
        """
        pdf = pdf.copy()

        # -----------------------------
        # Labels
        # -----------------------------
        for col in LABEL_COLUMNS:
            pdf[col] = _blank_to_missing(pdf[col])

        # -----------------------------
        # Numeric fields
        # -----------------------------
        for col in NUMERIC_COLUMNS:
            if col in pdf.columns:
                pdf[col] = pdf[col].astype(object).map(coerce_numeric).astype("float64")
            else:
                pdf[col] = pd.Series(float("nan"), index=pdf.index, dtype="float64")

        # -----------------------------
        # Dates and derived keys
        # -----------------------------
        raw_dates = pdf["announcement_date"].astype("string").str.strip()
        pdf["announcement_date"] = pd.to_datetime(raw_dates, format=DATE_FORMAT, errors="coerce")
        pdf["month"] = pdf["announcement_date"].dt.strftime(MONTH_FORMAT).astype(object)
        pdf["month"] = pdf["month"].where(pdf["announcement_date"].notna(), None)
        pdf["period"] = pdf["announcement_date"].map(lambda d: classify_period(d, periods)).astype(object)

        return pdf

    meta = _clean_partition(ddf._meta)
    return ddf.map_partitions(_clean_partition, meta=meta)


def complete_rows(ddf: Any, fields: Sequence[str]) -> Any:
    """Keep rows in which every listed field is present.

    Frame-level counterpart of `filter_complete`; used before drawing
    anything that cannot place a missing value (e.g. map coordinates).
    """
    return ddf.dropna(subset=list(fields))
