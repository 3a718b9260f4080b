"""Gold aggregation functions.

Functions in this module build Gold-layer tables from the Clean layer.
Gold tables are small, Dask-safe outputs that are computed, materialized to
pandas, and handed to the rendering layer.

Expectations:
- Input: a Dask DataFrame produced by `clean_raw_ddf` with columns
  `industry`, `investment_amount`, `jobs_created`, `announcement_date`,
  `month`, `period`, `state`, `latitude`, `longitude`
- Outputs: DataFrames with descriptive columns documented on each function
  docstring.

Missing values never count as zero: sums skip them (a group with only
missing values sums to 0) and means are taken over the reported values only
(a group with none has a NaN mean).
"""
from __future__ import annotations

from typing import Any, Hashable, Sequence
import pandas as pd
import dask.dataframe as dd

from invest_pipeline.aggregate.grouping import is_missing
from invest_pipeline.aggregate.periods import Period

ANALYSIS_FIELDS = (
    "industry",
    "investment_amount",
    "jobs_created",
    "announcement_date",
    "state",
    "latitude",
    "longitude",
)


def _aggregate_by(ddf: Any, key: str, value: str, how: str, name: str) -> Any:
    """Group `value` by `key` and return `key`, `name` and `n_reported` columns.

    `n_reported` counts the non-missing values behind each aggregate.
    """
    out = ddf.groupby(key).agg({value: [how, "count"]})
    out.columns = [name, "n_reported"]
    return out.reset_index()


def _from_pandas(pdf: pd.DataFrame) -> Any:
    return dd.from_pandas(pdf, npartitions=1)


# =========================================================
# INDUSTRY
# =========================================================

def gold_investment_by_industry(ddf: Any) -> Any:
    """Return total announced investment per industry.

    Args:
        ddf: Clean Dask DataFrame with `industry` and `investment_amount`.

    Returns:
        Dask DataFrame with columns: `industry`, `total_investment`, `n_reported`.
    """
    return _aggregate_by(ddf, "industry", "investment_amount", "sum", "total_investment")


def gold_jobs_by_industry(ddf: Any) -> Any:
    """Return total announced jobs per industry.

    Returns:
        Dask DataFrame with columns: `industry`, `total_jobs`, `n_reported`.
    """
    return _aggregate_by(ddf, "industry", "jobs_created", "sum", "total_jobs")


def gold_mean_investment_by_industry(ddf: Any) -> Any:
    """Return the mean announced investment per industry.

    The mean is taken over reported amounts only; an industry without any
    reported amount has a NaN mean and `n_reported == 0`.

    Returns:
        Dask DataFrame with columns: `industry`, `mean_investment`, `n_reported`.
    """
    return _aggregate_by(ddf, "industry", "investment_amount", "mean", "mean_investment")


def gold_top_industries(ddf: Any, top_n: int = 10) -> Any:
    """Return the top N industries by total investment.

    Args:
        ddf: Clean Dask DataFrame.
        top_n: Number of industries to keep (default 10).

    Returns:
        Dask DataFrame with columns: `industry`, `total_investment`, `n_reported`.
    """
    return gold_investment_by_industry(ddf).nlargest(top_n, "total_investment")


# =========================================================
# STATE
# =========================================================

def gold_investment_by_state(ddf: Any) -> Any:
    """Return total announced investment per state label.

    Multi-state / unknown sentinels are kept as their own keys.

    Returns:
        Dask DataFrame with columns: `state`, `total_investment`, `n_reported`.
    """
    return _aggregate_by(ddf, "state", "investment_amount", "sum", "total_investment")


def gold_jobs_by_state(ddf: Any) -> Any:
    """Return total announced jobs per state label.

    Returns:
        Dask DataFrame with columns: `state`, `total_jobs`, `n_reported`.
    """
    return _aggregate_by(ddf, "state", "jobs_created", "sum", "total_jobs")


# =========================================================
# TIME
# =========================================================

def gold_investment_by_month(ddf: Any) -> Any:
    """Return the monthly investment time series in chronological order.

    Rows with an unparseable announcement date have no `month` and are
    excluded.

    Returns:
        Dask DataFrame with columns: `month` (``YYYY/MM``),
        `total_investment`, `announcements`.
    """
    # monthly table is tiny -> compute safely as pandas
    sums = ddf.groupby("month")["investment_amount"].sum().compute()
    sizes = ddf.groupby("month").size().compute()

    pdf = pd.DataFrame({"total_investment": sums, "announcements": sizes})
    pdf = pdf.rename_axis("month").reset_index()
    if pdf.empty:
        return _from_pandas(pd.DataFrame(columns=["month", "total_investment", "announcements"]))

    # zero-padded YYYY/MM sorts chronologically
    pdf = pdf.sort_values("month").reset_index(drop=True)
    pdf["announcements"] = pdf["announcements"].astype(int)
    return _from_pandas(pdf)


def gold_announcements_by_period(ddf: Any, periods: Sequence[Period]) -> Any:
    """Return announcement counts and investment per period bucket.

    Every configured period appears in the output, in chronological order,
    including periods without announcements (count 0, investment 0).

    Args:
        ddf: Clean Dask DataFrame with a `period` column.
        periods: The periods used when the Clean layer was built.

    Returns:
        Dask DataFrame with columns: `period`, `start`, `end`,
        `announcements`, `total_investment`.
    """
    sizes = ddf.groupby("period").size().compute()
    sums = ddf.groupby("period")["investment_amount"].sum().compute()

    rows = [
        {
            "period": p.label,
            "start": p.start.isoformat(),
            "end": p.end.isoformat(),
            "announcements": int(sizes.get(p.label, 0)),
            "total_investment": float(sums.get(p.label, 0.0)),
        }
        for p in periods
    ]
    return _from_pandas(
        pd.DataFrame(rows, columns=["period", "start", "end", "announcements", "total_investment"])
    )


# =========================================================
# DATA QUALITY
# =========================================================

def gold_missing_report(ddf: Any) -> Any:
    """Report how many values each analysis field is missing.

    Aggregates silently skip missing values, which shrinks their
    denominators; this table makes that visible.

    Returns:
        Dask DataFrame with columns: `field`, `missing`, `total`,
        `missing_share` (0.0 for an empty table).
    """
    fields = [f for f in ANALYSIS_FIELDS if f in ddf.columns]
    missing = ddf[fields].isna().sum().compute()
    total = int(ddf.shape[0].compute())

    pdf = pd.DataFrame(
        {
            "field": fields,
            "missing": [int(missing[f]) for f in fields],
            "total": total,
        }
    )
    pdf["missing_share"] = pdf["missing"] / total if total else 0.0
    return _from_pandas(pdf)


# =========================================================
# HAND-OFF
# =========================================================

def gold_to_mapping(gdf: Any, key: str, value: str) -> dict[Hashable, float | None]:
    """Materialize a Gold table as a plain ``key -> value`` mapping.

    Row order is preserved. NaN values (undefined means) become None.

    Args:
        gdf: Dask or pandas Gold DataFrame.
        key: Column holding the grouping key.
        value: Column holding the aggregate.
    """
    pdf = gdf.compute() if hasattr(gdf, "compute") else gdf
    return {
        row[key]: (None if is_missing(row[value]) else float(row[value]))
        for row in pdf.to_dict(orient="records")
    }
