"""Raw-layer loading utilities.

The announcements table is read with Dask, every column as text, so that
type coercion happens in one place (the Clean layer). The auxiliary
per-state tables are tiny and read with pandas.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Iterable

import pandas as pd
import dask.dataframe as dd

from invest_pipeline.aggregate.grouping import group_sum
from invest_pipeline.clean.coerce import coerce_numeric
from invest_pipeline.models import StateTotal

log = logging.getLogger(__name__)

COLUMN_ALIASES = {
    "sector": "industry",
    "industry_sector": "industry",
    "investment": "investment_amount",
    "amount": "investment_amount",
    "investment_amount_m": "investment_amount",
    "investment_amount_millions": "investment_amount",
    "investment_millions": "investment_amount",
    "jobs": "jobs_created",
    "new_jobs": "jobs_created",
    "jobs_announced": "jobs_created",
    "date": "announcement_date",
    "date_announced": "announcement_date",
    "announced": "announcement_date",
    "lat": "latitude",
    "lng": "longitude",
    "lon": "longitude",
    "long": "longitude",
}

_NON_ALNUM = re.compile(r"[^0-9a-z]+")


def canonical_name(header: str) -> str:
    """Normalize one header: lower-case, non-alphanumeric runs → ``_``, aliases applied.

    Args:
        header: Raw column header, e.g. ``"Investment Amount ($M)"``.

    Returns:
        Canonical column name, e.g. ``"investment_amount"``.
    """
    name = _NON_ALNUM.sub("_", str(header).strip().lower()).strip("_")
    return COLUMN_ALIASES.get(name, name)


def canonical_columns(columns: Iterable[Any]) -> dict[Any, str]:
    """Return a rename mapping from raw headers to canonical names."""
    return {c: canonical_name(c) for c in columns}


def _require_file(path: Path) -> Path:
    path = Path(path)
    if not path.is_file():
        log.error("Input file not found: %s", path)
        raise FileNotFoundError(f"Input file not found: {path}")
    return path


def read_announcements(path: Path, blocksize: str | int | None = None) -> Any:
    """Read the announcements CSV into a Dask DataFrame of text columns.

    No implicit NA parsing is performed: blank cells stay empty strings and
    markers such as ``N/A`` stay text until the Clean layer coerces them.

    Args:
        path: Path to the delimited announcements table.
        blocksize: Optional Dask block size; ``None`` reads one partition.

    Returns:
        Dask DataFrame with canonical column names.

    Raises:
        FileNotFoundError: if `path` does not exist.
    """
    path = _require_file(path)
    ddf = dd.read_csv(
        str(path),
        dtype=str,
        keep_default_na=False,
        blocksize=blocksize,
    )
    ddf = ddf.rename(columns=canonical_columns(ddf.columns))
    log.info("Read announcements from %s (%d partitions)", path, ddf.npartitions)
    return ddf


def load_state_summary(path: Path, value_column: str | None = None) -> dict[str, float]:
    """Load an auxiliary per-state summary table as ``state -> total``.

    Rows sharing a state are summed; unparseable totals are skipped.

    Args:
        path: CSV with a `state` column and at least one value column.
        value_column: Value column (canonical name); defaults to the first
            column other than `state`.

    Returns:
        Mapping of state label to total.

    Raises:
        FileNotFoundError: if `path` does not exist.
        ValueError: if the table has no `state` or no value column.
    """
    path = _require_file(path)
    pdf = pd.read_csv(path, dtype=str, keep_default_na=False)
    pdf = pdf.rename(columns=canonical_columns(pdf.columns))

    if "state" not in pdf.columns:
        raise ValueError(f"{path} has no state column. Found: {list(pdf.columns)}")
    if value_column is None:
        others = [c for c in pdf.columns if c != "state"]
        if not others:
            raise ValueError(f"{path} has no value column next to state")
        value_column = others[0]
    elif value_column not in pdf.columns:
        raise ValueError(f"{path} has no column {value_column!r}. Found: {list(pdf.columns)}")

    rows: list[StateTotal] = []
    skipped = 0
    for rec in pdf.to_dict(orient="records"):
        state = rec["state"].strip()
        if not state:
            skipped += 1
            continue
        rows.append(StateTotal(state=state, total=coerce_numeric(rec[value_column])))

    totals = group_sum(rows, key_fn=lambda r: r.state, value_fn=lambda r: r.total)
    log.info(
        "Loaded %d state totals from %s (column=%s, skipped=%d)",
        len(totals), path, value_column, skipped,
    )
    return totals
