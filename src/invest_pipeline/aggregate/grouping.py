"""Record-level grouping and filtering.

These helpers operate on any iterable of mapping-like records (for example
``DataFrame.to_dict("records")`` output or rows read from an auxiliary
table). Values are read through `coerce_numeric`; missing or unparseable
values are skipped, never counted as zero.
"""

from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable, Mapping, Sequence

import pandas as pd

from invest_pipeline.clean.coerce import coerce_numeric

Record = Mapping[str, Any]
KeyFn = Callable[[Any], Hashable]
ValueFn = Callable[[Any], Any]


def is_missing(value: Any) -> bool:
    """True for None and for scalar NaN / NaT / NA values."""
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def group_sum(records: Iterable[Any], key_fn: KeyFn, value_fn: ValueFn) -> dict[Hashable, float]:
    """Sum `value_fn` over each `key_fn` partition.

    Keys keep first-occurrence order. A partition whose values are all
    missing sums to 0; records with a missing key are skipped.
    """
    totals: dict[Hashable, float] = {}
    for rec in records:
        key = key_fn(rec)
        if is_missing(key):
            continue
        totals.setdefault(key, 0.0)
        value = coerce_numeric(value_fn(rec))
        if value is not None:
            totals[key] += value
    return totals


def group_mean(records: Iterable[Any], key_fn: KeyFn, value_fn: ValueFn) -> dict[Hashable, float | None]:
    """Arithmetic mean of the non-missing `value_fn` values per partition.

    A partition with no usable values maps to None, which callers must
    handle separately from a numeric zero.
    """
    totals: dict[Hashable, float] = {}
    counts: dict[Hashable, int] = {}
    for rec in records:
        key = key_fn(rec)
        if is_missing(key):
            continue
        totals.setdefault(key, 0.0)
        counts.setdefault(key, 0)
        value = coerce_numeric(value_fn(rec))
        if value is not None:
            totals[key] += value
            counts[key] += 1
    return {k: (totals[k] / counts[k] if counts[k] else None) for k in totals}


def group_count(
    records: Iterable[Any],
    key_fn: KeyFn,
    value_fn: ValueFn | None = None,
) -> dict[Hashable, int]:
    """Count records per partition, or usable numeric values when `value_fn` is given."""
    counts: dict[Hashable, int] = {}
    for rec in records:
        key = key_fn(rec)
        if is_missing(key):
            continue
        counts.setdefault(key, 0)
        if value_fn is None or coerce_numeric(value_fn(rec)) is not None:
            counts[key] += 1
    return counts


def filter_complete(records: Iterable[Record], fields: Sequence[str]) -> list[Record]:
    """Keep records whose listed fields are all present, preserving order."""
    return [
        rec for rec in records
        if all(not is_missing(rec.get(f)) for f in fields)
    ]


def sort_by_key(mapping: Mapping[Hashable, Any]) -> dict[Hashable, Any]:
    """Return a copy of `mapping` ordered by key.

    For zero-padded ``YYYY/MM`` keys this is chronological order.
    """
    return {k: mapping[k] for k in sorted(mapping)}
