"""Plotly map builders: state choropleths and a project point map."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Hashable, Mapping

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from invest_pipeline.aggregate.state_lookup import is_state_code

log = logging.getLogger(__name__)

POINT_FIELDS = ("latitude", "longitude", "investment_amount")


def _empty_figure(title: str) -> go.Figure:
    layout = go.Layout(
        title=title,
        annotations=[go.layout.Annotation(text="No data available", showarrow=False)],
    )
    return go.Figure(layout=layout)


def state_choropleth(
    totals: Mapping[Hashable, float | None],
    title: str,
    value_label: str = "Total",
) -> go.Figure:
    """Return a US choropleth of per-state totals.

    Keys that are not two-letter state codes (multi-state sentinels,
    unknowns) and undefined values are left off the map.

    Args:
        totals: Mapping of state code to total.
        title: Figure title.
        value_label: Colour-bar label.
    """
    rows = [
        {"state": k, "value": v}
        for k, v in totals.items()
        if is_state_code(k) and v is not None
    ]
    dropped = len(totals) - len(rows)
    if dropped:
        log.info("Choropleth %r: %d keys are not placeable states", title, dropped)
    if not rows:
        log.warning("Cannot plot %r: no state totals", title)
        return _empty_figure(title)

    pdf = pd.DataFrame(rows)
    fig = px.choropleth(
        pdf,
        locations="state",
        locationmode="USA-states",
        color="value",
        scope="usa",
        title=title,
        labels={"value": value_label},
        color_continuous_scale="Blues",
    )
    fig.update_layout(margin=dict(l=0, r=0, t=50, b=0))
    return fig


def project_map(records: pd.DataFrame, title: str = "Announced projects") -> go.Figure:
    """Return a point map of individual announcements.

    Args:
        records: Clean records whose `latitude`, `longitude` and
            `investment_amount` are all present (see `complete_rows`).
        title: Figure title.
    """
    if records.empty:
        log.warning("Cannot plot %r: no records with coordinates", title)
        return _empty_figure(title)

    pdf = records.copy()
    pdf["marker_size"] = pdf["investment_amount"].clip(lower=0)
    if "industry" in pdf.columns:
        pdf["industry"] = pdf["industry"].fillna("Unknown")
    hover = [c for c in ("state", "jobs_created", "investment_amount", "month") if c in pdf.columns]
    fig = px.scatter_geo(
        pdf,
        lat="latitude",
        lon="longitude",
        size="marker_size",
        color="industry" if "industry" in pdf.columns else None,
        hover_data=hover,
        scope="usa",
        title=title,
        size_max=30,
    )
    fig.update_layout(margin=dict(l=0, r=0, t=50, b=0))
    return fig


def write_figure(fig: go.Figure, path: Path) -> Path:
    """Save `fig` as an interactive HTML file and return its path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.write_html(str(path), include_plotlyjs="cdn")
    log.info("Saved map: %s", path)
    return path
