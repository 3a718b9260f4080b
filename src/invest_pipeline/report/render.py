"""Render every chart and map of the report into one directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Hashable, Mapping, Sequence

from invest_pipeline.aggregate.build_gold import (
    gold_announcements_by_period,
    gold_investment_by_industry,
    gold_investment_by_month,
    gold_investment_by_state,
    gold_jobs_by_industry,
    gold_jobs_by_state,
    gold_mean_investment_by_industry,
    gold_to_mapping,
    gold_top_industries,
)
from invest_pipeline.aggregate.periods import Period
from invest_pipeline.clean.transform import complete_rows
from invest_pipeline.report.charts import bar_chart, monthly_line_chart, period_bar_chart, write_chart
from invest_pipeline.report.maps import POINT_FIELDS, project_map, state_choropleth, write_figure

log = logging.getLogger(__name__)


def render_report(
    ddf: Any,
    out_dir: Path,
    periods: Sequence[Period] = (),
    state_investment: Mapping[Hashable, float | None] | None = None,
    state_jobs: Mapping[Hashable, float | None] | None = None,
    top_n: int = 10,
) -> dict[str, Path]:
    """Render the report's charts and maps as HTML files.

    Args:
        ddf: Clean Dask DataFrame.
        out_dir: Directory receiving one HTML file per artifact.
        periods: Periods used to build the Clean layer; the period chart is
            skipped when empty.
        state_investment: Auxiliary state → investment totals; when None the
            pipeline's own per-state sums are used.
        state_jobs: Auxiliary state → jobs totals; same fallback.
        top_n: Number of industries shown in the top-industries chart.

    Returns:
        Mapping of artifact name to written path.
    """
    out_dir.mkdir(parents=True, exist_ok=True)
    saved: dict[str, Path] = {}

    # -------------------------
    # Industry
    # -------------------------
    saved["investment_by_industry"] = write_chart(
        bar_chart(
            gold_to_mapping(gold_investment_by_industry(ddf), "industry", "total_investment"),
            "industry", "total_investment", "Announced investment by industry", "Investment ($M)",
        ),
        out_dir / "investment_by_industry.html",
    )
    saved["jobs_by_industry"] = write_chart(
        bar_chart(
            gold_to_mapping(gold_jobs_by_industry(ddf), "industry", "total_jobs"),
            "industry", "total_jobs", "Announced jobs by industry", "Jobs",
        ),
        out_dir / "jobs_by_industry.html",
    )
    saved["mean_investment_by_industry"] = write_chart(
        bar_chart(
            gold_to_mapping(gold_mean_investment_by_industry(ddf), "industry", "mean_investment"),
            "industry", "mean_investment", "Average investment per announcement", "Investment ($M)",
        ),
        out_dir / "mean_investment_by_industry.html",
    )
    saved["top_industries"] = write_chart(
        bar_chart(
            gold_to_mapping(gold_top_industries(ddf, top_n), "industry", "total_investment"),
            "industry", "total_investment", f"Top {top_n} industries by investment", "Investment ($M)",
        ),
        out_dir / "top_industries.html",
    )

    # -------------------------
    # Time
    # -------------------------
    saved["investment_by_month"] = write_chart(
        monthly_line_chart(gold_investment_by_month(ddf).compute()),
        out_dir / "investment_by_month.html",
    )
    if periods:
        saved["announcements_by_period"] = write_chart(
            period_bar_chart(gold_announcements_by_period(ddf, periods).compute()),
            out_dir / "announcements_by_period.html",
        )

    # -------------------------
    # Maps
    # -------------------------
    if state_investment is None:
        state_investment = gold_to_mapping(gold_investment_by_state(ddf), "state", "total_investment")
    if state_jobs is None:
        state_jobs = gold_to_mapping(gold_jobs_by_state(ddf), "state", "total_jobs")

    saved["state_investment_map"] = write_figure(
        state_choropleth(state_investment, "Announced investment by state", "Investment ($M)"),
        out_dir / "state_investment_map.html",
    )
    saved["state_jobs_map"] = write_figure(
        state_choropleth(state_jobs, "Announced jobs by state", "Jobs"),
        out_dir / "state_jobs_map.html",
    )
    located = complete_rows(ddf, POINT_FIELDS).compute()
    log.info("Projects with coordinates: %d", len(located))
    saved["project_map"] = write_figure(project_map(located), out_dir / "project_map.html")

    log.info("Report rendered: %d artifacts in %s", len(saved), out_dir)
    return saved
