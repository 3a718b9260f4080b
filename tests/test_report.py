from __future__ import annotations

import altair as alt
import pandas as pd

from invest_pipeline.aggregate.build_gold import gold_investment_by_month
from invest_pipeline.report.charts import bar_chart, mapping_frame, monthly_line_chart
from invest_pipeline.report.maps import project_map, state_choropleth
from invest_pipeline.report.render import render_report


def test_mapping_frame_drops_undefined_values() -> None:
    pdf = mapping_frame({"EV": 100.0, "Solar": None}, "industry", "mean_investment")
    assert list(pdf["industry"]) == ["EV"]


def test_bar_chart_builds_bar_mark() -> None:
    chart = bar_chart({"EV": 100.0, "Chips": 50.0}, "industry", "total_investment", "Investment")
    assert isinstance(chart, alt.Chart)
    chart_dict = chart.to_dict()
    assert chart_dict["mark"]["type"] == "bar"


def test_monthly_line_chart(announcements) -> None:
    chart = monthly_line_chart(gold_investment_by_month(announcements).compute())
    assert chart.to_dict()["encoding"]["x"]["field"] == "month_start"


def test_choropleth_drops_non_state_keys() -> None:
    fig = state_choropleth({"GA": 100.0, "Multiple": 30.0, "AZ": None}, "Investment")
    assert list(fig.data[0].locations) == ["GA"]


def test_choropleth_without_placeable_states_is_empty() -> None:
    fig = state_choropleth({"Multiple": 30.0}, "Investment")
    assert len(fig.data) == 0


def test_project_map_of_empty_frame() -> None:
    fig = project_map(pd.DataFrame(columns=["latitude", "longitude", "investment_amount"]))
    assert len(fig.data) == 0


def test_render_report_writes_every_artifact(announcements, periods, tmp_path) -> None:
    saved = render_report(announcements, tmp_path / "report", periods=periods, top_n=2)
    assert set(saved) == {
        "investment_by_industry",
        "jobs_by_industry",
        "mean_investment_by_industry",
        "top_industries",
        "investment_by_month",
        "announcements_by_period",
        "state_investment_map",
        "state_jobs_map",
        "project_map",
    }
    for path in saved.values():
        assert path.exists()
        assert path.stat().st_size > 0


def test_render_report_uses_auxiliary_state_tables(announcements, tmp_path) -> None:
    saved = render_report(
        announcements,
        tmp_path,
        state_investment={"TX": 10.0},
        state_jobs={"TX": 5.0},
    )
    assert "announcements_by_period" not in saved
    assert '"TX"' in saved["state_investment_map"].read_text(encoding="utf-8")
