from __future__ import annotations

import pandas as pd

from invest_pipeline.aggregate.build_gold import (
    gold_announcements_by_period,
    gold_investment_by_industry,
    gold_investment_by_month,
    gold_investment_by_state,
    gold_jobs_by_industry,
    gold_mean_investment_by_industry,
    gold_missing_report,
    gold_to_mapping,
    gold_top_industries,
)
from invest_pipeline.aggregate.grouping import group_mean, group_sum


def test_investment_by_industry_skips_unparseable_amounts(announcements) -> None:
    totals = gold_to_mapping(gold_investment_by_industry(announcements), "industry", "total_investment")
    assert totals == {"EV": 100.0, "Chips": 50.0, "Batteries": 0.0}


def test_mean_investment_is_over_reported_values_only(announcements) -> None:
    means = gold_to_mapping(gold_mean_investment_by_industry(announcements), "industry", "mean_investment")
    assert means["EV"] == 100.0
    assert means["Chips"] == 50.0
    assert means["Batteries"] is None


def test_reported_counts(announcements) -> None:
    g = gold_mean_investment_by_industry(announcements).compute().set_index("industry")
    assert int(g.loc["EV", "n_reported"]) == 1
    assert int(g.loc["Batteries", "n_reported"]) == 0


def test_frame_aggregates_agree_with_record_level_grouping(announcements) -> None:
    records = announcements.compute().to_dict(orient="records")

    def key(r):
        return r["industry"]

    def value(r):
        return r["investment_amount"]

    frame_sum = gold_to_mapping(gold_investment_by_industry(announcements), "industry", "total_investment")
    frame_mean = gold_to_mapping(gold_mean_investment_by_industry(announcements), "industry", "mean_investment")
    assert frame_sum == group_sum(records, key, value)
    assert frame_mean == group_mean(records, key, value)


def test_jobs_by_industry(announcements) -> None:
    jobs = gold_to_mapping(gold_jobs_by_industry(announcements), "industry", "total_jobs")
    assert jobs == {"EV": 600.0, "Chips": 0.0, "Batteries": 0.0}


def test_state_sentinel_is_kept_as_its_own_key(announcements) -> None:
    totals = gold_to_mapping(gold_investment_by_state(announcements), "state", "total_investment")
    assert totals == {"GA": 100.0, "AZ": 50.0, "Multiple": 0.0}


def test_monthly_series_is_chronological_and_excludes_missing_dates(announcements) -> None:
    monthly = gold_investment_by_month(announcements).compute()
    assert list(monthly["month"]) == ["2021/11", "2022/02", "2023/03"]
    assert list(monthly["total_investment"]) == [100.0, 0.0, 50.0]
    assert list(monthly["announcements"]) == [1, 1, 1]


def test_period_table_lists_every_period_in_order(announcements, periods) -> None:
    g = gold_announcements_by_period(announcements, periods).compute()
    assert list(g["period"]) == ["early", "mid", "late"]
    assert list(g["announcements"]) == [1, 1, 1]
    assert list(g["total_investment"]) == [100.0, 0.0, 50.0]
    assert g.loc[0, "start"] == "2021-01-01"


def test_top_industries(announcements) -> None:
    top = gold_top_industries(announcements, 1).compute()
    assert list(top["industry"]) == ["EV"]


def test_missing_report_counts_missing_values(announcements) -> None:
    report = gold_missing_report(announcements).compute().set_index("field")
    assert int(report.loc["investment_amount", "missing"]) == 2
    assert int(report.loc["jobs_created", "missing"]) == 2
    assert int(report.loc["announcement_date", "missing"]) == 1
    assert int(report.loc["latitude", "missing"]) == 2
    assert int(report.loc["industry", "missing"]) == 0
    assert report.loc["investment_amount", "missing_share"] == 0.5
    assert (report["total"] == 4).all()


def test_gold_to_mapping_accepts_pandas_frames() -> None:
    pdf = pd.DataFrame({"k": ["a", "b"], "v": [1.5, float("nan")]})
    assert gold_to_mapping(pdf, "k", "v") == {"a": 1.5, "b": None}
