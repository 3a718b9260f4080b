from __future__ import annotations

import pandas as pd
import streamlit as st
import dask.dataframe as dd

from dotenv import load_dotenv

from invest_pipeline.config import get_settings
from invest_pipeline.ingest.load_raw import load_state_summary, read_announcements
from invest_pipeline.clean.transform import clean_raw_ddf, complete_rows
from invest_pipeline.aggregate.build_gold import (
    gold_announcements_by_period,
    gold_investment_by_industry,
    gold_investment_by_month,
    gold_investment_by_state,
    gold_jobs_by_industry,
    gold_jobs_by_state,
    gold_mean_investment_by_industry,
    gold_missing_report,
    gold_to_mapping,
)
from invest_pipeline.report.charts import bar_chart, monthly_line_chart, period_bar_chart
from invest_pipeline.report.maps import POINT_FIELDS, project_map, state_choropleth

# =====================================================
# Page config
# =====================================================
st.set_page_config(page_title="Private Investment Announcements", layout="wide")
st.title("🏭 Private Investment Announcements")

load_dotenv()
settings = get_settings()

# =====================================================
# Data (computed once per file, cached)
# =====================================================
@st.cache_data
def load_clean(path: str) -> pd.DataFrame:
    """Read and clean the announcements table, returning a pandas frame.

    Args:
        path: Announcements CSV path.

    Returns:
        Clean-layer records as a pandas DataFrame.
    """
    return clean_raw_ddf(read_announcements(path), settings.periods).compute()


@st.cache_data
def load_states(path: str) -> dict:
    """Load an auxiliary state summary table, or an empty mapping if it is absent."""
    try:
        return load_state_summary(path)
    except FileNotFoundError:
        return {}


try:
    clean = load_clean(str(settings.announcements_csv))
except FileNotFoundError as exc:
    st.error(f"{exc}. Set `INVEST_DATA_CSV` in `.env`.")
    st.stop()

ddf = dd.from_pandas(clean, npartitions=1)

# =====================================================
# SECTION 0: EXECUTIVE OVERVIEW
# =====================================================
st.header("📌 Overview")

c1, c2, c3 = st.columns(3)
with c1:
    st.metric("Announcements", f"{len(clean):,}")
with c2:
    st.metric("Investment ($M)", f"{clean['investment_amount'].sum():,.0f}")
with c3:
    st.metric("Jobs", f"{clean['jobs_created'].sum():,.0f}")

with st.expander("Missing values per field"):
    st.caption("Aggregates skip missing values; means are taken over reported values only.")
    st.dataframe(gold_missing_report(ddf).compute(), width="stretch")

st.divider()

# =====================================================
# SECTION 1: INDUSTRY
# =====================================================
st.header("🏢 By Industry")

metric = st.radio("Metric", ["Total investment", "Total jobs", "Average investment"], horizontal=True)
if metric == "Total investment":
    chart = bar_chart(
        gold_to_mapping(gold_investment_by_industry(ddf), "industry", "total_investment"),
        "industry", "total_investment", "Announced investment by industry", "Investment ($M)",
    )
elif metric == "Total jobs":
    chart = bar_chart(
        gold_to_mapping(gold_jobs_by_industry(ddf), "industry", "total_jobs"),
        "industry", "total_jobs", "Announced jobs by industry", "Jobs",
    )
else:
    chart = bar_chart(
        gold_to_mapping(gold_mean_investment_by_industry(ddf), "industry", "mean_investment"),
        "industry", "mean_investment", "Average investment per announcement", "Investment ($M)",
    )
st.altair_chart(chart, width="stretch")

st.divider()

# =====================================================
# SECTION 2: OVER TIME
# =====================================================
st.header("📈 Over Time")

monthly = gold_investment_by_month(ddf).compute()
if monthly.empty:
    st.info("No announcements with a usable date.")
else:
    st.altair_chart(monthly_line_chart(monthly), width="stretch")

st.altair_chart(
    period_bar_chart(gold_announcements_by_period(ddf, settings.periods).compute()),
    width="stretch",
)

st.divider()

# =====================================================
# SECTION 3: MAPS
# =====================================================
st.header("🗺️ By State")

state_investment = load_states(str(settings.state_investment_csv)) or gold_to_mapping(
    gold_investment_by_state(ddf), "state", "total_investment"
)
state_jobs = load_states(str(settings.state_jobs_csv)) or gold_to_mapping(
    gold_jobs_by_state(ddf), "state", "total_jobs"
)

tab_inv, tab_jobs, tab_points = st.tabs(["Investment", "Jobs", "Projects"])
with tab_inv:
    st.plotly_chart(state_choropleth(state_investment, "Announced investment by state", "Investment ($M)"))
with tab_jobs:
    st.plotly_chart(state_choropleth(state_jobs, "Announced jobs by state", "Jobs"))
with tab_points:
    located = complete_rows(ddf, POINT_FIELDS).compute()
    st.caption(f"{len(located):,} of {len(clean):,} announcements have coordinates and an amount.")
    st.plotly_chart(project_map(located))

# =====================================================
# Footer
# =====================================================
st.caption("pandas • Dask • Pydantic • Altair • Plotly • Streamlit")
