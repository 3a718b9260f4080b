from __future__ import annotations

import pandas as pd
import dask.dataframe as dd
import pytest

from invest_pipeline.aggregate.periods import DEFAULT_BOUNDARIES, parse_boundaries
from invest_pipeline.clean.transform import clean_raw_ddf

RAW_COLUMNS = [
    "industry",
    "investment_amount",
    "jobs_created",
    "announcement_date",
    "state",
    "latitude",
    "longitude",
    "address",
]


def raw_ddf(rows: list[dict[str, str]]) -> dd.DataFrame:
    pdf = pd.DataFrame(rows, columns=RAW_COLUMNS).fillna("")
    return dd.from_pandas(pdf, npartitions=1)


@pytest.fixture()
def make_raw():
    return raw_ddf


@pytest.fixture()
def periods():
    return parse_boundaries(DEFAULT_BOUNDARIES)


@pytest.fixture()
def announcements(periods) -> dd.DataFrame:
    rows = [
        {"industry": "EV", "investment_amount": "100", "jobs_created": "400",
         "announcement_date": "11/06/2021", "state": "GA",
         "latitude": "33.7", "longitude": "-84.4", "address": "1 Main St"},
        {"industry": "EV", "investment_amount": "N/A", "jobs_created": "200",
         "announcement_date": "02/14/2022", "state": "GA",
         "latitude": "", "longitude": "", "address": ""},
        {"industry": "Chips", "investment_amount": "50", "jobs_created": "n/a",
         "announcement_date": "03/15/2023", "state": "AZ",
         "latitude": "33.4", "longitude": "-112.1", "address": "2 Fab Rd"},
        {"industry": "Batteries", "investment_amount": "", "jobs_created": "",
         "announcement_date": "", "state": "Multiple",
         "latitude": "", "longitude": "", "address": ""},
    ]
    return clean_raw_ddf(raw_ddf(rows), periods)
