"""invest_pipeline package.

Contains modules for loading a table of private-investment announcements,
coercing and validating its fields, aggregating it by industry, state,
month and period, and rendering the aggregates as charts and maps.

Architecture:
- Raw → Clean → Gold layers held in memory for a single run
- Dask is used for partition-wise cleaning and grouped aggregation
- Pydantic models validate the Clean layer
- Altair charts and Plotly maps render the Gold layer
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
