"""Cleaning utilities for the pipeline.

Provides total coercion helpers for numeric and date fields, the
partition-wise Dask transform that builds the Clean layer, and Pydantic
validation of cleaned records.
"""
