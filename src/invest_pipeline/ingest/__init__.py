"""Ingestion helpers.

Reads the announcements table and the auxiliary per-state summary tables
from delimited flat files into the Raw layer.
"""
